"""
Esqueleto comum dos documentos brasileiros (CPF e CNPJ).
Normalização, checagem estrutural e cálculo de dígitos verificadores módulo 11.
"""
import re
from typing import Sequence


class DocumentUtils:
    @staticmethod
    def normalize_digits(value: str) -> str:
        """
        Remove todo caractere que não seja dígito decimal.
        Letras são descartadas, não rejeitadas.
        Exemplo: '11.222.333/0001-81' -> '11222333000181'
        """
        return re.sub(r'[^0-9]', '', value)

    @staticmethod
    def is_repeated_sequence(digits: str) -> bool:
        """
        Indica se todos os dígitos são iguais ao primeiro (ex: '00000000000').
        Deve ser chamado apenas depois da checagem de tamanho.
        """
        return digits == digits[0] * len(digits)

    @staticmethod
    def check_digit(base: str, weights: Sequence[int]) -> int:
        """
        Calcula um dígito verificador pela soma ponderada módulo 11.
        Parâmetros:
            base (str): dígitos usados no cálculo, mesmo tamanho de weights
            weights (Sequence[int]): pesos aplicados posição a posição
        Retorno:
            int: 0 se o resto for menor que 2, senão 11 - resto
        """
        total = sum(int(digit) * weight for digit, weight in zip(base, weights))
        remainder = total % 11
        return 0 if remainder < 2 else 11 - remainder

    @staticmethod
    def check_digits(base: str, first_weights: Sequence[int], second_weights: Sequence[int]) -> str:
        """
        Calcula o par de dígitos verificadores.
        O segundo dígito usa a base acrescida do primeiro.
        Retorno:
            str: os dois dígitos, na ordem
        """
        first = DocumentUtils.check_digit(base, first_weights)
        second = DocumentUtils.check_digit(f"{base}{first}", second_weights)
        return f"{first}{second}"
