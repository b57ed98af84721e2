"""
Validação de CPF (11 dígitos, pesos 10..2 e 11..2).
Retorna Valid ou Invalid com a primeira falha encontrada.
"""
from typing import Any

from veritas.utils.document_utils import DocumentUtils
from veritas.utils.outcome import VALID, ErrorKind, Invalid, ValidationOutcome

CPF_LENGTH = 11


class CPFUtils:
    FIRST_WEIGHTS = (10, 9, 8, 7, 6, 5, 4, 3, 2)
    SECOND_WEIGHTS = (11, 10, 9, 8, 7, 6, 5, 4, 3, 2)

    @staticmethod
    def normalize_cpf(cpf: str) -> str:
        """
        Mantém apenas os dígitos 0-9; pontuação e letras são descartadas.
        Parâmetros:
            cpf (str): CPF formatado ou não
        Retorno:
            str: sequência de dígitos, possivelmente vazia
        Exemplo: '111.444.777-35' -> '11144477735'
        """
        return DocumentUtils.normalize_digits(cpf)

    @staticmethod
    def validate_cpf(cpf: Any) -> ValidationOutcome:
        """
        Valida CPF pelo algoritmo dos dígitos verificadores.
        Apenas a primeira falha, na ordem tipo, tamanho, sequência e dígitos, é reportada.
        Parâmetros:
            cpf (Any): valor bruto informado pelo chamador
        Retorno:
            ValidationOutcome: Valid ou Invalid com a mensagem do erro
        """
        if not isinstance(cpf, str):
            return Invalid(ErrorKind.TYPE_MISMATCH, "CPF must be a string")

        digits = CPFUtils.normalize_cpf(cpf)
        if len(digits) != CPF_LENGTH:
            return Invalid(ErrorKind.LENGTH_MISMATCH, f"CPF must have exactly {CPF_LENGTH} digits")

        # Sequências repetidas podem passar no cálculo (ex: 00000000000), por isso vêm antes
        if DocumentUtils.is_repeated_sequence(digits):
            return Invalid(ErrorKind.DEGENERATE_SEQUENCE, "CPF cannot be a sequence of identical digits")

        expected = DocumentUtils.check_digits(digits[:9], CPFUtils.FIRST_WEIGHTS, CPFUtils.SECOND_WEIGHTS)
        if digits[9:] != expected:
            return Invalid(ErrorKind.CHECKSUM_MISMATCH, "invalid CPF check digits")
        return VALID

    @staticmethod
    def is_valid_cpf(cpf: Any) -> bool:
        """
        Retorno:
            bool: True se válido, False caso contrário
        """
        return bool(CPFUtils.validate_cpf(cpf))
