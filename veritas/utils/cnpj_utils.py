"""
Módulo de validação de CNPJ conforme a Receita Federal do Brasil.
"""
from typing import Any

from veritas.utils.document_utils import DocumentUtils
from veritas.utils.outcome import VALID, ErrorKind, Invalid, ValidationOutcome

CNPJ_LENGTH = 14


class CNPJUtils:
    FIRST_WEIGHTS = (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)
    SECOND_WEIGHTS = (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)

    @staticmethod
    def normalize_cnpj(cnpj: str) -> str:
        """
        Remove caracteres não numéricos do CNPJ.
        Exemplo: '11.222.333/0001-81' -> '11222333000181'
        """
        return DocumentUtils.normalize_digits(cnpj)

    @staticmethod
    def validate_cnpj(cnpj: Any) -> ValidationOutcome:
        """
        Valida CNPJ usando o algoritmo da Receita Federal.

        Verifica, nesta ordem:
        - Tipo (apenas str)
        - Formato básico (14 dígitos após a limpeza)
        - Rejeita CNPJs com todos os dígitos iguais
        - Dígitos verificadores

        Parâmetros:
            cnpj (Any): valor bruto informado pelo chamador
        Retorno:
            ValidationOutcome: Valid ou Invalid com a mensagem do erro
        """
        if not isinstance(cnpj, str):
            return Invalid(ErrorKind.TYPE_MISMATCH, "CNPJ must be a string")

        digits = CNPJUtils.normalize_cnpj(cnpj)
        if len(digits) != CNPJ_LENGTH:
            return Invalid(ErrorKind.LENGTH_MISMATCH, f"CNPJ must have exactly {CNPJ_LENGTH} digits")

        if DocumentUtils.is_repeated_sequence(digits):
            return Invalid(ErrorKind.DEGENERATE_SEQUENCE, "CNPJ cannot be a sequence of identical digits")

        expected = DocumentUtils.check_digits(digits[:12], CNPJUtils.FIRST_WEIGHTS, CNPJUtils.SECOND_WEIGHTS)
        if digits[12:] != expected:
            return Invalid(ErrorKind.CHECKSUM_MISMATCH, "invalid CNPJ check digits")
        return VALID

    @staticmethod
    def is_valid_cnpj(cnpj: Any) -> bool:
        return bool(CNPJUtils.validate_cnpj(cnpj))
