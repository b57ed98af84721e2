from typing import Any

from veritas.utils.outcome import VALID, ErrorKind, Invalid, ValidationOutcome


def validate_string_length(value: Any, min_length: int, max_length: int) -> ValidationOutcome:
    """
    Valida o tamanho de um texto, contado em caracteres (não em bytes).
    Os limites são inclusivos.
    """
    if not isinstance(value, str):
        return Invalid(ErrorKind.TYPE_MISMATCH, "value must be a string")

    length = len(value)
    if length < min_length:
        return Invalid(ErrorKind.TOO_SHORT, f"string must be at least {min_length} characters long")
    if length > max_length:
        return Invalid(ErrorKind.TOO_LONG, f"string must be at most {max_length} characters long")
    return VALID
