from typing import Any

from veritas.utils.outcome import VALID, ErrorKind, Invalid, ValidationOutcome
from veritas.utils.string_utils import clean_string, is_empty, match_regex

EMAIL_PATTERN = r'^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$'


def validate_email(email: Any) -> ValidationOutcome:
    """
    Valida o formato de um endereço de email (espaços nas pontas são ignorados).
    """
    if not isinstance(email, str):
        return Invalid(ErrorKind.TYPE_MISMATCH, "email must be a string")

    email = clean_string(email, to_lower=True)
    if is_empty(email):
        return Invalid(ErrorKind.EMPTY, "email cannot be empty")

    if not match_regex(email, EMAIL_PATTERN):
        return Invalid(ErrorKind.INVALID_FORMAT, "invalid email format")
    return VALID
