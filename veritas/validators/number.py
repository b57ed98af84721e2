"""
Validadores numéricos. Aceitam int, float ou texto numérico ('12.5', ' 1e3 ').
bool não é tratado como número.
"""
import math
from typing import Any, Union

from veritas.utils.outcome import VALID, ErrorKind, Invalid, ValidationOutcome
from veritas.utils.string_utils import is_empty

Number = Union[int, float]

# Limite do teste de primalidade por divisão (no máximo 5 * 10**5 divisores ímpares)
MAX_PRIME_CANDIDATE = 10**12


def parse_number(number: Any) -> Union[float, Invalid]:
    """
    Converte o valor para float.
    Retorno:
        float: valor convertido, ou Invalid se o valor não for numérico
    """
    if isinstance(number, bool):
        return Invalid(ErrorKind.TYPE_MISMATCH, "unsupported number type: bool")
    if isinstance(number, (int, float)):
        try:
            return float(number)
        except OverflowError:
            return Invalid(ErrorKind.OUT_OF_RANGE, "number is too large")
    if isinstance(number, str):
        text = number.strip()
        if is_empty(text):
            return Invalid(ErrorKind.EMPTY, "number cannot be empty")
        try:
            return float(text)
        except ValueError:
            return Invalid(ErrorKind.INVALID_FORMAT, f"invalid number format: {text!r}")
    return Invalid(ErrorKind.TYPE_MISMATCH, f"unsupported number type: {type(number).__name__}")


def is_number(number: Any) -> ValidationOutcome:
    value = parse_number(number)
    if isinstance(value, Invalid):
        return value
    return VALID


def is_positive(number: Any) -> ValidationOutcome:
    value = parse_number(number)
    if isinstance(value, Invalid):
        return value
    if value <= 0:
        return Invalid(ErrorKind.OUT_OF_RANGE, "number must be positive")
    return VALID


def is_negative(number: Any) -> ValidationOutcome:
    value = parse_number(number)
    if isinstance(value, Invalid):
        return value
    if value >= 0:
        return Invalid(ErrorKind.OUT_OF_RANGE, "number must be negative")
    return VALID


def is_even(number: Any) -> ValidationOutcome:
    """Considera apenas a parte inteira (3.8 -> 3)."""
    value = parse_number(number)
    if isinstance(value, Invalid):
        return value
    if not math.isfinite(value) or int(value) % 2 != 0:
        return Invalid(ErrorKind.INVALID_FORMAT, "number must be even")
    return VALID


def bigger_than(number: Any, than: Number) -> ValidationOutcome:
    value = parse_number(number)
    if isinstance(value, Invalid):
        return value
    if value <= than:
        return Invalid(ErrorKind.OUT_OF_RANGE, f"number must be bigger than {than}")
    return VALID


def smaller_than(number: Any, than: Number) -> ValidationOutcome:
    value = parse_number(number)
    if isinstance(value, Invalid):
        return value
    if value >= than:
        return Invalid(ErrorKind.OUT_OF_RANGE, f"number must be smaller than {than}")
    return VALID


def between(number: Any, minimum: Number, maximum: Number) -> ValidationOutcome:
    """Intervalo fechado: os limites são aceitos."""
    value = parse_number(number)
    if isinstance(value, Invalid):
        return value
    if value < minimum or value > maximum:
        return Invalid(ErrorKind.OUT_OF_RANGE, f"number must be between {minimum} and {maximum}")
    return VALID


def is_prime(number: Any) -> ValidationOutcome:
    value = parse_number(number)
    if isinstance(value, Invalid):
        return value
    if not math.isfinite(value) or value != int(value):
        return Invalid(ErrorKind.INVALID_FORMAT, "prime number must be an integer")

    n = int(value)
    if n < 2:
        return Invalid(ErrorKind.OUT_OF_RANGE, "number must be at least 2 to be prime")
    if n > MAX_PRIME_CANDIDATE:
        return Invalid(ErrorKind.OUT_OF_RANGE, f"number must be at most {MAX_PRIME_CANDIDATE} to check primality")
    if n % 2 == 0:
        if n == 2:
            return VALID
        return Invalid(ErrorKind.INVALID_FORMAT, "number is not prime")
    for i in range(3, math.isqrt(n) + 1, 2):
        if n % i == 0:
            return Invalid(ErrorKind.INVALID_FORMAT, "number is not prime")
    return VALID
