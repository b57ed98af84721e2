"""
Resultado de uma validação: Valid ou Invalid(kind, message).
Todos os validadores retornam um destes dois tipos, nunca None.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union


class ErrorKind(str, Enum):
    TYPE_MISMATCH = "type_mismatch"
    LENGTH_MISMATCH = "length_mismatch"
    DEGENERATE_SEQUENCE = "degenerate_sequence"
    CHECKSUM_MISMATCH = "checksum_mismatch"
    EMPTY = "empty"
    INVALID_FORMAT = "invalid_format"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    OUT_OF_RANGE = "out_of_range"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class Valid:
    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    kind: ErrorKind
    message: str

    def __bool__(self) -> bool:
        return False


ValidationOutcome = Union[Valid, Invalid]

VALID = Valid()
