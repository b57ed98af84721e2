import pytest

from veritas.utils.outcome import ErrorKind, Invalid, Valid
from veritas.validators.strings import validate_string_length


@pytest.mark.parametrize("value", ["abc", "abcdefghij", "çãõéü", "日本語"])
def test_validate_string_length_within_bounds(value):
    assert validate_string_length(value, 3, 10) == Valid()


def test_validate_string_length_counts_characters_not_bytes():
    assert validate_string_length("ção", 3, 3) == Valid()


def test_validate_string_length_too_short():
    assert validate_string_length("ab", 3, 10) == Invalid(ErrorKind.TOO_SHORT, "string must be at least 3 characters long")
    assert validate_string_length("", 1, 10).kind == ErrorKind.TOO_SHORT


def test_validate_string_length_too_long():
    assert validate_string_length("a" * 11, 3, 10) == Invalid(ErrorKind.TOO_LONG, "string must be at most 10 characters long")


@pytest.mark.parametrize("value", [123, None, ["abc"]])
def test_validate_string_length_type_mismatch(value):
    assert validate_string_length(value, 0, 10) == Invalid(ErrorKind.TYPE_MISMATCH, "value must be a string")
