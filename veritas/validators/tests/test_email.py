import pytest

from veritas.utils.outcome import ErrorKind, Invalid, Valid
from veritas.validators.email import validate_email


@pytest.mark.parametrize("email", ["user@example.com", "  USER.Name+tag@Sub.Example.COM.br  ", "a_b%c-d@host-1.io"])
def test_validate_email_valid(email):
    assert validate_email(email) == Valid()


@pytest.mark.parametrize("email", ["invalid-email", "user@", "@example.com", "user@example", "user@example.c", "us er@example.com"])
def test_validate_email_invalid_format(email):
    assert validate_email(email) == Invalid(ErrorKind.INVALID_FORMAT, "invalid email format")


@pytest.mark.parametrize("email", ["", "    "])
def test_validate_email_empty(email):
    assert validate_email(email) == Invalid(ErrorKind.EMPTY, "email cannot be empty")


@pytest.mark.parametrize("value", [123, None, ["user@example.com"]])
def test_validate_email_type_mismatch(value):
    assert validate_email(value) == Invalid(ErrorKind.TYPE_MISMATCH, "email must be a string")
