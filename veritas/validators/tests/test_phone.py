import pytest

from veritas.utils.outcome import ErrorKind, Invalid, Valid
from veritas.validators.phone import clean_phone, validate_phone


@pytest.mark.parametrize("phone", [
    "+55 (41) 99504-8710",
    "(41) 99504-8710",
    "+55 41.99504.8710",
    "+5541995048710",
    " +55 41 99504-8710 ",
    "5541995048710",
    "+55 ((41)) 99504-8710",
])
def test_validate_phone_mobile(phone):
    assert validate_phone(phone) == Valid()


@pytest.mark.parametrize("phone", ["+55 (41) 3346-4468", "(41) 3346-4468", "+554133464468", "4133464468", "554133464468"])
def test_validate_phone_landline(phone):
    assert validate_phone(phone) == Valid()


@pytest.mark.parametrize("phone", ["+55 41 123", "+55 41 123456789012", "+56 41 99504-8710", "123"])
def test_validate_phone_invalid_format(phone):
    assert validate_phone(phone) == Invalid(ErrorKind.INVALID_FORMAT, "invalid Brazilian phone number format")


@pytest.mark.parametrize("phone", ["+55 00 99504-8710", "+55 10 99504-8710", "(20) 3346-4468"])
def test_validate_phone_invalid_ddd(phone):
    assert validate_phone(phone) == Invalid(ErrorKind.INVALID_FORMAT, "invalid area code (DDD)")


def test_validate_phone_mobile_requires_nine():
    outcome = validate_phone("(41) 89504-8710")
    assert outcome == Invalid(ErrorKind.INVALID_FORMAT, "mobile number must start with 9 after area code")


@pytest.mark.parametrize("phone", ["+55 41 99504-871a", "(41) 3346-446x"])
def test_validate_phone_invalid_digits(phone):
    assert validate_phone(phone) == Invalid(ErrorKind.INVALID_FORMAT, "invalid phone number digits")


@pytest.mark.parametrize("phone", ["", "   ", "( ) -"])
def test_validate_phone_empty(phone):
    assert validate_phone(phone) == Invalid(ErrorKind.EMPTY, "phone cannot be empty")


def test_validate_phone_type_mismatch():
    assert validate_phone(41995048710) == Invalid(ErrorKind.TYPE_MISMATCH, "phone must be a string")


def test_clean_phone_keeps_plus():
    assert clean_phone("+55 (41) 99504-8710") == "+5541995048710"
