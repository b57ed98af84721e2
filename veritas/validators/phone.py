"""
Validação de telefones brasileiros, fixos e celulares, com ou sem código do país (+55).
"""
import re
from typing import Any

from veritas.utils.outcome import VALID, ErrorKind, Invalid, ValidationOutcome
from veritas.utils.string_utils import is_empty

COUNTRY_CODE = "+55"

# DDDs válidos no Brasil
VALID_DDDS = frozenset([
    "11", "12", "13", "14", "15", "16", "17", "18", "19",  # São Paulo
    "21", "22", "24",  # Rio de Janeiro
    "27", "28",  # Espírito Santo
    "31", "32", "33", "34", "35", "37", "38",  # Minas Gerais
    "41", "42", "43", "44", "45", "46",  # Paraná
    "47", "48", "49",  # Santa Catarina
    "51", "53", "54", "55",  # Rio Grande do Sul
    "61",  # Distrito Federal
    "62", "64",  # Goiás
    "63",  # Tocantins
    "65", "66",  # Mato Grosso
    "67",  # Mato Grosso do Sul
    "68",  # Acre
    "69",  # Rondônia
    "71", "73", "74", "75", "77",  # Bahia
    "79",  # Sergipe
    "81", "87",  # Pernambuco
    "82",  # Alagoas
    "83",  # Paraíba
    "84",  # Rio Grande do Norte
    "85", "88",  # Ceará
    "86", "89",  # Piauí
    "91", "93", "94",  # Pará
    "92", "97",  # Amazonas
    "95",  # Roraima
    "96",  # Amapá
    "98", "99",  # Maranhão
])


def clean_phone(phone: str) -> str:
    """Remove espaços, pontos, hífens e parênteses. O '+' é mantido."""
    return re.sub(r'[\s.\-()]', '', phone)


def validate_phone(phone: Any) -> ValidationOutcome:
    """
    Valida um telefone brasileiro.
    Formatos aceitos após a limpeza:
        +55 + DDD + 9 + 8 dígitos (celular, 14 caracteres com o '+')
        +55 + DDD + 8 dígitos (fixo)
        55 + DDD + ... (mesmos formatos, sem o '+')
        DDD + 9 + 8 dígitos / DDD + 8 dígitos (sem código do país)
    """
    if not isinstance(phone, str):
        return Invalid(ErrorKind.TYPE_MISMATCH, "phone must be a string")

    phone = clean_phone(phone)
    if is_empty(phone):
        return Invalid(ErrorKind.EMPTY, "phone cannot be empty")

    if len(phone) == 14 and phone.startswith(COUNTRY_CODE):
        return _validate_mobile(phone)
    if len(phone) == 13 and phone.startswith(COUNTRY_CODE):
        return _validate_landline(phone)
    # Código do país sem o '+'
    if len(phone) == 13 and phone.startswith("55"):
        return _validate_mobile("+" + phone)
    if len(phone) == 12 and phone.startswith("55"):
        return _validate_landline("+" + phone)
    if len(phone) == 11:
        return _validate_mobile(COUNTRY_CODE + phone)
    if len(phone) == 10:
        return _validate_landline(COUNTRY_CODE + phone)
    return Invalid(ErrorKind.INVALID_FORMAT, "invalid Brazilian phone number format")


def _validate_mobile(phone: str) -> ValidationOutcome:
    # Ex: +5541995048710
    if phone[3:5] not in VALID_DDDS:
        return Invalid(ErrorKind.INVALID_FORMAT, "invalid area code (DDD)")
    if phone[5] != "9":
        return Invalid(ErrorKind.INVALID_FORMAT, "mobile number must start with 9 after area code")
    if not _is_digits(phone[6:]):
        return Invalid(ErrorKind.INVALID_FORMAT, "invalid phone number digits")
    return VALID


def _validate_landline(phone: str) -> ValidationOutcome:
    # Ex: +554133464468
    if phone[3:5] not in VALID_DDDS:
        return Invalid(ErrorKind.INVALID_FORMAT, "invalid area code (DDD)")
    if not _is_digits(phone[5:]):
        return Invalid(ErrorKind.INVALID_FORMAT, "invalid phone number digits")
    return VALID


def _is_digits(value: str) -> bool:
    return re.fullmatch(r'[0-9]+', value) is not None
