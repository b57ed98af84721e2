from veritas.utils.cnpj_utils import CNPJUtils
from veritas.utils.cpf_utils import CPFUtils
from veritas.utils.document_utils import DocumentUtils


def test_normalize_digits_discards_letters_and_punctuation():
    assert DocumentUtils.normalize_digits("1a2.3/4-5 (6)") == "123456"
    assert DocumentUtils.normalize_digits("") == ""


def test_normalize_digits_ignores_non_ascii_digits():
    assert DocumentUtils.normalize_digits("١٢٣45") == "45"


def test_is_repeated_sequence_matches_all_equal_to_first():
    for digit in "0123456789":
        for size in (1, 11, 14):
            assert DocumentUtils.is_repeated_sequence(digit * size)
    assert not DocumentUtils.is_repeated_sequence("11111111112")
    assert not DocumentUtils.is_repeated_sequence("21111111111")
    assert not DocumentUtils.is_repeated_sequence("11111211111")


def test_check_digit_remainder_rule():
    # soma 162 -> resto 8 -> 11 - 8 = 3
    assert DocumentUtils.check_digit("111444777", CPFUtils.FIRST_WEIGHTS) == 3
    # soma 0 -> resto 0 -> 0
    assert DocumentUtils.check_digit("000000000", CPFUtils.FIRST_WEIGHTS) == 0


def test_check_digits_pairs():
    assert DocumentUtils.check_digits("111444777", CPFUtils.FIRST_WEIGHTS, CPFUtils.SECOND_WEIGHTS) == "35"
    assert DocumentUtils.check_digits("123456789", CPFUtils.FIRST_WEIGHTS, CPFUtils.SECOND_WEIGHTS) == "09"
    assert DocumentUtils.check_digits("112223330001", CNPJUtils.FIRST_WEIGHTS, CNPJUtils.SECOND_WEIGHTS) == "81"
    assert DocumentUtils.check_digits("123456780001", CNPJUtils.FIRST_WEIGHTS, CNPJUtils.SECOND_WEIGHTS) == "95"


def test_check_digits_does_not_mutate_base():
    base = "111444777"
    DocumentUtils.check_digits(base, CPFUtils.FIRST_WEIGHTS, CPFUtils.SECOND_WEIGHTS)
    assert base == "111444777"
