import pytest

from library_system.utils.validators import ChoiceValidator, NumberValidator, TextValidator

@pytest.mark.parametrize("raw,expected", [
    ("42", 42),
    (" 7 ", 7),
    ("-3", -3),
    ("+5", 5),
    ("0", 0),
])
def test_parse_int_accepts_integers(raw, expected):
    assert NumberValidator.parse_int(raw) == expected

@pytest.mark.parametrize("raw", [None, "", "   ", "abc", "1.5", "1_000", "-", "12a", "٣"])
def test_parse_int_rejects_non_integers(raw):
    assert NumberValidator.parse_int(raw) is None

def test_text_validator():
    assert TextValidator.validate_name("Dune")
    assert not TextValidator.validate_name("")
    assert not TextValidator.validate_name("  \t")
    assert not TextValidator.validate_name(None)
    assert TextValidator.validate_prefix("d")
    assert not TextValidator.validate_prefix(" ")

def test_sort_choice():
    assert ChoiceValidator.parse_sort_choice("1") is True
    assert ChoiceValidator.parse_sort_choice(" 2 ") is False
    assert ChoiceValidator.parse_sort_choice("3") is None
    assert ChoiceValidator.parse_sort_choice("") is None
