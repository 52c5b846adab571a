import string

import pytest

from pushswap.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_integer_literal,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("text", ["0", "42", "-7", "+15", "007", "-2147483648"])
def test_integer_literals_accepted(text):
    assert is_integer_literal(text) is True


@pytest.mark.parametrize("text", ["", "+", "-", "1a", "--1", " 1", "1 ", "3.5", "+-2"])
def test_non_integer_literals_rejected(text):
    assert is_integer_literal(text) is False


@pytest.mark.parametrize("code", range(128))
def test_classification_matches_ascii_tables(code):
    ch = chr(code)
    assert is_alpha(ch) == (ch in string.ascii_letters)
    assert is_digit(ch) == (ch in string.digits)
    assert is_alnum(ch) == (ch in string.ascii_letters + string.digits)
    assert is_print(ch) == ch.isprintable()
    assert is_ascii(code) is True


def test_ints_and_chars_agree():
    for ch in "aZ5 ~\n":
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_digit(ch) == is_digit(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


def test_is_ascii_bounds():
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_non_ascii_letters_are_not_alpha():
    assert not is_alpha("é")
    assert not is_digit("٣")


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_case_round_trip(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_matches_str_lower(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(ch) == ch


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_non_letters_unchanged(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_int_codes_return_ints():
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(ord("q")) == ord("Q")


def test_to_upper_looks_only_at_low_byte():
    assert to_upper(ord("a") + 256) == ord("A") + 256
    assert to_lower(ord("A") + 256) == ord("A") + 256