import string

import pytest

from fractol.libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-1, 300)


@pytest.mark.parametrize("code", CODES)
def test_is_alpha_matches_ascii_letters(code):
    expected = 0 <= code < 128 and chr(code) in string.ascii_letters
    assert is_alpha(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_is_digit_matches_ascii_digits(code):
    expected = 0 <= code < 128 and chr(code) in string.digits
    assert is_digit(code) == expected


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_union(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", CODES)
def test_is_ascii_range(code):
    assert is_ascii(code) == (0 <= code and code <= 127)


@pytest.mark.parametrize("code", CODES)
def test_is_print_matches_printable_without_control_whitespace(code):
    expected = 0 <= code < 128 and chr(code).isprintable()
    assert is_print(code) == expected


def test_string_and_int_agree():
    for ch in string.printable:
        assert is_alpha(ch) == is_alpha(ord(ch))
        assert is_digit(ch) == is_digit(ord(ch))
        assert is_print(ch) == is_print(ord(ch))


@pytest.mark.parametrize("ch", list(string.ascii_lowercase))
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_upper(ord(ch)) == ord(ch.upper())
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", list(string.ascii_uppercase))
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_lower(ord(ch)) == ord(ch.lower())
    assert to_upper(to_lower(ch)) == ch


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " \t\n") + ["é"])
def test_case_conversion_leaves_other_characters(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_conversion_is_idempotent():
    for ch in string.printable:
        assert to_upper(to_upper(ch)) == to_upper(ch)
        assert to_lower(to_lower(ch)) == to_lower(ch)


def test_multi_character_string_rejected():
    with pytest.raises(TypeError):
        is_alpha("ab")