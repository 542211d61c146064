import string

import pytest

from cubkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_letters_are_alpha_and_alnum(c):
    assert is_alpha(c) is True
    assert is_alnum(c) is True
    assert is_digit(c) is False


@pytest.mark.parametrize("c", list(string.digits))
def test_digits(c):
    assert is_digit(c) is True
    assert is_alnum(c) is True
    assert is_alpha(c) is False


@pytest.mark.parametrize("c", ["@", "[", "`", "{", "/", ":", " "])
def test_boundary_symbols_are_not_alnum(c):
    assert is_alnum(c) is False


def test_int_codes_match_strings():
    for code in range(256):
        assert is_alpha(code) == is_alpha(chr(code))
        assert is_digit(code) == is_digit(chr(code))


def test_is_ascii_range():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False


def test_is_print_range():
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(31) is False
    assert is_print(127) is False
    assert all(is_print(c) == c.isprintable() for c in map(chr, range(128)))


def test_case_conversion_matches_str_methods():
    for c in string.ascii_letters:
        assert to_upper(c) == c.upper()
        assert to_lower(c) == c.lower()


def test_case_conversion_leaves_non_letters():
    for c in string.digits + string.punctuation + " ":
        assert to_upper(c) == c
        assert to_lower(c) == c


def test_case_conversion_on_codes_returns_codes():
    assert to_upper(ord("q")) == ord("Q")
    assert to_lower(ord("Q")) == ord("q")
    assert to_upper(200) == 200


def test_case_round_trip():
    for c in string.ascii_lowercase:
        assert to_lower(to_upper(c)) == c


def test_multi_char_string_rejected():
    with pytest.raises(TypeError):
        is_alpha("ab")