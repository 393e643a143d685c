import string

import pytest

from pipexpy.chars import (
    atoi,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(0, 256))
def test_classification_matches_ascii_sets(code):
    ch = chr(code)
    assert is_alpha(code) == (ch in string.ascii_letters)
    assert is_digit(code) == (ch in string.digits)
    assert is_alnum(code) == (ch in string.ascii_letters + string.digits)
    assert is_ascii(code) == (code < 128)
    assert is_print(code) == (ch in string.printable and (ch == " " or not ch.isspace()))


def test_classification_accepts_characters():
    assert is_alpha("q") is True
    assert is_digit("q") is False
    assert is_alnum("7") is True


def test_negative_code_is_not_ascii():
    assert is_ascii(-1) is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


@pytest.mark.parametrize("upper, lower", zip(string.ascii_uppercase, string.ascii_lowercase))
def test_case_mapping_letters(upper, lower):
    assert to_lower(upper) == lower
    assert to_upper(lower) == upper
    assert to_lower(ord(upper)) == ord(lower)
    assert to_upper(ord(lower)) == ord(upper)


@pytest.mark.parametrize("ch", list(string.digits + string.punctuation + " "))
def test_case_mapping_leaves_other_characters(ch):
    assert to_lower(ch) == ch
    assert to_upper(ch) == ch


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17 18") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("--5") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 9, -9, 10, 123456, -98765, 2**31 - 1, -(2**31)])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n
    assert itoa(n) == str(n)


def test_itoa_minimum_int():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_out_of_range():
    with pytest.raises(OverflowError):
        itoa(2**31)


def test_atoi_wraps_like_32_bit():
    assert atoi(str(2**31)) == -(2**31)