import string
import unicodedata

import pytest
from hypothesis import given
from hypothesis import strategies as st

from eposkit import chars

ASCII = range(128)


@pytest.mark.parametrize(
    "func, members",
    [
        (chars.islower, string.ascii_lowercase),
        (chars.isupper, string.ascii_uppercase),
        (chars.isalpha, string.ascii_letters),
        (chars.isdigit, string.digits),
        (chars.isalnum, string.ascii_letters + string.digits),
        (chars.isxdigit, string.hexdigits),
        (chars.isspace, string.whitespace),
        (chars.isblank, " \t"),
        (chars.ispunct, string.punctuation),
    ],
)
def test_classes_match_character_sets(func, members):
    for code in ASCII:
        assert func(code) == (chr(code) in members)


def test_isprint_and_isgraph():
    for code in ASCII:
        assert chars.isprint(code) == chr(code).isprintable()
        assert chars.isgraph(code) == (chr(code).isprintable() and code != 32)


def test_iscntrl_matches_control_category():
    for code in ASCII:
        assert chars.iscntrl(code) == (unicodedata.category(chr(code)) == "Cc")


@given(st.integers(min_value=-1000, max_value=1000))
def test_isascii_range(code):
    assert chars.isascii(code) == (0 <= code < 128)


@given(st.integers(min_value=-1000, max_value=1000))
def test_non_ascii_codes_are_in_no_class(code):
    if not 0 <= code < 128:
        assert not chars.isalnum(code)
        assert not chars.isprint(code)
        assert not chars.iscntrl(code)
        assert chars.tolower(code) == code
        assert chars.toupper(code) == code


def test_case_conversion_matches_ascii():
    for code in ASCII:
        ch = chr(code)
        assert chars.tolower(code) == ord(ch.lower())
        assert chars.toupper(code) == ord(ch.upper())


def test_case_round_trip_on_strings():
    for ch in string.ascii_letters:
        assert chars.toupper(chars.tolower(ch)) == ch.upper()
        assert chars.tolower(chars.toupper(ch)) == ch.lower()
    assert chars.toupper("7") == "7"


def test_string_arguments_accepted():
    assert chars.isdigit("5") is True
    assert chars.isalpha("5") is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        chars.isalpha("ab")