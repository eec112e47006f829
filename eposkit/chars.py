"""ASCII character classification and case conversion.

Each function takes a character code or a one-character string.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return c


def islower(c: Char) -> bool:
    """True for 'a'..'z'."""
    n = _code(c)
    return ord("a") <= n <= ord("z")


def isupper(c: Char) -> bool:
    """True for 'A'..'Z'."""
    n = _code(c)
    return ord("A") <= n <= ord("Z")


def isalpha(c: Char) -> bool:
    """True for ASCII letters."""
    return islower(c) or isupper(c)


def isdigit(c: Char) -> bool:
    """True for '0'..'9'."""
    n = _code(c)
    return ord("0") <= n <= ord("9")


def isalnum(c: Char) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isxdigit(c: Char) -> bool:
    """True for hexadecimal digits."""
    n = _code(c)
    return isdigit(n) or ord("a") <= n <= ord("f") or ord("A") <= n <= ord("F")


def isspace(c: Char) -> bool:
    """True for space, form feed, newline, return, tab and vertical tab."""
    return _code(c) in (0x20, 0x0C, 0x0A, 0x0D, 0x09, 0x0B)


def isblank(c: Char) -> bool:
    """True for space and tab."""
    return _code(c) in (0x20, 0x09)


def isgraph(c: Char) -> bool:
    """True for printable characters other than space."""
    return 32 < _code(c) < 127


def isprint(c: Char) -> bool:
    """True for printable characters including space."""
    return 32 <= _code(c) < 127


def iscntrl(c: Char) -> bool:
    """True for control characters and DEL."""
    n = _code(c)
    return 0 <= n < 32 or n == 127


def isascii(c: Char) -> bool:
    """True for codes 0..127."""
    return 0 <= _code(c) < 128


def ispunct(c: Char) -> bool:
    """True for printable characters that are neither alphanumeric nor space."""
    return isprint(c) and not isalnum(c) and not isspace(c)


def tolower(c: Char) -> Char:
    """Lower-case an ASCII upper-case letter; other input is returned as is."""
    if not isupper(c):
        return c
    n = _code(c) - ord("A") + ord("a")
    return chr(n) if isinstance(c, str) else n


def toupper(c: Char) -> Char:
    """Upper-case an ASCII lower-case letter; other input is returned as is."""
    if not islower(c):
        return c
    n = _code(c) - ord("a") + ord("A")
    return chr(n) if isinstance(c, str) else n