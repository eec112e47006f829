"""Small C runtime helpers.

Covers pseudo-random numbers, truncating integer division, string to
integer conversion, ``sysconf`` and network byte-order conversion, with
the limits of a 32-bit little-endian target.
"""

from __future__ import annotations

from typing import Callable, NamedTuple

CHAR_BIT = 8

SCHAR_MAX = 127
SCHAR_MIN = -SCHAR_MAX - 1
UCHAR_MAX = 255
CHAR_MIN = SCHAR_MIN
CHAR_MAX = SCHAR_MAX

SHRT_MAX = 32767
SHRT_MIN = -SHRT_MAX - 1
USHRT_MAX = 65535

INT_MAX = 2147483647
INT_MIN = -INT_MAX - 1
UINT_MAX = 4294967295

LONG_MAX = 2147483647
LONG_MIN = -LONG_MAX - 1
ULONG_MAX = 4294967295

LLONG_MAX = 9223372036854775807
LLONG_MIN = -LLONG_MAX - 1
ULLONG_MAX = 18446744073709551615

RAND_MAX = 0x7FFFFFFD
EXIT_SUCCESS = 0
EXIT_FAILURE = 1

SC_PAGESIZE = 0x0027
SC_PAGE_SIZE = SC_PAGESIZE
PAGE_SIZE = 4096

_ZERO_SEED_REPLACEMENT = 123459876
_WHITESPACE = " \t\n"


class DivResult(NamedTuple):
    """Quotient and remainder of a division truncated toward zero."""

    quot: int
    rem: int


class Conversion(NamedTuple):
    """Converted value and the index where conversion stopped."""

    value: int
    end: int


def _advance(state: int) -> int:
    """One Park-Miller step: state * 7**5 mod (2**31 - 1)."""
    if state == 0:
        state = _ZERO_SEED_REPLACEMENT
    hi, lo = divmod(state, 127773)
    x = 16807 * lo - 2836 * hi
    if x < 0:
        x += 0x7FFFFFFF
    return x & UINT_MAX


def rand_r(seed: int) -> tuple[int, int]:
    """Return ``(value, next_seed)`` for a caller-held seed."""
    state = _advance(seed & UINT_MAX)
    return state % (RAND_MAX + 1), state


class Rand:
    """A seeded generator with the ``srand``/``rand`` interface."""

    def __init__(self, seed: int = 1) -> None:
        self.state = seed & UINT_MAX

    def srand(self, seed: int) -> None:
        """Restart the sequence from ``seed``."""
        self.state = seed & UINT_MAX

    def rand(self) -> int:
        """Return the next value in ``[0, RAND_MAX]``."""
        value, self.state = rand_r(self.state)
        return value


def _truncating_divmod(numer: int, denom: int) -> DivResult:
    if denom == 0:
        raise ZeroDivisionError("integer division by zero")
    quot = abs(numer) // abs(denom)
    if (numer < 0) != (denom < 0):
        quot = -quot
    return DivResult(quot, numer - quot * denom)


def div(numer: int, denom: int) -> DivResult:
    """Divide ints, truncating the quotient toward zero."""
    return _truncating_divmod(numer, denom)


def ldiv(numer: int, denom: int) -> DivResult:
    """Divide longs, truncating the quotient toward zero."""
    return _truncating_divmod(numer, denom)


def _digit_value(ch: str) -> int | None:
    if "0" <= ch <= "9":
        return ord(ch) - ord("0")
    if "A" <= ch <= "Z":
        return ord(ch) - ord("A") + 10
    if "a" <= ch <= "z":
        return ord(ch) - ord("a") + 10
    return None


def _scan(text: str, base: int, limit_for: Callable[[bool], int]):
    """Parse an integer prefix; return (negative, magnitude, overflow, end)."""
    if base < 0 or base > 36:
        raise ValueError(f"invalid base: {base}")

    def at(index: int) -> str:
        return text[index] if index < len(text) else ""

    i = 0
    while i < len(text) and text[i] in _WHITESPACE:
        i += 1

    negative = False
    if at(i) in ("-", "+") and at(i):
        negative = at(i) == "-"
        i += 1

    first, second = at(i), at(i + 1)
    if base in (0, 16) and first == "0" and second in ("x", "X") and second:
        i += 2
        base = 16
    elif base in (0, 2) and first == "0" and second in ("b", "B") and second:
        i += 2
        base = 2
    if base == 0:
        base = 8 if first == "0" else 10

    cutoff, cutlim = divmod(limit_for(negative), base)
    acc = 0
    consumed = 0  # 0: no digits, 1: digits, -1: overflowed
    while True:
        digit = _digit_value(at(i))
        if digit is None or digit >= base:
            break
        if consumed < 0 or acc > cutoff or (acc == cutoff and digit > cutlim):
            consumed = -1
        else:
            consumed = 1
            acc = acc * base + digit
        i += 1

    return negative, acc, consumed < 0, (i if consumed else 0)


def strtol(s: str, base: int = 10) -> Conversion:
    """Convert the leading integer of ``s`` to a signed 32-bit long.

    Out-of-range values clamp to ``LONG_MIN``/``LONG_MAX``; ``end`` is 0
    when no digits were found.
    """
    negative, acc, overflow, end = _scan(
        s, base, lambda neg: -LONG_MIN if neg else LONG_MAX
    )
    if overflow:
        value = LONG_MIN if negative else LONG_MAX
    else:
        value = -acc if negative else acc
    return Conversion(value, end)


def strtoul(s: str, base: int = 10) -> Conversion:
    """Convert the leading integer of ``s`` to an unsigned 32-bit long.

    A leading minus negates modulo 2**32; overflow clamps to ``ULONG_MAX``.
    """
    negative, acc, overflow, end = _scan(s, base, lambda neg: ULONG_MAX)
    if overflow:
        value = ULONG_MAX
    else:
        value = (-acc) & ULONG_MAX if negative else acc
    return Conversion(value, end)


def atol(s: str) -> int:
    """Return the decimal long at the start of ``s``."""
    return strtol(s, 10).value


def sysconf(name: int) -> int:
    """Return a system configuration value; only the page size is known."""
    if name == SC_PAGESIZE:
        return PAGE_SIZE
    raise ValueError(f"unknown sysconf name: {name:#x}")


def _swap(x: int, width: int) -> int:
    mask = (1 << (8 * width)) - 1
    return int.from_bytes((x & mask).to_bytes(width, "little"), "big")


def htons(x: int) -> int:
    """Host (little-endian) to network order for a 16-bit value."""
    return _swap(x, 2)


def ntohs(x: int) -> int:
    """Network to host (little-endian) order for a 16-bit value."""
    return _swap(x, 2)


def htonl(x: int) -> int:
    """Host (little-endian) to network order for a 32-bit value."""
    return _swap(x, 4)


def ntohl(x: int) -> int:
    """Network to host (little-endian) order for a 32-bit value."""
    return _swap(x, 4)