"""Signed 32-bit fixed-point numbers in the 24.8 format.

Values are plain ints holding the raw fixed-point representation. The
whole part takes 24 bits and the fraction 8, so the range is about
-8388608.999 to 8388607.999 and the finest step is 0.00390625.
"""

from __future__ import annotations

BITS = 32
WBITS = 24
FBITS = BITS - WBITS
FMASK = (1 << FBITS) - 1

ONE = 1 << FBITS
ONE_HALF = ONE >> 1
TWO = ONE + ONE

DEFAULT_DECIMALS = 2
ALL_DECIMALS = 15

_MASK = (1 << BITS) - 1
_U64 = (1 << 64) - 1


def _wrap(value: int, width: int) -> int:
    """Reduce ``value`` to a signed integer of ``width`` bits."""
    mask = (1 << width) - 1
    value &= mask
    if value >> (width - 1):
        value -= 1 << width
    return value


def _wrap32(value: int) -> int:
    return _wrap(value, BITS)


def _wrap64(value: int) -> int:
    return _wrap(value, 2 * BITS)


def _truncating_div(numer: int, denom: int) -> int:
    if denom == 0:
        raise ZeroDivisionError("fixed-point division by zero")
    quot = abs(numer) // abs(denom)
    return -quot if (numer < 0) != (denom < 0) else quot


def from_int(i: int) -> int:
    """Convert a whole number to fixed point (computed in 64 bits)."""
    return _wrap64(i << FBITS)


def to_int(f: int) -> int:
    """Return the whole part of ``f``, rounding toward minus infinity."""
    return f >> FBITS


def rconst(r: float) -> int:
    """Convert a real number to fixed point, rounding half away from zero."""
    return _wrap32(int(r * ONE + (0.5 if r >= 0 else -0.5)))


def mul(a: int, b: int) -> int:
    """Multiply two fixed-point numbers."""
    return _wrap32((_wrap64(a) * _wrap64(b)) >> FBITS)


def div(a: int, b: int) -> int:
    """Divide two fixed-point numbers, truncating toward zero."""
    return _wrap32(_truncating_div(_wrap64(a << FBITS), _wrap64(b)))


def frac_part(a: int) -> int:
    """Return the fraction bits of ``a``."""
    return _wrap32(a) & FMASK


def to_str(a: int, max_dec: int = -1) -> str:
    """Format ``a`` as a decimal string.

    ``max_dec`` limits the digits after the point; -1 selects the default
    of 2 and -2 selects 15. One trailing zero is dropped when more than one
    decimal digit was produced.
    """
    if max_dec == -1:
        max_dec = DEFAULT_DECIMALS
    elif max_dec == -2:
        max_dec = ALL_DECIMALS

    a = _wrap32(a)
    parts = []
    if a < 0:
        parts.append("-")
        a = _wrap32(-a)

    parts.append(str(to_int(a) & _U64))
    parts.append(".")

    decimals = []
    fr = (frac_part(a) << WBITS) & _MASK
    while True:
        fr = (fr & _MASK) * 10
        decimals.append(str((fr >> BITS) % 10))
        if fr == 0 or len(decimals) >= max_dec:
            break

    if len(decimals) > 1 and decimals[-1] == "0":
        decimals.pop()
    return "".join(parts) + "".join(decimals)


PI = rconst(3.14159265358979323846)
TWO_PI = rconst(2 * 3.14159265358979323846)
HALF_PI = rconst(3.14159265358979323846 / 2)
E = rconst(2.7182818284590452354)