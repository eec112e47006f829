"""Floating-point math routines with x87 semantics.

Results follow the floating-point unit rather than the C standard where
they differ: ``floor`` of a negative whole number steps one below it,
``pow(0, y)`` is 0 for every non-zero ``y``, and infinite exponents in
``pow``/``exp`` produce NaN.
"""

from __future__ import annotations

import math
import struct

M_E = 2.7182818284590452354
M_PI = 3.14159265358979323846

_LOG2_E = math.log2(math.e)
_TRIG_LIMIT = 2.0**63

_ATANHI = (
    4.63647609000806093515e-01,
    7.85398163397448278999e-01,
    9.82793723247329054082e-01,
    1.57079632679489655800e00,
)
_ATANLO = (
    2.26987774529616870924e-17,
    3.06161699786838301793e-17,
    1.39033110312309984516e-17,
    6.12323399573676603587e-17,
)
_AT = (
    3.33333333333329318027e-01,
    -1.99999999998764832476e-01,
    1.42857142725034663711e-01,
    -1.11111104054623557880e-01,
    9.09088713343650656196e-02,
    -7.69187620504482999495e-02,
    6.66107313738753120669e-02,
    -5.83357013379057348645e-02,
    4.97687799461593236017e-02,
    -3.65315727442169155270e-02,
    1.62858201153657823623e-02,
)


def fabs(x: float) -> float:
    """Absolute value."""
    return -x if x < 0 else x


def floor(x: float) -> float:
    """Truncate, then step down by one for any negative input."""
    return float(int(x) - 1) if x < 0.0 else float(int(x))


def ceil(x: float) -> float:
    """Smallest whole number not below ``x``."""
    ix = int(x)
    if float(ix) == x or x < 0.0:
        return float(ix)
    return float(ix + 1)


def _reduced_trig(func, x: float) -> float:
    if math.isnan(x) or math.isinf(x):
        return math.nan
    if abs(x) >= _TRIG_LIMIT:
        return x  # operand out of range: left unchanged
    return func(x)


def sin(x: float) -> float:
    """Sine of ``x`` radians."""
    return _reduced_trig(math.sin, x)


def cos(x: float) -> float:
    """Cosine of ``x`` radians."""
    return _reduced_trig(math.cos, x)


def tan(x: float) -> float:
    """Tangent of ``x`` radians."""
    return _reduced_trig(math.tan, x)


def cot(x: float) -> float:
    """Cotangent of ``x`` radians; infinite where the tangent is zero."""
    t = tan(x)
    if t == 0.0:
        return math.copysign(math.inf, t)
    return 1.0 / t


def sqrt(x: float) -> float:
    """Square root; NaN for negative input."""
    if x < 0.0 or math.isnan(x):
        return math.nan
    return math.sqrt(x)


def _log2(x: float) -> float:
    if math.isnan(x) or x < 0.0:
        return math.nan
    if x == 0.0:
        return -math.inf
    return math.log2(x)


def log2(x: float, y: float) -> float:
    """Return ``y * log2(x)``."""
    return y * _log2(x)


def atan2(y: float, x: float) -> float:
    """Angle of the point ``(x, y)``."""
    return math.atan2(y, x)


def _exp2(t: float) -> float:
    if not math.isfinite(t):
        return math.nan
    try:
        return 2.0**t
    except OverflowError:
        return math.inf


def pow(x: float, y: float) -> float:  # noqa: A001
    """Return ``x`` raised to ``y`` as ``2 ** (y * log2(x))``.

    A zero base gives 1 for a zero exponent and 0 otherwise.
    """
    if x == 0.0:
        return 1.0 if y == 0.0 else 0.0
    return _exp2(y * _log2(x))


def exp(x: float) -> float:
    """Return ``e`` raised to ``x``."""
    return _exp2(x * _LOG2_E)


def log(x: float) -> float:
    """Natural logarithm."""
    return log2(x, 1.0) / 1.442695040888963


def _words(x: float) -> tuple[int, int]:
    """Return the signed high word and unsigned low word of a double."""
    low, high = struct.unpack("<Ii", struct.pack("<d", x))
    return high, low


def atan(x: float) -> float:
    """Arc tangent, by argument reduction and an odd polynomial."""
    hx, low = _words(x)
    ix = hx & 0x7FFFFFFF

    if ix >= 0x44100000:
        if ix > 0x7FF00000 or (ix == 0x7FF00000 and low != 0):
            return x + x
        if hx > 0:
            return _ATANHI[3] + _ATANLO[3]
        return -_ATANHI[3] - _ATANLO[3]

    if ix < 0x3FDC0000:
        if ix < 0x3E200000:
            return x
        index = -1
    else:
        x = fabs(x)
        if ix < 0x3FF30000:
            if ix < 0x3FE60000:
                index, x = 0, (2.0 * x - 1.0) / (2.0 + x)
            else:
                index, x = 1, (x - 1.0) / (x + 1.0)
        elif ix < 0x40038000:
            index, x = 2, (x - 1.5) / (1.0 + 1.5 * x)
        else:
            index, x = 3, -1.0 / x

    z = x * x
    w = z * z
    s1 = z * (_AT[0] + w * (_AT[2] + w * (_AT[4] + w * (_AT[6] + w * (_AT[8] + w * _AT[10])))))
    s2 = w * (_AT[1] + w * (_AT[3] + w * (_AT[5] + w * (_AT[7] + w * _AT[9]))))
    if index < 0:
        return x - x * (s1 + s2)
    z = _ATANHI[index] - ((x * (s1 + s2) - _ATANLO[index]) - x)
    return -z if hx < 0 else z