"""Elementary math functions computed by series, in single and double precision."""

from __future__ import annotations

import math
import struct

from .numeric import DBL_EPSILON, FLT_EPSILON

__all__ = [
    "fabsf",
    "fabs",
    "floorf",
    "floor",
    "ceilf",
    "ceil",
    "fmodf",
    "fmod",
    "powf",
    "pow",
    "expf",
    "exp",
    "logf",
    "log",
]

M_E = 2.71828182845904523539
M_LOG2E = 1.44269504088896340739
M_LOG10E = 0.43429448190325182765
M_LN2 = 0.69314718055994530942
M_LN10 = 2.30258509299404568402
M_PI = 3.14159265358979323846
M_PI_2 = 1.57079632679489661923
M_PI_4 = 0.78539816339744830962
M_1_PI = 0.31830988618379067154
M_2_PI = 0.63661977236758134308
M_2_SQRTPI = 1.12837916709551257390
M_SQRT2 = 1.41421356237309504880
M_SQRT1_2 = 0.70710678118654752440


def _f32(x: float) -> float:
    """Round ``x`` to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


_FLT_EPS = _f32(FLT_EPSILON)


def _reciprocal(value: float) -> float:
    if value == 0:
        return math.copysign(math.inf, value)
    return 1.0 / value


def fabsf(x: float) -> float:
    """Absolute value in single precision."""
    x = _f32(x)
    return x if x >= 0.0 else -x


def fabs(x: float) -> float:
    """Absolute value."""
    return x if x >= 0.0 else -x


def floorf(x: float) -> float:
    """Largest integral value not above ``x``, in single precision."""
    x = _f32(x)
    ipart = math.trunc(x)
    return _f32(float(ipart - 1 if x < ipart else ipart))


def floor(x: float) -> float:
    """Largest integral value not above ``x``."""
    ipart = math.trunc(x)
    return float(ipart - 1 if x < ipart else ipart)


def ceilf(x: float) -> float:
    """Smallest integral value not below ``x``, in single precision."""
    x = _f32(x)
    ipart = math.trunc(x)
    return _f32(float(ipart + 1 if x > ipart else ipart))


def ceil(x: float) -> float:
    """Smallest integral value not below ``x``."""
    ipart = math.trunc(x)
    return float(ipart + 1 if x > ipart else ipart)


def fmodf(x: float, y: float) -> float:
    """Remainder of ``x / y`` taking the sign of ``y``; NaN when ``y`` is zero."""
    x, y = _f32(x), _f32(y)
    if y == 0.0:
        return math.nan
    remainder = _f32(x - _f32(math.trunc(_f32(x / y)) * y))
    if _f32(remainder * y) < 0:
        remainder = _f32(remainder + y)
    return remainder


def fmod(x: float, y: float) -> float:
    """Remainder of ``x / y`` taking the sign of ``y``; NaN when ``y`` is zero."""
    if y == 0.0:
        return math.nan
    remainder = x - math.trunc(x / y) * y
    if remainder * y < 0:
        remainder += y
    return remainder


def powf(x: float, y: float) -> float:
    """``x`` raised to ``y`` in single precision."""
    x, y = _f32(x), _f32(y)
    if x == 0.0 or y == 1.0:
        return x
    if y == 0.0:
        return 1.0
    if y - math.trunc(y) == 0.0:
        negative = y < 0.0
        y = -y if negative else y
        result = 1.0
        while y > 0.0:
            if fmodf(y, 2.0) == 1.0:
                result = _f32(result * x)
            x = _f32(x * x)
            y = floorf(y / 2.0)
        return _f32(_reciprocal(result)) if negative else result
    return expf(_f32(y * logf(abs(x))))


def pow(x: float, y: float) -> float:
    """``x`` raised to ``y``."""
    if x == 0.0 or y == 1.0:
        return x
    if y == 0.0:
        return 1.0
    if y - math.trunc(y) == 0.0:
        negative = y < 0.0
        y = -y if negative else y
        result = 1.0
        while y > 0.0:
            if fmod(y, 2.0) == 1.0:
                result *= x
            x *= x
            y = floor(y / 2.0)
        return _reciprocal(result) if negative else result
    return exp(y * log(abs(x)))


def expf(x: float) -> float:
    """Exponential by power series, in single precision."""
    x = _f32(x)
    if x == 1.0:
        return _f32(M_E)
    if x == 0.0:
        return 1.0
    negative = x < 0.0
    x = -x if negative else x
    result = term = 1.0
    n = 1
    while abs(term) > _FLT_EPS:
        n += 1
        term = _f32(term * _f32(x / n))
        result = _f32(result + term)
        if math.isinf(term):
            break
    return _f32(1.0 / result) if negative else result


def exp(x: float) -> float:
    """Exponential by power series."""
    if x == 1.0:
        return M_E
    if x == 0.0:
        return 1.0
    negative = x < 0.0
    x = -x if negative else x
    result = term = 1.0
    n = 1
    while abs(term) > DBL_EPSILON:
        n += 1
        term *= x / n
        result += term
        if math.isinf(term):
            break
    return 1.0 / result if negative else result


def _log_series(term: float, term_sq: float, epsilon: float, rnd) -> float:
    if term_sq >= 1.0:
        raise OverflowError("argument too large for the logarithm series")
    total = 0.0
    term_pow = term
    n = 1
    while abs(term_pow) > epsilon:
        total = rnd(total + rnd(term_pow / n))
        term_pow = rnd(term_pow * term_sq)
        n += 2
    return rnd(2.0 * total)


def logf(x: float) -> float:
    """Natural logarithm in single precision; NaN for arguments not above zero."""
    x = _f32(x)
    if x <= 0.0:
        return -math.nan if x < 0.0 else math.nan
    if x == 1.0:
        return 0.0
    if x == _f32(M_E):
        return 1.0
    term = _f32(_f32(x - 1.0) / _f32(x + 1.0))
    return _log_series(term, _f32(term * term), _FLT_EPS, _f32)


def log(x: float) -> float:
    """Natural logarithm; NaN for arguments not above zero."""
    if x <= 0.0:
        return -math.nan if x < 0.0 else math.nan
    if x == 1.0:
        return 0.0
    if x == M_E:
        return 1.0
    term = (x - 1.0) / (x + 1.0)
    return _log_series(term, term * term, DBL_EPSILON, float)