"""Numeric limits and IEEE-754 special values for a 32-bit target."""

from __future__ import annotations

import struct

__all__ = [
    "build_inf",
    "build_nan",
    "FLT_MIN",
    "FLT_MAX",
    "FLT_EPSILON",
    "DBL_MIN",
    "DBL_MAX",
    "DBL_EPSILON",
    "INT_MAX",
    "INT_MIN",
    "LLONG_MAX",
    "LLONG_MIN",
    "ULLONG_MAX",
]

NAN_INFINITY_SUPPORTED = True

FLT_MIN = 1.17549e-38
FLT_MAX = 3.40282e38
FLT_EPSILON = 1.19209e-07
FLT_DIG = 6
FLT_ROUNDS = 1
FLT_RADIX = 2
FLT_MANT_DIG = 24
FLT_MIN_EXP = -125
FLT_MIN_10_EXP = -37
FLT_MAX_10_EXP = 38
FLT_MAX_EXP = 128

DBL_MIN = 2.22507e-308
DBL_MAX = 1.79769e308
DBL_EPSILON = 2.22045e-16
DBL_DIG = 15
DBL_MANT_DIG = 53
DBL_MIN_EXP = -1021
DBL_MIN_10_EXP = -307
DBL_MAX_10_EXP = 308
DBL_MAX_EXP = 1024

LDBL_MIN = 3.3621e-4932
LDBL_MAX = 1.18973e4932
LDBL_EPSILON = 1.0842e-19
LDBL_DIG = 18
LDBL_MANT_DIG = 64
LDBL_MIN_EXP = -16381
LDBL_MIN_10_EXP = -4931
LDBL_MAX_10_EXP = 4932
LDBL_MAX_EXP = 16384

CHAR_MAX = 127
CHAR_MIN = -128
UCHAR_MAX = 255

SHRT_MAX = 32767
SHRT_MIN = -32768
USHRT_MAX = 65535

INT_MAX = 2147483647
INT_MIN = -2147483648
UINT_MAX = 4294967296

LLONG_MAX = 9223372036854775807
LLONG_MIN = -9223372036854775808
ULLONG_MAX = 18446744073709551615

# Pointers are four bytes wide, so long matches int.
LONG_MAX = INT_MAX
LONG_MIN = INT_MIN

_INF_BITS = 0x7F800000
_NAN_BITS = 0x7FC00000


def _float_from_bits(bits: int) -> float:
    return struct.unpack("<f", bits.to_bytes(4, "little"))[0]


def build_inf() -> float:
    """Build positive infinity from its single-precision bit pattern."""
    return _float_from_bits(_INF_BITS)


def build_nan() -> float:
    """Build a quiet NaN from its single-precision bit pattern."""
    return _float_from_bits(_NAN_BITS)