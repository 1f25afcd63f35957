import math
import struct

from oscalib import numeric


def test_build_inf_is_positive_infinity():
    value = numeric.build_inf()
    assert value == math.inf
    assert value > numeric.FLT_MAX


def test_build_inf_bit_pattern():
    assert struct.pack(">f", numeric.build_inf()) == bytes.fromhex("7f800000")


def test_build_nan_is_nan():
    value = numeric.build_nan()
    assert repr(value) == "nan"
    assert math.isnan(value) is True


def test_build_nan_bit_pattern():
    assert struct.pack(">f", numeric.build_nan()) == bytes.fromhex("7fc00000")


def test_negated_inf_below_double_range():
    assert -numeric.build_inf() < -numeric.DBL_MAX