import math

import pytest

from oscalib import mathlib


@pytest.mark.parametrize("value", [-2.5, -2.0, -0.25, 0.0, 1.25, 3.0, 7.75])
def test_floor_and_ceil_match_math(value):
    assert mathlib.floor(value) == math.floor(value)
    assert mathlib.ceil(value) == math.ceil(value)
    assert mathlib.floorf(value) == math.floor(value)
    assert mathlib.ceilf(value) == math.ceil(value)


def test_fabs():
    assert mathlib.fabs(-2.5) == 2.5
    assert mathlib.fabsf(-2.5) == 2.5
    assert mathlib.fabs(3.0) == 3.0


@pytest.mark.parametrize("x, y", [(7.0, 3.0), (-7.0, 3.0), (7.0, -3.0), (6.0, 3.0)])
def test_fmod_takes_sign_of_divisor(x, y):
    assert mathlib.fmod(x, y) == x % y
    assert mathlib.fmodf(x, y) == x % y


def test_fmod_by_zero_is_nan():
    result = mathlib.fmod(1.0, 0.0)
    result_f = mathlib.fmodf(1.0, 0.0)
    assert repr(result) == "nan"
    assert repr(result_f) == "nan"
    assert math.isnan(result) is True
    assert math.isnan(result_f) is True


@pytest.mark.parametrize("x, y", [(2.0, 10.0), (2.0, -3.0), (3.0, 4.0), (-2.0, 5.0)])
def test_integer_powers(x, y):
    assert mathlib.pow(x, y) == x**y
    assert mathlib.powf(x, y) == x**y


def test_pow_special_cases():
    assert mathlib.pow(0.0, 5.0) == 0.0
    assert mathlib.pow(9.5, 1.0) == 9.5
    assert mathlib.pow(9.5, 0.0) == 1.0
    assert mathlib.powf(9.5, 0.0) == 1.0


def test_fractional_power_ignores_base_sign():
    assert mathlib.pow(-4.0, 0.5) == mathlib.pow(4.0, 0.5)
    assert mathlib.powf(-4.0, 0.5) == mathlib.powf(4.0, 0.5)


def test_exp_fixed_points():
    assert mathlib.exp(0.0) == 1.0
    assert mathlib.exp(1.0) == math.e
    assert mathlib.expf(0.0) == 1.0
    assert mathlib.expf(1.0) == pytest.approx(math.e, rel=1e-6)


def test_exp_of_negative_is_reciprocal():
    assert mathlib.exp(-2.0) == 1.0 / mathlib.exp(2.0)
    assert mathlib.expf(-2.0) == pytest.approx(1.0 / mathlib.expf(2.0), rel=1e-6)


def test_exp_overflow_saturates():
    assert mathlib.exp(1000.0) == math.inf
    assert mathlib.exp(-1000.0) == 0.0
    assert mathlib.expf(200.0) == math.inf


def test_log_fixed_points():
    assert mathlib.log(1.0) == 0.0
    assert mathlib.log(math.e) == 1.0
    assert mathlib.logf(1.0) == 0.0


@pytest.mark.parametrize("value", [0.0, -1.0])
def test_log_of_non_positive_is_nan(value):
    result = mathlib.log(value)
    result_f = mathlib.logf(value)
    assert repr(result) == "nan"
    assert repr(result_f) == "nan"
    assert math.isnan(result) is True
    assert math.isnan(result_f) is True


@pytest.mark.parametrize("value", [0.5, 2.0, 10.0, 42.0])
def test_log_matches_math(value):
    assert mathlib.log(value) == pytest.approx(math.log(value), abs=1e-12)
    assert mathlib.logf(value) == pytest.approx(math.log(value), rel=1e-5)


def test_log_of_huge_value_overflows_series():
    with pytest.raises(OverflowError):
        mathlib.log(1e20)