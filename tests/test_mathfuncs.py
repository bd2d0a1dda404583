import math

import pytest

from kineticsim import mathfuncs


@pytest.mark.parametrize("x", [-3.5, -1.0, 0.0, 0.25, 2.0, 100.0])
def test_asinh_matches_math(x):
    assert mathfuncs.asinh(x) == pytest.approx(math.asinh(x))


def test_asinh_is_odd():
    assert mathfuncs.asinh(-2.5) == pytest.approx(-mathfuncs.asinh(2.5))


@pytest.mark.parametrize("x", [1.0, 1.5, 2.0, 3.0, 1e30])
def test_acosh_matches_math(x):
    assert mathfuncs.acosh(x) == pytest.approx(math.acosh(x))


@pytest.mark.parametrize("x", [0.999, 0.0, -5.0, math.nan])
def test_acosh_outside_domain_is_nan(x):
    result = mathfuncs.acosh(x)
    assert str(result) == "nan"


def test_acosh_of_infinity():
    assert mathfuncs.acosh(math.inf) == math.inf


@pytest.mark.parametrize("x", [-0.9, -0.5, 0.0, 0.3, 0.75])
def test_atanh_matches_math(x):
    assert mathfuncs.atanh(x) == pytest.approx(math.atanh(x))


def test_atanh_at_bounds_is_infinite():
    assert mathfuncs.atanh(1.0) == math.inf
    assert mathfuncs.atanh(-1.0) == -math.inf


@pytest.mark.parametrize("x", [1.0001, -2.0, math.nan])
def test_atanh_outside_domain_is_nan(x):
    result = mathfuncs.atanh(x)
    assert str(result) == "nan"


def test_atanh_inverts_tanh():
    assert mathfuncs.atanh(math.tanh(0.4)) == pytest.approx(0.4)


@pytest.mark.parametrize("x", [-0.5, 0.0, 1e-20, 0.1, 10.0])
def test_log1p_matches_math(x):
    assert mathfuncs.log1p(x) == pytest.approx(math.log1p(x))


def test_log1p_at_minus_one_is_negative_infinity():
    assert mathfuncs.log1p(-1.0) == -math.inf


@pytest.mark.parametrize("x", [-1.5, -math.inf, math.nan])
def test_log1p_below_domain_is_nan(x):
    result = mathfuncs.log1p(x)
    assert str(result) == "nan"


def test_log1p_of_infinity():
    assert mathfuncs.log1p(math.inf) == math.inf


def test_factorial_values():
    assert mathfuncs.factorial(0) == 1
    assert mathfuncs.factorial(5) == 120


def test_factorial_negative_is_one():
    assert mathfuncs.factorial(-3) == 1


@pytest.mark.parametrize("n", range(1, 15))
def test_factorial_recurrence(n):
    assert mathfuncs.factorial(n) == n * mathfuncs.factorial(n - 1)


def test_fmax_picks_larger():
    assert mathfuncs.fmax(1.0, 2.0) == 2.0
    assert mathfuncs.fmax(3.0, -2.0) == 3.0


def test_fmax_nan_handling():
    assert math.isnan(mathfuncs.fmax(math.nan, 1.0))
    assert mathfuncs.fmax(1.0, math.nan) == 1.0


def test_fmin_picks_smaller():
    assert mathfuncs.fmin(1.0, 2.0) == 1.0
    assert mathfuncs.fmin(3.0, -2.0) == -2.0


def test_fmin_nan_handling():
    assert math.isnan(mathfuncs.fmin(math.nan, 1.0))
    assert mathfuncs.fmin(1.0, math.nan) == 1.0


def test_isnan():
    assert mathfuncs.isnan(math.nan) is True
    assert mathfuncs.isnan(0.0) is False
    assert mathfuncs.isnan(math.inf) is False