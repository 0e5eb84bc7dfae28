import math

import pytest

from arkscript.builtins import mathematics as m
from arkscript.common import ArkError, ArkTypeError


def test_documented_examples():
    assert m.exponential([1]) == pytest.approx(math.e)
    assert m.logarithm([1]) == 0
    assert m.ceil_([0.2]) == 1
    assert m.floor_([1.7]) == 1
    assert m.round_([0.2]) == 0
    assert m.round_([0.6]) == 1
    assert m.cos_([0]) == 1
    assert m.cos_([math.pi]) == pytest.approx(-1)
    assert m.sin_([0]) == 0
    assert m.tan_([0]) == 0
    assert m.acos_([1]) == 0
    assert m.asin_([1]) == pytest.approx(math.pi / 2)
    assert m.atan_([0]) == 0


def test_round_halves_go_away_from_zero():
    assert m.round_([2.5]) == 3
    assert m.round_([-2.5]) == -3


def test_exp_and_ln_round_trip():
    for x in (0.5, 1.0, 7.25):
        assert m.logarithm([m.exponential([x])]) == pytest.approx(x)


def test_ln_rejects_non_positive():
    with pytest.raises(ArkError, match="greater than 0"):
        m.logarithm([0])


def test_hyperbolic_inverses():
    for x in (0.1, 0.5, 2.0):
        assert m.asinh_([m.sinh_([x])]) == pytest.approx(x)
        assert m.acosh_([m.cosh_([x])]) == pytest.approx(x)
    assert m.atanh_([m.tanh_([0.3])]) == pytest.approx(0.3)


def test_out_of_domain_gives_nan():
    assert m.is_nan([m.acos_([2])]) is True
    assert m.is_nan([m.acosh_([0])]) is True


def test_overflow_and_poles_give_infinity():
    assert m.exponential([10000]) == math.inf
    assert m.atanh_([1]) == math.inf
    assert m.atanh_([-1]) == -math.inf


def test_nan_and_inf_checks():
    assert m.is_nan([m.NAN]) is True
    assert m.is_nan([2]) is False
    assert m.is_nan(["nan"]) is False
    assert m.is_inf([m.INF]) is True
    assert m.is_inf([1]) is False
    assert m.is_inf([m.NAN]) is False


def test_rounding_keeps_non_finite():
    assert m.ceil_([m.INF]) == math.inf
    assert m.is_nan([m.floor_([m.NAN])]) is True


def test_constants():
    assert m.cos_([m.PI]) == pytest.approx(-1)
    assert m.cos_([m.TAU]) == pytest.approx(1)
    assert m.sin_([m.TAU / 4]) == pytest.approx(1)
    assert m.logarithm([m.E]) == pytest.approx(1)


@pytest.mark.parametrize("func", [m.exponential, m.cos_, m.floor_, m.atanh_])
def test_wrong_argument_type(func):
    with pytest.raises(ArkTypeError):
        func(["1"])


def test_wrong_arity():
    with pytest.raises(ArkTypeError):
        m.is_nan([])
    with pytest.raises(ArkTypeError):
        m.sin_([1, 2])