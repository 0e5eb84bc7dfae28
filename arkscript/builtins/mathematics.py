"""Mathematical builtins: exponentials, rounding, trigonometry and number checks."""

from __future__ import annotations

import math
from typing import Any, Callable, Sequence

from arkscript.builtins.values import ValueType, check, type_error
from arkscript.common import ArkError

PI = math.pi
E = math.exp(1.0)
TAU = math.pi * 2.0
INF = math.inf
NAN = math.nan


def _number_arg(name: str, args: Sequence[Any]) -> float:
    if not check(args, ValueType.NUMBER):
        type_error(name, [[("value", ValueType.NUMBER)]], args)
    return float(args[0])


def _apply(name: str, func: Callable[[float], float], args: Sequence[Any]) -> float:
    x = _number_arg(name, args)
    try:
        return func(x)
    except ValueError:
        return math.nan
    except OverflowError:
        return math.inf


def exponential(args: Sequence[Any]) -> float:
    """e raised to the given number."""
    return _apply("math:exp", math.exp, args)


def logarithm(args: Sequence[Any]) -> float:
    """Natural logarithm of a strictly positive number."""
    x = _number_arg("math:log", args)
    if x <= 0.0:
        raise ArkError("math:log: value must be greater than 0")
    return math.log(x)


def _keep_non_finite(func: Callable[[float], int]) -> Callable[[float], float]:
    def wrapped(x: float) -> float:
        return x if not math.isfinite(x) else float(func(x))

    return wrapped


def ceil_(args: Sequence[Any]) -> float:
    """Smallest integer not less than the number."""
    return _apply("math:ceil", _keep_non_finite(math.ceil), args)


def floor_(args: Sequence[Any]) -> float:
    """Largest integer not greater than the number."""
    return _apply("math:floor", _keep_non_finite(math.floor), args)


def _round_half_away(x: float) -> float:
    magnitude = abs(x)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), x)


def round_(args: Sequence[Any]) -> float:
    """Nearest integer, halves rounded away from zero."""
    return _apply("math:round", _keep_non_finite(_round_half_away), args)


def is_nan(args: Sequence[Any]) -> bool:
    """True if the value is a number that is NaN."""
    if not check(args, ValueType.ANY):
        type_error("math:NaN?", [[("value", ValueType.ANY)]], args)
    value = args[0]
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isnan(value)


def is_inf(args: Sequence[Any]) -> bool:
    """True if the value is an infinite number."""
    if not check(args, ValueType.ANY):
        type_error("math:Inf?", [[("value", ValueType.ANY)]], args)
    value = args[0]
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isinf(value)


def cos_(args: Sequence[Any]) -> float:
    """Cosine of an angle in radians."""
    return _apply("math:cos", math.cos, args)


def sin_(args: Sequence[Any]) -> float:
    """Sine of an angle in radians."""
    return _apply("math:sin", math.sin, args)


def tan_(args: Sequence[Any]) -> float:
    """Tangent of an angle in radians."""
    return _apply("math:tan", math.tan, args)


def acos_(args: Sequence[Any]) -> float:
    """Arc cosine; NaN outside [-1, 1]."""
    return _apply("math:arccos", math.acos, args)


def asin_(args: Sequence[Any]) -> float:
    """Arc sine; NaN outside [-1, 1]."""
    return _apply("math:arcsin", math.asin, args)


def atan_(args: Sequence[Any]) -> float:
    """Arc tangent."""
    return _apply("math:arctan", math.atan, args)


def cosh_(args: Sequence[Any]) -> float:
    """Hyperbolic cosine."""
    return _apply("math:cosh", math.cosh, args)


def _sinh(x: float) -> float:
    try:
        return math.sinh(x)
    except OverflowError:
        return math.copysign(math.inf, x)


def sinh_(args: Sequence[Any]) -> float:
    """Hyperbolic sine."""
    return _apply("math:sinh", _sinh, args)


def tanh_(args: Sequence[Any]) -> float:
    """Hyperbolic tangent."""
    return _apply("math:tanh", math.tanh, args)


def acosh_(args: Sequence[Any]) -> float:
    """Inverse hyperbolic cosine; NaN below 1."""
    return _apply("math:acosh", math.acosh, args)


def asinh_(args: Sequence[Any]) -> float:
    """Inverse hyperbolic sine."""
    return _apply("math:asinh", math.asinh, args)


def _atanh(x: float) -> float:
    if abs(x) == 1.0:
        return math.copysign(math.inf, x)
    return math.atanh(x)


def atanh_(args: Sequence[Any]) -> float:
    """Inverse hyperbolic tangent; infinite at ±1, NaN beyond."""
    return _apply("math:atanh", _atanh, args)