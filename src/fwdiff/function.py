"""
###############################################
Mathematical functions (:mod:`fwdiff.function`)
###############################################

.. currentmodule:: fwdiff.function

This module provides mathematical functions. Every function accepts a plain scalar
(:class:`float`, :class:`int`, :class:`fractions.Fraction`, NumPy scalars, or mpmath
numbers) as well as a dual number, in which case the derivative is propagated by the
chain rule.

Power, exponents, and logarithmic functions
===========================================

.. autosummary::
    :toctree: generated/

    exp
    log
    ln
    pow
    sqrt

Trigonometric functions
=======================

.. autosummary::
    :toctree: generated/

    sin
    cos
    tan
    asin
    acos
    atan

Hyperbolic functions
====================

.. autosummary::
    :toctree: generated/

    sinh
    cosh
    tanh
    asinh
    acosh
    atanh

Coefficient types other than the above can take part by defining a method
``_fwdiff_overload_(self, fun, *args)`` that returns the value of ``fun(*args)`` or
:data:`NotImplemented`.
"""

import math
import numbers
from typing import Any, overload

import mpmath
import mpmath.ctx_mp_python
import numpy as np

from fwdiff.autodiff import _defderiv, _primitive
from fwdiff.dual import DomainError, Dual, _isinteger, _primal

_NUMPY_NAMES = {
    "acos": "arccos",
    "acosh": "arccosh",
    "asin": "arcsin",
    "asinh": "arcsinh",
    "atan": "arctan",
    "atanh": "arctanh",
}


def _overload(fun, *args) -> Any:
    for x in args:
        if hook := getattr(type(x), "_fwdiff_overload_", None):
            if (res := hook(x, fun, *args)) is not NotImplemented:
                return res

    return NotImplemented


def _eval(name: str, x):
    match x:
        case mpmath.ctx_mp_python.mpnumeric():
            return getattr(mpmath, name)(x)

        case np.generic():
            return getattr(np, _NUMPY_NAMES.get(name, name))(x)

        case numbers.Real():
            return getattr(math, name)(x)

        case _:
            raise TypeError(f"unsupported type for {name}: {type(x).__name__!r}")


@overload
def exp[T: Dual](x: T, /) -> T: ...


@overload
def exp(x: float | int, /) -> float: ...


@overload
def exp(x: Any, /) -> Any: ...


@_primitive
def exp(x, /):
    """Exponential.

    Examples
    --------
    >>> print(format(exp(2), ".6f"))
    7.389056
    """
    if (res := _overload(exp, x)) is not NotImplemented:
        return res

    return _eval("exp", x)


@overload
def log[T: Dual](x: T, /) -> T: ...


@overload
def log(x: float | int, /) -> float: ...


@overload
def log(x: Any, /) -> Any: ...


@_primitive
def log(x, /):
    """Natural logarithm.

    Raises
    ------
    DomainError
        If `x` is not positive.

    Examples
    --------
    >>> print(format(log(5), ".6f"))
    1.609438
    """
    if (res := _overload(log, x)) is not NotImplemented:
        return res

    if x <= 0:
        raise DomainError("math domain error: log of non-positive value")

    return _eval("log", x)


ln = log


@overload
def pow[T: Dual](x: T | float | int, y: T, /) -> T: ...


@overload
def pow[T: Dual](x: T, y: float | int, /) -> T: ...


@overload
def pow(x: float | int, y: float | int, /) -> float: ...


@overload
def pow(x: Any, y: Any, /) -> Any: ...


@_primitive
def pow(x, y, /):
    """`x` raised to the power `y`.

    Raises
    ------
    DomainError
        If `x` is zero and `y` is negative, or `x` is negative and `y` is not an
        integer. When differentiating with respect to `x`, also if `x` is zero and `y`
        is less than one. When differentiating with respect to `y`, also if `x` is not
        positive.

    Examples
    --------
    >>> print(format(pow(3.25, 1.25), ".6f"))
    4.363693
    """
    if (res := _overload(pow, x, y)) is not NotImplemented:
        return res

    if x == 0 and y < 0:
        raise DomainError("math domain error: zero raised to a negative power")

    if x < 0 and not _isinteger(y):
        raise DomainError("math domain error: negative base with non-integer exponent")

    mpnumeric = mpmath.ctx_mp_python.mpnumeric

    match x, y:
        case (mpnumeric(), _) | (_, mpnumeric()):
            return mpmath.power(x, y)

        case (np.generic(), _) | (_, np.generic()):
            return x**y

        case (numbers.Real(), numbers.Real()):
            return math.pow(x, y)

        case _:
            raise TypeError


@overload
def sqrt[T: Dual](x: T, /) -> T: ...


@overload
def sqrt(x: float | int, /) -> float: ...


@overload
def sqrt(x: Any, /) -> Any: ...


@_primitive
def sqrt(x, /):
    """Square root.

    Raises
    ------
    DomainError
        If `x` is negative, or if `x` is zero and the derivative is requested.

    Examples
    --------
    >>> print(format(sqrt(2.0), ".6f"))
    1.414214
    """
    if (res := _overload(sqrt, x)) is not NotImplemented:
        return res

    if x < 0:
        raise DomainError("math domain error: sqrt of negative value")

    return _eval("sqrt", x)


@overload
def sin[T: Dual](x: T, /) -> T: ...


@overload
def sin(x: float | int, /) -> float: ...


@overload
def sin(x: Any, /) -> Any: ...


@_primitive
def sin(x, /):
    """Sine.

    Examples
    --------
    >>> print(format(sin(1.0), ".6f"))
    0.841471
    """
    if (res := _overload(sin, x)) is not NotImplemented:
        return res

    return _eval("sin", x)


@overload
def cos[T: Dual](x: T, /) -> T: ...


@overload
def cos(x: float | int, /) -> float: ...


@overload
def cos(x: Any, /) -> Any: ...


@_primitive
def cos(x, /):
    """Cosine."""
    if (res := _overload(cos, x)) is not NotImplemented:
        return res

    return _eval("cos", x)


@overload
def tan[T: Dual](x: T, /) -> T: ...


@overload
def tan(x: float | int, /) -> float: ...


@overload
def tan(x: Any, /) -> Any: ...


@_primitive
def tan(x, /):
    """Tangent."""
    if (res := _overload(tan, x)) is not NotImplemented:
        return res

    return _eval("tan", x)


@overload
def asin[T: Dual](x: T, /) -> T: ...


@overload
def asin(x: float | int, /) -> float: ...


@overload
def asin(x: Any, /) -> Any: ...


@_primitive
def asin(x, /):
    """Inverse sine.

    Raises
    ------
    DomainError
        If `x` lies outside ``[-1, 1]``, or on its boundary and the derivative is
        requested.
    """
    if (res := _overload(asin, x)) is not NotImplemented:
        return res

    if not -1 <= x <= 1:
        raise DomainError("math domain error: asin of value outside [-1, 1]")

    return _eval("asin", x)


@overload
def acos[T: Dual](x: T, /) -> T: ...


@overload
def acos(x: float | int, /) -> float: ...


@overload
def acos(x: Any, /) -> Any: ...


@_primitive
def acos(x, /):
    """Inverse cosine.

    Raises
    ------
    DomainError
        If `x` lies outside ``[-1, 1]``, or on its boundary and the derivative is
        requested.
    """
    if (res := _overload(acos, x)) is not NotImplemented:
        return res

    if not -1 <= x <= 1:
        raise DomainError("math domain error: acos of value outside [-1, 1]")

    return _eval("acos", x)


@overload
def atan[T: Dual](x: T, /) -> T: ...


@overload
def atan(x: float | int, /) -> float: ...


@overload
def atan(x: Any, /) -> Any: ...


@_primitive
def atan(x, /):
    """Inverse tangent."""
    if (res := _overload(atan, x)) is not NotImplemented:
        return res

    return _eval("atan", x)


@overload
def sinh[T: Dual](x: T, /) -> T: ...


@overload
def sinh(x: float | int, /) -> float: ...


@overload
def sinh(x: Any, /) -> Any: ...


@_primitive
def sinh(x, /):
    """Hyperbolic sine."""
    if (res := _overload(sinh, x)) is not NotImplemented:
        return res

    return _eval("sinh", x)


@overload
def cosh[T: Dual](x: T, /) -> T: ...


@overload
def cosh(x: float | int, /) -> float: ...


@overload
def cosh(x: Any, /) -> Any: ...


@_primitive
def cosh(x, /):
    """Hyperbolic cosine."""
    if (res := _overload(cosh, x)) is not NotImplemented:
        return res

    return _eval("cosh", x)


@overload
def tanh[T: Dual](x: T, /) -> T: ...


@overload
def tanh(x: float | int, /) -> float: ...


@overload
def tanh(x: Any, /) -> Any: ...


@_primitive
def tanh(x, /):
    """Hyperbolic tangent."""
    if (res := _overload(tanh, x)) is not NotImplemented:
        return res

    return _eval("tanh", x)


@overload
def asinh[T: Dual](x: T, /) -> T: ...


@overload
def asinh(x: float | int, /) -> float: ...


@overload
def asinh(x: Any, /) -> Any: ...


@_primitive
def asinh(x, /):
    """Inverse hyperbolic sine."""
    if (res := _overload(asinh, x)) is not NotImplemented:
        return res

    return _eval("asinh", x)


@overload
def acosh[T: Dual](x: T, /) -> T: ...


@overload
def acosh(x: float | int, /) -> float: ...


@overload
def acosh(x: Any, /) -> Any: ...


@_primitive
def acosh(x, /):
    """Inverse hyperbolic cosine.

    Raises
    ------
    DomainError
        If `x` is less than one, or equal to one and the derivative is requested.
    """
    if (res := _overload(acosh, x)) is not NotImplemented:
        return res

    if x < 1:
        raise DomainError("math domain error: acosh of value less than 1")

    return _eval("acosh", x)


@overload
def atanh[T: Dual](x: T, /) -> T: ...


@overload
def atanh(x: float | int, /) -> float: ...


@overload
def atanh(x: Any, /) -> Any: ...


@_primitive
def atanh(x, /):
    """Inverse hyperbolic tangent.

    Raises
    ------
    DomainError
        If `x` lies outside ``(-1, 1)``.
    """
    if (res := _overload(atanh, x)) is not NotImplemented:
        return res

    if not -1 < x < 1:
        raise DomainError("math domain error: atanh of value outside (-1, 1)")

    return _eval("atanh", x)


def _dpow_base(x, y):
    if not isinstance(y, Dual) and y == 1:
        return x * 0 + 1

    if _primal(x) == 0 and _primal(y) < 1:
        raise DomainError("pow is not differentiable at zero for exponents below 1")

    return y * pow(x, y - 1)


def _dpow_exponent(x, y):
    if _primal(x) <= 0:
        raise DomainError("pow is differentiable w.r.t. the exponent only for x > 0")

    return log(x) * pow(x, y)


def _dsqrt(x):
    if _primal(x) == 0:
        raise DomainError("sqrt is not differentiable at zero")

    return 1 / (2 * sqrt(x))


def _dasin(x):
    if not -1 < _primal(x) < 1:
        raise DomainError("asin is not differentiable at the boundary")

    return 1 / sqrt(1 - x * x)


def _dacos(x):
    if not -1 < _primal(x) < 1:
        raise DomainError("acos is not differentiable at the boundary")

    return -1 / sqrt(1 - x * x)


def _dacosh(x):
    if _primal(x) == 1:
        raise DomainError("acosh is not differentiable at 1")

    return 1 / sqrt(x * x - 1)


_defderiv(exp, exp)
_defderiv(log, lambda x: 1 / x)
_defderiv(pow, _dpow_base, argnum=0)
_defderiv(pow, _dpow_exponent, argnum=1)
_defderiv(sqrt, _dsqrt)
_defderiv(sin, cos)
_defderiv(cos, lambda x: -sin(x))
_defderiv(tan, lambda x: 1 / (cos(x) * cos(x)))
_defderiv(asin, _dasin)
_defderiv(acos, _dacos)
_defderiv(atan, lambda x: 1 / (1 + x * x))
_defderiv(sinh, cosh)
_defderiv(cosh, sinh)
_defderiv(tanh, lambda x: 1 - tanh(x) * tanh(x))
_defderiv(asinh, lambda x: 1 / sqrt(x * x + 1))
_defderiv(acosh, _dacosh)
_defderiv(atanh, lambda x: 1 / (1 - x * x))
