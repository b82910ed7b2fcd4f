"""
######
fwdiff
######

.. currentmodule:: fwdiff

Forward-mode automatic differentiation by dual numbers.

Dual numbers
============

.. autosummary::
    :toctree: generated/

    Dual
    DomainError
    isclose

Differential operators
======================

.. autosummary::
    :toctree: generated/

    deriv
    grad
    jacobian
    jvp

"""

from .autodiff import deriv, grad, jacobian, jvp
from .dual import DomainError, Dual, isclose
from .function import (
    acos,
    acosh,
    asin,
    asinh,
    atan,
    atanh,
    cos,
    cosh,
    exp,
    ln,
    log,
    pow,
    sin,
    sinh,
    sqrt,
    tan,
    tanh,
)

__all__ = [
    "deriv",
    "grad",
    "jacobian",
    "jvp",
    "DomainError",
    "Dual",
    "isclose",
    "acos",
    "acosh",
    "asin",
    "asinh",
    "atan",
    "atanh",
    "cos",
    "cosh",
    "exp",
    "ln",
    "log",
    "pow",
    "sin",
    "sinh",
    "sqrt",
    "tan",
    "tanh",
]
