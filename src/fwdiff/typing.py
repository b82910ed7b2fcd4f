"""
#############################
Typing (:mod:`fwdiff.typing`)
#############################

This module provides the protocols that coefficients of dual numbers are expected to
satisfy.

.. autoclass:: Scalar
    :show-inheritance:
    :no-members:

.. autoclass:: RealScalar
    :show-inheritance:
    :no-members:

"""

from abc import abstractmethod
from typing import Protocol, Self


class Scalar(Protocol):
    """Protocol for field-like coefficients.

    Four arithmetic operations, power, and sign changes must be defined, and the
    arithmetic operations must accept integers on either side. :class:`float`,
    :class:`fractions.Fraction`, NumPy floating scalars, mpmath numbers, and
    :class:`fwdiff.Dual` itself satisfy this protocol.
    """

    __slots__ = ()

    @abstractmethod
    def __add__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __sub__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __mul__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __truediv__(self, rhs: Self | int) -> Self: ...

    @abstractmethod
    def __pow__(self, rhs: int) -> Self: ...

    @abstractmethod
    def __radd__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rsub__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rmul__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __rtruediv__(self, lhs: Self | int) -> Self: ...

    @abstractmethod
    def __neg__(self) -> Self: ...

    @abstractmethod
    def __pos__(self) -> Self: ...


class RealScalar(Scalar, Protocol):
    """Protocol for :class:`Scalar` ordered like a real number.

    Domain checks of the elementary functions and approximate comparison of dual
    numbers compare the innermost coefficients with integers, so those coefficients
    must satisfy this protocol.
    """

    __slots__ = ()

    @abstractmethod
    def __lt__(self, rhs: Self | int) -> bool: ...

    @abstractmethod
    def __le__(self, rhs: Self | int) -> bool: ...

    @abstractmethod
    def __abs__(self) -> Self: ...
