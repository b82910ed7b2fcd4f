import numbers
from typing import Self

import numpy as np

from fwdiff.context import getcontext
from fwdiff.typing import RealScalar, Scalar


class DomainError(ValueError):
    """Error raised when a function is evaluated outside its domain, or when its
    derivative does not exist at the given point."""


def _primal(value) -> RealScalar:
    while isinstance(value, Dual):
        value = value._real

    return value


def _isinteger(value) -> bool:
    if isinstance(value, numbers.Integral):
        return True

    return float(value).is_integer()


def _is_acceptable(value: object) -> bool:
    if isinstance(value, str | bytes | np.ndarray):
        return False

    return isinstance(value, Dual | numbers.Number) or hasattr(value, "__float__")


def _isclose(lhs, rhs, rel_tol, abs_tol) -> bool:
    if isinstance(lhs, Dual) or isinstance(rhs, Dual):
        if type(lhs) is not type(rhs) or lhs._level != rhs._level:
            return False

        return _isclose(lhs._real, rhs._real, rel_tol, abs_tol) and _isclose(
            lhs._grad, rhs._grad, rel_tol, abs_tol
        )

    if lhs == rhs:
        return True

    diff = abs(lhs - rhs)
    return diff <= max(rel_tol * max(abs(lhs), abs(rhs)), abs_tol)


class Dual[T: Scalar](Scalar):
    r"""Dual number carrying a value and its derivative.

    Parameters
    ----------
    real : T
        Primal value.
    grad : T
        Tangent, i.e., the derivative of `real` with respect to the seeded variable.

    Attributes
    ----------
    real : T
    grad : T
    level : int
        Nesting depth. This is 1 unless `real` itself is a dual number.

    Raises
    ------
    TypeError
        If `real` or `grad` is a string.

    Notes
    -----
    Instances of this class behave like elements of the ring

    .. math::

        T[\varepsilon]/(\varepsilon^2),

    where `real` and `grad` are the coefficients of :math:`1` and
    :math:`\varepsilon`. Instances are immutable and hashable.

    Branching on the value of a dual number (e.g. ``if x.real > 0``) is allowed, but
    the derivative information at the branch point is not captured. For this reason
    ordering operators are not defined.

    Examples
    --------
    >>> x = Dual(1.0, 1.0)
    >>> y = Dual.constant(2.0)
    >>> 2.0 * x * x + 3.0 * x * y + 4.0
    Dual(real=12.0, grad=10.0)
    """

    __slots__ = ("_real", "_grad", "_level")
    __array_ufunc__ = None
    _real: T
    _grad: T
    _level: int

    def __init__(self, real: T, grad: T):
        if isinstance(real, str) or isinstance(grad, str):
            raise TypeError("coefficients of a dual number must be numbers")

        object.__setattr__(self, "_real", real)
        object.__setattr__(self, "_grad", grad)
        level = (real._level + 1) if isinstance(real, Dual) else 1
        object.__setattr__(self, "_level", level)

    @property
    def real(self) -> T:
        return self._real

    @property
    def grad(self) -> T:
        return self._grad

    @property
    def level(self) -> int:
        return self._level

    @classmethod
    def constant(cls, value: T) -> Self:
        """Return a dual number that does not depend on the seeded variable.

        Examples
        --------
        >>> Dual.constant(3.0)
        Dual(real=3.0, grad=0.0)
        """
        return cls(value, value * 0)

    @classmethod
    def variable(cls, value: T, seed: T | None = None) -> Self:
        """Return a dual number representing the independent variable.

        Parameters
        ----------
        value : T
            Point at which the derivative is evaluated.
        seed : T, optional
            Tangent of the variable (the default is one).
        """
        if seed is None:
            seed = value * 0 + 1

        return cls(value, seed)

    @classmethod
    def variables(cls, *args: T, argnum: int = 0) -> tuple[Self, ...]:
        """Return dual numbers in which only the `argnum`-th argument is seeded.

        Examples
        --------
        >>> x, y = Dual.variables(1.0, 2.0, argnum=1)
        >>> x
        Dual(real=1.0, grad=0.0)
        >>> y
        Dual(real=2.0, grad=1.0)
        """
        if not -len(args) <= argnum < len(args):
            raise IndexError("argnum out of range")

        argnum %= len(args)
        result: list[Self] = []

        for i, arg in enumerate(args):
            result.append(cls.variable(arg) if i == argnum else cls.constant(arg))

        return tuple(result)

    def isclose(
        self,
        other: "Dual",
        *,
        rel_tol: float | None = None,
        abs_tol: float | None = None,
    ) -> bool:
        """Return ``True`` if both the values and the tangents are close to each other.

        Parameters
        ----------
        other : Dual
        rel_tol : float, optional
            Relative tolerance (the default is taken from the current context).
        abs_tol : float, optional
            Absolute tolerance (the default is taken from the current context).

        See Also
        --------
        fwdiff.context.localcontext
        """
        if not isinstance(other, Dual):
            raise TypeError

        context = getcontext()

        if rel_tol is None:
            rel_tol = context.rel_tol

        if abs_tol is None:
            abs_tol = context.abs_tol

        return _isclose(self, other, rel_tol, abs_tol)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__!r} object is immutable")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(real={self._real!r}, grad={self._grad!r})"

    def __str__(self) -> str:
        return f"{type(self).__name__}(real={self._real}, grad={self._grad})"

    def __format__(self, format_spec: str) -> str:
        real = format(self._real, format_spec)
        grad = format(self._grad, format_spec)
        return f"{type(self).__name__}(real={real}, grad={grad})"

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented

        if other._level != self._level:
            return False

        return other._real == self._real and other._grad == self._grad

    def __hash__(self) -> int:
        return hash((self._real, self._grad))

    def __add__(self, rhs) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        if not isinstance(rhs, Dual) or rhs._level < self._level:
            return self.__class__(self._real + rhs, self._grad)

        if rhs._level > self._level:
            return self.__class__(self + rhs._real, rhs._grad)

        return self.__class__(self._real + rhs._real, self._grad + rhs._grad)

    def __sub__(self, rhs) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        if not isinstance(rhs, Dual) or rhs._level < self._level:
            return self.__class__(self._real - rhs, self._grad)

        if rhs._level > self._level:
            return self.__class__(self - rhs._real, -rhs._grad)

        return self.__class__(self._real - rhs._real, self._grad - rhs._grad)

    def __mul__(self, rhs) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        if not isinstance(rhs, Dual) or rhs._level < self._level:
            return self.__class__(self._real * rhs, self._grad * rhs)

        if rhs._level > self._level:
            return self.__class__(self * rhs._real, self * rhs._grad)

        grad = self._grad * rhs._real + self._real * rhs._grad
        return self.__class__(self._real * rhs._real, grad)

    def __truediv__(self, rhs) -> Self:
        if not _is_acceptable(rhs):
            return NotImplemented

        if _primal(rhs) == 0:
            raise ZeroDivisionError("division by dual number with zero real part")

        if not isinstance(rhs, Dual) or rhs._level < self._level:
            return self.__class__(self._real / rhs, self._grad / rhs)

        if rhs._level > self._level:
            grad = -self * rhs._grad / (rhs._real * rhs._real)
            return self.__class__(self / rhs._real, grad)

        s = rhs._real * rhs._real
        grad = (self._grad * rhs._real - self._real * rhs._grad) / s
        return self.__class__(self._real / rhs._real, grad)

    def __pow__(self, rhs) -> Self:
        if isinstance(rhs, Dual):
            from fwdiff.function import pow

            return pow(self, rhs)

        if not _is_acceptable(rhs):
            return NotImplemented

        primal = _primal(self)

        if primal == 0 and rhs < 1:
            raise DomainError("zero base with exponent less than 1")

        if primal < 0 and not _isinteger(rhs):
            raise DomainError("negative base with non-integer exponent")

        if rhs == 1:
            grad = rhs * self._grad
        else:
            grad = rhs * self._real ** (rhs - 1) * self._grad

        return self.__class__(self._real**rhs, grad)

    def __neg__(self) -> Self:
        return self.__class__(-self._real, -self._grad)

    def __pos__(self) -> Self:
        return self.__class__(+self._real, +self._grad)

    def __abs__(self) -> Self:
        primal = _primal(self)

        if primal == 0:
            raise DomainError("abs is not differentiable at zero")

        if primal > 0:
            return self.__class__(+self._real, +self._grad)

        return self.__class__(-self._real, -self._grad)

    def __radd__(self, lhs) -> Self:
        return self.__add__(lhs)

    def __rsub__(self, lhs) -> Self:
        return self.__neg__().__add__(lhs)

    def __rmul__(self, lhs) -> Self:
        return self.__mul__(lhs)

    def __rtruediv__(self, lhs) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        if isinstance(lhs, Dual) and lhs._level >= self._level:
            return lhs.__truediv__(self)

        if _primal(self) == 0:
            raise ZeroDivisionError("division by dual number with zero real part")

        grad = -lhs * self._grad / (self._real * self._real)
        return self.__class__(lhs / self._real, grad)

    def __rpow__(self, lhs) -> Self:
        if not _is_acceptable(lhs):
            return NotImplemented

        from fwdiff.function import pow

        return pow(lhs, self)


def isclose(
    lhs: Dual, rhs: Dual, *, rel_tol: float | None = None, abs_tol: float | None = None
) -> bool:
    """Return ``True`` if two dual numbers are close to each other.

    This is a shorthand for ``lhs.isclose(rhs, rel_tol=rel_tol, abs_tol=abs_tol)``.

    Examples
    --------
    >>> isclose(Dual(1.0, 2.0), Dual(1.0 + 1e-12, 2.0))
    True
    """
    if not isinstance(lhs, Dual):
        raise TypeError

    return lhs.isclose(rhs, rel_tol=rel_tol, abs_tol=abs_tol)
