"""
###############################
Context (:mod:`fwdiff.context`)
###############################

.. currentmodule:: fwdiff.context

This module provides the settings shared by the whole library. At present these are
the default tolerances used when dual numbers are compared approximately.

.. autosummary::
    :toctree: generated/

    Context
    getcontext
    localcontext
    setcontext

"""

import contextlib
import contextvars
from typing import Self


class Context:
    """Create a new context.

    Parameters
    ----------
    rel_tol : float, default=1e-9
        Default relative tolerance of :meth:`fwdiff.Dual.isclose`.
    abs_tol : float, default=0.0
        Default absolute tolerance of :meth:`fwdiff.Dual.isclose`.

    Raises
    ------
    ValueError
        If either tolerance is negative.
    """

    __slots__ = ("_rel_tol", "_abs_tol")
    _rel_tol: float
    _abs_tol: float

    def __init__(self, rel_tol: float = 1e-9, abs_tol: float = 0.0):
        if rel_tol < 0 or abs_tol < 0:
            raise ValueError("tolerances must be non-negative")

        self._rel_tol = rel_tol
        self._abs_tol = abs_tol

    @property
    def rel_tol(self) -> float:
        return self._rel_tol

    @property
    def abs_tol(self) -> float:
        return self._abs_tol

    def copy(self) -> Self:
        return self.__class__(self._rel_tol, self._abs_tol)

    def __repr__(self):
        name = type(self).__name__
        return f"{name}(rel_tol={self._rel_tol!r}, abs_tol={self._abs_tol!r})"

    def __copy__(self) -> Self:
        return self.copy()


_var: contextvars.ContextVar[Context] = contextvars.ContextVar("fwdiff")


def getcontext() -> Context:
    """Return the current context for the active thread."""
    if context := _var.get(None):
        return context

    context = Context()
    _var.set(context)
    return context


def setcontext(ctx: Context) -> None:
    """Set the current context for the active thread to `ctx`."""
    if not isinstance(ctx, Context):
        raise TypeError

    _var.set(ctx)


@contextlib.contextmanager
def localcontext(
    ctx: Context | None = None,
    *,
    rel_tol: float | None = None,
    abs_tol: float | None = None,
):
    """Return a context manager that will set the current context for the active thread
    to a copy of `ctx` on entry to the with-statement and restore the previous context
    when exiting the with-statement.

    Examples
    --------
    >>> from fwdiff import Dual
    >>> x = Dual(1.0, 2.0)
    >>> y = Dual(1.001, 2.0)
    >>> x.isclose(y)
    False
    >>> with localcontext(rel_tol=1e-2):
    ...     x.isclose(y)
    True
    """
    if ctx is None:
        ctx = getcontext()

    if rel_tol is None:
        rel_tol = ctx.rel_tol

    if abs_tol is None:
        abs_tol = ctx.abs_tol

    ctx = Context(rel_tol, abs_tol)
    token = _var.set(ctx)

    try:
        yield ctx
    finally:
        _var.reset(token)
