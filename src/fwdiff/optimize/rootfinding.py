import dataclasses
import logging
import math
from collections.abc import Callable
from typing import Any, Literal

from fwdiff.autodiff import deriv

logger = logging.getLogger(__name__)


@dataclasses.dataclass(frozen=True, slots=True)
class NewtonResult[T]:
    """Output of :func:`newton`.

    Attributes
    ----------
    status : Literal["FAILURE", "SUCCESS"]
    root
        Last iterate. This is an approximate root if `status` is ``"SUCCESS"``.
    iterations : int
        Number of Newton steps taken.
    message : str
        Report from the solver. Typically a reason for a failure.
    """

    status: Literal["FAILURE", "SUCCESS"]
    root: T
    iterations: int
    message: str


def newton[T](
    fun: Callable[[T], T],
    x0: T,
    fprime: Callable[[T], T] | None = None,
    xtol: Any = 1e-12,
    ftol: Any = 0.0,
    max_iter: int = 50,
) -> NewtonResult[T]:
    """Find a root of the univariate scalar-valued function by Newton's method.

    Parameters
    ----------
    fun : Callable
        Function to find a root of.
    x0
        Initial guess.
    fprime : Callable, optional
        Derivative of `fun` (the default is ``deriv(fun)``).
    xtol : default=1e-12
        The iteration stops when the absolute value of a step falls below `xtol`.
    ftol : default=0.0
        The iteration stops when the absolute value of `fun` falls below `ftol`.
    max_iter : int, default=50
        Maximum number of iterations.

    Returns
    -------
    NewtonResult

    Raises
    ------
    ValueError
        If `max_iter` is not positive or a tolerance is negative.

    See Also
    --------
    fwdiff.autodiff.deriv

    Examples
    --------
    >>> r = newton(lambda x: x**2 - 2, 1.0)
    >>> r.status
    'SUCCESS'
    >>> print(format(r.root, ".12f"))
    1.414213562373
    """
    if max_iter <= 0:
        raise ValueError("max_iter must be positive")

    if xtol < 0 or ftol < 0:
        raise ValueError("tolerances must be non-negative")

    if fprime is None:
        fprime = deriv(fun)

    x = x0

    for i in range(max_iter):
        y = fun(x)

        if abs(y) <= ftol:
            return NewtonResult("SUCCESS", x, i, "function value within tolerance")

        dy = fprime(x)

        if dy == 0:
            logger.warning("newton: derivative vanished at %r", x)
            return NewtonResult("FAILURE", x, i, "derivative vanished")

        step = y / dy

        if not math.isfinite(step):
            logger.warning("newton: non-finite step at %r", x)
            return NewtonResult("FAILURE", x, i, "step is not finite")

        x = x - step
        logger.debug("newton: iteration %d, x=%r, step=%r", i + 1, x, step)

        if abs(step) <= xtol:
            return NewtonResult("SUCCESS", x, i + 1, "step within tolerance")

    logger.warning("newton: no convergence after %d iterations", max_iter)
    return NewtonResult("FAILURE", x, max_iter, "maximum number of iterations reached")
