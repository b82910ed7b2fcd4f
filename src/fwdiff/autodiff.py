import functools
import logging
from collections.abc import Callable, Sequence
from typing import Any

from fwdiff.dual import Dual

logger = logging.getLogger(__name__)


def _tangent(value: Any, level: int) -> Any:
    if isinstance(value, Dual) and value.level == level:
        return value.grad

    return value * 0


def _primal(value: Any, level: int) -> Any:
    if isinstance(value, Dual) and value.level == level:
        return value.real

    return value


def deriv[T, **P](fun: Callable[P, T]) -> Callable[P, T]:
    """Return a function that evaluates the derivative of the univariate scalar-valued
    function.

    Parameters
    ----------
    fun : Callable
        Differentiated function. Arguments after the first are passed through as
        constants.

    Returns
    -------
    Callable
        Derivative of `fun`.

    Warnings
    --------
    Conditional branches in `fun` are evaluated on the value only; the derivative at a
    branch point is that of the branch taken.

    Examples
    --------
    >>> from fwdiff import function as fwf
    >>> f = lambda x: x**2 + fwf.sqrt(x + 3)
    >>> df = deriv(f)
    >>> print(format(df(1.2), ".6g"))
    2.64398

    The second-order derivative can be obtained in the same manner.

    >>> ddf = deriv(df)
    >>> print(format(ddf(1.2), ".6g"))
    1.97095
    """

    def result(x, /, *args, **kwargs):
        var = Dual.variable(x)
        logger.debug("deriv: forward pass for %s", getattr(fun, "__name__", fun))
        tmp: Any = fun(var, *args, **kwargs)  # type: ignore
        return _tangent(tmp, var.level)

    return result  # type: ignore


def grad[T, **P](fun: Callable[P, T]) -> Callable[P, tuple[T, ...]]:
    """Return a function that evaluates the gradient of the multivariate scalar-valued
    function.

    The gradient is obtained by one forward pass per argument, each seeding exactly one
    argument.

    Parameters
    ----------
    fun : Callable
        Differentiated function.

    Returns
    -------
    Callable
        Gradient of `fun`.

    Examples
    --------
    >>> f = lambda x, y: 2 * x * x + 3 * x * y + 4
    >>> grad(f)(1.0, 2.0)
    (10.0, 3.0)
    """

    def result(*args, **kwargs):
        if not args:
            raise ValueError("at least one argument is required")

        partials = []

        for argnum in range(len(args)):
            logger.debug("grad: forward pass %d of %d", argnum + 1, len(args))
            seeded = Dual.variables(*args, argnum=argnum)
            tmp: Any = fun(*seeded, **kwargs)  # type: ignore
            partials.append(_tangent(tmp, seeded[argnum].level))

        return tuple(partials)

    return result  # type: ignore


def jacobian[T: tuple, **P](fun: Callable[P, T]) -> Callable[P, tuple[T, ...]]:
    """Return a function that evaluates the Jacobian matrix of the multivariate
    vector-valued function.

    The element ``[i][j]`` of the result is the partial derivative of the `i`-th
    output with respect to the `j`-th argument. One forward pass is performed per
    argument.

    Parameters
    ----------
    fun : Callable
        Differentiated function returning a sequence.

    Returns
    -------
    Callable
        Fréchet derivative of `fun`.

    Examples
    --------
    >>> f = lambda x, y: (x * y, x - y)
    >>> jacobian(f)(2.0, 3.0)
    ((3.0, 2.0), (1.0, -1.0))
    """

    def result(*args, **kwargs):
        if not args:
            raise ValueError("at least one argument is required")

        columns = []

        for argnum in range(len(args)):
            logger.debug("jacobian: forward pass %d of %d", argnum + 1, len(args))
            seeded = Dual.variables(*args, argnum=argnum)
            tmp: Any = fun(*seeded, **kwargs)  # type: ignore
            level = seeded[argnum].level
            columns.append(tuple(_tangent(y, level) for y in tmp))

        return tuple(zip(*columns))

    return result  # type: ignore


def jvp[T](
    fun: Callable[..., T], primals: Sequence[Any], tangents: Sequence[Any]
) -> tuple[T, T]:
    """Evaluate the function and its directional derivative in a single forward pass.

    Parameters
    ----------
    fun : Callable
        Differentiated function.
    primals : Sequence
        Point at which `fun` is evaluated.
    tangents : Sequence
        Direction in which `fun` is differentiated.

    Returns
    -------
    r0
        Value of `fun` at `primals`.
    r1
        Directional derivative of `fun` at `primals` along `tangents`.

    Raises
    ------
    ValueError
        If `primals` and `tangents` have different lengths.

    Examples
    --------
    >>> f = lambda x, y: 2 * x * x + 3 * x * y + 4
    >>> jvp(f, (1.0, 2.0), (1.0, 1.0))
    (12.0, 13.0)
    """
    if len(primals) != len(tangents):
        raise ValueError("primals and tangents must have the same length")

    if not primals:
        raise ValueError("at least one argument is required")

    duals = [Dual(x, dx) for x, dx in zip(primals, tangents)]
    level = max(x.level for x in duals)
    logger.debug("jvp: forward pass over %d arguments", len(duals))
    tmp: Any = fun(*duals)
    return _primal(tmp, level), _tangent(tmp, level)


def _defderiv[**P](
    fun: Callable[P, Any], deriv: Callable[P, Any], *, argnum: int = 0
) -> None:
    if "_fwdiff_is_primitive" not in fun.__dict__:
        raise ValueError(f"{fun.__name__} is not a primitive")

    fun.__dict__["_fwdiff_derivs"][argnum] = deriv


def _primitive[T, **P](fun: Callable[P, T]) -> Callable[P, T]:
    derivs: dict[int, Callable] = {}

    @functools.wraps(fun)
    def wrapper(*args, **kwargs):
        if not any(isinstance(x, Dual) for x in args):
            return fun(*args, **kwargs)

        max_level = max(x.level for x in args if isinstance(x, Dual))
        args_real: list = []
        args_dual: list[tuple[int, Dual]] = []

        for argnum, arg in enumerate(args):
            if not isinstance(arg, Dual) or arg.level < max_level:
                args_real.append(arg)
                continue

            args_real.append(arg.real)
            args_dual.append((argnum, arg))

        real = wrapper(*args_real, **kwargs)
        grad = None

        for argnum, arg in args_dual:
            # a zero tangent contributes nothing, even where the partial is undefined
            if not isinstance(arg.grad, Dual) and arg.grad == 0:
                continue

            if argnum not in derivs:
                raise ValueError(
                    f"{fun.__name__} is not differentiable w.r.t. argument {argnum}"
                )

            tmp = derivs[argnum](*args_real, **kwargs) * arg.grad
            grad = tmp if grad is None else grad + tmp

        if grad is None:
            grad = real * 0

        return args_dual[0][1].__class__(real, grad)

    wrapper.__dict__["_fwdiff_is_primitive"] = True
    wrapper.__dict__["_fwdiff_derivs"] = derivs
    return wrapper  # type: ignore
