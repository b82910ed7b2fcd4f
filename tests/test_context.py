import pytest

from fwdiff import Dual
from fwdiff.context import Context, getcontext, localcontext, setcontext


def test_default():
    ctx = getcontext()
    assert ctx.rel_tol == 1e-9
    assert ctx.abs_tol == 0.0


def test_localcontext():
    x = Dual(1.0, 2.0)
    y = Dual(1.001, 2.0)
    assert not x.isclose(y)

    with localcontext(rel_tol=1e-2) as ctx:
        assert getcontext() is ctx
        assert ctx.abs_tol == 0.0
        assert x.isclose(y)

    assert getcontext().rel_tol == 1e-9
    assert not x.isclose(y)


def test_setcontext():
    old = getcontext()

    try:
        setcontext(Context(abs_tol=0.5))
        assert Dual(0.0, 0.0).isclose(Dual(0.4, -0.4))
    finally:
        setcontext(old)

    with pytest.raises(TypeError):
        setcontext(None)  # type: ignore


def test_invalid_tolerance():
    with pytest.raises(ValueError):
        Context(rel_tol=-1.0)

    with pytest.raises(ValueError):
        with localcontext(abs_tol=-1.0):
            pass


def test_copy():
    ctx = Context(1e-3, 1e-6)
    tmp = ctx.copy()
    assert tmp is not ctx
    assert (tmp.rel_tol, tmp.abs_tol) == (1e-3, 1e-6)
    assert repr(tmp) == "Context(rel_tol=0.001, abs_tol=1e-06)"
