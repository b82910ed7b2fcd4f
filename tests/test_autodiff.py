import logging

import pytest

from fwdiff import Dual
from fwdiff import function as fwf
from fwdiff.autodiff import _primitive, deriv, grad, jacobian, jvp


def test_deriv():
    deriv1 = deriv(lambda x: (x + fwf.sin(x**2)) / x)
    deriv2 = deriv(deriv1)
    assert pytest.approx(deriv1(1.4), 1e-5) == -1.23095
    assert pytest.approx(deriv2(1.4), 1e-5) == -3.96476


def test_deriv_polynomial():
    df = deriv(lambda x: x**3 - 2 * x + 1)
    assert df(2.0) == 10.0
    assert df(-1.0) == 1.0


def test_deriv_passes_extra_arguments():
    df = deriv(lambda x, a: a * fwf.exp(x))
    assert pytest.approx(df(0.0, 3.0)) == 3.0


def test_deriv_constant_function():
    assert deriv(lambda x: 3.0)(1.0) == 0.0
    assert deriv(deriv(lambda x: 2 * x))(5.0) == 0.0


def test_deriv_higher_order_at_zero():
    assert deriv(deriv(lambda x: x**1))(0.0) == 0.0
    assert deriv(deriv(lambda x: x**2))(0.0) == 2.0
    assert deriv(deriv(deriv(lambda x: x**2)))(0.0) == 0.0
    assert deriv(deriv(deriv(lambda x: x**3)))(0.0) == 6.0
    assert deriv(deriv(lambda x: fwf.pow(x, 1)))(0.0) == 0.0
    assert deriv(deriv(lambda x: fwf.pow(x, 2)))(0.0) == 2.0


def test_deriv_constant_dual_exponent():
    df = deriv(lambda x: x ** Dual.constant(2.0))
    assert df(-2.0) == -4.0
    assert df(0.0) == 0.0


def test_grad():
    df = grad(fwf.pow)
    assert pytest.approx(df(4.5, -2.2), 1e-5) == (-0.0178707, 0.0549797)

    df = grad(lambda x, y: fwf.exp(y / x) + 2)
    assert pytest.approx(df(1.2, 3.5), 1e-5) == (-44.9157, 15.3997)


def test_grad_polynomial():
    df = grad(lambda x, y: 2 * x * x + 3 * x * y + 4)
    assert df(1.0, 2.0) == (10.0, 3.0)


def test_grad_unused_argument():
    df = grad(lambda x, y: x * 2.0)
    assert df(1.0, 5.0) == (2.0, 0.0)


def test_grad_requires_arguments():
    with pytest.raises(ValueError):
        grad(lambda: 1.0)()


def test_grad_runs_one_pass_per_argument(caplog):
    with caplog.at_level(logging.DEBUG, logger="fwdiff.autodiff"):
        grad(lambda x, y, z: x * y * z)(1.0, 2.0, 3.0)

    assert len([r for r in caplog.records if r.name == "fwdiff.autodiff"]) == 3


def test_jacobian():
    df = jacobian(lambda x, y: (fwf.sin(x * y), x**2 - fwf.cos(y)))
    matrix = df(2, 3)
    assert pytest.approx(matrix[0], 1e-5) == (2.88051, 1.92034)
    assert pytest.approx(matrix[1], 1e-5) == (4.00000, 0.14112)


def test_jacobian_shape():
    df = jacobian(lambda x, y, z: (x + y + z, x * z))
    matrix = df(1.0, 2.0, 3.0)
    assert len(matrix) == 2
    assert all(len(row) == 3 for row in matrix)
    assert matrix == ((1.0, 1.0, 1.0), (3.0, 0.0, 1.0))


def test_jvp():
    f = lambda x, y: 2 * x * x + 3 * x * y + 4  # noqa: E731
    assert jvp(f, (1.0, 2.0), (1.0, 0.0)) == (12.0, 10.0)
    assert jvp(f, (1.0, 2.0), (0.0, 1.0)) == (12.0, 3.0)
    assert jvp(f, (1.0, 2.0), (1.0, 1.0)) == (12.0, 13.0)


def test_jvp_length_mismatch():
    with pytest.raises(ValueError):
        jvp(lambda x, y: x * y, (1.0, 2.0), (1.0,))


def test_primitive_without_derivative():
    @_primitive
    def double(x, /):
        return 2 * x

    assert double(3.0) == 6.0
    assert double(Dual.constant(3.0)) == Dual(6.0, 0.0)

    with pytest.raises(ValueError):
        double(Dual(3.0, 1.0))
