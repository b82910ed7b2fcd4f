import logging
import math

import mpmath
import pytest

from fwdiff import function as fwf
from fwdiff.optimize.rootfinding import newton


def test_newton():
    r = newton(lambda x: x**2 - 2, 1.0)
    assert r.status == "SUCCESS"
    assert pytest.approx(r.root, 1e-12) == math.sqrt(2)


def test_newton_transcendental():
    r = newton(lambda x: fwf.cos(x) - x, 1.0)
    assert r.status == "SUCCESS"
    assert pytest.approx(r.root, 1e-10) == 0.7390851332151607


def test_newton_fprime():
    r = newton(lambda x: x**3 - 8, 3.0, fprime=lambda x: 3 * x**2)
    assert r.status == "SUCCESS"
    assert pytest.approx(r.root) == 2.0


def test_newton_exact_root():
    r = newton(lambda x: x - 1.0, 1.0)
    assert r.status == "SUCCESS"
    assert r.iterations == 0


def test_newton_failure(caplog):
    with caplog.at_level(logging.WARNING, logger="fwdiff.optimize.rootfinding"):
        r = newton(lambda x: x**2 + 1, 0.0)

    assert r.status == "FAILURE"
    assert r.message == "derivative vanished"
    assert caplog.records

    r = newton(lambda x: x**2 + 1, 3.0, max_iter=5)
    assert r.status == "FAILURE"


def test_newton_mpmath():
    with mpmath.workdps(50):
        r = newton(lambda x: x**2 - 2, mpmath.mpf(1), xtol=mpmath.mpf(10) ** -40)
        assert r.status == "SUCCESS"
        assert abs(r.root - mpmath.sqrt(2)) < mpmath.mpf(10) ** -40


def test_newton_nonfinite_step():
    r = newton(lambda x: 1e300 * x + 1e300, 1.0, fprime=lambda x: 1e-300)
    assert r.status == "FAILURE"
    assert r.message == "step is not finite"

    r = newton(lambda x: mpmath.inf, mpmath.mpf(1), fprime=lambda x: mpmath.mpf(1))
    assert r.status == "FAILURE"
    assert r.message == "step is not finite"


def test_newton_invalid_arguments():
    with pytest.raises(ValueError):
        newton(lambda x: x, 1.0, max_iter=0)

    with pytest.raises(ValueError):
        newton(lambda x: x, 1.0, xtol=-1.0)
