"""
#####################################
Root finding (:mod:`fwdiff.optimize`)
#####################################

.. currentmodule:: fwdiff.optimize

This module provides root finding driven by automatic differentiation.

.. autosummary::
    :toctree: generated/

    newton
    NewtonResult

"""

from .rootfinding import NewtonResult, newton

__all__ = ["NewtonResult", "newton"]
