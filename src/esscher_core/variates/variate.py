"""
Variate Interface
=================

A random variable ``X`` is determined by its cumulative distribution function
``F(x) = P(X <= x)``. Its cumulant is ``kappa(s) = log E[exp(s X)]`` and its
Esscher transform ``X_s`` has

    F_s(x) = P(X_s <= x) = E[1(X <= x) exp(s X - kappa(s))].

Every variate implements the derivatives of the tilted cdf, the cumulant and
the edf, the derivative of ``F_s(x)`` with respect to ``s``.

This module defines the :class:`Variate` protocol and free helpers that
dispatch to it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Protocol, runtime_checkable


@runtime_checkable
class Variate(Protocol):
    """Public variate interface used by the affine combinator and families."""

    def cdf(self, x: float, s: float = 0.0, n: int = 0) -> float:
        """``n``-th derivative in ``x`` of the Esscher transformed cdf."""
        ...

    def cumulant(self, s: float, n: int = 0) -> float:
        """``n``-th derivative of ``kappa(s) = log E[exp(s X)]``."""
        ...

    def edf(self, x: float, s: float = 0.0) -> float:
        """Derivative of the Esscher transformed cdf with respect to ``s``."""
        ...


def cdf(variate: Variate, x: float, s: float = 0.0, n: int = 0) -> float:
    """Return ``variate.cdf(x, s, n)``."""
    return variate.cdf(x, s, n)


def pdf(variate: Variate, x: float, s: float = 0.0) -> float:
    """Esscher transformed density, the first derivative of the cdf."""
    return variate.cdf(x, s, 1)


def cumulant(variate: Variate, s: float, n: int = 0) -> float:
    """Return ``variate.cumulant(s, n)``."""
    return variate.cumulant(s, n)


def edf(variate: Variate, x: float, s: float = 0.0) -> float:
    """Return ``variate.edf(x, s)``."""
    return variate.edf(x, s)


def mean(variate: Variate) -> float:
    """Mean, the first derivative of the cumulant at zero."""
    return variate.cumulant(0.0, 1)


def variance(variate: Variate) -> float:
    """Variance, the second derivative of the cumulant at zero."""
    return variate.cumulant(0.0, 2)
