"""
Standard normal variate.

The Esscher transform of a standard normal by ``s`` is normal with mean
``s`` and unit variance, so every tilted characteristic is the untilted one
at the shifted point ``x - s``. Derivatives of the density use the
probabilists' Hermite polynomials.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass

from scipy.special import erf

from esscher_core.types import check_order
from esscher_core.variates.affine import Affine

_SQRT2 = math.sqrt(2.0)
_SQRT2PI = math.sqrt(2.0 * math.pi)


def hermite(n: int, x: float) -> float:
    """
    Probabilists' Hermite polynomial ``H_n(x)``.

    ``H_0 = 1``, ``H_1 = x`` and ``H_{k+1}(x) = x H_k(x) - k H_{k-1}(x)``.

    Parameters
    ----------
    n : int
        Non-negative degree.
    x : float
        Point of evaluation.

    Returns
    -------
    float
        ``H_n(x)``.
    """
    n = check_order(n)
    if n == 0:
        return 1.0

    h_prev, h = 1.0, x
    for k in range(1, n):
        h_prev, h = h, x * h - k * h_prev
    return h


@dataclass(frozen=True, slots=True)
class StandardNormal:
    """
    Normal variate with mean 0 and variance 1.

    Use :class:`~esscher_core.variates.affine.Affine` or :func:`normal_variate` for
    other means and standard deviations.
    """

    def cdf(self, x: float, s: float = 0.0, n: int = 0) -> float:
        """
        ``n``-th derivative of the tilted cdf ``Phi(x - s)``.

        For ``n >= 2`` this is ``(-1)^(n-1) phi(x - s) H_{n-1}(x - s)``.
        """
        n = check_order(n)
        z = x - s

        if n == 0:
            return float((1.0 + erf(z / _SQRT2)) / 2.0)

        phi = math.exp(-z * z / 2.0) / _SQRT2PI
        if n == 1:
            return phi

        sign = 1.0 if n % 2 else -1.0
        return sign * phi * hermite(n - 1, z)

    def cumulant(self, s: float, n: int = 0) -> float:
        """``kappa(s) = s^2 / 2``."""
        n = check_order(n)
        if n == 0:
            return s * s / 2.0
        if n == 1:
            return s
        if n == 2:
            return 1.0
        return 0.0

    def edf(self, x: float, s: float = 0.0) -> float:
        # only the shift x - s depends on s
        return -self.cdf(x, s, 1)


def normal_variate(mu: float = 0.0, sigma: float = 1.0) -> Affine:
    """Normal variate with mean ``mu`` and standard deviation ``sigma``."""
    return Affine(StandardNormal(), mu, sigma)
