"""
Generalized logistic variate.

The generalized logistic law with shape parameters ``a, b > 0`` has density

    f(x) = e^{-b x} (1 + e^{-x})^{-(a + b)} / B(a, b)

and cdf ``I_u(a, b)`` with ``u = 1 / (1 + e^{-x})``. Writing ``u`` and
``1 - u`` for the two logistic sigmoids, the density is
``u^a (1 - u)^b / B(a, b)``, which is how it is evaluated here.

The Esscher transform by ``s`` multiplies the density by ``e^{s x}`` and so
moves the shape parameters to ``(a + s, b - s)``; it exists for
``-a < s < b``.

Higher derivatives of the cdf are

    (d/dx)^n F(x) = u^a (1 - u)^b sum_{k < n} A(n - 1, k) (1 - u)^k / B(a, b)

with ``A(0, 0) = 1`` and

    A(n, k) = -(b + k) A(n - 1, k) + (a + b + k - 1) A(n - 1, k - 1).
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass

from scipy import special as _sp_special

from esscher_core.special.beta_functions import beta_inc, beta_inc_da
from esscher_core.types import VariateDomainError, check_order
from esscher_core.variates.affine import Affine

LOGISTIC_STD = math.pi / math.sqrt(3.0)
"""Standard deviation of the standard (``a = b = 1``) logistic law."""


def logistic_coefficients(a: float, b: float, n: int) -> list[float]:
    """
    Row ``[A(a, b, n, k) for k in 0..n]`` of the derivative coefficient table.

    Parameters
    ----------
    a, b : float
        Shape parameters.
    n : int
        Row index.

    Returns
    -------
    list[float]
        ``n + 1`` coefficients.
    """
    n = check_order(n)
    row = [1.0]
    for m in range(1, n + 1):
        next_row = [0.0] * (m + 1)
        for k in range(m + 1):
            if k < m:
                next_row[k] -= (b + k) * row[k]
            if k > 0:
                next_row[k] += (a + b + k - 1) * row[k - 1]
        row = next_row
    return row


def logistic_coefficient(a: float, b: float, n: int, k: int) -> float:
    """Coefficient ``A(a, b, n, k)``, zero for ``k > n``."""
    if k < 0 or k > n:
        return 0.0
    return logistic_coefficients(a, b, n)[k]


def logistic_cdf(a: float, b: float, x: float, n: int = 0) -> float:
    """
    ``n``-th derivative of the untilted generalized logistic cdf.

    Parameters
    ----------
    a, b : float
        Shape parameters.
    x : float
        Point of evaluation.
    n : int, default 0
        Derivative order, ``0`` is the cdf and ``1`` the density.

    Returns
    -------
    float
        ``(d/dx)^n I_{u(x)}(a, b)``.
    """
    n = check_order(n)
    if n == 0:
        return beta_inc(a, b, float(_sp_special.expit(x)))

    log_u = float(_sp_special.log_expit(x))
    log_v = float(_sp_special.log_expit(-x))
    v = math.exp(log_v)

    poly = 0.0
    for coefficient in reversed(logistic_coefficients(a, b, n - 1)):
        poly = poly * v + coefficient

    return math.exp(a * log_u + b * log_v - _sp_special.betaln(a, b)) * poly


@dataclass(frozen=True, slots=True)
class Logistic:
    """
    Generalized logistic variate.

    Parameters
    ----------
    a : float, default 1.0
        First shape parameter, positive.
    b : float, default 1.0
        Second shape parameter, positive.

    Raises
    ------
    VariateDomainError
        If a shape parameter is not positive.
    """

    a: float = 1.0
    b: float = 1.0

    def __post_init__(self) -> None:
        if not self.a > 0:
            raise VariateDomainError(f"Shape parameter a must be positive, got {self.a}")
        if not self.b > 0:
            raise VariateDomainError(f"Shape parameter b must be positive, got {self.b}")

    def _check_tilt(self, s: float) -> None:
        if not -self.a < s < self.b:
            raise VariateDomainError(
                f"Esscher parameter s = {s} is outside ({-self.a}, {self.b})"
            )

    def cdf(self, x: float, s: float = 0.0, n: int = 0) -> float:
        """Tilted cdf derivative, the untilted one at shapes ``(a + s, b - s)``."""
        self._check_tilt(s)
        return logistic_cdf(self.a + s, self.b - s, x, n)

    def cumulant(self, s: float, n: int = 0) -> float:
        """
        ``kappa(s) = log B(a + s, b - s) / B(a, b)`` and its derivatives.

        For ``n >= 1`` this is ``psi^(n-1)(a + s) + (-1)^n psi^(n-1)(b - s)``.
        """
        self._check_tilt(s)
        n = check_order(n)

        if n == 0:
            return float(
                _sp_special.gammaln(self.a + s)
                - _sp_special.gammaln(self.a)
                + _sp_special.gammaln(self.b - s)
                - _sp_special.gammaln(self.b)
            )

        sign = -1.0 if n % 2 else 1.0
        return float(
            _sp_special.polygamma(n - 1, self.a + s)
            + sign * _sp_special.polygamma(n - 1, self.b - s)
        )

    def edf(self, x: float, s: float = 0.0) -> float:
        """
        ``d/ds I_u(a + s, b - s)``, the a-partial minus the b-partial.

        The b-partial is taken through the reflection
        ``I_u(a, b) = 1 - I_{1-u}(b, a)``. Both sigmoids are computed directly
        and each is passed as the other's complement.
        """
        self._check_tilt(s)
        a = self.a + s
        b = self.b - s
        u = float(_sp_special.expit(x))
        v = float(_sp_special.expit(-x))

        return beta_inc_da(a, b, u, complement=v) + beta_inc_da(b, a, v, complement=u)


def logistic_variate(mu: float = 0.0, sigma: float = 1.0) -> Affine:
    """
    Standard logistic variate with mean ``mu`` and standard deviation ``sigma``.

    ``sigma == 0`` is replaced by ``1``.
    """
    if sigma == 0:
        sigma = 1.0
    return Affine(Logistic(), mu, sigma / LOGISTIC_STD)
