"""
Finite discrete variate.

``X`` takes value ``x_i`` with probability ``p_i``. The Esscher transform
reweights the atoms to

    w_i(s) = p_i exp(s x_i - kappa(s)),   kappa(s) = log sum_i p_i exp(s x_i)

and all characteristics are finite sums over the tilted weights. Derivatives
of the cdf follow the same distributional convention as
:class:`~esscher_core.variates.constant.Constant`.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy.special import logsumexp

from esscher_core.types import VariateDomainError, check_order

if TYPE_CHECKING:
    from esscher_core.types import NumericArray

PROBABILITY_TOLERANCE = 1e-12
"""Allowed deviation of the total probability from one."""


@dataclass(frozen=True, slots=True, eq=False)
class Discrete:
    """
    Variate with finitely many atoms.

    Parameters
    ----------
    xs : Sequence[float] or NumericArray
        Values of the variate.
    ps : Sequence[float] or NumericArray
        Probabilities of the values.

    Raises
    ------
    VariateDomainError
        If the arrays are empty, differ in length, contain non-finite
        entries, have negative probabilities or probabilities not summing
        to one.
    """

    xs: NumericArray
    ps: NumericArray

    def __post_init__(self) -> None:
        xs = np.array(self.xs, dtype=float).ravel()
        ps = np.array(self.ps, dtype=float).ravel()

        if xs.size == 0:
            raise VariateDomainError("Discrete variate needs at least one atom")
        if xs.size != ps.size:
            raise VariateDomainError(
                f"Values and probabilities differ in length: {xs.size} != {ps.size}"
            )
        if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(ps))):
            raise VariateDomainError("Values and probabilities must be finite")
        if np.any(ps < 0):
            raise VariateDomainError("Probabilities must be non-negative")
        total = float(ps.sum())
        if abs(total - 1.0) > PROBABILITY_TOLERANCE:
            raise VariateDomainError(f"Probabilities must sum to 1, got {total}")

        xs.setflags(write=False)
        ps.setflags(write=False)
        object.__setattr__(self, "xs", xs)
        object.__setattr__(self, "ps", ps)

    def _log_mgf(self, s: float) -> float:
        if s == 0:
            # probabilities sum to one
            return 0.0
        return float(logsumexp(s * self.xs, b=self.ps))

    def weights(self, s: float = 0.0) -> NumericArray:
        """Esscher transformed probabilities ``p_i exp(s x_i - kappa(s))``."""
        return cast("NumericArray", self.ps * np.exp(s * self.xs - self._log_mgf(s)))

    def cdf(self, x: float, s: float = 0.0, n: int = 0) -> float:
        n = check_order(n)
        if n == 0:
            return float(self.weights(s)[self.xs <= x].sum())
        if n == 1:
            return math.inf if bool(np.any((self.xs == x) & (self.ps > 0))) else 0.0
        return math.nan

    def cumulant(self, s: float, n: int = 0) -> float:
        """
        ``kappa(s)`` and its derivatives.

        Derivatives are the cumulants of the tilted law, obtained from its
        central moments with

            kappa_n = mu_n - sum_{j=2}^{n-2} C(n - 1, j - 1) kappa_j mu_{n-j}
        """
        n = check_order(n)
        if n == 0:
            return self._log_mgf(s)

        w = self.weights(s)
        m1 = float(np.dot(w, self.xs))
        if n == 1:
            return m1

        d = self.xs - m1
        central = [1.0, 0.0] + [float(np.dot(w, d**j)) for j in range(2, n + 1)]
        kappas = [0.0, m1]
        for order in range(2, n + 1):
            value = central[order]
            for j in range(2, order - 1):
                value -= math.comb(order - 1, j - 1) * kappas[j] * central[order - j]
            kappas.append(value)
        return kappas[n]

    def edf(self, x: float, s: float = 0.0) -> float:
        """``E_s[1(X <= x) (X - kappa'(s))]``."""
        w = self.weights(s)
        m1 = float(np.dot(w, self.xs))
        below = self.xs <= x
        return float(np.dot(w[below], self.xs[below] - m1))
