"""
Affine transformation of a variate.

Given a variate ``X`` construct ``Y = mu + sigma X``. Tilting ``Y`` by ``s``
is the same as tilting ``X`` by ``sigma s``, so every characteristic of ``Y``
follows from the inner variate by a change of variables. The inner model is
never inspected.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING

from esscher_core.types import VariateDomainError, check_order

if TYPE_CHECKING:
    from esscher_core.variates.variate import Variate


@dataclass(frozen=True, slots=True)
class Affine:
    """
    The variate ``mu + sigma X``.

    Parameters
    ----------
    variate : Variate
        Inner variate ``X``.
    mu : float, default 0.0
        Location.
    sigma : float, default 1.0
        Scale. ``0`` is replaced by ``1``. Only increasing maps are
        supported: the cdf and edf rules change variables in ``F_X`` and a
        negative scale would reverse the order.

    Raises
    ------
    VariateDomainError
        If ``sigma`` is negative.
    """

    variate: Variate
    mu: float = 0.0
    sigma: float = 1.0

    def __post_init__(self) -> None:
        if self.sigma == 0:
            object.__setattr__(self, "sigma", 1.0)
        if self.sigma < 0:
            raise VariateDomainError(f"Affine scale sigma must be positive, got {self.sigma}")

    def _standardize(self, x: float) -> float:
        return (x - self.mu) / self.sigma

    def cdf(self, x: float, s: float = 0.0, n: int = 0) -> float:
        """
        ``n``-th derivative of the transformed cumulative distribution function.

        ``F^Y_s(x) = F^X_{sigma s}((x - mu) / sigma)``, each derivative in ``x``
        contributes a factor ``1 / sigma``.
        """
        n = check_order(n)
        return self.variate.cdf(self._standardize(x), self.sigma * s, n) / self.sigma**n

    def cumulant(self, s: float, n: int = 0) -> float:
        """``kappa_Y(s) = mu s + kappa_X(sigma s)`` and its derivatives."""
        n = check_order(n)
        value = self.variate.cumulant(self.sigma * s, n) * self.sigma**n
        if n == 0:
            return value + self.mu * s
        if n == 1:
            return value + self.mu
        return value

    def edf(self, x: float, s: float = 0.0) -> float:
        """``d/ds F^X_{sigma s}((x - mu) / sigma)``."""
        return self.sigma * self.variate.edf(self._standardize(x), self.sigma * s)
