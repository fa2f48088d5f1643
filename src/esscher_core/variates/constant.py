"""
Constant (degenerate) variate.

``X = c`` almost surely, so ``F_s(x) = 1(c <= x)`` does not depend on ``s``.
Derivatives of the cdf are distributions rather than functions: the first is
the Dirac delta at ``c``, reported as ``inf`` at ``x == c`` exactly and ``0``
elsewhere; higher ones have no pointwise value and are reported as NaN.

The mass point is matched with exact floating-point equality, so a point
produced by arithmetic (for example through an affine transformation) may
miss it by one ulp.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from dataclasses import dataclass

from esscher_core.types import check_order


@dataclass(frozen=True, slots=True)
class Constant:
    """
    Variate equal to ``c`` with probability one.

    Parameters
    ----------
    c : float
        The value.
    """

    c: float

    def cdf(self, x: float, s: float = 0.0, n: int = 0) -> float:
        n = check_order(n)
        if n == 0:
            return 1.0 if self.c <= x else 0.0
        if n == 1:
            return math.inf if x == self.c else 0.0
        return math.nan

    def cumulant(self, s: float, n: int = 0) -> float:
        """``kappa(s) = c s``."""
        n = check_order(n)
        if n == 0:
            return self.c * s
        if n == 1:
            return self.c
        return 0.0

    def edf(self, x: float, s: float = 0.0) -> float:
        return 0.0
