"""
Special functions subpackage

Numerical building blocks that carry no probability semantics:

- generalized hypergeometric series and its convergence policy
  (:mod:`.hypergeometric`);
- complete and incomplete beta functions with shape partials (:mod:`.beta_functions`).
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .beta_functions import (
    BETA_SERIES_POLICY,
    beta,
    beta_da,
    beta_inc,
    beta_inc_da,
    beta_inc_db,
    beta_inc_derivative,
)
from .hypergeometric import (
    SQRT_EPS,
    ConvergencePolicy,
    HypergeometricSeries,
    SeriesResult,
    hypergeometric_pfq,
    hypergeometric_pfq_result,
)

__all__ = [
    # hypergeometric series
    "SQRT_EPS",
    "ConvergencePolicy",
    "HypergeometricSeries",
    "SeriesResult",
    "hypergeometric_pfq",
    "hypergeometric_pfq_result",
    # beta functions
    "BETA_SERIES_POLICY",
    "beta",
    "beta_da",
    "beta_inc",
    "beta_inc_da",
    "beta_inc_db",
    "beta_inc_derivative",
]
