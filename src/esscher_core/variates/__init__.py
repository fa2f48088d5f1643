"""
Variates subpackage

Random variates exposing Esscher transformed cdf derivatives, cumulant
derivatives and the edf:

- variate protocol and free helpers (:mod:`.variate`);
- affine combinator ``mu + sigma X`` (:mod:`.affine`);
- standard normal (:mod:`.normal`);
- generalized logistic (:mod:`.logistic`);
- constant (:mod:`.constant`) and finite discrete (:mod:`.discrete`) laws.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from .affine import Affine
from .constant import Constant
from .discrete import Discrete
from .logistic import (
    LOGISTIC_STD,
    Logistic,
    logistic_cdf,
    logistic_coefficient,
    logistic_coefficients,
    logistic_variate,
)
from .normal import StandardNormal, hermite, normal_variate
from .variate import Variate, cdf, cumulant, edf, mean, pdf, variance

__all__ = [
    # protocol and helpers
    "Variate",
    "cdf",
    "pdf",
    "cumulant",
    "edf",
    "mean",
    "variance",
    # combinator
    "Affine",
    # models
    "StandardNormal",
    "hermite",
    "normal_variate",
    "LOGISTIC_STD",
    "Logistic",
    "logistic_variate",
    "logistic_cdf",
    "logistic_coefficient",
    "logistic_coefficients",
    "Constant",
    "Discrete",
]
