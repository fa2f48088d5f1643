"""
Variate families module.

Named, validated, by-value construction of variates: parametrizations with
declared constraints, families converting them to a base parametrization, and
a process-wide register.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .configuration import configure_families_register, reset_families_register
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import VariateFamilyRegister
from .variate_family import ParametricVariate, VariateFamily

__all__ = [
    "VariateFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricVariate",
    "VariateFamily",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
]
