"""
Variate Families Configuration
==============================

This module configures the built-in variate families:

- :class:`Normal`: affine transformations of the standard normal.
- :class:`Logistic`: generalized logistic laws, or standard logistic by mean and deviation.
- :class:`Constant`: degenerate laws.
- :class:`Discrete`: finite discrete laws.

Notes
-----
- All families are registered in the global VariateFamilyRegister.
- Every family converts its parametrizations to a base one before building a variate.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from esscher_core.families.builtins import (
    configure_constant_family,
    configure_discrete_family,
    configure_logistic_family,
    configure_normal_family,
)
from esscher_core.families.registry import VariateFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> VariateFamilyRegister:
    """
    Configure and register all built-in variate families.

    Returns
    -------
    VariateFamilyRegister
        The global registry of variate families.
    """
    configure_normal_family()
    configure_logistic_family()
    configure_constant_family()
    configure_discrete_family()
    return VariateFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    VariateFamilyRegister._reset()
