"""
Built-in variate families.

This package contains the variate families that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from esscher_core.families.builtins.constant import configure_constant_family
from esscher_core.families.builtins.discrete import configure_discrete_family
from esscher_core.families.builtins.logistic import configure_logistic_family
from esscher_core.families.builtins.normal import configure_normal_family

__all__ = [
    "configure_normal_family",
    "configure_logistic_family",
    "configure_constant_family",
    "configure_discrete_family",
]
