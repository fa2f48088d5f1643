"""
Constant variate family.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from esscher_core.families.parametrizations import Parametrization, parametrization
from esscher_core.families.registry import VariateFamilyRegister
from esscher_core.families.variate_family import VariateFamily
from esscher_core.types import VariateName
from esscher_core.variates.constant import Constant

if TYPE_CHECKING:
    from esscher_core.variates.variate import Variate


def configure_constant_family() -> None:
    """
    Configure and register the Constant variate family.
    """

    if VariateFamilyRegister.contains(VariateName.CONSTANT):
        return

    def _build(parameters: Parametrization) -> Variate:
        return Constant(cast(_Value, parameters).c)

    ConstantFamily = VariateFamily(
        name=VariateName.CONSTANT,
        parametrization_names=["value"],
        factory=_build,
    )
    ConstantFamily.__doc__ = """
    Degenerate variate equal to ``c`` with probability one.
    """

    @parametrization(family=ConstantFamily, name="value")
    class _Value(Parametrization):
        c: float

    VariateFamilyRegister.register(ConstantFamily)
