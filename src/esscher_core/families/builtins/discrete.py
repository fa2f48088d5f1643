"""
Discrete variate family.

Finite discrete laws given by a table of values and probabilities.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from esscher_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from esscher_core.families.registry import VariateFamilyRegister
from esscher_core.families.variate_family import VariateFamily
from esscher_core.types import VariateName
from esscher_core.variates.discrete import PROBABILITY_TOLERANCE, Discrete

if TYPE_CHECKING:
    from collections.abc import Sequence

    from esscher_core.variates.variate import Variate


def configure_discrete_family() -> None:
    """
    Configure and register the Discrete variate family.
    """

    if VariateFamilyRegister.contains(VariateName.DISCRETE):
        return

    def _build(parameters: Parametrization) -> Variate:
        parameters = cast(_Table, parameters)
        return Discrete(parameters.xs, parameters.ps)  # type: ignore[arg-type]

    DiscreteFamily = VariateFamily(
        name=VariateName.DISCRETE,
        parametrization_names=["table"],
        factory=_build,
    )
    DiscreteFamily.__doc__ = """
    Discrete variate taking value ``xs[i]`` with probability ``ps[i]``.
    """

    @parametrization(family=DiscreteFamily, name="table")
    class _Table(Parametrization):
        """
        Table parametrization.

        Parameters
        ----------
        xs : Sequence[float]
            Values
        ps : Sequence[float]
            Probabilities
        """

        xs: Sequence[float]
        ps: Sequence[float]

        @constraint(description="len(xs) == len(ps) > 0")
        def check_lengths(self) -> bool:
            return len(self.xs) == len(self.ps) > 0

        @constraint(description="ps >= 0")
        def check_probabilities_nonnegative(self) -> bool:
            return all(p >= 0 for p in self.ps)

        @constraint(description="sum(ps) == 1")
        def check_probabilities_sum(self) -> bool:
            return abs(sum(self.ps) - 1.0) <= PROBABILITY_TOLERANCE

    VariateFamilyRegister.register(DiscreteFamily)
