"""
Normal variate family.

Normal laws are built as affine transformations of the standard normal
model, parametrized by mean and standard deviation or by mean and variance.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from esscher_core.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from esscher_core.families.registry import VariateFamilyRegister
from esscher_core.families.variate_family import VariateFamily
from esscher_core.types import VariateName
from esscher_core.variates.normal import normal_variate

if TYPE_CHECKING:
    from esscher_core.variates.variate import Variate


def configure_normal_family() -> None:
    """
    Configure and register the Normal variate family.
    """

    if VariateFamilyRegister.contains(VariateName.NORMAL):
        return

    def _build(parameters: Parametrization) -> Variate:
        parameters = cast(_MeanStd, parameters)
        return normal_variate(parameters.mu, parameters.sigma)

    Normal = VariateFamily(
        name=VariateName.NORMAL,
        parametrization_names=["meanStd", "meanVar"],
        factory=_build,
    )
    Normal.__doc__ = """
    Normal (Gaussian) variate ``mu + sigma Z`` with ``Z`` standard normal.

    Its Esscher transform by ``s`` is normal with mean ``mu + sigma^2 s`` and
    the same standard deviation.
    """

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of the normal family.

        Parameters
        ----------
        mu : float
            Mean
        sigma : float
            Standard deviation
        """

        mu: float
        sigma: float

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return self.sigma > 0

    @parametrization(family=Normal, name="meanVar")
    class _MeanVar(Parametrization):
        """
        Mean-variance parametrization of the normal family.

        Parameters
        ----------
        mu : float
            Mean
        var : float
            Variance
        """

        mu: float
        var: float

        @constraint(description="var > 0")
        def check_var_positive(self) -> bool:
            """Check that variance is positive."""
            return self.var > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _MeanStd(mu=self.mu, sigma=math.sqrt(self.var))  # type: ignore[call-arg]

    VariateFamilyRegister.register(Normal)
