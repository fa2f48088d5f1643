"""
Logistic variate family.

Generalized logistic laws with shape parameters ``a, b`` moved and scaled by
an affine transformation, and standard logistic laws given by mean and
standard deviation.
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
from esscher_core.variates.affine import Affine
from esscher_core.variates.logistic import LOGISTIC_STD, Logistic

if TYPE_CHECKING:
    from esscher_core.variates.variate import Variate


def configure_logistic_family() -> None:
    """
    Configure and register the Logistic variate family.
    """

    if VariateFamilyRegister.contains(VariateName.LOGISTIC):
        return

    def _build(parameters: Parametrization) -> Variate:
        parameters = cast(_Shape, parameters)
        return Affine(Logistic(parameters.a, parameters.b), parameters.mu, parameters.sigma)

    LogisticFamily = VariateFamily(
        name=VariateName.LOGISTIC,
        parametrization_names=["shape", "meanStd"],
        factory=_build,
    )
    LogisticFamily.__doc__ = """
    Generalized logistic variate ``mu + sigma X``.

    ``X`` has density ``e^{-b x} (1 + e^{-x})^{-(a + b)} / B(a, b)``; for
    ``a = b = 1`` this is the standard logistic law with cdf
    ``1 / (1 + e^{-x})``, mean 0 and variance ``pi^2 / 3``.
    """

    @parametrization(family=LogisticFamily, name="shape")
    class _Shape(Parametrization):
        """
        Shape, location and scale parametrization.

        Parameters
        ----------
        a : float
            First shape parameter
        b : float
            Second shape parameter
        mu : float
            Location
        sigma : float
            Scale
        """

        a: float
        b: float
        mu: float = 0.0
        sigma: float = 1.0

        @constraint(description="a > 0")
        def check_a_positive(self) -> bool:
            return self.a > 0

        @constraint(description="b > 0")
        def check_b_positive(self) -> bool:
            return self.b > 0

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            return self.sigma > 0

    @parametrization(family=LogisticFamily, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard logistic law with given mean and standard deviation.

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
            return self.sigma > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            return _Shape(  # type: ignore[call-arg]
                a=1.0, b=1.0, mu=self.mu, sigma=self.sigma / LOGISTIC_STD
            )

    VariateFamilyRegister.register(LogisticFamily)
