"""
Variate family definitions.

A :class:`VariateFamily` turns named parameter values into a variate. It is
the by-value construction boundary for host adapters: shape parameters go in,
a :class:`ParametricVariate` comes out, and the adapter owns whatever handle
it boxes the result in.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, dataclass_transform

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, TypeAlias

    from esscher_core.families.parametrizations import Parametrization
    from esscher_core.types import ParametrizationName
    from esscher_core.variates.variate import Variate

    VariateFactory: TypeAlias = Callable[[Parametrization], Variate]


@dataclass(frozen=True, slots=True)
class ParametricVariate:
    """
    A variate built from a family with specific parameter values.

    Delegates the variate interface to the underlying model.

    Parameters
    ----------
    family_name : str
        Name of the family.
    parameters : Parametrization
        Parameters the variate was requested with.
    variate : Variate
        Model built from the base parametrization.
    """

    family_name: str
    parameters: Parametrization
    variate: Variate

    def cdf(self, x: float, s: float = 0.0, n: int = 0) -> float:
        return self.variate.cdf(x, s, n)

    def cumulant(self, s: float, n: int = 0) -> float:
        return self.variate.cumulant(s, n)

    def edf(self, x: float, s: float = 0.0) -> float:
        return self.variate.edf(x, s)


class VariateFamily:
    """
    A family of variates with multiple parametrizations.

    Parameters
    ----------
    name : str
        Family name.
    parametrization_names : list[ParametrizationName]
        Parametrization names, the first one is the base parametrization.
    factory : Callable[[Parametrization], Variate]
        Builds a variate from base parameters.
    """

    def __init__(
        self,
        name: str,
        parametrization_names: list[ParametrizationName],
        factory: VariateFactory,
    ):
        if not parametrization_names:
            raise ValueError(f"Family {name} needs at least one parametrization")

        self._name = name
        self._factory = factory
        self.parametrization_names: list[ParametrizationName] = parametrization_names
        self.base_parametrization_name: ParametrizationName = parametrization_names[0]
        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

    @property
    def name(self) -> str:
        """Get the family name."""
        return self._name

    @property
    def parametrizations(self) -> dict[ParametrizationName, type[Parametrization]]:
        """Get mapping from parametrization names to classes."""
        return self._parametrizations

    @property
    def base(self) -> type[Parametrization]:
        """
        Get the base parametrization class.

        Raises
        ------
        ValueError
            If the base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    def register_parametrization(
        self,
        name: ParametrizationName,
        parametrization_class: type[Parametrization],
    ) -> None:
        """
        Register a parametrization class.

        Raises
        ------
        ValueError
            If the name is unknown to the family or already registered.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family {self._name}.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        ValueError
            If the name is not registered.
        """
        try:
            return self._parametrizations[name]
        except KeyError as exc:
            raise ValueError(f"Unknown parametrization '{name}' for family {self._name}") from exc

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def variate(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricVariate:
        """
        Create a variate with the given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Parametrization to read the values in, defaults to the base one.
        **parameters_values
            Parameter values.

        Returns
        -------
        ParametricVariate
            The variate.

        Raises
        ------
        ValueError
            If the parametrization is unknown or a constraint does not hold.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self.get_parametrization(parametrization_name)

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        base_parameters = self.to_base(parameters)
        base_parameters.validate()
        return ParametricVariate(self._name, parameters, self._factory(base_parameters))

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """Class decorator registering a parametrization with this family."""
        from esscher_core.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = variate
