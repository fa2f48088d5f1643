"""
Parameterization classes for variate families.

A parametrization is a frozen dataclass of named parameter values with
declared constraints. Each family has a base parametrization its factory
understands; other parametrizations convert to it.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from abc import ABC
from dataclasses import dataclass, is_dataclass
from functools import wraps
from inspect import isfunction
from typing import TYPE_CHECKING, ParamSpec

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any, ClassVar

    from esscher_core.families.variate_family import VariateFamily
    from esscher_core.types import ParametrizationName


@dataclass(slots=True, frozen=True)
class ParametrizationConstraint:
    """
    Constraint on parameter values.

    Parameters
    ----------
    description : str
        Human-readable description, used in error messages.
    check : Callable[[Any], bool]
        Predicate that returns True when the constraint holds.
    """

    description: str
    check: Callable[[Any], bool]


class Parametrization(ABC):
    """
    Abstract base class for variate parametrizations.

    Subclasses are turned into frozen dataclasses by :func:`parametrization`.
    """

    # Set by the @parametrization decorator
    __family__: ClassVar[VariateFamily]
    __param_name__: ClassVar[ParametrizationName]

    _constraints: ClassVar[list[ParametrizationConstraint]] = []

    @property
    def name(self) -> str:
        """Name of this parametrization."""
        return self.__class__.__param_name__

    @property
    def parameters(self) -> dict[str, Any]:
        """Parameters as a dictionary."""
        fields = getattr(self, "__dataclass_fields__", {})
        return {f: getattr(self, f) for f in fields}

    @property
    def constraints(self) -> list[ParametrizationConstraint]:
        return self._constraints

    def validate(self) -> None:
        """
        Check every declared constraint.

        Raises
        ------
        ValueError
            If a constraint does not hold.
        """
        for constraint in self._constraints:
            if not constraint.check(self):
                raise ValueError(f'Constraint "{constraint.description}" does not hold')

    def transform_to_base_parametrization(self) -> Parametrization:
        """
        Convert to the family's base parametrization.

        The base parametrization returns itself; others override this.
        """
        return self


P = ParamSpec("P")


def constraint(description: str) -> Callable[[Callable[P, bool]], Callable[P, bool]]:
    """
    Mark an instance method as a parameter constraint.

    Parameters
    ----------
    description : str
        Human-readable description of the constraint.

    Returns
    -------
    Callable[[Callable[P, bool]], Callable[P, bool]]
        Decorator setting the ``__is_constraint`` and
        ``__constraint_description`` markers.
    """

    def decorator(func: Callable[P, bool]) -> Callable[P, bool]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> bool:
            return bool(func(*args, **kwargs))

        setattr(wrapper, "__is_constraint", True)
        setattr(wrapper, "__constraint_description", description)
        return wrapper

    return decorator


def _collect_constraints(cls: type[Parametrization]) -> list[ParametrizationConstraint]:
    constraints: list[ParametrizationConstraint] = []
    for attr_name, attr in cls.__dict__.items():
        if isinstance(attr, (staticmethod, classmethod)):
            if getattr(attr.__func__, "__is_constraint", False):
                raise TypeError(f"@constraint '{attr_name}' must be an instance method")
            continue

        if not (callable(attr) and isfunction(attr)):
            continue
        if getattr(attr, "__is_constraint", False):
            desc = getattr(attr, "__constraint_description", attr.__name__)
            constraints.append(ParametrizationConstraint(description=desc, check=attr))
    return constraints


def parametrization(
    *,
    family: VariateFamily,
    name: str,
) -> Callable[[type[Parametrization]], type[Parametrization]]:
    """
    Register a class as a parametrization of ``family``.

    The class becomes a frozen slotted dataclass if it is not a dataclass
    already, and its ``@constraint`` methods are collected.

    Parameters
    ----------
    family : VariateFamily
        Family to register with.
    name : str
        Parametrization name.

    Returns
    -------
    Callable[[type[Parametrization]], type[Parametrization]]
        Class decorator.
    """

    def decorator(cls: type[Parametrization]) -> type[Parametrization]:
        if not is_dataclass(cls):
            cls = dataclass(slots=True, frozen=True)(cls)

        cls.__family__ = family
        cls.__param_name__ = name
        cls._constraints = _collect_constraints(cls)

        family.register_parametrization(name, cls)
        return cls

    return decorator
