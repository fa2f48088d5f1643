"""
Global registry for variate families using the singleton pattern.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import ClassVar

    from esscher_core.families.variate_family import VariateFamily


class VariateFamilyRegister:
    """
    Singleton registry of variate families, keyed by family name.
    """

    _instance: ClassVar[VariateFamilyRegister | None] = None
    _registered_families: dict[str, VariateFamily]

    def __new__(cls) -> VariateFamilyRegister:
        """Create or return the singleton instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._registered_families = {}
        return cls._instance

    @classmethod
    def get(cls, name: str) -> VariateFamily:
        """
        Retrieve a family by name.

        Raises
        ------
        ValueError
            If no family with the given name exists.
        """
        self = cls()
        if name not in self._registered_families:
            raise ValueError(f"No family {name} found in register")
        return self._registered_families[name]

    @classmethod
    def contains(cls, name: str) -> bool:
        return name in cls()._registered_families

    @classmethod
    def names(cls) -> list[str]:
        """Registered family names in registration order."""
        return list(cls()._registered_families)

    @classmethod
    def register(cls, family: VariateFamily) -> None:
        """
        Register a new family.

        Raises
        ------
        ValueError
            If a family with the same name is already registered.
        """
        self = cls()
        if family.name in self._registered_families:
            raise ValueError(f"Family {family.name} already found in register")
        self._registered_families[family.name] = family

    @classmethod
    def _reset(cls) -> None:
        cls._instance = None
