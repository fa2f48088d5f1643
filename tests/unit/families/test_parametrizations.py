from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import dataclasses
from typing import Any

import pytest

from esscher_core.families import (
    Parametrization,
    ParametrizationConstraint,
    VariateFamily,
    constraint,
)
from esscher_core.variates import Constant


def make_family(names: list[str] | None = None) -> VariateFamily:
    return VariateFamily(
        name="Shifted",
        parametrization_names=names or ["base", "alt"],
        factory=lambda p: Constant(p.value),  # type: ignore[attr-defined]
    )


class TestParametrizationAPI:
    def test_constraint_is_a_simple_holder(self) -> None:
        def is_positive(obj: object) -> bool:
            return getattr(obj, "value", 0) > 0

        c = ParametrizationConstraint(description="Value must be positive", check=is_positive)
        assert c.description == "Value must be positive"
        assert c.check is is_positive

    def test_constraint_decorator_marks_function(self) -> None:
        @constraint("Value must be positive")
        def check_positive(self: Any) -> bool:
            return getattr(self, "value", 0) > 0

        assert getattr(check_positive, "__is_constraint", False) is True
        assert getattr(check_positive, "__constraint_description", None) == "Value must be positive"
        assert check_positive.__name__ == "check_positive"

    def test_family_parametrization_decorator(self) -> None:
        family = make_family()

        @family.parametrization(name="base")
        class Base(Parametrization):
            value: float

        obj = Base(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "base"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Base, "__family__", None) is family
        assert getattr(Base, "__param_name__", None) == "base"
        assert dataclasses.is_dataclass(Base)
        assert family.parametrizations["base"] is Base

    def test_parametrization_is_frozen(self) -> None:
        family = make_family()

        @family.parametrization(name="base")
        class Base(Parametrization):
            value: float

        obj = Base(value=1.0)  # type: ignore[call-arg]
        with pytest.raises(dataclasses.FrozenInstanceError):
            obj.value = 2.0  # type: ignore[misc]

    def test_constraints_are_collected_and_checked(self) -> None:
        family = make_family()

        @family.parametrization(name="base")
        class Base(Parametrization):
            value: float

            @constraint(description="value > 0")
            def check_positive(self) -> bool:
                return self.value > 0

            @constraint(description="value < 10")
            def check_bounded(self) -> bool:
                return self.value < 10

            def helper(self) -> bool:
                return False

        assert [c.description for c in Base(value=1.0).constraints] == [  # type: ignore[call-arg]
            "value > 0",
            "value < 10",
        ]
        Base(value=5.0).validate()  # type: ignore[call-arg]
        with pytest.raises(ValueError, match='Constraint "value > 0" does not hold'):
            Base(value=-1.0).validate()  # type: ignore[call-arg]
        with pytest.raises(ValueError, match='Constraint "value < 10" does not hold'):
            Base(value=12.0).validate()  # type: ignore[call-arg]

    def test_static_constraint_is_rejected(self) -> None:
        family = make_family()

        with pytest.raises(TypeError, match="must be an instance method"):

            @family.parametrization(name="base")
            class Base(Parametrization):
                value: float

                @staticmethod
                @constraint(description="always")
                def check() -> bool:
                    return True

        assert "base" not in family.parametrizations

    def test_base_transforms_to_itself(self) -> None:
        family = make_family()

        @family.parametrization(name="base")
        class Base(Parametrization):
            value: float

        obj = Base(value=3.0)  # type: ignore[call-arg]
        assert obj.transform_to_base_parametrization() is obj
