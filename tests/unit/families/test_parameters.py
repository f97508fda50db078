from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import Any

import pytest

from ecs_uncertainty.families import (
    ParametricFamily,
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)


def make_two_form_family() -> ParametricFamily:
    family = ParametricFamily(
        name="TwoForms",
        distr_parametrizations=["base", "alt"],
        distr_characteristics={},
    )

    @parametrization(family=family, name="base")
    class Base(Parametrization):
        value: float

        @constraint(description="value > 0")
        def check_value_positive(self) -> bool:
            return self.value > 0

    @parametrization(family=family, name="alt")
    class Alt(Parametrization):
        value: float

        def transform_to_base_parametrization(self) -> Parametrization:
            return Base(value=self.value * 2)  # type: ignore[call-arg]

    return family


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
        assert getattr(check_positive, "__constraint_description") == "Value must be positive"

    def test_family_parametrization_decorator(self) -> None:
        family = ParametricFamily(
            name="FreeDecoratorFamily",
            distr_parametrizations=["kind"],
            distr_characteristics={},
        )

        @family.parametrization(name="kind")
        class Kind(Parametrization):
            value: float

        obj = Kind(value=1.25)  # type: ignore[call-arg]
        assert obj.name == "kind"
        assert obj.parameters == {"value": 1.25}
        assert getattr(Kind, "__family__", None) is family
        assert getattr(Kind, "__param_name__", None) == "kind"
        assert hasattr(Kind, "__dataclass_fields__")
        assert family.parametrizations["kind"] is Kind

    def test_parametrizations_are_frozen(self) -> None:
        family = make_two_form_family()
        params = family.base(value=1.0)  # type: ignore[call-arg]
        with pytest.raises(AttributeError):
            params.value = 2.0  # type: ignore[misc]

    def test_undeclared_parametrization_rejected(self) -> None:
        family = make_two_form_family()
        with pytest.raises(ValueError, match="not declared"):

            @parametrization(family=family, name="other")
            class Other(Parametrization):
                value: float

    def test_duplicate_parametrization_rejected(self) -> None:
        family = make_two_form_family()
        with pytest.raises(ValueError, match="already registered"):

            @parametrization(family=family, name="base")
            class Again(Parametrization):
                value: float

    def test_static_constraint_rejected(self) -> None:
        family = ParametricFamily(
            name="StaticConstraint",
            distr_parametrizations=["base"],
            distr_characteristics={},
        )
        with pytest.raises(TypeError, match="instance method"):

            @parametrization(family=family, name="base")
            class Base(Parametrization):
                value: float

                @staticmethod
                @constraint(description="always")
                def check() -> bool:
                    return True


class TestValidationAndConversion:
    def setup_method(self) -> None:
        self.family = make_two_form_family()

    def test_constraint_violation_names_constraint(self) -> None:
        with pytest.raises(ValueError, match="value > 0"):
            self.family.distribution(value=-1.0)

    def test_to_base_keeps_base_parameters(self) -> None:
        base_params = self.family.base(value=5.0)  # type: ignore[call-arg]
        assert self.family.to_base(base_params) is base_params

    def test_to_base_converts_alternative(self) -> None:
        alt_params = self.family.get_parametrization("alt")(value=3.0)  # type: ignore[call-arg]
        base_from_alt = self.family.to_base(alt_params)
        assert isinstance(base_from_alt, self.family.base)
        assert base_from_alt.parameters == {"value": 6.0}

    def test_unknown_parameter_name(self) -> None:
        with pytest.raises(TypeError):
            self.family.distribution(mean=1.0)

    def test_unknown_parametrization(self) -> None:
        with pytest.raises(KeyError):
            self.family.distribution("missing", value=1.0)
