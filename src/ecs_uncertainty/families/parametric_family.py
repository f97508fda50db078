"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
distributions: named parametrizations, the characteristic functions each
parametrization provides and the resolution of those functions into the
:class:`~ecs_uncertainty.families.distribution.DistributionPrimitives`
bundle consumed by the truncation kernel.
"""

from __future__ import annotations

__author__ = "ECS Uncertainty contributors"
__copyright__ = "Copyright (c) 2025 ECS Uncertainty project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import partial
from typing import TYPE_CHECKING, dataclass_transform

from ecs_uncertainty.exceptions import UnknownDistributionFamilyError
from ecs_uncertainty.families.distribution import ParametricFamilyDistribution
from ecs_uncertainty.types import CharacteristicName

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from ecs_uncertainty.families.distribution import DistributionPrimitives
    from ecs_uncertainty.families.parametrizations import Parametrization
    from ecs_uncertainty.types import (
        GenericCharacteristicName,
        Interval1D,
        ParametrizationName,
    )

    type ParametrizedFunction = Callable[..., Any]
    type SupportResolver = Callable[[Parametrization], Interval1D | None]


REQUIRED_CHARACTERISTICS: tuple[GenericCharacteristicName, ...] = (
    CharacteristicName.PDF,
    CharacteristicName.CDF,
    CharacteristicName.PPF,
)
"""Characteristics every family must provide to be truncated."""


class ParametricFamily:
    """
    A family of distributions with multiple parametrizations.

    Parameters
    ----------
    name : str
        Name of the distribution family (the key used by the kernel).
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    distr_characteristics : dict[str, dict[str, Callable] or Callable]
        Mapping from characteristic names to functions ``f(parameters, data)``.
        Single functions are treated as defined for the base parametrization.
    support_by_parametrization : Callable or None, optional
        Function that returns the support for given base parameters.
    """

    def __init__(
        self,
        name: str,
        distr_parametrizations: list[ParametrizationName],
        distr_characteristics: dict[
            GenericCharacteristicName,
            dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ],
        support_by_parametrization: SupportResolver | None = None,
    ):
        if not distr_parametrizations:
            raise ValueError(f"Family '{name}' needs at least one parametrization")

        self._name = name
        self._support_resolver: SupportResolver = (
            support_by_parametrization
            if support_by_parametrization is not None
            else (lambda _params: None)
        )

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = list(distr_parametrizations)
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        self._parametrizations: dict[ParametrizationName, type[Parametrization]] = {}

        def _process_char_val(
            value: dict[ParametrizationName, ParametrizedFunction] | ParametrizedFunction,
        ) -> dict[ParametrizationName, ParametrizedFunction]:
            return value if isinstance(value, dict) else {self.base_parametrization_name: value}

        self.distr_characteristics: dict[
            GenericCharacteristicName, dict[ParametrizationName, ParametrizedFunction]
        ] = {key: _process_char_val(val) for key, val in distr_characteristics.items()}

        # For every parametrization, which parametrization provides each characteristic
        self._analytical_plan: dict[
            ParametrizationName, dict[GenericCharacteristicName, ParametrizationName]
        ] = {}
        base_name = self.base_parametrization_name
        for pname in self.parametrization_names:
            plan_for_p: dict[GenericCharacteristicName, ParametrizationName] = {}
            for characteristic, forms in self.distr_characteristics.items():
                if pname in forms:
                    plan_for_p[characteristic] = pname
                elif base_name in forms:
                    plan_for_p[characteristic] = base_name
            self._analytical_plan[pname] = plan_for_p

    def __repr__(self) -> str:
        return (
            f"ParametricFamily(name={self._name!r}, "
            f"parametrizations={self.parametrization_names})"
        )

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
            If base parametrization is not registered.
        """
        try:
            return self._parametrizations[self.base_parametrization_name]
        except KeyError as exc:
            raise ValueError(
                f"Base parametrization '{self.base_parametrization_name}' is not registered."
            ) from exc

    @property
    def missing_characteristics(self) -> list[GenericCharacteristicName]:
        """Required characteristics the base parametrization cannot provide."""
        plan = self._analytical_plan[self.base_parametrization_name]
        return [name for name in REQUIRED_CHARACTERISTICS if name not in plan]

    def support_of(self, parameters: Parametrization) -> Interval1D | None:
        """Support of the distribution with the given parameters."""
        return self._support_resolver(self.to_base(parameters))

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
            If name is already registered or not declared by the family.
        """
        if name not in self.parametrization_names:
            raise ValueError(f"Parametrization '{name}' is not declared by family '{self.name}'.")
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def get_parametrization(self, name: ParametrizationName) -> type[Parametrization]:
        """
        Fetch a parametrization class by name.

        Raises
        ------
        KeyError
            If name is not registered.
        """
        return self._parametrizations[name]

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """Convert parameters to the base parametrization."""
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def build_characteristics(
        self, parameters: Parametrization
    ) -> dict[GenericCharacteristicName, Callable[..., Any]]:
        """
        Bind every available characteristic to the given parameters.

        Characteristics defined for the parameters' own parametrization are
        bound directly; the rest fall back to the base form.
        """
        plan = self._analytical_plan.get(parameters.name, {})
        result: dict[GenericCharacteristicName, Callable[..., Any]] = {}
        base_params: Parametrization | None = None

        for characteristic, provider_name in plan.items():
            if provider_name == parameters.name:
                params_obj = parameters
            else:
                if base_params is None:
                    base_params = self.to_base(parameters)
                params_obj = base_params

            func = self.distr_characteristics[characteristic][provider_name]
            result[characteristic] = partial(func, params_obj)

        return result

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> ParametricFamilyDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution; omitted values take the
            parametrization defaults.

        Returns
        -------
        ParametricFamilyDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        TypeError
            If unknown or missing parameter names are given.
        ValueError
            If parameters don't satisfy constraints.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        parameters.validate()
        return ParametricFamilyDistribution(self, parameters)

    def primitives(
        self, parametrization_name: str | None = None, **parameters_values: Any
    ) -> DistributionPrimitives:
        """
        Resolve the four primitive operations for the given parameters.

        Raises
        ------
        UnknownDistributionFamilyError
            If the family lacks a density, CDF or quantile function.
        """
        missing = self.missing_characteristics
        if missing:
            raise UnknownDistributionFamilyError(
                f"Family '{self.name}' does not provide required primitives: {', '.join(missing)}"
            )
        return self.distribution(parametrization_name, **parameters_values).primitives

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from ecs_uncertainty.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
