"""
Parametric family definitions and management infrastructure.

This module contains the main class for defining parametric families of
dual-parameterized distributions: parametrizations, the closed-form density
formula, the real-valued delegate and the support predicate of each family.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
from typing import TYPE_CHECKING, dataclass_transform

import numpy as np

from pysatl_dual.errors import DomainError
from pysatl_dual.families.distribution import DualDistribution
from pysatl_dual.types import DistributionType

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from scipy.stats._distn_infrastructure import rv_frozen

    from pysatl_dual.families.parametrizations import Parametrization
    from pysatl_dual.types import ParametrizationName

    type DensityFormula = Callable[[Any], Any]
    type FormulaFactory = Callable[[Parametrization], DensityFormula]
    type DelegateFactory = Callable[[Parametrization], rv_frozen]
    type SupportPredicate = Callable[[Any], bool]
    type SupportFactory = Callable[[Parametrization], SupportPredicate]

logger = logging.getLogger(__name__)


def _unbounded(_: Any) -> bool:
    return True


class ParametricFamily:
    """
    A family of dual-parameterized distributions with multiple parametrizations.

    Represents a parametric family of distributions (e.g., normal, gamma)
    that can be parameterized in different ways. Manages parametrizations,
    the closed-form density formula and the real-valued delegate, and
    provides a factory method for creating distribution instances.

    Parameters
    ----------
    name : str
        Name of the distribution family.
    distr_type : DistributionType or Callable[[Parametrization], DistributionType]
        Distribution type or function that infers type from base parametrization.
    distr_parametrizations : list[ParametrizationName]
        List of parametrization names (first is base parametrization).
    formula : Callable[[Parametrization], DensityFormula]
        Builds the density formula from base parameters. The formula closes
        over the dual parameters and accepts real or dual points.
    delegate : Callable[[Parametrization], rv_frozen]
        Builds the frozen real-valued scipy distribution from base parameters.
        Only real parts of the parameters may reach the delegate.
    support_by_parametrization : Callable or None, optional
        Returns a predicate telling whether a real point lies in the support.
        Defaults to the whole space.
    """

    def __init__(
        self,
        name: str,
        distr_type: DistributionType | Callable[[Parametrization], DistributionType],
        distr_parametrizations: list[ParametrizationName],
        formula: FormulaFactory,
        delegate: DelegateFactory,
        support_by_parametrization: SupportFactory | None = None,
    ):
        self._name = name
        self._distr_type: Callable[[Parametrization], DistributionType] = (
            (lambda params: distr_type) if isinstance(distr_type, DistributionType) else distr_type
        )
        self._formula = formula
        self._delegate = delegate

        if support_by_parametrization is None:
            self._support_resolver: SupportFactory
            self._support_resolver = lambda _params: _unbounded
        else:
            self._support_resolver = support_by_parametrization

        # Ordered names; the first one is the base parametrization name
        self.parametrization_names: list[ParametrizationName] = distr_parametrizations
        self.base_parametrization_name: ParametrizationName = self.parametrization_names[0]

        # Runtime registry of parametrization classes
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
            If base parametrization is not registered.
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

        Parameters
        ----------
        name : ParametrizationName
            Unique parametrization name.
        parametrization_class : type[Parametrization]
            Parametrization class to register.

        Raises
        ------
        ValueError
            If name is already registered.
        """
        if name in self._parametrizations:
            raise ValueError(f"Parametrization '{name}' is already registered.")
        self._parametrizations[name] = parametrization_class

    def to_base(self, parameters: Parametrization) -> Parametrization:
        """
        Convert parameters to the base parametrization.

        Parameters
        ----------
        parameters : Parametrization
            Parameters in any parametrization.

        Returns
        -------
        Parametrization
            Equivalent parameters in base parametrization.
        """
        if parameters.name == self.base_parametrization_name:
            return parameters
        return parameters.transform_to_base_parametrization()

    def _build_delegate(self, base_parameters: Parametrization) -> rv_frozen:
        """Build the real-valued delegate, reporting rejected parameters as DomainError."""
        try:
            return self._delegate(base_parameters)
        except (ValueError, np.linalg.LinAlgError) as exc:
            raise DomainError(f"{self.name}: {exc}") from exc

    def distribution(
        self,
        parametrization_name: str | None = None,
        **parameters_values: Any,
    ) -> DualDistribution:
        """
        Create a distribution instance with given parameters.

        Parameters
        ----------
        parametrization_name : str, optional
            Name of parametrization to use (defaults to base).
        **parameters_values
            Parameter values for the distribution, reals or duals.

        Returns
        -------
        DualDistribution
            Distribution instance with specified parameters.

        Raises
        ------
        KeyError
            If parametrization name is not registered.
        DomainError
            If parameters don't satisfy constraints or are rejected by
            the delegate.
        """
        if parametrization_name is None:
            parametrization_class = self.base
        else:
            parametrization_class = self._parametrizations[parametrization_name]

        parameters = parametrization_class(**parameters_values)
        try:
            parameters.validate()
        except DomainError:
            logger.debug("Rejected %s parameters %s", self.name, parameters.real_parameters)
            raise
        base_parameters = self.to_base(parameters)
        delegate = self._build_delegate(base_parameters)
        logger.debug("Built %s distribution from %s", self.name, parameters.real_parameters)

        return DualDistribution(
            family_name=self.name,
            distribution_type=self._distr_type(base_parameters),
            parameters=parameters,
            base_parameters=base_parameters,
            delegate=delegate,
            formula=self._formula(base_parameters),
            in_support=self._support_resolver(base_parameters),
        )

    @dataclass_transform()
    def parametrization(
        self, *, name: str
    ) -> Callable[[type[Parametrization]], type[Parametrization]]:
        """
        Create a class decorator that registers a parametrization.

        If you want to use this syntax and so that Mypy doesn't swear,
        you should mark your class as a dataclass.
        At the moment, Mypy cannot identify dataclass_transform if the decorator is a class method.

        Parameters
        ----------
        name : str
            Name of the parametrization.

        Returns
        -------
        Callable[[type[Parametrization]], type[Parametrization]]
            Class decorator for registering parametrizations.
        """
        from pysatl_dual.families.parametrizations import parametrization as _param_deco

        return _param_deco(family=self, name=name)

    __call__ = distribution
