"""
Concrete distribution instances with specific parameter values.

This module provides the immutable distribution value created from a
parametric family: dual-valued parameters, the real-valued delegate built
from their real parts, and the closed-form density formula.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from dataclasses import dataclass
from typing import TYPE_CHECKING

from pysatl_dual.types import EuclideanDistributionType, Kind

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from scipy.stats._distn_infrastructure import rv_frozen

    from pysatl_dual.families.parametrizations import Parametrization
    from pysatl_dual.types import DistributionType


@dataclass(frozen=True, slots=True, eq=False)
class DualDistribution:
    """
    A specific distribution instance from a parametric family.

    Instances are immutable; moving to a new point in parameter space
    always goes through the family again and yields a fresh instance.

    Parameters
    ----------
    family_name : str
        Name of the distribution family; the tag of the variant.
    distribution_type : DistributionType
        Type of this distribution.
    parameters : Parametrization
        Dual-valued parameters in the parametrization used for construction.
    base_parameters : Parametrization
        The same parameters in the base parametrization of the family.
    delegate : rv_frozen
        Frozen scipy distribution built from the real parts of
        ``base_parameters``; used for real evaluation and sampling.
    formula : Callable[[Any], Any]
        Closed-form density closed over the dual base parameters.
    in_support : Callable[[Any], bool]
        Predicate on real points telling whether the density may be non-zero.
    """

    family_name: str
    distribution_type: DistributionType
    parameters: Parametrization
    base_parameters: Parametrization
    delegate: rv_frozen
    formula: Callable[[Any], Any]
    in_support: Callable[[Any], bool]

    @property
    def parametrization_name(self) -> str:
        """Get the name of the parametrization used for construction."""
        return self.parameters.name

    @property
    def kind(self) -> Kind:
        """Get the distribution kind (discrete or continuous)."""
        distribution_type = self.distribution_type
        if isinstance(distribution_type, EuclideanDistributionType):
            return distribution_type.kind
        return Kind.CONTINUOUS

    @property
    def dimension(self) -> int:
        """Get the dimension of points in the support."""
        distribution_type = self.distribution_type
        if isinstance(distribution_type, EuclideanDistributionType):
            return distribution_type.dimension
        return 1
