"""
Core Type Definitions
=====================

Fundamental types and data structures used throughout PySATL Dual.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

import numpy as np
from numpy.typing import NDArray


class Kind(StrEnum):
    """
    Enumeration of distribution kinds.

    Attributes
    ----------
    DISCRETE : str
        Discrete probability distribution (evaluated through the pmf).
    CONTINUOUS : str
        Continuous probability distribution (evaluated through the pdf).
    """

    DISCRETE = "discrete"
    CONTINUOUS = "continuous"


class DistributionType:
    """
    Base class for distribution type descriptors.
    """

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class EuclideanDistributionType(DistributionType):
    """
    Distribution type for Euclidean space distributions.

    Parameters
    ----------
    kind : Kind
        Distribution kind (discrete or continuous).
    dimension : int
        Spatial dimension (e.g., 1 for univariate).
    """

    kind: Kind
    dimension: int


UnivariateContinuous = EuclideanDistributionType(kind=Kind.CONTINUOUS, dimension=1)
"""Type for univariate continuous distributions."""

UnivariateDiscrete = EuclideanDistributionType(kind=Kind.DISCRETE, dimension=1)
"""Type for univariate discrete distributions."""

NumPyNumber = np.floating[Any] | np.integer[Any]
"""Type alias for NumPy numeric types."""

Number = NumPyNumber | int | float
"""Type alias for all numeric types."""

NumericArray = NDArray[NumPyNumber]
"""Type alias for numeric arrays."""

DualArray = NDArray[np.object_]
"""Type alias for object arrays holding dual numbers."""

type ParametrizationName = str
"""Type alias for parametrization names."""


class FamilyName(StrEnum):
    BERNOULLI = "Bernoulli"
    CATEGORICAL = "Categorical"
    NORMAL = "Normal"
    MULTIVARIATE_NORMAL = "MultivariateNormal"
    STUDENT_T = "StudentT"
    EXPONENTIAL = "Exponential"
    GAMMA = "Gamma"
    INVERSE_GAMMA = "InverseGamma"
    BETA = "Beta"


__all__ = [
    "Kind",
    "EuclideanDistributionType",
    "UnivariateContinuous",
    "UnivariateDiscrete",
    "ParametrizationName",
    "DistributionType",
    "NumPyNumber",
    "Number",
    "NumericArray",
    "DualArray",
    "FamilyName",
]
