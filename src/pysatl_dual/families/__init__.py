"""
Parametric Families module for dual-parameterized distribution families.

This package provides the framework for defining, registering and
instantiating the built-in families: parametrizations with constraints,
the family registry and the immutable distribution value.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov, Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from .configuration import configure_families_register, reset_families_register
from .distribution import DualDistribution
from .parametric_family import ParametricFamily
from .parametrizations import (
    Parametrization,
    ParametrizationConstraint,
    constraint,
    parametrization,
)
from .registry import ParametricFamilyRegister

__all__ = [
    "ParametricFamilyRegister",
    "ParametrizationConstraint",
    "Parametrization",
    "ParametricFamily",
    "DualDistribution",
    "constraint",
    "parametrization",
    "configure_families_register",
    "reset_families_register",
]
