"""
Distribution Families Configuration
====================================

This module defines and configures the dual-parameterized distribution
families of the PySATL Dual library:

- :class:`Bernoulli Family`: single binary trial.
- :class:`Categorical Family`: one draw over a finite set of categories.
- :class:`Normal Family`: Gaussian distribution (mean/std and mean/precision).
- :class:`MultivariateNormal Family`: Gaussian distribution over vectors.
- :class:`StudentT Family`: Student's t distribution.
- :class:`Exponential Family`: exponential distribution (scale and rate).
- :class:`Gamma Family`: gamma distribution.
- :class:`InverseGamma Family`: inverse-gamma distribution.
- :class:`Beta Family`: beta distribution on the unit interval.

Notes
-----
- All families are registered in the global ParametricFamilyRegister.
- Every family provides a closed-form density written over dual numbers and a
  frozen scipy delegate for real evaluation and sampling.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from functools import lru_cache

from pysatl_dual.families.builtins import (
    configure_bernoulli_family,
    configure_beta_family,
    configure_categorical_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_inverse_gamma_family,
    configure_multivariate_normal_family,
    configure_normal_family,
    configure_student_t_family,
)
from pysatl_dual.families.registry import ParametricFamilyRegister


@lru_cache(maxsize=1)
def configure_families_register() -> ParametricFamilyRegister:
    """
    Configure and register all distribution families in the global registry.

    This function initializes all parametric families with their respective
    parameterizations, density formulas and delegates. It is idempotent and
    cached, so it can be called wherever a family is needed.

    Returns
    -------
    ParametricFamilyRegister
        The global registry of parametric families.
    """
    configure_bernoulli_family()
    configure_categorical_family()
    configure_normal_family()
    configure_multivariate_normal_family()
    configure_student_t_family()
    configure_exponential_family()
    configure_gamma_family()
    configure_inverse_gamma_family()
    configure_beta_family()
    return ParametricFamilyRegister()


def reset_families_register() -> None:
    """
    Reset the cached families registry.
    """
    configure_families_register.cache_clear()
    ParametricFamilyRegister._reset()
