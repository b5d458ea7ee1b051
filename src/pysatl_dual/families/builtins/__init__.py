"""
Built-in distribution families for PySATL Dual.

This package contains the fixed catalog of dual-parameterized distribution
families that are available by default.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dual.families.builtins.continuous import (
    configure_beta_family,
    configure_exponential_family,
    configure_gamma_family,
    configure_inverse_gamma_family,
    configure_normal_family,
    configure_student_t_family,
)
from pysatl_dual.families.builtins.discrete import (
    configure_bernoulli_family,
    configure_categorical_family,
)
from pysatl_dual.families.builtins.multivariate import configure_multivariate_normal_family

__all__ = [
    "configure_bernoulli_family",
    "configure_categorical_family",
    "configure_normal_family",
    "configure_multivariate_normal_family",
    "configure_student_t_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_inverse_gamma_family",
    "configure_beta_family",
]
