"""
Built-in continuous distribution families.

This module contains implementations of univariate continuous parametric families.
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


from pysatl_dual.families.builtins.continuous.beta import configure_beta_family
from pysatl_dual.families.builtins.continuous.exponential import configure_exponential_family
from pysatl_dual.families.builtins.continuous.gamma import configure_gamma_family
from pysatl_dual.families.builtins.continuous.inverse_gamma import configure_inverse_gamma_family
from pysatl_dual.families.builtins.continuous.normal import configure_normal_family
from pysatl_dual.families.builtins.continuous.student_t import configure_student_t_family

__all__ = [
    "configure_normal_family",
    "configure_student_t_family",
    "configure_exponential_family",
    "configure_gamma_family",
    "configure_inverse_gamma_family",
    "configure_beta_family",
]
