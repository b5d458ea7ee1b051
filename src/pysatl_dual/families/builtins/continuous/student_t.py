"""
Student's t distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from scipy import stats

from pysatl_dual.dual import dual_exp, dual_log, dual_log_gamma, real_part
from pysatl_dual.families.parametric_family import ParametricFamily
from pysatl_dual.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_dual.families.registry import ParametricFamilyRegister
from pysatl_dual.types import FamilyName, UnivariateContinuous

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from scipy.stats._distn_infrastructure import rv_frozen

    from pysatl_dual.dual import Dual


def configure_student_t_family() -> None:
    """
    Configure and register the Student's t distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.STUDENT_T):
        return

    STUDENT_T_DOC = """
    Student's t distribution.

    Standard (location 0, scale 1) t distribution with ν degrees of freedom.

    Probability density function:
        f(x) = 1/Z * (1 + x²/ν)^(-(ν+1)/2),  Z = √(πν) Γ(ν/2) / Γ((ν+1)/2)
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Closed-form density of the Student's t distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - nu: Dual (degrees of freedom)

        Returns
        -------
        Callable[[Any], Dual]
            Density as a function of a real or dual point
        """
        parameters = cast(_Dof, parameters)

        nu = parameters.nu
        half_exponent = (nu + 1.0) / 2.0
        log_normalizer = (
            0.5 * dual_log(math.pi * nu) + dual_log_gamma(nu / 2.0) - dual_log_gamma(half_exponent)
        )

        def density(x: Any) -> Dual:
            return dual_exp(-log_normalizer - half_exponent * dual_log(1.0 + x**2 / nu))

        return density

    def delegate(parameters: Parametrization) -> rv_frozen:
        parameters = cast(_Dof, parameters)
        return stats.t(df=real_part(parameters.nu))

    StudentT = ParametricFamily(
        name=FamilyName.STUDENT_T,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["dof"],
        formula=formula,
        delegate=delegate,
    )
    StudentT.__doc__ = STUDENT_T_DOC

    @parametrization(family=StudentT, name="dof")
    class _Dof(Parametrization):
        """
        Degrees-of-freedom parametrization of Student's t distribution.

        Parameters
        ----------
        nu : Dual
            Degrees of freedom
        """

        nu: Dual

        @constraint(description="nu > 0")
        def check_nu_positive(self) -> bool:
            """Check that degrees of freedom are positive."""
            return real_part(self.nu) > 0

    ParametricFamilyRegister.register(StudentT)
