"""
Inverse-gamma distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

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


def configure_inverse_gamma_family() -> None:
    """
    Configure and register the Inverse-Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.INVERSE_GAMMA):
        return

    INVERSE_GAMMA_DOC = """
    Inverse-gamma distribution.

    Distribution of 1/X for X gamma-distributed with shape α and rate θ.

    Probability density function:
        f(x) = θ^α / Γ(α) * x^(-α-1) * exp(-θ/x) for x > 0
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Closed-form density of the inverse-gamma distribution.

        The density is evaluated as exp(log f), so θ^α and Γ(α) never appear
        on their own and cannot overflow for large shapes.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: Dual (shape)
            - theta: Dual (scale)

        Returns
        -------
        Callable[[Any], Dual]
            Density as a function of a real or dual point
        """
        parameters = cast(_ShapeScale, parameters)

        alpha = parameters.alpha
        theta = parameters.theta
        log_coefficient = alpha * dual_log(theta) - dual_log_gamma(alpha)

        def density(x: Any) -> Dual:
            return dual_exp(log_coefficient - (alpha + 1.0) * dual_log(x) - theta / x)

        return density

    def delegate(parameters: Parametrization) -> rv_frozen:
        parameters = cast(_ShapeScale, parameters)
        return stats.invgamma(a=real_part(parameters.alpha), scale=real_part(parameters.theta))

    def _support(_: Parametrization) -> Callable[[float], bool]:
        """Support of inverse-gamma distribution: (0, ∞)"""
        return lambda x: x > 0.0

    InverseGamma = ParametricFamily(
        name=FamilyName.INVERSE_GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale"],
        formula=formula,
        delegate=delegate,
        support_by_parametrization=_support,
    )
    InverseGamma.__doc__ = INVERSE_GAMMA_DOC

    @parametrization(family=InverseGamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of inverse-gamma distribution.

        Parameters
        ----------
        alpha : Dual
            Shape parameter
        theta : Dual
            Scale parameter
        """

        alpha: Dual
        theta: Dual

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return real_part(self.alpha) > 0

        @constraint(description="theta > 0")
        def check_theta_positive(self) -> bool:
            return real_part(self.theta) > 0

    ParametricFamilyRegister.register(InverseGamma)
