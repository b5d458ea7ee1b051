"""
Gamma distribution family implementation.
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


def configure_gamma_family() -> None:
    """
    Configure and register the Gamma distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.GAMMA):
        return

    GAMMA_DOC = """
    Gamma distribution.

    Continuous distribution on (0, ∞) with shape (α) and scale (θ).

    Probability density function:
        f(x) = 1/(Γ(α)θ) * (x/θ)^(α-1) * exp(-x/θ) for x > 0
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Closed-form density of the gamma distribution.

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
        log_coefficient = -dual_log_gamma(alpha) - alpha * dual_log(theta)

        def density(x: Any) -> Dual:
            return dual_exp(log_coefficient + (alpha - 1.0) * dual_log(x) - x / theta)

        return density

    def delegate(parameters: Parametrization) -> rv_frozen:
        parameters = cast(_ShapeScale, parameters)
        return stats.gamma(a=real_part(parameters.alpha), scale=real_part(parameters.theta))

    def _support(_: Parametrization) -> Callable[[float], bool]:
        """Support of gamma distribution: (0, ∞)"""
        return lambda x: x > 0.0

    Gamma = ParametricFamily(
        name=FamilyName.GAMMA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapeScale"],
        formula=formula,
        delegate=delegate,
        support_by_parametrization=_support,
    )
    Gamma.__doc__ = GAMMA_DOC

    @parametrization(family=Gamma, name="shapeScale")
    class _ShapeScale(Parametrization):
        """
        Shape-scale parametrization of gamma distribution.

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

    ParametricFamilyRegister.register(Gamma)
