"""
Beta distribution family implementation.
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


def configure_beta_family() -> None:
    """
    Configure and register the Beta distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BETA):
        return

    BETA_DOC = """
    Beta distribution.

    Continuous distribution on the unit interval with two positive shape
    parameters α and β. Beta(1, 1) is the uniform distribution on (0, 1).

    Probability density function:
        f(x) = Γ(α+β)/(Γ(α)Γ(β)) * x^(α-1) * (1-x)^(β-1) for 0 < x < 1
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Closed-form density of the beta distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - alpha: Dual (first shape)
            - beta: Dual (second shape)

        Returns
        -------
        Callable[[Any], Dual]
            Density as a function of a real or dual point
        """
        parameters = cast(_Shapes, parameters)

        alpha = parameters.alpha
        beta = parameters.beta
        log_coefficient = (
            dual_log_gamma(alpha + beta) - dual_log_gamma(alpha) - dual_log_gamma(beta)
        )

        def density(x: Any) -> Dual:
            return dual_exp(
                log_coefficient + (alpha - 1.0) * dual_log(x) + (beta - 1.0) * dual_log(1.0 - x)
            )

        return density

    def delegate(parameters: Parametrization) -> rv_frozen:
        parameters = cast(_Shapes, parameters)
        return stats.beta(a=real_part(parameters.alpha), b=real_part(parameters.beta))

    def _support(_: Parametrization) -> Callable[[float], bool]:
        """Support of beta distribution: (0, 1)"""
        return lambda x: 0.0 < x < 1.0

    Beta = ParametricFamily(
        name=FamilyName.BETA,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["shapes"],
        formula=formula,
        delegate=delegate,
        support_by_parametrization=_support,
    )
    Beta.__doc__ = BETA_DOC

    @parametrization(family=Beta, name="shapes")
    class _Shapes(Parametrization):
        """
        Shape parametrization of beta distribution.

        Parameters
        ----------
        alpha : Dual
            First shape parameter
        beta : Dual
            Second shape parameter
        """

        alpha: Dual
        beta: Dual

        @constraint(description="alpha > 0")
        def check_alpha_positive(self) -> bool:
            return real_part(self.alpha) > 0

        @constraint(description="beta > 0")
        def check_beta_positive(self) -> bool:
            return real_part(self.beta) > 0

    ParametricFamilyRegister.register(Beta)
