"""
Exponential distribution family implementation.

Contains the Exponential family with scale and rate parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from scipy import stats

from pysatl_dual.dual import dual_exp, real_part
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


def configure_exponential_family() -> None:
    """
    Configure and register the Exponential distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.EXPONENTIAL):
        return

    EXPONENTIAL_DOC = """
    Exponential distribution.

    The exponential distribution is a continuous probability distribution that
    describes the time between events in a Poisson process. It has a single
    parameter: scale (θ) or rate (λ = 1/θ).

    Probability density function (scale parametrization):
        f(x) = (1/θ) * exp(-x/θ) for x ≥ 0
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Closed-form density of the exponential distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - theta: Dual (scale parameter)

        Returns
        -------
        Callable[[Any], Dual]
            Density as a function of a real or dual point
        """
        parameters = cast(_Scale, parameters)

        theta = parameters.theta
        coefficient = 1.0 / theta

        def density(x: Any) -> Dual:
            return coefficient * dual_exp(-x / theta)

        return density

    def delegate(parameters: Parametrization) -> rv_frozen:
        parameters = cast(_Scale, parameters)
        return stats.expon(scale=real_part(parameters.theta))

    def _support(_: Parametrization) -> Callable[[float], bool]:
        """Support of exponential distribution: [0, ∞)"""
        return lambda x: x >= 0.0

    Exponential = ParametricFamily(
        name=FamilyName.EXPONENTIAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["scale", "rate"],
        formula=formula,
        delegate=delegate,
        support_by_parametrization=_support,
    )
    Exponential.__doc__ = EXPONENTIAL_DOC

    @parametrization(family=Exponential, name="scale")
    class _Scale(Parametrization):
        """
        Scale parametrization of exponential distribution.

        Parameters
        ----------
        theta : Dual
            Scale parameter (mean of the distribution)
        """

        theta: Dual

        @constraint(description="theta > 0")
        def check_theta_positive(self) -> bool:
            """Check that scale parameter is positive."""
            return real_part(self.theta) > 0

    @parametrization(family=Exponential, name="rate")
    class _Rate(Parametrization):
        """
        Rate parametrization of exponential distribution.

        Parameters
        ----------
        lambda_ : Dual
            Rate parameter (inverse of scale)
        """

        lambda_: Dual

        @constraint(description="lambda_ > 0")
        def check_lambda_positive(self) -> bool:
            """Check that rate parameter is positive."""
            return real_part(self.lambda_) > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Scale parametrization.

            Returns
            -------
            Parametrization
                Scale parametrization instance
            """
            return _Scale(theta=1.0 / self.lambda_)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Exponential)
