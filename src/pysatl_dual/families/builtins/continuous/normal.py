"""
Normal distribution family implementation.

Contains the Normal family with mean/standard deviation and mean/precision
parameterizations.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

from scipy import stats

from pysatl_dual.dual import dual_exp, dual_power, dual_sqrt, real_part
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


def configure_normal_family() -> None:
    """
    Configure and register the Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.NORMAL):
        return

    NORMAL_DOC = """
    Normal (Gaussian) distribution.

    The normal distribution is a continuous probability distribution characterized
    by its bell-shaped curve. It is symmetric about its mean and is defined by
    two parameters: mean (μ) and standard deviation (σ).

    Probability density function:
        f(x) = 1/√(2πσ²) * exp(-(x-μ)²/(2σ²))
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Closed-form density of the normal distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: Dual (mean)
            - sigma: Dual (standard deviation)

        Returns
        -------
        Callable[[Any], Dual]
            Density as a function of a real or dual point
        """
        parameters = cast(_MeanStd, parameters)

        mu = parameters.mu
        variance = parameters.sigma**2
        coefficient = 1.0 / dual_sqrt(2.0 * math.pi * variance)

        def density(x: Any) -> Dual:
            return coefficient * dual_exp(-0.5 * (x - mu) ** 2 / variance)

        return density

    def delegate(parameters: Parametrization) -> rv_frozen:
        """Frozen scipy normal distribution at the real parts of the parameters."""
        parameters = cast(_MeanStd, parameters)
        return stats.norm(loc=real_part(parameters.mu), scale=real_part(parameters.sigma))

    Normal = ParametricFamily(
        name=FamilyName.NORMAL,
        distr_type=UnivariateContinuous,
        distr_parametrizations=["meanStd", "meanPrec"],
        formula=formula,
        delegate=delegate,
    )
    Normal.__doc__ = NORMAL_DOC

    @parametrization(family=Normal, name="meanStd")
    class _MeanStd(Parametrization):
        """
        Standard parametrization of normal distribution.

        Parameters
        ----------
        mu : Dual
            Mean of the distribution
        sigma : Dual
            Standard deviation of the distribution
        """

        mu: Dual
        sigma: Dual

        @constraint(description="sigma > 0")
        def check_sigma_positive(self) -> bool:
            """Check that standard deviation is positive."""
            return real_part(self.sigma) > 0

    @parametrization(family=Normal, name="meanPrec")
    class _MeanPrec(Parametrization):
        """
        Mean-precision parametrization of normal distribution.

        Parameters
        ----------
        mu : Dual
            Mean of the distribution
        tau : Dual
            Precision parameter (inverse variance)
        """

        mu: Dual
        tau: Dual

        @constraint(description="tau > 0")
        def check_tau_positive(self) -> bool:
            """Check that precision parameter is positive."""
            return real_part(self.tau) > 0

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to Standard parametrization.

            Returns
            -------
            Parametrization
                Standard parametrization instance
            """
            sigma = dual_power(self.tau, -0.5)
            return _MeanStd(mu=self.mu, sigma=sigma)  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Normal)
