"""
Multivariate normal distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import stats

from pysatl_dual.dual import dual_exp, real_part
from pysatl_dual.families.parametric_family import ParametricFamily
from pysatl_dual.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_dual.families.registry import ParametricFamilyRegister
from pysatl_dual.types import EuclideanDistributionType, FamilyName, Kind

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from pysatl_dual.dual import Dual
    from pysatl_dual.types import DualArray

SYMMETRY_TOLERANCE = 1e-10


def configure_multivariate_normal_family() -> None:
    """
    Configure and register the Multivariate Normal distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.MULTIVARIATE_NORMAL):
        return

    MULTIVARIATE_NORMAL_DOC = """
    Multivariate normal distribution.

    Gaussian distribution over n-dimensional vectors with mean vector μ and
    symmetric positive-definite covariance matrix Σ.

    Probability density function:
        f(x) = (2π)^(-n/2) det(Σ)^(-1/2) * exp(-(x-μ)ᵀ Σ⁻¹ (x-μ) / 2)
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Closed-form density of the multivariate normal distribution.

        The precision matrix and the determinant are computed once, from the
        real part of Σ, and reused by every evaluation. Tangents therefore
        propagate through μ and the point, not through Σ.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - mu: DualArray (mean vector of length n)
            - sigma: DualArray (n x n covariance matrix)

        Returns
        -------
        Callable[[Any], Dual]
            Density as a function of a real or dual vector
        """
        parameters = cast(_MeanCov, parameters)

        mu = parameters.mu
        covariance = real_part(parameters.sigma)
        n = mu.size
        precision = np.linalg.inv(covariance).astype(object)
        coefficient = 1.0 / math.sqrt((2.0 * math.pi) ** n * float(np.linalg.det(covariance)))

        def density(x: Any) -> Dual:
            diff = np.asarray(x, dtype=object) - mu
            quadratic = diff @ precision @ diff
            return coefficient * dual_exp(-0.5 * quadratic)

        return density

    def delegate(parameters: Parametrization) -> Any:
        parameters = cast(_MeanCov, parameters)
        return stats.multivariate_normal(
            mean=real_part(parameters.mu), cov=real_part(parameters.sigma)
        )

    def _distr_type(parameters: Parametrization) -> EuclideanDistributionType:
        return EuclideanDistributionType(
            kind=Kind.CONTINUOUS, dimension=cast(_MeanCov, parameters).mu.size
        )

    MultivariateNormal = ParametricFamily(
        name=FamilyName.MULTIVARIATE_NORMAL,
        distr_type=_distr_type,
        distr_parametrizations=["meanCov"],
        formula=formula,
        delegate=delegate,
    )
    MultivariateNormal.__doc__ = MULTIVARIATE_NORMAL_DOC

    @parametrization(family=MultivariateNormal, name="meanCov")
    class _MeanCov(Parametrization):
        """
        Mean-covariance parametrization of multivariate normal distribution.

        Parameters
        ----------
        mu : DualArray
            Mean vector
        sigma : DualArray
            Covariance matrix
        """

        mu: DualArray
        sigma: DualArray

        @constraint(description="mu is a non-empty vector")
        def check_mu_vector(self) -> bool:
            return isinstance(self.mu, np.ndarray) and self.mu.ndim == 1 and self.mu.size > 0

        @constraint(description="sigma is an n x n matrix")
        def check_sigma_shape(self) -> bool:
            return isinstance(self.sigma, np.ndarray) and self.sigma.shape == (
                self.mu.size,
                self.mu.size,
            )

        @constraint(description="sigma is symmetric")
        def check_sigma_symmetric(self) -> bool:
            covariance = real_part(self.sigma)
            return bool(np.allclose(covariance, covariance.T, atol=SYMMETRY_TOLERANCE))

        @constraint(description="sigma is positive-definite")
        def check_sigma_positive_definite(self) -> bool:
            try:
                np.linalg.cholesky(real_part(self.sigma))
            except np.linalg.LinAlgError:
                return False
            return True

    ParametricFamilyRegister.register(MultivariateNormal)
