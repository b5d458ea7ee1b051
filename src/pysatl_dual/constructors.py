"""
Constructors
============

One constructor per built-in family. Each accepts plain reals or dual numbers
(reals are promoted to duals with zero tangent) and raises
:class:`~pysatl_dual.errors.DomainError` for parameters outside the family's
domain.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING

from pysatl_dual.families.configuration import configure_families_register
from pysatl_dual.types import FamilyName

if TYPE_CHECKING:
    from typing import Any

    from pysatl_dual.families.distribution import DualDistribution


def _build(
    name: FamilyName, parametrization_name: str | None = None, **values: Any
) -> DualDistribution:
    family = configure_families_register().get(name)
    return family(parametrization_name=parametrization_name, **values)


def bernoulli(p: Any) -> DualDistribution:
    """Bernoulli distribution with success probability ``p``."""
    return _build(FamilyName.BERNOULLI, p=p)


def categorical(p: Any = None, *, n: int | None = None) -> DualDistribution:
    """
    Categorical distribution over ``0..n-1``.

    Parameters
    ----------
    p : array-like, optional
        Probability vector.
    n : int, optional
        Number of equally likely categories; used when ``p`` is omitted.

    Raises
    ------
    TypeError
        If neither or both of ``p`` and ``n`` are given.
    """
    if (p is None) == (n is None):
        raise TypeError("categorical() takes exactly one of 'p' or 'n'")
    if p is None:
        return _build(FamilyName.CATEGORICAL, "uniform", n=n)
    return _build(FamilyName.CATEGORICAL, p=p)


def normal(mu: Any, sigma: Any) -> DualDistribution:
    """Normal distribution with mean ``mu`` and standard deviation ``sigma``."""
    return _build(FamilyName.NORMAL, mu=mu, sigma=sigma)


def mv_normal(mu: Any, sigma: Any) -> DualDistribution:
    """Multivariate normal distribution with mean vector ``mu`` and covariance ``sigma``."""
    return _build(FamilyName.MULTIVARIATE_NORMAL, mu=mu, sigma=sigma)


def student_t(nu: Any) -> DualDistribution:
    """Student's t distribution with ``nu`` degrees of freedom."""
    return _build(FamilyName.STUDENT_T, nu=nu)


def exponential(theta: Any) -> DualDistribution:
    """Exponential distribution with scale ``theta``."""
    return _build(FamilyName.EXPONENTIAL, theta=theta)


def gamma(alpha: Any, theta: Any) -> DualDistribution:
    """Gamma distribution with shape ``alpha`` and scale ``theta``."""
    return _build(FamilyName.GAMMA, alpha=alpha, theta=theta)


def inverse_gamma(alpha: Any, theta: Any) -> DualDistribution:
    """Inverse-gamma distribution with shape ``alpha`` and scale ``theta``."""
    return _build(FamilyName.INVERSE_GAMMA, alpha=alpha, theta=theta)


def beta(alpha: Any, beta: Any) -> DualDistribution:
    """Beta distribution with shapes ``alpha`` and ``beta``."""
    return _build(FamilyName.BETA, alpha=alpha, beta=beta)


__all__ = [
    "bernoulli",
    "categorical",
    "normal",
    "mv_normal",
    "student_t",
    "exponential",
    "gamma",
    "inverse_gamma",
    "beta",
]
