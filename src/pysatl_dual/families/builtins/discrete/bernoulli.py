"""
Bernoulli distribution family implementation.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, cast

from scipy import stats

from pysatl_dual.dual import dual_power, real_part
from pysatl_dual.families.parametric_family import ParametricFamily
from pysatl_dual.families.parametrizations import (
    Parametrization,
    constraint,
    parametrization,
)
from pysatl_dual.families.registry import ParametricFamilyRegister
from pysatl_dual.types import FamilyName, UnivariateDiscrete

if TYPE_CHECKING:
    from collections.abc import Callable
    from typing import Any

    from scipy.stats._distn_infrastructure import rv_frozen

    from pysatl_dual.dual import Dual


def configure_bernoulli_family() -> None:
    """
    Configure and register the Bernoulli distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.BERNOULLI):
        return

    BERNOULLI_DOC = """
    Bernoulli distribution.

    Outcome of a single binary trial succeeding with probability p.

    Probability mass function:
        f(k) = p^k * (1-p)^(1-k) for k ∈ {0, 1}
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Closed-form mass function of the Bernoulli distribution.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - p: Dual (success probability)

        Returns
        -------
        Callable[[Any], Dual]
            Mass as a function of a real or dual outcome
        """
        parameters = cast(_Probability, parameters)

        p = parameters.p

        def density(k: Any) -> Dual:
            return dual_power(p, k) * dual_power(1.0 - p, 1.0 - k)

        return density

    def delegate(parameters: Parametrization) -> rv_frozen:
        parameters = cast(_Probability, parameters)
        return stats.bernoulli(p=real_part(parameters.p))

    def _support(_: Parametrization) -> Callable[[float], bool]:
        """Support of Bernoulli distribution: {0, 1}"""
        return lambda k: k in (0.0, 1.0)

    Bernoulli = ParametricFamily(
        name=FamilyName.BERNOULLI,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probability"],
        formula=formula,
        delegate=delegate,
        support_by_parametrization=_support,
    )
    Bernoulli.__doc__ = BERNOULLI_DOC

    @parametrization(family=Bernoulli, name="probability")
    class _Probability(Parametrization):
        """
        Success-probability parametrization of Bernoulli distribution.

        Parameters
        ----------
        p : Dual
            Probability of the outcome 1
        """

        p: Dual

        @constraint(description="0 <= p <= 1")
        def check_p_in_unit_interval(self) -> bool:
            """Check that probability lies in [0, 1]."""
            return 0.0 <= real_part(self.p) <= 1.0

    ParametricFamilyRegister.register(Bernoulli)
