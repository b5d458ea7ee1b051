"""
Categorical distribution family implementation.

Categories are labelled ``0, 1, ..., n-1``.
"""

from __future__ import annotations

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import math
from typing import TYPE_CHECKING, cast

import numpy as np
from scipy import stats

from pysatl_dual.dual import real_part
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

    from pysatl_dual.dual import Dual
    from pysatl_dual.types import DualArray

PROBABILITY_SUM_TOLERANCE = 1e-10


def configure_categorical_family() -> None:
    """
    Configure and register the Categorical distribution family.
    """

    if ParametricFamilyRegister.contains(FamilyName.CATEGORICAL):
        return

    CATEGORICAL_DOC = """
    Categorical distribution.

    One draw over n categories, category k having probability p[k].

    Probability mass function:
        f(k) = p[k] for k ∈ {0, ..., n-1}
    """

    def formula(parameters: Parametrization) -> Callable[[Any], Dual]:
        """
        Mass function of the categorical distribution.

        The outcome is used only through its real part, as an index into
        the probability vector. Any tangent carried by the outcome is
        dropped, so differentiating through a categorical outcome yields
        the tangent of ``p[k]`` rather than a derivative in ``k``.

        Parameters
        ----------
        parameters : Parametrization
            Distribution parameters object with fields:
            - p: DualArray (probability vector)

        Returns
        -------
        Callable[[Any], Dual]
            Mass as a function of a real or dual outcome
        """
        parameters = cast(_Probabilities, parameters)

        p = parameters.p

        def density(k: Any) -> Dual:
            return cast("Dual", p[int(round(real_part(k)))])

        return density

    def delegate(parameters: Parametrization) -> Any:
        parameters = cast(_Probabilities, parameters)
        probabilities = real_part(parameters.p)
        return stats.rv_discrete(values=(np.arange(probabilities.size), probabilities))

    def _support(parameters: Parametrization) -> Callable[[float], bool]:
        """Support of categorical distribution: {0, ..., n-1}"""
        n = cast(_Probabilities, parameters).p.size
        return lambda k: float(k).is_integer() and 0 <= k < n

    Categorical = ParametricFamily(
        name=FamilyName.CATEGORICAL,
        distr_type=UnivariateDiscrete,
        distr_parametrizations=["probabilities", "uniform"],
        formula=formula,
        delegate=delegate,
        support_by_parametrization=_support,
    )
    Categorical.__doc__ = CATEGORICAL_DOC

    @parametrization(family=Categorical, name="probabilities")
    class _Probabilities(Parametrization):
        """
        Probability-vector parametrization of categorical distribution.

        Parameters
        ----------
        p : DualArray
            Probabilities of categories 0..n-1
        """

        p: DualArray

        @constraint(description="p is a non-empty vector")
        def check_p_vector(self) -> bool:
            return isinstance(self.p, np.ndarray) and self.p.ndim == 1 and self.p.size > 0

        @constraint(description="p >= 0")
        def check_p_non_negative(self) -> bool:
            return bool(np.all(real_part(self.p) >= 0.0))

        @constraint(description="sum(p) == 1")
        def check_p_sums_to_one(self) -> bool:
            return math.isclose(
                float(np.sum(real_part(self.p))), 1.0, abs_tol=PROBABILITY_SUM_TOLERANCE
            )

    @parametrization(family=Categorical, name="uniform")
    class _Uniform(Parametrization):
        """
        Uniform parametrization of categorical distribution.

        Parameters
        ----------
        n : Dual
            Number of equally likely categories
        """

        n: Dual

        @constraint(description="n is a positive integer")
        def check_n_positive_integer(self) -> bool:
            n = real_part(self.n)
            return n >= 1 and float(n).is_integer()

        def transform_to_base_parametrization(self) -> Parametrization:
            """
            Transform to probability-vector parametrization.

            Returns
            -------
            Parametrization
                Probability-vector parametrization instance
            """
            n = int(real_part(self.n))
            return _Probabilities(p=np.full(n, 1.0 / n))  # type: ignore[call-arg]

    ParametricFamilyRegister.register(Categorical)
