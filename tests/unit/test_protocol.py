"""
Cross-family checks of the evaluation protocol.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from typing import Any

import numpy as np
import pytest
from scipy import stats

from pysatl_dual import constructors
from pysatl_dual.dual import Dual, is_dual, real_part, to_dual
from pysatl_dual.errors import DomainError, NumericDegeneracyError
from pysatl_dual.families import ParametricFamily, Parametrization
from pysatl_dual.protocol import density, formula_density, gradient, log_density, sample
from pysatl_dual.types import Kind, UnivariateContinuous

CONTINUOUS_CASES: list[tuple[str, dict[str, Any], list[float]]] = [
    ("normal", {"mu": 0.2, "sigma": 1.3}, [-1.7, 0.9, 2.4]),
    ("student_t", {"nu": 3.0}, [-2.2, 0.4, 1.9]),
    ("exponential", {"theta": 0.8}, [0.1, 1.0, 2.6]),
    ("gamma", {"alpha": 3.2, "theta": 0.7}, [0.5, 1.8, 4.0]),
    ("inverse_gamma", {"alpha": 2.4, "theta": 1.1}, [0.3, 0.9, 2.2]),
    ("beta", {"alpha": 2.5, "beta": 1.7}, [0.15, 0.45, 0.85]),
]


def _build(name: str, parameters: dict[str, Any]) -> Any:
    return getattr(constructors, name)(**parameters)


def _cases() -> list[tuple[str, dict[str, Any], float]]:
    return [(name, params, x) for name, params, points in CONTINUOUS_CASES for x in points]


class TestRealDualConsistency:
    @pytest.mark.parametrize("name, parameters, x", _cases())
    def test_formula_agrees_with_delegate(
        self, name: str, parameters: dict[str, Any], x: float
    ) -> None:
        dist = _build(name, parameters)

        real_value = density(dist, x)
        dual_value = density(dist, to_dual(x))

        assert isinstance(real_value, float)
        assert is_dual(dual_value)
        assert math.isclose(dual_value.real, real_value, rel_tol=1e-9)
        assert math.isclose(formula_density(dist, x).real, real_value, rel_tol=1e-9)

    @pytest.mark.parametrize("name, parameters, x", _cases())
    def test_gradient_matches_central_difference(
        self, name: str, parameters: dict[str, Any], x: float
    ) -> None:
        dist = _build(name, parameters)
        h = 1e-6
        expected = (density(dist, x + h) - density(dist, x - h)) / (2 * h)

        assert math.isclose(gradient(dist, x), expected, rel_tol=1e-4, abs_tol=1e-8)


class TestConstructionValidation:
    @pytest.mark.parametrize(
        "name, parameters",
        [
            ("bernoulli", {"p": 1.5}),
            ("normal", {"mu": 0.0, "sigma": -1.0}),
            ("beta", {"alpha": 0.0, "beta": 1.0}),
            ("mv_normal", {"mu": [0.0, 0.0], "sigma": [[1.0, 3.0], [3.0, 1.0]]}),
        ],
    )
    def test_out_of_domain_parameters_raise(self, name: str, parameters: dict[str, Any]) -> None:
        with pytest.raises(DomainError):
            _build(name, parameters)

    def test_domain_error_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            constructors.gamma(alpha=-1.0, theta=1.0)

    def test_dual_parameters_are_validated_on_real_part(self) -> None:
        with pytest.raises(DomainError):
            constructors.exponential(Dual(-1.0, ["theta"], [1.0]))


class TestImmutability:
    def test_distribution_is_frozen(self) -> None:
        dist = constructors.normal(0.0, 1.0)

        with pytest.raises(AttributeError):
            dist.family_name = "Other"  # type: ignore[misc]

    def test_new_parameters_create_new_distribution(self) -> None:
        first = constructors.normal(0.0, 1.0)
        second = constructors.normal(1.0, 1.0)

        assert first is not second
        assert real_part(first.parameters.mu) == 0.0
        assert second.delegate.mean() == pytest.approx(1.0)


class TestLogDensityAndSampling:
    def test_log_density_is_real_only(self) -> None:
        dist = constructors.gamma(2.0, 1.0)

        assert log_density(dist, 1.5) == pytest.approx(math.log(density(dist, 1.5)))
        with pytest.raises(TypeError):
            log_density(dist, to_dual(1.5))

    def test_sample_returns_plain_reals(self) -> None:
        dist = constructors.beta(2.0, 2.0)

        single = sample(dist, random_state=0)
        many = sample(dist, size=20, random_state=0)

        assert np.ndim(single) == 0
        assert np.shape(many) == (20,)
        assert np.all((many > 0.0) & (many < 1.0))

    def test_discrete_kind_is_reported(self) -> None:
        assert constructors.bernoulli(0.4).kind == Kind.DISCRETE
        assert constructors.normal(0.0, 1.0).kind == Kind.CONTINUOUS


class TestLogging:
    def test_construction_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pysatl_dual"):
            constructors.normal(0.0, 1.0)

        assert any("Built Normal distribution" in record.message for record in caplog.records)

    def test_rejected_parameters_are_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="pysatl_dual"):
            with pytest.raises(DomainError):
                constructors.normal(0.0, -1.0)

        assert any("Rejected Normal parameters" in record.message for record in caplog.records)


class TestGradientPoints:
    @pytest.mark.parametrize("x", [np.array(0.5), [0.5], (0.5,), np.array([0.5])])
    def test_single_coordinate_container_on_univariate_family(self, x: Any) -> None:
        dist = constructors.normal(0.0, 1.0)
        expected = gradient(dist, 0.5)

        result = gradient(dist, x)

        assert np.shape(result) == np.shape(x)
        assert float(np.asarray(result).reshape(())) == pytest.approx(expected, rel=1e-12)

    def test_single_coordinate_dual_vector_on_univariate_family(self) -> None:
        dist = constructors.gamma(2.0, 1.0)

        value = formula_density(dist, [to_dual(1.5)])

        assert value.real == pytest.approx(density(dist, 1.5), rel=1e-9)

    def test_parameter_seeded_along_point_variable_is_rejected(self) -> None:
        dist = constructors.normal(Dual(0.0, ["x"], [1.0]), 1.0)

        with pytest.raises(ValueError, match="reserved for the evaluation point"):
            gradient(dist, 0.5)

    def test_parameter_seeded_along_point_variable_in_vector(self) -> None:
        dist = constructors.mv_normal([Dual(0.0, ["x"], [1.0]), 0.0], np.eye(2))

        with pytest.raises(ValueError, match="'mu'"):
            gradient(dist, [0.1, 0.2])

    def test_parameters_seeded_along_other_names_are_accepted(self) -> None:
        dist = constructors.normal(Dual(0.0, ["mu"], [1.0]), 1.0)

        assert gradient(dist, 0.5) == pytest.approx(-0.5 * density(dist, 0.5), rel=1e-9)


class TestNumericDegeneracy:
    @staticmethod
    def make_degenerate_distribution() -> Any:
        family = ParametricFamily(
            name="Degenerate",
            distr_type=UnivariateContinuous,
            distr_parametrizations=["base"],
            formula=lambda parameters: lambda x: x * math.nan,
            delegate=lambda parameters: stats.norm(),
        )

        @family.parametrization(name="base")
        class _Base(Parametrization):
            value: Any

        return family(value=1.0)

    def test_nan_formula_raises(self) -> None:
        dist = self.make_degenerate_distribution()

        with pytest.raises(NumericDegeneracyError, match="Degenerate density evaluated to NaN"):
            density(dist, to_dual(0.5))

    def test_nan_gradient_raises(self) -> None:
        dist = self.make_degenerate_distribution()

        with pytest.raises(NumericDegeneracyError):
            gradient(dist, 0.5)

    def test_real_points_use_the_delegate(self) -> None:
        dist = self.make_degenerate_distribution()

        assert density(dist, 0.0) == pytest.approx(1.0 / math.sqrt(2.0 * math.pi))
