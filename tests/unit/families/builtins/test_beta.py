"""
Tests for Beta and Student's t Distribution Families
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import math

import numpy as np
import pytest
from scipy.stats import beta as beta_dist
from scipy.stats import t as t_dist

from pysatl_dual.constructors import beta, student_t
from pysatl_dual.errors import DomainError
from pysatl_dual.families.configuration import configure_families_register
from pysatl_dual.protocol import density, formula_density, gradient
from pysatl_dual.types import FamilyName

from .base import BaseDistributionTest


class TestBetaFamily(BaseDistributionTest):
    """Test suite for Beta distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.beta_family = registry.get(FamilyName.BETA)
        self.beta_dist_example = self.beta_family(alpha=2.0, beta=3.5)

    def test_parametrization_constraints(self):
        with pytest.raises(DomainError, match="alpha > 0"):
            self.beta_family(alpha=0.0, beta=1.0)

        with pytest.raises(DomainError, match="beta > 0"):
            self.beta_family(alpha=1.0, beta=-0.5)

    @pytest.mark.parametrize("x", np.linspace(0.05, 0.95, 10))
    def test_uniform_case(self, x):
        uniform = beta(1.0, 1.0)

        assert density(uniform, x) == pytest.approx(1.0)
        assert formula_density(uniform, x).real == pytest.approx(1.0)
        assert math.isclose(gradient(uniform, x), 0.0, abs_tol=1e-12)

    def test_uniform_case_at_point_nine(self):
        uniform = beta(1, 1)

        assert density(uniform, 0.9) == pytest.approx(1.0)
        assert math.isclose(gradient(uniform, 0.9), 0.0, abs_tol=1e-12)

    @pytest.mark.parametrize("x", [0.1, 0.35, 0.6, 0.9])
    def test_density_matches_scipy(self, x):
        assert density(self.beta_dist_example, x) == pytest.approx(
            beta_dist.pdf(x, 2.0, 3.5), rel=1e-9
        )
        self.assert_consistent(self.beta_dist_example, x)

    @pytest.mark.parametrize("x", [-0.2, 1.4])
    def test_outside_unit_interval_has_zero_density(self, x):
        assert density(self.beta_dist_example, x) == 0.0
        assert formula_density(self.beta_dist_example, x).real == 0.0

    @pytest.mark.parametrize("x", [0.1, 0.6, 0.9])
    def test_gradient_matches_finite_difference(self, x):
        dist = self.beta_dist_example
        expected = self.central_difference(lambda t: density(dist, t), x)

        self.assert_close_to_difference(gradient(dist, x), expected)

    @pytest.mark.parametrize("name", ["alpha", "beta"])
    def test_parameter_derivatives(self, name):
        self.assert_parameter_derivative(
            beta,
            {"alpha": 2.0, "beta": 3.5},
            name,
            lambda x, alpha, beta: beta_dist.pdf(x, alpha, beta),
            0.3,
        )

    @pytest.mark.parametrize("x", [0.5, 0.57, 0.65])
    def test_large_shapes_stay_finite(self, x):
        dist = beta(120.0, 90.0)

        assert formula_density(dist, x).real == pytest.approx(
            beta_dist.pdf(x, 120.0, 90.0), rel=1e-8
        )
        expected = self.central_difference(lambda t: density(dist, t), x)
        self.assert_close_to_difference(gradient(dist, x), expected)


class TestStudentTFamily(BaseDistributionTest):
    """Test suite for Student's t distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.student_t_family = registry.get(FamilyName.STUDENT_T)
        self.student_t_dist_example = self.student_t_family(nu=4.5)

    def test_parametrization_constraints(self):
        with pytest.raises(DomainError, match="nu > 0"):
            self.student_t_family(nu=0.0)

    @pytest.mark.parametrize("x", [-4.0, -1.0, 0.0, 0.7, 3.0])
    def test_density_matches_scipy(self, x):
        assert density(self.student_t_dist_example, x) == pytest.approx(
            t_dist.pdf(x, 4.5), rel=1e-9
        )
        self.assert_consistent(self.student_t_dist_example, x)

    @pytest.mark.parametrize("x", [-4.0, -1.0, 0.7, 3.0])
    def test_gradient_matches_finite_difference(self, x):
        dist = self.student_t_dist_example
        expected = self.central_difference(lambda t: density(dist, t), x)

        self.assert_close_to_difference(gradient(dist, x), expected)

    def test_parameter_derivative(self):
        self.assert_parameter_derivative(
            student_t,
            {"nu": 4.5},
            "nu",
            lambda x, nu: t_dist.pdf(x, nu),
            1.2,
        )

    @pytest.mark.parametrize("x", [-1.5, 0.5, 2.0])
    def test_many_degrees_of_freedom_stay_finite(self, x):
        dist = student_t(400.0)

        assert formula_density(dist, x).real == pytest.approx(t_dist.pdf(x, 400.0), rel=1e-8)
        expected = self.central_difference(lambda t: density(dist, t), x)
        self.assert_close_to_difference(gradient(dist, x), expected)
