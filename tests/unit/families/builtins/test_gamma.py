"""
Tests for Gamma and Inverse-Gamma Distribution Families
"""

__author__ = "Fedor Myznikov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


import pytest
from scipy.stats import gamma as gamma_dist
from scipy.stats import invgamma

from pysatl_dual.constructors import gamma, inverse_gamma
from pysatl_dual.errors import DomainError
from pysatl_dual.families.configuration import configure_families_register
from pysatl_dual.protocol import density, formula_density, gradient
from pysatl_dual.types import FamilyName

from .base import BaseDistributionTest


class TestGammaFamily(BaseDistributionTest):
    """Test suite for Gamma distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.gamma_family = registry.get(FamilyName.GAMMA)
        self.gamma_dist_example = self.gamma_family(alpha=2.5, theta=1.5)

    def test_parametrization_constraints(self):
        with pytest.raises(DomainError, match="alpha > 0"):
            self.gamma_family(alpha=0.0, theta=1.0)

        with pytest.raises(DomainError, match="theta > 0"):
            self.gamma_family(alpha=1.0, theta=-2.0)

    @pytest.mark.parametrize("x", [0.2, 1.0, 3.7, 9.0])
    def test_density_matches_scipy(self, x):
        assert density(self.gamma_dist_example, x) == pytest.approx(
            gamma_dist.pdf(x, a=2.5, scale=1.5), rel=1e-9
        )
        self.assert_consistent(self.gamma_dist_example, x)

    def test_non_positive_point_has_zero_density(self):
        assert density(self.gamma_dist_example, -0.5) == 0.0
        assert formula_density(self.gamma_dist_example, -0.5).real == 0.0

    @pytest.mark.parametrize("x", [0.2, 1.0, 3.7, 9.0])
    def test_gradient_matches_finite_difference(self, x):
        dist = self.gamma_dist_example
        expected = self.central_difference(lambda t: density(dist, t), x)

        self.assert_close_to_difference(gradient(dist, x), expected)

    @pytest.mark.parametrize("name", ["alpha", "theta"])
    def test_parameter_derivatives(self, name):
        self.assert_parameter_derivative(
            gamma,
            {"alpha": 2.5, "theta": 1.5},
            name,
            lambda x, alpha, theta: gamma_dist.pdf(x, a=alpha, scale=theta),
            2.2,
        )

    @pytest.mark.parametrize("x", [150.0, 200.0, 260.0])
    def test_large_shape_stays_finite(self, x):
        dist = gamma(200.0, 1.0)

        assert formula_density(dist, x).real == pytest.approx(gamma_dist.pdf(x, a=200.0), rel=1e-8)
        expected = self.central_difference(lambda t: density(dist, t), x)
        self.assert_close_to_difference(gradient(dist, x), expected)

    def test_large_shape_derivative(self):
        self.assert_parameter_derivative(
            gamma,
            {"alpha": 200.0, "theta": 1.0},
            "alpha",
            lambda x, alpha, theta: gamma_dist.pdf(x, a=alpha, scale=theta),
            200.0,
        )


class TestInverseGammaFamily(BaseDistributionTest):
    """Test suite for Inverse-Gamma distribution family."""

    def setup_method(self):
        registry = configure_families_register()
        self.inverse_gamma_family = registry.get(FamilyName.INVERSE_GAMMA)
        self.inverse_gamma_dist_example = self.inverse_gamma_family(alpha=3.0, theta=2.0)

    def test_parametrization_constraints(self):
        with pytest.raises(DomainError, match="alpha > 0"):
            self.inverse_gamma_family(alpha=-1.0, theta=1.0)

        with pytest.raises(DomainError, match="theta > 0"):
            self.inverse_gamma_family(alpha=1.0, theta=0.0)

    @pytest.mark.parametrize("x", [0.3, 0.8, 1.0, 2.5, 6.0])
    def test_density_matches_scipy(self, x):
        assert density(self.inverse_gamma_dist_example, x) == pytest.approx(
            invgamma.pdf(x, a=3.0, scale=2.0), rel=1e-9
        )
        self.assert_consistent(self.inverse_gamma_dist_example, x)

    def test_unit_point_with_integer_shape(self):
        # x = 1 with integer alpha exercises the reciprocal form of x^(-alpha-1)
        assert formula_density(self.inverse_gamma_dist_example, 1.0).real == pytest.approx(
            invgamma.pdf(1.0, a=3.0, scale=2.0), rel=1e-9
        )

    @pytest.mark.parametrize("x", [0.3, 0.8, 2.5, 6.0])
    def test_gradient_matches_finite_difference(self, x):
        dist = self.inverse_gamma_dist_example
        expected = self.central_difference(lambda t: density(dist, t), x)

        self.assert_close_to_difference(gradient(dist, x), expected)

    @pytest.mark.parametrize("name", ["alpha", "theta"])
    def test_parameter_derivatives(self, name):
        self.assert_parameter_derivative(
            inverse_gamma,
            {"alpha": 3.0, "theta": 2.0},
            name,
            lambda x, alpha, theta: invgamma.pdf(x, a=alpha, scale=theta),
            0.9,
        )

    @pytest.mark.parametrize("x", [0.9, 1.0, 1.1])
    def test_large_shape_and_scale_stay_finite(self, x):
        dist = inverse_gamma(200.0, 200.0)
        expected_density = invgamma.pdf(x, a=200.0, scale=200.0)

        assert formula_density(dist, x).real == pytest.approx(expected_density, rel=1e-8)
        expected = self.central_difference(lambda t: density(dist, t), x)
        self.assert_close_to_difference(gradient(dist, x), expected)
