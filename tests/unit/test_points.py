from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import numpy as np
import pytest

from pysatl_dual.dual import Dual, is_dual, real_part, tangent
from pysatl_dual.points import DualPoint, RealPoint, as_point, seed, seed_scalar


class TestAsPoint:
    def test_real_scalar(self) -> None:
        point = as_point(1.5)

        assert isinstance(point, RealPoint)
        assert point.value == 1.5
        assert not point.is_vector

    def test_real_vector(self) -> None:
        point = as_point([1.0, 2.0])

        assert isinstance(point, RealPoint)
        assert point.is_vector
        np.testing.assert_array_equal(point.value, [1.0, 2.0])

    def test_dual_scalar(self) -> None:
        value = Dual(1.0, ["x"], [1.0])
        point = as_point(value)

        assert isinstance(point, DualPoint)
        assert point.value is value

    def test_vector_with_one_dual_component_is_dual(self) -> None:
        point = as_point([1.0, Dual(2.0, ["x"], [1.0]), 3.0])

        assert isinstance(point, DualPoint)
        assert point.is_vector
        assert all(is_dual(component) for component in point.value)
        np.testing.assert_array_equal(real_part(point.value), [1.0, 2.0, 3.0])

    def test_tagged_point_passes_through(self) -> None:
        point = RealPoint(0.5)

        assert as_point(point) is point

    def test_real_point_promotes_to_dual(self) -> None:
        promoted = RealPoint(np.array([1.0, 2.0])).to_dual()

        assert isinstance(promoted, DualPoint)
        assert all(tangent(component) == 0.0 for component in promoted.value)


class TestSeed:
    def test_unit_tangent_on_selected_coordinate(self) -> None:
        seeded = seed([0.5, 1.5, 2.5], 1)

        assert seeded.shape == (3,)
        np.testing.assert_array_equal(real_part(seeded), [0.5, 1.5, 2.5])
        assert [tangent(component) for component in seeded] == [0.0, 1.0, 0.0]

    @pytest.mark.parametrize("i", [-1, 3])
    def test_out_of_range_coordinate(self, i: int) -> None:
        with pytest.raises(IndexError):
            seed([0.5, 1.5, 2.5], i)

    def test_seeding_does_not_mutate_input(self) -> None:
        x = np.array([0.5, 1.5])
        seed(x, 0)

        np.testing.assert_array_equal(x, [0.5, 1.5])

    def test_scalar_seed(self) -> None:
        seeded = seed_scalar(0.75)

        assert seeded.real == 0.75
        assert tangent(seeded) == 1.0

    def test_scalar_seed_resets_existing_tangent(self) -> None:
        seeded = seed_scalar(Dual(0.75, ["y"], [3.0]))

        assert tangent(seeded) == 1.0
        assert tangent(seeded, "y") == 0.0
