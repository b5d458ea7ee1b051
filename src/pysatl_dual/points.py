"""
Evaluation Points
=================

Tagged union over the numeric kinds an evaluation point may take:

- :class:`RealPoint`: a plain real scalar or a real vector;
- :class:`DualPoint`: a dual scalar or a vector of dual numbers.

Dispatch in :mod:`pysatl_dual.protocol` pattern-matches on these tags
instead of inspecting raw values ad hoc.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_dual.dual import SEED_VARIABLE, Dual, is_dual, to_dual, to_dual_array

if TYPE_CHECKING:
    from pysatl_dual.types import DualArray, NumericArray


@dataclass(frozen=True, slots=True)
class RealPoint:
    """
    Evaluation point made of plain reals.

    Parameters
    ----------
    value : float or NumericArray
        Scalar or vector of reals.
    """

    value: float | NumericArray

    @property
    def is_vector(self) -> bool:
        return isinstance(self.value, np.ndarray)

    def to_dual(self) -> DualPoint:
        """Promote to a dual point with zero tangents."""
        if isinstance(self.value, np.ndarray):
            return DualPoint(to_dual_array(self.value))
        return DualPoint(to_dual(self.value))


@dataclass(frozen=True, slots=True)
class DualPoint:
    """
    Evaluation point carrying dual numbers.

    Parameters
    ----------
    value : Dual or DualArray
        Dual scalar, or object array in which every element is dual.
    """

    value: Dual | DualArray

    @property
    def is_vector(self) -> bool:
        return isinstance(self.value, np.ndarray)


type Point = RealPoint | DualPoint
"""An evaluation point, tagged by its numeric kind."""


def as_point(x: Any) -> Point:
    """
    Classify a raw value as a real or dual evaluation point.

    A vector is dual as soon as one of its components is dual; the remaining
    components are then promoted with :func:`pysatl_dual.dual.to_dual`.

    Parameters
    ----------
    x : Any
        Scalar, sequence, ndarray, or an already tagged point.

    Returns
    -------
    Point
        Tagged evaluation point.
    """
    if isinstance(x, RealPoint | DualPoint):
        return x
    if is_dual(x):
        return DualPoint(x)
    if isinstance(x, list | tuple | np.ndarray):
        arr = np.asarray(x, dtype=object)
        if any(is_dual(component) for component in arr.flat):
            return DualPoint(to_dual_array(arr))
        return RealPoint(np.asarray(x, dtype=float))
    return RealPoint(float(x))


def seed(x: Any, i: int, variable: str = SEED_VARIABLE) -> DualArray:
    """
    Build a dual vector with a unit tangent on coordinate ``i`` only.

    Parameters
    ----------
    x : array-like of float
        Real coordinates of the point.
    i : int
        Index of the coordinate to differentiate along.
    variable : str, default=SEED_VARIABLE
        Name of the tangent direction.

    Returns
    -------
    DualArray
        Object array of dual numbers; coordinate ``i`` has tangent 1 and all
        others have tangent 0.

    Raises
    ------
    IndexError
        If ``i`` is not a valid coordinate of ``x``.
    """
    coords = np.asarray(x, dtype=float).ravel()
    n = coords.size
    if not 0 <= i < n:
        raise IndexError(f"Coordinate {i} is out of range for a point of dimension {n}")
    result = np.empty(n, dtype=object)
    for j, coordinate in enumerate(coords):
        result[j] = Dual(float(coordinate), [variable], [1.0 if j == i else 0.0])
    return result


def seed_scalar(x: Any, variable: str = SEED_VARIABLE) -> Dual:
    """Dual number with real part ``x`` and unit tangent."""
    return Dual(float(x.real if is_dual(x) else x), [variable], [1.0])


__all__ = [
    "DualPoint",
    "Point",
    "RealPoint",
    "as_point",
    "seed",
    "seed_scalar",
]
