"""
Evaluation Protocol
===================

Free functions evaluating a :class:`~pysatl_dual.families.distribution.DualDistribution`:

- :func:`density` routes real points to the scipy delegate and dual points to
  the closed-form formula;
- :func:`log_density` and :func:`sample` use the delegate only;
- :func:`gradient` differentiates the density with respect to the point by
  seeding unit tangents, one coordinate at a time;
- :func:`formula_density` evaluates the formula directly, which is how
  derivatives with respect to dual-seeded parameters are obtained.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import logging
import math
from functools import partial
from typing import TYPE_CHECKING, Any

import numpy as np

from pysatl_dual.dual import SEED_VARIABLE, is_dual, real_part, tangent, to_dual
from pysatl_dual.errors import NumericDegeneracyError
from pysatl_dual.points import DualPoint, RealPoint, as_point, seed, seed_scalar
from pysatl_dual.types import Kind

if TYPE_CHECKING:
    from concurrent.futures import Executor

    from pysatl_dual.dual import Dual
    from pysatl_dual.families.distribution import DualDistribution
    from pysatl_dual.points import Point
    from pysatl_dual.types import NumericArray

logger = logging.getLogger(__name__)


def _as_real_result(values: Any) -> float | NumericArray:
    arr = np.asarray(values, dtype=float)
    if arr.ndim == 0:
        return float(arr)
    return arr


def _delegate_density(distribution: DualDistribution, x: Any) -> float | NumericArray:
    if distribution.kind == Kind.DISCRETE:
        return _as_real_result(distribution.delegate.pmf(x))
    return _as_real_result(distribution.delegate.pdf(x))


def _support_key(distribution: DualDistribution, real_x: Any) -> Any:
    # Scalar families take a float, vector families take the whole array.
    if distribution.dimension == 1 and isinstance(real_x, np.ndarray) and real_x.size == 1:
        return float(real_x.reshape(()))
    return real_x


def _formula_density(distribution: DualDistribution, point: DualPoint) -> Dual:
    """Evaluate the closed-form formula, returning zero outside the support."""
    real_x = _support_key(distribution, real_part(point.value))
    if not distribution.in_support(real_x):
        return to_dual(0.0)
    x = point.value
    if distribution.dimension == 1 and isinstance(x, np.ndarray) and x.size == 1:
        # Univariate formulas take a scalar.
        x = x.reshape(())[()]
    value = to_dual(distribution.formula(x))
    if math.isnan(value.real):
        raise NumericDegeneracyError(
            f"{distribution.family_name} density evaluated to NaN at {real_x}"
        )
    return value


def density(distribution: DualDistribution, x: Any) -> float | NumericArray | Dual:
    """
    Density (or mass) of ``distribution`` at ``x``.

    Parameters
    ----------
    distribution : DualDistribution
        Distribution to evaluate.
    x : Any
        Real scalar or vector, dual scalar, vector with at least one dual
        component, or an already tagged :class:`~pysatl_dual.points.Point`.

    Returns
    -------
    float, NumericArray or Dual
        Plain reals for real points (computed by the delegate); a dual
        number for dual points (computed by the closed-form formula).

    Notes
    -----
    Points outside the support have zero density. Errors raised by the
    delegate propagate unchanged.
    """
    point: Point = as_point(x)
    match point:
        case RealPoint(value=value):
            return _delegate_density(distribution, value)
        case DualPoint():
            return _formula_density(distribution, point)
        case _:
            raise TypeError(f"Unsupported evaluation point {point!r}")


def formula_density(distribution: DualDistribution, x: Any) -> Dual:
    """
    Evaluate the closed-form density at ``x`` promoted to dual numbers.

    For a real ``x`` the real part of the result equals :func:`density`;
    tangents of dual-seeded parameters flow into the result.
    """
    point = as_point(x)
    match point:
        case RealPoint():
            return _formula_density(distribution, point.to_dual())
        case DualPoint():
            return _formula_density(distribution, point)
        case _:
            raise TypeError(f"Unsupported evaluation point {point!r}")


def log_density(distribution: DualDistribution, x: Any) -> float | NumericArray:
    """
    Logarithm of the density (or mass) at a real point.

    Raises
    ------
    TypeError
        If ``x`` carries dual numbers; log-density is real-only.
    """
    point = as_point(x)
    match point:
        case RealPoint(value=value):
            if distribution.kind == Kind.DISCRETE:
                return _as_real_result(distribution.delegate.logpmf(value))
            return _as_real_result(distribution.delegate.logpdf(value))
        case DualPoint():
            raise TypeError("log_density accepts real points only")
        case _:
            raise TypeError(f"Unsupported evaluation point {point!r}")


def sample(
    distribution: DualDistribution,
    size: int | tuple[int, ...] | None = None,
    random_state: Any = None,
) -> Any:
    """
    Draw from the real-valued delegate.

    Parameters
    ----------
    distribution : DualDistribution
        Distribution to sample from.
    size : int or tuple of int, optional
        Number (or shape) of draws; a single draw when omitted.
    random_state : int or numpy.random.Generator, optional
        Seed or generator forwarded to scipy.

    Returns
    -------
    float, NumericArray
        Plain real draws.
    """
    return distribution.delegate.rvs(size=size, random_state=random_state)


def _check_seed_variable_free(distribution: DualDistribution) -> None:
    for name, value in distribution.base_parameters.parameters.items():
        values = value.flat if isinstance(value, np.ndarray) else (value,)
        if any(is_dual(v) and SEED_VARIABLE in v.vars for v in values):
            raise ValueError(
                f"Parameter {name!r} of {distribution.family_name} carries a tangent along "
                f"{SEED_VARIABLE!r}, which is reserved for the evaluation point"
            )


def _partial_derivative(distribution: DualDistribution, coords: NumericArray, i: int) -> float:
    return tangent(_formula_density(distribution, DualPoint(seed(coords, i))))


def gradient(
    distribution: DualDistribution,
    x: Any,
    executor: Executor | None = None,
) -> float | NumericArray:
    """
    Derivative of the density with respect to the evaluation point.

    Parameters
    ----------
    distribution : DualDistribution
        Distribution whose density is differentiated.
    x : float or array-like of float
        Real point. Dual inputs are reduced to their real parts.
    executor : concurrent.futures.Executor, optional
        Executor used to evaluate the per-coordinate partials of a vector
        point concurrently. Results keep coordinate order.

    Returns
    -------
    float or NumericArray
        Derivative for a scalar point; vector of partials for a vector point,
        one density evaluation per coordinate.

    Raises
    ------
    ValueError
        If a parameter of ``distribution`` already carries a tangent along
        :data:`~pysatl_dual.dual.SEED_VARIABLE`.
    """
    _check_seed_variable_free(distribution)
    coords = real_part(x) if isinstance(x, list | tuple | np.ndarray) else None
    if coords is None:
        logger.debug("Scalar gradient of %s at %s", distribution.family_name, x)
        return tangent(_formula_density(distribution, DualPoint(seed_scalar(x))))

    coords = np.asarray(coords, dtype=float)
    logger.debug(
        "Gradient of %s over %d coordinates", distribution.family_name, coords.size
    )
    partial_at = partial(_partial_derivative, distribution, coords)
    indices = range(coords.size)
    if executor is None:
        partials = list(map(partial_at, indices))
    else:
        partials = list(executor.map(partial_at, indices))
    return _as_real_result(np.asarray(partials, dtype=float).reshape(coords.shape))
