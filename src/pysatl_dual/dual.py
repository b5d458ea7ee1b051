"""
Dual-number helpers
===================

Thin layer over :class:`rateslib.dual.Dual` providing the total promotion
``to_dual``, real-part and tangent extraction, and the dual-safe primitives
(power, square root, log-gamma function) from which every density formula in the
catalog is written.

A dual number here is a first-order value ``a + b·ε``; evaluating a real
analytic function at ``x + 1·ε`` yields ``f(x) + f'(x)·ε``.
"""

from __future__ import annotations

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

from typing import TYPE_CHECKING, Any, cast

import numpy as np
from rateslib.dual import Dual, dual_exp, dual_log, gradient
from scipy import special

from pysatl_dual.errors import NumericDegeneracyError

if TYPE_CHECKING:
    from pysatl_dual.types import DualArray, Number

SEED_VARIABLE = "x"
"""Name of the tangent direction used when seeding evaluation points."""


def is_dual(value: object) -> bool:
    """Check whether ``value`` is a dual number."""
    return isinstance(value, Dual)


def to_dual(value: Number | Dual) -> Dual:
    """
    Promote a real number to a dual number with zero tangent.

    Dual numbers are returned unchanged, so the function is total and
    idempotent.

    Parameters
    ----------
    value : Number or Dual
        Value to promote.

    Returns
    -------
    Dual
        ``value`` as a dual number.
    """
    if isinstance(value, Dual):
        return value
    return Dual(float(value), [], [])


def to_dual_array(values: Any) -> DualArray:
    """
    Promote every element of an array-like to a dual number.

    The shape of the input is preserved; the result is an object array.
    """
    arr = np.asarray(values, dtype=object)
    result = np.empty(arr.shape, dtype=object)
    for index, value in np.ndenumerate(arr):
        result[index] = to_dual(value)
    return result


def _real_scalar(value: Any) -> float:
    if isinstance(value, Dual):
        return float(value.real)
    return float(value)


def real_part(value: Any) -> Any:
    """
    Extract real parts.

    Parameters
    ----------
    value : Dual, Number or array-like
        Scalar or array mixing dual numbers and plain reals.

    Returns
    -------
    float or NumericArray
        Real part of a scalar, or a float array of real parts.
    """
    if isinstance(value, np.ndarray) or isinstance(value, list | tuple):
        arr = np.asarray(value, dtype=object)
        return np.vectorize(_real_scalar, otypes=[float])(arr)
    return _real_scalar(value)


def tangent(value: Any, variable: str = SEED_VARIABLE) -> float:
    """
    Extract the first derivative carried by ``value`` along ``variable``.

    Plain reals carry no tangent and yield ``0.0``.
    """
    if not isinstance(value, Dual) or variable not in value.vars:
        return 0.0
    return float(gradient(value, [variable])[0])


def has_tangent(value: Any) -> bool:
    """Check whether a dual number carries any non-zero tangent component."""
    if not isinstance(value, Dual):
        return False
    return bool(np.any(np.asarray(value.dual, dtype=float) != 0.0))


def dual_power(base: Dual | Number, exponent: Dual | Number) -> Dual | float:
    """
    Raise ``base`` to ``exponent`` using only operations closed over duals.

    Negative exponents are evaluated as the reciprocal of the positive power,
    since a zero-tangent dual raised to a negative power is not reliable in
    every dual arithmetic. A tangent-carrying exponent is evaluated as
    ``exp(exponent * log(base))``.

    Raises
    ------
    NumericDegeneracyError
        If the base is non-positive and the exponent is non-integer or
        carries a tangent.
    """
    base_real = _real_scalar(base)
    if has_tangent(exponent):
        if base_real <= 0.0:
            raise NumericDegeneracyError(
                f"Cannot raise non-positive base {base_real} to a differentiated exponent"
            )
        return cast(Dual, dual_exp(exponent * dual_log(base)))

    power = _real_scalar(exponent)
    if power == 0.0:
        return to_dual(1.0)
    if power < 0.0:
        return 1.0 / dual_power(base, -power)
    if base_real < 0.0 and not power.is_integer():
        raise NumericDegeneracyError(
            f"Cannot raise negative base {base_real} to non-integer power {power}"
        )
    if not isinstance(base, Dual):
        return float(base) ** power
    return base**power


def dual_sqrt(value: Dual | Number) -> Dual | float:
    """Square root of a non-negative value."""
    return dual_power(value, 0.5)


def dual_log_gamma(value: Dual | Number) -> Dual | float:
    """
    Logarithm of the gamma function applied to a real or dual argument.

    Normalising constants are assembled in log space from this function, so
    they stay finite for shape parameters where Γ itself overflows. For a
    dual argument the tangent follows ``(log Γ)'(a) = ψ(a)``.
    """
    if not isinstance(value, Dual):
        return float(special.gammaln(value))
    a = float(value.real)
    return float(special.gammaln(a)) + float(special.digamma(a)) * (value - a)



__all__ = [
    "Dual",
    "SEED_VARIABLE",
    "dual_exp",
    "dual_log",
    "dual_log_gamma",
    "dual_power",
    "dual_sqrt",
    "has_tangent",
    "is_dual",
    "real_part",
    "tangent",
    "to_dual",
    "to_dual_array",
]
