"""
Exceptions raised by dual-parameterized distributions.
"""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"


class DomainError(ValueError):
    """
    Distribution parameters lie outside the family's mathematical domain.

    Raised at construction time, either by a parametrization constraint or
    by the real-valued delegate rejecting its parameters.
    """


class NumericDegeneracyError(ArithmeticError):
    """
    A dual-number operation is undefined for the given operands.

    Examples are a non-positive base raised to a non-integer power or a
    formula evaluation that produced NaN.
    """


__all__ = [
    "DomainError",
    "NumericDegeneracyError",
]
