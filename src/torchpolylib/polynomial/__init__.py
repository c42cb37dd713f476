"""Jacobi polynomial evaluation and recurrence coefficients."""

from ._jacobi_polynomial import (
    jacobi_polynomial,
    jacobi_polynomial_and_derivative,
)
from ._jacobi_polynomial_derivative import jacobi_polynomial_derivative
from ._jacobi_recurrence_coefficients import (
    RecurrenceCoefficients,
    jacobi_recurrence_coefficients,
)
from ._jacobi_weight_integral import jacobi_weight_integral

__all__ = [
    "RecurrenceCoefficients",
    "jacobi_polynomial",
    "jacobi_polynomial_and_derivative",
    "jacobi_polynomial_derivative",
    "jacobi_recurrence_coefficients",
    "jacobi_weight_integral",
]
