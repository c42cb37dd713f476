"""Lagrangian shape functions and interpolation operators on Jacobi points."""

from ._interpolation_matrix import interpolation_matrix
from ._lagrangian_interpolant import lagrangian_interpolant

__all__ = [
    "interpolation_matrix",
    "lagrangian_interpolant",
]
