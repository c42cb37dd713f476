"""Differentiation module: spectral differentiation matrices on Jacobi points."""

from torchpolylib.differentiation._jacobi_differentiation_matrix import (
    jacobi_differentiation_matrix,
)

__all__ = [
    "jacobi_differentiation_matrix",
]
