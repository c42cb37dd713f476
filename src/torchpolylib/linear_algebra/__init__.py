"""Linear algebra kernels used by the root finders."""

from ._tridiagonal_eigenvalues import tridiagonal_eigenvalues

__all__ = [
    "tridiagonal_eigenvalues",
]
