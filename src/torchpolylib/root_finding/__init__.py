from ._jacobi_zeros import jacobi_zeros
from ._jacobi_zeros_deflation import jacobi_zeros_deflation
from ._jacobi_zeros_tridiagonal import jacobi_zeros_tridiagonal

__all__ = [
    "jacobi_zeros",
    "jacobi_zeros_deflation",
    "jacobi_zeros_tridiagonal",
]
