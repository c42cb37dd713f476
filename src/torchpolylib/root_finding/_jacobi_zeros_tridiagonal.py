import torch
from torch import Tensor

from .._limits import check_degree
from ..linear_algebra import tridiagonal_eigenvalues
from ..polynomial import jacobi_recurrence_coefficients


def jacobi_zeros_tridiagonal(
    n: int,
    alpha: float,
    beta: float,
    dtype: torch.dtype = torch.float64,
    device: torch.device | str = "cpu",
) -> Tensor:
    r"""Roots of :math:`P_n^{(\alpha,\beta)}` as eigenvalues of the Jacobi matrix.

    Parameters
    ----------
    n : int
        Degree, number of roots.
    alpha, beta : float
        Jacobi parameters.
    dtype : torch.dtype, optional
        Output data type. Default is float64.
    device : torch.device or str, optional
        Output device. Default is "cpu".

    Returns
    -------
    Tensor
        Roots in ascending order, shape (n,).

    Raises
    ------
    ConvergenceError
        If the QL iteration does not converge.

    Notes
    -----
    Builds the symmetric tridiagonal matrix of
    :func:`~torchpolylib.polynomial.jacobi_recurrence_coefficients` in
    float64 and solves it with
    :func:`~torchpolylib.linear_algebra.tridiagonal_eigenvalues`
    (Golub & Welsch, 1969).
    """
    check_degree(n)

    if n == 0:
        return torch.tensor([], dtype=dtype, device=device)

    if n == 1:
        root = (beta - alpha) / (alpha + beta + 2.0)
        return torch.tensor([root], dtype=dtype, device=device)

    a, b = jacobi_recurrence_coefficients(n, alpha, beta)

    return tridiagonal_eigenvalues(a, b).to(dtype=dtype, device=device)
