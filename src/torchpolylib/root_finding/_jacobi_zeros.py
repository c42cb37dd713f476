import torch
from torch import Tensor

from ._jacobi_zeros_deflation import jacobi_zeros_deflation
from ._jacobi_zeros_tridiagonal import jacobi_zeros_tridiagonal


def jacobi_zeros(
    n: int,
    alpha: float,
    beta: float,
    *,
    method: str = "tridiagonal",
    dtype: torch.dtype = torch.float64,
    device: torch.device | str = "cpu",
) -> Tensor:
    r"""Roots of the Jacobi polynomial :math:`P_n^{(\alpha,\beta)}`.

    Parameters
    ----------
    n : int
        Degree, number of roots.
    alpha, beta : float
        Jacobi parameters, both > -1.
    method : str, optional
        ``"tridiagonal"`` (default) or ``"deflation"``. Both return the same
        roots to within about 1e-14.
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
    ValueError
        If method is not one of "tridiagonal" or "deflation".

    Examples
    --------
    >>> jacobi_zeros(2, 0.0, 0.0)
    tensor([-0.5774,  0.5774], dtype=torch.float64)
    >>> jacobi_zeros(2, 0.0, 0.0, method="deflation")
    tensor([-0.5774,  0.5774], dtype=torch.float64)
    """
    if method == "tridiagonal":
        return jacobi_zeros_tridiagonal(
            n, alpha, beta, dtype=dtype, device=device
        )
    elif method == "deflation":
        return jacobi_zeros_deflation(
            n, alpha, beta, dtype=dtype, device=device
        )
    else:
        raise ValueError(
            f"Unknown method: {method}. Use 'tridiagonal' or 'deflation'."
        )
