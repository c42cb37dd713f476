import math

import torch
from torch import Tensor

from .._exceptions import ConvergenceError
from .._limits import MAX_ITERATIONS, check_degree, default_tolerance
from ..polynomial._jacobi_polynomial import (
    _derivative,
    _recurrence,
    _recurrence_coefficients,
)


def jacobi_zeros_deflation(
    n: int,
    alpha: float,
    beta: float,
    dtype: torch.dtype = torch.float64,
    device: torch.device | str = "cpu",
) -> Tensor:
    r"""Roots of :math:`P_n^{(\alpha,\beta)}` by Newton iteration with deflation.

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
        If a root needs more than ``MAX_ITERATIONS`` Newton steps.

    Notes
    -----
    Root k is seeded with the Chebyshev-Gauss node
    :math:`-\cos((2k+1)\pi / 2n)`, averaged with root k - 1, and refined by

    .. math::

        r \leftarrow r - \frac{P(r)}{P'(r) - P(r) \sum_{i<k} 1 / (r - z_i)}

    The sum removes the roots already found from the effective derivative,
    so the iteration cannot fall back onto them. Iteration stops once the
    step is below ``default_tolerance(torch.float64)``.

    All arithmetic is done in float64; the result is cast to ``dtype``.
    """
    check_degree(n)

    if n == 0:
        return torch.tensor([], dtype=dtype, device=device)

    tol = default_tolerance(torch.float64)
    coefficients = _recurrence_coefficients(n, alpha, beta)
    dth = math.pi / (2.0 * n)

    roots: list[float] = []
    r_last = 0.0

    for k in range(n):
        r = -math.cos((2.0 * k + 1.0) * dth)
        if k > 0:
            r = 0.5 * (r + r_last)

        for _ in range(MAX_ITERATIONS):
            p, p_prev = _recurrence(r, alpha, beta, coefficients)
            if n == 1:
                pd = 0.5 * (alpha + beta + 2.0)
            else:
                pd = _derivative(r, n, alpha, beta, p, p_prev)

            deflation = sum(1.0 / (r - root) for root in roots)
            delta = -p / (pd - deflation * p)
            r += delta

            if abs(delta) < tol:
                break
        else:
            raise ConvergenceError(
                f"Newton deflation did not converge for root {k} of "
                f"P_{n}^({alpha}, {beta}) in {MAX_ITERATIONS} iterations"
            )

        roots.append(r)
        r_last = r

    return torch.tensor(roots, dtype=dtype, device=device)
