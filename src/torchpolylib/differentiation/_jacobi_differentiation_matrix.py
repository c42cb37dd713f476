"""Spectral differentiation matrices on Jacobi quadrature points.

Every variant writes the derivative of the node polynomial

    q(z) = prod_k (z - z_k)  (up to a constant factor)

at the nodes into a scratch vector ``pd``. The off-diagonal entries are then

    D_ij = pd_i / (pd_j (z_i - z_j)),  i != j

and the diagonal entries follow from the differential equation satisfied by
the Jacobi polynomial whose roots are the interior nodes.
"""

from typing import Callable

import torch
from torch import Tensor

from .._poly_type import PolyType, check_poly_type
from ..polynomial import jacobi_polynomial_derivative
from ..special_functions import gamma_function


def _assemble(z: Tensor, pd: Tensor, diagonal: Tensor) -> Tensor:
    # z_i - z_j, with ones on the diagonal to keep the division finite
    dz = z.unsqueeze(1) - z.unsqueeze(0)
    dz.fill_diagonal_(1.0)

    D = pd.unsqueeze(1) / (pd.unsqueeze(0) * dz)

    D.diagonal().copy_(diagonal)

    return D


def _gauss(z: Tensor, alpha: float, beta: float) -> Tensor:
    n = z.shape[0]

    pd = jacobi_polynomial_derivative(z, n, alpha, beta)

    diagonal = (alpha - beta + (alpha + beta + 2.0) * z) / (
        2.0 * (1.0 - z * z)
    )

    return _assemble(z, pd, diagonal)


def _gauss_radau_left(z: Tensor, alpha: float, beta: float) -> Tensor:
    n = z.shape[0]

    pd = torch.empty_like(z)
    pd[0] = (
        (-1.0) ** (n - 1)
        * gamma_function(n + beta + 1.0)
        / (gamma_function(n) * gamma_function(beta + 2.0))
    )
    pd[1:] = jacobi_polynomial_derivative(z[1:], n - 1, alpha, beta + 1.0)
    pd[1:] *= 1.0 + z[1:]

    diagonal = torch.empty_like(z)
    diagonal[0] = (
        -(n + alpha + beta + 1.0) * (n - 1.0) / (2.0 * (beta + 2.0))
    )
    zi = z[1:]
    diagonal[1:] = (alpha - beta + 1.0 + (alpha + beta + 1.0) * zi) / (
        2.0 * (1.0 - zi * zi)
    )

    return _assemble(z, pd, diagonal)


def _gauss_radau_right(z: Tensor, alpha: float, beta: float) -> Tensor:
    n = z.shape[0]

    pd = torch.empty_like(z)
    pd[:-1] = jacobi_polynomial_derivative(z[:-1], n - 1, alpha + 1.0, beta)
    pd[:-1] *= 1.0 - z[:-1]
    pd[-1] = -gamma_function(n + alpha + 1.0) / (
        gamma_function(n) * gamma_function(alpha + 2.0)
    )

    diagonal = torch.empty_like(z)
    zi = z[:-1]
    diagonal[:-1] = (alpha - beta - 1.0 + (alpha + beta + 1.0) * zi) / (
        2.0 * (1.0 - zi * zi)
    )
    diagonal[-1] = (n + alpha + beta + 1.0) * (n - 1.0) / (2.0 * (alpha + 2.0))

    return _assemble(z, pd, diagonal)


def _gauss_lobatto(z: Tensor, alpha: float, beta: float) -> Tensor:
    n = z.shape[0]

    pd = torch.empty_like(z)
    pd[0] = (
        2.0
        * (-1.0) ** n
        * gamma_function(n + beta)
        / (gamma_function(n - 1.0) * gamma_function(beta + 2.0))
    )
    zi = z[1:-1]
    pd[1:-1] = jacobi_polynomial_derivative(zi, n - 2, alpha + 1.0, beta + 1.0)
    pd[1:-1] *= 1.0 - zi * zi
    pd[-1] = (
        -2.0
        * gamma_function(n + alpha)
        / (gamma_function(n - 1.0) * gamma_function(alpha + 2.0))
    )

    diagonal = torch.empty_like(z)
    diagonal[0] = (alpha - (n - 1.0) * (n + alpha + beta)) / (
        2.0 * (beta + 2.0)
    )
    diagonal[1:-1] = (alpha - beta + (alpha + beta) * zi) / (
        2.0 * (1.0 - zi * zi)
    )
    diagonal[-1] = -(beta - (n - 1.0) * (n + alpha + beta)) / (
        2.0 * (alpha + 2.0)
    )

    return _assemble(z, pd, diagonal)


_DIFFERENTIATION_MATRIX: dict[str, Callable[[Tensor, float, float], Tensor]] = {
    "gauss": _gauss,
    "gauss_radau_left": _gauss_radau_left,
    "gauss_radau_right": _gauss_radau_right,
    "gauss_lobatto": _gauss_lobatto,
}


def jacobi_differentiation_matrix(
    z: Tensor,
    alpha: float,
    beta: float,
    poly_type: PolyType = "gauss",
) -> Tensor:
    r"""Differentiation matrix on Jacobi quadrature points.

    Given the n nodes of a Jacobi rule, returns the n x n matrix D such
    that ``D @ u`` is the derivative of the degree n-1 interpolant of
    ``u`` at the nodes.

    Parameters
    ----------
    z : Tensor
        Nodes of the rule, shape (n,), as returned by
        :func:`~torchpolylib.quadrature.jacobi_nodes_weights` with the same
        ``alpha``, ``beta`` and ``poly_type``.
    alpha, beta : float
        Jacobi parameters. Integers or half-integers for the Radau and
        Lobatto variants.
    poly_type : str
        ``"gauss"``, ``"gauss_radau_left"``, ``"gauss_radau_right"`` or
        ``"gauss_lobatto"``.

    Returns
    -------
    Tensor
        Differentiation matrix, shape (n, n), dtype and device of ``z``.
        Empty or single-point input gives the 1 x 1 zero matrix.

    Raises
    ------
    ValueError
        If poly_type is unknown.

    Notes
    -----
    With :math:`q` the node polynomial and :math:`q'_i = q'(z_i)`,

    .. math::

        D_{ij} = \frac{q'_i}{q'_j (z_i - z_j)}, \quad i \neq j

    Examples
    --------
    >>> z, _ = jacobi_nodes_weights(5, 0.0, 0.0, "gauss_lobatto")
    >>> D = jacobi_differentiation_matrix(z, 0.0, 0.0, "gauss_lobatto")
    >>> torch.allclose(D @ z**2, 2 * z)
    True
    """
    check_poly_type(poly_type)

    if z.shape[0] <= 1:
        return torch.zeros((1, 1), dtype=z.dtype, device=z.device)

    return _DIFFERENTIATION_MATRIX[poly_type](z, alpha, beta)
