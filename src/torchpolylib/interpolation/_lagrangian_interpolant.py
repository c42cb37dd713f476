import warnings
from typing import Callable

import torch
from torch import Tensor

from .._exceptions import PolylibWarning
from .._limits import default_tolerance
from .._poly_type import PolyType, check_poly_type
from ..polynomial import jacobi_polynomial, jacobi_polynomial_derivative

# Each variant returns (numerator at z, denominator factor at node z_i) of
#
#     h_i(z) = numerator(z) / (denominator(z_i) * (z - z_i))
#
# The node derivative always comes from jacobi_polynomial_derivative, which
# stays finite at z_i = -1 and z_i = 1.


def _gauss(
    z: Tensor, zi: Tensor, n: int, alpha: float, beta: float
) -> tuple[Tensor, Tensor]:
    p = jacobi_polynomial(z, n, alpha, beta)
    h = jacobi_polynomial_derivative(zi, n, alpha, beta)
    return p, h


def _gauss_radau_left(
    z: Tensor, zi: Tensor, n: int, alpha: float, beta: float
) -> tuple[Tensor, Tensor]:
    p = jacobi_polynomial(zi, n - 1, alpha, beta + 1.0)
    pd = jacobi_polynomial_derivative(zi, n - 1, alpha, beta + 1.0)
    h = (1.0 + zi) * pd + p
    return (1.0 + z) * jacobi_polynomial(z, n - 1, alpha, beta + 1.0), h


def _gauss_radau_right(
    z: Tensor, zi: Tensor, n: int, alpha: float, beta: float
) -> tuple[Tensor, Tensor]:
    p = jacobi_polynomial(zi, n - 1, alpha + 1.0, beta)
    pd = jacobi_polynomial_derivative(zi, n - 1, alpha + 1.0, beta)
    h = (1.0 - zi) * pd - p
    return (1.0 - z) * jacobi_polynomial(z, n - 1, alpha + 1.0, beta), h


def _gauss_lobatto(
    z: Tensor, zi: Tensor, n: int, alpha: float, beta: float
) -> tuple[Tensor, Tensor]:
    p = jacobi_polynomial(zi, n - 2, alpha + 1.0, beta + 1.0)
    pd = jacobi_polynomial_derivative(zi, n - 2, alpha + 1.0, beta + 1.0)
    h = (1.0 - zi * zi) * pd - 2.0 * zi * p
    return (1.0 - z * z) * jacobi_polynomial(
        z, n - 2, alpha + 1.0, beta + 1.0
    ), h


_INTERPOLANT: dict[
    str, Callable[[Tensor, Tensor, int, float, float], tuple[Tensor, Tensor]]
] = {
    "gauss": _gauss,
    "gauss_radau_left": _gauss_radau_left,
    "gauss_radau_right": _gauss_radau_right,
    "gauss_lobatto": _gauss_lobatto,
}


def _warn_outside_domain(z: Tensor) -> None:
    if ((z < -1.0) | (z > 1.0)).any():
        warnings.warn(
            "Evaluating Lagrangian interpolant outside natural domain "
            "[-1, 1]. Values are extrapolated.",
            PolylibWarning,
            stacklevel=3,
        )


def _lagrangian_interpolant(
    i: int,
    z: Tensor,
    nodes: Tensor,
    alpha: float,
    beta: float,
    poly_type: str,
) -> Tensor:
    n = nodes.shape[0]

    if not 0 <= i < n:
        raise IndexError(f"node index {i} out of range for {n} nodes")

    # A single node interpolates by the constant function.
    if n == 1:
        return torch.ones_like(z)

    zi = nodes[i]
    dz = z - zi

    coincident = torch.abs(dz) < default_tolerance(nodes.dtype)
    dz = torch.where(coincident, torch.ones_like(dz), dz)

    numerator, h = _INTERPOLANT[poly_type](z, zi, n, alpha, beta)

    return torch.where(
        coincident, torch.ones_like(z), numerator / (h * dz)
    )


def lagrangian_interpolant(
    i: int,
    z: Tensor | float,
    nodes: Tensor,
    alpha: float,
    beta: float,
    poly_type: PolyType = "gauss",
) -> Tensor:
    r"""Evaluate the Lagrangian shape function of node ``i``.

    :math:`h_i` is the polynomial of degree n-1 with
    :math:`h_i(z_j) = \delta_{ij}` on the nodes of a Jacobi rule.

    Parameters
    ----------
    i : int
        Node index, ``0 <= i < n``.
    z : Tensor or float
        Evaluation points, any shape.
    nodes : Tensor
        Nodes of the rule, shape (n,), as returned by
        :func:`~torchpolylib.quadrature.jacobi_nodes_weights` with the same
        ``alpha``, ``beta`` and ``poly_type``.
    alpha, beta : float
        Jacobi parameters.
    poly_type : str
        ``"gauss"``, ``"gauss_radau_left"``, ``"gauss_radau_right"`` or
        ``"gauss_lobatto"``.

    Returns
    -------
    Tensor
        :math:`h_i(z)`, same shape as ``z``. Exactly 1 where ``z`` is within
        ``default_tolerance`` of node i.

    Raises
    ------
    IndexError
        If ``i`` is out of range.
    ValueError
        If poly_type is unknown.

    Warnings
    --------
    PolylibWarning
        If any evaluation point lies outside [-1, 1].

    Notes
    -----
    For the Gauss rule

    .. math::

        h_i(z) = \frac{P_n^{(\alpha,\beta)}(z)}
                      {P_n^{(\alpha,\beta)\prime}(z_i) (z - z_i)}

    and for the Radau and Lobatto rules the numerator carries the
    :math:`(1 + z)`, :math:`(1 - z)` or :math:`(1 - z^2)` factor of the
    fixed endpoints.
    """
    check_poly_type(poly_type)

    z = torch.as_tensor(z, dtype=nodes.dtype, device=nodes.device)

    _warn_outside_domain(z)

    return _lagrangian_interpolant(i, z, nodes, alpha, beta, poly_type)
