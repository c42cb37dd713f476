import torch
from torch import Tensor

from .._poly_type import PolyType, check_poly_type
from ._lagrangian_interpolant import (
    _lagrangian_interpolant,
    _warn_outside_domain,
)


def interpolation_matrix(
    nodes: Tensor,
    targets: Tensor,
    alpha: float,
    beta: float,
    poly_type: PolyType = "gauss",
) -> Tensor:
    """Interpolation matrix from Jacobi nodes to arbitrary points.

    Given nodal values ``u`` on ``nodes``, ``interpolation_matrix(...) @ u``
    evaluates the degree n-1 interpolant of ``u`` at ``targets``.

    Parameters
    ----------
    nodes : Tensor
        Nodes of the source rule, shape (n,).
    targets : Tensor
        Target points, shape (m,). Usually the nodes of another rule.
    alpha, beta : float
        Jacobi parameters of the source rule.
    poly_type : str
        Variant of the source rule.

    Returns
    -------
    Tensor
        Matrix M of shape (m, n) with ``M[i, j] = h_j(targets[i])``.

    Raises
    ------
    ValueError
        If poly_type is unknown.

    Warnings
    --------
    PolylibWarning
        If any target lies outside [-1, 1].

    Examples
    --------
    >>> z, _ = jacobi_nodes_weights(4, 0.0, 0.0)
    >>> zm, _ = jacobi_nodes_weights(6, 0.0, 0.0, "gauss_lobatto")
    >>> M = interpolation_matrix(z, zm, 0.0, 0.0)
    >>> torch.allclose(M @ z**3, zm**3)
    True
    """
    check_poly_type(poly_type)

    targets = torch.as_tensor(targets, dtype=nodes.dtype, device=nodes.device)

    _warn_outside_domain(targets)

    columns = [
        _lagrangian_interpolant(j, targets, nodes, alpha, beta, poly_type)
        for j in range(nodes.shape[0])
    ]

    return torch.stack(columns, dim=-1)
