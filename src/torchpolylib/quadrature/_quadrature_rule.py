from typing import Callable

import torch
from tensordict import tensorclass
from torch import Tensor

from .._poly_type import PolyType
from ._nodes import jacobi_nodes_weights


@tensorclass
class QuadratureRule:
    """Nodes and weights of a quadrature rule on [-1, 1].

    Use :func:`jacobi_quadrature_rule` to construct instances.

    As a tensorclass, QuadratureRule supports device movement
    (``rule.to("cuda")``) and serialization (``torch.save``).

    Attributes
    ----------
    nodes : Tensor
        Quadrature nodes, shape (n,), ascending.
    weights : Tensor
        Quadrature weights, shape (n,).
    """

    nodes: Tensor
    weights: Tensor

    def integrate(self, f: Callable[[Tensor], Tensor]) -> Tensor:
        """Apply the rule to ``f``.

        Parameters
        ----------
        f : callable
            Integrand. Takes the nodes, shape (n,), and returns values of
            shape (..., n).

        Returns
        -------
        Tensor
            ``sum_i w_i f(z_i)``, shape (...).
        """
        return (f(self.nodes) * self.weights).sum(dim=-1)


def jacobi_quadrature_rule(
    n: int,
    alpha: float,
    beta: float,
    poly_type: PolyType = "gauss",
    *,
    method: str = "tridiagonal",
    dtype: torch.dtype = torch.float64,
    device: torch.device | str | None = None,
) -> QuadratureRule:
    """Create a Jacobi quadrature rule.

    Arguments are as for :func:`jacobi_nodes_weights`.

    Examples
    --------
    >>> rule = jacobi_quadrature_rule(5, 0.0, 0.0, "gauss_lobatto")
    >>> rule.integrate(lambda x: x**2)
    tensor(0.6667, dtype=torch.float64)
    """
    nodes, weights = jacobi_nodes_weights(
        n,
        alpha,
        beta,
        poly_type,
        method=method,
        dtype=dtype,
        device=device,
    )

    return QuadratureRule(nodes=nodes, weights=weights, batch_size=[])
