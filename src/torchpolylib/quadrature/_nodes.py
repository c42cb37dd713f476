"""Node and weight computation for Jacobi quadrature rules."""

from typing import Callable

import torch
from torch import Tensor

from .._exceptions import DegreeError, PreconditionError
from .._limits import MAX_POINTS
from .._poly_type import PolyType, check_poly_type
from ..polynomial import jacobi_polynomial, jacobi_polynomial_derivative
from ..root_finding import jacobi_zeros
from ..special_functions import gamma_function


def _check_points(n: int) -> None:
    if n < 1:
        raise PreconditionError(f"n must be at least 1, got {n}")
    if n > MAX_POINTS:
        raise DegreeError(f"n must be at most {MAX_POINTS}, got {n}")


def _trivial_rule(
    dtype: torch.dtype,
    device: torch.device | str | None,
) -> tuple[Tensor, Tensor]:
    return (
        torch.tensor([0.0], dtype=dtype, device=device),
        torch.tensor([2.0], dtype=dtype, device=device),
    )


def gauss_jacobi_nodes_weights(
    n: int,
    alpha: float,
    beta: float,
    *,
    method: str = "tridiagonal",
    dtype: torch.dtype = torch.float64,
    device: torch.device | str | None = None,
) -> tuple[Tensor, Tensor]:
    r"""
    Compute Gauss-Jacobi nodes and weights on [-1, 1].

    .. math::

        \int_{-1}^{1} f(x) (1-x)^\alpha (1+x)^\beta \, dx
            \approx \sum_{i=0}^{n-1} w_i f(z_i)

    Parameters
    ----------
    n : int
        Number of quadrature points.
    alpha, beta : float
        Jacobi parameters. Integers or half-integers.
    method : str
        Root finder, ``"tridiagonal"`` or ``"deflation"``.
    dtype : torch.dtype
        Data type for output tensors.
    device : torch.device, optional
        Device for output tensors.

    Returns
    -------
    nodes : Tensor
        Roots of :math:`P_n^{(\alpha,\beta)}`, shape (n,), ascending.
    weights : Tensor
        Quadrature weights, shape (n,).

    Raises
    ------
    PreconditionError
        If n < 1 or a normalization constant is not an integer or
        half-integer Gamma argument.

    Notes
    -----
    Exact for polynomials of degree <= 2n-1. The weights are

    .. math::

        w_i = \frac{2^{\alpha+\beta+1} \Gamma(\alpha+n+1) \Gamma(\beta+n+1)}
                   {\Gamma(n+1) \Gamma(\alpha+\beta+n+1)}
              \frac{1}{(1 - z_i^2) [P_n'(z_i)]^2}

    Examples
    --------
    >>> nodes, weights = gauss_jacobi_nodes_weights(4, 0.0, 0.0)
    >>> weights.sum()
    tensor(2., dtype=torch.float64)
    """
    _check_points(n)

    apb = alpha + beta

    z = jacobi_zeros(n, alpha, beta, method=method)
    pd = jacobi_polynomial_derivative(z, n, alpha, beta)

    fac = (
        2.0 ** (apb + 1.0)
        * gamma_function(alpha + n + 1.0)
        * gamma_function(beta + n + 1.0)
    )
    fac /= gamma_function(n + 1.0) * gamma_function(apb + n + 1.0)

    w = fac / (pd * pd * (1.0 - z * z))

    return z.to(dtype=dtype, device=device), w.to(dtype=dtype, device=device)


def gauss_radau_left_jacobi_nodes_weights(
    n: int,
    alpha: float,
    beta: float,
    *,
    method: str = "tridiagonal",
    dtype: torch.dtype = torch.float64,
    device: torch.device | str | None = None,
) -> tuple[Tensor, Tensor]:
    r"""
    Compute Gauss-Radau-Jacobi nodes and weights with a node fixed at -1.

    The remaining n-1 nodes are the roots of
    :math:`P_{n-1}^{(\alpha,\beta+1)}`. The rule is exact for polynomials of
    degree <= 2n-2.

    Parameters and return values are as for
    :func:`gauss_jacobi_nodes_weights`; ``nodes[0] == -1`` exactly.

    Notes
    -----
    n = 1 returns the single-point rule ``([0], [2])``.
    """
    _check_points(n)

    if n == 1:
        return _trivial_rule(dtype, device)

    apb = alpha + beta

    z = torch.cat(
        [
            torch.tensor([-1.0], dtype=torch.float64),
            jacobi_zeros(n - 1, alpha, beta + 1.0, method=method),
        ]
    )
    p = jacobi_polynomial(z, n - 1, alpha, beta)

    fac = (
        2.0**apb * gamma_function(alpha + n) * gamma_function(beta + n)
    )
    fac /= (
        gamma_function(n) * (beta + n) * gamma_function(apb + n + 1.0)
    )

    w = fac * (1.0 - z) / (p * p)
    w[0] *= beta + 1.0

    return z.to(dtype=dtype, device=device), w.to(dtype=dtype, device=device)


def gauss_radau_right_jacobi_nodes_weights(
    n: int,
    alpha: float,
    beta: float,
    *,
    method: str = "tridiagonal",
    dtype: torch.dtype = torch.float64,
    device: torch.device | str | None = None,
) -> tuple[Tensor, Tensor]:
    r"""
    Compute Gauss-Radau-Jacobi nodes and weights with a node fixed at +1.

    The remaining n-1 nodes are the roots of
    :math:`P_{n-1}^{(\alpha+1,\beta)}`. The rule is exact for polynomials of
    degree <= 2n-2.

    Parameters and return values are as for
    :func:`gauss_jacobi_nodes_weights`; ``nodes[-1] == 1`` exactly.

    Notes
    -----
    n = 1 returns the single-point rule ``([0], [2])``.
    """
    _check_points(n)

    if n == 1:
        return _trivial_rule(dtype, device)

    apb = alpha + beta

    z = torch.cat(
        [
            jacobi_zeros(n - 1, alpha + 1.0, beta, method=method),
            torch.tensor([1.0], dtype=torch.float64),
        ]
    )
    p = jacobi_polynomial(z, n - 1, alpha, beta)

    fac = (
        2.0**apb * gamma_function(alpha + n) * gamma_function(beta + n)
    )
    fac /= (
        gamma_function(n) * (alpha + n) * gamma_function(apb + n + 1.0)
    )

    w = fac * (1.0 + z) / (p * p)
    w[-1] *= alpha + 1.0

    return z.to(dtype=dtype, device=device), w.to(dtype=dtype, device=device)


def gauss_lobatto_jacobi_nodes_weights(
    n: int,
    alpha: float,
    beta: float,
    *,
    method: str = "tridiagonal",
    dtype: torch.dtype = torch.float64,
    device: torch.device | str | None = None,
) -> tuple[Tensor, Tensor]:
    r"""
    Compute Gauss-Lobatto-Jacobi nodes and weights.

    Both endpoints are nodes; the n-2 interior nodes are the roots of
    :math:`P_{n-2}^{(\alpha+1,\beta+1)}`. The rule is exact for polynomials
    of degree <= 2n-3.

    Parameters and return values are as for
    :func:`gauss_jacobi_nodes_weights`; ``nodes[0] == -1`` and
    ``nodes[-1] == 1`` exactly.

    Notes
    -----
    n = 1 returns the single-point rule ``([0], [2])``.

    Examples
    --------
    >>> gauss_lobatto_jacobi_nodes_weights(3, 0.0, 0.0)
    (tensor([-1.,  0.,  1.], dtype=torch.float64), tensor([0.3333, 1.3333, 0.3333], dtype=torch.float64))
    """
    _check_points(n)

    if n == 1:
        return _trivial_rule(dtype, device)

    apb = alpha + beta

    z = torch.cat(
        [
            torch.tensor([-1.0], dtype=torch.float64),
            jacobi_zeros(n - 2, alpha + 1.0, beta + 1.0, method=method),
            torch.tensor([1.0], dtype=torch.float64),
        ]
    )
    p = jacobi_polynomial(z, n - 1, alpha, beta)

    fac = (
        2.0 ** (apb + 1.0)
        * gamma_function(alpha + n)
        * gamma_function(beta + n)
    )
    fac /= (n - 1) * gamma_function(n) * gamma_function(apb + n + 1.0)

    w = fac / (p * p)
    w[0] *= beta + 1.0
    w[-1] *= alpha + 1.0

    return z.to(dtype=dtype, device=device), w.to(dtype=dtype, device=device)


_NODES_WEIGHTS: dict[str, Callable[..., tuple[Tensor, Tensor]]] = {
    "gauss": gauss_jacobi_nodes_weights,
    "gauss_radau_left": gauss_radau_left_jacobi_nodes_weights,
    "gauss_radau_right": gauss_radau_right_jacobi_nodes_weights,
    "gauss_lobatto": gauss_lobatto_jacobi_nodes_weights,
}


def jacobi_nodes_weights(
    n: int,
    alpha: float,
    beta: float,
    poly_type: PolyType = "gauss",
    *,
    method: str = "tridiagonal",
    dtype: torch.dtype = torch.float64,
    device: torch.device | str | None = None,
) -> tuple[Tensor, Tensor]:
    r"""
    Compute nodes and weights of a Jacobi quadrature rule.

    Parameters
    ----------
    n : int
        Number of quadrature points.
    alpha, beta : float
        Jacobi parameters of the weight :math:`(1-x)^\alpha (1+x)^\beta`.
    poly_type : str
        ``"gauss"``, ``"gauss_radau_left"``, ``"gauss_radau_right"`` or
        ``"gauss_lobatto"``.
    method : str
        Root finder, ``"tridiagonal"`` or ``"deflation"``.
    dtype : torch.dtype
        Data type for output tensors.
    device : torch.device, optional
        Device for output tensors.

    Returns
    -------
    nodes : Tensor
        Quadrature nodes, shape (n,), strictly ascending.
    weights : Tensor
        Quadrature weights, shape (n,), positive.

    Raises
    ------
    ValueError
        If poly_type or method is unknown.
    """
    check_poly_type(poly_type)

    return _NODES_WEIGHTS[poly_type](
        n, alpha, beta, method=method, dtype=dtype, device=device
    )
