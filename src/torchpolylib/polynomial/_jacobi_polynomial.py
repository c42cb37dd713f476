import torch
from torch import Tensor

from .._limits import check_degree


def _as_tensor(z: Tensor | float) -> Tensor:
    if isinstance(z, Tensor):
        return z
    return torch.as_tensor(z, dtype=torch.float64)


def _recurrence_coefficients(
    n: int,
    alpha: float,
    beta: float,
) -> tuple[list[float], list[float], list[float]]:
    # a2, a3, a4 for k = 2..n; empty for n < 2
    apb = alpha + beta
    amb = alpha - beta

    k = torch.arange(2, n + 1, dtype=torch.float64)
    a1 = 2.0 * k * (k + apb) * (2.0 * k + apb - 2.0)
    a2 = ((2.0 * k + apb - 1.0) * (apb * amb) / a1).tolist()
    a3 = (
        (2.0 * k + apb - 2.0) * (2.0 * k + apb - 1.0) * (2.0 * k + apb) / a1
    ).tolist()
    a4 = (
        2.0 * (k + alpha - 1.0) * (k + beta - 1.0) * (2.0 * k + apb) / a1
    ).tolist()

    return a2, a3, a4


def _recurrence(z, alpha, beta, coefficients):
    """Return (P_n, P_{n-1}) for n >= 1. ``z`` may be a float or a Tensor."""
    p_prev = 1.0
    p = 0.5 * (alpha - beta + (alpha + beta + 2.0) * z)
    for a2, a3, a4 in zip(*coefficients):
        p_prev, p = p, (a2 + a3 * z) * p - a4 * p_prev

    return p, p_prev


def _derivative(z, n, alpha, beta, p, p_prev):
    # (1 - z^2) P_n' = (n (alpha - beta) / (2n + apb) - n z) P_n
    #                  + 2 (n + alpha)(n + beta) / (2n + apb) P_{n-1}
    two_n_apb = 2.0 * n + alpha + beta
    d1 = n * (alpha - beta) / two_n_apb
    d3 = 2.0 * (n + alpha) * (n + beta) / two_n_apb

    return ((d1 - n * z) * p + d3 * p_prev) / (1.0 - z * z)


def _jacobi_recurrence(
    z: Tensor,
    n: int,
    alpha: float,
    beta: float,
    derivative: bool,
) -> tuple[Tensor, Tensor | None]:
    check_degree(n)

    apb = alpha + beta
    amb = alpha - beta

    # Degrees 0 and 1 bypass the recurrence.
    if n == 0:
        p = torch.ones_like(z)
        if derivative:
            return p, torch.zeros_like(z)
        return p, None

    if n == 1:
        p = 0.5 * (amb + (apb + 2.0) * z)
        if derivative:
            return p, torch.full_like(z, 0.5 * (apb + 2.0))
        return p, None

    p, p_prev = _recurrence(
        z, alpha, beta, _recurrence_coefficients(n, alpha, beta)
    )

    if not derivative:
        return p, None

    return p, _derivative(z, n, alpha, beta, p, p_prev)


def jacobi_polynomial(
    z: Tensor | float,
    n: int,
    alpha: float,
    beta: float,
) -> Tensor:
    r"""Evaluate the Jacobi polynomial :math:`P_n^{(\alpha,\beta)}`.

    Parameters
    ----------
    z : Tensor or float
        Evaluation points, any shape.
    n : int
        Degree, ``0 <= n <= MAX_ORDER``.
    alpha : float
        Parameter :math:`\alpha > -1`.
    beta : float
        Parameter :math:`\beta > -1`.

    Returns
    -------
    Tensor
        :math:`P_n^{(\alpha,\beta)}(z)`, same shape and dtype as ``z``.

    Raises
    ------
    DegreeError
        If ``n`` is negative or exceeds ``MAX_ORDER``.

    Notes
    -----
    Uses the three-term recurrence

    .. math::

        P_k = (a_{2,k} + a_{3,k} z) P_{k-1} - a_{4,k} P_{k-2}

    seeded with :math:`P_0 = 1` and
    :math:`P_1 = \tfrac{1}{2}(\alpha - \beta + (\alpha + \beta + 2) z)`.

    Examples
    --------
    >>> jacobi_polynomial(torch.tensor([0.5]), 2, 0.0, 0.0)  # Legendre P_2
    tensor([-0.1250], dtype=torch.float64)
    """
    p, _ = _jacobi_recurrence(_as_tensor(z), n, alpha, beta, False)

    return p


def jacobi_polynomial_and_derivative(
    z: Tensor | float,
    n: int,
    alpha: float,
    beta: float,
) -> tuple[Tensor, Tensor]:
    r"""Evaluate :math:`P_n^{(\alpha,\beta)}` and its first derivative.

    The derivative is formed from the two highest terms of the recurrence
    instead of a second recursion.

    Parameters
    ----------
    z : Tensor or float
        Evaluation points, any shape. For ``n >= 2`` the points must lie
        strictly inside (-1, 1); use :func:`jacobi_polynomial_derivative`
        at the endpoints.
    n : int
        Degree, ``0 <= n <= MAX_ORDER``.
    alpha, beta : float
        Jacobi parameters.

    Returns
    -------
    p : Tensor
        :math:`P_n^{(\alpha,\beta)}(z)`.
    pd : Tensor
        :math:`\frac{d}{dz} P_n^{(\alpha,\beta)}(z)`.
    """
    return _jacobi_recurrence(_as_tensor(z), n, alpha, beta, True)
