from torch import Tensor

from .._limits import check_degree
from ._jacobi_polynomial import _as_tensor, jacobi_polynomial


def jacobi_polynomial_derivative(
    z: Tensor | float,
    n: int,
    alpha: float,
    beta: float,
) -> Tensor:
    r"""Evaluate the derivative of :math:`P_n^{(\alpha,\beta)}`.

    Parameters
    ----------
    z : Tensor or float
        Evaluation points, any shape, including the endpoints :math:`\pm 1`.
    n : int
        Degree of the differentiated polynomial.
    alpha, beta : float
        Jacobi parameters.

    Returns
    -------
    Tensor
        :math:`\frac{d}{dz} P_n^{(\alpha,\beta)}(z)`.

    Notes
    -----
    Uses the identity

    .. math::

        \frac{d}{dz} P_n^{(\alpha,\beta)}(z)
            = \frac{1}{2}(\alpha + \beta + n + 1) P_{n-1}^{(\alpha+1,\beta+1)}(z)
    """
    z = _as_tensor(z)
    check_degree(n)

    if n == 0:
        return z * 0.0

    return 0.5 * (alpha + beta + n + 1.0) * jacobi_polynomial(
        z, n - 1, alpha + 1.0, beta + 1.0
    )
