import math
from typing import NamedTuple

import torch
from torch import Tensor

from .._exceptions import PreconditionError


class RecurrenceCoefficients(NamedTuple):
    """Symmetric tridiagonal Jacobi matrix of an orthonormal family."""

    diagonal: Tensor
    off_diagonal: Tensor


def jacobi_recurrence_coefficients(
    n: int,
    alpha: float,
    beta: float,
    dtype: torch.dtype = torch.float64,
    device: torch.device | str = "cpu",
) -> RecurrenceCoefficients:
    r"""Recurrence coefficients of the orthonormal Jacobi polynomials.

    The eigenvalues of the returned symmetric tridiagonal matrix are the
    roots of :math:`P_n^{(\alpha,\beta)}` (Golub & Welsch, 1969).

    Parameters
    ----------
    n : int
        Matrix size, ``n >= 1``.
    alpha, beta : float
        Jacobi parameters.
    dtype : torch.dtype, optional
        Data type. Default is float64.
    device : torch.device or str, optional
        Device. Default is "cpu".

    Returns
    -------
    RecurrenceCoefficients
        ``diagonal`` of shape (n,) and ``off_diagonal`` of shape (n - 1,).

    Notes
    -----
    With :math:`s = \alpha + \beta`,

    .. math::

        a_0 = \frac{\beta - \alpha}{s + 2}, \qquad
        a_i = \frac{\beta^2 - \alpha^2}{(2i + s)(2i + s + 2)}

    .. math::

        b_{i-1} = \sqrt{\frac{4 i (i + \alpha)(i + \beta)(i + s)}
                             {((2i + s)^2 - 1)(2i + s)^2}}

    :math:`a_0` is written in reduced form so that :math:`s = 0` needs no
    special case. For :math:`i = 1` the :math:`i + s` factor cancels
    against the denominator and :math:`b_0` is evaluated in closed form.
    """
    if n < 1:
        raise PreconditionError(f"n must be at least 1, got {n}")

    apb = alpha + beta
    a2b2 = beta * beta - alpha * alpha

    a = [0.0] * n
    b = [0.0] * (n - 1)

    apbi = 2.0 + apb
    a[0] = (beta - alpha) / apbi

    for i in range(1, n - 1):
        apbi = 2.0 * (i + 1) + apb
        a[i] = a2b2 / ((apbi - 2.0) * apbi)
        b[i] = math.sqrt(
            4.0
            * (i + 1)
            * (i + 1 + alpha)
            * (i + 1 + beta)
            * (i + 1 + apb)
            / ((apbi * apbi - 1.0) * apbi * apbi)
        )

    if n > 1:
        apbi = 2.0 + apb
        b[0] = math.sqrt(
            4.0 * (1.0 + alpha) * (1.0 + beta) / ((apbi + 1.0) * apbi * apbi)
        )

        apbi = 2.0 * n + apb
        a[n - 1] = a2b2 / ((apbi - 2.0) * apbi)

    return RecurrenceCoefficients(
        diagonal=torch.tensor(a, dtype=dtype, device=device),
        off_diagonal=torch.tensor(b, dtype=dtype, device=device),
    )
