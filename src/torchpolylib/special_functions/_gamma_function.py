import math

from torch import Tensor

from .._exceptions import PreconditionError


def gamma_function(x: float | Tensor) -> float:
    r"""Gamma function at integer and half-integer arguments.

    .. math::

        \Gamma(k) = (k - 1)!, \qquad
        \Gamma\left(k + \tfrac{1}{2}\right)
            = \sqrt{\pi} \prod_{j=1}^{k} \left(j - \tfrac{1}{2}\right)

    Parameters
    ----------
    x : float or Tensor
        Argument. Must be a positive integer, a non-negative half-integer,
        ``0`` or ``-0.5``. A single-element tensor is converted to float.

    Returns
    -------
    float
        :math:`\Gamma(x)`.

    Raises
    ------
    PreconditionError
        If ``x`` is not in the supported set.

    Notes
    -----
    The closed form is exact up to rounding and is sufficient for the
    normalization constants of Jacobi quadrature rules, whose arguments are
    integers or half-integers whenever ``alpha`` and ``beta`` are.

    By convention :math:`\Gamma(0) = 1` and
    :math:`\Gamma(-1/2) = -2\sqrt{\pi}`.

    Examples
    --------
    >>> gamma_function(5)
    24.0
    >>> gamma_function(2.5)
    1.329340388179137
    """
    if isinstance(x, Tensor):
        x = x.item()

    x = float(x)

    if not math.isfinite(x):
        raise PreconditionError(
            f"gamma_function argument must be finite, got {x}"
        )

    if x == -0.5:
        return -2.0 * math.sqrt(math.pi)

    if x == 0.0:
        return 1.0

    n = int(x)

    if x - n == 0.5:
        gamma = math.sqrt(math.pi)
        t = x
        for _ in range(n):
            t -= 1.0
            gamma *= t
        return gamma

    if x - n == 0.0 and n > 0:
        gamma = 1.0
        t = x
        for _ in range(n - 1):
            t -= 1.0
            gamma *= t
        return gamma

    raise PreconditionError(
        f"gamma_function argument must be an integer or half-integer, got {x}"
    )
