from ..special_functions import gamma_function


def jacobi_weight_integral(alpha: float, beta: float) -> float:
    r"""Total measure of the Jacobi weight on [-1, 1].

    .. math::

        \int_{-1}^{1} (1 - x)^\alpha (1 + x)^\beta \, dx
            = \frac{2^{\alpha+\beta+1} \Gamma(\alpha+1) \Gamma(\beta+1)}
                   {\Gamma(\alpha+\beta+2)}

    ``alpha`` and ``beta`` must be integers or half-integers.
    """
    return (
        2.0 ** (alpha + beta + 1.0)
        * gamma_function(alpha + 1.0)
        * gamma_function(beta + 1.0)
        / gamma_function(alpha + beta + 2.0)
    )
