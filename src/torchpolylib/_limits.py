"""Fixed iteration caps, degree ceilings and tolerances."""

import torch

from ._exceptions import DegreeError

# Largest number of points in a single rule.
MAX_POINTS = 64

# Highest polynomial degree the recurrence evaluates.
MAX_ORDER = 2 * MAX_POINTS - 1

# Iteration cap shared by Newton deflation and the QL eigensolver.
MAX_ITERATIONS = 50


def default_tolerance(dtype: torch.dtype = torch.float64) -> float:
    """Return the dtype-appropriate absolute tolerance.

    Used as the Newton step size at which a root is accepted and as the
    distance below which a point coincides with a node.

    Parameters
    ----------
    dtype : torch.dtype
        The tensor dtype.

    Returns
    -------
    float
        ``100 * eps`` of ``dtype``.
    """
    return 100.0 * torch.finfo(dtype).eps


def check_degree(n: int) -> None:
    """Raise :class:`DegreeError` unless ``0 <= n <= MAX_ORDER``."""
    if n < 0:
        raise DegreeError(f"degree must be non-negative, got {n}")
    if n > MAX_ORDER:
        raise DegreeError(
            f"Requested degree {n} exceeds the maximum supported "
            f"degree {MAX_ORDER}"
        )
