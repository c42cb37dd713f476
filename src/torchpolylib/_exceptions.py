"""Exception hierarchy for polylib operations."""


class PolylibError(Exception):
    """Base exception for polylib errors."""

    pass


class PreconditionError(PolylibError, ValueError):
    """Invalid call arguments.

    Raised for arguments outside the closed set a routine supports, e.g.
    a Gamma argument that is neither an integer nor a half-integer, or a
    rule with fewer than one point.
    """

    pass


class DegreeError(PreconditionError):
    """Raised when a size exceeds a supported ceiling.

    Covers a polynomial degree outside [0, MAX_ORDER] and a quadrature rule
    with more than MAX_POINTS points.
    """

    pass


class ConvergenceError(PolylibError):
    """Raised when an iteration exceeds its iteration cap.

    Signals either pathological input or a numerical robustness defect.
    The computation is never retried.
    """

    pass


class PolylibWarning(UserWarning):
    """Warning for non-fatal polylib issues (e.g., extrapolation)."""

    pass
