"""torchpolylib: Jacobi-family quadrature, differentiation and interpolation."""

from . import (
    differentiation,
    interpolation,
    linear_algebra,
    polynomial,
    quadrature,
    root_finding,
    special_functions,
)
from ._exceptions import (
    ConvergenceError,
    DegreeError,
    PolylibError,
    PolylibWarning,
    PreconditionError,
)
from ._limits import MAX_ITERATIONS, MAX_ORDER, MAX_POINTS, default_tolerance
from ._poly_type import PolyType

__all__ = [
    "ConvergenceError",
    "DegreeError",
    "MAX_ITERATIONS",
    "MAX_ORDER",
    "MAX_POINTS",
    "PolyType",
    "PolylibError",
    "PolylibWarning",
    "PreconditionError",
    "default_tolerance",
    "differentiation",
    "interpolation",
    "linear_algebra",
    "polynomial",
    "quadrature",
    "root_finding",
    "special_functions",
]

__version__ = "0.1.0"
