from typing import Literal, get_args

PolyType = Literal[
    "gauss",
    "gauss_radau_left",
    "gauss_radau_right",
    "gauss_lobatto",
]

POLY_TYPES: tuple[str, ...] = get_args(PolyType)


def check_poly_type(poly_type: str) -> None:
    if poly_type not in POLY_TYPES:
        raise ValueError(
            f"Unknown poly_type: {poly_type}. Use one of "
            + ", ".join(repr(p) for p in POLY_TYPES)
            + "."
        )
