from ._gamma_function import gamma_function

__all__ = [
    "gamma_function",
]
