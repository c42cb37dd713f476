"""
Jacobi quadrature rules.

Node/weight computation:
    gauss_jacobi_nodes_weights, gauss_radau_left_jacobi_nodes_weights,
    gauss_radau_right_jacobi_nodes_weights, gauss_lobatto_jacobi_nodes_weights,
    jacobi_nodes_weights

Rule value type:
    QuadratureRule, jacobi_quadrature_rule
"""

from ._nodes import (
    gauss_jacobi_nodes_weights,
    gauss_lobatto_jacobi_nodes_weights,
    gauss_radau_left_jacobi_nodes_weights,
    gauss_radau_right_jacobi_nodes_weights,
    jacobi_nodes_weights,
)
from ._quadrature_rule import QuadratureRule, jacobi_quadrature_rule

__all__ = [
    # Node/weight computation
    "gauss_jacobi_nodes_weights",
    "gauss_radau_left_jacobi_nodes_weights",
    "gauss_radau_right_jacobi_nodes_weights",
    "gauss_lobatto_jacobi_nodes_weights",
    "jacobi_nodes_weights",
    # Rule value type
    "QuadratureRule",
    "jacobi_quadrature_rule",
]
