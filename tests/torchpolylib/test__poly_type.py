from typing import get_args

import pytest

from torchpolylib import PolyType
from torchpolylib._poly_type import POLY_TYPES, check_poly_type
from torchpolylib.differentiation._jacobi_differentiation_matrix import (
    _DIFFERENTIATION_MATRIX,
)
from torchpolylib.interpolation._lagrangian_interpolant import _INTERPOLANT
from torchpolylib.quadrature._nodes import _NODES_WEIGHTS


class TestPolyType:
    def test_poly_types_follow_literal(self):
        assert POLY_TYPES == get_args(PolyType)
        assert POLY_TYPES == (
            "gauss",
            "gauss_radau_left",
            "gauss_radau_right",
            "gauss_lobatto",
        )

    @pytest.mark.parametrize(
        "table", [_NODES_WEIGHTS, _DIFFERENTIATION_MATRIX, _INTERPOLANT]
    )
    def test_dispatch_tables_cover_every_variant(self, table):
        assert set(table) == set(POLY_TYPES)

    @pytest.mark.parametrize("poly_type", POLY_TYPES)
    def test_check_accepts(self, poly_type):
        check_poly_type(poly_type)

    def test_check_rejects(self):
        with pytest.raises(ValueError, match="Unknown poly_type"):
            check_poly_type("gauss_kronrod")
