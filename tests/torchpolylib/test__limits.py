import pytest
import torch

from torchpolylib import DegreeError, MAX_ITERATIONS, MAX_ORDER, MAX_POINTS
from torchpolylib._limits import check_degree, default_tolerance


class TestLimits:
    def test_constants(self):
        assert MAX_POINTS == 64
        assert MAX_ORDER == 2 * MAX_POINTS - 1
        assert MAX_ITERATIONS == 50

    def test_default_tolerance_float64(self):
        tol = default_tolerance(torch.float64)
        assert tol == 100.0 * torch.finfo(torch.float64).eps
        assert 1e-14 < tol < 1e-13

    def test_default_tolerance_float32_is_looser(self):
        assert default_tolerance(torch.float32) > default_tolerance(
            torch.float64
        )

    def test_default_tolerance_default_dtype(self):
        assert default_tolerance() == default_tolerance(torch.float64)


class TestCheckDegree:
    @pytest.mark.parametrize("n", [0, 1, MAX_ORDER])
    def test_accepts(self, n):
        check_degree(n)

    @pytest.mark.parametrize("n", [-1, MAX_ORDER + 1])
    def test_rejects(self, n):
        with pytest.raises(DegreeError):
            check_degree(n)
