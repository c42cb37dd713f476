import math

import mpmath
import pytest
import scipy.special
import torch

from torchpolylib import PreconditionError
from torchpolylib.special_functions import gamma_function


class TestGammaFunction:
    """Tests for Gamma at integer and half-integer arguments."""

    @pytest.mark.parametrize("x", [1, 2, 3, 4, 5, 10, 20])
    def test_integers(self, x):
        assert gamma_function(x) == pytest.approx(
            math.factorial(x - 1), rel=1e-14
        )

    @pytest.mark.parametrize("x", [0.5, 1.5, 2.5, 3.5, 7.5, 15.5])
    def test_half_integers(self, x):
        expected = float(mpmath.gamma(mpmath.mpf(x)))
        assert gamma_function(x) == pytest.approx(expected, rel=1e-14)

    @pytest.mark.parametrize("x", [1.0, 2.5, 6.0, 12.5])
    def test_matches_scipy(self, x):
        assert gamma_function(x) == pytest.approx(
            scipy.special.gamma(x), rel=1e-14
        )

    def test_known_values(self):
        assert gamma_function(2) == 1.0
        assert gamma_function(2.5) == pytest.approx(1.3293, abs=1e-4)
        assert gamma_function(0.5) == pytest.approx(math.sqrt(math.pi))

    def test_minus_one_half(self):
        assert gamma_function(-0.5) == pytest.approx(
            -2.0 * math.sqrt(math.pi), rel=1e-15
        )

    def test_zero_convention(self):
        assert gamma_function(0.0) == 1.0

    def test_tensor_argument(self):
        assert gamma_function(torch.tensor(5.0)) == 24.0

    def test_returns_float(self):
        assert isinstance(gamma_function(3), float)

    @pytest.mark.parametrize("x", [1.3, 0.25, -1.0, -1.5, -3.0])
    def test_unsupported_argument_raises(self, x):
        with pytest.raises(PreconditionError):
            gamma_function(x)

    @pytest.mark.parametrize("x", [math.inf, -math.inf, math.nan])
    def test_non_finite_raises(self, x):
        with pytest.raises(PreconditionError, match="finite"):
            gamma_function(x)

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            gamma_function(1.3)
