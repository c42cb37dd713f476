import math

import pytest
import scipy.special
import torch

from torchpolylib import PreconditionError
from torchpolylib.polynomial import (
    RecurrenceCoefficients,
    jacobi_recurrence_coefficients,
    jacobi_weight_integral,
)


def _dense(coefficients: RecurrenceCoefficients) -> torch.Tensor:
    return (
        torch.diag(coefficients.diagonal)
        + torch.diag(coefficients.off_diagonal, 1)
        + torch.diag(coefficients.off_diagonal, -1)
    )


class TestJacobiRecurrenceCoefficients:
    """Tests for the Golub-Welsch Jacobi matrix."""

    @pytest.mark.parametrize("n", [1, 2, 3, 10, 25])
    def test_shapes(self, n):
        coefficients = jacobi_recurrence_coefficients(n, 1.0, 0.5)
        assert coefficients.diagonal.shape == (n,)
        assert coefficients.off_diagonal.shape == (n - 1,)

    @pytest.mark.parametrize("n", [2, 5, 16])
    @pytest.mark.parametrize(
        "alpha,beta", [(0.0, 0.0), (0.5, 0.5), (1.0, 2.0), (-0.5, -0.5)]
    )
    def test_eigenvalues_are_jacobi_roots(self, n, alpha, beta):
        coefficients = jacobi_recurrence_coefficients(n, alpha, beta)
        eigenvalues = torch.linalg.eigvalsh(_dense(coefficients))
        expected, _ = scipy.special.roots_jacobi(n, alpha, beta)
        torch.testing.assert_close(
            eigenvalues,
            torch.from_numpy(expected),
            rtol=1e-12,
            atol=1e-12,
        )

    def test_legendre(self):
        # a_i = 0, b_i = i / sqrt(4 i^2 - 1) for i >= 1
        coefficients = jacobi_recurrence_coefficients(5, 0.0, 0.0)
        torch.testing.assert_close(
            coefficients.diagonal, torch.zeros(5, dtype=torch.float64)
        )
        i = torch.arange(1, 5, dtype=torch.float64)
        torch.testing.assert_close(
            coefficients.off_diagonal, i / torch.sqrt(4.0 * i * i - 1.0)
        )

    def test_single_point(self):
        coefficients = jacobi_recurrence_coefficients(1, 1.0, 2.0)
        torch.testing.assert_close(
            coefficients.diagonal,
            torch.tensor([0.2], dtype=torch.float64),
        )

    def test_dtype(self):
        coefficients = jacobi_recurrence_coefficients(
            4, 0.0, 0.0, dtype=torch.float32
        )
        assert coefficients.diagonal.dtype == torch.float32
        assert coefficients.off_diagonal.dtype == torch.float32

    def test_is_named_tuple(self):
        diagonal, off_diagonal = jacobi_recurrence_coefficients(3, 0.0, 0.0)
        assert diagonal.shape == (3,)
        assert off_diagonal.shape == (2,)

    def test_zero_points_raises(self):
        with pytest.raises(PreconditionError):
            jacobi_recurrence_coefficients(0, 0.0, 0.0)


class TestJacobiWeightIntegral:
    @pytest.mark.parametrize(
        "alpha,beta", [(0.0, 0.0), (1.0, 0.0), (0.5, 0.5), (2.0, 1.0)]
    )
    def test_matches_beta_function(self, alpha, beta):
        expected = 2.0 ** (alpha + beta + 1.0) * scipy.special.beta(
            alpha + 1.0, beta + 1.0
        )
        assert jacobi_weight_integral(alpha, beta) == pytest.approx(
            expected, rel=1e-14
        )

    def test_legendre(self):
        assert jacobi_weight_integral(0.0, 0.0) == 2.0

    def test_chebyshev(self):
        assert jacobi_weight_integral(-0.5, -0.5) == pytest.approx(math.pi)
