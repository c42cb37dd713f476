import pytest
import torch

import torchpolylib.linear_algebra._tridiagonal_eigenvalues
from torchpolylib import ConvergenceError
from torchpolylib.linear_algebra import tridiagonal_eigenvalues


def _dense(diagonal, off_diagonal):
    return (
        torch.diag(diagonal)
        + torch.diag(off_diagonal, 1)
        + torch.diag(off_diagonal, -1)
    )


class TestTridiagonalEigenvalues:
    """Tests for the implicit-shift QL eigensolver."""

    def test_two_by_two(self):
        eigenvalues = tridiagonal_eigenvalues(
            torch.tensor([2.0, 2.0], dtype=torch.float64),
            torch.tensor([1.0], dtype=torch.float64),
        )
        torch.testing.assert_close(
            eigenvalues, torch.tensor([1.0, 3.0], dtype=torch.float64)
        )

    @pytest.mark.parametrize("n", [1, 2, 3, 8, 32, 64])
    def test_matches_eigvalsh(self, n):
        generator = torch.Generator().manual_seed(n)
        diagonal = torch.randn(n, dtype=torch.float64, generator=generator)
        off_diagonal = torch.randn(
            n - 1, dtype=torch.float64, generator=generator
        )
        expected = torch.linalg.eigvalsh(_dense(diagonal, off_diagonal))
        torch.testing.assert_close(
            tridiagonal_eigenvalues(diagonal, off_diagonal),
            expected,
            rtol=1e-12,
            atol=1e-12,
        )

    def test_sorted_ascending(self):
        diagonal = torch.tensor([5.0, -3.0, 1.0, 0.0], dtype=torch.float64)
        off_diagonal = torch.tensor([0.5, 0.25, 2.0], dtype=torch.float64)
        eigenvalues = tridiagonal_eigenvalues(diagonal, off_diagonal)
        assert (eigenvalues[1:] >= eigenvalues[:-1]).all()

    def test_diagonal_matrix(self):
        diagonal = torch.tensor([3.0, -1.0, 2.0], dtype=torch.float64)
        eigenvalues = tridiagonal_eigenvalues(
            diagonal, torch.zeros(2, dtype=torch.float64)
        )
        torch.testing.assert_close(
            eigenvalues, torch.tensor([-1.0, 2.0, 3.0], dtype=torch.float64)
        )

    def test_laplacian(self):
        # Eigenvalues of tridiag(-1, 2, -1) are 2 - 2 cos(k pi / (n + 1))
        n = 10
        eigenvalues = tridiagonal_eigenvalues(
            torch.full((n,), 2.0, dtype=torch.float64),
            torch.full((n - 1,), -1.0, dtype=torch.float64),
        )
        k = torch.arange(1, n + 1, dtype=torch.float64)
        expected = 2.0 - 2.0 * torch.cos(k * torch.pi / (n + 1))
        torch.testing.assert_close(eigenvalues, expected)

    def test_inputs_not_modified(self):
        diagonal = torch.tensor([1.0, 2.0, 3.0], dtype=torch.float64)
        off_diagonal = torch.tensor([0.5, 0.5], dtype=torch.float64)
        d = diagonal.clone()
        e = off_diagonal.clone()
        tridiagonal_eigenvalues(diagonal, off_diagonal)
        torch.testing.assert_close(diagonal, d)
        torch.testing.assert_close(off_diagonal, e)

    def test_preserves_dtype(self):
        eigenvalues = tridiagonal_eigenvalues(
            torch.tensor([2.0, 2.0], dtype=torch.float32),
            torch.tensor([1.0], dtype=torch.float32),
        )
        assert eigenvalues.dtype == torch.float32

    def test_empty(self):
        eigenvalues = tridiagonal_eigenvalues(
            torch.zeros(0, dtype=torch.float64),
            torch.zeros(0, dtype=torch.float64),
        )
        assert eigenvalues.shape == (0,)

    def test_off_diagonal_shape_mismatch_raises(self):
        with pytest.raises(ValueError, match="off_diagonal"):
            tridiagonal_eigenvalues(
                torch.zeros(3, dtype=torch.float64),
                torch.zeros(3, dtype=torch.float64),
            )

    def test_non_vector_diagonal_raises(self):
        with pytest.raises(ValueError, match="1-D"):
            tridiagonal_eigenvalues(
                torch.zeros(2, 2, dtype=torch.float64),
                torch.zeros(1, dtype=torch.float64),
            )

    def test_iteration_cap_raises(self, monkeypatch):
        monkeypatch.setattr(
            torchpolylib.linear_algebra._tridiagonal_eigenvalues,
            "MAX_ITERATIONS",
            0,
        )
        with pytest.raises(ConvergenceError, match="too many iterations"):
            tridiagonal_eigenvalues(
                torch.tensor([2.0, 2.0], dtype=torch.float64),
                torch.tensor([1.0], dtype=torch.float64),
            )

    def test_diagonal_matrix_needs_no_iterations(self, monkeypatch):
        monkeypatch.setattr(
            torchpolylib.linear_algebra._tridiagonal_eigenvalues,
            "MAX_ITERATIONS",
            0,
        )
        eigenvalues = tridiagonal_eigenvalues(
            torch.tensor([2.0, 1.0], dtype=torch.float64),
            torch.zeros(1, dtype=torch.float64),
        )
        torch.testing.assert_close(
            eigenvalues, torch.tensor([1.0, 2.0], dtype=torch.float64)
        )
