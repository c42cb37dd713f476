"""Benchmark Jacobi polynomial root finding.

Compares Newton iteration with deflation (O(n^2) polynomial evaluations)
against the tridiagonal QL eigensolver across degrees up to MAX_POINTS, and
reports the largest disagreement between the two root sets.
"""

import time

from torchpolylib import MAX_POINTS
from torchpolylib.root_finding import jacobi_zeros


def benchmark_jacobi_zeros(
    n: int,
    alpha: float,
    beta: float,
    n_iterations: int = 10,
    method: str = "tridiagonal",
) -> float:
    """Benchmark root finding at given degree.

    Parameters
    ----------
    n : int
        Degree of the Jacobi polynomial (number of roots to find).
    alpha, beta : float
        Jacobi parameters.
    n_iterations : int
        Number of iterations for timing.
    method : str
        'tridiagonal' or 'deflation'.

    Returns
    -------
    float
        Average time per root finding in milliseconds.
    """
    # Warmup
    for _ in range(3):
        _ = jacobi_zeros(n, alpha, beta, method=method)

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = jacobi_zeros(n, alpha, beta, method=method)

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run root finding benchmarks across degrees."""
    degrees = [4, 8, 16, 32, MAX_POINTS]
    alpha, beta = 1.0, 1.0

    print(f"Jacobi Root Finding Benchmark (alpha={alpha}, beta={beta})")
    print("=" * 70)
    print(
        f"{'Degree':>8} {'Tridiagonal (ms)':>18} {'Deflation (ms)':>18} {'Max diff':>14}"
    )
    print("-" * 70)

    for n in degrees:
        ms_tridiagonal = benchmark_jacobi_zeros(
            n, alpha, beta, method="tridiagonal"
        )

        try:
            ms_deflation = benchmark_jacobi_zeros(
                n, alpha, beta, method="deflation"
            )
            difference = (
                (
                    jacobi_zeros(n, alpha, beta, method="tridiagonal")
                    - jacobi_zeros(n, alpha, beta, method="deflation")
                )
                .abs()
                .max()
                .item()
            )
        except Exception as e:
            ms_deflation = float("nan")
            difference = float("nan")
            print(f"Deflation failed for degree {n}: {e}")

        print(
            f"{n:>8} {ms_tridiagonal:>18.3f} {ms_deflation:>18.3f} {difference:>14.2e}"
        )

    print()
    print("Notes:")
    print("- Tridiagonal: QL eigenvalues of the Jacobi matrix")
    print("- Deflation: Newton per root, each deflated by the roots found so far")


if __name__ == "__main__":
    main()
