"""Implicit-shift QL eigensolver for symmetric tridiagonal matrices."""

import math

import numpy as np
import torch
from torch import Tensor

from .._exceptions import ConvergenceError
from .._limits import MAX_ITERATIONS


def _tridiagonal_ql(d: np.ndarray, e: np.ndarray) -> None:
    """Overwrite ``d`` with the eigenvalues, in no particular order.

    ``e`` holds the sub-diagonal in ``e[0:n-1]``; ``e[n-1]`` is workspace.
    Both arrays are destroyed.
    """
    n = d.shape[0]

    for l in range(n):
        iteration = 0
        while True:
            # Look for a single small sub-diagonal element to split the
            # matrix.
            m = l
            while m < n - 1:
                dd = abs(d[m]) + abs(d[m + 1])
                if abs(e[m]) + dd == dd:
                    break
                m += 1

            if m == l:
                break

            if iteration == MAX_ITERATIONS:
                raise ConvergenceError(
                    f"too many iterations in tridiagonal QL "
                    f"(eigenvalue {l}, {MAX_ITERATIONS} iterations)"
                )
            iteration += 1

            # Wilkinson shift
            g = (d[l + 1] - d[l]) / (2.0 * e[l])
            r = math.sqrt(g * g + 1.0)
            g = d[m] - d[l] + e[l] / (g + (r if g >= 0.0 else -r))

            s = 1.0
            c = 1.0
            p = 0.0
            for i in range(m - 1, l - 1, -1):
                f = s * e[i]
                b = c * e[i]
                if abs(f) >= abs(g):
                    c = g / f
                    r = math.sqrt(c * c + 1.0)
                    e[i + 1] = f * r
                    s = 1.0 / r
                    c *= s
                else:
                    s = f / g
                    r = math.sqrt(s * s + 1.0)
                    e[i + 1] = g * r
                    c = 1.0 / r
                    s *= c
                g = d[i + 1] - p
                r = (d[i] - g) * s + 2.0 * c * b
                p = s * r
                d[i + 1] = g + p
                g = c * r - b

            d[l] -= p
            e[l] = g
            e[m] = 0.0


def tridiagonal_eigenvalues(
    diagonal: Tensor,
    off_diagonal: Tensor,
) -> Tensor:
    """Eigenvalues of a real symmetric tridiagonal matrix.

    Parameters
    ----------
    diagonal : Tensor
        Main diagonal, shape (n,).
    off_diagonal : Tensor
        Sub-/super-diagonal, shape (n - 1,).

    Returns
    -------
    Tensor
        Eigenvalues sorted ascending, shape (n,), with the dtype and device
        of ``diagonal``.

    Raises
    ------
    ValueError
        If the shapes are inconsistent.
    ConvergenceError
        If an eigenvalue needs more than ``MAX_ITERATIONS`` QL sweeps.

    Notes
    -----
    Implicit QL with Wilkinson shifts (``tqli`` in Press et al.). For each
    index l the smallest m >= l with a negligible ``e[m]``, judged by

        |e[m]| + |d[m]| + |d[m+1]| == |d[m]| + |d[m+1]|

    in floating point, isolates an unreduced block, and one rotation chain
    is applied to it until it splits. The sweeps do not order the
    eigenvalues, so they are sorted afterwards.

    The inputs are not modified.

    Examples
    --------
    >>> tridiagonal_eigenvalues(
    ...     torch.tensor([2.0, 2.0], dtype=torch.float64),
    ...     torch.tensor([1.0], dtype=torch.float64),
    ... )
    tensor([1., 3.], dtype=torch.float64)
    """
    if diagonal.dim() != 1:
        raise ValueError(
            f"diagonal must be 1-D, got shape {tuple(diagonal.shape)}"
        )

    n = diagonal.shape[0]

    if off_diagonal.shape != (max(n - 1, 0),):
        raise ValueError(
            f"off_diagonal must have shape ({max(n - 1, 0)},), "
            f"got {tuple(off_diagonal.shape)}"
        )

    d = diagonal.detach().cpu().numpy().astype(np.float64)
    e = np.zeros(n, dtype=np.float64)
    e[: n - 1] = off_diagonal.detach().cpu().numpy()

    _tridiagonal_ql(d, e)

    # Selection sort
    for i in range(n - 1):
        k = i
        p = d[i]
        for j in range(i + 1, n):
            if d[j] < p:
                k = j
                p = d[j]
        d[k] = d[i]
        d[i] = p

    return torch.from_numpy(d).to(dtype=diagonal.dtype, device=diagonal.device)
