"""Dense linear algebra backend using NumPy/SciPy."""

import numpy as np
import scipy.linalg
from numpy.typing import NDArray


class DenseBackend:
    """
    NumPy arrays for the operator buffers.

    solve() and norm() are not used by the systems themselves; they are
    there for the solver loops that drive a system.
    """

    name = "dense"

    def create_matrix(self, n: int) -> NDArray:
        return np.zeros((n, n))

    def create_vector(self, n: int) -> NDArray:
        return np.zeros(n)

    def solve(self, A: NDArray, b: NDArray) -> NDArray:
        """Solve linear system Ax = b using LU factorization."""
        return scipy.linalg.lu_solve(scipy.linalg.lu_factor(np.asarray(A)), b)

    def norm(self, x: NDArray) -> float:
        """Compute L2 norm."""
        return float(np.linalg.norm(x))
