"""Sparse linear algebra backend using scipy.sparse."""

import numpy as np
import scipy.sparse
import scipy.sparse.linalg
from numpy.typing import NDArray


class SparseBackend:
    """
    Operator buffers stored as LIL matrices.

    LIL allows ODE sources to overwrite entries in place without changing
    the storage format; products and sums convert to CSR on the fly.
    solve() and norm() serve the solver loops that drive a system.
    """

    name = "sparse"

    def create_matrix(self, n: int) -> scipy.sparse.lil_matrix:
        return scipy.sparse.lil_matrix((n, n))

    def create_vector(self, n: int) -> NDArray:
        return np.zeros(n)

    def solve(self, A, b: NDArray) -> NDArray:
        """Solve Ax = b with a sparse direct solver."""
        return scipy.sparse.linalg.spsolve(scipy.sparse.csc_matrix(A), b)

    def norm(self, x: NDArray) -> float:
        return float(np.linalg.norm(x))
