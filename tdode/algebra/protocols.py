"""Linear algebra backend protocol."""

from typing import Protocol, Any
from numpy.typing import NDArray


class LinearAlgebraBackend(Protocol):
    """
    Protocol for operator storage and linear solves.
    Allows swapping between dense and sparse storage of M, K and Jac.
    Systems only allocate through it; solve and norm are for the nonlinear
    solver that drives a system.
    """

    name: str

    def create_matrix(self, n: int) -> Any:
        """
        Allocate a zero (n, n) operator buffer.

        Args:
            n: Number of degrees of freedom

        Returns:
            Matrix buffer that ODE sources can overwrite in place
        """
        ...

    def create_vector(self, n: int) -> NDArray:
        """Allocate a zero vector of length n."""
        ...

    def solve(self, A: Any, b: NDArray) -> NDArray:
        """
        Solve linear system Ax = b.

        Args:
            A: System matrix
            b: Right-hand side

        Returns:
            Solution x
        """
        ...

    def norm(self, x: NDArray) -> float:
        """
        Compute vector norm.

        Args:
            x: Vector

        Returns:
            Norm value
        """
        ...
