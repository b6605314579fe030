"""Time-discretized ODE system for Picard iteration."""

from typing import Any
from numpy.typing import NDArray

from tdode.core.tags import NonlinearSolverTag
from tdode.systems.base import TimeDiscretizedODESystem


class PicardSystem(TimeDiscretizedODESystem):
    """
    Provides the linearized system A x_new = rhs for fixed-point iteration.

    A and rhs come from the held translator, the same one that defines the
    residual for Newton iteration.
    """

    solver_tag = NonlinearSolverTag.PICARD

    def assemble_matrices_picard(self, x_new: NDArray) -> None:
        """Assemble M, K, b at the state the scheme derives from x_new."""
        self._assemble_matrices(x_new)

    def get_A(self) -> Any:
        return self._translate(self._mat_trans.get_A, self._M, self._K)

    def get_rhs(self) -> NDArray:
        return self._translate(
            self._mat_trans.get_rhs, self._M, self._K, self._b
        )
