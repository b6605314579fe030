"""Time-discretized ODE system for Newton iteration."""

import logging
from typing import Any, Optional
from numpy.typing import NDArray

from tdode.algebra.protocols import LinearAlgebraBackend
from tdode.core.ode import FirstOrderImplicitODE
from tdode.core.tags import NonlinearSolverTag
from tdode.systems.base import TimeDiscretizedODESystem
from tdode.timedisc.base import TimeDiscretization
from tdode.translators.base import MatrixTranslator

logger = logging.getLogger(__name__)


class NewtonSystem(TimeDiscretizedODESystem):
    """
    Provides residual and Jacobian of the time-discretized equation.

    Call `assemble_residual_newton` and `assemble_jacobian` for a trial
    state before `get_residual` / `get_jacobian`.
    """

    solver_tag = NonlinearSolverTag.NEWTON

    def __init__(
        self,
        ode: FirstOrderImplicitODE,
        time_disc: TimeDiscretization,
        mat_trans: MatrixTranslator,
        backend: Optional[LinearAlgebraBackend] = None,
    ):
        super().__init__(ode, time_disc, mat_trans, backend)
        self._jac = self._backend.create_matrix(self._size)

    def assemble_residual_newton(self, x_new: NDArray) -> None:
        """Assemble M, K, b at the state the scheme derives from x_new."""
        self._assemble_matrices(x_new)

    def assemble_jacobian(self, x_new: NDArray) -> None:
        """Assemble the Jacobian at x_new, including time-derivative terms."""
        self._check_sizes(x_new)
        t = self._time_disc.get_current_time()
        x_curr = self._current_x(x_new)
        dxdot_dx = self._time_disc.get_current_x_weight()

        logger.debug("Assembling Jacobian at t=%g", t)
        self._ode.assemble_jacobian(
            t, x_curr, dxdot_dx, self._time_disc.get_dx_dx(), self._jac
        )
        self._check_buffer("Jacobian", self._jac, 2)
        self._time_disc.adjust_matrix(self._jac)

    def get_residual(self, x_new: NDArray) -> NDArray:
        """Residual at x_new from the last assembled M, K, b."""
        return self._translate(
            self._mat_trans.get_residual, self._M, self._K, self._b, x_new
        )

    def get_jacobian(self) -> Any:
        """Last assembled Jacobian."""
        return self._translate(self._mat_trans.get_jacobian, self._jac)
