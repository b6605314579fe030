"""Common part of time-discretized ODE systems."""

import logging
from abc import ABC
from typing import Any, Callable, Optional, Protocol
import numpy as np
from numpy.typing import NDArray

from tdode.algebra.dense import DenseBackend
from tdode.algebra.protocols import LinearAlgebraBackend
from tdode.core.errors import ConfigurationError, MatrixSizeMismatchError
from tdode.core.ode import FirstOrderImplicitODE, ParabolicMatrices, readonly
from tdode.core.tags import EquationKind, NonlinearSolverTag
from tdode.timedisc.base import TimeDiscretization
from tdode.translators.base import MatrixTranslator

logger = logging.getLogger(__name__)


class NonlinearSystemNewton(Protocol):
    """What a Newton solver calls on a system."""

    def assemble_residual_newton(self, x_new: NDArray) -> None:
        ...

    def assemble_jacobian(self, x_new: NDArray) -> None:
        ...

    def get_residual(self, x_new: NDArray) -> NDArray:
        ...

    def get_jacobian(self) -> Any:
        ...

    def is_linear(self) -> bool:
        ...


class NonlinearSystemPicard(Protocol):
    """What a Picard (fixed-point) solver calls on a system."""

    def assemble_matrices_picard(self, x_new: NDArray) -> None:
        ...

    def get_A(self) -> Any:
        ...

    def get_rhs(self) -> NDArray:
        ...

    def is_linear(self) -> bool:
        ...


class TimeDiscretizedODESystem(ABC):
    """
    Binds an ODE source, a time discretization and a matrix translator.

    Owns the operator buffers M, K, b. They are sized once from the ODE
    source and overwritten by every assembly call. Getters always use the
    most recent assembly; whether that is still valid for the caller's
    trial state is not tracked.
    """

    solver_tag: NonlinearSolverTag
    equation = EquationKind.PARABOLIC

    def __init__(
        self,
        ode: FirstOrderImplicitODE,
        time_disc: TimeDiscretization,
        mat_trans: MatrixTranslator,
        backend: Optional[LinearAlgebraBackend] = None,
    ):
        """
        Args:
            ode: Source of M, K, b (and the Jacobian for Newton)
            time_disc: Time-stepping scheme
            mat_trans: Translator bound to `time_disc`
            backend: Storage for the operator buffers (dense by default)
        """
        if mat_trans.time_discretization is not time_disc:
            raise ConfigurationError(
                "Matrix translator is bound to a different time discretization"
            )

        n = ode.get_matrix_size()
        if n <= 0:
            raise ConfigurationError(
                f"ODE reports {n} degrees of freedom, expected at least one"
            )

        self._ode = ode
        self._time_disc = time_disc
        self._mat_trans = mat_trans
        self._backend = backend if backend is not None else DenseBackend()
        self._size = n

        self._M = self._backend.create_matrix(n)
        self._K = self._backend.create_matrix(n)
        self._b = self._backend.create_vector(n)

        logger.debug(
            "Created %s with %d DOFs (%s, %s, %s backend)",
            type(self).__name__,
            n,
            type(time_disc).__name__,
            type(mat_trans).__name__,
            self._backend.name,
        )

    @property
    def matrix_size(self) -> int:
        """Number of degrees of freedom, fixed at construction."""
        return self._size

    def get_time_discretization(self) -> TimeDiscretization:
        return self._time_disc

    def get_matrix_translator(self) -> MatrixTranslator:
        return self._mat_trans

    def get_matrices(self) -> ParabolicMatrices:
        """Read-only access to the most recently assembled M, K, b."""
        return ParabolicMatrices(
            readonly(self._M), readonly(self._K), readonly(self._b)
        )

    def is_linear(self) -> bool:
        """True if a single linear solve completes the time step."""
        return self._time_disc.is_linear_time_disc() or self._ode.is_linear()

    def _assemble_matrices(self, x_new: NDArray) -> None:
        """Evaluate M, K, b at x_curr(x_new) into the owned buffers."""
        self._check_sizes(x_new)
        t = self._time_disc.get_current_time()
        x_curr = self._current_x(x_new)

        logger.debug("Assembling M, K, b at t=%g", t)
        self._ode.assemble(t, x_curr, self._M, self._K, self._b)
        self._check_buffer("M", self._M, 2)
        self._check_buffer("K", self._K, 2)
        self._check_buffer("b", self._b, 1)

    def _current_x(self, x_new: NDArray) -> NDArray:
        x_curr = self._time_disc.get_current_x(x_new)
        if np.shape(x_curr) != (self._size,):
            self._fail(
                MatrixSizeMismatchError("x_curr", self._size, np.shape(x_curr))
            )
        return x_curr

    def _translate(self, operation: Callable[..., Any], *args: Any) -> Any:
        """Call a translator operation; size errors are logged like our own."""
        try:
            return operation(*args)
        except MatrixSizeMismatchError as error:
            self._fail(error)

    def _check_sizes(self, x_new: NDArray) -> None:
        reported = self._ode.get_matrix_size()
        if reported != self._size:
            self._fail(MatrixSizeMismatchError("ODE", self._size, reported))
        if np.shape(x_new) != (self._size,):
            self._fail(
                MatrixSizeMismatchError("x_new", self._size, np.shape(x_new))
            )

    def _check_buffer(self, what: str, buffer: Any, ndim: int) -> None:
        expected = (self._size,) * ndim
        if buffer.shape != expected:
            self._fail(MatrixSizeMismatchError(what, self._size, buffer.shape))

    def _fail(self, error: Exception) -> None:
        logger.error("%s: %s", type(self).__name__, error)
        raise error
