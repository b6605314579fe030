"""Matrix translator interface for parabolic equations."""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Any
import numpy as np
from numpy.typing import NDArray

from tdode.core.errors import MatrixSizeMismatchError
from tdode.timedisc.base import TimeDiscretization


class TranslatorKind(Enum):
    """Which linearized system a translator builds."""
    GENERAL = auto()   # K evaluated at x_curr, solved for
    EXPLICIT = auto()  # K applied to x_old, moved to the rhs


class MatrixTranslator(ABC):
    """
    Turns the operators of M x' + K x = b into what a nonlinear solver needs.

    With x' ≈ α x_new - x_w from the time discretization:
        residual(x_new) = M (α x_new - x_w) + K x_curr - b
    The residual and the Jacobian passthrough do not depend on the kind of
    translator; only the linear system (A, rhs) does.
    """

    kind: TranslatorKind

    def __init__(self, time_disc: TimeDiscretization) -> None:
        self._time_disc = time_disc

    @property
    def time_discretization(self) -> TimeDiscretization:
        return self._time_disc

    @abstractmethod
    def get_A(self, M: Any, K: Any) -> Any:
        """System matrix of the linear solve for x_new."""
        ...

    @abstractmethod
    def get_rhs(self, M: Any, K: Any, b: NDArray) -> NDArray:
        """Right-hand side of the linear solve for x_new."""
        ...

    def get_residual(
        self, M: Any, K: Any, b: NDArray, x_new: NDArray
    ) -> NDArray:
        """Residual of the time-discretized equation at x_new."""
        n = _check_operators(M, K, b)
        _check_vector("x_new", x_new, n)

        alpha = self._time_disc.get_current_x_weight()
        x_curr = self._time_disc.get_current_x(x_new)
        weighted_old_x = self._time_disc.get_weighted_old_x()
        _check_vector("x_curr", x_curr, n)
        _check_vector("weighted_old_x", weighted_old_x, n)

        x_dot = alpha * x_new - weighted_old_x

        return M @ x_dot + K @ x_curr - b

    def get_jacobian(self, jac: Any) -> Any:
        """
        Jacobian of the residual.

        The ODE source and the time discretization deliver the complete
        Jacobian, so parabolic equations pass it through unchanged.
        """
        return jac


def _check_matrices(M: Any, K: Any) -> int:
    """Validate that M and K are square and of equal size; return it."""
    n = M.shape[0]
    if M.shape != (n, n):
        raise MatrixSizeMismatchError("M", n, M.shape)
    if K.shape != (n, n):
        raise MatrixSizeMismatchError("K", n, K.shape)
    return n


def _check_operators(M: Any, K: Any, b: NDArray) -> int:
    n = _check_matrices(M, K)
    _check_vector("b", b, n)
    return n


def _check_vector(what: str, v: NDArray, n: int) -> None:
    if np.shape(v) != (n,):
        raise MatrixSizeMismatchError(what, n, np.shape(v))
