"""One-step Euler schemes."""

from typing import Optional
from numpy.typing import NDArray

from tdode.timedisc.base import TimeDiscretization


class _SingleStateScheme(TimeDiscretization):
    """Keeps only the most recently accepted state."""

    def __init__(self) -> None:
        super().__init__()
        self._x_old: Optional[NDArray] = None

    def _store_initial_state(self, x0: NDArray) -> None:
        self._x_old = x0

    def _push_state(self, x: NDArray) -> None:
        self._x_old = x

    def get_x_old(self) -> NDArray:
        """State accepted at the end of the previous time step."""
        if self._x_old is None:
            raise RuntimeError("set_initial_state() has not been called")
        return self._x_old

    def get_current_x_weight(self) -> float:
        return 1.0 / self.get_current_time_increment()

    def get_weighted_old_x(self) -> NDArray:
        return self.get_x_old() / self.get_current_time_increment()


class BackwardEuler(_SingleStateScheme):
    """Implicit Euler: x' ≈ (x_new - x_old) / Δt, operators at x_new."""

    def get_current_x(self, x_new: NDArray) -> NDArray:
        return x_new


class ForwardEuler(_SingleStateScheme):
    """
    Explicit Euler: x' ≈ (x_new - x_old) / Δt, operators at x_old and t_old.

    K is applied to the old state, so the linear system only involves M
    and a single solve completes the step.
    """

    def get_current_time(self) -> float:
        if self._t_old is None:
            raise RuntimeError("set_initial_state() has not been called")
        return self._t_old

    def get_current_x(self, x_new: NDArray) -> NDArray:
        return self.get_x_old()

    def get_dx_dx(self) -> float:
        return 0.0

    def is_linear_time_disc(self) -> bool:
        return True

    def is_explicit(self) -> bool:
        return True
