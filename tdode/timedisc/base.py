"""Time discretization interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional
import numpy as np
from numpy.typing import NDArray


class TimeDiscretization(ABC):
    """
    Approximates x' at the new time step from the new and old states.

    The scheme describes x' ≈ α x_new - x_w, where α is the current-x weight
    and x_w the weighted old x, and says at which state x_curr the spatial
    operators are evaluated. The driver advances the scheme between time
    steps via `set_initial_state`, `next_timestep` and `push_state`.
    """

    def __init__(self) -> None:
        self._t: Optional[float] = None
        self._t_old: Optional[float] = None
        self._delta_t: Optional[float] = None

    # Lifecycle, driven from outside

    def set_initial_state(self, t0: float, x0: NDArray) -> None:
        """Set the state at the start of the simulation."""
        self._t = t0
        self._t_old = t0
        self._store_initial_state(np.array(x0, dtype=float))

    def next_timestep(self, t: float, delta_t: float) -> None:
        """
        Prepare the step ending at time t.

        Args:
            t: Time at the end of the new step
            delta_t: Step size
        """
        if delta_t <= 0.0:
            raise ValueError(f"Time step must be positive, got {delta_t}")
        self._t_old = t - delta_t
        self._t = t
        self._delta_t = delta_t

    def push_state(self, t: float, x: NDArray) -> None:
        """Accept x as the solution at time t; it becomes the old state."""
        self._t_old = t
        self._push_state(np.array(x, dtype=float))

    def get_current_time_increment(self) -> float:
        if self._delta_t is None:
            raise RuntimeError("next_timestep() has not been called")
        return self._delta_t

    def get_current_time(self) -> float:
        """Time at which the operators are assembled."""
        if self._t is None:
            raise RuntimeError("set_initial_state() has not been called")
        return self._t

    # Weights

    @abstractmethod
    def get_current_x_weight(self) -> float:
        """α = d(x')/d(x_new)."""
        ...

    @abstractmethod
    def get_weighted_old_x(self) -> NDArray:
        """Old-state contribution x_w to x' ≈ α x_new - x_w."""
        ...

    @abstractmethod
    def get_current_x(self, x_new: NDArray) -> NDArray:
        """State x_curr at which the spatial operators are evaluated."""
        ...

    def get_dx_dx(self) -> float:
        """d(x_curr)/d(x_new)."""
        return 1.0

    def adjust_matrix(self, jac: Any) -> None:
        """Apply scheme-specific corrections to an assembled Jacobian in place."""

    def is_linear_time_disc(self) -> bool:
        """True if one linear solve always completes a time step."""
        return False

    def is_explicit(self) -> bool:
        """
        True if the scheme evaluates K at the old state.

        Explicit schemes must also provide `get_x_old()`.
        """
        return False

    # Storage hooks

    @abstractmethod
    def _store_initial_state(self, x0: NDArray) -> None:
        ...

    @abstractmethod
    def _push_state(self, x: NDArray) -> None:
        ...
