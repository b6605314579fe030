"""Backward differentiation formulas."""

from collections import deque
import numpy as np
from numpy.typing import NDArray

from tdode.timedisc.base import TimeDiscretization

# Row k-1 holds BDF-k coefficients c with
# x' ≈ (c[0] x_n - c[1] x_{n-1} - ... - c[k] x_{n-k}) / Δt
BDF_COEFFS = (
    (1.0, 1.0),
    (1.5, 2.0, -0.5),
    (11.0 / 6.0, 3.0, -1.5, 1.0 / 3.0),
    (25.0 / 12.0, 4.0, -3.0, 4.0 / 3.0, -0.25),
    (137.0 / 60.0, 5.0, -5.0, 10.0 / 3.0, -1.25, 0.2),
    (147.0 / 60.0, 6.0, -7.5, 20.0 / 3.0, -3.75, 1.2, -1.0 / 6.0),
)

MAX_ORDER = len(BDF_COEFFS)


class BackwardDifferentiationFormula(TimeDiscretization):
    """
    BDF of the given order with constant step size.

    Until enough states have been accepted the scheme starts up with the
    highest order the stored history allows.
    """

    def __init__(self, order: int) -> None:
        if not 1 <= order <= MAX_ORDER:
            raise ValueError(
                f"BDF order must be between 1 and {MAX_ORDER}, got {order}"
            )
        super().__init__()
        self._order = order
        # most recent state first
        self._xs_old: deque[NDArray] = deque(maxlen=order)

    @property
    def order(self) -> int:
        return self._order

    @property
    def effective_order(self) -> int:
        """Order actually used for the current step."""
        return min(self._order, len(self._xs_old))

    def _store_initial_state(self, x0: NDArray) -> None:
        self._xs_old.clear()
        self._xs_old.appendleft(x0)

    def _push_state(self, x: NDArray) -> None:
        self._xs_old.appendleft(x)

    def _coeffs(self) -> tuple[float, ...]:
        k = self.effective_order
        if k == 0:
            raise RuntimeError("set_initial_state() has not been called")
        return BDF_COEFFS[k - 1]

    def get_current_x_weight(self) -> float:
        return self._coeffs()[0] / self.get_current_time_increment()

    def get_weighted_old_x(self) -> NDArray:
        coeffs = self._coeffs()
        x_w = np.zeros_like(self._xs_old[0])
        for c, x in zip(coeffs[1:], self._xs_old):
            x_w += c * x
        return x_w / self.get_current_time_increment()

    def get_current_x(self, x_new: NDArray) -> NDArray:
        return x_new
