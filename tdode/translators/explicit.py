"""Translator for schemes that apply K to the old state."""

from typing import Any
from numpy.typing import NDArray

from tdode.translators.base import (
    MatrixTranslator,
    TranslatorKind,
    _check_matrices,
    _check_operators,
    _check_vector,
)


class ExplicitMatrixTranslator(MatrixTranslator):
    """
    Linear system for explicit schemes:
        A = α M
        rhs = b + M x_w - K x_old
    K never enters A; it only acts on the already known old state.
    """

    kind = TranslatorKind.EXPLICIT

    def get_A(self, M: Any, K: Any) -> Any:
        _check_matrices(M, K)
        dxdot_dx = self._time_disc.get_current_x_weight()
        return M * dxdot_dx

    def get_rhs(self, M: Any, K: Any, b: NDArray) -> NDArray:
        n = _check_operators(M, K, b)
        weighted_old_x = self._time_disc.get_weighted_old_x()
        x_old = self._time_disc.get_x_old()
        _check_vector("weighted_old_x", weighted_old_x, n)
        _check_vector("x_old", x_old, n)
        return b + M @ weighted_old_x - K @ x_old
