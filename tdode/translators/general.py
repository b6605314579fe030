"""Translator for schemes that evaluate K at the new state."""

from typing import Any
from numpy.typing import NDArray

from tdode.translators.base import (
    MatrixTranslator,
    TranslatorKind,
    _check_matrices,
    _check_operators,
    _check_vector,
)


class GeneralMatrixTranslator(MatrixTranslator):
    """
    Linear system for implicit schemes:
        A = α M + K
        rhs = b + M x_w
    """

    kind = TranslatorKind.GENERAL

    def get_A(self, M: Any, K: Any) -> Any:
        _check_matrices(M, K)
        dxdot_dx = self._time_disc.get_current_x_weight()
        return M * dxdot_dx + K

    def get_rhs(self, M: Any, K: Any, b: NDArray) -> NDArray:
        n = _check_operators(M, K, b)
        weighted_old_x = self._time_disc.get_weighted_old_x()
        _check_vector("weighted_old_x", weighted_old_x, n)
        return b + M @ weighted_old_x
