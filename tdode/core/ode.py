"""ODE source and equation-kind protocols."""

from typing import Any, NamedTuple, Protocol
import numpy as np
from numpy.typing import NDArray


class FirstOrderImplicitODE(Protocol):
    """
    Spatially discretized first-order system M(x) x' + K(x) x = b(x).

    Implementations overwrite the buffers they are handed; they never
    allocate new ones.
    """

    def assemble(
        self, t: float, x: NDArray, M: Any, K: Any, b: NDArray
    ) -> None:
        """
        Fill mass matrix, stiffness matrix and load vector in place.

        Args:
            t: Time at which the operators are evaluated
            x: State at which the operators are evaluated
            M: Mass matrix buffer (n, n)
            K: Stiffness matrix buffer (n, n)
            b: Load vector buffer (n,)
        """
        ...

    def assemble_jacobian(
        self,
        t: float,
        x: NDArray,
        dxdot_dx: float,
        dx_dx: float,
        jac: Any,
    ) -> None:
        """
        Fill the Jacobian of the residual w.r.t. the new state in place.

        Only needed for Newton iteration.

        Args:
            t: Time at which the Jacobian is evaluated
            x: State at which the Jacobian is evaluated
            dxdot_dx: d(x')/d(x_new), the current-x weight of the scheme
            dx_dx: d(x_curr)/d(x_new)
            jac: Jacobian buffer (n, n)
        """
        ...

    def get_matrix_size(self) -> int:
        """Number of degrees of freedom n."""
        ...

    def is_linear(self) -> bool:
        """True if M, K and b do not depend on x."""
        ...


class ParabolicMatrices(NamedTuple):
    """Most recently assembled operators of a parabolic equation."""

    M: Any
    K: Any
    b: NDArray


class ParabolicEquation(Protocol):
    """Read access to the operators of M x' + K x = b."""

    def get_matrices(self) -> ParabolicMatrices:
        ...


def readonly(a: Any) -> Any:
    """Return a non-writeable view of a dense array; sparse input is returned as is."""
    if isinstance(a, np.ndarray):
        view = a.view()
        view.flags.writeable = False
        return view
    return a
