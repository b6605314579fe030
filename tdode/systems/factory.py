"""System factory and dispatch logic."""

from typing import Optional

from tdode.algebra.protocols import LinearAlgebraBackend
from tdode.core.errors import UnsupportedSchemeError
from tdode.core.ode import FirstOrderImplicitODE
from tdode.core.tags import EquationKind, NonlinearSolverTag
from tdode.systems.base import TimeDiscretizedODESystem
from tdode.systems.newton import NewtonSystem
from tdode.systems.picard import PicardSystem
from tdode.timedisc.base import TimeDiscretization
from tdode.translators.base import MatrixTranslator

_SYSTEMS: dict[
    tuple[EquationKind, NonlinearSolverTag], type[TimeDiscretizedODESystem]
] = {
    (EquationKind.PARABOLIC, NonlinearSolverTag.NEWTON): NewtonSystem,
    (EquationKind.PARABOLIC, NonlinearSolverTag.PICARD): PicardSystem,
}


def create_time_discretized_ode_system(
    ode: FirstOrderImplicitODE,
    time_disc: TimeDiscretization,
    mat_trans: MatrixTranslator,
    solver: NonlinearSolverTag = NonlinearSolverTag.NEWTON,
    equation: EquationKind = EquationKind.PARABOLIC,
    backend: Optional[LinearAlgebraBackend] = None,
) -> TimeDiscretizedODESystem:
    """
    Build the system matching (equation kind, nonlinear solver).

    Args:
        ode: ODE source
        time_disc: Time-stepping scheme
        mat_trans: Translator created for `time_disc`
        solver: Nonlinear iteration strategy
        equation: Equation kind of `ode`
        backend: Operator storage (dense by default)

    Returns:
        NewtonSystem or PicardSystem

    Raises:
        UnsupportedSchemeError: for combinations without a system class
    """
    try:
        system_cls = _SYSTEMS[(equation, solver)]
    except KeyError:
        raise UnsupportedSchemeError(
            f"No time-discretized system for {equation!r} with {solver!r}"
        ) from None

    return system_cls(ode, time_disc, mat_trans, backend)
