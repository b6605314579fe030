"""Selection tags for equation kinds and nonlinear solver strategies."""

from enum import Enum, auto


class NonlinearSolverTag(Enum):
    """Nonlinear iteration strategy a system is built for."""
    NEWTON = auto()   # residual + Jacobian
    PICARD = auto()   # fixed-point on the linearized system A x = rhs


class EquationKind(Enum):
    """Physical equation family of the discretized ODE."""
    PARABOLIC = auto()  # M x' + K x = b
