"""
tdode: time-discretized ODE systems for nonlinear solvers.

Translates the operators of a spatially discretized first-order system
M x' + K x = b into what a nonlinear solver needs:
- Residual and Jacobian for Newton iteration
- Linear system A x = rhs for Picard iteration
- Translator selection for implicit and explicit time-stepping schemes
"""

__version__ = "0.1.0"

from tdode.core.tags import EquationKind, NonlinearSolverTag
from tdode.core.errors import (
    ConfigurationError,
    MatrixSizeMismatchError,
    UnsupportedSchemeError,
)
from tdode.translators.factory import create_matrix_translator
from tdode.systems.newton import NewtonSystem
from tdode.systems.picard import PicardSystem
from tdode.systems.factory import create_time_discretized_ode_system
from tdode.config import SystemSetup, build_system

__all__ = [
    "EquationKind",
    "NonlinearSolverTag",
    "ConfigurationError",
    "MatrixSizeMismatchError",
    "UnsupportedSchemeError",
    "create_matrix_translator",
    "NewtonSystem",
    "PicardSystem",
    "create_time_discretized_ode_system",
    "SystemSetup",
    "build_system",
]
