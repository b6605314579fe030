"""Core abstractions shared by translators and systems."""

from tdode.core.tags import EquationKind, NonlinearSolverTag
from tdode.core.errors import (
    ConfigurationError,
    MatrixSizeMismatchError,
    UnsupportedSchemeError,
)
from tdode.core.ode import (
    FirstOrderImplicitODE,
    ParabolicEquation,
    ParabolicMatrices,
)

__all__ = [
    "EquationKind",
    "NonlinearSolverTag",
    "ConfigurationError",
    "MatrixSizeMismatchError",
    "UnsupportedSchemeError",
    "FirstOrderImplicitODE",
    "ParabolicEquation",
    "ParabolicMatrices",
]
