"""Nonlinear-solver adapters for time-discretized ODEs."""

from tdode.systems.base import (
    NonlinearSystemNewton,
    NonlinearSystemPicard,
    TimeDiscretizedODESystem,
)
from tdode.systems.newton import NewtonSystem
from tdode.systems.picard import PicardSystem
from tdode.systems.factory import create_time_discretized_ode_system

__all__ = [
    "NonlinearSystemNewton",
    "NonlinearSystemPicard",
    "TimeDiscretizedODESystem",
    "NewtonSystem",
    "PicardSystem",
    "create_time_discretized_ode_system",
]
