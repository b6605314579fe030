"""Time-stepping schemes."""

from tdode.timedisc.base import TimeDiscretization
from tdode.timedisc.euler import BackwardEuler, ForwardEuler
from tdode.timedisc.bdf import BackwardDifferentiationFormula

__all__ = [
    "TimeDiscretization",
    "BackwardEuler",
    "ForwardEuler",
    "BackwardDifferentiationFormula",
]
