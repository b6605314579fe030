"""System setup and the single construction entry point."""

import logging
from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Mapping, Optional

from tdode.algebra.factory import available_backends, get_backend
from tdode.core.errors import ConfigurationError
from tdode.core.ode import FirstOrderImplicitODE
from tdode.core.tags import EquationKind, NonlinearSolverTag
from tdode.systems.base import TimeDiscretizedODESystem
from tdode.systems.factory import create_time_discretized_ode_system
from tdode.timedisc.base import TimeDiscretization
from tdode.translators.factory import create_matrix_translator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemSetup:
    """How to build a time-discretized system."""

    equation: EquationKind = EquationKind.PARABOLIC
    nonlinear_solver: NonlinearSolverTag = NonlinearSolverTag.NEWTON
    backend: str = "dense"

    def __post_init__(self) -> None:
        object.__setattr__(self, "backend", str(self.backend).lower())
        if not isinstance(self.equation, EquationKind):
            raise ConfigurationError(f"Invalid equation kind {self.equation!r}")
        if not isinstance(self.nonlinear_solver, NonlinearSolverTag):
            raise ConfigurationError(
                f"Invalid nonlinear solver {self.nonlinear_solver!r}"
            )
        if self.backend not in available_backends():
            raise ConfigurationError(
                f"Unknown backend {self.backend!r}, expected one of "
                f"{available_backends()}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "SystemSetup":
        """
        Build a setup from plain values, e.g. parsed from a project file.

        Enum members may be given by name, case-insensitively:
            {"nonlinear_solver": "picard", "backend": "sparse"}
        """
        known = {f.name for f in fields(cls)}
        unknown = set(mapping) - known
        if unknown:
            raise ConfigurationError(
                f"Unknown setup keys {sorted(unknown)}, expected {sorted(known)}"
            )

        kwargs: dict[str, Any] = {}
        if "equation" in mapping:
            kwargs["equation"] = _to_enum(EquationKind, mapping["equation"])
        if "nonlinear_solver" in mapping:
            kwargs["nonlinear_solver"] = _to_enum(
                NonlinearSolverTag, mapping["nonlinear_solver"]
            )
        if "backend" in mapping:
            kwargs["backend"] = mapping["backend"]
        return cls(**kwargs)


def _to_enum(enum_cls: type[Enum], value: Any) -> Any:
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls[str(value).upper()]
    except KeyError:
        raise ConfigurationError(
            f"Invalid {enum_cls.__name__} {value!r}, expected one of "
            f"{[m.name.lower() for m in enum_cls]}"
        ) from None


def build_system(
    ode: FirstOrderImplicitODE,
    time_disc: TimeDiscretization,
    setup: Optional[SystemSetup] = None,
) -> TimeDiscretizedODESystem:
    """
    Select translator and system for `time_disc` and wire up `ode`.

    Args:
        ode: ODE source
        time_disc: Time-stepping scheme
        setup: Equation kind, solver strategy and backend (defaults if None)

    Returns:
        NewtonSystem or PicardSystem bound to a translator for `time_disc`
    """
    setup = setup or SystemSetup()

    mat_trans = create_matrix_translator(time_disc, setup.equation)
    system = create_time_discretized_ode_system(
        ode,
        time_disc,
        mat_trans,
        solver=setup.nonlinear_solver,
        equation=setup.equation,
        backend=get_backend(setup.backend),
    )
    logger.info(
        "Built %s (%s) with %d DOFs",
        type(system).__name__,
        type(mat_trans).__name__,
        system.matrix_size,
    )
    return system
