"""Tests for translator selection and system dispatch."""

import numpy as np
import pytest
import scipy.sparse

from tdode.algebra.sparse import SparseBackend
from tdode.core.errors import UnsupportedSchemeError
from tdode.core.tags import EquationKind, NonlinearSolverTag
from tdode.timedisc.base import TimeDiscretization
from tdode.timedisc.euler import BackwardEuler, ForwardEuler
from tdode.timedisc.bdf import BackwardDifferentiationFormula
from tdode.translators.factory import create_matrix_translator
from tdode.translators.general import GeneralMatrixTranslator
from tdode.translators.explicit import ExplicitMatrixTranslator
from tdode.systems.factory import create_time_discretized_ode_system
from tdode.systems.newton import NewtonSystem
from tdode.systems.picard import PicardSystem


class LinearODE:
    """Constant operators."""

    def __init__(self, M, K, b):
        self.M, self.K, self.b = M, K, b

    def assemble(self, t, x, M, K, b):
        for (i, j), v in np.ndenumerate(self.M):
            M[i, j] = v
        for (i, j), v in np.ndenumerate(self.K):
            K[i, j] = v
        b[:] = self.b

    def assemble_jacobian(self, t, x, dxdot_dx, dx_dx, jac):
        for (i, j), v in np.ndenumerate(self.M * dxdot_dx + self.K * dx_dx):
            jac[i, j] = v

    def get_matrix_size(self):
        return self.b.shape[0]

    def is_linear(self):
        return True


class ExplicitLeapfrogLike(TimeDiscretization):
    """An explicit scheme unrelated to ForwardEuler by type."""

    def __init__(self):
        super().__init__()
        self._x = None

    def _store_initial_state(self, x0):
        self._x = x0

    def _push_state(self, x):
        self._x = x

    def get_current_x_weight(self):
        return 2.0 / self.get_current_time_increment()

    def get_weighted_old_x(self):
        return 2.0 * self._x / self.get_current_time_increment()

    def get_current_x(self, x_new):
        return self._x

    def get_x_old(self):
        return self._x

    def is_explicit(self):
        return True


class ImplicitForwardEulerSubclass(ForwardEuler):
    """Inherits from ForwardEuler but reports itself as implicit."""

    def is_explicit(self):
        return False


class ExplicitWithoutOldState(BackwardEuler):
    def is_explicit(self):
        return True

    get_x_old = None


class NoCapabilityQuery:
    def get_current_x_weight(self):
        return 1.0


@pytest.mark.parametrize(
    "time_disc, expected",
    [
        (BackwardEuler(), GeneralMatrixTranslator),
        (BackwardDifferentiationFormula(3), GeneralMatrixTranslator),
        (ForwardEuler(), ExplicitMatrixTranslator),
        (ExplicitLeapfrogLike(), ExplicitMatrixTranslator),
        (ImplicitForwardEulerSubclass(), GeneralMatrixTranslator),
    ],
)
def test_translator_selected_by_capability(time_disc, expected):
    """Selection follows is_explicit(), not the scheme's type."""
    translator = create_matrix_translator(time_disc)
    assert type(translator) is expected
    assert translator.time_discretization is time_disc


def test_new_explicit_scheme_uses_explicit_formulas():
    td = ExplicitLeapfrogLike()
    td.set_initial_state(0.0, np.array([1.0, 1.0]))
    td.next_timestep(0.5, 0.5)
    translator = create_matrix_translator(td)

    M, K, b = np.eye(2), np.diag([1.0, 3.0]), np.zeros(2)
    np.testing.assert_allclose(translator.get_A(M, K), 4.0 * np.eye(2))
    np.testing.assert_allclose(translator.get_rhs(M, K, b), [3.0, 1.0])


def test_scheme_without_capability_query_rejected():
    with pytest.raises(UnsupportedSchemeError):
        create_matrix_translator(NoCapabilityQuery())


def test_explicit_scheme_without_old_state_rejected():
    with pytest.raises(UnsupportedSchemeError):
        create_matrix_translator(ExplicitWithoutOldState())


def test_unknown_equation_kind_rejected():
    with pytest.raises(UnsupportedSchemeError):
        create_matrix_translator(BackwardEuler(), equation="hyperbolic")


@pytest.mark.parametrize(
    "solver, expected",
    [
        (NonlinearSolverTag.NEWTON, NewtonSystem),
        (NonlinearSolverTag.PICARD, PicardSystem),
    ],
)
def test_system_dispatch(solver, expected):
    td = BackwardEuler()
    ode = LinearODE(np.eye(2), np.eye(2), np.ones(2))
    system = create_time_discretized_ode_system(
        ode, td, create_matrix_translator(td), solver=solver
    )
    assert type(system) is expected
    assert system.solver_tag is solver
    assert system.equation is EquationKind.PARABOLIC


def test_default_solver_is_newton():
    td = BackwardEuler()
    ode = LinearODE(np.eye(2), np.eye(2), np.ones(2))
    system = create_time_discretized_ode_system(ode, td, create_matrix_translator(td))
    assert isinstance(system, NewtonSystem)


@pytest.mark.parametrize(
    "solver, equation",
    [
        ("anderson", EquationKind.PARABOLIC),
        (NonlinearSolverTag.NEWTON, "hyperbolic"),
    ],
)
def test_unsupported_system_combination(solver, equation):
    td = BackwardEuler()
    ode = LinearODE(np.eye(2), np.eye(2), np.ones(2))
    with pytest.raises(UnsupportedSchemeError):
        create_time_discretized_ode_system(
            ode, td, create_matrix_translator(td), solver=solver, equation=equation
        )


def test_system_with_sparse_backend():
    td = BackwardEuler()
    td.set_initial_state(0.0, np.zeros(2))
    td.next_timestep(1.0, 1.0)
    ode = LinearODE(np.eye(2), np.array([[2.0, -1.0], [-1.0, 2.0]]), np.ones(2))
    system = create_time_discretized_ode_system(
        ode,
        td,
        create_matrix_translator(td),
        solver=NonlinearSolverTag.PICARD,
        backend=SparseBackend(),
    )
    system.assemble_matrices_picard(np.zeros(2))

    A = system.get_A()
    assert scipy.sparse.issparse(A)
    np.testing.assert_allclose(A.toarray(), [[3.0, -1.0], [-1.0, 3.0]])
    np.testing.assert_allclose(system.get_rhs(), [1.0, 1.0])
