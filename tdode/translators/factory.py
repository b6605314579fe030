"""Translator selection."""

import logging

from tdode.core.errors import UnsupportedSchemeError
from tdode.core.tags import EquationKind
from tdode.timedisc.base import TimeDiscretization
from tdode.translators.base import MatrixTranslator
from tdode.translators.explicit import ExplicitMatrixTranslator
from tdode.translators.general import GeneralMatrixTranslator

logger = logging.getLogger(__name__)


def create_matrix_translator(
    time_disc: TimeDiscretization,
    equation: EquationKind = EquationKind.PARABOLIC,
) -> MatrixTranslator:
    """
    Pick the translator matching the capabilities of `time_disc`.

    The decision is made once; the returned translator stays bound to
    `time_disc`. Schemes are asked whether they are explicit instead of
    being matched by type, so new explicit schemes need no registration.

    Args:
        time_disc: Time discretization the translator reads weights from
        equation: Equation kind of the ODE source

    Returns:
        Explicit translator for explicit schemes, general translator otherwise

    Raises:
        UnsupportedSchemeError: if the equation kind is unknown or the scheme
            does not provide what its capabilities require
    """
    if equation is not EquationKind.PARABOLIC:
        raise UnsupportedSchemeError(
            f"No matrix translator for equation kind {equation!r}"
        )

    is_explicit = getattr(time_disc, "is_explicit", None)
    if not callable(is_explicit):
        raise UnsupportedSchemeError(
            f"{type(time_disc).__name__} does not report whether it is explicit"
        )

    if is_explicit():
        if not callable(getattr(time_disc, "get_x_old", None)):
            raise UnsupportedSchemeError(
                f"{type(time_disc).__name__} is explicit but provides no "
                "get_x_old()"
            )
        translator: MatrixTranslator = ExplicitMatrixTranslator(time_disc)
    else:
        translator = GeneralMatrixTranslator(time_disc)

    logger.debug(
        "Selected %s for %s",
        type(translator).__name__,
        type(time_disc).__name__,
    )
    return translator
