"""Translation of discretized operators into solver-facing systems."""

from tdode.translators.base import MatrixTranslator, TranslatorKind
from tdode.translators.general import GeneralMatrixTranslator
from tdode.translators.explicit import ExplicitMatrixTranslator
from tdode.translators.factory import create_matrix_translator

__all__ = [
    "MatrixTranslator",
    "TranslatorKind",
    "GeneralMatrixTranslator",
    "ExplicitMatrixTranslator",
    "create_matrix_translator",
]
