"""Linear algebra backend abstractions."""

from tdode.algebra.protocols import LinearAlgebraBackend
from tdode.algebra.dense import DenseBackend
from tdode.algebra.sparse import SparseBackend
from tdode.algebra.factory import available_backends, get_backend

__all__ = [
    "LinearAlgebraBackend",
    "DenseBackend",
    "SparseBackend",
    "available_backends",
    "get_backend",
]
