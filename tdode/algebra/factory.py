"""Backend lookup by name."""

from tdode.algebra.protocols import LinearAlgebraBackend
from tdode.algebra.dense import DenseBackend
from tdode.algebra.sparse import SparseBackend
from tdode.core.errors import ConfigurationError

_BACKENDS = {
    "dense": DenseBackend,
    "sparse": SparseBackend,
}


def available_backends() -> list[str]:
    return sorted(_BACKENDS)


def get_backend(name: str = "dense") -> LinearAlgebraBackend:
    """
    Create the backend registered under `name`.

    Raises:
        ConfigurationError: if no backend of that name exists
    """
    try:
        return _BACKENDS[name.lower()]()
    except KeyError:
        raise ConfigurationError(
            f"Unknown backend {name!r}, expected one of {available_backends()}"
        ) from None
