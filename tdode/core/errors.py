"""Exceptions raised while wiring up time-discretized systems."""


class ConfigurationError(ValueError):
    """Collaborators were combined in a way that cannot work."""


class MatrixSizeMismatchError(ConfigurationError):
    """An operator or vector does not have the expected number of DOFs."""

    def __init__(self, what: str, expected: int, actual):
        self.what = what
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"{what} has dimension {actual}, expected {expected}"
        )


class UnsupportedSchemeError(ConfigurationError):
    """No translator or system variant exists for the requested combination."""
