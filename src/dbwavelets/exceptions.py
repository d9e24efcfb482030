"""Exceptions."""


class ConfigurationError(Exception):
    """Raised when the requested wavelet setup is not supported."""


class LinearAlgebraError(Exception):
    """Raised when an eigenvector cannot be reliably extracted."""


class NumericalError(Exception):
    """Raised when a computation would produce non-finite values."""


class InternalConsistencyError(Exception):
    """Raised when cascade results and grid cells do not match up."""


class InvalidSavingFileError(Exception):
    """Raised when wrong file are given as save files."""
