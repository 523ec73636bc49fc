"""
Custom exceptions used by flatkv backends.

Keeping library-specific errors in one module gives users a predictable
import surface for catching and handling backend setup problems. Errors raised
by a storage substrate during a leaf operation are not wrapped here; they
reach the caller unchanged.
"""


class FlatKVError(Exception):
    """Base error type for all library-level exceptions."""


class BackendConfigurationError(FlatKVError):
    """
    Raised when backend selection or backend options are invalid.

    Examples include an unknown backend name, an unrecognized configuration
    key, or a blank address list.
    """


class BackendNotAvailableError(FlatKVError):
    """
    Raised when a backend is requested whose optional package is missing.
    """


class BackendSetupError(FlatKVError):
    """
    Raised when a backend cannot establish its initial client connection.

    Setup is attempted exactly once; callers decide whether to retry.
    """
