"""Custom exceptions for algokit operations."""


class AlgokitError(Exception):
    """Base exception for all algokit errors."""


class PreconditionError(AlgokitError, ValueError):
    """
    Raised when an input violates a precondition at the API boundary.

    These are programming errors on the caller's side. They are raised before
    any computation starts, so no partial result is ever produced.
    """


class EmptyInputError(PreconditionError):
    """Raised when a non-empty collection is required but none was given."""


class InvalidProjectionError(PreconditionError, TypeError):
    """Raised when the item-to-position projection is missing or not callable."""


class InvalidPositionError(PreconditionError):
    """Raised when a value cannot be read as a finite (x, y) position."""
