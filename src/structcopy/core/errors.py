"""Exception hierarchy for copy operations.

Terminal errors abort a call and reach the caller. Property-level failures are
reported as diagnostics instead, see `structcopy.core.diagnostics`.
"""

from __future__ import annotations


class CopyError(Exception):
    """Base class for every error raised by structcopy."""

    def __init__(self, message: str, property_name: str | None = None) -> None:
        super().__init__(message)
        self.property_name = property_name


class InvalidArgumentError(CopyError, ValueError):
    """Raised when a destination, source or destination type is missing or malformed."""

    pass


class ConstructionFailedError(CopyError, TypeError):
    """Raised when a destination type cannot be zero-initialized."""

    pass


class ShapeMismatchError(CopyError, TypeError):
    """Raised when a collection is paired with a non-collection at the top level."""

    pass


class TypeMismatchError(CopyError, TypeError):
    """Raised when a value cannot be written into a slot of its declared type."""

    pass


class AccessFailureError(CopyError, AttributeError):
    """Raised when reading or writing a property raised."""

    pass


class PropertyNotFoundError(CopyError, AttributeError):
    """Raised when a named property does not exist on the target type."""

    pass
