"""Diagnostic models for non-terminal, property-level failures."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from structcopy.core.errors import (
    AccessFailureError,
    CopyError,
    PropertyNotFoundError,
    TypeMismatchError,
)


class DiagnosticKind(Enum):
    """Category of a property-level failure."""

    TYPE_MISMATCH = auto()
    """Declared types differ and no substitution authorizes a nested copy."""

    ACCESS_FAILURE = auto()
    """A property read or write raised."""

    PROPERTY_NOT_FOUND = auto()
    """A named property does not exist on the target."""

    @property
    def error_type(self) -> type[CopyError]:
        """Exception class raised when this kind of diagnostic becomes terminal."""
        return _ERROR_TYPES[self]


_ERROR_TYPES: dict[DiagnosticKind, type[CopyError]] = {
    DiagnosticKind.TYPE_MISMATCH: TypeMismatchError,
    DiagnosticKind.ACCESS_FAILURE: AccessFailureError,
    DiagnosticKind.PROPERTY_NOT_FOUND: PropertyNotFoundError,
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A property-level failure that did not abort the call.

    Attributes:
        kind: Failure category.
        message: Human-readable description.
        property_name: Canonical name of the offending property, if known.
    """

    kind: DiagnosticKind
    message: str
    property_name: str | None = None

    @classmethod
    def from_error(cls, error: CopyError, property_name: str | None = None) -> Diagnostic:
        """Demote a property-level exception to a diagnostic.

        Raises:
            TypeError: If the error has no diagnostic counterpart (terminal kinds).
        """
        for kind, error_type in _ERROR_TYPES.items():
            if isinstance(error, error_type):
                return cls(kind, str(error), property_name or error.property_name)
        raise TypeError(f"{type(error).__name__} is terminal and has no diagnostic kind")

    def to_error(self) -> CopyError:
        """Build the exception matching this diagnostic."""
        return self.kind.error_type(self.message, property_name=self.property_name)

    def __str__(self) -> str:
        where = f" [{self.property_name}]" if self.property_name else ""
        return f"{self.kind.name}{where}: {self.message}"
