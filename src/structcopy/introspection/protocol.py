"""Introspection protocol for swappable reflection back ends.

The copy engine never touches attributes itself. Everything it knows about a
record comes through an Introspector:
- FieldIntrospector: dataclasses, Pydantic models, annotated classes (default)
- AccessorIntrospector: bean-style get/is/set methods

Usage:
    copier = Copier(introspector=AccessorIntrospector())
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from structcopy.core.property import CollectionShape, Property

T = TypeVar("T")


@runtime_checkable
class Introspector(Protocol):
    """Abstract reflection interface. Implementations decide what a property is."""

    def type_of(self, value: Any) -> type:
        """Runtime type of a value, stable for the duration of a call."""
        ...

    def construct(self, cls: type[T]) -> T:
        """Create a zero-initialized instance of `cls`.

        Raises:
            InvalidArgumentError: If `cls` is None or not a class.
            ConstructionFailedError: If no instance can be created.
        """
        ...

    def readers(self, value: Any) -> list[Property]:
        """Readable properties of a value, in declaration order."""
        ...

    def writers(self, cls: type) -> list[Property]:
        """Writable properties of a type, in declaration order."""
        ...

    def canonical_names(self, field_name: str) -> tuple[str, ...]:
        """Canonical names a plain field name may appear under, most likely first."""
        ...

    def parent(self, cls: type) -> type | None:
        """Immediate parent type, or None when `cls` derives directly from object."""
        ...

    def shape_of(self, value: Any) -> CollectionShape | None:
        """Collection shape of a value or class, None for non-collections."""
        ...
