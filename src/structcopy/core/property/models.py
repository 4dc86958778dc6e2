"""Property models: declared type descriptions and property handles.

A `Property` is one readable or writable slot of a record as seen by an
introspector. Handles are plain data; reading and writing goes through the
callables they carry.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class CollectionShape(Enum):
    """Shape of a homogeneous collection."""

    SEQUENCE = auto()  # positional identity, may repeat
    SET = auto()  # distinct elements, no position


@dataclass(frozen=True, slots=True)
class TypeInfo:
    """Description of a declared annotation.

    Attributes:
        declared: Declared type with Optional removed (`Any` when unknown).
        nullable: True if None is an accepted value.
        shape: Collection shape when the declared type is a sequence or set.
        element: Declared element type of a collection (None if undeclared).
    """

    declared: Any = Any
    nullable: bool = True
    shape: CollectionShape | None = None
    element: Any | None = None

    @property
    def is_known(self) -> bool:
        """Whether the declared type carries any information."""
        return self.declared is not Any


UNKNOWN = TypeInfo()


@dataclass(frozen=True, slots=True)
class Property:
    """A readable and/or writable slot on a record type.

    Attributes:
        name: Attribute or accessor name as it appears on the class.
        canonical_name: Name used to pair readers with writers.
        type_info: Declared type of the slot.
        getter: Reads the value from an instance (None if write-only).
        setter: Writes a value into an instance (None if read-only).
    """

    name: str
    canonical_name: str
    type_info: TypeInfo = UNKNOWN
    getter: Callable[[Any], Any] | None = None
    setter: Callable[[Any, Any], None] | None = None

    @property
    def declared_type(self) -> Any:
        return self.type_info.declared

    @property
    def element_type(self) -> Any | None:
        return self.type_info.element

    @property
    def readable(self) -> bool:
        return self.getter is not None

    @property
    def writable(self) -> bool:
        return self.setter is not None

    def read(self, obj: Any) -> Any:
        """Read this property from `obj`.

        Raises:
            AttributeError: If the property is not readable.
        """
        if self.getter is None:
            raise AttributeError(f"property {self.name!r} is not readable")
        return self.getter(obj)

    def write(self, obj: Any, value: Any) -> None:
        """Write `value` into this property of `obj`.

        Raises:
            AttributeError: If the property is not writable.
        """
        if self.setter is None:
            raise AttributeError(f"property {self.name!r} is not writable")
        self.setter(obj, value)
