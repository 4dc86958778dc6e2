"""Single-property accessors: name matching without traversal.

Usage:
    copier.find_and_put(point, Point, "x", 5)
    copier.find_and_put_many(point, {"x": 5, "y": 7})
    copier.find(point, "x")  # 5
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from structcopy.core.diagnostics import Diagnostic, DiagnosticKind
from structcopy.core.errors import (
    AccessFailureError,
    InvalidArgumentError,
    PropertyNotFoundError,
    TypeMismatchError,
)
from structcopy.core.property import Property, is_assignable, match_writer

if TYPE_CHECKING:
    from structcopy.engine.copier import Copier

logger = logging.getLogger(__name__)

_MISSING = object()


def _is_data_attribute(obj: Any, name: str) -> bool:
    """Whether `name` is a public attribute readable without calling a method."""
    if name.startswith("_"):
        return False
    static = inspect.getattr_static(obj, name, _MISSING)
    if static is _MISSING:
        return False
    return isinstance(static, property) or not callable(static)


class PropertyAccessor:
    """Find and write single properties by field name.

    Args:
        copier: Owning copier (introspector and diagnostics).
    """

    def __init__(self, copier: Copier) -> None:
        self._copier = copier

    def _locate_writer(self, cls: type, field_name: str) -> Property | None:
        """First matching writer on `cls`, then on its parent type."""
        introspector = self._copier.introspector
        candidates = introspector.canonical_names(field_name)
        for owner in (cls, introspector.parent(cls)):
            if owner is None:
                continue
            writers = introspector.writers(owner)
            for candidate in candidates:
                writer = match_writer(candidate, writers)
                if writer is not None:
                    return writer
        return None

    def find_and_put(self, obj: Any, cls: type, field_name: str, value: Any) -> None:
        """Write `value` into the property of `obj` named `field_name`.

        Args:
            obj: Target record, an instance of `cls`.
            cls: Type whose writers are searched (then its parent type).
            field_name: Plain field name.
            value: Value to write.

        Raises:
            InvalidArgumentError: If `obj` is None or not an instance of `cls`.
            PropertyNotFoundError: If neither `cls` nor its parent has the writer.
            TypeMismatchError: If `value` does not fit the declared type.
            AccessFailureError: If the write raised.
        """
        if obj is None:
            raise InvalidArgumentError("No target object specified")
        if not isinstance(cls, type) or not isinstance(obj, cls):
            raise InvalidArgumentError(f"{obj!r} is not an instance of {cls!r}")

        writer = self._locate_writer(cls, field_name)
        if writer is None:
            raise PropertyNotFoundError(
                f"{field_name!r} not found on {cls.__qualname__} or its parent type",
                property_name=field_name,
            )
        if not is_assignable(value, writer.type_info):
            raise TypeMismatchError(
                f"{type(value).__qualname__} does not fit {writer.name!r} of {cls.__qualname__}",
                property_name=field_name,
            )
        try:
            writer.write(obj, value)
        except Exception as e:
            raise AccessFailureError(
                f"Cannot write {writer.name!r} of {cls.__qualname__}: {e}",
                property_name=field_name,
            ) from e

    def find_and_put_many(self, obj: Any, values: Mapping[str, Any]) -> None:
        """Write several properties of `obj`, reporting failures as diagnostics.

        Raises:
            InvalidArgumentError: If `obj` is None.
        """
        if obj is None:
            raise InvalidArgumentError("No target object specified")
        if not values:
            logger.debug("find_and_put_many called with no values")
            return
        cls = self._copier.introspector.type_of(obj)
        for field_name, value in values.items():
            try:
                self.find_and_put(obj, cls, field_name, value)
            except (PropertyNotFoundError, TypeMismatchError, AccessFailureError) as e:
                self._copier.emit(Diagnostic.from_error(e, field_name))

    def find(self, obj: Any, field_name: str) -> Any:
        """Current value of a property, or None if it cannot be found or read.

        Public data attributes are read directly; otherwise the matching reader
        is invoked.

        Raises:
            InvalidArgumentError: If `obj` is None.
        """
        if obj is None:
            raise InvalidArgumentError("No target object specified")
        try:
            if _is_data_attribute(obj, field_name):
                return getattr(obj, field_name)
            introspector = self._copier.introspector
            readers = introspector.readers(obj)
            for candidate in introspector.canonical_names(field_name):
                reader = match_writer(candidate, readers)
                if reader is not None:
                    return reader.read(obj)
        except Exception as e:
            self._copier.report(
                DiagnosticKind.ACCESS_FAILURE,
                f"Cannot read {field_name!r} of {type(obj).__qualname__}: {e}",
                field_name,
            )
            return None
        self._copier.report(
            DiagnosticKind.PROPERTY_NOT_FOUND,
            f"{field_name!r} not found on {type(obj).__qualname__}",
            field_name,
        )
        return None
