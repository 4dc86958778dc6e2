"""Copier: copy values between records of different types by property name.

Usage:
    copier = Copier()

    # Copy into an existing record
    copier.copy_into(customer, customer_dto)

    # Write None values through instead of skipping them
    copier.copy_into(customer, customer_dto, strict=True)

    # Construct the destination, converting nested DTOs into domain records
    customer = copier.copy_to(Customer, customer_dto, subs={Address: AddressDTO})
"""

from __future__ import annotations

import contextlib
import logging
import threading
from collections.abc import Mapping
from typing import Any, TypeVar

from structcopy.config import CopierSettings
from structcopy.core.diagnostics import (
    CollectingSink,
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    LoggingSink,
    RaisingSink,
)
from structcopy.core.errors import AccessFailureError, InvalidArgumentError, ShapeMismatchError
from structcopy.core.substitution import SubstitutionTable
from structcopy.core.types import SubsLike
from structcopy.engine.accessors import PropertyAccessor
from structcopy.engine.collection import CollectionCopier
from structcopy.engine.transfer import ValueTransferPolicy
from structcopy.introspection import AccessorIntrospector, FieldIntrospector, Introspector

T = TypeVar("T")

logger = logging.getLogger(__name__)

# Shared by every copier with serialize_calls enabled
_SERIAL_LOCK = threading.RLock()


def _introspector_for(settings: CopierSettings) -> Introspector:
    if settings.naming == "accessors":
        return AccessorIntrospector()
    return FieldIntrospector()


def _sink_for(settings: CopierSettings) -> DiagnosticSink:
    if settings.diagnostics == "collect":
        return CollectingSink()
    if settings.diagnostics == "raise":
        return RaisingSink()
    return LoggingSink(settings.log_level)


class Copier:
    """Copy engine binding an introspector, a diagnostic sink and settings.

    The working set of destination writers lives on the call stack, so one
    copier may serve several threads at once. Set `serialize_calls` to restore
    the process-wide lock of earlier designs.

    Args:
        settings: Copier configuration (loaded from the environment if None).
        introspector: Reflection back end (chosen by `settings.naming` if None).
        sink: Receiver of property-level diagnostics (by `settings.diagnostics`
            if None).
    """

    def __init__(
        self,
        settings: CopierSettings | None = None,
        introspector: Introspector | None = None,
        sink: DiagnosticSink | None = None,
    ) -> None:
        self.settings = settings or CopierSettings()
        self.introspector = introspector or _introspector_for(self.settings)
        self.sink = sink or _sink_for(self.settings)
        self._collections = CollectionCopier(self)
        self._transfer = ValueTransferPolicy(self, self._collections)
        self._accessor = PropertyAccessor(self)

    # Public surface

    def copy_into(
        self,
        dst: Any,
        src: Any,
        *,
        strict: bool | None = None,
        subs: SubsLike = None,
    ) -> None:
        """Copy every matching property of `src` into `dst`.

        Args:
            dst: Destination record (or mutable collection).
            src: Source record (or collection).
            strict: Write None source values through. Defaults to settings.
            subs: Destination type -> source type entries authorizing nested copies.

        Raises:
            InvalidArgumentError: If `dst` or `src` is None, or `subs` is malformed.
            ShapeMismatchError: If only one side is a collection.
            AccessFailureError: If reading a source property raised.
            ConstructionFailedError: If a nested destination cannot be created.
        """
        table = SubstitutionTable.of(subs)
        with self._serialized():
            logger.debug("copy_into %s <- %s", type(dst).__qualname__, type(src).__qualname__)
            self._copy(dst, src, strict=self._strict(strict), subs=table)

    def copy_to(
        self,
        dst_type: type[T],
        src: Any,
        *,
        strict: bool | None = None,
        subs: SubsLike = None,
    ) -> T:
        """Construct a `dst_type` and copy `src` into it.

        Returns:
            The new, populated destination.

        Raises:
            InvalidArgumentError: If `dst_type` or `src` is None.
            ConstructionFailedError: If `dst_type` cannot be zero-initialized.
        """
        if dst_type is None or not isinstance(dst_type, type):
            raise InvalidArgumentError(f"No destination type specified, got {dst_type!r}")
        table = SubstitutionTable.of(subs)
        with self._serialized():
            logger.debug("copy_to %s <- %s", dst_type.__qualname__, type(src).__qualname__)
            return self.construct_and_copy(dst_type, src, strict=self._strict(strict), subs=table)

    def find_and_put(self, obj: Any, cls: type, field_name: str, value: Any) -> None:
        """Write one property by field name. See `PropertyAccessor.find_and_put`."""
        self._accessor.find_and_put(obj, cls, field_name, value)

    def find_and_put_many(self, obj: Any, values: Mapping[str, Any]) -> None:
        """Write several properties by field name, reporting failures as diagnostics."""
        self._accessor.find_and_put_many(obj, values)

    def find(self, obj: Any, field_name: str) -> Any:
        """Read one property by field name, None if absent."""
        return self._accessor.find(obj, field_name)

    # Engine hooks used by the transfer policy, collection copier and accessor

    def emit(self, diagnostic: Diagnostic) -> None:
        """Deliver a property-level diagnostic to the configured sink."""
        self.sink.emit(diagnostic)

    def report(self, kind: DiagnosticKind, message: str, property_name: str | None = None) -> None:
        """Build and emit a diagnostic."""
        self.emit(Diagnostic(kind, message, property_name))

    def construct_and_copy(
        self, dst_type: type[T], src: Any, *, strict: bool, subs: SubstitutionTable
    ) -> T:
        """Zero-initialize a `dst_type` and copy `src` into it.

        Unlike `copy_to`, takes a ready table and an explicit null policy and
        does not take the serializing lock. Used for nested records.

        Raises:
            InvalidArgumentError: If `src` is None.
            ConstructionFailedError: If `dst_type` cannot be zero-initialized.
        """
        if src is None:
            raise InvalidArgumentError("No origin object specified")
        dst = self.introspector.construct(dst_type)
        self._copy(dst, src, strict=strict, subs=subs)
        return dst

    # Internals

    def _strict(self, strict: bool | None) -> bool:
        return self.settings.strict if strict is None else strict

    def _serialized(self) -> contextlib.AbstractContextManager[Any]:
        if self.settings.serialize_calls:
            return _SERIAL_LOCK
        return contextlib.nullcontext()

    def _copy(self, dst: Any, src: Any, *, strict: bool, subs: SubstitutionTable) -> None:
        if dst is None:
            raise InvalidArgumentError("No destination object specified")
        if src is None:
            raise InvalidArgumentError("No origin object specified")

        dst_shape = self.introspector.shape_of(dst)
        src_shape = self.introspector.shape_of(src)
        if dst_shape is not None or src_shape is not None:
            if dst_shape is None or src_shape is None:
                raise ShapeMismatchError(
                    f"Cannot copy a {type(src).__name__} into a {type(dst).__name__}: "
                    f"exactly one side is a collection"
                )
            self._collections.copy_collection(dst, src, subs)
            return

        working_set = self.introspector.writers(self.introspector.type_of(dst))
        for reader in self.introspector.readers(src):
            try:
                value = reader.read(src)
            except Exception as e:
                raise AccessFailureError(
                    f"Cannot read {reader.name!r} of {type(src).__qualname__}: {e}",
                    property_name=reader.canonical_name,
                ) from e
            if value is None and not strict:
                continue
            self._transfer.transfer(reader, value, dst, working_set, subs)


# Process-wide default instance
_default_copier: Copier | None = None
_default_lock = threading.Lock()


def get_default_copier() -> Copier:
    """Access the process-wide copier, creating it from the environment on first use."""
    global _default_copier
    if _default_copier is None:
        with _default_lock:
            if _default_copier is None:
                _default_copier = Copier()
    return _default_copier


def set_default_copier(copier: Copier | None) -> None:
    """Replace the process-wide copier. None resets it to a fresh default."""
    global _default_copier
    with _default_lock:
        _default_copier = copier


def copy_into(dst: Any, src: Any, *, strict: bool | None = None, subs: SubsLike = None) -> None:
    """Copy `src` into `dst` with the default copier."""
    get_default_copier().copy_into(dst, src, strict=strict, subs=subs)


def copy_to(dst_type: type[T], src: Any, *, strict: bool | None = None, subs: SubsLike = None) -> T:
    """Construct a `dst_type` from `src` with the default copier."""
    return get_default_copier().copy_to(dst_type, src, strict=strict, subs=subs)


def find_and_put(obj: Any, cls: type, field_name: str, value: Any) -> None:
    """Write one property by field name with the default copier."""
    get_default_copier().find_and_put(obj, cls, field_name, value)


def find_and_put_many(obj: Any, values: Mapping[str, Any]) -> None:
    """Write several properties by field name with the default copier."""
    get_default_copier().find_and_put_many(obj, values)


def find(obj: Any, field_name: str) -> Any:
    """Read one property by field name with the default copier."""
    return get_default_copier().find(obj, field_name)
