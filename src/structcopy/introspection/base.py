"""Shared introspection behaviour: hint resolution and zero-initialized construction."""

from __future__ import annotations

import dataclasses
import inspect
import sys
from collections.abc import Mapping
from typing import Any, TypeVar, get_type_hints

from structcopy.core.errors import ConstructionFailedError, InvalidArgumentError
from structcopy.core.property import (
    CollectionShape,
    Property,
    TypeInfo,
    describe_type,
    runtime_class,
    shape_of_class,
    shape_of_value,
)

T = TypeVar("T")

_ZERO_SCALARS: dict[type, Any] = {
    bool: False,
    int: 0,
    float: 0.0,
    complex: 0j,
    str: "",
    bytes: b"",
}
_ZERO_CONTAINERS = (list, tuple, set, frozenset, dict)


def is_pydantic(cls: type) -> bool:
    """Check if class is a Pydantic model without importing pydantic.

    Args:
        cls: Class to check.

    Returns:
        True if class inherits from pydantic.BaseModel, False otherwise.
    """
    for base in getattr(cls, "__mro__", ()):
        if base.__module__.startswith("pydantic") and base.__name__ == "BaseModel":
            return True
    return False


def _evaluate(annotation: Any, globalns: dict[str, Any], localns: dict[str, Any] | None) -> Any:
    """Evaluate one string annotation, leaving it as a string if it cannot be resolved."""
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, globalns, localns)  # noqa: S307
    except Exception:
        return annotation


def resolve_hints(obj: Any) -> dict[str, Any]:
    """Resolve annotations of a class or function.

    When some forward reference cannot be resolved (typically a name imported
    only under `TYPE_CHECKING`), every annotation is evaluated on its own in the
    namespace of the class or function declaring it. Only the annotations that
    still fail stay as strings, which later describe as unknown types.
    """
    try:
        return get_type_hints(obj)
    except (NameError, TypeError, AttributeError):
        pass
    if isinstance(obj, type):
        hints: dict[str, Any] = {}
        for klass in reversed(obj.__mro__):
            module = sys.modules.get(klass.__module__)
            globalns = dict(vars(module)) if module is not None else {}
            localns = dict(vars(klass))
            for name, annotation in inspect.get_annotations(klass).items():
                hints[name] = _evaluate(annotation, globalns, localns)
        return hints
    globalns = getattr(inspect.unwrap(obj), "__globals__", {})
    return {
        name: _evaluate(annotation, globalns, None)
        for name, annotation in inspect.get_annotations(obj).items()
    }


def zero_value(info: TypeInfo) -> Any:
    """Zero value for a declared type: 0, "", False, empty containers, or None."""
    if info.nullable or not info.is_known:
        return None
    cls = runtime_class(info.declared)
    if cls is None:
        return None
    if cls in _ZERO_SCALARS:
        return _ZERO_SCALARS[cls]
    if cls in _ZERO_CONTAINERS:
        return cls()
    if info.shape is CollectionShape.SEQUENCE:
        return []
    if info.shape is CollectionShape.SET:
        return set()
    if issubclass(cls, Mapping):
        return {}
    return None


class BaseIntrospector:
    """Behaviour common to all built-in introspectors.

    Subclasses implement `properties(cls)`; readers and writers are filtered
    views of it.
    """

    def properties(self, cls: type) -> list[Property]:
        """All properties of `cls` in declaration order."""
        raise NotImplementedError

    def type_of(self, value: Any) -> type:
        return type(value)

    def readers(self, value: Any) -> list[Property]:
        return [p for p in self.properties(self.type_of(value)) if p.readable]

    def writers(self, cls: type) -> list[Property]:
        return [p for p in self.properties(cls) if p.writable]

    def canonical_names(self, field_name: str) -> tuple[str, ...]:
        return (field_name,)

    def parent(self, cls: type) -> type | None:
        bases = [base for base in cls.__bases__ if base is not object]
        return bases[0] if bases else None

    def shape_of(self, value: Any) -> CollectionShape | None:
        if isinstance(value, type):
            return shape_of_class(value)
        return shape_of_value(value)

    def construct(self, cls: type[T]) -> T:
        """Create a zero-initialized instance of `cls`.

        Tries a no-argument call first. Dataclasses and Pydantic models with
        required fields are then built with zero values for those fields
        (Pydantic via `model_construct`, skipping validation).

        Raises:
            InvalidArgumentError: If `cls` is None or not a class.
            ConstructionFailedError: If no instance can be created.
        """
        if cls is None or not isinstance(cls, type):
            raise InvalidArgumentError(f"No destination type specified, got {cls!r}")
        try:
            return cls()
        except Exception as e:
            error: Exception = e

        arguments = self._zero_arguments(cls)
        if arguments is not None:
            try:
                if is_pydantic(cls):
                    return cls.model_construct(**arguments)  # type: ignore[attr-defined]
                return cls(**arguments)
            except Exception as e:
                error = e
        raise ConstructionFailedError(
            f"Cannot zero-initialize {cls.__qualname__}: {error}"
        ) from error

    def _zero_arguments(self, cls: type) -> dict[str, Any] | None:
        """Zero values for the required constructor fields of a record class."""
        if dataclasses.is_dataclass(cls):
            hints = resolve_hints(cls)
            return {
                f.name: zero_value(describe_type(hints.get(f.name)))
                for f in dataclasses.fields(cls)
                if f.init
                and f.default is dataclasses.MISSING
                and f.default_factory is dataclasses.MISSING
            }
        if is_pydantic(cls):
            return {
                name: zero_value(describe_type(info.annotation))
                for name, info in cls.model_fields.items()  # type: ignore[attr-defined]
                if info.is_required()
            }
        return None
