"""Pure functions over properties: type descriptions, compatibility and name matching.

These are stateless helpers shared by introspectors and the copy engine.
"""

from __future__ import annotations

import types
from collections.abc import Iterable, Sequence
from collections.abc import Set as AbstractSet
from typing import Annotated, Any, ForwardRef, TypeVar, Union, get_args, get_origin

from structcopy.core.property.models import UNKNOWN, CollectionShape, Property, TypeInfo

_NONE_TYPE = type(None)
_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def _is_union(origin: Any) -> bool:
    return origin is Union or origin is types.UnionType


def shape_of_class(cls: Any) -> CollectionShape | None:
    """Classify a runtime class as a sequence, a set, or neither.

    Strings and byte buffers are sequences to Python but never collections here.
    """
    if not isinstance(cls, type) or issubclass(cls, _TEXT_TYPES):
        return None
    if issubclass(cls, AbstractSet):
        return CollectionShape.SET
    if issubclass(cls, Sequence):
        return CollectionShape.SEQUENCE
    return None


def shape_of_value(value: Any) -> CollectionShape | None:
    """Classify a value by its runtime class."""
    return shape_of_class(type(value))


def runtime_class(annotation: Any) -> type | None:
    """Get the class `isinstance` can check for an annotation, if any."""
    if annotation is None or annotation is Any:
        return None
    origin = get_origin(annotation)
    candidate = origin if origin is not None else annotation
    return candidate if isinstance(candidate, type) else None


def describe_type(annotation: Any) -> TypeInfo:
    """Describe a declared annotation.

    Optional members are unwrapped into `nullable`; homogeneous collections
    report their shape and element type.

    Args:
        annotation: Resolved annotation, or None/`Any` when undeclared.

    Returns:
        TypeInfo for the annotation. Unresolvable annotations (strings,
        forward references, type variables) describe as unknown.
    """
    if annotation is None or annotation is Any:
        return UNKNOWN
    if isinstance(annotation, (str, ForwardRef, TypeVar)):
        return UNKNOWN
    if annotation is _NONE_TYPE:
        return TypeInfo(declared=_NONE_TYPE, nullable=True)

    origin = get_origin(annotation)
    if origin is Annotated:
        return describe_type(get_args(annotation)[0])

    nullable = False
    if _is_union(origin):
        args = get_args(annotation)
        members = tuple(arg for arg in args if arg is not _NONE_TYPE)
        nullable = len(members) != len(args)
        if len(members) != 1:
            return TypeInfo(declared=annotation, nullable=nullable)
        inner = describe_type(members[0])
        return TypeInfo(
            declared=inner.declared,
            nullable=nullable or inner.nullable,
            shape=inner.shape,
            element=inner.element,
        )

    shape = shape_of_class(origin if origin is not None else annotation)
    if shape is None:
        return TypeInfo(declared=annotation, nullable=nullable)

    args = get_args(annotation)
    if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
        # Fixed-length tuples are not homogeneous collections
        return TypeInfo(declared=annotation, nullable=nullable)
    element = describe_type(args[0]).declared if args else Any
    return TypeInfo(
        declared=annotation,
        nullable=nullable,
        shape=shape,
        element=None if element is Any else element,
    )


def _elements_match(value: Iterable[Any], element: Any, source_element: Any | None) -> bool:
    element_class = runtime_class(element)
    if element_class is None:
        return True
    source_class = runtime_class(source_element)
    if source_class is not None:
        return issubclass(source_class, element_class)
    return all(item is None or isinstance(item, element_class) for item in value)


def is_assignable(value: Any, target: TypeInfo, source_element: Any | None = None) -> bool:
    """Check whether `value` can be written into a slot described by `target`.

    No coercion is considered: numbers are not widened, strings are not parsed.

    Args:
        value: Candidate value.
        target: Declared type of the destination slot.
        source_element: Declared element type of the source collection, used
            instead of scanning elements when known.

    Returns:
        True if the value fits the declared type (or the type cannot be checked).
    """
    if value is None:
        return target.nullable
    if not target.is_known:
        return True

    declared = target.declared
    origin = get_origin(declared)
    if _is_union(origin):
        return any(is_assignable(value, describe_type(member)) for member in get_args(declared))

    cls = runtime_class(declared)
    if cls is None:
        # Literal, NewType and similar constructs are not checkable at run time
        return True
    if not isinstance(value, cls):
        return False
    if target.shape is None or target.element is None:
        return True
    return _elements_match(value, target.element, source_element)


def match_writer(canonical_name: str, working_set: Iterable[Property]) -> Property | None:
    """Find the first writer whose canonical name equals `canonical_name`.

    Matching is exact and case-sensitive. Declaration order decides between
    writers sharing a name.
    """
    for writer in working_set:
        if writer.canonical_name == canonical_name:
            return writer
    return None


# Accessor naming rules


def _strip_separator(remainder: str) -> str | None:
    # get_name / set_name pair under "name"; getName / setName under "Name"
    if remainder.startswith("_") and not remainder.startswith("__"):
        remainder = remainder[1:]
    return remainder or None


def reader_canonical_name(member_name: str, returns: Any) -> str | None:
    """Canonical name of a reader method, or None if it is not a reader.

    `get*` methods are readers whatever they return. `is*` methods are readers
    only when declared to return exactly `bool`.
    """
    if member_name.startswith("get"):
        return _strip_separator(member_name[3:])
    if member_name.startswith("is") and returns is bool:
        return _strip_separator(member_name[2:])
    return None


def writer_canonical_name(member_name: str) -> str | None:
    """Canonical name of a writer method, or None if it is not a writer."""
    if member_name.startswith("set"):
        return _strip_separator(member_name[3:])
    return None


def capitalized(field_name: str) -> str:
    """Upper-case the first character of a field name."""
    return field_name[:1].upper() + field_name[1:]
