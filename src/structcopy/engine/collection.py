"""Collection copier: element-wise transfer for sequences and sets.

Two entry points:
- `transform`: a matched property holds a collection whose element type has a
  substitution entry; build a new collection of converted elements.
- `copy_collection`: the caller passed two collections to a top-level copy;
  convert each source element and add it to the destination.

Sequences keep source order. Sets keep set semantics, so converted elements
must be hashable.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, MutableSequence, MutableSet
from typing import TYPE_CHECKING, Any

from structcopy.core.diagnostics import DiagnosticKind
from structcopy.core.errors import ShapeMismatchError, TypeMismatchError
from structcopy.core.property import CollectionShape, Property, runtime_class
from structcopy.core.substitution import SubstitutionTable

if TYPE_CHECKING:
    from structcopy.engine.copier import Copier


class _NotApplicable:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NOT_APPLICABLE"


NOT_APPLICABLE: Any = _NotApplicable()
"""Returned by `transform` when no element substitution applies."""

_BUILDABLE = (list, tuple, set, frozenset)


def _common_element_type(items: Iterable[Any]) -> type | None:
    """Runtime type shared by every non-None element, if there is exactly one."""
    found: type | None = None
    for item in items:
        if item is None:
            continue
        if found is None:
            found = type(item)
        elif type(item) is not found:
            return None
    return found


def _build(declared: Any, shape: CollectionShape, items: list[Any]) -> Any:
    cls = runtime_class(declared)
    if cls is not None and issubclass(cls, _BUILDABLE):
        factory: Callable[[list[Any]], Any] = cls
    elif shape is CollectionShape.SEQUENCE:
        factory = list
    else:
        factory = set
    try:
        return factory(items)
    except TypeError as e:
        raise TypeMismatchError(f"Cannot build {factory.__name__} of copied elements: {e}") from e


class CollectionCopier:
    """Element-wise copies of homogeneous collections.

    Args:
        copier: Owning copier, used to construct and copy each element.
    """

    def __init__(self, copier: Copier) -> None:
        self._copier = copier

    def transform(
        self,
        reader: Property,
        writer: Property,
        value: Any,
        subs: SubstitutionTable,
    ) -> Any:
        """Convert a collection property through its element substitution.

        Args:
            reader: Source property holding the collection.
            writer: Matched destination property.
            value: The source collection.
            subs: Substitution table of the current call.

        Returns:
            A new collection of the destination's shape, or NOT_APPLICABLE if
            shapes differ or `subs` has no entry for the element types.

        Raises:
            TypeMismatchError: If converted elements cannot form the collection.
        """
        shape = writer.type_info.shape
        if shape is None or self._copier.introspector.shape_of(value) is not shape:
            return NOT_APPLICABLE
        element_type = runtime_class(writer.element_type)
        source_element = runtime_class(reader.element_type) or _common_element_type(value)
        if element_type is None or not subs.authorizes(element_type, source_element):
            return NOT_APPLICABLE

        items = [
            self._copier.construct_and_copy(element_type, item, strict=False, subs=subs)
            for item in value
            if item is not None
        ]
        return _build(writer.declared_type, shape, items)

    def copy_collection(self, dst: Any, src: Any, subs: SubstitutionTable) -> None:
        """Copy every element of `src` into `dst`, converting through `subs`.

        The table is searched by the runtime type of each source element.
        Elements without an entry, or whose copies the destination cannot hold
        (unhashable set members), are skipped with a TYPE_MISMATCH diagnostic.

        Raises:
            ShapeMismatchError: If the shapes differ or `dst` is immutable.
        """
        introspector = self._copier.introspector
        dst_shape = introspector.shape_of(dst)
        src_shape = introspector.shape_of(src)
        if dst_shape is not src_shape:
            raise ShapeMismatchError(
                f"Cannot copy a {type(src).__name__} into a {type(dst).__name__}: "
                f"collection shapes differ"
            )
        if isinstance(dst, MutableSequence):
            add: Callable[[Any], None] = dst.append
        elif isinstance(dst, MutableSet):
            add = dst.add
        else:
            raise ShapeMismatchError(f"Destination {type(dst).__name__} is not a mutable collection")

        for item in src:
            if item is None:
                continue
            item_type = introspector.type_of(item)
            target = subs.destination_for(item_type)
            if target is None:
                self._copier.report(
                    DiagnosticKind.TYPE_MISMATCH,
                    f"No substitution for collection element of type {item_type.__qualname__}",
                )
                continue
            converted = self._copier.construct_and_copy(target, item, strict=False, subs=subs)
            try:
                add(converted)
            except TypeError as e:
                self._copier.report(
                    DiagnosticKind.TYPE_MISMATCH,
                    f"Cannot add {target.__qualname__} to {type(dst).__name__}: {e}",
                )
