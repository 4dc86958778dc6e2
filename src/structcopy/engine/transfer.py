"""Value transfer policy: the per-property copy decision tree.

For one source reader and its value:
1. Find the first writer with the same canonical name; none means no-op.
2. Assign directly when the value fits the writer's declared type.
3. Convert collection elements when a substitution entry covers them.
4. Recurse into a fresh destination record when the slot is typed as the
   destination itself, or when the substitution table authorizes it.
5. Otherwise report TYPE_MISMATCH and leave the writer available.

A matched and written writer is removed from the call's working set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from structcopy.core.diagnostics import Diagnostic, DiagnosticKind
from structcopy.core.errors import AccessFailureError, ShapeMismatchError, TypeMismatchError
from structcopy.core.property import Property, is_assignable, match_writer, runtime_class
from structcopy.core.substitution import SubstitutionTable
from structcopy.engine.collection import NOT_APPLICABLE, CollectionCopier

if TYPE_CHECKING:
    from structcopy.engine.copier import Copier


class ValueTransferPolicy:
    """Decides how one source value reaches its destination slot.

    Args:
        copier: Owning copier (introspector, diagnostics, recursion).
        collections: Collection copier for element-wise transforms.
    """

    def __init__(self, copier: Copier, collections: CollectionCopier) -> None:
        self._copier = copier
        self._collections = collections

    def transfer(
        self,
        reader: Property,
        value: Any,
        dst: Any,
        working_set: list[Property],
        subs: SubstitutionTable,
    ) -> bool:
        """Transfer one value into `dst`.

        Args:
            reader: Source property the value was read from.
            value: Value read from the source.
            dst: Destination record.
            working_set: Writers of `dst` not yet consumed in this call.
            subs: Substitution table of the call.

        Returns:
            True if a writer was written and consumed.
        """
        writer = match_writer(reader.canonical_name, working_set)
        if writer is None:
            return False

        if is_assignable(value, writer.type_info, reader.element_type):
            return self._write(writer, dst, value, working_set)

        if subs and value is not None and self._copier.introspector.shape_of(value) is not None:
            try:
                converted = self._collections.transform(reader, writer, value, subs)
            except (TypeMismatchError, AccessFailureError) as e:
                self._copier.emit(Diagnostic.from_error(e, writer.canonical_name))
                return False
            if converted is not NOT_APPLICABLE:
                return self._write(writer, dst, converted, working_set)

        return self._substitute(reader, writer, value, dst, working_set, subs)

    def _substitute(
        self,
        reader: Property,
        writer: Property,
        value: Any,
        dst: Any,
        working_set: list[Property],
        subs: SubstitutionTable,
    ) -> bool:
        """Recurse into a fresh destination record when allowed."""
        name = writer.canonical_name
        dst_name = type(dst).__qualname__
        if value is None:
            self._copier.report(
                DiagnosticKind.TYPE_MISMATCH,
                f"Cannot write None into non-nullable {writer.name!r} of {dst_name}",
                name,
            )
            return False

        target = runtime_class(writer.declared_type)
        source_type = runtime_class(reader.declared_type) or type(value)
        self_referential = target is not None and isinstance(dst, target)
        if target is None or not (self_referential or subs.authorizes(target, source_type)):
            self._copier.report(
                DiagnosticKind.TYPE_MISMATCH,
                f"Cannot copy {source_type.__qualname__} into {writer.name!r} of {dst_name} "
                f"declared as {getattr(writer.declared_type, '__qualname__', writer.declared_type)}: "
                f"no substitution",
                name,
            )
            return False

        try:
            nested = self._copier.construct_and_copy(target, value, strict=False, subs=subs)
        except ShapeMismatchError as e:
            self._copier.report(DiagnosticKind.TYPE_MISMATCH, str(e), name)
            return False
        except AccessFailureError as e:
            self._copier.emit(Diagnostic.from_error(e, name))
            return False
        return self._write(writer, dst, nested, working_set)

    def _write(self, writer: Property, dst: Any, value: Any, working_set: list[Property]) -> bool:
        try:
            writer.write(dst, value)
        except Exception as e:
            self._copier.report(
                DiagnosticKind.ACCESS_FAILURE,
                f"Cannot write {writer.name!r} of {type(dst).__qualname__}: {e}",
                writer.canonical_name,
            )
            return False
        # By identity: writers sharing a canonical name stay distinct
        for index, candidate in enumerate(working_set):
            if candidate is writer:
                del working_set[index]
                break
        return True
