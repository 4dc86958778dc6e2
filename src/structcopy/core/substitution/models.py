"""Substitution table: destination type -> source type.

An entry `D -> S` authorizes the engine to copy a value declared as `S` into a
fresh instance of `D`. Entries are never chained.

Usage:
    subs = SubstitutionTable({AddressRecord: AddressDTO})
    subs.authorizes(AddressRecord, AddressDTO)  # True
    subs.destination_for(AddressDTO)  # AddressRecord
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import Any

from structcopy.core.errors import InvalidArgumentError


class SubstitutionTable(Mapping[type, type]):
    """Read-only mapping from destination type to source type.

    Args:
        entries: Mapping of destination classes to source classes.

    Raises:
        InvalidArgumentError: If a key or value is not a class.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[type, type] | None = None) -> None:
        entries = dict(entries or {})
        for dst_type, src_type in entries.items():
            if not isinstance(dst_type, type) or not isinstance(src_type, type):
                raise InvalidArgumentError(
                    f"Substitution entries must map classes to classes, "
                    f"got {dst_type!r} -> {src_type!r}"
                )
        self._entries: Mapping[type, type] = MappingProxyType(entries)

    @classmethod
    def of(cls, subs: Mapping[type, type] | None) -> SubstitutionTable:
        """Coerce a mapping (or None) into a table, reusing existing tables."""
        if isinstance(subs, SubstitutionTable):
            return subs
        if not subs:
            return EMPTY
        return cls(subs)

    def __getitem__(self, dst_type: type) -> type:
        return self._entries[dst_type]

    def __iter__(self) -> Iterator[type]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        pairs = ", ".join(f"{d.__qualname__}<-{s.__qualname__}" for d, s in self._entries.items())
        return f"SubstitutionTable({pairs})"

    def authorizes(self, dst_type: Any, src_type: Any) -> bool:
        """Check for an exact `dst_type -> src_type` entry.

        Subclasses of the registered source type do not match.
        """
        if not isinstance(dst_type, type) or not isinstance(src_type, type):
            return False
        return self._entries.get(dst_type) is src_type

    def destination_for(self, src_type: type) -> type | None:
        """Find the destination type registered for a source type.

        Used when only the source side is known (top-level collection copies).
        The first entry in insertion order wins.
        """
        for dst_type, registered in self._entries.items():
            if registered is src_type:
                return dst_type
        return None


EMPTY = SubstitutionTable()
