"""Copy engine: the stateful orchestration around the pure core."""

from structcopy.engine.accessors import PropertyAccessor
from structcopy.engine.collection import NOT_APPLICABLE, CollectionCopier
from structcopy.engine.copier import (
    Copier,
    copy_into,
    copy_to,
    find,
    find_and_put,
    find_and_put_many,
    get_default_copier,
    set_default_copier,
)
from structcopy.engine.transfer import ValueTransferPolicy

__all__ = [
    "Copier",
    "CollectionCopier",
    "ValueTransferPolicy",
    "PropertyAccessor",
    "NOT_APPLICABLE",
    "copy_into",
    "copy_to",
    "find",
    "find_and_put",
    "find_and_put_many",
    "get_default_copier",
    "set_default_copier",
]
