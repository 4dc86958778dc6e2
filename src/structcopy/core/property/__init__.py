"""Property functionality: models, type descriptions and name matching."""

from structcopy.core.property.models import UNKNOWN, CollectionShape, Property, TypeInfo
from structcopy.core.property.operations import (
    capitalized,
    describe_type,
    is_assignable,
    match_writer,
    reader_canonical_name,
    runtime_class,
    shape_of_class,
    shape_of_value,
    writer_canonical_name,
)

__all__ = [
    # Models
    "CollectionShape",
    "Property",
    "TypeInfo",
    "UNKNOWN",
    # Operations
    "capitalized",
    "describe_type",
    "is_assignable",
    "match_writer",
    "reader_canonical_name",
    "runtime_class",
    "shape_of_class",
    "shape_of_value",
    "writer_canonical_name",
]
