"""Core functionalities: stateless models, errors and pure operations.

Architecture Note:
    core/ contains pure, stateless building blocks: property descriptions and
    name matching, substitution tables, diagnostics and the error hierarchy.
    For the stateful copy engine, see engine/; for reflection, introspection/.
"""

from structcopy.core.diagnostics import (
    CollectingSink,
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    LoggingSink,
    RaisingSink,
)
from structcopy.core.errors import (
    AccessFailureError,
    ConstructionFailedError,
    CopyError,
    InvalidArgumentError,
    PropertyNotFoundError,
    ShapeMismatchError,
    TypeMismatchError,
)
from structcopy.core.property import (
    CollectionShape,
    Property,
    TypeInfo,
    describe_type,
    is_assignable,
    match_writer,
)
from structcopy.core.substitution import SubstitutionTable
from structcopy.core.types import SubsLike

__all__ = [
    # Types
    "SubsLike",
    # Errors
    "CopyError",
    "InvalidArgumentError",
    "ConstructionFailedError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "AccessFailureError",
    "PropertyNotFoundError",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "LoggingSink",
    "CollectingSink",
    "RaisingSink",
    # Property
    "CollectionShape",
    "Property",
    "TypeInfo",
    "describe_type",
    "is_assignable",
    "match_writer",
    # Substitution
    "SubstitutionTable",
]
