"""structcopy: Structural object copier.

Copies values between records of different types by matching property names.
Neither record declares any relationship to the other.

Usage:
    from dataclasses import dataclass
    from structcopy import copy_into, copy_to

    @dataclass
    class AddressDTO:
        city: str = ""

    @dataclass
    class CustomerDTO:
        id: str = ""
        address: AddressDTO | None = None

    @dataclass
    class Address:
        city: str = ""

    @dataclass
    class Customer:
        id: str = ""
        address: Address | None = None

    dto = CustomerDTO(id="X", address=AddressDTO(city="Oslo"))
    customer = copy_to(Customer, dto, subs={Address: AddressDTO})
    assert customer.address == Address(city="Oslo")
"""

__version__ = "0.1.0"

# Configuration
from structcopy.config import CopierSettings

# Core primitives
from structcopy.core import (
    AccessFailureError,
    CollectingSink,
    CollectionShape,
    ConstructionFailedError,
    CopyError,
    Diagnostic,
    DiagnosticKind,
    DiagnosticSink,
    InvalidArgumentError,
    LoggingSink,
    Property,
    PropertyNotFoundError,
    RaisingSink,
    ShapeMismatchError,
    SubstitutionTable,
    TypeInfo,
    TypeMismatchError,
)

# Engine
from structcopy.engine import (
    Copier,
    copy_into,
    copy_to,
    find,
    find_and_put,
    find_and_put_many,
    get_default_copier,
    set_default_copier,
)

# Introspection
from structcopy.introspection import (
    AccessorIntrospector,
    FieldIntrospector,
    Introspector,
)

__all__ = [
    # Version
    "__version__",
    # Engine
    "Copier",
    "copy_into",
    "copy_to",
    "find",
    "find_and_put",
    "find_and_put_many",
    "get_default_copier",
    "set_default_copier",
    # Config
    "CopierSettings",
    # Introspection
    "Introspector",
    "FieldIntrospector",
    "AccessorIntrospector",
    "Property",
    "TypeInfo",
    "CollectionShape",
    # Substitution
    "SubstitutionTable",
    # Diagnostics
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticSink",
    "LoggingSink",
    "CollectingSink",
    "RaisingSink",
    # Errors
    "CopyError",
    "InvalidArgumentError",
    "ConstructionFailedError",
    "ShapeMismatchError",
    "TypeMismatchError",
    "AccessFailureError",
    "PropertyNotFoundError",
]
