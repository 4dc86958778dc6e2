"""Introspection back ends."""

from structcopy.introspection.accessors import AccessorIntrospector
from structcopy.introspection.base import BaseIntrospector, is_pydantic, zero_value
from structcopy.introspection.fields import FieldIntrospector
from structcopy.introspection.protocol import Introspector

__all__ = [
    "Introspector",
    "BaseIntrospector",
    "FieldIntrospector",
    "AccessorIntrospector",
    "is_pydantic",
    "zero_value",
]
