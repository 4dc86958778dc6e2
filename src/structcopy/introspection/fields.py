"""Field-based introspection for dataclasses, Pydantic models and annotated classes.

Every public field is both readable and writable under its own name. Public
`property` objects are readable when they have a getter and writable when they
have a setter.

Usage:
    @dataclass
    class Customer:
        id: str
        age: int | None = None

    [p.canonical_name for p in FieldIntrospector().writers(Customer)]  # ["id", "age"]
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from operator import attrgetter
from typing import Any, ClassVar, get_origin

from structcopy.core.property import Property, describe_type
from structcopy.introspection.base import BaseIntrospector, is_pydantic, resolve_hints


def _attribute_setter(name: str) -> Callable[[Any, Any], None]:
    def setter(obj: Any, value: Any) -> None:
        setattr(obj, name, value)

    return setter


def _is_public(name: str) -> bool:
    return not name.startswith("_")


class FieldIntrospector(BaseIntrospector):
    """Introspector treating declared fields as properties.

    Field order follows declaration order: `dataclasses.fields` for dataclasses,
    `model_fields` for Pydantic models, and base-first annotations for other
    classes. Properties defined with `@property` come after fields.
    """

    def properties(self, cls: type) -> list[Property]:
        if dataclasses.is_dataclass(cls):
            found = self._dataclass_fields(cls)
        elif is_pydantic(cls):
            found = self._pydantic_fields(cls)
        else:
            found = self._annotated_fields(cls)
        names = {p.name for p in found}
        found.extend(p for p in self._descriptor_properties(cls) if p.name not in names)
        return found

    def _field(self, name: str, annotation: Any) -> Property:
        return Property(
            name=name,
            canonical_name=name,
            type_info=describe_type(annotation),
            getter=attrgetter(name),
            setter=_attribute_setter(name),
        )

    def _dataclass_fields(self, cls: type) -> list[Property]:
        hints = resolve_hints(cls)
        return [
            self._field(f.name, hints.get(f.name))
            for f in dataclasses.fields(cls)
            if _is_public(f.name)
        ]

    def _pydantic_fields(self, cls: type) -> list[Property]:
        return [
            self._field(name, info.annotation)
            for name, info in cls.model_fields.items()  # type: ignore[attr-defined]
            if _is_public(name)
        ]

    def _annotated_fields(self, cls: type) -> list[Property]:
        hints = resolve_hints(cls)
        found = []
        for name, annotation in hints.items():
            if not _is_public(name) or get_origin(annotation) is ClassVar:
                continue
            if isinstance(annotation, str) and annotation.startswith("ClassVar"):
                continue
            if isinstance(getattr(cls, name, None), property):
                continue
            found.append(self._field(name, annotation))
        return found

    def _descriptor_properties(self, cls: type) -> list[Property]:
        found: dict[str, Property] = {}
        for klass in reversed(cls.__mro__):
            if klass.__module__.startswith("pydantic"):
                # BaseModel's own properties (model_extra, ...) are not record data
                continue
            for name, member in vars(klass).items():
                if not isinstance(member, property) or not _is_public(name):
                    continue
                if member.fget is None:
                    found.pop(name, None)
                    continue
                returns = resolve_hints(member.fget).get("return")
                found[name] = Property(
                    name=name,
                    canonical_name=name,
                    type_info=describe_type(returns),
                    getter=attrgetter(name),
                    setter=_attribute_setter(name) if member.fset is not None else None,
                )
        return list(found.values())
