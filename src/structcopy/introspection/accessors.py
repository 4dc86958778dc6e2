"""Accessor-based introspection: bean-style get/is/set methods.

Readers are methods named `get*` taking no argument, or `is*` declared to
return `bool`. Writers are methods named `set*` taking exactly one argument.
The prefix is stripped to form the canonical name; one separating underscore is
dropped as well, so `get_name`/`set_name` pair under "name" and
`getName`/`setName` under "Name".

Usage:
    class Account:
        def get_owner(self) -> str: ...
        def set_owner(self, owner: str) -> None: ...
        def is_active(self) -> bool: ...

    copier = Copier(introspector=AccessorIntrospector())
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from operator import methodcaller
from typing import Any

from structcopy.core.property import (
    Property,
    capitalized,
    describe_type,
    reader_canonical_name,
    writer_canonical_name,
)
from structcopy.introspection.base import BaseIntrospector, resolve_hints

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def _method_setter(name: str) -> Callable[[Any, Any], None]:
    def setter(obj: Any, value: Any) -> None:
        getattr(obj, name)(value)

    return setter


def _arguments(func: Callable[..., Any]) -> list[inspect.Parameter] | None:
    """Parameters after `self`, or None for signatures that cannot be an accessor."""
    try:
        parameters = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return None
    if not parameters or parameters[0].kind not in _POSITIONAL:
        return None
    rest = parameters[1:]
    if any(p.kind not in _POSITIONAL for p in rest):
        return None
    return rest


class AccessorIntrospector(BaseIntrospector):
    """Introspector pairing get/is readers with set writers."""

    def canonical_names(self, field_name: str) -> tuple[str, ...]:
        upper = capitalized(field_name)
        return (field_name,) if upper == field_name else (field_name, upper)

    def properties(self, cls: type) -> list[Property]:
        methods: dict[str, Callable[..., Any]] = {}
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for name, member in vars(klass).items():
                if name.startswith("__"):
                    continue
                if inspect.isfunction(member):
                    methods[name] = member
                else:
                    methods.pop(name, None)

        found = []
        for name, func in methods.items():
            accessor = self._reader(name, func) or self._writer(name, func)
            if accessor is not None:
                found.append(accessor)
        return found

    def _reader(self, name: str, func: Callable[..., Any]) -> Property | None:
        arguments = _arguments(func)
        if arguments is None or arguments:
            return None
        hints = resolve_hints(func)
        returns = hints.get("return")
        if "return" in hints and returns in (None, type(None)):
            return None
        canonical = reader_canonical_name(name, returns)
        if canonical is None:
            return None
        return Property(
            name=name,
            canonical_name=canonical,
            type_info=describe_type(returns),
            getter=methodcaller(name),
        )

    def _writer(self, name: str, func: Callable[..., Any]) -> Property | None:
        arguments = _arguments(func)
        if arguments is None or len(arguments) != 1:
            return None
        canonical = writer_canonical_name(name)
        if canonical is None:
            return None
        annotation = resolve_hints(func).get(arguments[0].name)
        return Property(
            name=name,
            canonical_name=canonical,
            type_info=describe_type(annotation),
            setter=_method_setter(name),
        )
