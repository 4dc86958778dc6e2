"""Tests for the copy engine: null policy, matching and nested substitution."""

from dataclasses import dataclass, field

import pytest
from hypothesis import given
from hypothesis import strategies as st

from structcopy import (
    AccessFailureError,
    AccessorIntrospector,
    CollectingSink,
    Copier,
    CopierSettings,
    DiagnosticKind,
    InvalidArgumentError,
    ShapeMismatchError,
)


@dataclass
class CustomerDTO:
    id: str = ""
    age: int | None = None


@dataclass
class Customer:
    id: str = ""
    age: int | None = 42


@dataclass
class StrictCustomer:
    id: str = ""
    age: int = 42


@dataclass
class A:
    name: str = ""


@dataclass
class B:
    name: str = ""


@dataclass
class HolderA:
    bean: A | None = None


@dataclass
class HolderB:
    bean: B | None = None


@dataclass
class ListOfA:
    items: list[A] = field(default_factory=list)


@dataclass
class ListOfB:
    items: list[B] = field(default_factory=list)


@dataclass
class NodeDTO:
    value: int = 0
    next: "NodeDTO | None" = None


@dataclass
class Node:
    value: int = 0
    next: "Node | None" = None


class Unreadable:
    @property
    def secret(self) -> str:
        raise RuntimeError("locked")


class ReadOnlyTarget:
    def __init__(self) -> None:
        self._id = "fixed"

    @property
    def id(self) -> str:
        return self._id

    @id.setter
    def id(self, value: str) -> None:
        raise ValueError("immutable id")


class Twins:
    """Two readers and two writers sharing the canonical name "name"."""

    def __init__(self, first: str = "", second: str = "") -> None:
        self.calls: list[tuple[str, str]] = []
        self._first = first
        self._second = second

    def get_name(self) -> str:
        return self._first

    def getname(self) -> str:
        return self._second

    def set_name(self, value: str) -> None:
        self.calls.append(("set_name", value))

    def setname(self, value: str) -> None:
        self.calls.append(("setname", value))


def _copier() -> Copier:
    return Copier(settings=CopierSettings(), sink=CollectingSink())


# Null policy


def test_lenient_skips_none_values(copier, sink):
    dst = Customer(id="", age=42)

    copier.copy_into(dst, CustomerDTO(id="X", age=None))

    assert dst == Customer(id="X", age=42)
    assert len(sink) == 0


def test_strict_writes_none_values(copier):
    dst = Customer(id="", age=42)

    copier.copy_into(dst, CustomerDTO(id="X", age=None), strict=True)

    assert dst == Customer(id="X", age=None)


def test_strict_none_into_non_nullable_slot_is_a_mismatch(copier, sink):
    dst = StrictCustomer(age=42)

    copier.copy_into(dst, CustomerDTO(id="X"), strict=True)

    assert dst == StrictCustomer(id="X", age=42)
    [diagnostic] = sink.diagnostics
    assert diagnostic.kind is DiagnosticKind.TYPE_MISMATCH
    assert diagnostic.property_name == "age"


def test_strict_default_comes_from_settings(sink):
    copier = Copier(settings=CopierSettings(strict=True), sink=sink)
    dst = Customer(age=42)

    copier.copy_into(dst, CustomerDTO(id="X"))
    assert dst.age is None

    dst = Customer(age=42)
    copier.copy_into(dst, CustomerDTO(id="X"), strict=False)
    assert dst.age == 42


@given(
    id=st.text(max_size=10),
    prior=st.integers(),
    age=st.none() | st.integers(),
)
def test_lenient_preserves_prior_values(id, prior, age):
    """PROPERTY: A None source never overwrites a destination value in lenient mode."""
    dst = Customer(id="", age=prior)

    _copier().copy_into(dst, CustomerDTO(id=id, age=age))

    assert dst.id == id
    assert dst.age == (prior if age is None else age)


@given(id=st.text(max_size=10), age=st.none() | st.integers())
def test_copy_between_identical_shapes_is_identity(id, age):
    """PROPERTY: Copying into a fresh record of the same type reproduces it."""
    src = Customer(id=id, age=age)

    copied = _copier().copy_to(Customer, src, strict=True)

    assert copied == src
    assert copied is not src


# Nested substitution


def test_substitution_builds_nested_destination(copier, sink):
    dst = copier.copy_to(HolderB, HolderA(bean=A(name="a")), subs={B: A})

    assert dst.bean == B(name="a")
    assert isinstance(dst.bean, B)
    assert len(sink) == 0


def test_missing_substitution_leaves_slot_unchanged(copier, sink):
    """CRITICAL: Dissimilar types never cross without an authorizing entry."""
    original = B(name="keep")
    dst = HolderB(bean=original)

    copier.copy_into(dst, HolderA(bean=A(name="a")))

    assert dst.bean is original
    [diagnostic] = sink.diagnostics
    assert diagnostic.kind is DiagnosticKind.TYPE_MISMATCH
    assert diagnostic.property_name == "bean"


def test_element_types_do_not_cross_without_substitution(copier, sink):
    dst = ListOfB(items=[B(name="keep")])

    copier.copy_into(dst, ListOfA(items=[A(name="a")]))

    assert dst.items == [B(name="keep")]
    assert sink.by_kind(DiagnosticKind.TYPE_MISMATCH)


def test_self_referential_slot_recurses_without_substitution(copier, sink):
    src = NodeDTO(value=1, next=NodeDTO(value=2, next=NodeDTO(value=3)))

    node = copier.copy_to(Node, src)

    assert node == Node(value=1, next=Node(value=2, next=Node(value=3)))
    assert isinstance(node.next.next, Node)
    assert len(sink) == 0


def test_nested_copy_is_lenient(copier, sink):
    """Nested records skip None values even when the outer call is strict."""
    dst = copier.copy_to(HolderB, HolderA(bean=A(name=None)), strict=True, subs={B: A})

    assert dst.bean == B(name="")
    assert len(sink) == 0


# Writer consumption


def test_each_writer_is_written_at_most_once():
    """PROPERTY: A writer consumed by one reader is never reused by another."""
    copier = Copier(introspector=AccessorIntrospector(), sink=CollectingSink())
    dst = Twins()

    copier.copy_into(dst, Twins(first="a", second="b"))

    assert dst.calls == [("set_name", "a"), ("setname", "b")]


def test_single_reader_uses_first_declared_writer():
    class OneName:
        def get_name(self) -> str:
            return "only"

    copier = Copier(introspector=AccessorIntrospector(), sink=CollectingSink())
    dst = Twins()

    copier.copy_into(dst, OneName())

    assert dst.calls == [("set_name", "only")]


def test_unmatched_properties_are_ignored(copier, sink):
    dst = A(name="keep")

    copier.copy_into(dst, CustomerDTO(id="X", age=1))

    assert dst == A(name="keep")
    assert len(sink) == 0


# Failures


def test_write_failure_is_a_diagnostic(copier, sink):
    dst = ReadOnlyTarget()

    copier.copy_into(dst, CustomerDTO(id="X"))

    assert dst.id == "fixed"
    [diagnostic] = sink.diagnostics
    assert diagnostic.kind is DiagnosticKind.ACCESS_FAILURE
    assert diagnostic.property_name == "id"


def test_read_failure_aborts_the_call(copier):
    with pytest.raises(AccessFailureError) as info:
        copier.copy_into(Customer(), Unreadable())

    assert info.value.property_name == "secret"
    assert isinstance(info.value.__cause__, RuntimeError)


def test_missing_arguments_are_rejected(copier):
    with pytest.raises(InvalidArgumentError):
        copier.copy_into(None, Customer())
    with pytest.raises(InvalidArgumentError):
        copier.copy_into(Customer(), None)
    with pytest.raises(InvalidArgumentError):
        copier.copy_to(None, Customer())
    with pytest.raises(InvalidArgumentError):
        copier.copy_to(Customer, None)


def test_malformed_substitution_table_is_rejected(copier):
    with pytest.raises(InvalidArgumentError):
        copier.copy_into(HolderB(), HolderA(), subs={"B": A})


def test_record_and_collection_do_not_mix(copier):
    with pytest.raises(ShapeMismatchError):
        copier.copy_into([], Customer())
    with pytest.raises(ShapeMismatchError):
        copier.copy_into(Customer(), [Customer()])
