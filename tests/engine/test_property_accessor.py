"""Tests for single-property find and find-and-put."""

from dataclasses import dataclass

import pytest

from structcopy import (
    AccessFailureError,
    AccessorIntrospector,
    CollectingSink,
    Copier,
    DiagnosticKind,
    InvalidArgumentError,
    PropertyNotFoundError,
    TypeMismatchError,
)


@dataclass
class Point:
    x: int = 0
    y: int = 0


@dataclass
class LabelledPoint(Point):
    label: str = ""


class Gauge:
    def __init__(self) -> None:
        self._level = 0

    @property
    def level(self) -> int:
        return self._level

    @level.setter
    def level(self, value: int) -> None:
        if value < 0:
            raise ValueError("negative level")
        self._level = value

    @property
    def broken(self) -> int:
        raise RuntimeError("sensor offline")

    def reset(self) -> None:
        self._level = 0


class Account:
    def __init__(self) -> None:
        self._owner = ""
        self._balance = 0

    def get_owner(self) -> str:
        return self._owner

    def set_owner(self, owner: str) -> None:
        self._owner = owner

    def getBalance(self) -> int:
        return self._balance

    def setBalance(self, balance: int) -> None:
        self._balance = balance


@pytest.fixture
def accessor_copier(sink):
    return Copier(introspector=AccessorIntrospector(), sink=sink)


# find_and_put_many


def test_put_many_reports_unknown_names(copier, sink):
    point = Point(x=0, y=0)

    copier.find_and_put_many(point, {"x": 5, "z": 9})

    assert point == Point(x=5, y=0)
    [diagnostic] = sink.diagnostics
    assert diagnostic.kind is DiagnosticKind.PROPERTY_NOT_FOUND
    assert diagnostic.property_name == "z"


def test_put_many_continues_after_failures(copier, sink):
    gauge = Gauge()

    copier.find_and_put_many(gauge, {"level": -1, "missing": 1})
    copier.find_and_put_many(gauge, {"level": "high"})
    copier.find_and_put_many(gauge, {"level": 3})

    assert gauge.level == 3
    assert [d.kind for d in sink.diagnostics] == [
        DiagnosticKind.ACCESS_FAILURE,
        DiagnosticKind.PROPERTY_NOT_FOUND,
        DiagnosticKind.TYPE_MISMATCH,
    ]


def test_put_many_with_no_values_is_a_no_op(copier, sink):
    point = Point(x=1)

    copier.find_and_put_many(point, {})

    assert point == Point(x=1)
    assert len(sink) == 0


def test_put_many_requires_target(copier):
    with pytest.raises(InvalidArgumentError):
        copier.find_and_put_many(None, {"x": 1})


# find_and_put


def test_put_writes_inherited_field(copier):
    point = LabelledPoint()

    copier.find_and_put(point, LabelledPoint, "x", 4)
    copier.find_and_put(point, Point, "y", 2)

    assert point == LabelledPoint(x=4, y=2, label="")


def test_put_matches_capitalized_accessor(accessor_copier):
    account = Account()

    accessor_copier.find_and_put(account, Account, "owner", "ada")
    accessor_copier.find_and_put(account, Account, "balance", 10)

    assert account.get_owner() == "ada"
    assert account.getBalance() == 10


def test_put_errors(copier):
    gauge = Gauge()

    with pytest.raises(InvalidArgumentError):
        copier.find_and_put(None, Gauge, "level", 1)
    with pytest.raises(InvalidArgumentError):
        copier.find_and_put(gauge, Point, "level", 1)
    with pytest.raises(PropertyNotFoundError) as not_found:
        copier.find_and_put(gauge, Gauge, "pressure", 1)
    assert not_found.value.property_name == "pressure"
    with pytest.raises(PropertyNotFoundError):
        copier.find_and_put(gauge, Gauge, "broken", 1)
    with pytest.raises(TypeMismatchError):
        copier.find_and_put(gauge, Gauge, "level", "high")


def test_put_write_failure_is_chained(copier):
    with pytest.raises(AccessFailureError) as info:
        copier.find_and_put(Gauge(), Gauge, "level", -1)

    assert isinstance(info.value.__cause__, ValueError)


# find


def test_find_reads_fields_and_properties(copier, sink):
    gauge = Gauge()
    gauge.level = 7

    assert copier.find(Point(x=3), "x") == 3
    assert copier.find(gauge, "level") == 7
    assert len(sink) == 0


def test_find_uses_reader_methods(accessor_copier):
    account = Account()
    account.set_owner("ada")
    account.setBalance(3)

    assert accessor_copier.find(account, "owner") == "ada"
    assert accessor_copier.find(account, "balance") == 3


def test_find_missing_property_returns_none(copier, sink):
    assert copier.find(Point(), "z") is None
    assert copier.find(Gauge(), "reset") is None

    assert [d.kind for d in sink.diagnostics] == [DiagnosticKind.PROPERTY_NOT_FOUND] * 2


def test_find_read_failure_returns_none(copier, sink):
    assert copier.find(Gauge(), "broken") is None

    [diagnostic] = sink.diagnostics
    assert diagnostic.kind is DiagnosticKind.ACCESS_FAILURE
    assert diagnostic.property_name == "broken"


def test_find_requires_target(copier):
    with pytest.raises(InvalidArgumentError):
        copier.find(None, "x")


def test_collecting_sink_can_fail_afterwards(copier, sink):
    copier.find_and_put_many(Point(), {"z": 1})

    with pytest.raises(PropertyNotFoundError):
        sink.raise_first()


def test_sink_passed_to_copier_is_used():
    sink = CollectingSink()
    copier = Copier(sink=sink)

    copier.find(Point(), "missing")

    assert copier.sink is sink
    assert len(sink) == 1
