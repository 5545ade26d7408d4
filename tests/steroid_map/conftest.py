"""
Shared fixtures for SteroidMap tests.
"""

import datetime as _datetime
import sys as _sys
import typing as _typing

import pytest as _pytest

import steroids.steroid_map as steroid_map


class Something:
    """An arbitrary object with identity equality."""

    pass


@_pytest.fixture
def something() -> Something:
    return Something()


@_pytest.fixture
def stamp() -> _datetime.datetime:
    return _datetime.datetime(2024, 3, 1, 12, 30, tzinfo=_datetime.timezone.utc)


@_pytest.fixture
def submap() -> steroid_map.SMap:
    return steroid_map.SMap().add("key1", "hello").add("key2", 42)


@_pytest.fixture
def simple_map() -> dict[str, _typing.Any]:
    return {}


@_pytest.fixture
def typed_map(
    something: Something,
    stamp: _datetime.datetime,
    submap: steroid_map.SMap,
    simple_map: dict[str, _typing.Any],
) -> steroid_map.SMap:
    """One entry per accessor kind (13 entries)."""
    return (
        steroid_map.SMap()
        .add("key1", "string1")
        .add("key2", "string2")
        .add("list", [1, 2, 3])
        .add("coll", {"3", "4", "5", "6"})
        .add("int", 2**31 - 1)
        .add("long", 2**63 - 1)
        .add("double", _sys.float_info.max)
        .add("float", 3.4028235e38)
        .add("boolean", True)
        .add("date", stamp)
        .add("object", something)
        .add("submap", submap)
        .add("simpleMap", simple_map)
    )


@_pytest.fixture
def person() -> steroid_map.SMap:
    """A person with a nested address and a list of friends."""
    return (
        steroid_map.SMap()
        .add("name", "John")
        .add("surname", "Smith")
        .add("address", steroid_map.SMap().add("streetname", "One way").add("number", 1))
        .add(
            "friends",
            [
                steroid_map.SMap.of("name", "Jane", "surname", "Doe", "social", "twitter handle"),
                steroid_map.SMap.of("name", "John", "surname", "Doe", "social", "facebook profile"),
                steroid_map.SMap.of("name", "Jane", "surname", "Smith"),
            ],
        )
    )


@_pytest.fixture
def raw_person() -> dict[str, _typing.Any]:
    """The same person as plain, JSON-like containers."""
    return {
        "name": "John",
        "address": {"street": "One way", "number": 1},
        "friends": [
            {"name": "Jane", "surname": "Doe"},
            {"name": "John", "surname": "Doe"},
            {"name": "Jane", "surname": "Smith"},
        ],
        "tags": ["a", "b", "c"],
    }
