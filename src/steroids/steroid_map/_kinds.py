"""
Value kinds checked by SteroidMap's typed accessors.

Each accessor (i, l, d, f, b, s, date, collection, list) checks the stored
value against one Kind. Checks are strict: a value is never converted, so
``"42"`` is not an integer and ``1`` is not a double.

Python has one int and one float type, so the integer/long and
double/float pairs accept the same values; they exist so code reads the
same regardless of the width the producer had in mind.

``primitive`` kinds have no "null" value: reading an absent key through a
primitive accessor without a default raises MissingValueError instead of
returning None.
"""

from __future__ import annotations

import collections.abc as _abc
import dataclasses as _dataclasses
import datetime as _datetime
import typing as _typing

import steroids.steroid_map._types as _types


@_dataclasses.dataclass(frozen=True, slots=True)
class Kind:
    """A named runtime type check."""

    name: str
    types: tuple[type, ...]
    excluded: tuple[type, ...] = ()
    primitive: bool = False

    def accepts(self, value: _typing.Any) -> bool:
        """Return True if ``value`` is of this kind."""
        return isinstance(value, self.types) and not isinstance(value, self.excluded)


# bool is a subclass of int; True is not the integer 1 here
INTEGER = Kind("integer", (int,), excluded=(bool,), primitive=True)
LONG = Kind("long integer", (int,), excluded=(bool,), primitive=True)
DOUBLE = Kind("double", (float,), primitive=True)
FLOAT = Kind("float", (float,), primitive=True)
BOOLEAN = Kind("boolean", (bool,), primitive=True)
TEXT = Kind("text", (str,))
TIMESTAMP = Kind("timestamp", (_datetime.datetime,))

# Strings and mappings are Collections to Python, never to a payload reader
COLLECTION = Kind(
    "collection",
    (_abc.Collection,),
    excluded=_types.TEXT_TYPES + (_abc.Mapping,),
)
SEQUENCE = Kind("sequence", (_abc.Sequence,), excluded=_types.TEXT_TYPES)
