"""
Type aliases for SteroidMap.

- Key: map keys (always text)
- Store: the backing mapping a SteroidMap decorates
- StoreFactory: zero-argument callable returning an empty Store
- Source: anything add_all/add_from accept as a source of entries
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

Key: _typing.TypeAlias = str

Store: _typing.TypeAlias = _abc.MutableMapping[str, _typing.Any]

StoreFactory: _typing.TypeAlias = _abc.Callable[[], Store]

Source: _typing.TypeAlias = _abc.Mapping[str, _typing.Any]

# Types that are collections to Python but scalars to a caller reading payloads
TEXT_TYPES: tuple[type, ...] = (str, bytes, bytearray)
