"""
Read-only views returned by SteroidMap.collection() and SteroidMap.list().

A view wraps the stored container by reference: later changes to the
container show through the view, but the view itself offers no way to
mutate it. Views are shallow; elements are returned exactly as stored so a
list of dicts can still be navigated with maps().

SequenceView wraps sequences, SetView wraps sets, CollectionView wraps any
other sized iterable container.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing


class CollectionView(_abc.Collection[_typing.Any]):
    """
    Read-only view of an arbitrary collection.

    Example:
        >>> view = CollectionView({"a": 1}.keys())
        >>> "a" in view
        True
    """

    __slots__ = ("_data",)

    def __init__(self, data: _abc.Collection[_typing.Any]) -> None:
        self._data = data

    def __contains__(self, item: object) -> bool:
        return item in self._data

    def __iter__(self) -> _typing.Iterator[_typing.Any]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

    def __eq__(self, other: object) -> bool:
        """Compare by the wrapped container's own equality."""
        if isinstance(other, CollectionView):
            other = other._data
        return bool(self._data == other)

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class SetView(CollectionView, _abc.Set[_typing.Any]):
    """
    Read-only view of a set.

    Set comparisons and operators (``|``, ``&``, ``-``) work against any
    other Set and return plain frozensets.
    """

    __slots__ = ()

    @classmethod
    def _from_iterable(cls, it: _typing.Iterable[_typing.Any]) -> frozenset[_typing.Any]:
        return frozenset(it)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, _abc.Set):
            return len(self) == len(other) and self.__le__(other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


class SequenceView(CollectionView, _abc.Sequence[_typing.Any]):
    """
    Read-only view of a sequence.

    Example:
        >>> tags = ["a", "b", "c"]
        >>> view = SequenceView(tags)
        >>> view[0], view[-1]
        ('a', 'c')
        >>> view == ["a", "b", "c"]
        True
    """

    __slots__ = ()

    _data: _abc.Sequence[_typing.Any]

    @_typing.overload
    def __getitem__(self, index: int) -> _typing.Any: ...

    @_typing.overload
    def __getitem__(self, index: slice) -> SequenceView: ...

    def __getitem__(self, index: int | slice) -> _typing.Any:
        """Get an item, or a view of a slice."""
        value = self._data[index]
        if isinstance(index, slice):
            return SequenceView(value)
        return value

    def __eq__(self, other: object) -> bool:
        """Compare equal to any sequence with the same items (except strings)."""
        if isinstance(other, (str, bytes, bytearray)):
            return NotImplemented
        if isinstance(other, _abc.Sequence):
            return list(self) == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        raise TypeError(f"unhashable type: '{type(self).__name__}'")


def view_of(value: _abc.Collection[_typing.Any]) -> CollectionView:
    """
    Wrap a collection in the most specific read-only view.

    Views are returned as-is so wrapping is idempotent.
    """
    if isinstance(value, CollectionView):
        return value
    if isinstance(value, _abc.Sequence):
        return SequenceView(value)
    if isinstance(value, _abc.Set):
        return SetView(value)
    return CollectionView(value)
