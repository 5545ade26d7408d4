"""
SteroidMap: the navigable-map contract.

SteroidMap is an abstract MutableMapping that adds fluent mutation, typed
extraction and nested navigation on top of plain item access. Subclasses
provide the five mapping primitives plus two hooks:

- new_store(): an empty store of the same kind as the one being wrapped
- wrap(store): a new map of the subclass's type over ``store``

derive(store) builds the result of sub_map() and copy(); it defaults to
wrap() and is overridden to carry construction state such as a factory.

Everything else is implemented here once.

Views vs. snapshots:
- map() and maps() NAVIGATE: the returned maps share the nested container,
  so writes through them are visible from the parent and vice versa.
- sub_map() and copy() DERIVE: the returned map owns a new store filled at
  call time; later changes on either side are not shared (nested containers
  are not copied, though).

Thread safety: each instance owns a re-entrant lock. Compound operations
(check-then-act, multi-entry writes) hold it for their whole duration, so
concurrent compound calls on the same instance are serialized. Single-step
operations (add, get, valued, item access) are only as atomic as the
backing store.
"""

from __future__ import annotations

import abc as _abc
import collections.abc as _collections_abc
import threading as _threading
import typing as _typing

import steroids.errors as errors
import steroids.steroid_map._kinds as _kinds
import steroids.steroid_map._types as _types
import steroids.steroid_map._views as _views

_T = _typing.TypeVar("_T")
_Self = _typing.TypeVar("_Self", bound="SteroidMap")


class _MissingType:
    """Sentinel type for "no default supplied"."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


MISSING: _typing.Any = _MissingType()


class SteroidMap(_collections_abc.MutableMapping[str, _typing.Any]):
    """
    A mapping with a fluent, null-skipping, typed navigation API.

    Example:
        >>> person = SMap().add("name", "John").add("address", {"number": 1})
        >>> person.s("name")
        'John'
        >>> person.map("address").i("number")
        1
        >>> person.i("age", 30)
        30
    """

    def __init__(self) -> None:
        self._lock = _threading.RLock()

    @property
    def lock(self) -> _threading.RLock:
        """
        The lock compound operations hold.

        Callers can hold it too, to group several calls into one unit:
            with m.lock:
                if m.valued("a"):
                    m.add("b", m.o("a"))
        """
        return self._lock

    # =========================================================================
    # Subclass hooks
    # =========================================================================

    @_abc.abstractmethod
    def new_store(self) -> _types.Store:
        """
        Return an empty store of the same kind as this map's store.

        Raises:
            BackingStoreConstructionError: If none can be produced.
        """

    @_abc.abstractmethod
    def wrap(self: _Self, store: _types.Source) -> _Self:
        """Return a new map of this type over ``store`` (by reference)."""

    def derive(self: _Self, store: _types.Store) -> _Self:
        """
        Return a new map over ``store``, an empty store from new_store().

        sub_map() and copy() build their result here, so a derived map can
        derive again the same way. Defaults to wrap().
        """
        return self.wrap(store)

    # =========================================================================
    # Mutation
    # =========================================================================

    def add(self: _Self, key: str, value: _typing.Any) -> _Self:
        """Store ``value`` under ``key`` unless it is None. Returns self."""
        if value is not None:
            self[key] = value
        return self

    def add_all(self: _Self, *sources: _types.Source | None) -> _Self:
        """
        add() every entry of every source, in order, as one atomic unit.

        Entries are taken in each source's own iteration order. None sources
        are skipped.
        """
        return self.add_many(sources)

    def add_many(self: _Self, sources: _typing.Iterable[_types.Source | None]) -> _Self:
        """
        Like add_all(), for a collection or lazy iterable of sources.

        The iterable is consumed while the lock is held.
        """
        with self._lock:
            for source in sources:
                if source is None:
                    continue
                for key, value in source.items():
                    self.add(key, value)
        return self

    def add_from(self: _Self, source: _types.Source | None, *keys: str) -> _Self:
        """
        add() the entries of ``source`` whose key is one of ``keys``.

        With no keys every entry is added. A None source is a no-op.
        """
        if source is None:
            return self
        if not keys:
            return self.add_all(source)

        wanted = set(keys)
        with self._lock:
            for key, value in source.items():
                if key in wanted:
                    self.add(key, value)
        return self

    def rename_key(self: _Self, old_key: str, new_key: str) -> _Self:
        """
        Move the value under ``old_key`` to ``new_key``.

        No-op if ``old_key`` is not present. Any value already under
        ``new_key`` is overwritten.
        """
        with self._lock:
            if old_key not in self:
                return self
            value = self.pop(old_key)
            self[new_key] = value
        return self

    def delete(self: _Self, *keys: str) -> _Self:
        """Remove every listed key; absent keys are ignored."""
        return self.delete_many(keys)

    def delete_many(self: _Self, keys: _typing.Iterable[str]) -> _Self:
        """Like delete(), for a collection or lazy iterable of keys."""
        with self._lock:
            for key in keys:
                self.pop(key, None)
        return self

    # =========================================================================
    # Extraction
    # =========================================================================

    def valued(self, key: str) -> bool:
        """True if ``key`` holds a value other than None."""
        return self.get(key) is not None

    def not_valued(self, key: str) -> bool:
        """True if ``key`` is absent or holds None."""
        return not self.valued(key)

    def default_if_missing(
        self,
        key: str,
        default: _T,
        extractor: _collections_abc.Callable[[str], _T],
    ) -> _T:
        """
        Return ``extractor(key)`` if ``key`` is valued, else ``default``.

        The check and the extraction run under the lock, so a concurrent
        compound operation cannot remove the key in between.
        """
        with self._lock:
            if self.valued(key):
                return extractor(key)
        return default

    def _extract(self, key: str, kind: _kinds.Kind) -> _typing.Any:
        value = self.get(key)
        if value is None:
            if kind.primitive:
                raise errors.MissingValueError(key, kind.name)
            return None
        if not kind.accepts(value):
            raise errors.TypeMismatchError(key, kind.name, value)
        return value

    def _typed(self, key: str, kind: _kinds.Kind, default: _typing.Any) -> _typing.Any:
        if default is MISSING:
            return self._extract(key, kind)
        return self.default_if_missing(key, default, lambda k: self._extract(k, kind))

    def i(self, key: str, default: _typing.Any = MISSING) -> int:
        """Integer value. MissingValueError if absent and no default."""
        return self._typed(key, _kinds.INTEGER, default)

    def l(self, key: str, default: _typing.Any = MISSING) -> int:  # noqa: E743
        """Long integer value. MissingValueError if absent and no default."""
        return self._typed(key, _kinds.LONG, default)

    def d(self, key: str, default: _typing.Any = MISSING) -> float:
        """Double value. MissingValueError if absent and no default."""
        return self._typed(key, _kinds.DOUBLE, default)

    def f(self, key: str, default: _typing.Any = MISSING) -> float:
        """Float value. MissingValueError if absent and no default."""
        return self._typed(key, _kinds.FLOAT, default)

    def b(self, key: str, default: _typing.Any = MISSING) -> bool:
        """Boolean value. MissingValueError if absent and no default."""
        return self._typed(key, _kinds.BOOLEAN, default)

    def s(self, key: str, default: _typing.Any = MISSING) -> str | None:
        """Text value, or None if absent and no default."""
        return self._typed(key, _kinds.TEXT, default)

    def date(self, key: str, default: _typing.Any = MISSING) -> _typing.Any:
        """Timestamp (datetime) value, or None if absent and no default."""
        return self._typed(key, _kinds.TIMESTAMP, default)

    def o(
        self,
        key: str,
        default: _typing.Any = MISSING,
        *,
        transform: _collections_abc.Callable[[_typing.Any], _typing.Any] | None = None,
        kind: type | None = None,
    ) -> _typing.Any:
        """
        Any value, optionally checked and/or transformed.

        Args:
            key: The key to read.
            default: Returned when ``key`` is not valued.
            transform: Applied to the stored value. Without a default it is
                       applied even when the value is None.
            kind: If given, a valued entry must be an instance of it
                  (TypeMismatchError otherwise).
        """

        def extract(k: str) -> _typing.Any:
            value = self.get(k)
            if kind is not None and value is not None and not isinstance(value, kind):
                raise errors.TypeMismatchError(k, kind.__name__, value)
            return value if transform is None else transform(value)

        if default is MISSING:
            return extract(key)
        return self.default_if_missing(key, default, extract)

    def collection(self, key: str, default: _typing.Any = MISSING) -> _typing.Any:
        """
        Read-only view of a stored collection (list, tuple, set, ...).

        Returns None if absent and no default; a supplied default is
        returned unchanged.
        """
        if default is MISSING:
            value = self._extract(key, _kinds.COLLECTION)
            return None if value is None else _views.view_of(value)
        return self.default_if_missing(key, default, self.collection)

    def list(self, key: str, default: _typing.Any = MISSING) -> _typing.Any:
        """
        Read-only view of a stored sequence.

        Returns None if absent and no default; a supplied default is
        returned unchanged.
        """
        if default is MISSING:
            value = self._extract(key, _kinds.SEQUENCE)
            return None if value is None else _views.SequenceView(value)
        return self.default_if_missing(key, default, self.list)

    def stream(
        self,
        key: str,
        default: _typing.Any = MISSING,
    ) -> _collections_abc.Iterator[_typing.Any]:
        """
        A fresh one-shot iterator over a stored collection.

        Without a default an absent key raises MissingValueError. A default
        may be an iterator (returned as is) or any iterable.
        """
        if default is MISSING:
            values = self._extract(key, _kinds.COLLECTION)
            if values is None:
                raise errors.MissingValueError(key, _kinds.COLLECTION.name)
            return iter(values)
        if not isinstance(default, _collections_abc.Iterator):
            default = iter(default)
        return self.default_if_missing(key, default, self.stream)

    # =========================================================================
    # Navigation
    # =========================================================================

    def ensure_navigable(
        self,
        value: _typing.Any,
        *,
        key: str | None = None,
    ) -> SteroidMap | None:
        """
        Autowrap a value for navigation.

        None stays None, a SteroidMap is returned as is, any other Mapping
        is wrapped by reference (see wrap()).

        Raises:
            InvalidNavigationError: For any other value.
        """
        if value is None:
            return None
        if isinstance(value, SteroidMap):
            return value
        if isinstance(value, _collections_abc.Mapping):
            return self.wrap(value)
        raise errors.InvalidNavigationError(value, key=key)

    def map(self, key: str, default: _typing.Any = MISSING) -> _typing.Any:
        """
        Navigate into the map stored under ``key``.

        The result shares the nested container. Returns None if absent and
        no default.
        """
        if default is MISSING:
            return self.ensure_navigable(self.get(key), key=key)
        return self.default_if_missing(key, default, self.map)

    def maps(
        self,
        key: str,
        default: _typing.Any = MISSING,
    ) -> _collections_abc.Iterator[SteroidMap]:
        """
        Lazily navigate into each map of a stored collection of maps.

        An absent key yields nothing (not an error) when no default is given.
        The stored value must be a collection (TypeMismatchError now); each
        element must be a mapping (InvalidNavigationError when reached).
        """
        if default is MISSING:
            return self.default_if_missing(key, iter(()), self._navigate_each)
        if not isinstance(default, _collections_abc.Iterator):
            default = iter(default)
        return self.default_if_missing(key, default, self.maps)

    def _navigate_each(self, key: str) -> _collections_abc.Iterator[SteroidMap]:
        values = self._extract(key, _kinds.COLLECTION)
        return (self.ensure_navigable(value, key=key) for value in values)

    # =========================================================================
    # Derivation
    # =========================================================================

    def sub_map(
        self: _Self,
        *keys: str,
        store: _types.Store | None = None,
    ) -> _Self:
        """
        A snapshot holding only ``keys`` (valued ones; None is skipped).

        Args:
            keys: Keys to copy.
            store: Empty store to fill. If omitted, a same-kind store is
                   created with new_store().

        Raises:
            BackingStoreConstructionError: If store is omitted and no
                same-kind store can be created.
        """
        target = self.derive(self.new_store()) if store is None else self.wrap(store)
        with self._lock:
            for key in keys:
                target.add(key, self.get(key))
        return target

    def copy(self: _Self) -> _Self:
        """
        Shallow snapshot over a same-kind store.

        Raises:
            BackingStoreConstructionError: If no same-kind store can be created.
        """
        target = self.derive(self.new_store())
        with self._lock:
            target.add_all(self)
        return target

    def __copy__(self: _Self) -> _Self:
        return self.copy()
