"""
SMap: the default SteroidMap, a decorator over any mapping.

By default an SMap owns a new dict (or whatever Settings.default_store
names). Passing a store wraps it by reference instead:

    >>> payload = {"address": {"street": "One way"}}
    >>> SMap(payload).map("address").rename_key("street", "st")
    SMap({'st': 'One way'})
    >>> payload
    {'address': {'st': 'One way'}}
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import steroids.config as config
import steroids.errors as errors
import steroids.steroid_map._contract as _contract
import steroids.steroid_map._stores as _stores
import steroids.steroid_map._types as _types


class SMap(_contract.SteroidMap):
    """
    SteroidMap over an injectable store.

    Args:
        store: Mapping to wrap by reference. Omit it to start from an empty
               store built by the configured default factory. None is rejected.
        factory: Zero-argument callable producing empty stores of the same
                 kind as ``store``; used by sub_map() and copy(). If omitted
                 it is resolved from the store's type (see register_store()).

    Raises:
        InvalidArgumentError: If store is None or not a mapping.
    """

    def __init__(
        self,
        store: _typing.Any = _contract.MISSING,
        *,
        factory: _types.StoreFactory | None = None,
    ) -> None:
        super().__init__()
        if store is _contract.MISSING:
            default_factory = _stores.named_factory(config.get_settings().default_store)
            store = default_factory()
            if factory is None:
                factory = default_factory
        elif store is None:
            raise errors.InvalidArgumentError("SMap store must not be None")
        elif not isinstance(store, _abc.Mapping):
            raise errors.InvalidArgumentError(
                f"SMap store must be a Mapping, got {type(store).__name__}"
            )
        self._store: _types.Store = store
        self._factory = factory

    @classmethod
    def of(cls, *items: _typing.Any) -> SMap:
        """
        Build a map from alternating keys and values.

        Entries go through add(), so None values are skipped:
            >>> SMap.of("key1", 1, "key2", None)
            SMap({'key1': 1})

        Raises:
            InvalidArgumentError: If an odd number of arguments is given.
        """
        if len(items) % 2:
            raise errors.InvalidArgumentError(
                f"SMap.of() takes key/value pairs, got {len(items)} arguments"
            )
        result = cls()
        for index in range(0, len(items), 2):
            result.add(items[index], items[index + 1])
        return result

    @property
    def store(self) -> _types.Store:
        """The backing store (shared, not a copy)."""
        return self._store

    # =========================================================================
    # SteroidMap hooks
    # =========================================================================

    def new_store(self) -> _types.Store:
        return _stores.new_store_like(
            self._store,
            explicit=self._factory,
            auto_construct=config.get_settings().auto_construct_stores,
        )

    def wrap(self, store: _types.Source) -> SMap:
        return type(self)(store)

    def derive(self, store: _types.Store) -> SMap:
        # the derived store came from this map's factory, so keep using it
        return type(self)(store, factory=self._factory)

    # =========================================================================
    # Mapping protocol, delegated to the store
    # =========================================================================

    def __getitem__(self, key: str) -> _typing.Any:
        return self._store[key]

    def __setitem__(self, key: str, value: _typing.Any) -> None:
        self._store[key] = value

    def __delitem__(self, key: str) -> None:
        del self._store[key]

    def __iter__(self) -> _typing.Iterator[str]:
        return iter(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store

    def get(self, key: str, default: _typing.Any = None) -> _typing.Any:
        return self._store.get(key, default)

    def clear(self) -> None:
        self._store.clear()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SMap):
            other = other._store
        if isinstance(other, _abc.Mapping):
            return dict(self._store.items()) == dict(other.items())
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self._store)!r})"
