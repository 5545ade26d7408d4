"""
Store factories: how a SteroidMap gets a fresh, empty store "of the same kind".

sub_map() and copy() need an empty store like the one a map already wraps.
Instead of reflecting on the store's class, a factory is resolved in order:

1. the factory given explicitly when the map was constructed
2. a factory registered for the store's exact type
3. calling the store's type with no arguments, if auto-construction is
   enabled in Settings
4. otherwise BackingStoreConstructionError

Named factories also select the default store for ``SMap()``.
"""

from __future__ import annotations

import collections as _collections
import logging as _logging
import threading as _threading
import typing as _typing

import steroids.errors as errors
import steroids.steroid_map._types as _types

_logger = _logging.getLogger(__name__)

_registry_lock = _threading.Lock()

# name → factory
_named: dict[str, _types.StoreFactory] = {
    "dict": dict,
    "ordered_dict": _collections.OrderedDict,
}

# exact store type → factory
_by_type: dict[type, _types.StoreFactory] = {
    dict: dict,
    _collections.OrderedDict: _collections.OrderedDict,
}


def register_store(
    name: str,
    factory: _types.StoreFactory,
    *,
    kind: type | None = None,
) -> None:
    """
    Register a named store factory.

    Args:
        name: Name usable as ``Settings.default_store``.
        factory: Zero-argument callable returning an empty store.
        kind: Store type the factory builds. When given, maps wrapping a
              store of exactly this type use the factory for sub_map()/copy().

    Raises:
        InvalidArgumentError: If factory is not callable.
    """
    if not callable(factory):
        raise errors.InvalidArgumentError(f"Store factory for {name!r} is not callable")
    with _registry_lock:
        _named[name] = factory
        if kind is not None:
            _by_type[kind] = factory
    _logger.debug("Registered store factory %r (kind=%s)", name, kind)


def unregister_store(name: str) -> None:
    """Remove a named factory and any type mapping pointing at it."""
    with _registry_lock:
        factory = _named.pop(name, None)
        if factory is None:
            return
        for kind in [k for k, f in _by_type.items() if f is factory]:
            del _by_type[kind]


def store_names() -> list[str]:
    """Return the registered factory names, sorted."""
    with _registry_lock:
        return sorted(_named)


def named_factory(name: str) -> _types.StoreFactory:
    """
    Look up a factory by name.

    Raises:
        InvalidArgumentError: If no factory has that name.
    """
    with _registry_lock:
        factory = _named.get(name)
    if factory is None:
        raise errors.InvalidArgumentError(
            f"Unknown store factory {name!r}; registered: {', '.join(store_names())}"
        )
    return factory


def same_kind_factory(
    store: _types.Store,
    *,
    explicit: _types.StoreFactory | None = None,
    auto_construct: bool = True,
) -> _types.StoreFactory:
    """
    Resolve a factory producing empty stores of the same kind as ``store``.

    Args:
        store: The existing store.
        explicit: Factory supplied by whoever built the map; wins if given.
        auto_construct: Whether calling ``type(store)()`` is allowed when no
                        factory is registered for the type.

    Returns:
        A zero-argument callable. Calling it may still raise
        BackingStoreConstructionError (see new_store_like()).

    Raises:
        BackingStoreConstructionError: If no factory can be resolved.
    """
    if explicit is not None:
        return explicit

    store_type = type(store)
    with _registry_lock:
        factory = _by_type.get(store_type)
    if factory is not None:
        return factory

    if not auto_construct:
        raise errors.BackingStoreConstructionError(
            store_type, "no factory is registered and auto-construction is disabled"
        )
    _logger.debug("No registered factory for %s, constructing by type", store_type)
    return _typing.cast(_types.StoreFactory, store_type)


def new_store_like(
    store: _types.Store,
    *,
    explicit: _types.StoreFactory | None = None,
    auto_construct: bool = True,
) -> _types.Store:
    """
    Build an empty store of the same kind as ``store``.

    Raises:
        BackingStoreConstructionError: If no factory resolves, the factory
            fails, or it returns something that is not an empty mutable mapping.
    """
    factory = same_kind_factory(store, explicit=explicit, auto_construct=auto_construct)
    try:
        created = factory()
    except Exception as e:
        raise errors.BackingStoreConstructionError(type(store), f"factory raised {e!r}") from e

    if not isinstance(created, _typing.MutableMapping):
        raise errors.BackingStoreConstructionError(
            type(store), f"factory returned {type(created).__name__}, not a mutable mapping"
        )
    if len(created) != 0:
        raise errors.BackingStoreConstructionError(
            type(store), "factory returned a non-empty store"
        )
    return created
