"""
SteroidMap: fluent, typed navigation over nested mappings.

Wrap a loosely-structured payload (parsed JSON, YAML, config dicts) and read
it without repeated casting and None checks:

Example:
    >>> from steroids.steroid_map import SMap
    >>> person = SMap({"name": "John", "friends": [{"name": "Jane"}]})
    >>> [friend.s("name") for friend in person.maps("friends")]
    ['Jane']
    >>> person.i("age", 30)
    30
"""

from steroids.steroid_map._contract import MISSING, SteroidMap
from steroids.steroid_map._smap import SMap
from steroids.steroid_map._stores import (
    named_factory,
    new_store_like,
    register_store,
    store_names,
    unregister_store,
)
from steroids.steroid_map._views import CollectionView, SequenceView, SetView

__all__ = [
    "MISSING",
    "CollectionView",
    "SMap",
    "SequenceView",
    "SetView",
    "SteroidMap",
    "named_factory",
    "new_store_like",
    "register_store",
    "store_names",
    "unregister_store",
]
