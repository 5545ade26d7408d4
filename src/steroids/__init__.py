"""
steroids - fluent, typed navigation over loosely-structured nested maps.

    >>> import steroids
    >>> person = steroids.SMap.of("name", "John", "address", {"number": 1})
    >>> person.map("address").i("number")
    1
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("steroids")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)

from steroids.config import Settings, get_settings, reset_settings  # noqa: E402
from steroids.errors import (  # noqa: E402
    BackingStoreConstructionError,
    ConfigFileError,
    InvalidArgumentError,
    InvalidNavigationError,
    MissingValueError,
    PayloadError,
    SteroidsError,
    TypeMismatchError,
)
from steroids.loaders import load, loads_json, loads_yaml  # noqa: E402
from steroids.steroid_map import (  # noqa: E402
    SMap,
    SteroidMap,
    register_store,
    unregister_store,
)

__all__ = [
    "__version__",
    "__version_info__",
    "BackingStoreConstructionError",
    "ConfigFileError",
    "InvalidArgumentError",
    "InvalidNavigationError",
    "MissingValueError",
    "PayloadError",
    "SMap",
    "Settings",
    "SteroidMap",
    "SteroidsError",
    "TypeMismatchError",
    "get_settings",
    "load",
    "loads_json",
    "loads_yaml",
    "register_store",
    "reset_settings",
    "unregister_store",
]
