"""
Exception types raised by steroids.

Every error derives from SteroidsError and from the builtin exception a
caller would naturally catch for the same failure, so existing
``except TypeError`` / ``except KeyError`` handlers keep working:

- TypeMismatchError (TypeError): stored value has the wrong runtime type
- InvalidNavigationError (TypeMismatchError): value cannot be navigated into
- MissingValueError (KeyError): primitive accessor hit an absent key
- InvalidArgumentError (ValueError): bad construction argument
- BackingStoreConstructionError (RuntimeError): no same-kind store available
- PayloadError (ValueError): YAML/JSON payload could not be turned into a map
- ConfigFileError: settings file could not be read
"""

import pathlib as _pathlib
import typing as _typing


class SteroidsError(Exception):
    """Base class for all steroids errors."""

    pass


class TypeMismatchError(SteroidsError, TypeError):
    """A stored value is not of the requested kind."""

    def __init__(
        self,
        key: _typing.Any,
        expected: str,
        value: _typing.Any,
        message: str | None = None,
    ) -> None:
        self.key = key
        self.expected = expected
        self.value = value
        if message is None:
            message = f"Value for key {key!r} is {type(value).__name__}, expected {expected}"
        super().__init__(message)


class InvalidNavigationError(TypeMismatchError):
    """A value is neither a mapping nor a SteroidMap, so it cannot be wrapped."""

    def __init__(self, value: _typing.Any, key: _typing.Any = None) -> None:
        super().__init__(
            key,
            "a mapping",
            value,
            message=f"{value!r} is neither a Mapping nor a SteroidMap",
        )


class MissingValueError(SteroidsError, KeyError):
    """A non-defaulted primitive accessor was called on a key with no value."""

    def __init__(self, key: _typing.Any, expected: str) -> None:
        self.key = key
        self.expected = expected
        super().__init__(key)

    def __str__(self) -> str:
        # KeyError.__str__ would only repr the key
        return f"No value for key {self.key!r} (expected {self.expected})"


class InvalidArgumentError(SteroidsError, ValueError):
    """A constructor or helper received an unusable argument."""

    pass


class BackingStoreConstructionError(SteroidsError, RuntimeError):
    """An empty store of the same kind as an existing one could not be built."""

    def __init__(self, store_type: type, reason: str) -> None:
        self.store_type = store_type
        super().__init__(
            f"Cannot create a new {store_type.__module__}.{store_type.__qualname__}: "
            f"{reason}. Pass factory= when constructing the map, register a factory "
            f"with register_store(), or call sub_map(..., store=...) with your own "
            f"empty store"
        )


class PayloadError(SteroidsError, ValueError):
    """A YAML or JSON payload could not be loaded as a map."""

    def __init__(self, message: str, source: str | None = None) -> None:
        self.source = source
        if source is not None:
            message = f"{source}: {message}"
        super().__init__(message)


class ConfigFileError(SteroidsError):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")
