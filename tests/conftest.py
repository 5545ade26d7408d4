"""
Shared pytest fixtures for steroids tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import typing as _typing

import pytest as _pytest

import steroids.config as config
import steroids.steroid_map as steroid_map

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "STEROIDS_DEFAULT_STORE",
    "STEROIDS_AUTO_CONSTRUCT_STORES",
    "STEROIDS_CONFIG_FILE",
]


@_pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: _pytest.MonkeyPatch) -> _typing.Iterator[None]:
    """
    Isolate every test from STEROIDS_* variables and cached Settings.

    Tests that need a setting use monkeypatch.setenv() and then
    config.reset_settings() (or the ``settings_env`` fixture).
    """
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)
    config.reset_settings()
    yield
    config.reset_settings()


@_pytest.fixture
def settings_env(monkeypatch: _pytest.MonkeyPatch) -> _typing.Callable[..., config.Settings]:
    """
    Apply STEROIDS_* environment variables and reload Settings.

    Usage:
        def test_something(settings_env):
            settings_env(DEFAULT_STORE="ordered_dict")
    """

    def apply(**values: str) -> config.Settings:
        for name, value in values.items():
            monkeypatch.setenv(f"STEROIDS_{name}", value)
        config.reset_settings()
        return config.get_settings()

    return apply


@_pytest.fixture
def registered_store() -> _typing.Iterator[_typing.Callable[..., None]]:
    """
    Register store factories for one test, unregistering them afterwards.

    Usage:
        def test_something(registered_store):
            registered_store("mine", MyStore, kind=MyStore)
    """
    names: list[str] = []

    def register(name: str, factory: _typing.Any, *, kind: type | None = None) -> None:
        steroid_map.register_store(name, factory, kind=kind)
        names.append(name)

    yield register

    for name in names:
        steroid_map.unregister_store(name)


@_pytest.fixture
def clean_env() -> dict[str, str]:
    """Return environment dict with steroids keys removed."""
    return {k: v for k, v in _os.environ.items() if k not in ENV_KEYS_TO_CLEAR}
