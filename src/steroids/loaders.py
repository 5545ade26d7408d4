"""
Load YAML or JSON payloads straight into an SMap.

The decoded document is wrapped by reference, so nested containers stay
plain dicts and lists and are autowrapped on navigation:

    >>> doc = loads_yaml("address:\\n  street: One way\\n")
    >>> doc.map("address").s("street")
    'One way'
"""

import json as _json
import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import yaml as _yaml

import steroids.errors as errors
import steroids.steroid_map as steroid_map

_logger = _logging.getLogger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})


def _wrap_document(document: _typing.Any, source: str | None) -> steroid_map.SMap:
    if not isinstance(document, dict):
        raise errors.PayloadError(
            f"top level must be a mapping, got {type(document).__name__}", source
        )
    return steroid_map.SMap(document)


def loads_yaml(text: str, *, source: str | None = None) -> steroid_map.SMap:
    """
    Decode a YAML document (safe loader) into an SMap.

    Args:
        text: The YAML text.
        source: Name used in error messages (e.g., a file path).

    Raises:
        PayloadError: If the text is not valid YAML or is not a mapping.
    """
    try:
        document = _yaml.safe_load(text)
    except _yaml.YAMLError as e:
        raise errors.PayloadError(f"invalid YAML: {e}", source) from e
    return _wrap_document(document, source)


def loads_json(text: str | bytes, *, source: str | None = None) -> steroid_map.SMap:
    """
    Decode a JSON document into an SMap.

    Raises:
        PayloadError: If the text is not valid JSON or is not an object.
    """
    try:
        document = _json.loads(text)
    except ValueError as e:
        raise errors.PayloadError(f"invalid JSON: {e}", source) from e
    return _wrap_document(document, source)


def load(path: str | _os.PathLike[str]) -> steroid_map.SMap:
    """
    Load a ``.yaml``/``.yml`` or ``.json`` file into an SMap.

    Raises:
        PayloadError: If the suffix is unknown, the file is not UTF-8, or the
            content is unusable.
        OSError: If the file cannot be read.
    """
    path = _pathlib.Path(path)
    suffix = path.suffix.lower()
    if suffix not in YAML_SUFFIXES and suffix not in JSON_SUFFIXES:
        raise errors.PayloadError(f"unsupported file type {suffix or '(none)'!r}", str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise errors.PayloadError(f"invalid UTF-8: {e}", str(path)) from e
    _logger.debug("Loading %s payload from %s", suffix.lstrip("."), path)
    if suffix in YAML_SUFFIXES:
        return loads_yaml(text, source=str(path))
    return loads_json(text, source=str(path))
