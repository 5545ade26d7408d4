"""Custom pydantic-settings source for steroids configuration.

YamlFileSettingsSource reads settings from a YAML file named by the
STEROIDS_CONFIG_FILE environment variable (or passed explicitly). The file
may hold the settings at the top level or under a ``steroids:`` section, so
steroids can share an application's existing config file. Without a
``steroids:`` key every top-level key is read as a setting, so such a file
must hold only steroids settings:

    # app.yaml
    database:
      url: postgres://...
    steroids:
      default_store: ordered_dict

No file configured means no settings from this source. A file that was
configured but cannot be used is an error, never silently ignored.
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings
import yaml as _yaml

import steroids.errors as errors
import steroids.steroid_map as steroid_map

_logger = _logging.getLogger(__name__)

# Environment variable naming the YAML config file
ENV_CONFIG_FILE = "STEROIDS_CONFIG_FILE"

# Section holding steroids settings inside a shared config file
SECTION = "steroids"


def get_config_file_path() -> _pathlib.Path | None:
    """Return the config file named by STEROIDS_CONFIG_FILE, if set."""
    value = _os.environ.get(ENV_CONFIG_FILE)
    if not value:
        return None
    return _pathlib.Path(value).expanduser()


def load_settings_file(path: _pathlib.Path) -> dict[str, _typing.Any]:
    """
    Load the steroids settings from a YAML file.

    Args:
        path: The YAML file.

    Returns:
        The ``steroids:`` section if the document has that key (an empty
        section yields an empty dict), otherwise the whole document. An
        empty file yields an empty dict.

    Raises:
        ConfigFileError: If the file is missing, unreadable, malformed, or
            its top level (or section) is not a mapping.
    """
    if not path.is_file():
        raise errors.ConfigFileError(path, "file not found")

    try:
        content = _yaml.safe_load(path.read_text(encoding="utf-8"))
    except _yaml.YAMLError as e:
        raise errors.ConfigFileError(path, f"invalid YAML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise errors.ConfigFileError(path, f"cannot read file: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise errors.ConfigFileError(
            path, f"top level must be a mapping, got {type(content).__name__}"
        )

    # explicit stores only: SMap() would read Settings while they load
    settings = steroid_map.SMap(content)
    if SECTION in settings:
        try:
            settings = settings.map(SECTION, steroid_map.SMap({}))
        except errors.InvalidNavigationError as e:
            raise errors.ConfigFileError(path, f"'{SECTION}' section must be a mapping") from e

    _logger.debug("Loaded %d steroids settings from %s", len(settings), path)
    return dict(settings)


class YamlFileSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """
    Settings source backed by an optional YAML file.

    Precedence is decided by Settings.settings_customise_sources(); this
    source only sits above the field defaults.
    """

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            config_path: Override path for the config file (for testing).
                If not provided, uses the STEROIDS_CONFIG_FILE env var.
        """
        super().__init__(settings_cls)
        self._config_path = config_path if config_path is not None else get_config_file_path()
        self._data = {} if self._config_path is None else load_settings_file(self._config_path)

    @property
    def config_path(self) -> _pathlib.Path | None:
        """The file this source read, if any."""
        return self._config_path

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        return self._data.get(field_name), field_name, False

    def __call__(self) -> dict[str, _typing.Any]:
        # Unknown keys are passed through so Settings can reject typos
        return dict(self._data)
