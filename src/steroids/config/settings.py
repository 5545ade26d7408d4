"""
Settings configuration using pydantic-settings.

Loads configuration from (highest precedence first):
1. Constructor arguments
2. Environment variables with STEROIDS_ prefix
3. A YAML file named by STEROIDS_CONFIG_FILE (see sources.py)
4. Field defaults

  STEROIDS_DEFAULT_STORE=ordered_dict
  STEROIDS_AUTO_CONSTRUCT_STORES=false
"""

import functools as _functools

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import steroids.config.sources as sources
import steroids.steroid_map._stores as _stores


class Settings(_pydantic_settings.BaseSettings):
    """
    steroids configuration settings.

    All settings can be overridden via environment variables with the
    STEROIDS_ prefix. Unknown keys are rejected so typos in a config file
    surface immediately.
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix="STEROIDS_",
        env_file=None,
        env_nested_delimiter="__",
        extra="forbid",
    )

    default_store: str = _pydantic.Field(
        default="dict",
        description="Name of the registered store factory SMap() uses when no store is given",
    )

    auto_construct_stores: bool = _pydantic.Field(
        default=True,
        description=(
            "Whether sub_map()/copy() may build a same-kind store by calling the "
            "store's type with no arguments when no factory is registered for it"
        ),
    )

    @_pydantic.field_validator("default_store")
    @classmethod
    def _check_default_store(cls, value: str) -> str:
        names = _stores.store_names()
        if value not in names:
            raise ValueError(
                f"unknown store factory {value!r}; registered: {', '.join(names)}"
            )
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings, constructor args (highest)
        2. env_settings (STEROIDS_* env vars)
        3. yaml file (STEROIDS_CONFIG_FILE)
        4. field defaults (lowest)
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.YamlFileSettingsSource(settings_cls),
            file_secret_settings,
        )


@_functools.lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings, loading them on first use."""
    return Settings()


def reset_settings() -> None:
    """Forget the cached Settings so the next get_settings() reloads them."""
    get_settings.cache_clear()
