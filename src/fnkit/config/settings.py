"""Unified settings — init kwargs, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — explicit overrides from the caller
  2. Env vars     — ``FNKIT_*`` prefix, ``__`` for nested sections
  3. TOML file    — optional ``fnkit.toml`` passed to :meth:`FnkitSettings.load`
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

from fnkit.config.logging import configure_logging
from fnkit.config.models import LoggingConfig

CONFIG_FILENAME = "fnkit.toml"


class ConfigError(ValueError):
    """The settings file could not be read or parsed."""


class FnkitSettings(BaseSettings):
    """Unified, frozen settings for fnkit.

    Attributes:
        config_path: TOML file the settings were loaded from, if any.
        logging: Logging section (verbosity and renderer).
    """

    model_config = SettingsConfigDict(
        frozen=True,
        env_prefix="FNKIT_",
        env_nested_delimiter="__",
    )

    config_path: Path | None = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Read the bound ``toml_file`` (if any) below env vars."""
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls),
        )

    @classmethod
    def load(
        cls,
        *,
        config_path: str | Path | None = None,
        **overrides: Any,
    ) -> FnkitSettings:
        """Construct settings, reading *config_path* when it names an existing file.

        *overrides* take priority over both env vars and the TOML file.

        Raises:
            ConfigError: If the TOML file cannot be parsed.
        """
        toml_path = Path(config_path) if config_path else None
        if toml_path is not None and not toml_path.is_file():
            toml_path = None

        settings_cls = cls if toml_path is None else cls._bound_to(toml_path)
        try:
            return settings_cls(config_path=toml_path, **overrides)
        except tomllib.TOMLDecodeError as exc:
            msg = f"Invalid TOML in {toml_path}: {exc}"
            raise ConfigError(msg) from exc

    @classmethod
    def _bound_to(cls, toml_path: Path) -> type[FnkitSettings]:
        """Subclass whose ``model_config`` points the TOML source at *toml_path*."""
        return type(
            cls.__name__,
            (cls,),
            {
                "__module__": cls.__module__,
                "model_config": SettingsConfigDict(**{**cls.model_config, "toml_file": toml_path}),
            },
        )

    def configure_logging(self) -> None:
        """Apply the ``[logging]`` section via :func:`configure_logging`."""
        configure_logging(self.logging)
