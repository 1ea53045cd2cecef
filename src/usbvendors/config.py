"""Settings for locating the registry and for CLI logging.

Sources, highest priority first: keyword arguments to ``Settings(...)``,
``USBVENDORS__``-prefixed environment variables (``__`` separates nesting,
e.g. ``USBVENDORS__SOURCE__PATH=/usr/share/hwdata/usb.ids``), then an
optional ``usbvendors.yaml`` in the working directory or the platform config
directory. Anything left unset keeps its default.
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_CONFIG_DIR = platformdirs.user_config_dir("usbvendors")
_CONFIG_FILENAME = "usbvendors.yaml"


def _find_config_file() -> str | None:
    """Working-directory file first, then the per-user one."""
    for directory in (Path(), Path(_DEFAULT_CONFIG_DIR)):
        candidate = directory / _CONFIG_FILENAME
        if candidate.is_file():
            return str(candidate)
    return None


class SourceSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # None means the usb.ids bundled with the package
    path: str | None = None
    encoding: str = "utf-8"
    errors: Literal["strict", "replace", "ignore"] = "replace"

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"Unknown encoding: {v!r}") from None
        return v


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    format: Literal["json", "text"] = "text"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="USBVENDORS__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    source: SourceSettings = SourceSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # No .env or secrets-dir support; the YAML file sits below the environment
        yaml_settings = YamlConfigSettingsSource(settings_cls)
        return init_settings, env_settings, yaml_settings
