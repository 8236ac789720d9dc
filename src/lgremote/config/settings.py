"""Configuration management for lgremote.

Loads the device registry and protocol settings from a YAML or JSON
configuration file, with environment variable overrides. Supports .env
files.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from lgremote.domain.models import KeyCodes
from lgremote.protocol.endpoints import DEFAULT_BASE_PATH, DEFAULT_PORT

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("tv_config.json")

# Directory and file name of the configuration, as separate variables
CONFIG_DIR_ENV = "LG_REMOTE_PATH"
CONFIG_FILE_ENV = "LG_REMOTE_CONFIG_FILE"


class DeviceConfig(BaseModel):
    """One registry record. Accepts the ``ip``/``key`` spellings too."""

    name: str = Field(min_length=1)
    address: str = Field(
        min_length=1, validation_alias=AliasChoices("address", "ip")
    )
    shared_secret: str = Field(
        default="", validation_alias=AliasChoices("shared_secret", "key")
    )
    key_codes: KeyCodes | None = Field(default=None)


class TransportConfig(BaseModel):
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)
    base_path: str = Field(default=DEFAULT_BASE_PATH)
    timeout: float = Field(default=10.0, gt=0)


class ControlConfig(BaseModel):
    settle_delay: float = Field(
        default=1.0, ge=0, description="Pause between the 3D key and its confirmation"
    )
    parallel: bool = Field(default=True, description="Fan out to all devices concurrently")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO")
    format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    file: str | None = Field(default=None)


class Settings(BaseSettings):
    """Root configuration for lgremote.

    Loads from a YAML/JSON file and supports environment variable
    overrides. Reads .env files automatically.
    """

    model_config = {
        "env_prefix": "LGREMOTE_",
        "env_nested_delimiter": "__",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    transport: TransportConfig = Field(default_factory=TransportConfig)
    control: ControlConfig = Field(default_factory=ControlConfig)
    keys: KeyCodes = Field(default_factory=KeyCodes)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    devices: list[DeviceConfig] = Field(default_factory=list)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # File contents arrive as init kwargs and rank below the environment
        return env_settings, dotenv_settings, init_settings, file_secret_settings


def resolve_config_path(config_path: Path | str | None = None) -> Path:
    """Pick the configuration file to read.

    Priority: explicit path > LG_REMOTE_PATH + LG_REMOTE_CONFIG_FILE > default
    """
    if config_path:
        return Path(config_path)
    config_dir = os.environ.get(CONFIG_DIR_ENV, "")
    config_file = os.environ.get(CONFIG_FILE_ENV, "")
    if config_dir and config_file:
        return Path(config_dir) / config_file
    return DEFAULT_CONFIG_PATH.absolute()


def load_settings(config_path: Path | str | None = None) -> Settings:
    """Load settings from the configuration file + .env + environment variables.

    Priority: env vars > .env file > configuration file > defaults

    The file is parsed as YAML, which also accepts JSON registry files.
    """
    path = resolve_config_path(config_path)

    file_data = {}
    if path.exists():
        with open(path) as f:
            file_data = yaml.safe_load(f) or {}
        logger.info("Loaded configuration from %s", path)
    else:
        logger.warning("Config file %s not found, using defaults + env vars", path)

    _apply_legacy_keys(file_data)

    return Settings(**file_data)


def _apply_legacy_keys(file_data: dict) -> None:
    """Accept the ``TVs`` list used by older registry files."""
    for legacy in ("TVs", "tvs"):
        if legacy in file_data:
            devices = file_data.pop(legacy)
            file_data.setdefault("devices", devices)
