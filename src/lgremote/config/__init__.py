"""Configuration management for lgremote.

Loads and validates the device registry and protocol settings with
Pydantic models. Supports environment variable overrides.
"""

from lgremote.config.settings import DeviceConfig, Settings, load_settings

__all__ = ["DeviceConfig", "Settings", "load_settings"]
