"""Utility helpers for configuration loading and HTTP."""

from .config_loader import ConfigError, ConfigIOError, ConfigParseError, default_config_path, load_settings
from .http_client import HttpClient

__all__ = [
    "ConfigError",
    "ConfigIOError",
    "ConfigParseError",
    "default_config_path",
    "load_settings",
    "HttpClient",
]
