"""Loads appsettings.json into typed settings."""

from __future__ import annotations

import logging
import os
from typing import Optional

from pydantic import ValidationError

from ..models import AppSettings

CONFIG_RELATIVE_PATH = os.path.join("Data", "Configs", "appsettings.json")


class ConfigError(Exception):
    """Raised when the configuration cannot be loaded."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path


class ConfigIOError(ConfigError):
    """The configuration file is missing or unreadable."""


class ConfigParseError(ConfigError):
    """The configuration file is not valid JSON or misses required fields."""


def default_config_path(base: Optional[str] = None) -> str:
    return os.path.join(base or os.getcwd(), CONFIG_RELATIVE_PATH)


def load_settings(path: str) -> AppSettings:
    logging.info("Loading settings from %s", path)
    try:
        # utf-8-sig: appsettings.json files are often saved with a BOM
        with open(path, "r", encoding="utf-8-sig") as handle:
            raw = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logging.error("Unable to read settings file %s: %s", path, exc)
        raise ConfigIOError(f"Unable to read settings file {path}: {exc}", path) from exc

    try:
        settings = AppSettings.model_validate_json(raw)
    except ValidationError as exc:
        logging.error("Invalid settings file %s: %s", path, exc)
        raise ConfigParseError(f"Invalid settings file {path}: {exc}", path) from exc

    logging.info("Settings loaded (environment=%s)", settings.environment)
    return settings
