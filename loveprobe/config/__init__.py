#!/usr/bin/env python3
# -*-coding: utf-8-*-
"""loveprobe - Configuration Package

Settings are read from a JSON file (the bundled ``config.json`` unless
``LOVEPROBE_CONFIG`` or an explicit path says otherwise), checked against
``config-schema.json`` and then validated into pydantic models.
"""

from typing import Optional

from .io import get_config_path, load_config, save_config
from .models import ConfigModel, LoggingConfig, ProjectLayoutConfig, validate_config
from .schema import validate_config_schema


def load_settings(config_path: Optional[str] = None) -> ConfigModel:
    """Load and validate configuration.

    An explicit path that cannot be read raises
    :class:`loveprobe.exceptions.ConfigurationError`; a missing implicit file
    yields the defaults. Invalid values raise
    :class:`loveprobe.exceptions.ValidationError`.
    """
    return validate_config(load_config(config_path))


__all__ = [
    "ConfigModel",
    "LoggingConfig",
    "ProjectLayoutConfig",
    "get_config_path",
    "load_config",
    "load_settings",
    "save_config",
    "validate_config",
    "validate_config_schema",
]
