"""Config I/O utilities."""

from __future__ import annotations

import json
import os
import logging
from typing import Any, Dict, Optional

from ..exceptions import ConfigurationError
from .schema import validate_config_schema

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "LOVEPROBE_CONFIG"


def get_config_path() -> str:
    override = os.getenv(CONFIG_ENV_VAR)
    if override:
        return override
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    return os.path.join(base_dir, "config.json")


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Read a JSON config file.

    An explicit ``config_path`` that cannot be read raises
    :class:`ConfigurationError`; the implicit bundled or ``LOVEPROBE_CONFIG``
    file falls back to an empty config with a warning.
    """
    explicit = config_path is not None
    if config_path is None:
        config_path = get_config_path()
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as exc:
        if explicit:
            raise ConfigurationError(
                f"Could not load config {config_path}: {exc}", "CONFIG_UNREADABLE", file_path=config_path
            ) from exc
        logger.warning("Could not load config %s: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        if explicit:
            raise ConfigurationError(
                f"Config {config_path} is not a JSON object", "CONFIG_UNREADABLE", file_path=config_path
            )
        logger.warning("Config %s is not a JSON object, ignoring it", config_path)
        return {}
    ok, error = validate_config_schema(data)
    if not ok:
        logger.warning("Config schema validation failed: %s", error)
    return data


def save_config(config_data: Dict[str, Any], config_path: Optional[str] = None) -> bool:
    if config_path is None:
        config_path = get_config_path()
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(dict(config_data or {}), f, indent=2)
        return True
    except OSError as exc:
        logger.error("Could not save config %s: %s", config_path, exc)
        return False
