"""Project configuration file parsing for hdlbox."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from hdlbox.config.models import ProjectConfig
from hdlbox.console import print_warning
from hdlbox.errors import ConfigError

_STRING_KEYS = ("image_name", "container_name", "username", "hostname")


def parse_config(config_file: Path) -> ProjectConfig:
    """Parse an hdlbox.json file.

    Unknown keys are reported on stderr and otherwise ignored.

    Args:
        config_file: Path to the configuration file.

    Returns:
        Parsed project configuration.

    Raises:
        ConfigError: If the file is unreadable, not a JSON object, or a
            value has the wrong type.
    """
    try:
        data: Any = json.loads(config_file.read_text())
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {config_file}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{config_file} must contain a JSON object")

    config = ProjectConfig(config_file=config_file)

    for key in _STRING_KEYS:
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' in {config_file} must be a string")
        setattr(config, key, value)

    mounts = data.get("mounts", [])
    if not isinstance(mounts, list) or not all(isinstance(m, str) for m in mounts):
        raise ConfigError(f"'mounts' in {config_file} must be a list of strings")
    config.mounts = list(mounts)

    unknown = sorted(set(data) - set(_STRING_KEYS) - {"mounts"})
    for key in unknown:
        print_warning(f"Ignoring unknown property '{key}' in {config_file}")

    return config
