"""Configuration handling for hdlbox."""

from hdlbox.config.detector import detect_config
from hdlbox.config.models import (
    DEFAULT_CONTAINER_NAME,
    DEFAULT_HOSTNAME,
    DEFAULT_IMAGE_NAME,
    Configuration,
    ProjectConfig,
)
from hdlbox.config.parser import parse_config
from hdlbox.config.resolver import load_project_config, resolve_config
from hdlbox.errors import ConfigError, InvalidArgument

__all__ = [
    "ConfigError",
    "Configuration",
    "DEFAULT_CONTAINER_NAME",
    "DEFAULT_HOSTNAME",
    "DEFAULT_IMAGE_NAME",
    "InvalidArgument",
    "ProjectConfig",
    "detect_config",
    "load_project_config",
    "parse_config",
    "resolve_config",
]
