"""Build the per-invocation Configuration from flags and defaults."""

from __future__ import annotations

import getpass
from collections.abc import Sequence
from pathlib import Path

from hdlbox.config.detector import detect_config
from hdlbox.config.models import (
    DEFAULT_CONTAINER_NAME,
    DEFAULT_HOSTNAME,
    DEFAULT_IMAGE_NAME,
    Configuration,
    ProjectConfig,
)
from hdlbox.config.parser import parse_config
from hdlbox.errors import InvalidArgument
from hdlbox.mounts import parse_mounts


def load_project_config(workspace: Path) -> ProjectConfig:
    """Load hdlbox.json from the workspace, or an empty config if absent."""
    config_file = detect_config(workspace)
    if config_file is None:
        return ProjectConfig()
    return parse_config(config_file)


def _pick(field: str, explicit: str | None, project: str | None, default: str) -> str:
    value = explicit if explicit is not None else project
    if value is None:
        value = default
    if not value.strip():
        raise InvalidArgument(f"{field} must not be empty")
    return value


def resolve_config(
    image_name: str | None = None,
    container_name: str | None = None,
    username: str | None = None,
    hostname: str | None = None,
    mounts: Sequence[str] | None = None,
    project: ProjectConfig | None = None,
    cwd: Path | None = None,
) -> Configuration:
    """Overlay explicit values on project-file values on built-in defaults.

    Args:
        image_name: Value of -i/--image_name, if given.
        container_name: Value of -c/--cont_name, if given.
        username: Value of -u/--username, if given.
        hostname: Value of -h/--hostname, if given.
        mounts: Values of -m/--mount, in order. Command-line mounts replace
            project-file mounts entirely.
        project: Parsed project file (None for no file).
        cwd: Directory relative mount paths are anchored at.

    Returns:
        Immutable configuration for this invocation.

    Raises:
        InvalidArgument: If a name is empty, a mount is malformed or no
            username is given and none can be determined.
    """
    project = project or ProjectConfig()
    cwd = cwd or Path.cwd()

    raw_mounts = list(mounts) if mounts else project.mounts
    if username is None and project.username is None:
        try:
            username = getpass.getuser()
        except (OSError, KeyError) as e:
            # No passwd entry for the uid and no USER/LOGNAME set.
            raise InvalidArgument("Cannot determine username; pass -u") from e

    return Configuration(
        image_name=_pick("Image name", image_name, project.image_name, DEFAULT_IMAGE_NAME),
        container_name=_pick(
            "Container name", container_name, project.container_name, DEFAULT_CONTAINER_NAME
        ),
        username=_pick("Username", username, project.username, ""),
        hostname=_pick("Hostname", hostname, project.hostname, DEFAULT_HOSTNAME),
        mounts=parse_mounts(raw_mounts, cwd),
    )
