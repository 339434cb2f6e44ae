"""Configuration models for hdlbox."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from hdlbox.mounts import MountSpec

DEFAULT_IMAGE_NAME = "aoc2026_env"
DEFAULT_CONTAINER_NAME = "aoc2026_container"
DEFAULT_HOSTNAME = "aoc2026"


@dataclass(frozen=True)
class Configuration:
    """Resolved settings for a single hdlbox invocation.

    Attributes:
        image_name: Image to build or instantiate.
        container_name: Name of the managed container.
        username: Account used inside the container.
        hostname: Hostname given to a newly created container.
        mounts: Parsed mounts, in command-line order. Empty means
            "use the default projects mount" when creating.
    """

    image_name: str = DEFAULT_IMAGE_NAME
    container_name: str = DEFAULT_CONTAINER_NAME
    username: str = ""
    hostname: str = DEFAULT_HOSTNAME
    mounts: tuple[MountSpec, ...] = ()

    @property
    def home(self) -> str:
        """Home directory of the container user."""
        return f"/home/{self.username}"


@dataclass
class ProjectConfig:
    """Values read from a workspace hdlbox.json.

    Every field is optional; None means "not set in the file".
    """

    config_file: Path | None = None
    image_name: str | None = None
    container_name: str | None = None
    username: str | None = None
    hostname: str | None = None
    mounts: list[str] = field(default_factory=list)
