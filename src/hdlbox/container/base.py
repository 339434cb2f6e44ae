"""Base protocol for container engines."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Protocol

from hdlbox.mounts import MountSpec


class ContainerState(str, Enum):
    """Observed state of a named container."""

    ABSENT = "absent"
    STOPPED = "stopped"
    RUNNING = "running"


class Outcome(str, Enum):
    """What a lifecycle command actually did."""

    STOPPED = "stopped"
    ALREADY_STOPPED = "already_stopped"
    REMOVED = "removed"
    NOT_FOUND = "not_found"
    BUILT = "built"
    SKIPPED = "skipped"


class Engine(Protocol):
    """Container engine interface.

    The lifecycle controller only talks to the engine through these
    operations. Implementations pass straight through to the engine and
    never retry.
    """

    def image_exists(self, name: str) -> bool:
        """Check whether an image with this name is present."""
        ...

    def container_status(self, name: str) -> ContainerState:
        """Query the current state of a container."""
        ...

    def create_and_start(
        self,
        image: str,
        name: str,
        hostname: str,
        env: dict[str, str],
        mounts: Sequence[MountSpec],
    ) -> None:
        """Create a container and start it detached."""
        ...

    def exec_interactive(
        self,
        name: str,
        user: str,
        command: Sequence[str],
        workdir: str | None = None,
    ) -> int:
        """Run a command in a running container with a terminal attached.

        Returns:
            Exit code of the command.
        """
        ...

    def start(self, name: str) -> None:
        """Start a stopped container."""
        ...

    def stop(self, name: str) -> None:
        """Stop a running container."""
        ...

    def remove_container(self, name: str) -> None:
        """Remove a stopped container."""
        ...

    def remove_image(self, name: str) -> None:
        """Remove an image."""
        ...

    def build_image(
        self,
        tag: str,
        dockerfile: Path,
        context: Path,
        build_args: dict[str, str] | None = None,
        no_cache: bool = False,
    ) -> None:
        """Build an image from a Dockerfile."""
        ...
