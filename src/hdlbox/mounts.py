"""Volume mount resolution for hdlbox containers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from hdlbox.errors import InvalidArgument, MountError

DEFAULT_PROJECTS_DIR = "projects"


@dataclass(frozen=True)
class MountSpec:
    """A host path exposed inside the container.

    Attributes:
        host_path: Absolute path on the host.
        container_path: Path inside the container. May carry engine
            options after a further colon (e.g. "/data:ro").
    """

    host_path: Path
    container_path: str

    def as_volume(self) -> str:
        """Render as the engine's ``-v`` value."""
        return f"{self.host_path}:{self.container_path}"


def parse_mount(raw: str, cwd: Path) -> MountSpec:
    """Parse a ``HOST[:CONTAINER]`` mount argument.

    The first colon separates the host path from the container path. When
    there is no container part, the container path is the absolute host
    path. Relative host paths are anchored at ``cwd``; symlinks are left
    alone.

    Args:
        raw: Mount argument as given on the command line.
        cwd: Directory relative host paths are resolved against.

    Returns:
        The parsed mount. Nothing is created on disk.

    Raises:
        InvalidArgument: If the host part is empty.
    """
    host, sep, container = raw.partition(":")
    if not host:
        raise InvalidArgument(f"Invalid mount '{raw}': host path is empty")

    host_path = Path(host)
    if not host_path.is_absolute():
        host_path = cwd / host_path

    if not sep or not container:
        container = str(host_path)

    return MountSpec(host_path=host_path, container_path=container)


def parse_mounts(raw_mounts: Iterable[str], cwd: Path) -> tuple[MountSpec, ...]:
    """Parse mount arguments, preserving their order."""
    return tuple(parse_mount(raw, cwd) for raw in raw_mounts)


def default_mount(username: str, cwd: Path) -> MountSpec:
    """The mount used when none is given: ``<cwd>/projects``."""
    return MountSpec(
        host_path=cwd / DEFAULT_PROJECTS_DIR,
        container_path=f"/home/{username}/{DEFAULT_PROJECTS_DIR}",
    )


def ensure_host_path(mount: MountSpec) -> bool:
    """Create the host side of a mount as a directory if it is missing.

    Returns:
        True if the directory was created.

    Raises:
        MountError: If the directory cannot be created, e.g. a parent is a
            regular file or a broken symlink sits at the path.
    """
    if mount.host_path.exists():
        return False
    try:
        mount.host_path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise MountError(f"Cannot create mount source {mount.host_path}: {e}") from e
    return True


def prepare_mounts(
    mounts: Iterable[MountSpec],
    username: str,
    cwd: Path,
) -> list[MountSpec]:
    """Finalize mounts for container creation.

    Falls back to the default projects mount when no mounts are given and
    creates any missing host directory, so creation never fails on a
    missing bind source.

    Args:
        mounts: Parsed mounts from the configuration.
        username: User inside the container (for the default mount).
        cwd: Working directory for the default mount.

    Returns:
        Mounts ready to hand to the engine.

    Raises:
        MountError: If a host directory cannot be created.
    """
    resolved = list(mounts) or [default_mount(username, cwd)]
    for mount in resolved:
        ensure_host_path(mount)
    return resolved
