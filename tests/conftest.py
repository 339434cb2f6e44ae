"""Shared fixtures for hdlbox unit tests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from hdlbox.container.base import ContainerState
from hdlbox.errors import EngineCommandError
from hdlbox.mounts import MountSpec


@dataclass
class FakeEngine:
    """In-memory container engine.

    Containers map name -> (image, running). Images held by a container
    that hdlbox does not manage can be listed in ``foreign_users``.
    """

    images: set[str] = field(default_factory=set)
    containers: dict[str, tuple[str, bool]] = field(default_factory=dict)
    foreign_users: set[str] = field(default_factory=set)
    calls: list[tuple] = field(default_factory=list)
    builds: list[tuple[str, bool]] = field(default_factory=list)
    created: list[dict] = field(default_factory=list)
    exec_exit_code: int = 0
    binary: str = "docker"

    def image_exists(self, name: str) -> bool:
        self.calls.append(("image_exists", name))
        return name in self.images

    def container_status(self, name: str) -> ContainerState:
        self.calls.append(("container_status", name))
        if name not in self.containers:
            return ContainerState.ABSENT
        _, running = self.containers[name]
        return ContainerState.RUNNING if running else ContainerState.STOPPED

    def create_and_start(
        self,
        image: str,
        name: str,
        hostname: str,
        env: dict[str, str],
        mounts: Sequence[MountSpec],
    ) -> None:
        self.calls.append(("create_and_start", name))
        if name in self.containers:
            raise EngineCommandError(f"Conflict. The container name \"/{name}\" is already in use")
        self.containers[name] = (image, True)
        self.created.append(
            {
                "image": image,
                "name": name,
                "hostname": hostname,
                "env": dict(env),
                "mounts": list(mounts),
            }
        )

    def exec_interactive(
        self,
        name: str,
        user: str,
        command: Sequence[str],
        workdir: str | None = None,
    ) -> int:
        self.calls.append(("exec_interactive", name, user, tuple(command), workdir))
        return self.exec_exit_code

    def start(self, name: str) -> None:
        self.calls.append(("start", name))
        image, _ = self.containers[name]
        self.containers[name] = (image, True)

    def stop(self, name: str) -> None:
        self.calls.append(("stop", name))
        image, _ = self.containers[name]
        self.containers[name] = (image, False)

    def remove_container(self, name: str) -> None:
        self.calls.append(("remove_container", name))
        image, running = self.containers[name]
        if running:
            raise EngineCommandError(f"cannot remove running container {name}")
        del self.containers[name]

    def remove_image(self, name: str) -> None:
        self.calls.append(("remove_image", name))
        in_use = name in self.foreign_users or any(
            image == name for image, _ in self.containers.values()
        )
        if in_use:
            raise EngineCommandError(
                f"conflict: unable to remove repository reference \"{name}\" "
                "(must force) - container is using its referenced image"
            )
        self.images.discard(name)

    def build_image(
        self,
        tag: str,
        dockerfile: Path,
        context: Path,
        build_args: dict[str, str] | None = None,
        no_cache: bool = False,
    ) -> None:
        self.calls.append(("build_image", tag))
        self.builds.append((tag, no_cache))
        self.images.add(tag)

    def called(self, operation: str) -> list[tuple]:
        """Calls recorded for one operation."""
        return [call for call in self.calls if call[0] == operation]


@pytest.fixture
def engine() -> FakeEngine:
    """An empty fake engine."""
    return FakeEngine()


@pytest.fixture
def build_context(tmp_path: Path) -> Path:
    """A build context directory holding a Dockerfile."""
    context = tmp_path / "context"
    context.mkdir()
    (context / "Dockerfile").write_text("FROM ubuntu:24.04\n")
    return context
