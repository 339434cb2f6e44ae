"""Container engine CLI adapter."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from hdlbox.console import print_command
from hdlbox.container.base import ContainerState
from hdlbox.errors import (
    EngineCommandError,
    EngineNotInstalledError,
    EngineQueryFailure,
)
from hdlbox.mounts import MountSpec

DEFAULT_ENGINE = "docker"

# Substrings docker and podman use to report a missing object.
_NOT_FOUND_MARKERS = (
    "no such image",
    "no such container",
    "no such object",
    "image not known",
    "no container with name or id",
)


def _is_not_found(stderr: str) -> bool:
    lowered = stderr.lower()
    return any(marker in lowered for marker in _NOT_FOUND_MARKERS)


class ContainerEngine:
    """Runs container engine commands (docker or podman)."""

    def __init__(self, binary: str | None = None, verbose: bool = False) -> None:
        """Initialize the engine adapter.

        Args:
            binary: Engine executable. Defaults to $HDLBOX_ENGINE, then docker.
            verbose: Echo each engine command to stderr before running it.
        """
        self.binary = binary or os.environ.get("HDLBOX_ENGINE") or DEFAULT_ENGINE
        self.verbose = verbose

    def _run(
        self,
        *args: str,
        capture: bool = True,
    ) -> subprocess.CompletedProcess[str]:
        cmd = [self.binary, *args]
        if self.verbose:
            print_command(cmd)
        try:
            if capture:
                return subprocess.run(cmd, capture_output=True, text=True)
            return subprocess.run(cmd)
        except FileNotFoundError:
            raise EngineNotInstalledError(
                f"'{self.binary}' not found. Install it or set HDLBOX_ENGINE."
            ) from None

    def _check(self, *args: str, capture: bool = True) -> None:
        result = self._run(*args, capture=capture)
        if result.returncode != 0:
            detail = (result.stderr or "").strip() if capture else ""
            message = f"'{self.binary} {args[0]}' failed with exit code {result.returncode}"
            if detail:
                message = f"{message}: {detail}"
            raise EngineCommandError(message)

    def image_exists(self, name: str) -> bool:
        """Check whether an image exists locally.

        Raises:
            EngineQueryFailure: If the engine fails for any reason other
                than the image being absent.
        """
        result = self._run("image", "inspect", name)
        if result.returncode == 0:
            return True
        if _is_not_found(result.stderr):
            return False
        raise EngineQueryFailure(result.stderr.strip() or f"Cannot inspect image '{name}'")

    def container_status(self, name: str) -> ContainerState:
        """Query a container's state.

        Any engine status other than "running" counts as stopped.

        Raises:
            EngineQueryFailure: If the engine cannot answer.
        """
        result = self._run("container", "inspect", "--format", "{{.State.Status}}", name)
        if result.returncode != 0:
            if _is_not_found(result.stderr):
                return ContainerState.ABSENT
            raise EngineQueryFailure(
                result.stderr.strip() or f"Cannot inspect container '{name}'"
            )
        if result.stdout.strip() == "running":
            return ContainerState.RUNNING
        return ContainerState.STOPPED

    def create_and_start(
        self,
        image: str,
        name: str,
        hostname: str,
        env: dict[str, str],
        mounts: Sequence[MountSpec],
    ) -> None:
        """Create a container and start it detached.

        The container gets a TTY and open stdin so the image's default
        shell keeps it running until stopped.
        """
        args = ["run", "-dit", "--name", name, "--hostname", hostname]

        for mount in mounts:
            args.extend(["-v", mount.as_volume()])

        for key, value in env.items():
            args.extend(["-e", f"{key}={value}"])

        args.append(image)
        self._check(*args)

    def exec_interactive(
        self,
        name: str,
        user: str,
        command: Sequence[str],
        workdir: str | None = None,
    ) -> int:
        """Run a command in the container with the terminal attached.

        Returns:
            Exit code of the session.
        """
        args = ["exec", "-it", "-u", user]
        if workdir:
            args.extend(["-w", workdir])
        args.append(name)
        args.extend(command)
        return self._run(*args, capture=False).returncode

    def start(self, name: str) -> None:
        """Start a stopped container."""
        self._check("start", name)

    def stop(self, name: str) -> None:
        """Stop a running container."""
        self._check("stop", name)

    def remove_container(self, name: str) -> None:
        """Remove a stopped container."""
        self._check("rm", name)

    def remove_image(self, name: str) -> None:
        """Remove an image."""
        self._check("rmi", name)

    def build_image(
        self,
        tag: str,
        dockerfile: Path,
        context: Path,
        build_args: dict[str, str] | None = None,
        no_cache: bool = False,
    ) -> None:
        """Build an image, streaming build output to the terminal.

        Args:
            tag: Image tag.
            dockerfile: Path to Dockerfile.
            context: Build context directory.
            build_args: Optional build arguments.
            no_cache: Disable the layer cache.
        """
        args = ["build", "-f", str(dockerfile), "-t", tag]
        if no_cache:
            args.append("--no-cache")
        if build_args:
            for key, value in build_args.items():
                args.extend(["--build-arg", f"{key}={value}"])
        args.append(str(context))
        self._check(*args, capture=False)
