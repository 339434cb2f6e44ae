"""Container lifecycle commands for hdlbox.

Every command queries the engine for the container's current state and
then acts on it. Nothing is cached between calls, and repeating a command
that already reached its target state is a success.
"""

from __future__ import annotations

from pathlib import Path

from hdlbox.config.models import Configuration
from hdlbox.console import print_info, print_success, print_warning
from hdlbox.container.base import ContainerState, Engine, Outcome
from hdlbox.container.image import ImageManager
from hdlbox.errors import EngineCommandError, ImageNotFoundError, ResourceConflict
from hdlbox.mounts import prepare_mounts

DEFAULT_SHELL = "/bin/bash"


def build_environment(config: Configuration) -> dict[str, str]:
    """Environment variables for a newly created container."""
    return {
        "USER": config.username,
        "HOME": config.home,
    }


class Lifecycle:
    """Drives one named container through its lifecycle."""

    def __init__(self, engine: Engine, images: ImageManager | None = None) -> None:
        self.engine = engine
        self.images = images or ImageManager(engine)

    def run(self, config: Configuration, cwd: Path | None = None) -> int:
        """Create, start or attach to the container, then open a shell.

        Args:
            config: Resolved configuration.
            cwd: Directory for the default projects mount.

        Returns:
            Exit code of the interactive shell.

        Raises:
            ImageNotFoundError: If the container must be created but the
                image has not been built.
        """
        name = config.container_name
        status = self.engine.container_status(name)
        print_info(f"Container '{name}' status: {status.value}")

        if status is ContainerState.ABSENT:
            self._create(config, cwd or Path.cwd())
        elif status is ContainerState.STOPPED:
            print_info(f"Container '{name}' exists but is stopped. Starting and entering...")
            self.engine.start(name)
        else:
            print_info(f"Container '{name}' is already running. Entering...")

        return self.engine.exec_interactive(
            name,
            config.username,
            [DEFAULT_SHELL],
            workdir=config.home,
        )

    def _create(self, config: Configuration, cwd: Path) -> None:
        if not self.engine.image_exists(config.image_name):
            raise ImageNotFoundError(
                f"Image '{config.image_name}' does not exist. "
                "Build it first using: hdlbox build"
            )

        print_info(f"Container '{config.container_name}' does not exist. Creating and starting...")
        mounts = prepare_mounts(config.mounts, config.username, cwd)
        for mount in mounts:
            print_info(f"Mounting {mount.host_path} -> {mount.container_path}")

        self.engine.create_and_start(
            config.image_name,
            config.container_name,
            config.hostname,
            build_environment(config),
            mounts,
        )

    def stop(self, name: str) -> Outcome:
        """Stop the container if it is running."""
        status = self.engine.container_status(name)

        if status is ContainerState.ABSENT:
            print_warning(f"Container '{name}' does not exist.")
            return Outcome.NOT_FOUND
        if status is ContainerState.STOPPED:
            print_info(f"Container '{name}' is already stopped.")
            return Outcome.ALREADY_STOPPED

        print_info(f"Stopping container '{name}'...")
        self.engine.stop(name)
        print_success(f"Container '{name}' stopped successfully.")
        return Outcome.STOPPED

    def remove(self, name: str) -> Outcome:
        """Remove the container, stopping it first if needed."""
        status = self.engine.container_status(name)

        if status is ContainerState.ABSENT:
            print_warning(f"Container '{name}' does not exist.")
            return Outcome.NOT_FOUND

        if status is ContainerState.RUNNING:
            print_info(f"Stopping and removing container '{name}'...")
            self.engine.stop(name)
        else:
            print_info(f"Removing container '{name}'...")
        self.engine.remove_container(name)
        print_success(f"Container '{name}' removed successfully.")
        return Outcome.REMOVED

    def clean(self, image: str, container: str) -> None:
        """Remove the container, then the image.

        Steps already done are not undone when a later one fails.

        Raises:
            ResourceConflict: If the image cannot be removed.
        """
        print_info("Cleaning up the container environment...")
        self.remove(container)

        if not self.engine.image_exists(image):
            print_warning(f"Image '{image}' does not exist. No action needed.")
            return

        print_info(f"Removing image '{image}'...")
        try:
            self.engine.remove_image(image)
        except EngineCommandError as e:
            raise ResourceConflict(image, str(e)) from e
        print_success(f"Image '{image}' removed successfully.")

    def build(self, image: str, no_cache: bool = False) -> Outcome:
        """Build the image unless it already exists."""
        return self.images.ensure_image(image, no_cache=no_cache)

    def rebuild(self, image: str, container: str) -> Outcome:
        """Tear everything down, then build the image without cache."""
        print_info(f"Rebuilding image '{image}'...")
        self.clean(image, container)
        return self.build(image, no_cache=True)

