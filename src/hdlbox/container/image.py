"""Image management for hdlbox containers."""

from __future__ import annotations

import getpass
import os
from pathlib import Path

from hdlbox.console import print_info, print_success, print_warning
from hdlbox.container.base import Engine, Outcome
from hdlbox.errors import DockerfileNotFoundError


class ImageManager:
    """Builds the hdlbox image."""

    def __init__(
        self,
        engine: Engine,
        context: Path | None = None,
        dockerfile: Path | None = None,
    ):
        """Initialize the image manager.

        Args:
            engine: Container engine to build with.
            context: Build context. Defaults to $HDLBOX_BUILD_CONTEXT, then
                the current directory.
            dockerfile: Dockerfile path. Defaults to <context>/Dockerfile.
        """
        self.engine = engine
        env_context = os.environ.get("HDLBOX_BUILD_CONTEXT")
        if context is None:
            context = Path(env_context) if env_context else Path.cwd()
        self.context = context
        self.dockerfile = dockerfile or context / "Dockerfile"

    def build_args(self) -> dict[str, str]:
        """Build arguments matching the in-image account to the host user.

        Root keeps the Dockerfile's default account.
        """
        if os.getuid() == 0:
            return {}
        return {
            "USERNAME": getpass.getuser(),
            "USER_UID": str(os.getuid()),
            "USER_GID": str(os.getgid()),
        }

    def ensure_image(self, tag: str, no_cache: bool = False) -> Outcome:
        """Build the image unless it already exists.

        Args:
            tag: Image tag.
            no_cache: Disable the layer cache for the build.

        Returns:
            BUILT if a build ran, SKIPPED if the image was already present.
        """
        print_info(f"Checking if image '{tag}' already exists...")
        if self.engine.image_exists(tag):
            print_warning(f"Image '{tag}' already exists. Skipping build.")
            print_info("To rebuild the image, use: hdlbox rebuild")
            return Outcome.SKIPPED

        print_info(f"Image '{tag}' does not exist. Building the image...")
        self.build_image(tag, no_cache=no_cache)
        return Outcome.BUILT

    def build_image(self, tag: str, no_cache: bool = False) -> None:
        """Build the image from the configured Dockerfile.

        Raises:
            DockerfileNotFoundError: If the Dockerfile is missing.
        """
        if not self.dockerfile.is_file():
            raise DockerfileNotFoundError(
                f"Dockerfile not found: {self.dockerfile}. "
                "Run from the directory holding the Dockerfile "
                "or set HDLBOX_BUILD_CONTEXT."
            )

        print_info(f"Using {self.dockerfile} to build the image '{tag}'...")
        self.engine.build_image(
            tag,
            self.dockerfile,
            self.context,
            build_args=self.build_args(),
            no_cache=no_cache,
        )
        print_success(f"Image '{tag}' built successfully.")
