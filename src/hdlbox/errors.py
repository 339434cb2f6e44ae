"""Exceptions raised by hdlbox."""

from __future__ import annotations


class HdlboxError(Exception):
    """Base exception for handled hdlbox failures."""

    pass


class InvalidArgument(HdlboxError):
    """A command-line value is missing, empty or malformed."""

    pass


class ConfigError(HdlboxError):
    """The project configuration file could not be used."""

    pass


class MountError(HdlboxError):
    """The host side of a mount could not be created."""

    pass


class EngineError(HdlboxError):
    """Base exception for container engine failures."""

    pass


class EngineNotInstalledError(EngineError):
    """The container engine executable is not on PATH."""

    pass


class EngineQueryFailure(EngineError):
    """An existence or status check could not be answered by the engine."""

    pass


class EngineCommandError(EngineError):
    """A container engine command exited with a non-zero status."""

    pass


class ResourceConflict(HdlboxError):
    """An image could not be removed because something still uses it."""

    def __init__(self, image: str, detail: str = "") -> None:
        message = (
            f"Failed to remove image '{image}'. "
            "It may be in use by another container."
        )
        if detail:
            message = f"{message}\n{detail}"
        super().__init__(message)
        self.image = image


class ImageNotFoundError(HdlboxError):
    """A container has to be created but its image has not been built."""

    pass


class DockerfileNotFoundError(HdlboxError):
    """No Dockerfile in the build context."""

    pass
