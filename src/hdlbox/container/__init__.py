"""Container engine access for hdlbox."""

from hdlbox.container.base import ContainerState, Engine, Outcome
from hdlbox.container.engine import ContainerEngine
from hdlbox.container.image import ImageManager

__all__ = [
    "ContainerEngine",
    "ContainerState",
    "Engine",
    "ImageManager",
    "Outcome",
]
