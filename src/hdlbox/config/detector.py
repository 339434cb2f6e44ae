"""Project configuration file detection for hdlbox."""

from __future__ import annotations

from pathlib import Path

CONFIG_FILENAMES = ("hdlbox.json", ".hdlbox.json")


def detect_config(workspace: Path) -> Path | None:
    """Detect a project configuration file in the workspace.

    Priority order:
    1. hdlbox.json
    2. .hdlbox.json

    Args:
        workspace: Path to the workspace directory.

    Returns:
        Path to the config file if found, None otherwise.
    """
    for name in CONFIG_FILENAMES:
        candidate = workspace / name
        if candidate.is_file():
            return candidate

    return None
