"""Pytest fixtures and configuration for integration tests."""

from __future__ import annotations

import os
import secrets
import shutil
import subprocess

import pytest

# Small image with a shell; can be overridden via HDLBOX_TEST_IMAGE
DEFAULT_TEST_IMAGE = "docker.io/library/alpine:3.20"


@pytest.fixture(scope="session")
def engine_binary() -> str:
    """Engine executable under test (HDLBOX_ENGINE, default docker)."""
    return os.environ.get("HDLBOX_ENGINE", "docker")


@pytest.fixture(scope="session")
def engine_available(engine_binary: str) -> bool:
    """Check if the engine is installed and its daemon answers."""
    if shutil.which(engine_binary) is None:
        return False

    try:
        result = subprocess.run(
            [engine_binary, "version"],
            capture_output=True,
            text=True,
            timeout=10,
        )
        return result.returncode == 0
    except (subprocess.TimeoutExpired, OSError):
        return False


@pytest.fixture(scope="session")
def test_image(engine_binary: str, engine_available: bool) -> str:
    """Pull the test image once per session."""
    image = os.environ.get("HDLBOX_TEST_IMAGE", DEFAULT_TEST_IMAGE)
    if engine_available:
        subprocess.run([engine_binary, "pull", image], capture_output=True, timeout=300)
    return image


@pytest.fixture
def require_engine(engine_available: bool) -> None:
    """Skip test if no container engine is reachable."""
    if not engine_available:
        pytest.skip("container engine not available")


@pytest.fixture
def unique_name() -> str:
    """Generate a unique container/image name for testing."""
    return f"hdlbox-test-{secrets.token_hex(4)}"
