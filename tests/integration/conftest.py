"""Integration test fixtures.

This module provides pytest fixtures for:
- ffmpeg availability detection
- Test media generation using ffmpeg
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from _pytest.config import Config


def _tool_available(name: str) -> bool:
    """Check if an external tool is available in PATH."""
    return shutil.which(name) is not None


@pytest.fixture(scope="session")
def ffmpeg_available() -> bool:
    """Check if ffmpeg is available."""
    return _tool_available("ffmpeg")


def pytest_configure(config: Config) -> None:
    """Register custom markers for tool requirements."""
    config.addinivalue_line(
        "markers",
        "requires_ffmpeg: mark test as requiring ffmpeg",
    )


@pytest.fixture
def isolated_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Replace PATH with an empty directory so a real ffmpeg is never found."""
    empty = tmp_path / "empty-path"
    empty.mkdir()
    monkeypatch.setenv("PATH", str(empty))
    return empty


@pytest.fixture(scope="module")
def generated_h264_aac(
    ffmpeg_available: bool, tmp_path_factory: pytest.TempPathFactory
) -> Path:
    """Generate a one-second H.264 + AAC Matroska file.

    Skips when ffmpeg or its libx264/aac encoders are unavailable.
    """
    if not ffmpeg_available:
        pytest.skip("ffmpeg not available")

    output = tmp_path_factory.mktemp("media") / "h264_aac.mkv"
    result = subprocess.run(  # nosec B603 B607 - fixed arguments
        [
            "ffmpeg",
            "-hide_banner",
            "-loglevel",
            "error",
            "-f",
            "lavfi",
            "-i",
            "testsrc=duration=1:size=160x120:rate=10",
            "-f",
            "lavfi",
            "-i",
            "sine=frequency=440:duration=1",
            "-c:v",
            "libx264",
            "-pix_fmt",
            "yuv420p",
            "-c:a",
            "aac",
            "-shortest",
            str(output),
        ],
        capture_output=True,
        text=True,
        timeout=60,
    )
    if result.returncode != 0 or not output.exists():
        pytest.skip(f"Could not generate test media: {result.stderr.strip()}")
    return output
