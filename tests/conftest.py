"""Shared test fixtures for ctranscode."""

import logging
import os
import stat
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from ctranscode.core.string_utils import split_lines

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_probe_fixture(name: str) -> tuple[str, ...]:
    """Load captured ffmpeg probe output by name.

    Args:
        name: Name of the fixture file (without .txt extension).

    Returns:
        The fixture split into lines.
    """
    fixture_path = FIXTURES_DIR / "probe" / f"{name}.txt"
    return split_lines(fixture_path.read_text(encoding="utf-8"))


@pytest.fixture
def h264_aac_lines() -> tuple[str, ...]:
    """Probe output of an H.264 (High) + AAC file."""
    return load_probe_fixture("h264_aac")


@pytest.fixture
def high10_ac3_lines() -> tuple[str, ...]:
    """Probe output of an H.264 (High 10) + AC-3 file."""
    return load_probe_fixture("high10_ac3")


@pytest.fixture
def hevc_mp3_lines() -> tuple[str, ...]:
    """Probe output of an HEVC + MP3 file."""
    return load_probe_fixture("hevc_mp3")


@pytest.fixture
def not_media_lines() -> tuple[str, ...]:
    """Probe output of a file ffmpeg cannot open."""
    return load_probe_fixture("not_media")


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path):
    """Keep tests away from the user's config file and CTRANSCODE_* variables.

    Points CTRANSCODE_CONFIG_PATH at a file that does not exist, so every
    test starts from default configuration unless it writes one.
    """
    clean_env = {k: v for k, v in os.environ.items() if not k.startswith("CTRANSCODE_")}
    clean_env["CTRANSCODE_CONFIG_PATH"] = str(tmp_path / "no-config.toml")
    with patch.dict(os.environ, clean_env, clear=True):
        yield


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)


FAKE_FFMPEG = '''\
#!{python}
"""Stand-in for ffmpeg used by tests.

With only "-i FILE" it prints the probe text to stderr and exits 1, as
ffmpeg does without an output file. Otherwise it records its arguments,
touches the last argument as the output file and exits with
FAKE_FFMPEG_EXIT (default 0), or kills itself with FAKE_FFMPEG_SIGNAL.
"""
import os
import sys
from pathlib import Path

args = sys.argv[1:]
if len(args) == 2 and args[0] == "-i":
    sys.stderr.write(Path({probe_path!r}).read_text(encoding="utf-8"))
    sys.exit(1)

Path({args_log!r}).write_text("\\n".join(args), encoding="utf-8")
Path(args[-1]).touch()
if os.environ.get("FAKE_FFMPEG_SIGNAL"):
    os.kill(os.getpid(), int(os.environ["FAKE_FFMPEG_SIGNAL"]))
sys.exit(int(os.environ.get("FAKE_FFMPEG_EXIT", "0")))
'''


@pytest.fixture
def make_fake_ffmpeg(tmp_path: Path):
    """Factory writing an executable fake ffmpeg that replays a probe fixture.

    Returns a function taking the fixture name and returning
    (ffmpeg_path, args_log_path).
    """
    if sys.platform == "win32":
        pytest.skip("fake ffmpeg script requires a POSIX shebang")

    def _make(fixture: str) -> tuple[Path, Path]:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        ffmpeg_path = bin_dir / "ffmpeg"
        args_log = tmp_path / "ffmpeg-args.txt"
        ffmpeg_path.write_text(
            FAKE_FFMPEG.format(
                python=sys.executable,
                probe_path=str(FIXTURES_DIR / "probe" / f"{fixture}.txt"),
                args_log=str(args_log),
            ),
            encoding="utf-8",
        )
        ffmpeg_path.chmod(ffmpeg_path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP)
        return ffmpeg_path, args_log

    return _make
