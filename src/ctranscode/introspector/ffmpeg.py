"""ffmpeg-based implementation of the MediaIntrospector protocol."""

import logging
from pathlib import Path

from ctranscode.core.spinner import Spinner
from ctranscode.core.subprocess_utils import run_process
from ctranscode.domain.models import ProbeOutput

logger = logging.getLogger(__name__)


class FFmpegIntrospector:
    """Inspect media files by running ``ffmpeg -i <file>``.

    Without an output file ffmpeg prints its description of the input to
    stderr and exits non-zero. That exit status is expected and ignored;
    only the captured text matters.
    """

    def __init__(self, ffmpeg_path: str | Path = "ffmpeg") -> None:
        """Initialize the introspector.

        Args:
            ffmpeg_path: Resolved path (or bare name) of the ffmpeg executable.
        """
        self._ffmpeg_path = ffmpeg_path

    @property
    def ffmpeg_path(self) -> str | Path:
        """Executable used for probing."""
        return self._ffmpeg_path

    def probe(self, input_path: Path, spinner: Spinner | None = None) -> ProbeOutput:
        """Capture ffmpeg's description of a media file.

        Args:
            input_path: Path to the media file.
            spinner: Optional liveness indicator shown while waiting.

        Returns:
            ProbeOutput with merged and per-stream lines.

        Raises:
            LaunchFailure: If ffmpeg cannot be started.
        """
        result = run_process(
            self._ffmpeg_path,
            ["-i", input_path],
            capture_output=True,
            spinner=spinner,
        )
        logger.debug(
            "Probe of %s produced %d lines (exit %d)",
            input_path,
            len(result.lines),
            result.returncode,
        )
        return ProbeOutput(
            lines=result.lines,
            returncode=result.returncode,
            stdout_lines=result.stdout_lines,
            stderr_lines=result.stderr_lines,
        )
