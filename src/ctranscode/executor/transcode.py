"""FFmpeg command building and execution for transcoding.

This module turns a codec decision into ffmpeg arguments and runs the
encode with the terminal attached, returning ffmpeg's exit code.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ctranscode.core.subprocess_utils import format_command, run_process
from ctranscode.domain.models import OUTPUT_CONTAINER, CodecDecision, InvocationConfig

logger = logging.getLogger(__name__)

# Fixed encode settings
AUDIO_BITRATE = "192k"
AUDIO_CHANNELS = 2
QUANTIZER_MAX = 22
QUANTIZER_MIN = 20


def build_transcode_args(
    invocation: InvocationConfig, decision: CodecDecision
) -> list[str]:
    """Build ffmpeg arguments for the encode.

    Args:
        invocation: Input and output paths.
        decision: Encoders chosen for video and audio.

    Returns:
        Argument list, without the executable.
    """
    return [
        "-i",
        str(invocation.input_path),
        "-f",
        OUTPUT_CONTAINER,
        "-acodec",
        decision.audio_codec,
        "-ab",
        AUDIO_BITRATE,
        "-ac",
        str(AUDIO_CHANNELS),
        "-vcodec",
        decision.video_codec,
        "-qmax",
        str(QUANTIZER_MAX),
        "-qmin",
        str(QUANTIZER_MIN),
        str(invocation.output_path),
    ]


class TranscodeExecutor:
    """Run the ffmpeg encode for one invocation."""

    def __init__(self, ffmpeg_path: str | Path = "ffmpeg") -> None:
        self._ffmpeg_path = ffmpeg_path

    def command_line(
        self, invocation: InvocationConfig, decision: CodecDecision
    ) -> str:
        """Shell-quoted command line for display."""
        return format_command(
            self._ffmpeg_path, build_transcode_args(invocation, decision)
        )

    def execute(self, invocation: InvocationConfig, decision: CodecDecision) -> int:
        """Run the encode and wait for it to finish.

        ffmpeg writes its progress straight to the terminal; nothing is
        captured or parsed.

        Args:
            invocation: Input and output paths.
            decision: Encoders chosen for video and audio.

        Returns:
            ffmpeg's exit code.

        Raises:
            LaunchFailure: If ffmpeg cannot be started.
        """
        args = build_transcode_args(invocation, decision)
        logger.info(
            "Transcoding %s -> %s (video=%s, audio=%s)",
            invocation.input_path,
            invocation.output_path,
            decision.video_codec,
            decision.audio_codec,
        )
        result = run_process(self._ffmpeg_path, args, capture_output=False)
        if result.returncode != 0:
            logger.error("ffmpeg exited with code %d", result.returncode)
        return result.returncode
