"""Domain models for ctranscode.

These models describe one invocation: what was asked for, what the probe
reported, how the streams were classified, and which codecs were chosen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

# Fixed target container and the extension of derived output names
OUTPUT_CONTAINER = "mp4"
OUTPUT_EXTENSION = ".mp4"

VIDEO_COPY = "copy"
VIDEO_REENCODE = "libx264"
AUDIO_COPY = "copy"
AUDIO_REENCODE = "libvo_aacenc"

VALID_VIDEO_CODECS = frozenset({VIDEO_COPY, VIDEO_REENCODE})
VALID_AUDIO_CODECS = frozenset({AUDIO_COPY, AUDIO_REENCODE})


class StreamKind(Enum):
    """Kind of elementary stream, keyed by its probe marker."""

    VIDEO = "Video:"
    AUDIO = "Audio:"

    @property
    def marker(self) -> str:
        """Literal text that identifies this stream kind in probe output."""
        return self.value


def default_output_path(input_path: str | Path) -> Path:
    """Derive the output file name from the input path.

    The directory is dropped and the extension replaced, so the output
    lands in the current working directory.

    Example:
        >>> default_output_path("/media/clip.mkv")
        PosixPath('clip.mp4')
    """
    return Path(Path(input_path).stem + OUTPUT_EXTENSION)


@dataclass(frozen=True)
class InvocationConfig:
    """Input and output paths for one run."""

    input_path: Path
    output_path: Path

    @classmethod
    def from_paths(
        cls, input_path: str | Path, output_path: str | Path | None = None
    ) -> InvocationConfig:
        """Build a config, deriving the output path when not supplied."""
        return cls(
            input_path=Path(input_path),
            output_path=(
                Path(output_path)
                if output_path is not None
                else default_output_path(input_path)
            ),
        )


@dataclass(frozen=True)
class ProbeOutput:
    """Diagnostic text captured from the inspection subprocess.

    ``lines`` merges stdout and stderr in arrival order; the per-stream
    tuples keep each stream's exact order.
    """

    lines: tuple[str, ...]
    returncode: int = 0
    stdout_lines: tuple[str, ...] = ()
    stderr_lines: tuple[str, ...] = ()


@dataclass(frozen=True)
class StreamDescriptor:
    """A video or audio stream mentioned in probe output."""

    kind: StreamKind
    codec: str  # First token after the marker, e.g. "h264"
    line: str  # Raw diagnostic line


@dataclass(frozen=True)
class StreamClassification:
    """Compatibility facts derived from probe output."""

    has_h264_video: bool
    has_high10_profile: bool
    has_compatible_audio: bool
    video_stream_count: int = 0
    audio_stream_count: int = 0

    @property
    def is_ambiguous(self) -> bool:
        """True when the probe mentioned neither a video nor an audio stream."""
        return self.video_stream_count == 0 and self.audio_stream_count == 0


class DecisionReasonCode(Enum):
    """Why a stream is re-encoded."""

    NO_H264_VIDEO = "no_h264_video"
    HIGH10_PROFILE = "high10_profile"
    INCOMPATIBLE_AUDIO = "incompatible_audio"


@dataclass(frozen=True)
class DecisionReason:
    """Structured reason for re-encoding a stream."""

    code: DecisionReasonCode
    message: str


@dataclass(frozen=True)
class CodecDecision:
    """Encoder choice for the transcode invocation."""

    video_codec: str
    audio_codec: str
    reasons: tuple[DecisionReason, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if self.video_codec not in VALID_VIDEO_CODECS:
            raise ValueError(
                f"video_codec must be one of {sorted(VALID_VIDEO_CODECS)}, "
                f"got {self.video_codec}"
            )
        if self.audio_codec not in VALID_AUDIO_CODECS:
            raise ValueError(
                f"audio_codec must be one of {sorted(VALID_AUDIO_CODECS)}, "
                f"got {self.audio_codec}"
            )

    @property
    def is_passthrough(self) -> bool:
        """True when neither stream is re-encoded."""
        return self.video_codec == VIDEO_COPY and self.audio_codec == AUDIO_COPY
