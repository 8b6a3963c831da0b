"""Pure parsing functions for ffmpeg diagnostic output.

ffmpeg describes each input stream on a human-readable line such as::

    Stream #0:0(eng): Video: h264 (High), yuv420p, 1920x1080

These functions work on that text with literal substring tests rather than a
structured parse. All functions are pure (no I/O, no side effects).
"""

import logging
from collections.abc import Iterable, Sequence

from ctranscode.core.string_utils import grep_lines
from ctranscode.domain.models import (
    StreamClassification,
    StreamDescriptor,
    StreamKind,
)

logger = logging.getLogger(__name__)

H264_TOKEN = "h264"
HIGH10_PROFILE_TOKEN = "High 10"
COMPATIBLE_AUDIO_TOKENS = ("aac", "mp3")


def stream_lines(lines: Iterable[str], kind: StreamKind) -> tuple[str, ...]:
    """Lines that mention a stream of the given kind."""
    return grep_lines(lines, kind.marker)


def any_stream_mentions(lines: Iterable[str], kind: StreamKind, token: str) -> bool:
    """Check whether any stream line of a kind also contains a token.

    Args:
        lines: Probe output lines.
        kind: Stream kind whose marker must be on the line.
        token: Literal text that must be on the same line.

    Returns:
        True if at least one line contains both the marker and the token.
    """
    return len(grep_lines(stream_lines(lines, kind), token)) > 0


def _codec_token(line: str, marker: str) -> str:
    """First word after the marker, without trailing punctuation."""
    rest = line.split(marker, 1)[1].strip()
    if not rest:
        return ""
    return rest.split()[0].rstrip(",")


def extract_stream_descriptors(lines: Iterable[str]) -> tuple[StreamDescriptor, ...]:
    """Build stream descriptors from probe output.

    Args:
        lines: Probe output lines.

    Returns:
        One descriptor per line carrying a stream-kind marker, in order.
        A line naming both markers yields a video descriptor.
    """
    descriptors: list[StreamDescriptor] = []
    for line in lines:
        for kind in StreamKind:
            if kind.marker in line:
                descriptors.append(
                    StreamDescriptor(
                        kind=kind,
                        codec=_codec_token(line, kind.marker),
                        line=line,
                    )
                )
                break
    return tuple(descriptors)


def classify_streams(lines: Sequence[str]) -> StreamClassification:
    """Classify probe output against the device's playback constraints.

    - H.264 video: a "Video:" line containing "h264".
    - 10-bit profile: a "Video:" line containing "High 10".
    - Compatible audio: an "Audio:" line containing "aac" or "mp3".

    A file without any video stream reports no H.264 video.

    Args:
        lines: Probe output lines.

    Returns:
        StreamClassification with the three compatibility facts.
    """
    video_lines = stream_lines(lines, StreamKind.VIDEO)
    audio_lines = stream_lines(lines, StreamKind.AUDIO)

    classification = StreamClassification(
        has_h264_video=len(grep_lines(video_lines, H264_TOKEN)) > 0,
        has_high10_profile=len(grep_lines(video_lines, HIGH10_PROFILE_TOKEN)) > 0,
        has_compatible_audio=any(
            len(grep_lines(audio_lines, token)) > 0
            for token in COMPATIBLE_AUDIO_TOKENS
        ),
        video_stream_count=len(video_lines),
        audio_stream_count=len(audio_lines),
    )
    logger.debug(
        "Classified streams: h264=%s high10=%s compatible_audio=%s",
        classification.has_h264_video,
        classification.has_high10_profile,
        classification.has_compatible_audio,
        extra={
            "video_streams": classification.video_stream_count,
            "audio_streams": classification.audio_stream_count,
        },
    )
    return classification
