"""MediaIntrospector interface for probe-based stream inspection."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from ctranscode.core.spinner import Spinner
from ctranscode.domain.models import (
    ProbeOutput,
    StreamClassification,
    StreamDescriptor,
)
from ctranscode.introspector.parsers import (
    classify_streams,
    extract_stream_descriptors,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProbeResult:
    """Probe output together with what was derived from it."""

    input_path: Path
    output: ProbeOutput
    classification: StreamClassification
    streams: tuple[StreamDescriptor, ...]

    @classmethod
    def from_output(cls, input_path: Path, output: ProbeOutput) -> "ProbeResult":
        """Classify captured output."""
        return cls(
            input_path=input_path,
            output=output,
            classification=classify_streams(output.lines),
            streams=extract_stream_descriptors(output.lines),
        )


class MediaIntrospector(Protocol):
    """Protocol for media introspection implementations.

    Implementations capture the engine's self-description of an input file
    as text lines. Classification is shared and lives in the parsers module.
    """

    def probe(self, input_path: Path, spinner: Spinner | None = None) -> ProbeOutput:
        """Capture diagnostic output for a media file.

        Args:
            input_path: Path to the media file.
            spinner: Optional liveness indicator shown while waiting.

        Returns:
            ProbeOutput with the captured lines.

        Raises:
            LaunchFailure: If the inspection tool cannot be started.
        """
        ...


def inspect_media(
    introspector: MediaIntrospector,
    input_path: Path,
    spinner: Spinner | None = None,
) -> ProbeResult:
    """Probe a media file and classify its streams.

    Output that names no video or audio stream is not an error: the
    classification reports no compatible streams and the caller re-encodes.
    A warning is logged because such output usually means the input is not
    a media file or the engine failed to open it.

    Args:
        introspector: Introspector used to capture probe output.
        input_path: Path to the media file.
        spinner: Optional liveness indicator shown while waiting.

    Returns:
        ProbeResult with output, classification and stream descriptors.

    Raises:
        LaunchFailure: If the inspection tool cannot be started.
    """
    output = introspector.probe(input_path, spinner=spinner)
    result = ProbeResult.from_output(input_path, output)

    for stream in result.streams:
        logger.debug(
            "Found %s stream: %s", stream.kind.name.lower(), stream.codec or "unknown"
        )
    if result.classification.is_ambiguous:
        logger.warning(
            "No video or audio streams found in probe output for %s; "
            "both streams will be re-encoded",
            input_path,
        )
    return result
