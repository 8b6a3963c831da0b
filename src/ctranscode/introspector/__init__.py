"""Introspector module for ctranscode.

This module provides media introspection capabilities:

- MediaIntrospector: Protocol defining the probe interface
- FFmpegIntrospector: Production implementation using ``ffmpeg -i``
- StubIntrospector: Stub implementation for testing
- inspect_media: Probe a file and classify its streams

Parsers for probe output:
- classify_streams: Derive compatibility facts from probe lines
- extract_stream_descriptors: List the video/audio streams mentioned
"""

from ctranscode.introspector.ffmpeg import FFmpegIntrospector
from ctranscode.introspector.interface import (
    MediaIntrospector,
    ProbeResult,
    inspect_media,
)
from ctranscode.introspector.parsers import (
    classify_streams,
    extract_stream_descriptors,
)
from ctranscode.introspector.stub import StubIntrospector

__all__ = [
    "MediaIntrospector",
    "FFmpegIntrospector",
    "StubIntrospector",
    "ProbeResult",
    "inspect_media",
    # Parsers
    "classify_streams",
    "extract_stream_descriptors",
]
