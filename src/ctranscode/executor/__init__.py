"""Transcode execution for ctranscode."""

from ctranscode.executor.transcode import (
    AUDIO_BITRATE,
    AUDIO_CHANNELS,
    QUANTIZER_MAX,
    QUANTIZER_MIN,
    TranscodeExecutor,
    build_transcode_args,
)

__all__ = [
    "AUDIO_BITRATE",
    "AUDIO_CHANNELS",
    "QUANTIZER_MAX",
    "QUANTIZER_MIN",
    "TranscodeExecutor",
    "build_transcode_args",
]
