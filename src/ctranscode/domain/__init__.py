"""Domain models for ctranscode."""

from ctranscode.domain.models import (
    AUDIO_COPY,
    AUDIO_REENCODE,
    OUTPUT_CONTAINER,
    OUTPUT_EXTENSION,
    VIDEO_COPY,
    VIDEO_REENCODE,
    CodecDecision,
    DecisionReason,
    DecisionReasonCode,
    InvocationConfig,
    ProbeOutput,
    StreamClassification,
    StreamDescriptor,
    StreamKind,
    default_output_path,
)

__all__ = [
    "AUDIO_COPY",
    "AUDIO_REENCODE",
    "OUTPUT_CONTAINER",
    "OUTPUT_EXTENSION",
    "VIDEO_COPY",
    "VIDEO_REENCODE",
    "CodecDecision",
    "DecisionReason",
    "DecisionReasonCode",
    "InvocationConfig",
    "ProbeOutput",
    "StreamClassification",
    "StreamDescriptor",
    "StreamKind",
    "default_output_path",
]
