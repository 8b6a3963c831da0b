"""Codec decision logic.

This module maps stream classification to the encoder used for each stream:
streams the device already plays are copied, everything else is re-encoded
to H.264 video and AAC audio. Container, resolution, bitrate and channel
count of the source are not considered.
"""

import logging

from ctranscode.domain.models import (
    AUDIO_COPY,
    AUDIO_REENCODE,
    VIDEO_COPY,
    VIDEO_REENCODE,
    CodecDecision,
    DecisionReason,
    DecisionReasonCode,
    StreamClassification,
)

logger = logging.getLogger(__name__)


def choose_video_codec(
    has_h264_video: bool, has_high10_profile: bool
) -> tuple[str, DecisionReason | None]:
    """Pick the video encoder.

    H.264 is copied unless it uses the High 10 profile, which the device
    cannot decode. Anything else, including no video at all, is re-encoded.

    Returns:
        Tuple of (codec, reason); reason is None when the stream is copied.
    """
    if not has_h264_video:
        return VIDEO_REENCODE, DecisionReason(
            code=DecisionReasonCode.NO_H264_VIDEO,
            message="video is not H.264",
        )
    if has_high10_profile:
        return VIDEO_REENCODE, DecisionReason(
            code=DecisionReasonCode.HIGH10_PROFILE,
            message="H.264 video uses the High 10 profile",
        )
    return VIDEO_COPY, None


def choose_audio_codec(has_compatible_audio: bool) -> tuple[str, DecisionReason | None]:
    """Pick the audio encoder: AAC and MP3 are copied, the rest re-encoded."""
    if has_compatible_audio:
        return AUDIO_COPY, None
    return AUDIO_REENCODE, DecisionReason(
        code=DecisionReasonCode.INCOMPATIBLE_AUDIO,
        message="audio is neither AAC nor MP3",
    )


def decide_codecs(classification: StreamClassification) -> CodecDecision:
    """Derive the codec decision from a stream classification.

    Args:
        classification: Compatibility facts from the probe.

    Returns:
        CodecDecision with the video and audio encoders and the reasons
        for every re-encode.
    """
    video_codec, video_reason = choose_video_codec(
        classification.has_h264_video, classification.has_high10_profile
    )
    audio_codec, audio_reason = choose_audio_codec(classification.has_compatible_audio)

    reasons = tuple(r for r in (video_reason, audio_reason) if r is not None)
    for reason in reasons:
        logger.info("Re-encoding: %s", reason.message)

    return CodecDecision(
        video_codec=video_codec,
        audio_codec=audio_codec,
        reasons=reasons,
    )
