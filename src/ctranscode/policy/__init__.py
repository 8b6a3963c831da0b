"""Codec policy for ctranscode."""

from ctranscode.policy.codecs import (
    choose_audio_codec,
    choose_video_codec,
    decide_codecs,
)

__all__ = [
    "choose_audio_codec",
    "choose_video_codec",
    "decide_codecs",
]
