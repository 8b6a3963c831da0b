"""Tests for introspector/parsers.py module."""

import random

import pytest

from ctranscode.domain.models import StreamKind
from ctranscode.introspector.parsers import (
    any_stream_mentions,
    classify_streams,
    extract_stream_descriptors,
)


class TestClassifyStreams:
    """Tests for classify_streams function."""

    def test_h264_high10_with_aac(self) -> None:
        """High 10 H.264 is flagged alongside compatible AAC audio."""
        result = classify_streams(
            [
                "Stream #0:0: Video: h264 (High 10), 1920x1080",
                "Stream #0:1: Audio: aac",
            ]
        )
        assert result.has_h264_video is True
        assert result.has_high10_profile is True
        assert result.has_compatible_audio is True

    def test_h264_with_mp3(self) -> None:
        """Plain H.264 with MP3 audio is fully compatible."""
        result = classify_streams(
            ["Stream #0:0: Video: h264, yuv420p", "Stream #0:1: Audio: mp3"]
        )
        assert result.has_h264_video is True
        assert result.has_high10_profile is False
        assert result.has_compatible_audio is True

    def test_hevc_with_ac3(self) -> None:
        """HEVC video and AC-3 audio are both incompatible."""
        result = classify_streams(
            ["Stream #0:0: Video: hevc", "Stream #0:1: Audio: ac3"]
        )
        assert result.has_h264_video is False
        assert result.has_high10_profile is False
        assert result.has_compatible_audio is False

    def test_tokens_outside_stream_lines_are_ignored(self) -> None:
        """h264/aac mentioned without a stream marker should not count."""
        result = classify_streams(
            [
                "configuration: --enable-libx264 --enable-libfdk-aac",
                "h264 High 10 aac mp3",
                "Stream #0:0: Video: vp9",
                "Stream #0:1: Audio: opus",
            ]
        )
        assert result.has_h264_video is False
        assert result.has_high10_profile is False
        assert result.has_compatible_audio is False

    def test_audio_token_on_video_line_does_not_count(self) -> None:
        """Audio compatibility only looks at Audio: lines."""
        result = classify_streams(["Stream #0:0: Video: mpeg4 aac", "Audio: flac"])
        assert result.has_compatible_audio is False

    def test_no_video_stream(self) -> None:
        """Audio-only output reports no H.264 video."""
        result = classify_streams(["Stream #0:0: Audio: aac (LC)"])
        assert result.has_h264_video is False
        assert result.video_stream_count == 0
        assert result.audio_stream_count == 1
        assert result.is_ambiguous is False

    def test_no_markers_is_ambiguous(self, not_media_lines: tuple[str, ...]) -> None:
        """Output without any stream markers is ambiguous, not an error."""
        result = classify_streams(not_media_lines)
        assert result.is_ambiguous is True
        assert result.has_h264_video is False
        assert result.has_compatible_audio is False

    def test_empty_output(self) -> None:
        """Empty output behaves like output without markers."""
        result = classify_streams([])
        assert result.is_ambiguous is True

    def test_counts_streams(self, h264_aac_lines: tuple[str, ...]) -> None:
        """Stream counts reflect marker lines."""
        result = classify_streams(h264_aac_lines)
        assert result.video_stream_count == 1
        assert result.audio_stream_count == 1

    def test_real_probe_output(
        self,
        h264_aac_lines: tuple[str, ...],
        high10_ac3_lines: tuple[str, ...],
        hevc_mp3_lines: tuple[str, ...],
    ) -> None:
        """Captured ffmpeg output should classify as expected."""
        h264 = classify_streams(h264_aac_lines)
        assert (h264.has_h264_video, h264.has_high10_profile) == (True, False)
        assert h264.has_compatible_audio is True

        high10 = classify_streams(high10_ac3_lines)
        assert (high10.has_h264_video, high10.has_high10_profile) == (True, True)
        assert high10.has_compatible_audio is False

        hevc = classify_streams(hevc_mp3_lines)
        assert hevc.has_h264_video is False
        assert hevc.has_compatible_audio is True

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_reordering_does_not_change_result(
        self, seed: int, h264_aac_lines: tuple[str, ...]
    ) -> None:
        """Classification should not depend on line order."""
        shuffled = list(h264_aac_lines)
        random.Random(seed).shuffle(shuffled)
        assert classify_streams(shuffled) == classify_streams(h264_aac_lines)


class TestAnyStreamMentions:
    """Tests for any_stream_mentions function."""

    def test_requires_marker_and_token_on_same_line(self) -> None:
        """Marker and token on different lines should not match."""
        lines = ["Stream #0:0: Video: hevc", "h264"]
        assert any_stream_mentions(lines, StreamKind.VIDEO, "h264") is False
        assert any_stream_mentions(lines, StreamKind.VIDEO, "hevc") is True


class TestExtractStreamDescriptors:
    """Tests for extract_stream_descriptors function."""

    def test_descriptors_from_probe(self, h264_aac_lines: tuple[str, ...]) -> None:
        """Video and audio streams should be listed in order with codecs."""
        descriptors = extract_stream_descriptors(h264_aac_lines)
        assert [(d.kind, d.codec) for d in descriptors] == [
            (StreamKind.VIDEO, "h264"),
            (StreamKind.AUDIO, "aac"),
        ]
        assert "1920x1080" in descriptors[0].line

    def test_codec_token_strips_trailing_comma(self) -> None:
        """A codec followed directly by a comma should be cleaned."""
        descriptors = extract_stream_descriptors(["Stream #0:1: Audio: ac3, 48000 Hz"])
        assert descriptors[0].codec == "ac3"

    def test_marker_without_codec(self) -> None:
        """A marker at the end of the line gives an empty codec."""
        descriptors = extract_stream_descriptors(["Stream #0:0: Video:"])
        assert descriptors[0].codec == ""

    def test_subtitles_ignored(self, high10_ac3_lines: tuple[str, ...]) -> None:
        """Only video and audio streams are described."""
        kinds = [d.kind for d in extract_stream_descriptors(high10_ac3_lines)]
        assert kinds == [StreamKind.VIDEO, StreamKind.AUDIO]
