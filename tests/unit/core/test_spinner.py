"""Tests for core/spinner.py module."""

import io

from ctranscode.core.spinner import SPINNER_FRAMES, SPINNER_INTERVAL, Spinner


class TestSpinner:
    """Tests for Spinner."""

    def test_cycles_through_four_frames(self) -> None:
        """Frames should repeat every four ticks."""
        stream = io.StringIO()
        spinner = Spinner(stream=stream)
        for _ in range(5):
            spinner.tick()
        assert stream.getvalue() == "\r-\r\r\\\r\r|\r\r/\r\r-\r"
        assert spinner.frame_count == 5

    def test_clear_erases_indicator(self) -> None:
        """clear() should blank the indicator and reset the cycle."""
        stream = io.StringIO()
        spinner = Spinner(stream=stream)
        spinner.tick()
        spinner.clear()
        assert stream.getvalue().endswith("\r \r")
        assert spinner.frame_count == 0

    def test_default_pace(self) -> None:
        """Default interval should give about fifteen updates per second."""
        assert Spinner(stream=io.StringIO()).interval == SPINNER_INTERVAL
        assert round(1 / SPINNER_INTERVAL) == 15
        assert len(SPINNER_FRAMES) == 4
