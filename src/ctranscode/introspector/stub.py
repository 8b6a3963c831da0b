"""Stub implementation of MediaIntrospector for development and testing."""

from collections.abc import Iterable
from pathlib import Path

from ctranscode.core.spinner import Spinner
from ctranscode.core.string_utils import split_lines
from ctranscode.domain.models import ProbeOutput


class StubIntrospector:
    """Stub implementation that returns canned probe output.

    Records every probed path so tests can assert the probe happened
    without launching ffmpeg.
    """

    def __init__(self, lines: Iterable[str] = (), returncode: int = 1) -> None:
        self._lines = tuple(lines)
        self._returncode = returncode
        self.probed: list[Path] = []

    @classmethod
    def from_text(cls, text: str, returncode: int = 1) -> "StubIntrospector":
        """Build a stub from raw captured text."""
        return cls(split_lines(text), returncode=returncode)

    def probe(self, input_path: Path, spinner: Spinner | None = None) -> ProbeOutput:
        self.probed.append(input_path)
        return ProbeOutput(
            lines=self._lines,
            returncode=self._returncode,
            stderr_lines=self._lines,
        )
