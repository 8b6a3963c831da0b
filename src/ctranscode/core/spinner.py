"""Terminal liveness indicator shown while waiting on a subprocess."""

from __future__ import annotations

import sys
from typing import TextIO

SPINNER_FRAMES = ("-", "\\", "|", "/")

# Roughly 15 updates per second
SPINNER_INTERVAL = 1.0 / 15.0


class Spinner:
    """Rotating four-frame indicator drawn in place.

    Each frame is written as ``"\\r<frame>\\r"`` so the cursor returns to the
    start of the line and the next frame overwrites the previous one.
    The owner calls tick() on its own schedule; the spinner keeps no timer.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        interval: float = SPINNER_INTERVAL,
    ) -> None:
        self._stream = stream if stream is not None else sys.stderr
        self.interval = interval
        self._count = 0

    @property
    def frame_count(self) -> int:
        """Number of frames drawn since the last clear()."""
        return self._count

    def tick(self) -> None:
        """Draw the next frame."""
        frame = SPINNER_FRAMES[self._count % len(SPINNER_FRAMES)]
        self._count += 1
        self._stream.write(f"\r{frame}\r")
        self._stream.flush()

    def clear(self) -> None:
        """Erase the indicator."""
        self._stream.write("\r \r")
        self._stream.flush()
        self._count = 0
