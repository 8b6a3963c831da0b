"""Subprocess runner for external engine invocation.

This module launches the media engine, optionally drains its stdout and
stderr concurrently into one ordered buffer, and blocks until the child
exits. It is used both for the probe (output captured, spinner shown) and
for the encode (output left on the terminal).
"""

from __future__ import annotations

import logging
import queue
import shlex
import subprocess  # nosec B404 - subprocess is required for ffmpeg invocation
import threading
import time
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from ctranscode.core.exceptions import LaunchFailure
from ctranscode.core.spinner import Spinner
from ctranscode.core.string_utils import split_lines

logger = logging.getLogger(__name__)

STDOUT = "stdout"
STDERR = "stderr"

# Wait used between process-exit checks when no spinner is drawn
DEFAULT_POLL_INTERVAL = 0.25


@dataclass(frozen=True)
class ProcessResult:
    """Outcome of a finished subprocess.

    ``lines`` is the merged view of both streams in arrival order. Lines of
    one stream keep their relative order, but interleaving between stdout
    and stderr is best-effort: two reader threads race to enqueue, so the
    merged order can differ from the order the child wrote them. Consumers
    that need exact per-stream order use ``stdout_lines``/``stderr_lines``.
    """

    returncode: int
    lines: tuple[str, ...] = ()
    stdout_lines: tuple[str, ...] = ()
    stderr_lines: tuple[str, ...] = ()


def normalize_args(args: str | Sequence[str | Path]) -> list[str]:
    """Turn a shell-style argument string or a sequence into argv items.

    Args:
        args: Either one string split with POSIX shell rules, or a sequence
            of arguments (Path objects are converted to strings).

    Returns:
        List of argument strings.
    """
    if isinstance(args, str):
        return shlex.split(args)
    return [str(arg) for arg in args]


def format_command(executable: str | Path, args: str | Sequence[str | Path]) -> str:
    """Render a command line for display, shell-quoted."""
    return shlex.join([str(executable), *normalize_args(args)])


def _drain(name: str, pipe: IO[bytes], chunks: queue.Queue[tuple[str, str]]) -> None:
    """Read one pipe line by line and enqueue decoded chunks."""
    try:
        for raw in iter(pipe.readline, b""):
            chunks.put((name, raw.decode("utf-8", errors="replace")))
    except (ValueError, OSError) as e:
        # Pipe closed underneath us
        logger.debug("%s reader stopped: %s", name, e)
    finally:
        pipe.close()


def run_process(
    executable: str | Path,
    args: str | Sequence[str | Path],
    capture_output: bool = False,
    spinner: Spinner | None = None,
) -> ProcessResult:
    """Run an external command and wait for it to exit.

    Args:
        executable: Name or path of the program to launch.
        args: Shell-style argument string or argument sequence.
        capture_output: Pipe and merge stdout and stderr. When False the
            child inherits the terminal and no lines are returned.
        spinner: Liveness indicator advanced while waiting. Only drawn in
            capture mode.

    Returns:
        ProcessResult with the exit code and captured lines.

    Raises:
        LaunchFailure: If the executable cannot be started.
    """
    argv = [str(executable), *normalize_args(args)]
    command_name = Path(argv[0]).name

    logger.debug(
        "Executing command: %s",
        shlex.join(argv),
        extra={"command": command_name, "arg_count": len(argv)},
    )

    start_time = time.monotonic()
    pipe = subprocess.PIPE if capture_output else None
    try:
        process = subprocess.Popen(  # nosec B603 - argv built from resolved tool
            argv,
            stdout=pipe,
            stderr=pipe,
        )
    except OSError as e:
        raise LaunchFailure(str(executable), e.strerror or str(e)) from e

    chunks: queue.Queue[tuple[str, str]] = queue.Queue()
    readers: list[threading.Thread] = []
    if capture_output:
        assert process.stdout is not None and process.stderr is not None
        for name, stream in ((STDOUT, process.stdout), (STDERR, process.stderr)):
            reader = threading.Thread(
                target=_drain,
                args=(name, stream, chunks),
                name=f"{command_name}-{name}",
                daemon=True,
            )
            reader.start()
            readers.append(reader)

    show_spinner = capture_output and spinner is not None
    interval = spinner.interval if spinner is not None else DEFAULT_POLL_INTERVAL
    while True:
        try:
            returncode = process.wait(timeout=interval)
            break
        except subprocess.TimeoutExpired:
            if show_spinner:
                spinner.tick()
    if show_spinner:
        spinner.clear()

    for reader in readers:
        reader.join()

    elapsed = time.monotonic() - start_time
    logger.debug(
        "Command completed",
        extra={
            "command": command_name,
            "elapsed_seconds": round(elapsed, 3),
            "returncode": returncode,
        },
    )

    if not capture_output:
        return ProcessResult(returncode=returncode)

    merged: list[str] = []
    per_stream: dict[str, list[str]] = {STDOUT: [], STDERR: []}
    while True:
        try:
            name, chunk = chunks.get_nowait()
        except queue.Empty:
            break
        per_stream[name].append(chunk)
        # An unterminated final chunk must not run into the other stream's text
        if not chunk.endswith(("\n", "\r")):
            chunk += "\n"
        merged.append(chunk)

    return ProcessResult(
        returncode=returncode,
        lines=split_lines("".join(merged)),
        stdout_lines=split_lines("".join(per_stream[STDOUT])),
        stderr_lines=split_lines("".join(per_stream[STDERR])),
    )
