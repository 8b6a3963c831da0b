"""Centralized exit codes for the CLI.

Exit code ranges:
    0: Success
    2: Usage errors (raised by click)
    10-19: Validation errors (config, input)
    30-39: Tool/dependency errors

On a successful run the program exits with ffmpeg's own exit code instead.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for the ctranscode CLI."""

    # Success (0)
    SUCCESS = 0

    # Usage errors (2)
    USAGE_ERROR = 2  # Raised by click for unknown options and missing -i

    # Validation errors (10-19)
    CONFIG_ERROR = 11

    # Tool/dependency errors (30-39)
    TOOL_NOT_AVAILABLE = 30
