"""Core utilities package.

This package contains the process runner, line utilities, the liveness
spinner, and the exception hierarchy shared by the rest of ctranscode.
"""

from ctranscode.core.exceptions import ConfigError, CTranscodeError, LaunchFailure
from ctranscode.core.spinner import Spinner
from ctranscode.core.string_utils import grep_lines, split_lines
from ctranscode.core.subprocess_utils import (
    ProcessResult,
    format_command,
    normalize_args,
    run_process,
)

__all__ = [
    # Exceptions
    "CTranscodeError",
    "ConfigError",
    "LaunchFailure",
    # Text
    "grep_lines",
    "split_lines",
    # Processes
    "ProcessResult",
    "Spinner",
    "format_command",
    "normalize_args",
    "run_process",
]
