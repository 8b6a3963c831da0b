"""Custom exceptions for ctranscode.

This module provides the error types raised by the probe and transcode
pipeline, enabling the CLI to map each condition to an exit code.
"""


class CTranscodeError(Exception):
    """Base exception for ctranscode errors.

    All tool-specific exceptions inherit from this class, allowing callers
    to catch every pipeline error with a single except clause if desired.
    """


class LaunchFailure(CTranscodeError):
    """Raised when an external executable cannot be started.

    Attributes:
        executable: The executable that failed to launch.
        reason: Operating system error text.
    """

    def __init__(self, executable: str, reason: str) -> None:
        """Initialize the exception.

        Args:
            executable: The executable that failed to launch.
            reason: Operating system error text.
        """
        self.executable = executable
        self.reason = reason
        super().__init__(f"Cannot launch {executable}: {reason}")


class ConfigError(CTranscodeError):
    """Raised when configuration values are invalid."""

    pass
