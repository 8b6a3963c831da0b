"""Configuration data models.

This module defines dataclasses for ctranscode configuration options.
"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ToolPathsConfig:
    """Configuration for external tool paths.

    If ffmpeg is not specified it is looked up in PATH, then in
    ``search_dirs``.
    """

    ffmpeg: Path | None = None

    # Extra directories searched after PATH
    search_dirs: list[Path] = field(default_factory=list)


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )
        if self.max_bytes < 0:
            raise ValueError(f"max_bytes must be non-negative, got {self.max_bytes}")
        if self.backup_count < 0:
            raise ValueError(
                f"backup_count must be non-negative, got {self.backup_count}"
            )


@dataclass
class CTranscodeConfig:
    """Main configuration container.

    Aggregates all configuration sections.
    """

    tools: ToolPathsConfig = field(default_factory=ToolPathsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
