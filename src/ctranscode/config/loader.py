"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to functions)
2. Environment variables (CTRANSCODE_*)
3. Config file (~/.ctranscode/config.toml)
4. Default values

Environment variables:
- CTRANSCODE_CONFIG_PATH: Path to config file (overrides default location)
- CTRANSCODE_FFMPEG_PATH: Path to ffmpeg executable
- CTRANSCODE_TOOL_DIRS: Extra directories searched for ffmpeg after PATH
  (separated by os.pathsep)
- CTRANSCODE_LOG_LEVEL: Log level (debug, info, warning, error)
- CTRANSCODE_LOG_FILE: Log file path
- CTRANSCODE_LOG_FORMAT: Log format (text, json)
"""

from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from ctranscode.config.env import EnvReader
from ctranscode.config.models import CTranscodeConfig, LoggingConfig, ToolPathsConfig
from ctranscode.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".ctranscode"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"


def get_default_config_path(reader: EnvReader | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by CTRANSCODE_CONFIG_PATH environment variable.

    Returns:
        Path to config file.
    """
    reader = reader or EnvReader()
    env_path = reader.get_str("CTRANSCODE_CONFIG_PATH")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_FILE


def load_config_file(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from TOML file.

    An unreadable or malformed file is logged and treated as empty.

    Args:
        path: Path to config file. If None, uses default location.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist.
    """
    if path is None:
        path = get_default_config_path()

    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Failed to load config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def _file_path(value: Any) -> Path | None:
    """Convert an optional path string from the config file."""
    if not value:
        return None
    return Path(str(value)).expanduser()


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    ffmpeg_path: Path | None = None,
    reader: EnvReader | None = None,
) -> CTranscodeConfig:
    """Get configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides CTRANSCODE_CONFIG_PATH).
        ffmpeg_path: CLI override for ffmpeg path.
        reader: Environment reader (defaults to os.environ).

    Returns:
        CTranscodeConfig with merged configuration.

    Raises:
        ConfigError: If a merged value fails validation.
    """
    reader = reader or EnvReader()
    file_config = load_config_file(config_path or get_default_config_path(reader))

    # Build tool paths config
    tools_file = file_config.get("tools", {})
    search_dirs = reader.get_path_list("CTRANSCODE_TOOL_DIRS")
    if search_dirs is None:
        search_dirs = [
            Path(str(d)).expanduser() for d in tools_file.get("search_dirs", [])
        ]
    tools = ToolPathsConfig(
        ffmpeg=(
            ffmpeg_path
            or reader.get_path("CTRANSCODE_FFMPEG_PATH")
            or _file_path(tools_file.get("ffmpeg"))
        ),
        search_dirs=search_dirs,
    )

    # Build logging config
    logging_file = file_config.get("logging", {})
    defaults = LoggingConfig()
    try:
        logging_config = LoggingConfig(
            level=reader.get_str(
                "CTRANSCODE_LOG_LEVEL", logging_file.get("level", defaults.level)
            ),
            file=(
                reader.get_path("CTRANSCODE_LOG_FILE", must_exist=False)
                or _file_path(logging_file.get("file"))
            ),
            format=reader.get_str(
                "CTRANSCODE_LOG_FORMAT", logging_file.get("format", defaults.format)
            ),
            include_stderr=logging_file.get("include_stderr", defaults.include_stderr),
            max_bytes=logging_file.get("max_bytes", defaults.max_bytes),
            backup_count=logging_file.get("backup_count", defaults.backup_count),
        )
    except ValueError as e:
        raise ConfigError(f"Invalid logging configuration: {e}") from e

    return CTranscodeConfig(tools=tools, logging=logging_config)
