"""Configuration management for ctranscode.

Configuration is loaded with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (CTRANSCODE_*)
3. Config file (~/.ctranscode/config.toml)
4. Default values (lowest priority)
"""

from ctranscode.config.env import EnvReader
from ctranscode.config.loader import (
    get_config,
    get_default_config_path,
    load_config_file,
)
from ctranscode.config.logging_factory import build_logging_config
from ctranscode.config.models import CTranscodeConfig, LoggingConfig, ToolPathsConfig

__all__ = [
    # Models
    "CTranscodeConfig",
    "LoggingConfig",
    "ToolPathsConfig",
    # Loader
    "get_config",
    "get_default_config_path",
    "load_config_file",
    "EnvReader",
    "build_logging_config",
]
