"""Environment variable reader with dependency injection support.

This module provides the EnvReader class for reading and parsing environment
variables with type conversion. It accepts an optional env mapping so tests
can supply values without touching os.environ.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)


class EnvReader:
    """Environment variable reader with type conversion and validation.

    Example:
        # Production usage (reads from os.environ)
        reader = EnvReader()
        ffmpeg = reader.get_path("CTRANSCODE_FFMPEG_PATH")

        # Testing usage (inject custom env)
        reader = EnvReader(env={"CTRANSCODE_LOG_LEVEL": "debug"})
        level = reader.get_str("CTRANSCODE_LOG_LEVEL")  # Returns "debug"
    """

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Initialize the environment reader.

        Args:
            env: Optional mapping to use instead of os.environ.
        """
        self._env: Mapping[str, str] = env if env is not None else os.environ

    def get_str(self, var: str, default: str | None = None) -> str | None:
        """Get a string from environment variable.

        Args:
            var: Environment variable name.
            default: Default value if not set. Defaults to None.

        Returns:
            The environment variable value, or default if not set.
        """
        value = self._env.get(var)
        if value is None:
            return default
        return value

    def get_path(
        self, var: str, must_exist: bool = True, default: Path | None = None
    ) -> Path | None:
        """Get a path from environment variable.

        Args:
            var: Environment variable name.
            must_exist: If True, validate that the path exists and log a
                       warning if it doesn't. Defaults to True.
            default: Default value if not set or path doesn't exist.

        Returns:
            Path object, or default if not set (or if must_exist=True
            and path doesn't exist).
        """
        value = self._env.get(var)
        if not value:
            return default

        path = Path(value).expanduser()
        if must_exist and not path.exists():
            logger.warning(
                "Environment variable %s points to non-existent path: %s",
                var,
                value,
            )
            return default
        return path

    def get_path_list(self, var: str) -> list[Path] | None:
        """Get a list of paths separated by os.pathsep.

        Empty entries are skipped. Paths are not required to exist.

        Returns:
            List of paths, or None if the variable is not set.
        """
        value = self._env.get(var)
        if value is None:
            return None
        return [
            Path(part.strip()).expanduser()
            for part in value.split(os.pathsep)
            if part.strip()
        ]
