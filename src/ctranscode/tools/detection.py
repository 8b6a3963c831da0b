"""External tool lookup.

The engine location is resolved once and handed to the introspector and
executor, so the process environment is never modified.
"""

import logging
import shutil
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)


def _find_in_dirs(name: str, search_dirs: Sequence[Path]) -> Path | None:
    """Look for an executable in explicit directories, in order."""
    for directory in search_dirs:
        which_result = shutil.which(name, path=str(directory.expanduser()))
        if which_result:
            return Path(which_result)
    return None


def find_tool(
    name: str,
    configured_path: Path | None = None,
    search_dirs: Sequence[Path] = (),
) -> Path | None:
    """Find a tool executable.

    Lookup order: configured path, then PATH, then the extra search
    directories.

    Args:
        name: Tool name (e.g., "ffmpeg").
        configured_path: Optional configured path override.
        search_dirs: Extra directories searched after PATH.

    Returns:
        Path to tool executable, or None if not found.
    """
    # Try configured path first
    if configured_path:
        configured_path = configured_path.expanduser()
        if configured_path.is_file():
            return configured_path
        logger.warning(
            "Configured path for %s is not a file: %s", name, configured_path
        )

    # Fall back to PATH lookup
    which_result = shutil.which(name)
    if which_result:
        return Path(which_result)

    return _find_in_dirs(name, search_dirs)


def resolve_tool(
    name: str,
    configured_path: Path | None = None,
    search_dirs: Sequence[Path] = (),
) -> str | Path:
    """Resolve a tool for launching.

    Unlike find_tool this never returns None: when the tool cannot be found
    the bare name is returned and launching it reports the failure.

    Returns:
        Path to the executable, or ``name`` if it was not found.
    """
    path = find_tool(name, configured_path, search_dirs)
    if path is None:
        logger.debug("%s not found on PATH or in %d extra dirs", name, len(search_dirs))
        return name
    logger.debug("Using %s at %s", name, path)
    return path
