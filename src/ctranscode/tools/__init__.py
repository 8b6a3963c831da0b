"""External tool discovery for ctranscode."""

from ctranscode.tools.detection import find_tool, resolve_tool

__all__ = ["find_tool", "resolve_tool"]
