"""MCP tool definitions for the KiCad importer."""

# Import modules to trigger tool registration via register_tool() calls
from . import convert  # noqa: F401
from .registry import TOOL_REGISTRY, ToolSpec, register_tool

__all__ = [
    "TOOL_REGISTRY",
    "ToolSpec",
    "register_tool",
]
