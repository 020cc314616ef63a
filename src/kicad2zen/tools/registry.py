"""Tool registry: the single list of tools the MCP server exposes.

fastmcp derives each tool's input schema from the handler signature, so an
entry only carries what the signature cannot: the public name and the
description shown to clients.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


@dataclass(frozen=True)
class ToolSpec:
    name: str
    description: str
    handler: Callable[..., dict[str, Any]]


TOOL_REGISTRY: dict[str, ToolSpec] = {}


def register_tool(name: str, description: str, handler: Callable[..., dict[str, Any]]) -> None:
    """Add a handler to the registry; registering a name twice is a bug."""
    if name in TOOL_REGISTRY:
        raise ValueError(f"Tool {name!r} is already registered")
    TOOL_REGISTRY[name] = ToolSpec(name, description, handler)
