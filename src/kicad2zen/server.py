"""kicad2zen MCP server: entry point."""

from __future__ import annotations

from fastmcp import FastMCP

from .logging_config import setup_logging
from .tools import TOOL_REGISTRY


def create_server() -> FastMCP:
    """Create and configure the kicad2zen MCP server."""
    mcp = FastMCP("kicad2zen")

    for spec in TOOL_REGISTRY.values():
        mcp.tool(spec.handler, name=spec.name, description=spec.description)

    return mcp


def main() -> None:
    """Console entry point (stdio transport)."""
    setup_logging()
    server = create_server()
    server.run()


if __name__ == "__main__":
    main()
