"""Integration tests for the MCP server end-to-end flow."""

from __future__ import annotations

from pathlib import Path

from kicad2zen.server import create_server
from kicad2zen.tools import TOOL_REGISTRY

BLINKY_DIR = Path(__file__).parent.parent / "fixtures" / "blinky"


class TestServerCreation:
    def test_create_server(self) -> None:
        server = create_server()
        assert server is not None
        assert server.name == "kicad2zen"

    def test_import_tools_registered(self) -> None:
        assert {"inspect_kicad_project", "import_kicad_project"} <= set(TOOL_REGISTRY)


class TestEndToEnd:
    """Inspect then import the fixture project through the tool handlers."""

    def test_inspect_then_import(self, tmp_path: Path) -> None:
        info = TOOL_REGISTRY["inspect_kicad_project"].handler(directory=str(BLINKY_DIR))
        assert info["project_name"] == "blinky"
        assert info["symbol_count"] == 4
        assert info["footprint_count"] == 4

        out = tmp_path / "blinky.zen"
        result = TOOL_REGISTRY["import_kicad_project"].handler(
            directory=str(BLINKY_DIR), output_path=str(out)
        )
        assert result["status"] == "ok"
        assert result["output_path"] == str(out)
        assert out.read_text(encoding="utf-8") == result["source"]

    def test_missing_directory_reports_error(self, tmp_path: Path) -> None:
        result = TOOL_REGISTRY["import_kicad_project"].handler(directory=str(tmp_path / "nope"))
        assert result["error_code"] == "IO_ERROR"
