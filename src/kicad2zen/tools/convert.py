"""KiCad import tools: inspect a project directory and convert it to Zener."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from ..emit import OutputMode
from ..exceptions import IoError, Kicad2ZenError, ValidationError
from ..logging_config import create_logger
from ..project import convert_project, load_project
from .registry import register_tool

logger = create_logger(__name__)


def _parse_mode(mode: str) -> OutputMode:
    try:
        return OutputMode(mode.lower())
    except ValueError:
        valid = ", ".join(m.value for m in OutputMode)
        raise ValidationError(f"Unknown mode {mode!r}; expected one of: {valid}", field="mode") from None


# ── Handlers ────────────────────────────────────────────────────────


def _inspect_project_handler(directory: str) -> dict[str, Any]:
    """Report which KiCad files a directory holds and what they contain.

    Args:
        directory: Path to the KiCad project directory.
    """
    try:
        project = load_project(directory)
    except Kicad2ZenError as e:
        return e.to_dict()

    summary: dict[str, Any] = {"project_name": project.name, "found": project.found}
    if project.schematic is not None:
        summary["symbol_count"] = len(project.schematic.symbols)
        summary["lib_symbol_count"] = len(project.schematic.lib_symbols)
    if project.pcb is not None:
        summary["footprint_count"] = len(project.pcb.footprints)
        summary["net_count"] = len(project.pcb.nets)
        summary["copper_layers"] = project.pcb.copper_layers
    if project.settings is not None:
        summary["net_classes"] = [nc.name for nc in project.settings.net_classes]
    return summary


def _import_project_handler(
    directory: str,
    mode: str = "idiomatic",
    output_path: str | None = None,
) -> dict[str, Any]:
    """Convert a KiCad project directory to Zener source.

    Args:
        directory: Path to the KiCad project directory.
        mode: "idiomatic" (stdlib generics) or "faithful" (raw components).
        output_path: Optional file to write the generated source to.
    """
    try:
        output_mode = _parse_mode(mode)
        project, source = convert_project(directory, output_mode)
        if output_path is not None:
            try:
                Path(output_path).write_text(source, encoding="utf-8")
            except OSError as e:
                raise IoError(f"Failed to write {output_path}: {e}", path=output_path) from e
            logger.info("Wrote %s", output_path)
    except Kicad2ZenError as e:
        return e.to_dict()

    result: dict[str, Any] = {
        "status": "ok",
        "project_name": project.name,
        "mode": output_mode.value,
        "found": project.found,
        "source": source,
    }
    if output_path is not None:
        result["output_path"] = output_path
    return result


# ── Registration ────────────────────────────────────────────────────

register_tool(
    name="inspect_kicad_project",
    description="List the KiCad files in a project directory with symbol, footprint and net counts.",
    handler=_inspect_project_handler,
)

register_tool(
    name="import_kicad_project",
    description="Convert a KiCad project (schematic, PCB, settings) into Zener source.",
    handler=_import_project_handler,
)
