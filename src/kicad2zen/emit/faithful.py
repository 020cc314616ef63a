"""Faithful emitter: every symbol as a raw ``Component()``.

Keeps the exact KiCad symbol library, footprint and value strings so that
nothing is reinterpreted by the mapping tables. No stdlib generics are used.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import INDENT, KICAD_SYMBOLS_PREFIX
from .common import (
    collect_nets,
    connected_pads,
    join_lines,
    render_board,
    render_header,
    render_imports,
    render_net_declarations,
    render_pin_dict,
)
from .naming import quote

if TYPE_CHECKING:
    from ..project import Project
    from ..schema import FootprintInstance, PlacedSymbol


def emit_faithful(project: Project) -> str:
    """Render ``project`` as Zener source that preserves the KiCad data verbatim."""
    nets = collect_nets(project)

    lines = render_header(project.name, note="Mode: faithful (preserves exact KiCad data)")
    lines += render_imports(nets)
    lines += render_net_declarations(nets)

    if project.schematic is not None:
        by_uuid = project.pcb.footprints_by_symbol() if project.pcb is not None else {}
        lines.append("# Components")
        for symbol in project.schematic.symbols:
            lines += render_component(symbol, by_uuid.get(symbol.uuid))

    lines += render_board(project.name)
    return join_lines(lines)


def render_component(symbol: PlacedSymbol, footprint: FootprintInstance | None) -> list[str]:
    library = f"{KICAD_SYMBOLS_PREFIX}/{symbol.library}.kicad_sym"
    lines = [
        "Component(",
        f"{INDENT}name = {quote(symbol.reference)},",
        f"{INDENT}symbol = Symbol(library = {quote(library)}, name = {quote(symbol.part_name)}),",
    ]
    if symbol.footprint:
        lines.append(f"{INDENT}footprint = {quote(symbol.footprint)},")
    lines += render_pin_dict(connected_pads(footprint))

    properties = []
    if symbol.value:
        properties.append(f'"Value": {quote(symbol.value)}')
    if symbol.dnp:
        properties.append('"dnp": True')
    if symbol.exclude_from_bom:
        properties.append('"exclude_from_bom": True')
    if properties:
        lines.append(f"{INDENT}properties = {{")
        lines += [f"{INDENT * 2}{prop}," for prop in properties]
        lines.append(f"{INDENT}}},")

    lines += [")", ""]
    return lines
