"""Idiomatic emitter: stdlib generics for every component the mapping tables know.

Components are driven from the schematic when there is one, joined to their
PCB footprints for connectivity. Without a schematic, the PCB footprints
drive emission on their own and the component kind is inferred from the
footprint name. Anything that cannot be mapped is emitted as a raw
``Component()`` behind an ``# Unmapped ...`` comment so that no connection
is lost.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..constants import IMPORTED_SUFFIX, INDENT
from ..logging_config import create_logger
from ..mapping import (
    ComponentKind,
    GenericTemplate,
    extract_package,
    infer_footprint_kind,
    looks_like_part_number,
    map_symbol,
    normalize_value,
    template_for,
    value_kind_for,
)
from .common import (
    collect_nets,
    connected_pads,
    join_lines,
    render_board,
    render_header,
    render_imports,
    render_module_aliases,
    render_net_declarations,
    render_pin_dict,
)
from .naming import quote, sanitize_identifier

if TYPE_CHECKING:
    from ..project import Project
    from ..schema import FootprintInstance, PcbLayout, PlacedSymbol, Schematic

logger = create_logger(__name__)


def emit_idiomatic(project: Project) -> str:
    """Render ``project`` as Zener source using stdlib generic modules."""
    nets = collect_nets(project)

    lines = render_header(project.name)
    lines += render_imports(nets)
    lines += render_module_aliases(used_module_paths(project))
    lines += render_net_declarations(nets)

    if project.schematic is not None:
        lines += render_schematic_components(project.schematic, project.pcb)
    elif project.pcb is not None:
        lines += render_footprint_components(project.pcb)

    lines += render_board(f"{project.name}{IMPORTED_SUFFIX}")
    return join_lines(lines)


def used_module_paths(project: Project) -> set[str]:
    """Stdlib module paths of every template the component section will use."""
    templates: list[GenericTemplate | None]
    if project.schematic is not None:
        templates = [map_symbol(sym.lib_id) for sym in project.schematic.symbols]
    elif project.pcb is not None:
        templates = [
            template_for(infer_footprint_kind(fp.footprint, fp.reference))
            for fp in project.pcb.footprints
        ]
    else:
        templates = []
    return {t.module_path for t in templates if t is not None}


# ── Shared Block Pieces ─────────────────────────────────────────────


def _value_line(value: str, kind: ComponentKind) -> list[str]:
    if not value or kind is ComponentKind.OTHER or looks_like_part_number(value):
        return []
    return [f"{INDENT}value = {quote(normalize_value(value, kind))},"]


def _package_line(footprint: str) -> list[str]:
    package = extract_package(footprint)
    return [f"{INDENT}package = {quote(package)},"] if package else []


def _placement_lines(dnp: bool, exclude_from_bom: bool) -> list[str]:
    lines = []
    if dnp:
        lines.append(f"{INDENT}dnp = True,")
    if exclude_from_bom:
        lines.append(f"{INDENT}skip_bom = True,")
    return lines


def _pin_lines(template: GenericTemplate, footprint: FootprintInstance | None) -> list[str]:
    return [
        f"{INDENT}{template.pin_name(pad.number)} = {sanitize_identifier(pad.net_name)},"
        for pad in connected_pads(footprint)
    ]


def _block(module_name: str, name: str, body: list[str]) -> list[str]:
    return [f"{module_name}(", f"{INDENT}name = {quote(name)},", *body, ")", ""]


# ── Schematic Driven ────────────────────────────────────────────────


def render_schematic_components(schematic: Schematic, pcb: PcbLayout | None) -> list[str]:
    """One block per placed symbol, in schematic order."""
    by_uuid = pcb.footprints_by_symbol() if pcb is not None else {}

    lines = ["# Components"]
    for symbol in schematic.symbols:
        footprint = by_uuid.get(symbol.uuid)
        template = map_symbol(symbol.lib_id)
        if template is None:
            logger.debug("No generic for %s (%s)", symbol.lib_id, symbol.reference)
            lines += render_unmapped_symbol(symbol, footprint)
        else:
            lines += render_mapped_symbol(symbol, template, footprint)
    return lines


def render_mapped_symbol(
    symbol: PlacedSymbol,
    template: GenericTemplate,
    footprint: FootprintInstance | None,
) -> list[str]:
    body = _value_line(symbol.value, ComponentKind.from_lib_id(symbol.lib_id))
    body += _package_line(symbol.footprint)
    body += [f"{INDENT}{key} = {value}," for key, value in template.flags]
    body += _placement_lines(symbol.dnp, symbol.exclude_from_bom)
    body += _pin_lines(template, footprint)
    return _block(template.module_name, symbol.reference, body)


def render_unmapped_symbol(symbol: PlacedSymbol, footprint: FootprintInstance | None) -> list[str]:
    """Raw ``Component()`` carrying everything needed to finish the mapping by hand."""
    body = [
        f"{INDENT}symbol = Symbol(library = {quote(symbol.library)}, name = {quote(symbol.part_name)}),"
    ]
    if symbol.footprint:
        body.append(f"{INDENT}footprint = {quote(symbol.footprint)},")
    if symbol.value:
        body.append(f"{INDENT}value = {quote(symbol.value)},")
    body += _placement_lines(symbol.dnp, symbol.exclude_from_bom)
    body += render_pin_dict(connected_pads(footprint))
    return [f"# Unmapped symbol: {symbol.lib_id}", *_block("Component", symbol.reference, body)]


# ── Footprint Driven ────────────────────────────────────────────────


def render_footprint_components(pcb: PcbLayout) -> list[str]:
    """One block per footprint, for projects with a layout but no schematic."""
    lines = ["# Components (from PCB footprints)"]
    for fp in pcb.footprints:
        kind = infer_footprint_kind(fp.footprint, fp.reference)
        template = template_for(kind)
        if template is None:
            logger.debug("No generic for footprint %s (%s)", fp.footprint, fp.reference)
            lines += render_unmapped_footprint(fp)
            continue

        body = []
        if fp.value and not looks_like_part_number(fp.value):
            body.append(f"{INDENT}value = {quote(normalize_value(fp.value, value_kind_for(kind)))},")
        body += _package_line(fp.footprint)
        body += [f"{INDENT}{key} = {value}," for key, value in template.flags]
        body += _placement_lines(fp.attributes.dnp, fp.attributes.exclude_from_bom)
        body += _pin_lines(template, fp)
        lines += _block(template.module_name, fp.reference, body)
    return lines


def render_unmapped_footprint(fp: FootprintInstance) -> list[str]:
    body = []
    if fp.footprint:
        body.append(f"{INDENT}footprint = {quote(fp.footprint)},")
    if fp.value:
        body.append(f"{INDENT}value = {quote(fp.value)},")
    body += _placement_lines(fp.attributes.dnp, fp.attributes.exclude_from_bom)
    body += render_pin_dict(connected_pads(fp))
    return [f"# Unmapped footprint: {fp.footprint}", *_block("Component", fp.reference, body)]
