"""Output sections shared by every emission mode.

Each ``render_*`` function returns the lines of one section, without
trailing newlines; the emitters join them.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..constants import (
    DEFAULT_BOARD_LAYERS,
    INDENT,
    PCB_TOOLCHAIN_VERSION,
    STDLIB_BOARD_CONFIG,
    STDLIB_INTERFACES,
)
from ..mapping import NetRole, classify_net, is_connected_net, net_constructor
from .naming import quote, sanitize_identifier

if TYPE_CHECKING:
    from ..project import Project
    from ..schema import FootprintInstance, Pad


def collect_nets(project: Project) -> dict[str, NetRole]:
    """Every connected net on the board, keyed by raw name, with its role.

    Names come from the board net table and from the pads themselves, since
    newer layouts reference nets by name on the pad without a table entry.
    """
    if project.pcb is None:
        return {}
    names = set(project.pcb.nets.values())
    for footprint in project.pcb.footprints:
        names.update(pad.net_name for pad in footprint.pads)
    return {name: classify_net(name) for name in names if is_connected_net(name)}


def connected_pads(footprint: FootprintInstance | None) -> list[Pad]:
    """Pads of ``footprint`` that sit on a real net, in declaration order."""
    if footprint is None:
        return []
    return [pad for pad in footprint.pads if is_connected_net(pad.net_name)]


def render_header(project_name: str, note: str = "Import with: pcb import kicad <path>") -> list[str]:
    return [
        f"# Auto-generated from KiCad project: {project_name}",
        f"# {note}",
        "",
        "# ```pcb",
        "# [workspace]",
        f'# pcb-version = "{PCB_TOOLCHAIN_VERSION}"',
        "# ```",
        "",
    ]


def render_imports(nets: dict[str, NetRole]) -> list[str]:
    lines = [f'load({quote(STDLIB_BOARD_CONFIG)}, "Board")']

    interfaces = []
    if NetRole.POWER in nets.values():
        interfaces.append("Power")
    if NetRole.GROUND in nets.values():
        interfaces.append("Ground")
    if interfaces:
        names = ", ".join(quote(name) for name in interfaces)
        lines.append(f"load({quote(STDLIB_INTERFACES)}, {names})")

    lines.append("")
    return lines


def render_module_aliases(module_paths: Iterable[str]) -> list[str]:
    """``Resistor = Module("@stdlib/generics/Resistor.zen")`` per module, sorted by path."""
    paths = sorted(set(module_paths))
    if not paths:
        return []

    lines = []
    for path in paths:
        alias = path.rsplit("/", 1)[-1].removesuffix(".zen")
        lines.append(f"{alias} = Module({quote(path)})")
    lines.append("")
    return lines


def render_net_declarations(nets: dict[str, NetRole]) -> list[str]:
    if not nets:
        return []

    lines = ["# Nets"]
    for name in sorted(nets):
        constructor = net_constructor(nets[name])
        lines.append(f"{sanitize_identifier(name)} = {constructor}({quote(name)})")
    lines.append("")
    return lines


def render_pin_dict(pads: list[Pad], key: str = "pins") -> list[str]:
    """``pins = {"1": NET, ...},`` for raw pad-number connections."""
    if not pads:
        return []

    lines = [f"{INDENT}{key} = {{"]
    for pad in pads:
        lines.append(f"{INDENT * 2}{quote(pad.number)}: {sanitize_identifier(pad.net_name)},")
    lines.append(f"{INDENT}}},")
    return lines


def render_board(board_name: str) -> list[str]:
    return [
        "# Board configuration",
        "Board(",
        f"{INDENT}name = {quote(board_name)},",
        f"{INDENT}layers = {DEFAULT_BOARD_LAYERS},",
        f"{INDENT}layout_path = {quote('layout/' + board_name)}",
        ")",
    ]


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines) + "\n"
