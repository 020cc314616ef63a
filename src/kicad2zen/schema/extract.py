"""Extract typed schema models from parsed PCB S-expression trees.

Converts raw SExp nodes into the PcbLayout model used for cross-referencing
schematic symbols with their placed footprints.
"""

from __future__ import annotations

from pathlib import Path

from ..constants import PCB_ROOT_TAG
from ..logging_config import create_logger
from ..sexp import Document, SExp
from .board import FootprintAttributes, FootprintInstance, LayerDef, Pad, PcbLayout
from .common import atom_at, extract_position, parse_float, parse_int

logger = create_logger(__name__)

# Footprint tags: "module" is the pre-KiCad 6 spelling
_FOOTPRINT_TAGS = ("footprint", "module")


def extract_nets(root: SExp) -> dict[int, str]:
    """Extract the net-id -> net-name table from top-level ``(net N "name")`` nodes."""
    nets: dict[int, str] = {}
    for node in root.find_all("net"):
        vals = node.atom_values
        if not vals:
            continue
        nets[parse_int(vals[0])] = vals[1] if len(vals) > 1 else ""
    return nets


def extract_layers(node: SExp | None) -> list[LayerDef]:
    """Extract all layers from a ``(layers ...)`` node."""
    if node is None:
        return []
    layers: list[LayerDef] = []
    for child in node.children:
        if not child.is_list:
            continue
        # Layer format: (number "name" type ["user_name"]); the number is the tag
        vals = child.atom_values
        if len(vals) < 2:
            continue
        layers.append(
            LayerDef(
                number=parse_int(child.name),
                name=vals[0],
                layer_type=vals[1],
                user_name=vals[2] if len(vals) > 2 else None,
            )
        )
    return layers


def _extract_pad_net(node: SExp | None, nets: dict[int, str]) -> tuple[int, str]:
    """Resolve a pad's net reference.

    Accepts ``(net 3 "GND")``, the newer name-only ``(net "GND")`` and the
    id-only ``(net 3)``, which is looked up in the board net table.
    """
    if node is None:
        return 0, ""
    atoms = node.atoms
    if not atoms:
        return 0, ""
    if len(atoms) >= 2:
        return parse_int(atoms[0].value), atoms[1].value or ""
    only = atoms[0]
    if only.is_string:
        name = only.value or ""
        number = next((n for n, net_name in nets.items() if net_name == name), 0)
        return number, name
    number = parse_int(only.value)
    return number, nets.get(number, "")


def extract_pad(pad_node: SExp, nets: dict[int, str] | None = None) -> Pad:
    """Extract a Pad from a (pad ...) S-expression node."""
    net_number, net_name = _extract_pad_net(pad_node.get("net"), nets or {})
    return Pad(
        number=atom_at(pad_node, 0),
        pad_type=atom_at(pad_node, 1),
        shape=atom_at(pad_node, 2),
        position=extract_position(pad_node.get("at")),
        net_number=net_number,
        net_name=net_name,
    )


def extract_footprint(fp_node: SExp, nets: dict[int, str] | None = None) -> FootprintInstance:
    """Extract a FootprintInstance from a ``(footprint "Lib:Name" ...)`` node."""
    nets = nets or {}
    uuid = ""
    layer = ""
    path = ""
    position = extract_position(None)
    flags: frozenset[str] = frozenset()
    pads: list[Pad] = []
    properties: dict[str, str] = {}

    for child in fp_node.children:
        tag = child.name
        if tag == "layer":
            layer = atom_at(child, 0)
        elif tag in ("uuid", "tstamp"):
            uuid = uuid or atom_at(child, 0)
        elif tag == "at":
            position = extract_position(child)
        elif tag == "path":
            path = atom_at(child, 0)
        elif tag == "attr":
            flags = frozenset(child.atom_values)
        elif tag == "property":
            vals = child.atom_values
            if vals and vals[0]:
                properties[vals[0]] = vals[1] if len(vals) > 1 else ""
        elif tag == "fp_text":
            # KiCad 6/7 store reference and value as text items
            kind = atom_at(child, 0)
            if kind == "reference":
                properties.setdefault("Reference", atom_at(child, 1))
            elif kind == "value":
                properties.setdefault("Value", atom_at(child, 1))
        elif tag == "pad":
            pads.append(extract_pad(child, nets))

    return FootprintInstance(
        uuid=uuid,
        footprint=fp_node.first_value or "",
        layer=layer,
        position=position,
        path=path,
        reference=properties.get("Reference", ""),
        value=properties.get("Value", ""),
        attributes=FootprintAttributes(flags),
        pads=pads,
        properties=properties,
    )


def extract_pcb(doc: Document) -> PcbLayout:
    """Walk a ``kicad_pcb`` tree into a PcbLayout model."""
    root = doc.root
    # Pads may reference nets by id only, so the net table is read first
    nets = extract_nets(root)

    version = 0
    thickness = 0.0
    layers: list[LayerDef] = []
    footprints: list[FootprintInstance] = []

    for child in root.children:
        tag = child.name
        if tag == "version":
            version = parse_int(child.first_value)
        elif tag == "general":
            thickness_node = child.get("thickness")
            thickness = parse_float(thickness_node.first_value if thickness_node else None)
        elif tag == "layers":
            layers = extract_layers(child)
        elif tag in _FOOTPRINT_TAGS:
            footprints.append(extract_footprint(child, nets))

    logger.debug(
        "Parsed PCB: %d layers, %d nets, %d footprints",
        len(layers),
        len(nets),
        len(footprints),
    )
    return PcbLayout(
        version=version,
        thickness=thickness,
        layers=layers,
        nets=nets,
        footprints=footprints,
    )


def parse_pcb(text: str, path: Path | None = None) -> PcbLayout:
    """Parse ``.kicad_pcb`` text.

    Raises:
        FormatError: If the text is not a ``kicad_pcb`` s-expression.
    """
    return extract_pcb(Document.from_text(text, expected_root=PCB_ROOT_TAG, path=path))


def load_pcb(path: str | Path) -> PcbLayout:
    """Load and parse a ``.kicad_pcb`` file.

    Raises:
        IoError: If the file cannot be read.
        FormatError: If the file is not a PCB layout.
    """
    return extract_pcb(Document.load(path, expected_root=PCB_ROOT_TAG))
