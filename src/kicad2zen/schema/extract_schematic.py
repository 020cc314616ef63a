"""Extract typed schema models from parsed schematic S-expression trees.

A single pass over each node's children dispatches on the child's tag;
unknown tags are skipped and missing sub-elements leave fields at their
zero values.
"""

from __future__ import annotations

from pathlib import Path

from ..constants import SCHEMATIC_ROOT_TAG
from ..logging_config import create_logger
from ..sexp import Document, SExp
from .common import atom_at, extract_position, parse_flag, parse_int
from .schematic import LibSymbolDef, PinDef, PlacedSymbol, Schematic

logger = create_logger(__name__)


def _extract_property(node: SExp) -> tuple[str, str] | None:
    """Return (key, value) from a ``(property "Key" "Value" ...)`` node."""
    atoms = node.atoms
    if not atoms or not atoms[0].value:
        return None
    value = atoms[1].value if len(atoms) > 1 else ""
    return atoms[0].value, value or ""


def _extract_unit_pins(unit_node: SExp) -> list[PinDef]:
    """Collect pins from a nested symbol unit such as ``(symbol "R_1_1" ...)``."""
    pins: list[PinDef] = []
    for child in unit_node.children:
        if child.name == "pin":
            electrical_type = atom_at(child, 0, "passive")
            name = ""
            number = ""
            for sub in child.children:
                if sub.name == "name":
                    name = atom_at(sub, 0)
                elif sub.name == "number":
                    number = atom_at(sub, 0)
            if number:
                pins.append(PinDef(number=number, name=name, electrical_type=electrical_type))
        elif child.name == "symbol":
            pins.extend(_extract_unit_pins(child))
    return pins


def extract_lib_symbol(node: SExp) -> LibSymbolDef | None:
    """Extract a LibSymbolDef from a ``(symbol "Lib:Name" ...)`` node in ``lib_symbols``."""
    name = node.first_value
    if not name:
        return None

    properties: dict[str, str] = {}
    pins: list[PinDef] = []
    for child in node.children:
        if child.name == "property":
            prop = _extract_property(child)
            if prop is not None:
                properties[prop[0]] = prop[1]
        elif child.name == "symbol":
            pins.extend(_extract_unit_pins(child))

    return LibSymbolDef(name=name, properties=properties, pins=pins)


def extract_lib_symbols(node: SExp | None) -> dict[str, LibSymbolDef]:
    """Extract all library symbol definitions from a ``(lib_symbols ...)`` node."""
    symbols: dict[str, LibSymbolDef] = {}
    if node is None:
        return symbols
    for child in node.find_all("symbol"):
        lib_symbol = extract_lib_symbol(child)
        if lib_symbol is not None:
            symbols[lib_symbol.name] = lib_symbol
    return symbols


def _instance_reference(node: SExp) -> str:
    """Reference designator recorded under ``(instances (project ... (path ... (reference "R1"))))``."""
    for ref_node in node.find_recursive("reference"):
        ref = ref_node.first_value
        if ref:
            return ref
    return ""


def extract_placed_symbol(node: SExp) -> PlacedSymbol:
    """Extract a PlacedSymbol from a top-level ``(symbol (lib_id ...) ...)`` node."""
    uuid = ""
    lib_id = ""
    position = extract_position(None)
    dnp = False
    exclude_from_bom = False
    exclude_from_board = False
    pins: dict[str, str] = {}
    properties: dict[str, str] = {}
    instances: SExp | None = None

    for child in node.children:
        tag = child.name
        if tag == "lib_id":
            lib_id = atom_at(child, 0)
        elif tag == "uuid":
            uuid = atom_at(child, 0)
        elif tag == "at":
            position = extract_position(child)
        elif tag == "dnp":
            dnp = parse_flag(child, "yes")
        elif tag == "in_bom":
            exclude_from_bom = parse_flag(child, "no")
        elif tag == "on_board":
            exclude_from_board = parse_flag(child, "no")
        elif tag == "property":
            prop = _extract_property(child)
            if prop is not None:
                properties[prop[0]] = prop[1]
        elif tag == "pin":
            # (pin "1" (uuid "..."))
            number = atom_at(child, 0)
            pin_uuid = atom_at(child.get("uuid"), 0)
            if number and pin_uuid:
                pins[number] = pin_uuid
        elif tag == "instances":
            instances = child

    reference = properties.get("Reference", "")
    if not reference and instances is not None:
        reference = _instance_reference(instances)

    return PlacedSymbol(
        uuid=uuid,
        lib_id=lib_id,
        position=position,
        reference=reference,
        value=properties.get("Value", ""),
        footprint=properties.get("Footprint", ""),
        dnp=dnp,
        exclude_from_bom=exclude_from_bom,
        exclude_from_board=exclude_from_board,
        pins=pins,
        properties=properties,
    )


def extract_schematic(doc: Document) -> Schematic:
    """Walk a ``kicad_sch`` tree into a Schematic model."""
    version = 0
    sch_uuid = ""
    lib_symbols: dict[str, LibSymbolDef] = {}
    symbols: list[PlacedSymbol] = []

    for child in doc.root.children:
        tag = child.name
        if tag == "version":
            version = parse_int(child.first_value)
        elif tag == "uuid":
            sch_uuid = atom_at(child, 0)
        elif tag == "lib_symbols":
            lib_symbols = extract_lib_symbols(child)
        elif tag == "symbol":
            symbols.append(extract_placed_symbol(child))

    logger.debug(
        "Parsed schematic: %d library symbols, %d placed symbols",
        len(lib_symbols),
        len(symbols),
    )
    return Schematic(version=version, uuid=sch_uuid, lib_symbols=lib_symbols, symbols=symbols)


def parse_schematic(text: str, path: Path | None = None) -> Schematic:
    """Parse ``.kicad_sch`` text.

    Raises:
        FormatError: If the text is not a ``kicad_sch`` s-expression.
    """
    return extract_schematic(Document.from_text(text, expected_root=SCHEMATIC_ROOT_TAG, path=path))


def load_schematic(path: str | Path) -> Schematic:
    """Load and parse a ``.kicad_sch`` file.

    Raises:
        IoError: If the file cannot be read.
        FormatError: If the file is not a schematic.
    """
    return extract_schematic(Document.load(path, expected_root=SCHEMATIC_ROOT_TAG))
