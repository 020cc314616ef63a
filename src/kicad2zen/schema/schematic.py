"""Typed data models for KiCad schematic files (.kicad_sch)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .common import Position, split_lib_id


@dataclass(frozen=True)
class PinDef:
    """A pin declared by a library symbol."""

    number: str  # e.g. "1"
    name: str  # e.g. "~" or "VCC"
    electrical_type: str = "passive"  # "passive", "input", "power_in", ...

    def to_dict(self) -> dict[str, Any]:
        return {"number": self.number, "name": self.name, "type": self.electrical_type}


@dataclass(frozen=True)
class LibSymbolDef:
    """A library symbol definition embedded in the schematic."""

    name: str  # e.g. "Device:R"
    properties: dict[str, str] = field(default_factory=dict)
    pins: list[PinDef] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "properties": self.properties,
            "pins": [p.to_dict() for p in self.pins],
        }


@dataclass(frozen=True)
class PlacedSymbol:
    """A symbol instance placed on the schematic."""

    uuid: str
    lib_id: str  # e.g. "Device:R"
    position: Position
    reference: str = ""  # e.g. "R1"
    value: str = ""  # e.g. "10k" or "ERJ-2RKF1003X"
    footprint: str = ""  # e.g. "Resistor_SMD:R_0402_1005Metric"
    dnp: bool = False
    exclude_from_bom: bool = False
    exclude_from_board: bool = False
    pins: dict[str, str] = field(default_factory=dict)  # pin number -> pin uuid
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def library(self) -> str:
        return split_lib_id(self.lib_id)[0]

    @property
    def part_name(self) -> str:
        return split_lib_id(self.lib_id)[1]

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "lib_id": self.lib_id,
            "position": self.position.to_dict(),
            "reference": self.reference,
            "value": self.value,
            "footprint": self.footprint,
            "dnp": self.dnp,
            "exclude_from_bom": self.exclude_from_bom,
            "exclude_from_board": self.exclude_from_board,
            "pins": self.pins,
            "properties": self.properties,
        }


@dataclass(frozen=True)
class Schematic:
    """A parsed schematic sheet."""

    version: int = 0
    uuid: str = ""
    lib_symbols: dict[str, LibSymbolDef] = field(default_factory=dict)
    symbols: list[PlacedSymbol] = field(default_factory=list)

    def find_symbol(self, reference: str) -> PlacedSymbol | None:
        """Return the placed symbol with the given reference designator."""
        return next((s for s in self.symbols if s.reference == reference), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "uuid": self.uuid,
            "lib_symbol_count": len(self.lib_symbols),
            "symbol_count": len(self.symbols),
            "lib_symbols": {k: v.to_dict() for k, v in self.lib_symbols.items()},
            "symbols": [s.to_dict() for s in self.symbols],
        }
