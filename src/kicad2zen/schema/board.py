"""Typed data models for KiCad PCB board files (.kicad_pcb)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..mapping.footprints import is_smd_footprint
from .common import Position


@dataclass(frozen=True)
class LayerDef:
    """A layer in the board stackup."""

    number: int
    name: str
    layer_type: str  # "signal", "power", "mixed", "jumper", "user"
    user_name: str | None = None  # e.g. "F.Silkscreen" for "F.SilkS"

    @property
    def is_copper(self) -> bool:
        return self.name.endswith(".Cu")

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "number": self.number,
            "name": self.name,
            "type": self.layer_type,
        }
        if self.user_name:
            d["user_name"] = self.user_name
        return d


@dataclass(frozen=True)
class Pad:
    """A pad on a footprint."""

    number: str  # "1", "A3", or "" for mechanical pads
    pad_type: str  # "smd", "thru_hole", "np_thru_hole", "connect"
    shape: str  # "roundrect", "circle", "rect", "oval", "custom"
    position: Position
    net_number: int = 0
    net_name: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "number": self.number,
            "type": self.pad_type,
            "shape": self.shape,
            "position": self.position.to_dict(),
            "net": {"number": self.net_number, "name": self.net_name},
        }


@dataclass(frozen=True)
class FootprintAttributes:
    """Flags from a footprint's ``(attr ...)`` node."""

    flags: frozenset[str] = frozenset()

    @property
    def smd(self) -> bool:
        return "smd" in self.flags

    @property
    def through_hole(self) -> bool:
        return "through_hole" in self.flags

    @property
    def dnp(self) -> bool:
        return "dnp" in self.flags

    @property
    def exclude_from_bom(self) -> bool:
        return "exclude_from_bom" in self.flags

    def to_dict(self) -> dict[str, Any]:
        return {"flags": sorted(self.flags)}


@dataclass(frozen=True)
class FootprintInstance:
    """A component footprint placed on the board."""

    uuid: str
    footprint: str  # e.g. "Capacitor_SMD:C_0805_2012Metric"
    layer: str  # e.g. "F.Cu"
    position: Position
    path: str = ""  # e.g. "/6f1e...": the schematic symbol this footprint realizes
    reference: str = ""  # e.g. "C7"
    value: str = ""  # e.g. "10uF"
    attributes: FootprintAttributes = field(default_factory=FootprintAttributes)
    pads: list[Pad] = field(default_factory=list)
    properties: dict[str, str] = field(default_factory=dict)

    @property
    def symbol_uuid(self) -> str:
        """The instance path with its leading separator stripped (schematic join key)."""
        return self.path.lstrip("/")

    @property
    def is_smd(self) -> bool:
        """From the ``attr`` flags, or guessed from the footprint name when there are none."""
        if self.attributes.flags:
            return self.attributes.smd
        return is_smd_footprint(self.footprint)

    def to_dict(self) -> dict[str, Any]:
        return {
            "uuid": self.uuid,
            "footprint": self.footprint,
            "layer": self.layer,
            "position": self.position.to_dict(),
            "path": self.path,
            "reference": self.reference,
            "value": self.value,
            "attributes": self.attributes.to_dict(),
            "pads": [p.to_dict() for p in self.pads],
            "properties": self.properties,
        }


@dataclass(frozen=True)
class PcbLayout:
    """A parsed PCB layout."""

    version: int = 0
    thickness: float = 0.0
    layers: list[LayerDef] = field(default_factory=list)
    nets: dict[int, str] = field(default_factory=dict)
    footprints: list[FootprintInstance] = field(default_factory=list)

    @property
    def copper_layers(self) -> list[str]:
        return [lyr.name for lyr in self.layers if lyr.is_copper]

    def footprints_by_symbol(self) -> dict[str, FootprintInstance]:
        """Index footprints by the schematic symbol UUID they realize."""
        return {fp.symbol_uuid: fp for fp in self.footprints if fp.symbol_uuid}

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": self.version,
            "thickness": self.thickness,
            "copper_layers": self.copper_layers,
            "net_count": len(self.nets),
            "footprint_count": len(self.footprints),
            "layers": [lyr.to_dict() for lyr in self.layers],
            "nets": [{"number": n, "name": name} for n, name in self.nets.items()],
            "footprints": [fp.to_dict() for fp in self.footprints],
        }
