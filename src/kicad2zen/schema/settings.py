"""Typed data models for KiCad project settings (.kicad_pro).

Defaults mirror the values KiCad itself assumes when a field is absent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_NET_CLASS = "Default"


@dataclass(frozen=True)
class NetClass:
    """A net class: routing widths and clearances shared by a group of nets (mm)."""

    name: str = DEFAULT_NET_CLASS
    track_width: float = 0.2
    clearance: float = 0.2
    via_diameter: float = 0.6
    via_drill: float = 0.3
    diff_pair_width: float = 0.2
    diff_pair_gap: float = 0.25

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "track_width": self.track_width,
            "clearance": self.clearance,
            "via_diameter": self.via_diameter,
            "via_drill": self.via_drill,
            "diff_pair_width": self.diff_pair_width,
            "diff_pair_gap": self.diff_pair_gap,
        }


@dataclass(frozen=True)
class DesignRules:
    """Board-wide minimum design rules (mm)."""

    min_clearance: float = 0.0
    min_track_width: float = 0.0
    min_via_diameter: float = 0.5
    min_via_drill: float = 0.3
    min_hole_clearance: float = 0.25
    min_copper_edge_clearance: float = 0.5

    def to_dict(self) -> dict[str, Any]:
        return {
            "min_clearance": self.min_clearance,
            "min_track_width": self.min_track_width,
            "min_via_diameter": self.min_via_diameter,
            "min_via_drill": self.min_via_drill,
            "min_hole_clearance": self.min_hole_clearance,
            "min_copper_edge_clearance": self.min_copper_edge_clearance,
        }


@dataclass(frozen=True)
class Settings:
    """Project settings relevant to the import: net classes and design rules."""

    net_classes: list[NetClass] = field(default_factory=list)
    rules: DesignRules = field(default_factory=DesignRules)

    def net_class(self, name: str) -> NetClass | None:
        return next((nc for nc in self.net_classes if nc.name == name), None)

    def to_dict(self) -> dict[str, Any]:
        return {
            "net_classes": [nc.to_dict() for nc in self.net_classes],
            "rules": self.rules.to_dict(),
        }
