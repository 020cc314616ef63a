"""Common typed data models and lenient field helpers shared across KiCad file types.

Parsing is deliberately forgiving: a missing or malformed sub-element
leaves its field at the zero value of its type instead of failing the
whole file. The helpers here are the only place that policy lives.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..sexp import SExp


@dataclass(frozen=True)
class Position:
    """2D position in sheet or board coordinates (mm)."""

    x: float
    y: float
    angle: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"x": self.x, "y": self.y}
        if self.angle != 0.0:
            d["angle"] = self.angle
        return d


def parse_float(val: str | None, default: float = 0.0) -> float:
    if val is None:
        return default
    try:
        return float(val)
    except (ValueError, TypeError):
        return default


def parse_int(val: str | None, default: int = 0) -> int:
    if val is None:
        return default
    try:
        return int(val)
    except (ValueError, TypeError):
        return default


def atom_at(node: SExp | None, index: int, default: str = "") -> str:
    """Value of the ``index``-th atom child of ``node``, or ``default``."""
    if node is None:
        return default
    vals = node.atom_values
    return vals[index] if len(vals) > index else default


def parse_flag(node: SExp | None, truthy: str = "yes") -> bool:
    """True when the node's first atom equals ``truthy`` (``(dnp yes)``)."""
    if node is None:
        return False
    return node.first_value == truthy


def extract_position(node: SExp | None) -> Position:
    """Extract Position from an (at x y [angle]) node."""
    if node is None:
        return Position(0.0, 0.0)
    vals = node.atom_values
    x = parse_float(vals[0]) if len(vals) > 0 else 0.0
    y = parse_float(vals[1]) if len(vals) > 1 else 0.0
    angle = parse_float(vals[2]) if len(vals) > 2 else 0.0
    return Position(x, y, angle)


def split_lib_id(lib_id: str) -> tuple[str, str]:
    """Split ``"Library:Name"`` into its parts; no separator means library ``""``."""
    library, sep, name = lib_id.partition(":")
    if not sep:
        return "", lib_id
    return library, name
