"""Extract project settings from a ``.kicad_pro`` JSON document.

Only net classes and board design rules are read. Every field is optional:
an absent field takes KiCad's own default, a malformed number becomes 0.0.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..exceptions import FormatError
from ..logging_config import create_logger
from ..sexp import read_text
from .settings import DEFAULT_NET_CLASS, DesignRules, NetClass, Settings

logger = create_logger(__name__)

# JSON key -> NetClass field
_NET_CLASS_FIELDS: dict[str, str] = {
    "track_width": "track_width",
    "clearance": "clearance",
    "via_diameter": "via_diameter",
    "via_drill": "via_drill",
    "diff_pair_width": "diff_pair_width",
    "diff_pair_gap": "diff_pair_gap",
}

# JSON key under board.design_settings.rules -> DesignRules field
_RULE_FIELDS: dict[str, str] = {
    "min_clearance": "min_clearance",
    "min_track_width": "min_track_width",
    "min_via_diameter": "min_via_diameter",
    "min_through_hole_diameter": "min_via_drill",
    "min_hole_clearance": "min_hole_clearance",
    "min_copper_edge_clearance": "min_copper_edge_clearance",
}


def _section(data: Any, *keys: str) -> dict[str, Any]:
    """Walk nested objects, returning {} as soon as a level is missing or not an object."""
    current = data
    for key in keys:
        if not isinstance(current, dict):
            return {}
        current = current.get(key)
    return current if isinstance(current, dict) else {}


def _coerce_float(value: Any) -> float:
    try:
        return float(value)
    except (ValueError, TypeError):
        return 0.0


def _numeric_fields(data: dict[str, Any], mapping: dict[str, str]) -> dict[str, float]:
    """Collect present fields only, so absent ones keep the dataclass defaults."""
    return {
        attr: _coerce_float(data[key])
        for key, attr in mapping.items()
        if key in data and data[key] is not None
    }


def extract_net_class(data: dict[str, Any]) -> NetClass:
    name = data.get("name")
    return NetClass(
        name=name if isinstance(name, str) and name else DEFAULT_NET_CLASS,
        **_numeric_fields(data, _NET_CLASS_FIELDS),
    )


def extract_design_rules(data: dict[str, Any]) -> DesignRules:
    return DesignRules(**_numeric_fields(data, _RULE_FIELDS))


def extract_settings(data: dict[str, Any]) -> Settings:
    """Build Settings from an already decoded ``.kicad_pro`` object."""
    classes = _section(data, "net_settings").get("classes")
    net_classes = [
        extract_net_class(entry)
        for entry in (classes if isinstance(classes, list) else [])
        if isinstance(entry, dict)
    ]
    rules = extract_design_rules(_section(data, "board", "design_settings", "rules"))
    logger.debug("Parsed project settings: %d net classes", len(net_classes))
    return Settings(net_classes=net_classes, rules=rules)


def parse_settings(text: str, path: Path | None = None) -> Settings:
    """Parse ``.kicad_pro`` JSON text.

    Raises:
        FormatError: If the text is not JSON or its root is not an object.
    """
    where = str(path) if path is not None else "<text>"
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise FormatError(f"Invalid JSON in {where}: {e}", path=where, expected="json") from e
    if not isinstance(data, dict):
        raise FormatError(
            f"Expected a JSON object at the root of {where}", path=where, expected="json"
        )
    return extract_settings(data)


def load_settings(path: str | Path) -> Settings:
    """Load and parse a ``.kicad_pro`` file.

    Raises:
        IoError: If the file cannot be read.
        FormatError: If the file is not a JSON object.
    """
    path = Path(path)
    return parse_settings(read_text(path), path=path)
