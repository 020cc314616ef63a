"""Value string normalization for KiCad -> Zener.

Resistors: "10k" -> "10kohm", "4k7" -> "4.7kohm", "1M" -> "1Mohm", "100" -> "100ohm"
Capacitors: "100n" -> "100nF", "10u" -> "10uF", "1p" -> "1pF"
Inductors: "10u" -> "10uH", "100n" -> "100nH"

Anything unrecognized is returned unchanged, and normalizing an already
normalized value returns it as is.
"""

from __future__ import annotations

import re
from enum import Enum


class ComponentKind(Enum):
    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"
    OTHER = "other"

    @classmethod
    def from_lib_id(cls, lib_id: str) -> ComponentKind:
        """Infer the kind from a symbol lib_id ("Device:LED" is OTHER, not an inductor)."""
        lower = lib_id.lower()
        for kind, letter, word in _LIB_ID_HINTS:
            if (
                f":{letter}_" in lower
                or f":{letter} " in lower
                or lower.endswith(f":{letter}")
                or word in lower
            ):
                return kind
        return cls.OTHER


_LIB_ID_HINTS: tuple[tuple[ComponentKind, str, str], ...] = (
    (ComponentKind.RESISTOR, "r", "resistor"),
    (ComponentKind.CAPACITOR, "c", "capacitor"),
    (ComponentKind.INDUCTOR, "l", "inductor"),
)

# "4k7", "10k", "1M", "2M2", optionally followed by "ohm"/"ohms"
_RESISTOR_SHORTHAND = re.compile(r"^(\d+)([km])(\d*)(?:\s*ohm)?s?$", re.IGNORECASE)
# "10kOhm", "4.7 kohm", "1 Mohm"
_RESISTOR_EXPLICIT = re.compile(r"^(\d+(?:\.\d+)?)\s*([kmgμu]?)\s*ohm", re.IGNORECASE)
# "100", "4.7"
_RESISTOR_PLAIN = re.compile(r"^(\d+(?:\.\d+)?)$")
# "100n", "10u", "4.7uF"
_CAPACITOR_SHORTHAND = re.compile(r"^(\d+(?:\.\d+)?)\s*([pnuμm])f?$", re.IGNORECASE)
# "100nF 50V", "10uF/X7R"
_CAPACITOR_EXPLICIT = re.compile(r"^(\d+(?:\.\d+)?)\s*([pnuμm])f", re.IGNORECASE)
# "100n", "10uH"
_INDUCTOR_SHORTHAND = re.compile(r"^(\d+(?:\.\d+)?)\s*([pnuμm])h?$", re.IGNORECASE)
# "10uH 1A"
_INDUCTOR_EXPLICIT = re.compile(r"^(\d+(?:\.\d+)?)\s*([pnuμm])h", re.IGNORECASE)

_RESISTOR_PREFIXES = {"k": "k", "m": "M", "g": "G", "u": "u", "μ": "u"}
_SMALL_PREFIXES = {"p": "p", "n": "n", "u": "u", "μ": "u", "m": "m"}


def looks_like_part_number(value: str) -> bool:
    """Check if a value looks like a manufacturer part number rather than a value.

    "ERJ-2RKF1003X" and "GRM155R71C104KA88D" are part numbers; "10k" and
    "100nF" are not.
    """
    if "-" in value and len(value) > 4:
        return True
    return len(value) > 8 and sum(1 for c in value if c.isalpha()) > 3


def _normalize_resistor(value: str) -> str:
    m = _RESISTOR_SHORTHAND.match(value)
    if m:
        whole, multiplier, decimal = m.groups()
        prefix = "k" if multiplier.lower() == "k" else "M"
        if decimal:
            return f"{whole}.{decimal}{prefix}ohm"
        return f"{whole}{prefix}ohm"

    m = _RESISTOR_EXPLICIT.match(value)
    if m:
        num, prefix = m.groups()
        return f"{num}{_RESISTOR_PREFIXES.get(prefix.lower(), '')}ohm"

    if _RESISTOR_PLAIN.match(value):
        return f"{value}ohm"

    return value


def _normalize_small(
    value: str, patterns: tuple[re.Pattern[str], ...], unit: str
) -> str:
    for pattern in patterns:
        m = pattern.match(value)
        if m:
            num, prefix = m.groups()
            return f"{num}{_SMALL_PREFIXES.get(prefix.lower(), '')}{unit}"
    return value


def normalize_value(value: str, kind: ComponentKind) -> str:
    """Normalize a KiCad value string to Zener unit syntax.

    Part numbers and values of OTHER components come back unchanged
    (surrounding whitespace removed).
    """
    value = value.strip()

    if kind is ComponentKind.OTHER or looks_like_part_number(value):
        return value

    if kind is ComponentKind.RESISTOR:
        return _normalize_resistor(value)
    if kind is ComponentKind.CAPACITOR:
        return _normalize_small(value, (_CAPACITOR_SHORTHAND, _CAPACITOR_EXPLICIT), "F")
    return _normalize_small(value, (_INDUCTOR_SHORTHAND, _INDUCTOR_EXPLICIT), "H")
