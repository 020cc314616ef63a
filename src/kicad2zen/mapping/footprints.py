"""Footprint name -> package and component kind extraction."""

from __future__ import annotations

import re
from enum import Enum

from .symbols import CAPACITOR, CRYSTAL, DIODE, INDUCTOR, RESISTOR, GenericTemplate
from .values import ComponentKind

# ── Package Extraction ──────────────────────────────────────────────

# Tried in order against the footprint name with its library prefix removed;
# the first match's capture group is the package.
PACKAGE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # Standard metric SMD passives: R_0402_1005Metric, C_0603_1608Metric, L_1206_3216Metric
    re.compile(r"^[RCL]_(\d{4})_\d+Metric"),
    # LED SMD: LED_0805_2012Metric
    re.compile(r"^LED_(\d{4})_\d+Metric"),
    # Crystal cans: Crystal_SMD_3215-2Pin_3.2x1.5mm
    re.compile(r"^Crystal_SMD_(\d{4})-\d+Pin"),
    # Chip diodes: D_0603
    re.compile(r"^D_(\d{4})$"),
    # SOD packages: D_SOD-123, D_SOD-323
    re.compile(r"^D_(SOD-\d+)"),
    # SOT packages: SOT-23, SOT-223, SOT-23-5
    re.compile(r"^(SOT-\d+)"),
    # QFN/DFN: QFN-16_3x3mm, DFN-8
    re.compile(r"^(QFN-\d+|DFN-\d+)"),
    # SOIC-8_3.9x4.9mm_P1.27mm
    re.compile(r"^(SOIC-\d+)"),
    # TSSOP-16_4.4x5mm_P0.65mm
    re.compile(r"^(TSSOP-\d+)"),
)


def strip_library(footprint: str) -> str:
    """``"Resistor_SMD:R_0402_1005Metric"`` -> ``"R_0402_1005Metric"``."""
    return footprint.rsplit(":", 1)[-1]


def extract_package(footprint: str) -> str | None:
    """Extract the package size from a KiCad footprint name.

    Examples:
        "Resistor_SMD:R_0402_1005Metric" -> "0402"
        "LED_SMD:LED_0805_2012Metric" -> "0805"
        "Package_SO:SOIC-8_3.9x4.9mm_P1.27mm" -> "SOIC-8"
        "Custom:MyFootprint" -> None
    """
    name = strip_library(footprint)
    for pattern in PACKAGE_PATTERNS:
        m = pattern.match(name)
        if m:
            return m.group(1)
    return None


def is_smd_footprint(footprint: str) -> bool:
    """Guess whether a footprint is surface mount from its name alone."""
    lower = footprint.lower()
    return "smd" in lower or "metric" in lower


# ── Component Kind Inference ────────────────────────────────────────


class FootprintKind(Enum):
    RESISTOR = "resistor"
    CAPACITOR = "capacitor"
    INDUCTOR = "inductor"
    LED = "led"
    DIODE = "diode"
    TRANSISTOR = "transistor"
    CRYSTAL = "crystal"
    CONNECTOR = "connector"
    UNKNOWN = "unknown"


# LEDs need a color; footprints carry none, so a placeholder is emitted
_FOOTPRINT_LED = GenericTemplate("Led", (("1", "K"), ("2", "A")), (("color", '"red"'),))

_TEMPLATES: dict[FootprintKind, GenericTemplate] = {
    FootprintKind.RESISTOR: RESISTOR,
    FootprintKind.CAPACITOR: CAPACITOR,
    FootprintKind.INDUCTOR: INDUCTOR,
    FootprintKind.LED: _FOOTPRINT_LED,
    FootprintKind.DIODE: DIODE,
    FootprintKind.CRYSTAL: CRYSTAL,
}

_VALUE_KINDS: dict[FootprintKind, ComponentKind] = {
    FootprintKind.RESISTOR: ComponentKind.RESISTOR,
    FootprintKind.CAPACITOR: ComponentKind.CAPACITOR,
    FootprintKind.INDUCTOR: ComponentKind.INDUCTOR,
}

_REFERENCE_PREFIXES: dict[str, FootprintKind] = {
    "R": FootprintKind.RESISTOR,
    "C": FootprintKind.CAPACITOR,
    "L": FootprintKind.INDUCTOR,
    "D": FootprintKind.DIODE,  # could be an LED; the footprint decides that
    "Q": FootprintKind.TRANSISTOR,
    "Y": FootprintKind.CRYSTAL,
    "X": FootprintKind.CRYSTAL,
    "J": FootprintKind.CONNECTOR,
    "P": FootprintKind.CONNECTOR,
}


def template_for(kind: FootprintKind) -> GenericTemplate | None:
    """Stdlib generic for a footprint kind, or None when there is none."""
    return _TEMPLATES.get(kind)


def value_kind_for(kind: FootprintKind) -> ComponentKind:
    return _VALUE_KINDS.get(kind, ComponentKind.OTHER)


def infer_kind_from_footprint(footprint: str) -> FootprintKind:
    """Infer component kind from a footprint name.

    Examples:
        "R_0402_1005Metric" -> RESISTOR
        "LED_SMD:LED_0805_2012Metric" -> LED
        "D_SOD-123" -> DIODE
    """
    name = strip_library(footprint)
    lower = name.lower()

    if name.startswith("R_") or "resistor" in lower:
        return FootprintKind.RESISTOR
    if name.startswith("C_") or "capacitor" in lower:
        return FootprintKind.CAPACITOR
    if name.startswith("L_") or "inductor" in lower:
        return FootprintKind.INDUCTOR
    if name.startswith("LED_") or "led" in lower:
        return FootprintKind.LED
    if name.startswith("D_") or "diode" in lower:
        return FootprintKind.DIODE
    if "crystal" in lower:
        return FootprintKind.CRYSTAL
    if "conn" in lower or "pin_header" in lower or "pin_socket" in lower:
        return FootprintKind.CONNECTOR
    return FootprintKind.UNKNOWN


def infer_kind_from_reference(reference: str) -> FootprintKind:
    """Infer component kind from the letter prefix of a reference designator."""
    letters = re.match(r"[A-Za-z]*", reference)
    prefix = letters.group(0) if letters else ""
    return _REFERENCE_PREFIXES.get(prefix, FootprintKind.UNKNOWN)


def infer_footprint_kind(footprint: str, reference: str) -> FootprintKind:
    """Footprint name first; the reference designator only when that is inconclusive."""
    kind = infer_kind_from_footprint(footprint)
    if kind is not FootprintKind.UNKNOWN:
        return kind
    return infer_kind_from_reference(reference)
