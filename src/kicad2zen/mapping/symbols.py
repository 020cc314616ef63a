"""Symbol library id -> stdlib generic mapping.

The table is an ordered list of (pattern, template) pairs and lookup is
**first match wins**. Prefix patterns can be supersets of later entries,
so the position of an entry in ``SYMBOL_TABLE`` is its priority.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..constants import STDLIB_GENERICS


class PatternKind(Enum):
    EXACT = "exact"
    PREFIX = "prefix"


@dataclass(frozen=True)
class SymbolPattern:
    """A library id matcher: the whole id, or a leading prefix of it."""

    kind: PatternKind
    text: str

    def matches(self, lib_id: str) -> bool:
        if self.kind is PatternKind.EXACT:
            return lib_id == self.text
        return lib_id.startswith(self.text)


def exact(text: str) -> SymbolPattern:
    return SymbolPattern(PatternKind.EXACT, text)


def prefix(text: str) -> SymbolPattern:
    return SymbolPattern(PatternKind.PREFIX, text)


@dataclass(frozen=True)
class GenericTemplate:
    """A stdlib generic module that mapped components are emitted as.

    ``pin_map`` translates KiCad pad numbers to the module's pin names and
    ``flags`` are extra constructor arguments, stored as Zener source
    literals (``'"NPN"'``, ``"true"``).
    """

    module_name: str  # e.g. "Resistor"
    pin_map: tuple[tuple[str, str], ...] = ()
    flags: tuple[tuple[str, str], ...] = ()

    @property
    def module_path(self) -> str:
        return f"{STDLIB_GENERICS}/{self.module_name}.zen"

    def pin_name(self, pad_number: str) -> str:
        """Mapped pin name for a pad, or the raw pad number when not in the table."""
        return dict(self.pin_map).get(pad_number, pad_number)

    def to_dict(self) -> dict[str, Any]:
        return {
            "module_name": self.module_name,
            "module_path": self.module_path,
            "pin_map": dict(self.pin_map),
            "flags": dict(self.flags),
        }


_TWO_PIN = (("1", "P1"), ("2", "P2"))
_DIODE_PINS = (("1", "K"), ("2", "A"))
_BJT_PINS = (("1", "B"), ("2", "C"), ("3", "E"))
_MOSFET_PINS = (("1", "G"), ("2", "D"), ("3", "S"))

RESISTOR = GenericTemplate("Resistor", _TWO_PIN)
CAPACITOR = GenericTemplate("Capacitor", _TWO_PIN)
POLARIZED_CAPACITOR = GenericTemplate("Capacitor", _TWO_PIN, (("polarized", "true"),))
INDUCTOR = GenericTemplate("Inductor", _TWO_PIN)
DIODE = GenericTemplate("Diode", _DIODE_PINS)
ZENER_DIODE = GenericTemplate("Diode", _DIODE_PINS, (("diode_type", '"zener"'),))
SCHOTTKY_DIODE = GenericTemplate("Diode", _DIODE_PINS, (("diode_type", '"schottky"'),))
LED = GenericTemplate("Led", _DIODE_PINS)
FERRITE_BEAD = GenericTemplate("FerriteBead", _TWO_PIN)
CRYSTAL = GenericTemplate("Crystal", _TWO_PIN)
CRYSTAL_GND24 = GenericTemplate(
    "Crystal", (("1", "P1"), ("3", "P2"), ("2", "GND"), ("4", "GND"))
)
THERMISTOR = GenericTemplate("Thermistor", _TWO_PIN)
NPN_BJT = GenericTemplate("Bjt", _BJT_PINS, (("polarity", '"NPN"'),))
PNP_BJT = GenericTemplate("Bjt", _BJT_PINS, (("polarity", '"PNP"'),))
N_MOSFET = GenericTemplate("Mosfet", _MOSFET_PINS, (("channel", '"N"'),))
P_MOSFET = GenericTemplate("Mosfet", _MOSFET_PINS, (("channel", '"P"'),))
TEST_POINT = GenericTemplate("TestPoint", (("1", "P1"),))

# Priority order: first match wins.
SYMBOL_TABLE: tuple[tuple[SymbolPattern, GenericTemplate], ...] = (
    # Resistors
    (exact("Device:R"), RESISTOR),
    (exact("Device:R_Small"), RESISTOR),
    # Capacitors
    (exact("Device:C"), CAPACITOR),
    (exact("Device:C_Small"), CAPACITOR),
    (exact("Device:C_Polarized"), POLARIZED_CAPACITOR),
    (exact("Device:C_Polarized_Small"), POLARIZED_CAPACITOR),
    # Inductors
    (exact("Device:L"), INDUCTOR),
    (exact("Device:L_Small"), INDUCTOR),
    # Diodes
    (exact("Device:D"), DIODE),
    (exact("Device:D_Small"), DIODE),
    (exact("Device:D_Zener"), ZENER_DIODE),
    (exact("Device:D_Schottky"), SCHOTTKY_DIODE),
    # LEDs
    (exact("Device:LED"), LED),
    (exact("Device:LED_Small"), LED),
    # Ferrite beads
    (exact("Device:Ferrite_Bead"), FERRITE_BEAD),
    (exact("Device:Ferrite_Bead_Small"), FERRITE_BEAD),
    # Crystals
    (exact("Device:Crystal"), CRYSTAL),
    (exact("Device:Crystal_Small"), CRYSTAL),
    (exact("Device:Crystal_GND24"), CRYSTAL_GND24),
    # Thermistors: Device:Thermistor, Device:Thermistor_NTC, ...
    (prefix("Device:Thermistor"), THERMISTOR),
    # BJTs: Device:Q_NPN_BCE, Device:Q_NPN_EBC, ...
    (prefix("Device:Q_NPN"), NPN_BJT),
    (prefix("Device:Q_PNP"), PNP_BJT),
    # MOSFETs: Device:Q_NMOS_GDS, ...
    (prefix("Device:Q_NMOS"), N_MOSFET),
    (prefix("Device:Q_PMOS"), P_MOSFET),
    # Test points
    (prefix("Connector:TestPoint"), TEST_POINT),
)


def map_symbol(lib_id: str) -> GenericTemplate | None:
    """Map a KiCad lib_id to its stdlib generic equivalent.

    Returns None when no entry matches; the caller falls back to a raw
    ``Component()``.
    """
    for pattern, template in SYMBOL_TABLE:
        if pattern.matches(lib_id):
            return template
    return None


def pin_map_for(lib_id: str) -> dict[str, str]:
    """KiCad pin number -> Zener pin name for a symbol ({} when unmapped)."""
    template = map_symbol(lib_id)
    return dict(template.pin_map) if template is not None else {}
