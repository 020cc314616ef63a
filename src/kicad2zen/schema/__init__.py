"""Typed data models for KiCad file formats and the parsers that build them."""

from .board import FootprintAttributes, FootprintInstance, LayerDef, Pad, PcbLayout
from .common import Position, split_lib_id
from .extract import extract_pcb, load_pcb, parse_pcb
from .extract_schematic import extract_schematic, load_schematic, parse_schematic
from .extract_settings import extract_settings, load_settings, parse_settings
from .schematic import LibSymbolDef, PinDef, PlacedSymbol, Schematic
from .settings import DesignRules, NetClass, Settings

__all__ = [
    "DesignRules",
    "FootprintAttributes",
    "FootprintInstance",
    "LayerDef",
    "LibSymbolDef",
    "NetClass",
    "Pad",
    "PcbLayout",
    "PinDef",
    "PlacedSymbol",
    "Position",
    "Schematic",
    "Settings",
    "extract_pcb",
    "extract_schematic",
    "extract_settings",
    "load_pcb",
    "load_schematic",
    "load_settings",
    "parse_pcb",
    "parse_schematic",
    "parse_settings",
    "split_lib_id",
]
