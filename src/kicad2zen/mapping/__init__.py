"""Mapping utilities for KiCad -> Zener translation."""

from .footprints import (
    FootprintKind,
    extract_package,
    infer_footprint_kind,
    infer_kind_from_footprint,
    infer_kind_from_reference,
    is_smd_footprint,
    template_for,
    value_kind_for,
)
from .nets import NetRole, classify_net, is_connected_net, net_constructor
from .symbols import SYMBOL_TABLE, GenericTemplate, map_symbol, pin_map_for
from .values import ComponentKind, looks_like_part_number, normalize_value

__all__ = [
    "SYMBOL_TABLE",
    "ComponentKind",
    "FootprintKind",
    "GenericTemplate",
    "NetRole",
    "classify_net",
    "extract_package",
    "infer_footprint_kind",
    "infer_kind_from_footprint",
    "infer_kind_from_reference",
    "is_connected_net",
    "is_smd_footprint",
    "looks_like_part_number",
    "map_symbol",
    "net_constructor",
    "normalize_value",
    "pin_map_for",
    "template_for",
    "value_kind_for",
]
