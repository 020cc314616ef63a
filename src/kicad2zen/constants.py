"""Global constants for the KiCad to Zener importer."""

# KiCad file kinds
SCHEMATIC_EXTENSION = "kicad_sch"
"""Extension (without dot) of schematic files."""

PCB_EXTENSION = "kicad_pcb"
"""Extension (without dot) of PCB layout files."""

PROJECT_EXTENSION = "kicad_pro"
"""Extension (without dot) of JSON project settings files."""

SCHEMATIC_ROOT_TAG = "kicad_sch"
"""Root element of a schematic s-expression."""

PCB_ROOT_TAG = "kicad_pcb"
"""Root element of a PCB layout s-expression."""

DEFAULT_PROJECT_NAME = "project"
"""Project name used when the directory has no usable name."""

# Net naming
UNCONNECTED_NET_PREFIX = "unconnected-"
"""KiCad prefix for auto-named single-pad nets; never declared as a net."""

FALLBACK_IDENTIFIER = "net"
"""Identifier used when sanitizing strips a net name down to nothing."""

RESERVED_IDENTIFIERS = frozenset(
    {"and", "or", "not", "if", "else", "for", "in", "true", "false", "none"}
)
"""Lowercased words that cannot be used as Zener variable names."""

# Zener output
STDLIB_BOARD_CONFIG = "@stdlib/board_config.zen"
STDLIB_INTERFACES = "@stdlib/interfaces.zen"
STDLIB_GENERICS = "@stdlib/generics"
KICAD_SYMBOLS_PREFIX = "@kicad-symbols"

PCB_TOOLCHAIN_VERSION = "0.3"
"""``pcb-version`` written into the generated workspace header."""

DEFAULT_BOARD_LAYERS = 4
"""Copper layer count of the generated ``Board()`` block."""

IMPORTED_SUFFIX = "-imported"
"""Suffix appended to the project name for board name, layout path and output file."""

INDENT = "    "
"""Indentation of keyword arguments inside generated calls."""
