"""Identifier and string-literal helpers for generated Zener source."""

from __future__ import annotations

from ..constants import FALLBACK_IDENTIFIER, RESERVED_IDENTIFIERS


def _is_ident_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


def sanitize_identifier(name: str) -> str:
    """Turn a KiCad net name into a valid Zener variable name.

    Examples:
        "VCC" -> "VCC"
        "+3V3" -> "_3V3"
        "USB_D+" -> "USB_D_"
        "3V3" -> "_3V3"
        "in" -> "in_"
    """
    chars: list[str] = []
    for i, ch in enumerate(name):
        if _is_ident_char(ch):
            if i == 0 and ch.isdigit():
                chars.append("_")
            chars.append(ch)
        else:
            chars.append("_")

    result = "".join(chars)
    if result.lower() in RESERVED_IDENTIFIERS:
        result += "_"
    return result or FALLBACK_IDENTIFIER


def quote(text: str) -> str:
    """Render ``text`` as a double-quoted Zener string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'
