"""Zener source emitters for parsed KiCad projects."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .faithful import emit_faithful
from .idiomatic import emit_idiomatic
from .naming import quote, sanitize_identifier

if TYPE_CHECKING:
    from ..project import Project


class OutputMode(Enum):
    IDIOMATIC = "idiomatic"  # stdlib generics where a mapping exists
    FAITHFUL = "faithful"  # raw Component() for every symbol


def emit_zen(project: Project, mode: OutputMode = OutputMode.IDIOMATIC) -> str:
    """Render a project as Zener source in the requested mode."""
    if mode is OutputMode.FAITHFUL:
        return emit_faithful(project)
    return emit_idiomatic(project)


__all__ = [
    "OutputMode",
    "emit_faithful",
    "emit_idiomatic",
    "emit_zen",
    "quote",
    "sanitize_identifier",
]
