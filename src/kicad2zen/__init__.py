"""kicad2zen: convert KiCad projects into Zener hardware-description source."""

from __future__ import annotations

__version__ = "0.1.0"

from .emit import OutputMode, emit_zen
from .exceptions import DuplicateFileError, FormatError, IoError, Kicad2ZenError, ValidationError
from .project import Project, convert_project, load_project

__all__ = [
    "DuplicateFileError",
    "FormatError",
    "IoError",
    "Kicad2ZenError",
    "OutputMode",
    "Project",
    "ValidationError",
    "__version__",
    "convert_project",
    "emit_zen",
    "load_project",
]
