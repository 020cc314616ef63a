"""KiCad project aggregate and directory assembly.

A project directory holds up to three recognized files: a schematic
(.kicad_sch), a PCB layout (.kicad_pcb) and project settings (.kicad_pro).
Each is parsed independently and any of them may be missing.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from .constants import DEFAULT_PROJECT_NAME, PCB_EXTENSION, PROJECT_EXTENSION, SCHEMATIC_EXTENSION
from .exceptions import DuplicateFileError, IoError
from .logging_config import conversion_context, create_logger
from .schema import PcbLayout, Schematic, Settings, load_pcb, load_schematic, load_settings

if TYPE_CHECKING:
    from .emit import OutputMode

logger = create_logger(__name__)

# Extension -> (Project field, loader)
_LOADERS: dict[str, tuple[str, Callable[[Path], Any]]] = {
    SCHEMATIC_EXTENSION: ("schematic", load_schematic),
    PCB_EXTENSION: ("pcb", load_pcb),
    PROJECT_EXTENSION: ("settings", load_settings),
}


@dataclass(frozen=True)
class Project:
    """A parsed KiCad project. Read-only after assembly."""

    name: str
    schematic: Schematic | None = None
    pcb: PcbLayout | None = None
    settings: Settings | None = None

    @property
    def found(self) -> dict[str, bool]:
        """Which of the three file kinds were present."""
        return {
            "schematic": self.schematic is not None,
            "pcb": self.pcb is not None,
            "settings": self.settings is not None,
        }

    def to_zen(self, mode: OutputMode | None = None) -> str:
        """Render this project as Zener source."""
        from .emit import OutputMode, emit_zen

        return emit_zen(self, mode or OutputMode.IDIOMATIC)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "found": self.found,
            "schematic": self.schematic.to_dict() if self.schematic else None,
            "pcb": self.pcb.to_dict() if self.pcb else None,
            "settings": self.settings.to_dict() if self.settings else None,
        }


def project_name(directory: Path) -> str:
    """Project name derived from the directory name."""
    return directory.resolve().name or DEFAULT_PROJECT_NAME


def _list_entries(directory: Path) -> list[Path]:
    try:
        # Sorted so that duplicate resolution does not depend on the file system
        return sorted(directory.iterdir(), key=lambda p: p.name)
    except FileNotFoundError as e:
        raise IoError(f"Directory not found: {directory}", path=str(directory)) from e
    except NotADirectoryError as e:
        raise IoError(f"Not a directory: {directory}", path=str(directory)) from e
    except OSError as e:
        raise IoError(f"Failed to read directory {directory}: {e}", path=str(directory)) from e


def load_project(directory: str | Path, strict: bool = False) -> Project:
    """Parse every recognized KiCad file directly inside ``directory``.

    Subdirectories are not searched and unrecognized extensions are
    ignored. When two files share an extension the later one in name order
    wins and a warning is logged; with ``strict=True`` a DuplicateFileError
    is raised instead. Finding no recognized file at all is not an error.

    Raises:
        IoError: If the directory cannot be listed or a matched file cannot be read.
        FormatError: If a matched file is not in its expected format.
        DuplicateFileError: In strict mode, on two files of the same kind.
    """
    directory = Path(directory)
    matched: dict[str, Path] = {}

    for entry in _list_entries(directory):
        ext = entry.suffix.lstrip(".")
        if ext not in _LOADERS or not entry.is_file():
            continue
        if ext in matched:
            if strict:
                raise DuplicateFileError(
                    f"Multiple .{ext} files in {directory}: {matched[ext].name}, {entry.name}",
                    paths=[str(matched[ext]), str(entry)],
                )
            logger.warning(
                "Multiple .%s files in %s; using %s and ignoring %s",
                ext,
                directory,
                entry.name,
                matched[ext].name,
            )
        matched[ext] = entry

    parsed: dict[str, Any] = {}
    for ext, path in matched.items():
        field_name, loader = _LOADERS[ext]
        logger.info("Parsing %s", path.name)
        parsed[field_name] = loader(path)

    if not matched:
        logger.info("No KiCad files found in %s", directory)

    return Project(name=project_name(directory), **parsed)


def convert_project(
    directory: str | Path,
    mode: OutputMode | None = None,
    strict: bool = False,
) -> tuple[Project, str]:
    """Load a project directory and render it as Zener source in one step.

    All log records emitted along the way share one conversion id.
    """
    with conversion_context() as cid:
        logger.debug("Converting %s (conversion %s)", directory, cid)
        project = load_project(directory, strict=strict)
        return project, project.to_zen(mode)
