"""Document wrapper for KiCad S-expression files.

Handles file I/O and encoding, and turns tokenizer failures into
``FormatError`` so that callers never see a partially parsed tree.
"""

from __future__ import annotations

from pathlib import Path

from ..exceptions import FormatError, IoError
from .parser import SExp, parse


def read_text(path: str | Path) -> str:
    """Read a KiCad file as UTF-8 text.

    Raises:
        IoError: If the file is missing, unreadable or not valid UTF-8.
    """
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise IoError(f"File not found: {path}", path=str(path)) from e
    except PermissionError as e:
        raise IoError(f"Permission denied reading {path}: {e}", path=str(path)) from e
    except UnicodeDecodeError as e:
        raise IoError(f"Invalid encoding in {path}: {e}", path=str(path)) from e
    except OSError as e:
        raise IoError(f"Error reading {path}: {e}", path=str(path)) from e


class Document:
    """A parsed KiCad S-expression file.

    Usage::

        doc = Document.load("board.kicad_pcb", expected_root="kicad_pcb")
        doc.root.name  # "kicad_pcb"
        doc.root["version"].first_value  # "20241229"
    """

    __slots__ = ("path", "root")

    def __init__(self, root: SExp, path: Path | None = None) -> None:
        self.path = path
        self.root = root

    @classmethod
    def from_text(
        cls,
        text: str,
        expected_root: str | None = None,
        path: Path | None = None,
    ) -> Document:
        """Parse S-expression text, optionally checking the root tag.

        Raises:
            FormatError: If the text cannot be tokenized or the root tag
                is not ``expected_root``.
        """
        where = str(path) if path is not None else "<text>"
        try:
            root = parse(text)
        except ValueError as e:
            raise FormatError(
                f"Failed to parse {where}: {e}", path=where, expected=expected_root
            ) from e
        except RecursionError as e:
            raise FormatError(
                f"Failed to parse {where}: expressions nested too deeply",
                path=where,
                expected=expected_root,
            ) from e

        if expected_root is not None and (not root.is_list or root.name != expected_root):
            found = root.name if root.is_list else root.value
            raise FormatError(
                f"Expected {expected_root} root element in {where}, found {found!r}",
                path=where,
                expected=expected_root,
            )

        return cls(root=root, path=path)

    @classmethod
    def load(cls, path: str | Path, expected_root: str | None = None) -> Document:
        """Load and parse a KiCad S-expression file.

        Args:
            path: Path to the .kicad_sch or .kicad_pcb file.
            expected_root: Required root tag, if any.

        Raises:
            IoError: If the file cannot be read.
            FormatError: If the file cannot be parsed or has the wrong root.
        """
        path = Path(path)
        return cls.from_text(read_text(path), expected_root=expected_root, path=path)

    def __repr__(self) -> str:
        name = self.path.name if self.path is not None else None
        return f"Document({name!r}, root={self.root.name!r})"
