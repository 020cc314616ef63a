"""S-expression parser for KiCad file formats."""

from .document import Document, read_text
from .parser import NodeKind, SExp, parse

__all__ = ["Document", "NodeKind", "SExp", "parse", "read_text"]
