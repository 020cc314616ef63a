"""S-expression parser for KiCad files.

KiCad uses S-expressions (Lisp-like syntax) for its schematic and board
formats (.kicad_sch, .kicad_pcb).

This parser:
- Handles quoted strings, unquoted symbols, and nested parenthesized expressions
- Keeps the distinction between quoted strings and bare symbols
  (``(dnp yes)`` vs ``(property "Value" "10k")``)
- Provides a small query API for navigating the tree
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum


class NodeKind(Enum):
    SYMBOL = "symbol"
    STRING = "string"
    LIST = "list"


class SExp:
    """A node in an S-expression tree.

    Every node has exactly one kind:
    - SYMBOL: a bare atom such as ``yes``, ``smd`` or ``20241229``
    - STRING: a double-quoted atom such as ``"Device:R"``
    - LIST: a parenthesized expression; ``name`` is its leading atom (the tag)
      and ``children`` holds the remaining elements

    Usage::

        tree = parse('(kicad_pcb (version 20241229) (generator "pcbnew"))')
        tree.name                       # "kicad_pcb"
        tree["version"].first_value     # "20241229"
        tree.get("generator").first_value  # "pcbnew"
    """

    __slots__ = ("kind", "name", "value", "children")

    def __init__(
        self,
        kind: NodeKind,
        name: str | None = None,
        value: str | None = None,
        children: list[SExp] | None = None,
    ) -> None:
        self.kind = kind
        self.name = name
        self.value = value
        self.children: list[SExp] = children if children is not None else []

    @classmethod
    def symbol(cls, value: str) -> SExp:
        return cls(NodeKind.SYMBOL, value=value)

    @classmethod
    def string(cls, value: str) -> SExp:
        return cls(NodeKind.STRING, value=value)

    @classmethod
    def list_node(cls, name: str, children: list[SExp] | None = None) -> SExp:
        return cls(NodeKind.LIST, name=name, children=children)

    @property
    def is_atom(self) -> bool:
        return self.kind is not NodeKind.LIST

    @property
    def is_list(self) -> bool:
        return self.kind is NodeKind.LIST

    @property
    def is_symbol(self) -> bool:
        return self.kind is NodeKind.SYMBOL

    @property
    def is_string(self) -> bool:
        return self.kind is NodeKind.STRING

    def __getitem__(self, key: str) -> SExp:
        """Get the first child list with the given tag.

        Raises KeyError if not found.
        """
        for child in self.children:
            if child.name == key:
                return child
        raise KeyError(f"No child named {key!r}")

    def get(self, key: str, default: SExp | None = None) -> SExp | None:
        """Get the first child list with the given tag, or default."""
        for child in self.children:
            if child.name == key:
                return child
        return default

    def find_all(self, name: str) -> list[SExp]:
        """Find all direct child lists with the given tag."""
        return [child for child in self.children if child.name == name]

    def find_recursive(self, name: str) -> Iterator[SExp]:
        """Find all descendant lists (recursive) with the given tag."""
        for child in self.children:
            if child.name == name:
                yield child
            if child.children:
                yield from child.find_recursive(name)

    @property
    def atoms(self) -> list[SExp]:
        """Direct atom children, in order."""
        return [child for child in self.children if child.is_atom]

    @property
    def first_value(self) -> str | None:
        """Value of the first atom child, e.g. for (version 20241229) -> '20241229'."""
        for child in self.children:
            if child.is_atom:
                return child.value
        return None

    @property
    def atom_values(self) -> list[str]:
        """All atom values among direct children."""
        return [child.value for child in self.children if child.is_atom and child.value is not None]

    def __repr__(self) -> str:
        if self.is_atom:
            return f"SExp({self.kind.value}={self.value!r})"
        return f"SExp(name={self.name!r}, children={len(self.children)})"


_ESCAPES = {"n": "\n", "t": "\t", "r": "\r"}


class _Tokenizer:
    """Low-level tokenizer for S-expression strings."""

    __slots__ = ("_text", "_pos", "_length")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._length = len(text)

    def _skip_whitespace(self) -> None:
        pos = self._pos
        text = self._text
        length = self._length
        while pos < length and text[pos] in " \t\n\r":
            pos += 1
        self._pos = pos

    def peek(self) -> str | None:
        self._skip_whitespace()
        if self._pos >= self._length:
            return None
        return self._text[self._pos]

    def next_token(self) -> tuple[str, str] | None:
        """Return (token_type, token_value) or None at EOF.

        Token types: 'OPEN', 'CLOSE', 'STRING', 'SYMBOL'
        """
        self._skip_whitespace()
        if self._pos >= self._length:
            return None

        ch = self._text[self._pos]

        if ch == "(":
            self._pos += 1
            return ("OPEN", "(")

        if ch == ")":
            self._pos += 1
            return ("CLOSE", ")")

        if ch == '"':
            return ("STRING", self._read_quoted_string())

        return ("SYMBOL", self._read_symbol())

    def _read_quoted_string(self) -> str:
        """Read a double-quoted string, handling escape sequences."""
        self._pos += 1  # skip opening quote
        result: list[str] = []
        while self._pos < self._length:
            ch = self._text[self._pos]
            if ch == "\\":
                self._pos += 1
                if self._pos < self._length:
                    escaped = self._text[self._pos]
                    result.append(_ESCAPES.get(escaped, escaped))
                    self._pos += 1
                continue
            if ch == '"':
                self._pos += 1
                return "".join(result)
            result.append(ch)
            self._pos += 1
        raise ValueError("Unterminated quoted string")

    def _read_symbol(self) -> str:
        """Read an unquoted symbol (terminated by whitespace, parens or a quote)."""
        start = self._pos
        while self._pos < self._length:
            ch = self._text[self._pos]
            if ch in ' \t\n\r()"':
                break
            self._pos += 1
        return self._text[start : self._pos]


def parse(text: str) -> SExp:
    """Parse an S-expression string into an SExp tree.

    Args:
        text: The S-expression string to parse.

    Returns:
        The root SExp node.

    Raises:
        ValueError: If the input is malformed or holds more than one expression.
    """
    tokenizer = _Tokenizer(text)
    result = _parse_expr(tokenizer)
    if tokenizer.peek() is not None:
        raise ValueError("Unexpected data after the root expression")
    return result


def _parse_expr(tokenizer: _Tokenizer) -> SExp:
    """Parse a single S-expression from the tokenizer."""
    token = tokenizer.next_token()
    if token is None:
        raise ValueError("Unexpected end of input")

    token_type, token_value = token

    if token_type == "SYMBOL":
        return SExp.symbol(token_value)

    if token_type == "STRING":
        return SExp.string(token_value)

    if token_type == "CLOSE":
        raise ValueError("Unexpected ')'")

    # OPEN: the leading atom becomes the tag
    if tokenizer.peek() == ")":
        tokenizer.next_token()
        return SExp.list_node("")

    children: list[SExp] = []
    first = _parse_expr(tokenizer)
    if first.is_atom:
        name = first.value or ""
    else:
        # Nested list as first element - keep it as an unnamed child
        name = ""
        children.append(first)

    while True:
        pk = tokenizer.peek()
        if pk is None:
            raise ValueError("Unexpected end of input: unclosed '('")
        if pk == ")":
            tokenizer.next_token()
            break
        children.append(_parse_expr(tokenizer))

    return SExp.list_node(name, children)
