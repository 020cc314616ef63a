"""Exception hierarchy for the KiCad to Zener importer.

Two failures are fatal to a conversion: a file whose format cannot be
recognized (``FormatError``) and a file or directory that cannot be read
(``IoError``). Everything else degrades to best-effort output.
"""

from __future__ import annotations

from typing import Any


class Kicad2ZenError(Exception):
    """Base exception for all importer errors."""

    error_code: str = ""

    def __init__(self, message: str, error_code: str | None = None, **kwargs: Any):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.__dict__.update(kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a serializable dict."""
        result: dict[str, Any] = {
            "error": True,
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
        }
        result.update(
            {k: v for k, v in self.__dict__.items() if k not in ["message", "error_code"]}
        )
        return result


class FormatError(Kicad2ZenError):
    """Raised when a file is not in the expected format.

    Covers a root element that does not match the expected marker
    (``kicad_sch`` / ``kicad_pcb``), text the tokenizer rejects, and
    settings documents that are not a JSON object.
    """

    error_code = "FORMAT_ERROR"

    def __init__(
        self,
        message: str,
        path: str | None = None,
        expected: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, "FORMAT_ERROR", path=path, expected=expected, **kwargs)


class IoError(Kicad2ZenError):
    """Raised when a file or directory cannot be read or written."""

    error_code = "IO_ERROR"

    def __init__(self, message: str, path: str | None = None, **kwargs: Any):
        super().__init__(message, "IO_ERROR", path=path, **kwargs)


class DuplicateFileError(Kicad2ZenError):
    """Raised in strict mode when a project holds two files of the same kind."""

    error_code = "DUPLICATE_FILE"

    def __init__(self, message: str, paths: list[str] | None = None, **kwargs: Any):
        super().__init__(message, "DUPLICATE_FILE", paths=paths or [], **kwargs)


class ValidationError(Kicad2ZenError):
    """Raised when a caller-supplied argument has an invalid value."""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str | None = None, **kwargs: Any):
        super().__init__(message, "VALIDATION_ERROR", field=field, **kwargs)


__all__ = [
    "Kicad2ZenError",
    "FormatError",
    "IoError",
    "DuplicateFileError",
    "ValidationError",
]
