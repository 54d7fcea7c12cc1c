"""Error types.

Per-line problems are values (:class:`ObjError`) handed to
``Importer.error``; only :class:`ObjReadError` is ever raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from objstream.formats.parser import Line


class ErrorType(Enum):
    """Recoverable per-line errors. The value is the message shown to users."""
    INVALID_NAME = "invalid name"
    NOT_ENOUGH_VERTEX_COMPONENTS = "not enough components"
    TOO_MANY_VERTEX_COMPONENTS = "junk at end of line"


@dataclass(frozen=True)
class ObjError:
    """A per-line error together with the line that caused it."""

    type: ErrorType
    line: Line

    @property
    def message(self) -> str:
        return self.type.value

    @property
    def line_number(self) -> int:
        return self.line.number

    def __str__(self) -> str:
        return f"line {self.line.number}: {self.message}: {self.line.text!r}"


class ObjReadError(Exception):
    """Raised when the underlying source cannot be read or decoded.

    Attributes:
        line_number: 1-based line being read when the failure happened, or
                     ``None`` when the source could not be opened at all.
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        super().__init__(message if line_number is None else f"line {line_number}: {message}")
        self.line_number = line_number
