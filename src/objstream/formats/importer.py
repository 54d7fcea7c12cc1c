from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Optional

if TYPE_CHECKING:
    from objstream.errors import ObjError
    from objstream.formats.elements import ElementIterator


class CallbackResult(Enum):
    """Returned by every importer callback. ``STOP`` ends the run after the current line."""
    CONTINUE = "continue"
    STOP = "stop"


class Importer:
    """Receiver of parsed records.

    Every callback defaults to doing nothing and returning ``CONTINUE``, so
    subclasses override only the records they care about. Callbacks are
    called synchronously, in line order, at most once per line.
    """

    def comment(self, text: str) -> CallbackResult:
        """Comment line; ``text`` is everything after the ``#``."""
        return CallbackResult.CONTINUE

    def error(self, error: ObjError) -> CallbackResult:
        return CallbackResult.CONTINUE

    def v(self, x: Any, y: Any, z: Any, w: Optional[Any]) -> CallbackResult:
        """Geometric vertex; ``w`` is ``None`` when the line has three components."""
        return CallbackResult.CONTINUE

    def vt(self, u: Any, v: Any, w: Optional[Any]) -> CallbackResult:
        """Texture coordinate; ``w`` is ``None`` when the line has two components."""
        return CallbackResult.CONTINUE

    def f(self, elements: ElementIterator) -> CallbackResult:
        """Face. ``elements`` lazily yields 0-based vertex indices and can be consumed once."""
        return CallbackResult.CONTINUE
