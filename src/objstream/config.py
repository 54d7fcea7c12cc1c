"""Parser configuration.

Module constants hold the defaults; :class:`ParserConfig` bundles the
per-run settings and validates them on construction.

Example::

    import numpy as np
    from objstream.config import ParserConfig

    config = ParserConfig(real_parser=np.float32, encoding="latin-1")
"""

from __future__ import annotations

import codecs
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

DEFAULT_ENCODING = "utf-8"
READ_CHUNK_SIZE = 8192
COMMENT_CHAR = "#"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

RealParser = Callable[[str], Any]
"""Callable ``(text) -> number`` raising ``ValueError`` on malformed text."""

IndexParser = Callable[[str], int]
"""Callable ``(text) -> int`` raising ``ValueError`` on malformed text."""


@dataclass
class ParserConfig:
    """Settings for one parsing run.

    Args:
        real_parser: Converts a vertex or texture coordinate component.
                     Defaults to :class:`float`.
        index_parser: Converts a face index word. Defaults to :class:`int`.
        encoding: Codec used to decode binary sources.
        chunk_size: Number of characters the lexer pulls from its source
                    per read.

    Raises:
        ValueError: On construction if any argument value is invalid.
    """

    real_parser: RealParser = field(default=float, repr=False)
    index_parser: IndexParser = field(default=int, repr=False)
    encoding: str = DEFAULT_ENCODING
    chunk_size: int = READ_CHUNK_SIZE

    def __post_init__(self) -> None:
        if not callable(self.real_parser):
            raise ValueError(
                f"real_parser must be callable, "
                f"got {type(self.real_parser).__name__!r}"
            )
        if not callable(self.index_parser):
            raise ValueError(
                f"index_parser must be callable, "
                f"got {type(self.index_parser).__name__!r}"
            )
        try:
            codecs.lookup(self.encoding)
        except (LookupError, TypeError) as e:
            raise ValueError(f"unknown encoding {self.encoding!r}") from e
        if not (isinstance(self.chunk_size, int) and self.chunk_size >= 1):
            raise ValueError(
                f"chunk_size must be a positive integer, got {self.chunk_size!r}"
            )
