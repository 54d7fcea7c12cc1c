"""Line level OBJ parser.

Splits each line into words, classifies the leading tag and hands the
decoded record to an :class:`~objstream.formats.importer.Importer`. Bad lines
are reported through ``Importer.error`` and never interrupt the run; only a
failure to read the source does.

Example::

    from objstream.formats.importer import Importer
    from objstream.formats.parser import read

    class Counter(Importer):
        def __init__(self):
            self.vertices = 0

        def v(self, x, y, z, w):
            self.vertices += 1

    counter = Counter()
    with open("cube.obj") as f:
        read(f, counter)
"""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Optional, Union

from objstream.config import COMMENT_CHAR, ParserConfig
from objstream.errors import ErrorType, ObjError, ObjReadError
from objstream.formats.elements import ElementIterator
from objstream.formats.importer import CallbackResult, Importer
from objstream.formats.tag import TagKind, classify

logger = logging.getLogger(__name__)

Source = Union[str, bytes, Iterable[str], Iterable[bytes]]
"""Anything :func:`read` accepts: an open file (text or binary), an iterable of lines or a whole document."""


@dataclass(frozen=True)
class Line:
    text: str
    """ Line content without its line terminator """
    number: int
    """ 1-based line number """


@dataclass(frozen=True)
class ReadSummary:
    lines: int
    """ Number of lines dispatched to the parser """
    stopped: bool
    """ True when the importer returned ``STOP`` before the end of the source """


class ObjParser:
    """Stateless per-line dispatcher.

    Args:
        config: Numeric parsers and decoding settings. Defaults to :class:`ParserConfig`.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config if config is not None else ParserConfig()

    def process_line(self, line: Line, importer: Importer) -> CallbackResult:
        """Decode one line and invoke at most one importer callback."""
        stripped = line.text.lstrip()
        if stripped.startswith(COMMENT_CHAR):
            return _result(importer.comment(stripped[1:]))

        content = stripped.split(COMMENT_CHAR, 1)[0]
        words = iter(content.split())
        first = next(words, None)
        if first is None:
            return CallbackResult.CONTINUE

        tag = classify(first)
        if tag.kind is TagKind.V:
            values, error_type = self._decode_components(words, required=3)
            if error_type is not None:
                return _result(importer.error(ObjError(error_type, line)))
            return _result(importer.v(*values))
        elif tag.kind is TagKind.VT:
            values, error_type = self._decode_components(words, required=2)
            if error_type is not None:
                return _result(importer.error(ObjError(error_type, line)))
            return _result(importer.vt(*values))
        elif tag.kind is TagKind.F:
            return _result(importer.f(ElementIterator(words, self.config.index_parser)))
        else:
            # Normals are recognised but not imported, so vn lands here with unknown tags
            return _result(importer.error(ObjError(ErrorType.INVALID_NAME, line)))

    def read(self, source: Source, importer: Importer) -> ReadSummary:
        """Dispatch every line of ``source`` until it is exhausted or the importer stops.

        Raises:
            ObjReadError: If the source cannot be read or decoded.
        """
        lines = _iter_lines(source)
        number = 0
        while True:
            try:
                raw = next(lines, None)
            except (OSError, UnicodeDecodeError) as e:
                raise ObjReadError(f"failed to read source: {e}", number + 1) from e
            if raw is None:
                break

            number += 1
            if isinstance(raw, bytes):
                try:
                    raw = raw.decode(self.config.encoding)
                except UnicodeDecodeError as e:
                    raise ObjReadError(f"cannot decode line as {self.config.encoding}: {e}", number) from e

            if self.process_line(Line(raw.rstrip("\r\n"), number), importer) is CallbackResult.STOP:
                logger.debug("Importer stopped the run at line %d", number)
                return ReadSummary(lines=number, stopped=True)

        logger.debug("Read %d lines", number)
        return ReadSummary(lines=number, stopped=False)

    def _decode_components(self, words: Iterator[str], required: int) -> tuple[Optional[list[Any]], Optional[ErrorType]]:
        """Parse ``required`` reals plus an optional ``w``; the returned list always ends with ``w`` (possibly ``None``)."""
        values: list[Any] = []
        for _ in range(required):
            value = self._parse_real(next(words, None))
            if value is None:
                return None, ErrorType.NOT_ENOUGH_VERTEX_COMPONENTS
            values.append(value)

        extra = list(islice(words, 2))
        # A malformed w reads as absent; only a word after it is junk
        w = self._parse_real(extra[0]) if extra else None
        if len(extra) > 1:
            return None, ErrorType.TOO_MANY_VERTEX_COMPONENTS

        values.append(w)
        return values, None

    def _parse_real(self, word: Optional[str]) -> Optional[Any]:
        if word is None:
            return None
        try:
            return self.config.real_parser(word)
        except (ValueError, TypeError):
            return None


def read(source: Source, importer: Importer, config: Optional[ParserConfig] = None) -> ReadSummary:
    """Parse ``source`` into ``importer``. See :meth:`ObjParser.read`."""
    return ObjParser(config).read(source, importer)


def _result(value: Optional[CallbackResult]) -> CallbackResult:
    # Callbacks that forget to return anything keep the run going
    return CallbackResult.STOP if value is CallbackResult.STOP else CallbackResult.CONTINUE


def _iter_lines(source: Source) -> Iterator[Union[str, bytes]]:
    if isinstance(source, str):
        return iter(io.StringIO(source))
    if isinstance(source, (bytes, bytearray)):
        return iter(io.BytesIO(source))
    return iter(source)
