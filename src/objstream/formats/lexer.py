"""Character level scanner for OBJ text.

The lexer is a small state machine fed one character at a time. It turns a
text stream into ``TAG``, ``ARGUMENT`` and ``COMMENT`` tokens, one line at a
time, without ever holding more than the current token in memory.

Example::

    from objstream.formats.lexer import tokenize

    for token in tokenize("v 1 2 3 # corner\\n"):
        print(token.line, token.type.name, token.text)
"""

from __future__ import annotations

import codecs
import io
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional, TextIO, Union

from objstream.config import COMMENT_CHAR, DEFAULT_ENCODING, READ_CHUNK_SIZE
from objstream.errors import ObjReadError
from objstream.formats.tag import Tag, classify

logger = logging.getLogger(__name__)


class LexerState(Enum):
    START_OF_LINE = "start_of_line"
    IN_TAG = "in_tag"
    IN_ARGUMENT = "in_argument"
    IN_COMMENT = "in_comment"
    END_OF_FILE = "end_of_file"


class TokenType(Enum):
    TAG = "tag"
    ARGUMENT = "argument"
    COMMENT = "comment"


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: The kind of token.
        text: Token text. For comments, everything after ``#`` up to the end
              of the line, leading whitespace included.
        line: 1-based line number the token was read on.
    """

    type: TokenType
    text: str
    line: int

    @property
    def tag(self) -> Optional[Tag]:
        """Classified tag for ``TAG`` tokens, ``None`` otherwise."""
        if self.type is not TokenType.TAG:
            return None
        return classify(self.text)


class Lexer:
    """Pull based tokenizer over a text stream.

    Args:
        source: A text or binary stream (anything with ``read(n)``), a ``str`` or ``bytes``.
        chunk_size: Number of characters (or bytes) requested from ``source`` per read.
        encoding: Codec used to decode binary sources.
    """

    def __init__(self,
                 source: Union[TextIO, BinaryIO, str, bytes],
                 chunk_size: int = READ_CHUNK_SIZE,
                 encoding: str = DEFAULT_ENCODING):
        if isinstance(source, str):
            source = io.StringIO(source)
        elif isinstance(source, (bytes, bytearray)):
            source = io.BytesIO(source)
        self._source = source
        self._chunk_size = chunk_size
        self._decoder = codecs.getincrementaldecoder(encoding)()
        self._chunk = ""
        self._pos = 0

        self._state = LexerState.START_OF_LINE
        self._buffer: list[str] = []
        self._line = 1
        self._error: Optional[ObjReadError] = None

    @property
    def state(self) -> LexerState:
        return self._state

    @property
    def line(self) -> int:
        """Line the read cursor is currently on."""
        return self._line

    def __iter__(self) -> Lexer:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self) -> Optional[Token]:
        """Return the next token, or ``None`` once the input is exhausted.

        Raises:
            ObjReadError: If reading the source fails. The lexer halts and
                          raises the same error on every later call.
        """
        if self._state is LexerState.END_OF_FILE:
            if self._error is not None:
                raise self._error
            return None

        while True:
            c = self._read_char()
            if not c:
                # End of input acts as one last newline so a pending token is flushed once
                token = self._push_char("\n")
                self._state = LexerState.END_OF_FILE
                return token

            token = self._push_char(c)
            if c == "\n":
                self._line += 1
            if token is not None:
                return token

    def _read_char(self) -> str:
        if self._pos >= len(self._chunk):
            try:
                self._chunk = self._read_chunk()
            except (OSError, UnicodeDecodeError) as e:
                self._state = LexerState.END_OF_FILE
                self._error = ObjReadError(f"failed to read source: {e}", self._line)
                logger.debug("Lexer halted on line %d: %s", self._line, e)
                raise self._error from e
            self._pos = 0
            if not self._chunk:
                return ""

        c = self._chunk[self._pos]
        self._pos += 1
        return c

    def _read_chunk(self) -> str:
        """Next piece of text from the source; empty only at end of input."""
        chunk = self._source.read(self._chunk_size)
        if not isinstance(chunk, (bytes, bytearray)):
            return chunk

        # A multi-byte character may straddle reads; the empty final read flushes the decoder
        text = self._decoder.decode(chunk, final=not chunk)
        while chunk and not text:
            chunk = self._source.read(self._chunk_size)
            text = self._decoder.decode(chunk, final=not chunk)
        return text

    def _push_char(self, c: str) -> Optional[Token]:
        """Feed one character to the state machine, returning a finished token if any."""
        state = self._state

        if state is LexerState.START_OF_LINE:
            if c == COMMENT_CHAR:
                self._state = LexerState.IN_COMMENT
            elif not c.isspace():
                self._buffer.append(c)
                self._state = LexerState.IN_TAG
            return None

        if state is LexerState.IN_TAG or state is LexerState.IN_ARGUMENT:
            token_type = TokenType.TAG if state is LexerState.IN_TAG else TokenType.ARGUMENT
            if c == COMMENT_CHAR:
                self._state = LexerState.IN_COMMENT
                return self._emit(token_type)
            if c.isspace():
                self._state = LexerState.START_OF_LINE if c == "\n" else LexerState.IN_ARGUMENT
                return self._emit(token_type)
            self._buffer.append(c)
            return None

        if state is LexerState.IN_COMMENT:
            if c == "\n":
                self._state = LexerState.START_OF_LINE
                return self._emit(TokenType.COMMENT)
            self._buffer.append(c)

        return None

    def _emit(self, token_type: TokenType) -> Optional[Token]:
        # Whitespace runs leave the buffer empty: no empty tags or arguments
        if not self._buffer and token_type is not TokenType.COMMENT:
            return None

        text = "".join(self._buffer)
        self._buffer.clear()
        if token_type is TokenType.COMMENT:
            text = text.rstrip("\r")
        return Token(token_type, text, self._line)


def tokenize(source: Union[TextIO, BinaryIO, str, bytes],
             chunk_size: int = READ_CHUNK_SIZE,
             encoding: str = DEFAULT_ENCODING) -> Iterator[Token]:
    """Yield every token of ``source``."""
    yield from Lexer(source, chunk_size=chunk_size, encoding=encoding)
