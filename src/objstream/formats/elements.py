from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

from objstream.config import IndexParser


class ElementIterator:
    """Lazy face index sequence over the words following an ``f`` tag.

    Each word is converted with ``parse`` and shifted from the file's 1-based
    numbering to 0-based. The first word that does not convert to a positive
    index ends the sequence: nothing is raised, :attr:`truncated` becomes
    ``True`` and the word is kept in :attr:`rejected`.

    The iterator is single pass; once consumed it stays exhausted.
    """

    def __init__(self, words: Iterable[str], parse: IndexParser = int):
        self._words = iter(words)
        self._parse = parse
        self._done = False
        self.rejected: Optional[str] = None

    @property
    def truncated(self) -> bool:
        return self.rejected is not None

    def __iter__(self) -> Iterator[int]:
        return self

    def __next__(self) -> int:
        if self._done:
            raise StopIteration

        word = next(self._words, None)
        if word is None:
            self._done = True
            raise StopIteration

        try:
            index = self._parse(word)
        except (ValueError, TypeError):
            index = 0
        if index < 1:
            self._done = True
            self.rejected = word
            raise StopIteration

        return index - 1

    def __copy__(self):
        raise TypeError(f"{type(self).__name__} is single pass and cannot be copied")

    def __deepcopy__(self, memo):
        return self.__copy__()
