from dataclasses import dataclass
from enum import Enum


class TagKind(Enum):
    """Record kinds recognised at the start of a line."""
    F = "f"
    V = "v"
    VN = "vn"
    VT = "vt"
    UNKNOWN = "unknown"


_KNOWN_TAGS: dict[str, TagKind] = {
    "f": TagKind.F,
    "v": TagKind.V,
    "vn": TagKind.VN,
    "vt": TagKind.VT,
}


@dataclass(frozen=True)
class Tag:
    kind: TagKind
    text: str
    """ Raw word the tag was classified from, kept verbatim for error reporting """

    @property
    def is_known(self) -> bool:
        return self.kind is not TagKind.UNKNOWN


def classify(text: str) -> Tag:
    """Classify a word by exact match; unmatched words become ``UNKNOWN``."""
    return Tag(_KNOWN_TAGS.get(text, TagKind.UNKNOWN), text)
