"""Style annotations attached to paragraph-spaced display text."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .units import TextUnit


class StyleTag(Enum):
    PARAGRAPH = "paragraph"
    MARKER = "marker"


@dataclass(frozen=True)
class StyleSpan:
    """A half-open range ``[start, end)`` of display text carrying a style tag.

    Marker spans also carry the size the renderer should give the marker.
    """

    start: int
    end: int
    tag: StyleTag
    size: Optional[TextUnit] = None

    def __post_init__(self):
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid span range [{self.start}, {self.end})")

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        return self.start <= offset < self.end


@dataclass(frozen=True)
class AnnotatedText:
    text: str
    spans: tuple[StyleSpan, ...] = ()

    def spans_with_tag(self, tag: StyleTag) -> list[StyleSpan]:
        return [s for s in self.spans if s.tag is tag]
