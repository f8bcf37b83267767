"""Offset mapping between original text and its paragraph-spaced display.

Every paragraph except the last is followed in the display text by a space
and a marker character. The space takes the place of the consumed newline,
so only the marker shifts later offsets: a display offset is the original
offset plus the number of markers inserted before it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_left

from .paragraphs import paragraph_count, split_paragraphs

ORIGINAL = "original"
TRANSFORMED = "transformed"


class OffsetOutOfRangeError(ValueError):
    """Raised when an offset does not fall inside its coordinate space."""

    def __init__(self, offset: int, space: str, limit: int):
        self.offset = offset
        self.space = space
        self.limit = limit
        super().__init__(f"{space} offset {offset} is outside [0, {limit}]")


class OffsetMapping(ABC):
    """Converts offsets between original and transformed coordinates."""

    def __init__(self, text: str):
        self.text = text

    @property
    def original_length(self) -> int:
        return len(self.text)

    @property
    def transformed_length(self) -> int:
        # Each separator becomes a space plus a marker
        return len(self.text) + paragraph_count(self.text) - 1

    @abstractmethod
    def original_to_transformed(self, offset: int) -> int:
        """Map an offset in the original text to the display text."""

    @abstractmethod
    def transformed_to_original(self, offset: int) -> int:
        """Map an offset in the display text back to the original text."""

    def original_range_to_transformed(self, start: int, end: int) -> tuple[int, int]:
        """Map a selection; each end is mapped independently, order is kept."""
        return (self.original_to_transformed(start), self.original_to_transformed(end))

    def transformed_range_to_original(self, start: int, end: int) -> tuple[int, int]:
        return (self.transformed_to_original(start), self.transformed_to_original(end))


class ParagraphOffsetMapping(OffsetMapping):
    """Scans the paragraph list on every query.

    Nothing is cached between calls, so each query costs O(paragraphs).
    """

    def original_to_transformed(self, offset: int) -> int:
        if offset < 0:
            raise OffsetOutOfRangeError(offset, ORIGINAL, self.original_length)
        paragraphs = split_paragraphs(self.text)
        last = len(paragraphs) - 1
        count = 0
        added = 0
        for index, paragraph in enumerate(paragraphs):
            # Boundary offsets stay at the end of the earlier paragraph
            if offset <= count + len(paragraph):
                return offset + added
            count += len(paragraph)
            if index < last:
                count += 1  # the consumed newline
                added += 1
        raise OffsetOutOfRangeError(offset, ORIGINAL, self.original_length)

    def transformed_to_original(self, offset: int) -> int:
        if offset < 0:
            raise OffsetOutOfRangeError(offset, TRANSFORMED, self.transformed_length)
        paragraphs = split_paragraphs(self.text)
        last = len(paragraphs) - 1
        count = 0
        added = 0
        for index, paragraph in enumerate(paragraphs):
            if offset <= count + len(paragraph) + added:
                return offset - added
            count += len(paragraph)
            if index < last:
                count += 1
                added += 1
        raise OffsetOutOfRangeError(offset, TRANSFORMED, self.transformed_length)


class IndexedOffsetMapping(OffsetMapping):
    """Prefix-sum variant for large documents.

    Paragraph end offsets are computed once, in both coordinate spaces, and
    queries are answered by bisection. Results are identical to
    ParagraphOffsetMapping.
    """

    def __init__(self, text: str):
        super().__init__(text)
        self._original_ends: list[int] = []
        self._transformed_ends: list[int] = []
        count = 0
        for index, paragraph in enumerate(split_paragraphs(text)):
            end = count + len(paragraph)
            self._original_ends.append(end)
            # index == number of markers inserted before this paragraph
            self._transformed_ends.append(end + index)
            count = end + 1

    def original_to_transformed(self, offset: int) -> int:
        index = bisect_left(self._original_ends, offset)
        if offset < 0 or index == len(self._original_ends):
            raise OffsetOutOfRangeError(offset, ORIGINAL, self.original_length)
        return offset + index

    def transformed_to_original(self, offset: int) -> int:
        index = bisect_left(self._transformed_ends, offset)
        if offset < 0 or index == len(self._transformed_ends):
            raise OffsetOutOfRangeError(offset, TRANSFORMED, self.transformed_length)
        return offset - index


def map_original_to_transformed(text: str, offset: int) -> int:
    return ParagraphOffsetMapping(text).original_to_transformed(offset)


def map_transformed_to_original(text: str, offset: int) -> int:
    return ParagraphOffsetMapping(text).transformed_to_original(offset)
