"""Terminal rendering of paragraph-spaced text using Blessed."""

from dataclasses import dataclass
from typing import Optional

import blessed

from .constants import ParaSpaceConstants
from .model import StyleTag
from .offsets import TRANSFORMED, OffsetOutOfRangeError
from .transform import TransformedText, transform
from .units import DEFAULT_SPACING, TextUnit


def wrap_paragraph(paragraph: str, num_columns: int) -> tuple[list[str], list[int]]:
    """Word wrap a paragraph into lines of at most num_columns characters.

    Returns (lines, cumulative_counts) where cumulative_counts are character
    counts in the paragraph at the end of each visual line, including the
    space a line break replaced. Words that do not fit on a line of their
    own are broken at the column limit.
    """
    if num_columns < 1:
        raise ValueError(f"num_columns must be at least 1, got {num_columns}")
    if not paragraph:
        return ([""], [0])

    lines: list[str] = []
    cumulative_counts: list[int] = []
    char_count = 0
    current_line: Optional[str] = None

    def break_long_word(word: str) -> str:
        nonlocal char_count
        while len(word) >= num_columns:
            lines.append(word[:num_columns])
            char_count += num_columns
            cumulative_counts.append(char_count)
            word = word[num_columns:]
        return word

    for word in paragraph.split(" "):
        if current_line is None:
            current_line = break_long_word(word)
        elif len(current_line) + 1 + len(word) < num_columns:
            current_line += " " + word
        else:
            lines.append(current_line)
            char_count += len(current_line) + 1  # +1 for the space replaced by the break
            cumulative_counts.append(char_count)
            current_line = break_long_word(word)

    assert current_line is not None
    lines.append(current_line)
    char_count += len(current_line)
    cumulative_counts.append(char_count)

    return (lines, cumulative_counts)


@dataclass
class RenderedLine:
    text: str
    start: int  # transformed offset of the first character
    end: int
    is_spacer: bool = False


class TerminalParagraphView:
    """Renders paragraph spans as wrapped lines and markers as blank rows."""

    lines: list[RenderedLine]

    def __init__(
        self,
        num_columns: Optional[int] = None,
        spacing: TextUnit = DEFAULT_SPACING,
        terminal: Optional[blessed.Terminal] = None,
    ):
        if num_columns is not None and num_columns < 1:
            raise ValueError(f"num_columns must be at least 1, got {num_columns}")
        self._term = terminal
        self._num_columns = num_columns
        self.spacing = spacing
        self.lines = []
        self.transformed: Optional[TransformedText] = None

    @property
    def term(self) -> blessed.Terminal:
        if self._term is None:
            self._term = blessed.Terminal()
        return self._term

    @property
    def num_columns(self) -> int:
        if self._num_columns is not None:
            return self._num_columns
        width = self.term.width
        return width if width and width > 0 else ParaSpaceConstants.DOCUMENT_WIDTH

    def render(self, text: str) -> list[RenderedLine]:
        self.transformed = transform(text, self.spacing)
        display = self.transformed.display_text
        num_columns = self.num_columns
        marker_starts = {
            span.start: span for span in self.transformed.style_annotations
            if span.tag is StyleTag.MARKER
        }

        lines: list[RenderedLine] = []
        for span in self.transformed.style_annotations:
            if span.tag is not StyleTag.PARAGRAPH:
                continue
            marker = marker_starts.get(span.end - 1)
            content_end = span.end - 1 if marker is not None else span.end
            wrapped, counts = wrap_paragraph(display[span.start:content_end], num_columns)
            previous = 0
            for line, count in zip(wrapped, counts):
                lines.append(RenderedLine(line, span.start + previous, span.start + count))
                previous = count
            if marker is not None:
                rows = marker.size.to_rows() if marker.size is not None else 1
                for _ in range(rows):
                    lines.append(RenderedLine("", marker.start, marker.end, is_spacer=True))

        self.lines = lines
        return lines

    def locate(self, offset: int) -> tuple[int, int]:
        """Return the (y, x) screen cell of a transformed offset."""
        assert self.transformed is not None, "render() must be called first"
        limit = len(self.transformed.display_text)
        if offset < 0 or offset > limit:
            raise OffsetOutOfRangeError(offset, TRANSFORMED, limit)
        found = 0
        for y, line in enumerate(self.lines):
            if line.is_spacer:
                continue
            if line.start > offset:
                break
            found = y
        line = self.lines[found]
        return (found, min(offset - line.start, len(line.text)))

    def caret_position(self, original_offset: int) -> tuple[int, int]:
        assert self.transformed is not None, "render() must be called first"
        return self.locate(self.transformed.offset_mapping.original_to_transformed(original_offset))

    def format_lines(self, caret: Optional[tuple[int, int]] = None) -> str:
        """Join the rendered lines, drawing the caret in reverse video."""
        out = []
        for y, line in enumerate(self.lines):
            text = line.text
            if caret is not None and caret[0] == y:
                x = caret[1]
                cell = text[x] if x < len(text) else " "
                text = text[:x] + self.term.reverse + cell + self.term.normal + text[x + 1:]
            out.append(text)
        return "\n".join(out)
