"""Paragraph spacing transformation.

The display text keeps every paragraph's content and terminates every
paragraph but the last with a space and an invisible marker character. The
marker is tagged with a large size so a renderer can draw it as a vertical
gap between paragraphs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .constants import ParaSpaceConstants
from .model import AnnotatedText, StyleSpan, StyleTag
from .offsets import IndexedOffsetMapping, OffsetMapping, ParagraphOffsetMapping
from .paragraphs import split_paragraphs
from .units import DEFAULT_SPACING, TextUnit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransformedText:
    display_text: str
    style_annotations: tuple[StyleSpan, ...]
    offset_mapping: OffsetMapping


def paragraph_format(
    text: str,
    paragraph_spacing: TextUnit = DEFAULT_SPACING,
    marker: str = ParaSpaceConstants.MARKER,
) -> AnnotatedText:
    """Build the display text and its style spans.

    Each paragraph gets a PARAGRAPH span covering its content, its trailing
    space and its marker. Each marker gets its own MARKER span sized
    ``paragraph_spacing``. A single paragraph is returned unchanged.
    """
    if len(marker) != 1:
        raise ValueError(f"Marker must be a single character, got {marker!r}")
    if marker in text:
        logger.warning(
            f"Text already contains the marker character {marker!r}; offsets may be ambiguous"
        )

    paragraphs = split_paragraphs(text)
    last = len(paragraphs) - 1
    parts: list[str] = []
    spans: list[StyleSpan] = []
    position = 0

    for index, paragraph in enumerate(paragraphs):
        start = position
        parts.append(paragraph)
        position += len(paragraph)

        if index == last:
            spans.append(StyleSpan(start, position, StyleTag.PARAGRAPH))
            break

        parts.append(ParaSpaceConstants.BOUNDARY_PAD)
        parts.append(marker)
        marker_at = position + len(ParaSpaceConstants.BOUNDARY_PAD)
        position = marker_at + 1
        spans.append(StyleSpan(start, position, StyleTag.PARAGRAPH))
        spans.append(StyleSpan(marker_at, position, StyleTag.MARKER, paragraph_spacing))

    return AnnotatedText("".join(parts), tuple(spans))


def transform(
    text: str,
    spacing: TextUnit = DEFAULT_SPACING,
    indexed: bool = False,
) -> TransformedText:
    """Format text for display and pair it with its offset mapping."""
    annotated = paragraph_format(text, spacing)
    mapping: OffsetMapping = IndexedOffsetMapping(text) if indexed else ParagraphOffsetMapping(text)
    return TransformedText(
        display_text=annotated.text,
        style_annotations=annotated.spans,
        offset_mapping=mapping,
    )


class ParaSpace:
    """Visual transformation that spaces out paragraphs.

    A host editor keeps the raw text and calls ``filter`` whenever it needs
    to draw; the returned mapping translates carets and selections.
    """

    def __init__(self, paragraph_spacing: TextUnit = DEFAULT_SPACING, indexed: bool = False):
        self.paragraph_spacing = paragraph_spacing
        self.indexed = indexed

    def filter(self, text: str) -> TransformedText:
        return transform(text, self.paragraph_spacing, indexed=self.indexed)
