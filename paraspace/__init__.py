"""ParaSpace - paragraph spacing with exact offset mapping."""

from .model import AnnotatedText, StyleSpan, StyleTag
from .offsets import (
    IndexedOffsetMapping,
    OffsetMapping,
    OffsetOutOfRangeError,
    ParagraphOffsetMapping,
    map_original_to_transformed,
    map_transformed_to_original,
)
from .paragraphs import split_paragraphs
from .transform import ParaSpace, TransformedText, paragraph_format, transform
from .units import DEFAULT_SPACING, TextUnit, em, sp

__all__ = [
    'AnnotatedText',
    'StyleSpan',
    'StyleTag',
    'IndexedOffsetMapping',
    'OffsetMapping',
    'OffsetOutOfRangeError',
    'ParagraphOffsetMapping',
    'map_original_to_transformed',
    'map_transformed_to_original',
    'split_paragraphs',
    'ParaSpace',
    'TransformedText',
    'paragraph_format',
    'transform',
    'DEFAULT_SPACING',
    'TextUnit',
    'em',
    'sp',
]
