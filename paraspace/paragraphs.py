"""Paragraph segmentation shared by the transformer and the offset mappings."""

from .constants import ParaSpaceConstants


def split_paragraphs(text: str) -> list[str]:
    """Split text into paragraphs on the paragraph separator.

    The separators are consumed. Empty paragraphs are preserved, so a
    leading or trailing separator yields an empty first or last paragraph,
    and an empty string yields ``[""]``.
    """
    return text.split(ParaSpaceConstants.PARAGRAPH_SEPARATOR)


def join_paragraphs(paragraphs: list[str]) -> str:
    """Inverse of split_paragraphs."""
    return ParaSpaceConstants.PARAGRAPH_SEPARATOR.join(paragraphs)


def paragraph_count(text: str) -> int:
    """Number of paragraphs split_paragraphs would return, without splitting."""
    return text.count(ParaSpaceConstants.PARAGRAPH_SEPARATOR) + 1
