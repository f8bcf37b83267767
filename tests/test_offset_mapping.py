"""Tests for mapping offsets between original and display text."""

import pytest

from paraspace import (
    IndexedOffsetMapping,
    OffsetOutOfRangeError,
    ParagraphOffsetMapping,
    map_original_to_transformed,
    map_transformed_to_original,
)

MAPPINGS = [ParagraphOffsetMapping, IndexedOffsetMapping]


def test_boundary_scenario():
    t = "Alpha\nBeta"
    assert map_original_to_transformed(t, 5) == 5  # end of "Alpha"
    assert map_original_to_transformed(t, 6) == 7  # start of "Beta", after space and marker
    assert map_transformed_to_original(t, 6) == 5  # the marker maps to the end of "Alpha"
    assert map_transformed_to_original(t, 7) == 6


def test_multi_paragraph_scenario():
    t = "A\nB\nC"
    assert map_original_to_transformed(t, 5) == 7
    assert map_transformed_to_original(t, 7) == 5


@pytest.mark.parametrize("mapping_class", MAPPINGS)
def test_original_to_transformed_three_paragraphs(mapping_class):
    mapping = mapping_class("A\nB\nC")
    assert [mapping.original_to_transformed(o) for o in range(6)] == [0, 1, 3, 4, 6, 7]


@pytest.mark.parametrize("mapping_class", MAPPINGS)
def test_transformed_to_original_three_paragraphs(mapping_class):
    mapping = mapping_class("A\nB\nC")
    assert [mapping.transformed_to_original(o) for o in range(8)] == [0, 1, 1, 2, 3, 3, 4, 5]


@pytest.mark.parametrize("mapping_class", MAPPINGS)
def test_empty_paragraphs(mapping_class):
    mapping = mapping_class("\n\n")
    assert [mapping.original_to_transformed(o) for o in range(3)] == [0, 2, 4]
    assert [mapping.transformed_to_original(o) for o in range(5)] == [0, 0, 1, 1, 2]


@pytest.mark.parametrize("mapping_class", MAPPINGS)
def test_empty_text(mapping_class):
    mapping = mapping_class("")
    assert mapping.original_to_transformed(0) == 0
    assert mapping.transformed_to_original(0) == 0
    with pytest.raises(OffsetOutOfRangeError):
        mapping.original_to_transformed(1)


@pytest.mark.parametrize("mapping_class", MAPPINGS)
def test_no_newline_is_identity(mapping_class):
    text = "no paragraph breaks here"
    mapping = mapping_class(text)
    for offset in range(len(text) + 1):
        assert mapping.original_to_transformed(offset) == offset
        assert mapping.transformed_to_original(offset) == offset


@pytest.mark.parametrize("mapping_class", MAPPINGS)
@pytest.mark.parametrize("text", ["", "abc", "Alpha\nBeta", "A\nB\nC", "\n"])
def test_out_of_range_original(mapping_class, text):
    mapping = mapping_class(text)
    with pytest.raises(OffsetOutOfRangeError) as info:
        mapping.original_to_transformed(len(text) + 1)
    assert info.value.space == "original"
    assert info.value.limit == len(text)
    with pytest.raises(OffsetOutOfRangeError):
        mapping.original_to_transformed(-1)


@pytest.mark.parametrize("mapping_class", MAPPINGS)
def test_out_of_range_transformed(mapping_class):
    mapping = mapping_class("Alpha\nBeta")
    assert mapping.transformed_to_original(11) == 10
    with pytest.raises(OffsetOutOfRangeError) as info:
        mapping.transformed_to_original(12)
    assert info.value.space == "transformed"
    assert info.value.limit == 11
    with pytest.raises(OffsetOutOfRangeError):
        mapping.transformed_to_original(-1)


def test_out_of_range_error_is_value_error():
    with pytest.raises(ValueError, match=r"original offset 7 is outside \[0, 5\]"):
        map_original_to_transformed("Hello", 7)


@pytest.mark.parametrize("mapping_class", MAPPINGS)
def test_range_mapping(mapping_class):
    mapping = mapping_class("Alpha\nBeta")
    assert mapping.original_range_to_transformed(2, 8) == (2, 9)
    assert mapping.transformed_range_to_original(2, 9) == (2, 8)
    # Reversed selections keep their direction
    assert mapping.original_range_to_transformed(8, 2) == (9, 2)


def test_lengths():
    mapping = ParagraphOffsetMapping("A\nB\nC")
    assert mapping.original_length == 5
    assert mapping.transformed_length == 7
