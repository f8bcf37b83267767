"""Constants and configuration for paragraph spacing."""

class ParaSpaceConstants:
    """Central configuration constants for the transformation."""

    # Paragraph segmentation
    PARAGRAPH_SEPARATOR = "\n"  # The only character that ends a paragraph
    BOUNDARY_PAD = " "  # Literal space emitted before each marker

    # Invisible sentinel rendered oversized between paragraphs.
    # Input text that already contains it is out of contract.
    MARKER = "\u0000"

    # Spacing defaults
    DEFAULT_SPACING_VALUE = 10
    DEFAULT_SPACING_UNIT = "sp"
    SP_PER_ROW = 16  # Scaled pixels in one terminal row

    # Terminal rendering
    DOCUMENT_WIDTH = 65  # Fallback width when no terminal is attached
    MIN_LINE_LENGTH = 20
    MAX_LINE_LENGTH = 200
    MAX_SPACING_VALUE = 200

    # Settings storage
    APP_NAME = "paraspace"
    SETTINGS_FILENAME = "settings.json"
