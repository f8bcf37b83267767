"""ParaSpace CLI entry point.

Allows running via `python -m paraspace` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .constants import ParaSpaceConstants
from .offsets import OffsetOutOfRangeError, ParagraphOffsetMapping
from .settings_persistence import SettingsKeys, get_persistence, spacing_from_settings
from .units import DEFAULT_SPACING, TextUnit
from .version import get_version_string
from .view import TerminalParagraphView


def _size(value: str) -> TextUnit:
    try:
        return TextUnit.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _width(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid width: {value!r}")
    low, high = ParaSpaceConstants.MIN_LINE_LENGTH, ParaSpaceConstants.MAX_LINE_LENGTH
    if not low <= width <= high:
        raise argparse.ArgumentTypeError(f"width must be between {low} and {high}")
    return width


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paraspace",
        description="Show text with extra space between paragraphs.",
    )
    parser.add_argument("file", nargs="?", help="text file to read (default: stdin)")
    parser.add_argument("-V", "--version", action="store_true", help="print version and exit")
    parser.add_argument("--spacing", type=_size, help="paragraph spacing, e.g. 10sp or 1em")
    parser.add_argument("--width", type=_width, help="line length in columns")
    parser.add_argument("--caret", type=int, metavar="OFFSET",
                        help="highlight the caret at this original offset")
    mapping = parser.add_mutually_exclusive_group()
    mapping.add_argument("--to-display", type=int, metavar="OFFSET",
                         help="print the display offset for an original offset")
    mapping.add_argument("--to-original", type=int, metavar="OFFSET",
                         help="print the original offset for a display offset")
    parser.add_argument("--save-settings", action="store_true",
                        help="remember --spacing and --width for FILE")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    return parser


def _read_text(path: Optional[str]) -> str:
    if path is None:
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.version:
        print(get_version_string())
        return 0
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    persistence = get_persistence()
    settings = persistence.load_settings(args.file)
    spacing = args.spacing or spacing_from_settings(settings, DEFAULT_SPACING)
    width = args.width or settings.get(SettingsKeys.LINE_LENGTH)

    if args.save_settings:
        if args.file is None:
            print("--save-settings needs a FILE", file=sys.stderr)
            return 2
        settings[SettingsKeys.SPACING] = str(spacing)
        if width is not None:
            settings[SettingsKeys.LINE_LENGTH] = width
        if not persistence.save_settings(args.file, settings):
            print("Could not save settings", file=sys.stderr)

    try:
        text = _read_text(args.file)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        if args.to_display is not None:
            print(ParagraphOffsetMapping(text).original_to_transformed(args.to_display))
            return 0
        if args.to_original is not None:
            print(ParagraphOffsetMapping(text).transformed_to_original(args.to_original))
            return 0

        view = TerminalParagraphView(num_columns=width, spacing=spacing)
        view.render(text)
        caret = view.caret_position(args.caret) if args.caret is not None else None
    except OffsetOutOfRangeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    print(view.format_lines(caret))
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
