#!/usr/bin/env python3
"""ParaSpace - show text with extra space between paragraphs.

Usage:
    python main.py [--spacing 10sp] [--width 65] [--caret OFFSET] [filename]

Reads standard input when no filename is given.
"""

import sys
from paraspace.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
