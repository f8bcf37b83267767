"""Typed size values used for paragraph spacing."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .constants import ParaSpaceConstants

UNITS = ("sp", "em")

_SIZE_RE = re.compile(r"^\s*(\d+(?:\.\d*)?|\.\d+)\s*([a-z]*)\s*$")


@dataclass(frozen=True)
class TextUnit:
    """A font size magnitude, e.g. ``10sp`` or ``1.5em``."""

    value: float
    unit: str = ParaSpaceConstants.DEFAULT_SPACING_UNIT

    def __post_init__(self):
        if self.unit not in UNITS:
            raise ValueError(f"Unknown size unit {self.unit!r}, expected one of {UNITS}")
        if self.value < 0:
            raise ValueError(f"Size must not be negative: {self.value}")

    @classmethod
    def parse(cls, text: str) -> "TextUnit":
        """Parse ``"12sp"``, ``"1.5em"`` or a bare number (taken as sp)."""
        m = _SIZE_RE.match(text)
        if not m:
            raise ValueError(f"Invalid size: {text!r}")
        number, unit = m.group(1), m.group(2) or ParaSpaceConstants.DEFAULT_SPACING_UNIT
        value = float(number)
        if value.is_integer():
            value = int(value)
        return cls(value, unit)

    def to_rows(self) -> int:
        """Number of whole terminal rows this size occupies."""
        if self.unit == "em":
            return int(round(self.value))
        return int(round(self.value / ParaSpaceConstants.SP_PER_ROW))

    def __str__(self) -> str:
        return f"{self.value:g}{self.unit}"


def sp(value: float) -> TextUnit:
    return TextUnit(value, "sp")


def em(value: float) -> TextUnit:
    return TextUnit(value, "em")


DEFAULT_SPACING = TextUnit(
    ParaSpaceConstants.DEFAULT_SPACING_VALUE, ParaSpaceConstants.DEFAULT_SPACING_UNIT
)
