"""Character sets for drawing tree connectors."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass, fields
from enum import Enum

from text_trees.errors import FormatError

_COUNT_FIELDS = ("horizontal_line_count", "label_space_count")


class CharSet(Enum):
    Unicode = "unicode"
    Ascii = "ascii"


def _check_glyph(name: str, value: object) -> None:
    if not isinstance(value, str):
        raise FormatError(f"{name} must be a str, got {type(value).__name__}")
    if len(value) != 1:
        raise FormatError(f"{name} must be exactly one character, got {value!r}")
    if unicodedata.east_asian_width(value) in ("W", "F"):
        raise FormatError(f"{name} must occupy a single column, {value!r} is wide")
    if unicodedata.combining(value) or unicodedata.category(value) in ("Cc", "Cf", "Mn", "Me"):
        raise FormatError(f"{name} must be a printable character, got {value!r}")


def _check_count(name: str, value: object) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise FormatError(f"{name} must be an int, got {type(value).__name__}")
    if value < 0:
        raise FormatError(f"{name} must not be negative, got {value}")


@dataclass(frozen=True)
class FormatCharacters:
    """The glyphs and gap widths used to draw connectors.

    Every glyph field holds one single-column character; the two counts say
    how many times the horizontal line and label space are repeated. Build a
    variant of a preset with ``dataclasses.replace``, which re-runs the
    validation.
    """

    down_facing_angle: str
    down_facing_tee: str
    vertical_line: str
    horizontal_line: str
    horizontal_space: str
    horizontal_line_count: int
    right_facing_tee: str
    right_facing_angle: str
    label_space_char: str
    label_space_count: int

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in _COUNT_FIELDS:
                _check_count(f.name, value)
            else:
                _check_glyph(f.name, value)

    @classmethod
    def ascii(cls) -> FormatCharacters:
        return cls(
            down_facing_angle="+",
            down_facing_tee=",",
            vertical_line="|",
            horizontal_line="-",
            horizontal_space=" ",
            horizontal_line_count=2,
            right_facing_tee="+",
            right_facing_angle="'",
            label_space_char=" ",
            label_space_count=1,
        )

    @classmethod
    def box_chars(cls) -> FormatCharacters:
        return cls(
            down_facing_angle="┌",
            down_facing_tee="┬",
            vertical_line="│",
            horizontal_line="─",
            horizontal_space=" ",
            horizontal_line_count=2,
            right_facing_tee="├",
            right_facing_angle="└",
            label_space_char=" ",
            label_space_count=1,
        )

    @classmethod
    def for_charset(cls, cs: CharSet) -> FormatCharacters:
        if cs == CharSet.Unicode:
            return cls.box_chars()
        return cls.ascii()


def ascii_chars() -> FormatCharacters:
    return FormatCharacters.ascii()


def box_chars() -> FormatCharacters:
    return FormatCharacters.box_chars()
