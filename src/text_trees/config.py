"""Formatting configuration consumed by the line renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from text_trees.errors import FormatError
from text_trees.renderers.charset import FormatCharacters
from text_trees.types import AnchorPosition, TreeOrientation


@dataclass(frozen=True)
class TreeFormatting:
    """How a tree is drawn: glyphs, anchor, orientation and a per-line prefix."""

    prefix_str: str | None = None
    orientation: TreeOrientation = field(default_factory=TreeOrientation.default)
    anchor: AnchorPosition = field(default_factory=AnchorPosition.default)
    chars: FormatCharacters = field(default_factory=FormatCharacters.ascii)

    def __post_init__(self) -> None:
        if self.prefix_str is not None and not isinstance(self.prefix_str, str):
            raise FormatError(f"prefix_str must be a str or None, got {type(self.prefix_str).__name__}")
        if not isinstance(self.orientation, TreeOrientation):
            raise FormatError(f"Unknown orientation {self.orientation!r}")
        if not isinstance(self.anchor, AnchorPosition):
            raise FormatError(f"Unknown anchor {self.anchor!r}; use AnchorPosition.Below or AnchorPosition.Left")
        if not isinstance(self.chars, FormatCharacters):
            raise FormatError(f"chars must be FormatCharacters, got {type(self.chars).__name__}")

    @property
    def prefix(self) -> str:
        return self.prefix_str or ""

    @classmethod
    def dir_tree(cls, chars: FormatCharacters) -> TreeFormatting:
        return cls(chars=chars)

    @classmethod
    def dir_tree_with_prefix(cls, chars: FormatCharacters, prefix: str) -> TreeFormatting:
        return cls(prefix_str=prefix, chars=chars)

    @classmethod
    def dir_tree_left(cls, chars: FormatCharacters) -> TreeFormatting:
        return cls(anchor=AnchorPosition.Left, chars=chars)

    @classmethod
    def dir_tree_left_with_prefix(cls, chars: FormatCharacters, prefix: str) -> TreeFormatting:
        return cls(prefix_str=prefix, anchor=AnchorPosition.Left, chars=chars)


def default_formatting() -> TreeFormatting:
    """ASCII glyphs, top-down, anchored below, no prefix."""
    return TreeFormatting()


def dir_tree(chars: FormatCharacters) -> TreeFormatting:
    return TreeFormatting.dir_tree(chars)


def dir_tree_with_prefix(chars: FormatCharacters, prefix: str) -> TreeFormatting:
    return TreeFormatting.dir_tree_with_prefix(chars, prefix)


def dir_tree_left(chars: FormatCharacters) -> TreeFormatting:
    return TreeFormatting.dir_tree_left(chars)


def dir_tree_left_with_prefix(chars: FormatCharacters, prefix: str) -> TreeFormatting:
    return TreeFormatting.dir_tree_left_with_prefix(chars, prefix)
