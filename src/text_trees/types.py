"""Shared type definitions for text-trees.

Enums and small protocols used across the tree model, formatting and renderers.
"""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum, auto
from typing import Protocol


class TreeOrientation(Enum):
    TopDown = auto()  # root on the first line, children below and to the right

    @classmethod
    def default(cls) -> TreeOrientation:
        return cls.TopDown


class AnchorPosition(Enum):
    Below = auto()  # connectors attach under the start of the parent line
    Left = auto()  # connectors attach to a tee drawn left of each label

    @classmethod
    def default(cls) -> AnchorPosition:
        return cls.Below


class Labelled(Protocol):
    """What the line renderer needs from a node."""

    def label(self) -> str: ...

    def has_children(self) -> bool: ...

    def children(self) -> Iterator[Labelled]: ...


class TextSink(Protocol):
    """A writable character stream."""

    def write(self, s: str, /) -> object: ...
