"""Exception types raised by text-trees."""

from __future__ import annotations


class TextTreesError(Exception):
    """Base class for errors raised by this package."""


class FormatError(TextTreesError, ValueError):
    """A formatting field was rejected at construction time."""


class TreeShapeError(TextTreesError, ValueError):
    """A graph could not be interpreted as a single rooted tree."""
