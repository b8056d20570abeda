"""Entry points: render a tree to a string or stream it to a sink."""

from __future__ import annotations

import io
import sys
from typing import BinaryIO, Union

from text_trees.config import TreeFormatting
from text_trees.renderers.lines import LineRenderer
from text_trees.types import Labelled, TextSink

Sink = Union[TextSink, BinaryIO]


class _EncodingSink:
    """Adapts a binary stream to the text ``write`` the renderer calls."""

    def __init__(self, raw: BinaryIO, encoding: str) -> None:
        self.raw = raw
        self.encoding = encoding

    def write(self, s: str) -> int:
        self.raw.write(s.encode(self.encoding))
        return len(s)


def _is_binary(sink: object) -> bool:
    return isinstance(sink, (io.RawIOBase, io.BufferedIOBase))


def render(tree: Labelled, formatting: TreeFormatting | None = None) -> str:
    """Render ``tree`` to a string, one ``\\n``-terminated line per node.

    Args:
        tree: Root node; anything with ``label()``, ``has_children()`` and
            ``children()``.
        formatting: Glyphs, anchor and prefix; ``None`` means
            ``default_formatting()``.

    Returns:
        The complete diagram.
    """
    return LineRenderer(formatting).render(tree)


def render_to(
    tree: Labelled,
    formatting: TreeFormatting | None = None,
    sink: Sink | None = None,
    *,
    encoding: str = "utf-8",
) -> None:
    """Stream the rendered ``tree`` to ``sink`` one line at a time.

    Args:
        tree: Root node to render.
        formatting: Glyphs, anchor and prefix; ``None`` means
            ``default_formatting()``.
        sink: A text stream, or a binary stream whose lines are encoded with
            ``encoding``. ``None`` writes to ``sys.stdout``.
        encoding: Codec used for binary sinks.

    Raises:
        Whatever the sink raises on ``write``; lines already written are kept.
    """
    target = sys.stdout if sink is None else sink
    if _is_binary(target):
        target = _EncodingSink(target, encoding)  # type: ignore[arg-type]
    LineRenderer(formatting).write(tree, target)  # type: ignore[arg-type]
