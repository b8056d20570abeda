"""Line renderer: one line per node, connector glyphs drawn from a sibling stack."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterator
from dataclasses import dataclass

from text_trees.config import TreeFormatting
from text_trees.types import AnchorPosition, Labelled, TextSink

logger = logging.getLogger(__name__)

# ─── Glyph Groups ────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Glyphs:
    """The connector strings for one formatting, built once per renderer.

    ``bar`` and ``blank`` are drawn on ancestor rows, ``tee`` and ``angle`` on
    the node's own row. The ``*_parent`` variants differ only when anchored
    left, where a node with children gets a down-facing tee.
    """

    root: str
    bar: str
    blank: str
    tee_leaf: str
    tee_parent: str
    angle_leaf: str
    angle_parent: str

    @classmethod
    def for_formatting(cls, formatting: TreeFormatting) -> Glyphs:
        ch = formatting.chars
        line = ch.horizontal_line * ch.horizontal_line_count
        label_space = ch.label_space_char * ch.label_space_count
        space = ch.horizontal_space * ch.horizontal_line_count

        if formatting.anchor == AnchorPosition.Left:
            root = ch.down_facing_angle + label_space
            leaf_joint = ch.horizontal_line
            parent_joint = ch.down_facing_tee
        else:
            root = ""
            leaf_joint = parent_joint = ""

        return cls(
            root=root,
            bar=ch.vertical_line + space,
            blank=ch.horizontal_space + space,
            tee_leaf=ch.right_facing_tee + line + leaf_joint + label_space,
            tee_parent=ch.right_facing_tee + line + parent_joint + label_space,
            angle_leaf=ch.right_facing_angle + line + leaf_joint + label_space,
            angle_parent=ch.right_facing_angle + line + parent_joint + label_space,
        )

    def connector(self, remaining: int, own_row: bool, has_children: bool) -> str:
        if own_row:
            if remaining == 1:
                return self.angle_parent if has_children else self.angle_leaf
            return self.tee_parent if has_children else self.tee_leaf
        return self.blank if remaining == 1 else self.bar


def _descend(
    node: Labelled,
    remaining: list[int],
    pending: list[tuple[Iterator[tuple[int, Labelled]], int]],
) -> None:
    # children() restarts on every call: one pass to count, one to walk.
    count = sum(1 for _ in node.children())
    remaining.append(count)
    pending.append((enumerate(node.children()), count))


# ─── Public Renderer ─────────────────────────────────────────────────────────


class LineRenderer:
    """Depth-first, pre-order tree renderer.

    Keeps one counter per level below the root holding the number of siblings,
    including the current node, not yet written at that level. The counters
    pick the glyph drawn in each column of a line, so labels at the same depth
    always start in the same column.
    """

    def __init__(self, formatting: TreeFormatting | None = None) -> None:
        self.formatting = formatting if formatting is not None else TreeFormatting()
        self.glyphs = Glyphs.for_formatting(self.formatting)

    def lines(self, tree: Labelled) -> Iterator[str]:
        """Yield each output line, newline included, in display order."""
        prefix = self.formatting.prefix
        glyphs = self.glyphs

        yield prefix + glyphs.root + tree.label() + "\n"

        remaining: list[int] = []
        pending: list[tuple[Iterator[tuple[int, Labelled]], int]] = []
        if tree.has_children():
            _descend(tree, remaining, pending)

        while pending:
            siblings, count = pending[-1]
            step = next(siblings, None)
            if step is None:
                pending.pop()
                remaining.pop()
                continue
            index, node = step
            remaining[-1] = count - index
            has_children = node.has_children()

            last_row = len(remaining) - 1
            parts = [prefix]
            for row, left in enumerate(remaining):
                parts.append(glyphs.connector(left, row == last_row, has_children))
            parts.append(node.label())
            parts.append("\n")
            yield "".join(parts)

            if has_children:
                _descend(node, remaining, pending)

    def write(self, tree: Labelled, sink: TextSink) -> int:
        """Write the tree to ``sink`` line by line; sink errors propagate."""
        logger.debug(
            "rendering tree anchor=%s prefix=%r",
            self.formatting.anchor.name,
            self.formatting.prefix_str,
        )
        written = 0
        for line in self.lines(tree):
            sink.write(line)
            written += 1
        logger.debug("wrote %d lines", written)
        return written

    def render(self, tree: Labelled) -> str:
        buffer = io.StringIO()
        self.write(tree, buffer)
        return buffer.getvalue()
