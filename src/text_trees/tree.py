"""Tree data model: an ordered, rooted tree of labelled nodes.

Children are owned by their parent and only ever appended, so a tree built
with these operations is always finite and acyclic. Any value can be used as
node data; its label is whatever ``str()`` returns for it.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import zip_longest
from typing import TYPE_CHECKING, Generic, TypeVar

from text_trees.render import render, render_to

if TYPE_CHECKING:
    from text_trees.config import TreeFormatting
    from text_trees.render import Sink

T = TypeVar("T")


class TreeNode(Generic[T]):
    """A node holding ``data`` and an ordered list of child nodes."""

    def __init__(self, data: T) -> None:
        self.data = data
        self._children: list[TreeNode[T]] = []

    @classmethod
    def with_children(cls, data: T, values: Iterable[T]) -> TreeNode[T]:
        """Build a node with one leaf child per value."""
        node = cls(data)
        node.extend(values)
        return node

    @classmethod
    def with_child_nodes(cls, data: T, nodes: Iterable[TreeNode[T]]) -> TreeNode[T]:
        """Build a node whose children are already-built subtrees."""
        node = cls(data)
        for child in nodes:
            node.push_node(child)
        return node

    def push(self, data: T) -> None:
        self._children.append(type(self)(data))

    def push_node(self, node: TreeNode[T]) -> None:
        if not isinstance(node, TreeNode):
            raise TypeError(f"push_node expects a TreeNode, got {type(node).__name__}")
        self._children.append(node)

    def extend(self, values: Iterable[T]) -> None:
        cls = type(self)
        self._children.extend(cls(value) for value in values)

    def has_children(self) -> bool:
        return bool(self._children)

    def children(self) -> Iterator[TreeNode[T]]:
        """Iterate over the immediate children; each call starts a new pass."""
        return iter(self._children)

    def label(self) -> str:
        return str(self.data)

    def walk(self) -> Iterator[tuple[int, TreeNode[T]]]:
        """Yield ``(depth, node)`` for every node in pre-order, root at depth 0."""
        stack: list[tuple[int, TreeNode[T]]] = [(0, self)]
        while stack:
            depth, node = stack.pop()
            yield depth, node
            stack.extend((depth + 1, child) for child in reversed(node._children))

    def to_string(self, formatting: TreeFormatting | None = None) -> str:
        return render(self, formatting)

    def write(self, sink: Sink | None = None, formatting: TreeFormatting | None = None) -> None:
        render_to(self, formatting, sink)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeNode):
            return NotImplemented
        # Same pre-order sequence of (depth, data, child count) means same shape.
        missing = object()
        for mine, theirs in zip_longest(self.walk(), other.walk(), fillvalue=missing):
            if mine is missing or theirs is missing:
                return False
            (depth, node), (other_depth, other_node) = mine, theirs
            if depth != other_depth or len(node._children) != len(other_node._children):
                return False
            if node.data != other_node.data:
                return False
        return True

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts: list[str] = []
        pending: list[TreeNode[T] | str] = [self]
        while pending:
            item = pending.pop()
            if isinstance(item, str):
                parts.append(item)
                continue
            if not item._children:
                parts.append(f"TreeNode({item.data!r})")
                continue
            parts.append(f"TreeNode({item.data!r}, children=[")
            pending.append("])")
            for index in range(len(item._children) - 1, -1, -1):
                pending.append(item._children[index])
                if index:
                    pending.append(", ")
        return "".join(parts)

    def __str__(self) -> str:
        return render(self)


StringTreeNode = TreeNode[str]
