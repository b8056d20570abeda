"""Interchange with other graph representations."""

from text_trees.ir.graph import tree_from_digraph, tree_to_digraph

__all__ = [
    "tree_from_digraph",
    "tree_to_digraph",
]
