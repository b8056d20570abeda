"""text-trees: render ordered trees as aligned ASCII/box-drawing text."""

import logging

from text_trees.config import (
    TreeFormatting,
    default_formatting,
    dir_tree,
    dir_tree_left,
    dir_tree_left_with_prefix,
    dir_tree_with_prefix,
)
from text_trees.errors import FormatError, TextTreesError, TreeShapeError
from text_trees.fs import FSEntry, make_dir_tree
from text_trees.ir.graph import tree_from_digraph, tree_to_digraph
from text_trees.render import render, render_to
from text_trees.renderers.charset import CharSet, FormatCharacters, ascii_chars, box_chars
from text_trees.renderers.lines import LineRenderer
from text_trees.tree import StringTreeNode, TreeNode
from text_trees.types import AnchorPosition, TreeOrientation

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AnchorPosition",
    "CharSet",
    "FSEntry",
    "FormatCharacters",
    "FormatError",
    "LineRenderer",
    "StringTreeNode",
    "TextTreesError",
    "TreeFormatting",
    "TreeNode",
    "TreeOrientation",
    "TreeShapeError",
    "ascii_chars",
    "box_chars",
    "default_formatting",
    "dir_tree",
    "dir_tree_left",
    "dir_tree_left_with_prefix",
    "dir_tree_with_prefix",
    "make_dir_tree",
    "render",
    "render_to",
    "tree_from_digraph",
    "tree_to_digraph",
]
