"""Filesystem walker: build a tree of directory entries.

Each entry becomes one node whose label carries a marker for its kind:

- ``📁`` directory (``🏠`` for the user's home directory),
- ``📄`` regular file,
- ``🔗`` symbolic link to a file,
- ``☠️`` broken link or anything that is neither a file nor a directory.

Entries are listed directories first, then case-insensitively by name, so the
rendered tree is deterministic.
"""

from __future__ import annotations

import logging
from pathlib import Path

from text_trees.tree import TreeNode

logger = logging.getLogger(__name__)

P_HOME = "🏠"
P_FOLDER = "📁"
P_FILE = "📄"
P_LINK = "🔗"
P_GONE = "☠️"


def is_dir(p: Path) -> bool:
    """``Path.is_dir()`` that answers ``False`` when the status cannot be read."""
    try:
        return p.is_dir()
    except OSError:
        return False


def _is_home(p: Path) -> bool:
    try:
        return p.resolve() == Path.home().resolve()
    except (OSError, RuntimeError):
        return False


class FSEntry:
    """Node data for one filesystem path; the label is computed on demand."""

    def __init__(self, path: Path) -> None:
        self.path = path

    @property
    def name(self) -> str:
        return self.path.name or str(self.path)

    def marker(self) -> str:
        p = self.path
        try:
            if p.is_file():
                return P_LINK if p.is_symlink() else P_FILE
            if p.is_dir():
                return P_HOME if _is_home(p) else P_FOLDER
        except OSError:
            pass
        return P_GONE

    def __str__(self) -> str:
        return f"{self.marker()} {self.name}"

    def __repr__(self) -> str:
        return f"FSEntry({self.path!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FSEntry):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)


def iter_children(d: Path) -> list[Path]:
    """Children of ``d`` in tree order; an unreadable directory has none."""
    try:
        children = list(d.iterdir())
    except OSError as e:
        logger.warning("cannot read directory %s: %s", d, e)
        return []
    children.sort(key=lambda p: (not is_dir(p), p.name.casefold()))
    return children


def make_dir_tree(path: Path | str, *, follow_symlinks: bool = False) -> TreeNode[FSEntry]:
    """Build a ``TreeNode`` for ``path`` and everything below it.

    Symlinked directories are shown but only descended into when
    ``follow_symlinks`` is set; a link back to a directory already on the
    current path is never followed.
    """
    root = Path(path)

    top: TreeNode[FSEntry] = TreeNode(FSEntry(root))
    stack: list[tuple[Path, TreeNode[FSEntry], frozenset[Path]]] = [(root, top, frozenset())]
    while stack:
        p, node, ancestors = stack.pop()
        if not is_dir(p):
            continue
        # The root itself is always listed, even when it is a link.
        if ancestors and p.is_symlink() and not follow_symlinks:
            continue
        try:
            resolved = p.resolve()
        except OSError:
            resolved = p
        if resolved in ancestors:
            logger.warning("not following %s: loops back to %s", p, resolved)
            continue
        inner = ancestors | {resolved}
        for child_path in iter_children(p):
            child: TreeNode[FSEntry] = TreeNode(FSEntry(child_path))
            node.push_node(child)
            stack.append((child_path, child, inner))
    return top
