"""Tree <-> networkx conversion.

A ``networkx.DiGraph`` that is an arborescence (one root, every other node
with exactly one parent) maps onto a ``TreeNode``; the reverse direction
produces such a graph with integer node ids in pre-order.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

import networkx as nx

from text_trees.errors import TreeShapeError
from text_trees.tree import TreeNode


def _find_root(digraph: nx.DiGraph) -> Hashable:
    roots = [n for n, degree in digraph.in_degree() if degree == 0]
    if len(roots) != 1:
        raise TreeShapeError(f"Expected exactly one root, found {len(roots)}")
    return roots[0]


def tree_from_digraph(
    digraph: nx.DiGraph,
    root: Hashable | None = None,
    *,
    label_attr: str | None = None,
) -> TreeNode[Any]:
    """Build a tree from an arborescence.

    Args:
        digraph: Directed graph with edges pointing from parent to child.
        root: Node to start from; the subtree reachable from it must be a
            tree. ``None`` requires the whole graph to be an arborescence and
            uses its single root.
        label_attr: Node attribute holding the node data; ``None`` uses the
            node key itself.

    Returns:
        The root ``TreeNode``. Children follow the graph's successor order,
        which is edge insertion order for a plain ``DiGraph``.

    Raises:
        TreeShapeError: If the graph is empty, ``root`` is missing, or the
            graph (or the part reachable from ``root``) is not a tree.
    """
    if digraph.number_of_nodes() == 0:
        raise TreeShapeError("Cannot build a tree from an empty graph")
    if root is None:
        if not nx.is_arborescence(digraph):
            raise TreeShapeError("Graph is not an arborescence")
        root = _find_root(digraph)
    else:
        if root not in digraph:
            raise TreeShapeError(f"Root {root!r} is not in the graph")
        reachable = digraph.subgraph(nx.descendants(digraph, root) | {root})
        if not nx.is_arborescence(reachable) or reachable.in_degree(root) != 0:
            raise TreeShapeError(f"Graph below {root!r} is not a tree")

    def data_of(n: Hashable) -> Any:
        if label_attr is None:
            return n
        return digraph.nodes[n].get(label_attr, n)

    top: TreeNode[Any] = TreeNode(data_of(root))
    stack: list[tuple[Hashable, TreeNode[Any]]] = [(root, top)]
    while stack:
        key, node = stack.pop()
        for child_key in digraph.successors(key):
            child = TreeNode(data_of(child_key))
            node.push_node(child)
            stack.append((child_key, child))
    return top


def tree_to_digraph(tree: TreeNode[Any]) -> nx.DiGraph:
    """Convert a tree to a DiGraph with pre-order integer ids.

    Each node carries ``data`` (the node data) and ``label`` (its label).
    """
    digraph: nx.DiGraph = nx.DiGraph()
    parents: list[int] = []
    for node_id, (depth, node) in enumerate(tree.walk()):
        digraph.add_node(node_id, data=node.data, label=node.label())
        del parents[depth:]
        if parents:
            digraph.add_edge(parents[-1], node_id)
        parents.append(node_id)
    return digraph
