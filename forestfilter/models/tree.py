"""
Pointer-tree forest and its projection to the flattened view.

Any tree structure can be filtered once it is flattened into DFS
pre-order (identity, depth) pairs. Both directions are iterative so deep
forests do not hit the recursion limit.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from forestfilter.models.failure import InvalidArgumentError
from forestfilter.models.forest import ArrayForest, ForestView, NodeId


@dataclass
class TreeNode:
    """A node of a pointer-based tree, owning its children in order."""

    node_id: NodeId
    children: list[TreeNode] = field(default_factory=list)

    def add_child(self, child: TreeNode) -> TreeNode:
        """Append a child and return it (for fluent building)."""
        self.children.append(child)
        return child

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def iter_dfs(self) -> list[tuple[NodeId, int]]:
        """This subtree as (node_id, depth) pairs in DFS pre-order, root at depth 0."""
        result: list[tuple[NodeId, int]] = []
        stack: list[tuple[TreeNode, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            result.append((node.node_id, depth))
            # Reversed so the first child is popped first
            for child in reversed(node.children):
                stack.append((child, depth + 1))
        return result


def flatten_trees(roots: list[TreeNode]) -> ArrayForest:
    """
    Project a list of root trees into a flattened forest view.

    Raises:
        InvalidArgumentError: If roots is None
    """
    if roots is None:
        raise InvalidArgumentError("Roots cannot be None")

    nodes: list[tuple[NodeId, int]] = []
    for root in roots:
        nodes.extend(root.iter_dfs())
    return ArrayForest.from_nodes(nodes)


def build_trees(view: ForestView) -> list[TreeNode]:
    """
    Rebuild pointer trees from a flattened forest view.

    Uses a stack holding the current root-to-node path; the parent of a
    node at depth d is the path entry at depth d - 1.

    Raises:
        InvalidArgumentError: If view is None, or a depth skips a level
    """
    if view is None:
        raise InvalidArgumentError("Forest view cannot be None")

    roots: list[TreeNode] = []
    path: list[TreeNode] = []

    for i in range(view.size()):
        depth = view.depth(i)
        node = TreeNode(node_id=view.node_id(i))

        if depth < 0 or depth > len(path):
            raise InvalidArgumentError(
                "Forest view is not in DFS pre-order",
                detail=f"node {view.node_id(i)!r} at index {i} has depth {depth}",
            )

        del path[depth:]
        if depth == 0:
            roots.append(node)
        else:
            path[-1].add_child(node)
        path.append(node)

    return roots
