"""
Forest View — Flattened Depth-First Forest Representation.

A forest is exposed as an ordered sequence of nodes in depth-first
pre-order, each position carrying a node identity and a depth.

INVARIANTS (caller-guaranteed, not re-derived here):
- Positions are in DFS pre-order across all trees of the forest
- For a node at depth d > 0, the nearest preceding node at depth d - 1
  is its parent
- Identities are unique across the whole forest
- Views are immutable once constructed
"""

import logging
from collections.abc import Hashable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import NamedTuple, Protocol, runtime_checkable

from forestfilter.config import settings
from forestfilter.models.failure import InvalidArgumentError

logger = logging.getLogger(__name__)

# Type alias for node identities
NodeId = Hashable


@runtime_checkable
class ForestView(Protocol):
    """
    Read-only, DFS-ordered exposure of (identity, depth) pairs.

    Any storage layout can be filtered as long as it provides these
    three O(1) accessors.
    """

    def size(self) -> int: ...

    def node_id(self, index: int) -> NodeId: ...

    def depth(self, index: int) -> int: ...


class ForestNode(NamedTuple):
    """A single (identity, depth) position of a flattened forest."""

    node_id: NodeId
    depth: int


def format_forest(view: ForestView) -> str:
    """
    Render any forest view as ``[id:depth, id:depth]``.

    An empty view renders as ``[]``.
    """
    parts = [f"{view.node_id(i)}:{view.depth(i)}" for i in range(view.size())]
    return "[" + ", ".join(parts) + "]"


@dataclass(frozen=True, slots=True)
class ArrayForest:
    """
    Immutable forest view backed by two parallel tuples.

    INVARIANT: node_ids and depths always have the same length.

    Usage:
        forest = ArrayForest.from_sequences([1, 2, 3], [0, 1, 1])
        for node in forest:
            print(node.node_id, node.depth)
    """

    node_ids: tuple[NodeId, ...] = ()
    depths: tuple[int, ...] = ()

    def __post_init__(self) -> None:
        """Snapshot the sequences as tuples and validate they line up."""
        object.__setattr__(self, "node_ids", tuple(self.node_ids))
        object.__setattr__(self, "depths", tuple(self.depths))

        if len(self.node_ids) != len(self.depths):
            raise InvalidArgumentError(
                "Sequences must have the same length",
                detail=f"node_ids={len(self.node_ids)}, depths={len(self.depths)}",
            )

    @classmethod
    def from_sequences(
        cls,
        node_ids: Sequence[NodeId] | None,
        depths: Sequence[int] | None,
    ) -> "ArrayForest":
        """
        Build a forest from parallel identity and depth sequences.

        The sequences are copied, so later mutation of the caller's lists
        does not affect the forest.

        Raises:
            InvalidArgumentError: If either sequence is None or lengths differ
        """
        if node_ids is None or depths is None:
            raise InvalidArgumentError("Sequences cannot be None")

        forest = cls(node_ids=tuple(node_ids), depths=tuple(depths))

        if settings.check_forest_structure:
            # Local import: diagnostics depends on this module
            from forestfilter.filtering.diagnostics import find_structure_violations

            for violation in find_structure_violations(forest):
                logger.warning(
                    "forest_structure_violation",
                    extra={
                        "kind": violation.kind.value,
                        "index": violation.index,
                        "node_id": violation.node_id,
                        "detail": violation.message,
                    },
                )

        return forest

    @classmethod
    def from_nodes(cls, nodes: Iterable[tuple[NodeId, int]]) -> "ArrayForest":
        """Build a forest from (identity, depth) pairs in DFS order."""
        node_ids: list[NodeId] = []
        depths: list[int] = []
        for node_id, depth in nodes:
            node_ids.append(node_id)
            depths.append(depth)
        return cls.from_sequences(node_ids, depths)

    @classmethod
    def empty(cls) -> "ArrayForest":
        """An empty forest."""
        return cls()

    def size(self) -> int:
        return len(self.depths)

    def node_id(self, index: int) -> NodeId:
        return self.node_ids[index]

    def depth(self, index: int) -> int:
        return self.depths[index]

    def __len__(self) -> int:
        return len(self.depths)

    def __iter__(self) -> Iterator[ForestNode]:
        """Iterate over (node_id, depth) pairs in DFS order."""
        for node_id, depth in zip(self.node_ids, self.depths, strict=True):
            yield ForestNode(node_id, depth)

    def to_nodes(self) -> list[tuple[NodeId, int]]:
        """Export as a list of (node_id, depth) tuples."""
        return [(node.node_id, node.depth) for node in self]

    def format_string(self) -> str:
        """Render as ``[id:depth, ...]`` for diagnostics and tests."""
        return format_forest(self)

    def __str__(self) -> str:
        return self.format_string()
