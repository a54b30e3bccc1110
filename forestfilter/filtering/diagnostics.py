"""
Structure Diagnostics — Advisory Checks of the Forest View Contract.

The hierarchy filter trusts its input: DFS order and depth consistency
are a caller contract. These checks let a caller audit a view before
filtering it. They report, they never raise for a malformed forest.

Violations detected:
- NEGATIVE_DEPTH: depth below zero
- ORPHAN_ROOT: the first node is not at depth 0
- DEPTH_JUMP: depth exceeds the previous node's depth + 1
- DUPLICATE_ID: identity already seen at an earlier position
"""

from dataclasses import dataclass
from enum import Enum

from forestfilter.models.failure import InvalidArgumentError
from forestfilter.models.forest import ForestView, NodeId


class ViolationKind(str, Enum):
    """Kinds of structural contract violations."""

    NEGATIVE_DEPTH = "negative_depth"
    ORPHAN_ROOT = "orphan_root"
    DEPTH_JUMP = "depth_jump"
    DUPLICATE_ID = "duplicate_id"


@dataclass(frozen=True, slots=True)
class StructureViolation:
    """A single breach of the forest view contract at one position."""

    kind: ViolationKind
    index: int
    node_id: NodeId
    message: str


def find_structure_violations(view: ForestView) -> list[StructureViolation]:
    """
    Scan a forest view for breaches of the DFS/depth contract.

    Single pass, O(n). A node may produce more than one violation.

    Raises:
        InvalidArgumentError: If view is None
    """
    if view is None:
        raise InvalidArgumentError("Forest view cannot be None")

    violations: list[StructureViolation] = []
    seen: set[NodeId] = set()
    previous_depth = -1

    for i in range(view.size()):
        node_id = view.node_id(i)
        depth = view.depth(i)

        if depth < 0:
            violations.append(
                StructureViolation(
                    kind=ViolationKind.NEGATIVE_DEPTH,
                    index=i,
                    node_id=node_id,
                    message=f"Depth {depth} is negative",
                )
            )
        elif i == 0 and depth > 0:
            violations.append(
                StructureViolation(
                    kind=ViolationKind.ORPHAN_ROOT,
                    index=i,
                    node_id=node_id,
                    message=f"First node has depth {depth}, expected 0",
                )
            )
        elif i > 0 and depth > previous_depth + 1:
            violations.append(
                StructureViolation(
                    kind=ViolationKind.DEPTH_JUMP,
                    index=i,
                    node_id=node_id,
                    message=f"Depth jumps from {previous_depth} to {depth}",
                )
            )

        if node_id in seen:
            violations.append(
                StructureViolation(
                    kind=ViolationKind.DUPLICATE_ID,
                    index=i,
                    node_id=node_id,
                    message=f"Identity {node_id!r} appears more than once",
                )
            )
        seen.add(node_id)

        previous_depth = depth

    return violations


def is_well_formed(view: ForestView) -> bool:
    """True when the view has no structural violations."""
    return not find_structure_violations(view)
