"""
Hierarchy Filter — Ancestor-Inclusive Forest Pruning.

A node is present in the filtered forest if and only if:
- Its node id passes the predicate, AND
- All of its ancestors pass the predicate

Depths in the result are renumbered so each retained node's depth equals
the number of its retained ancestors.

INVARIANTS:
- Single forward pass, O(n) time and O(n) auxiliary space, no recursion
- Filtering is monotonic (only removes nodes, never adds)
- Order preserving (result is a subsequence of the input)
- Result is itself a ForestView, so filters can be chained
- Pure with respect to its inputs; tracking state is call-local
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from threading import Lock

from forestfilter.config import settings
from forestfilter.models.failure import InvalidArgumentError
from forestfilter.models.forest import ArrayForest, ForestView, NodeId

logger = logging.getLogger(__name__)

# Type alias for node predicates
NodePredicate = Callable[[NodeId], bool]


@dataclass
class HierarchyFilterMetrics:
    """Metrics recorded per filter call."""

    input_size: int = 0
    output_size: int = 0
    max_input_depth: int = -1
    predicate_calls: int = 0


# Module-level metrics accumulator, only written when enabled in settings.
# Unbounded: callers that enable metrics must drain it with reset_filter_metrics().
_metrics_history: list[HierarchyFilterMetrics] = []
_metrics_lock = Lock()


def get_filter_metrics() -> list[HierarchyFilterMetrics]:
    """Get all recorded metrics."""
    with _metrics_lock:
        return _metrics_history.copy()


def reset_filter_metrics() -> None:
    """Reset metrics history (for testing)."""
    with _metrics_lock:
        _metrics_history.clear()


def filter_forest(view: ForestView, predicate: NodePredicate) -> ArrayForest:
    """
    Filter a forest based on a predicate applied to node ids.

    Algorithm:
    1. Traverse the forest once in DFS order
    2. Track, per original depth, whether the ancestor on the current
       path at that depth was retained, and its renumbered depth
    3. Include a node only if it and all its ancestors pass
    4. Renumber depths from the retained parent's new depth

    The predicate is not evaluated for nodes under a rejected ancestor.

    Behavior is unspecified if the view breaks the DFS/depth contract;
    use find_structure_violations() to audit untrusted input.

    Args:
        view: The forest to filter
        predicate: Total, side-effect-free test on node ids

    Returns:
        A new ArrayForest containing only the retained nodes

    Raises:
        InvalidArgumentError: If view or predicate is None
    """
    if view is None:
        raise InvalidArgumentError("Forest view cannot be None")
    if predicate is None:
        raise InvalidArgumentError("Predicate cannot be None")

    size = view.size()
    metrics = HierarchyFilterMetrics(input_size=size)

    filtered_ids: list[NodeId] = []
    filtered_depths: list[int] = []

    # Indexed by original depth; depth can never exceed node count
    valid_at_depth = [False] * size
    remapped_depth = [0] * size

    previous_depth = -1

    for i in range(size):
        node_id = view.node_id(i)
        depth = view.depth(i)

        # Back at a sibling or ancestor level: state below belongs to an exited subtree.
        # Slots deeper than previous_depth are already False, so clearing stops there.
        if depth <= previous_depth:
            for d in range(depth, previous_depth + 1):
                valid_at_depth[d] = False

        parent_valid = depth == 0 or valid_at_depth[depth - 1]

        self_valid = False
        if parent_valid:
            metrics.predicate_calls += 1
            self_valid = bool(predicate(node_id))

        valid_at_depth[depth] = self_valid

        if self_valid:
            new_depth = 0 if depth == 0 else remapped_depth[depth - 1] + 1
            remapped_depth[depth] = new_depth

            filtered_ids.append(node_id)
            filtered_depths.append(new_depth)

        previous_depth = depth
        metrics.max_input_depth = max(metrics.max_input_depth, depth)

    result = ArrayForest(node_ids=tuple(filtered_ids), depths=tuple(filtered_depths))
    metrics.output_size = result.size()

    if settings.record_filter_metrics:
        with _metrics_lock:
            _metrics_history.append(metrics)

    logger.debug(
        "hierarchy_filtered",
        extra={
            "input_size": metrics.input_size,
            "output_size": metrics.output_size,
            "predicate_calls": metrics.predicate_calls,
        },
    )

    return result


def filter_forest_all(
    view: ForestView,
    predicates: Iterable[NodePredicate],
) -> ArrayForest:
    """
    Apply several predicates in sequence, feeding each result to the next.

    Equivalent to filtering once with the conjunction of all predicates.
    Arguments are checked before any filtering happens.

    Raises:
        InvalidArgumentError: If view, predicates, or any predicate is None
    """
    if view is None:
        raise InvalidArgumentError("Forest view cannot be None")
    if predicates is None:
        raise InvalidArgumentError("Predicates cannot be None")

    predicate_list = list(predicates)
    for position, predicate in enumerate(predicate_list):
        if predicate is None:
            raise InvalidArgumentError(
                "Predicate cannot be None",
                detail=f"predicate at position {position}",
            )

    result = ArrayForest(
        node_ids=tuple(view.node_id(i) for i in range(view.size())),
        depths=tuple(view.depth(i) for i in range(view.size())),
    )
    for predicate in predicate_list:
        result = filter_forest(result, predicate)

    return result
