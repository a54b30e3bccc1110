from forestfilter.models.failure import (
    FailureDetail,
    FailureKind,
    InvalidArgumentError,
    KnownError,
)
from forestfilter.models.forest import (
    ArrayForest,
    ForestNode,
    ForestView,
    NodeId,
    format_forest,
)
from forestfilter.models.tree import TreeNode, build_trees, flatten_trees

__all__ = [
    # Failures
    "FailureDetail",
    "FailureKind",
    "InvalidArgumentError",
    "KnownError",
    # Forest view
    "ArrayForest",
    "ForestNode",
    "ForestView",
    "NodeId",
    "format_forest",
    # Pointer trees
    "TreeNode",
    "build_trees",
    "flatten_trees",
]
