"""
Forest filtering.

Hierarchy filter: single-pass, ancestor-inclusive pruning of a DFS forest.
Diagnostics: advisory checks of the DFS/depth contract the filter trusts.
"""

from forestfilter.filtering.diagnostics import (
    StructureViolation,
    ViolationKind,
    find_structure_violations,
    is_well_formed,
)
from forestfilter.filtering.hierarchy_filter import (
    HierarchyFilterMetrics,
    NodePredicate,
    filter_forest,
    filter_forest_all,
    get_filter_metrics,
    reset_filter_metrics,
)

__all__ = [
    # Hierarchy filter
    "HierarchyFilterMetrics",
    "NodePredicate",
    "filter_forest",
    "filter_forest_all",
    "get_filter_metrics",
    "reset_filter_metrics",
    # Diagnostics
    "StructureViolation",
    "ViolationKind",
    "find_structure_violations",
    "is_well_formed",
]
