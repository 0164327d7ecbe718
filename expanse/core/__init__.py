"""Core abstractions for Expanse.

This module contains the small set of abstractions every other module is
written against: the three-way comparison used by sorted-sequence
operations and the adapter used to reach a caller-owned tree.
"""

from .comparison import (
    ThreeWayComparison,
    DirectComparison,
    ItemComparison,
    KeyComparison,
    KeyComparableComparison,
    as_comparison,
    as_comparator,
    natural_compare,
)
from .adapter import TreeAdapter, FunctionTreeAdapter

__all__ = [
    "ThreeWayComparison",
    "DirectComparison",
    "ItemComparison",
    "KeyComparison",
    "KeyComparableComparison",
    "as_comparison",
    "as_comparator",
    "natural_compare",
    "TreeAdapter",
    "FunctionTreeAdapter",
]
