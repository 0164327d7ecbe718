"""Expanse - helpers for sorted sequences and caller-owned trees.

Expanse adds a handful of small, well-defined algorithms on top of ordinary
Python sequences and whatever tree structure a caller already has.

Pick the part you need:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Sorted sequences:
    from expanse import binary_search, sorted_insert, add_unique_sorted

Tree ancestry:
    from expanse import TreeNavigator

List helpers, equality comparers, statistics and random picks:
    from expanse import list_ops, equality, stats, random_ops
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

import logging

__version__ = "0.3.0"

from . import list_ops
from . import equality
from . import stats
from . import random_ops
from .config import CacheConfig, CacheStrategy, ConfigurationError, NavigatorConfig
from .core import (
    ThreeWayComparison,
    DirectComparison,
    ItemComparison,
    KeyComparison,
    KeyComparableComparison,
    as_comparison,
    natural_compare,
    TreeAdapter,
    FunctionTreeAdapter,
)
from .sorted_ops import (
    binary_search,
    binary_search_by,
    binary_search_value,
    binary_search_key,
    sorted_find,
    sorted_insert,
    add_unique_sorted,
)
from .navigator import TreeNavigator, PathIntersection
from .adapters import CachingTreeAdapter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "list_ops",
    "equality",
    "stats",
    "random_ops",
    # Config
    "CacheConfig",
    "CacheStrategy",
    "ConfigurationError",
    "NavigatorConfig",
    # Core
    "ThreeWayComparison",
    "DirectComparison",
    "ItemComparison",
    "KeyComparison",
    "KeyComparableComparison",
    "as_comparison",
    "natural_compare",
    "TreeAdapter",
    "FunctionTreeAdapter",
    # Sorted sequences
    "binary_search",
    "binary_search_by",
    "binary_search_value",
    "binary_search_key",
    "sorted_find",
    "sorted_insert",
    "add_unique_sorted",
    # Trees
    "TreeNavigator",
    "PathIntersection",
    "CachingTreeAdapter",
]
