"""High-level API for Expanse.

This module provides simple, functional interfaces for one-off ancestry
queries. These functions build a throwaway ``TreeNavigator`` from the
accessors passed in; callers making many queries against the same tree
should construct a navigator once instead.
"""

from typing import Any, Callable, List, Optional, Sequence

from .core.adapter import ParentAccessor
from .navigator import PathIntersection, TreeNavigator, common_prefix_index


def get_ancestors(
    start: Any,
    parent_of: ParentAccessor,
    stop_at: Any = None,
    include_start: bool = False,
    condition: Optional[Callable[[Any], bool]] = None,
) -> Optional[List[Any]]:
    """Root-first ancestor chain of ``start``.

    Example:
        >>> get_ancestors(leaf, lambda n: n.parent, include_start=True)
        [root, branch, leaf]

    See ``TreeNavigator.get_ancestors`` for the full semantics.
    """
    return TreeNavigator(parent_of).get_ancestors(start, stop_at, include_start, condition)


def is_descendant_of(node: Any, possible_ancestor: Any, parent_of: ParentAccessor) -> bool:
    """Check whether ``possible_ancestor`` is a strict ancestor of ``node``."""
    return TreeNavigator(parent_of).is_descendant_of(node, possible_ancestor)


def deepest_common_ancestor_index(path1: Sequence[Any], path2: Sequence[Any]) -> int:
    """Index of the deepest node shared by two root-first paths, or -1.

    Needs no accessors: the paths are compared directly.
    """
    return common_prefix_index(path1, path2)


def deepest_common_ancestor(path1: Sequence[Any], path2: Sequence[Any]) -> Optional[Any]:
    """The deepest node shared by two root-first paths, or None."""
    idx = deepest_common_ancestor_index(path1, path2)
    return path1[idx] if idx >= 0 else None


def path_intersection(
    elem1: Any,
    elem2: Any,
    parent_of: ParentAccessor,
    path1_condition: Optional[Callable[[Any], bool]] = None,
    path2_condition: Optional[Callable[[Any], bool]] = None,
) -> PathIntersection:
    """Where the root-first paths of two elements meet.

    See ``TreeNavigator.path_intersection`` for the full semantics.
    """
    return TreeNavigator(parent_of).path_intersection(elem1, elem2, path1_condition, path2_condition)
