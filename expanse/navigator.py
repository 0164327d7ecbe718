"""Ancestor and path-intersection navigation for caller-owned trees.

The navigator holds no tree. It is given a way to reach a node's parent and
a node's children, and answers questions about ancestry from there. Node
identity (``is``) is the only notion of equality used: two structurally
equal nodes at different places in the tree are different nodes.

Paths returned by the navigator are plain lists ordered root-first, ending
with the node the path was computed for. They are built fresh on every
call; the navigator keeps no reference to them.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Sequence

from .config import NavigatorConfig
from .core.adapter import ChildrenAccessor, FunctionTreeAdapter, ParentAccessor, TreeAdapter

logger = logging.getLogger(__name__)

Condition = Callable[[Any], bool]


def common_prefix_index(path1: Sequence[Any], path2: Sequence[Any]) -> int:
    """Last index at which two sequences hold the same object, scanning from 0.

    Stops at the first index where they differ. Returns -1 if they differ
    at index 0 or either is empty.
    """
    idx = -1
    for i in range(min(len(path1), len(path2))):
        if path1[i] is not path2[i]:
            break
        idx = i
    return idx


@dataclass(frozen=True)
class PathIntersection:
    """Where two root-first paths meet.

    Attributes:
        path1: Root-first path of the first element (None if it was None)
        path2: Root-first path of the second element (None if it was None)
        common_ancestor_index: Index of the deepest common ancestor in both
            paths, or -1 if they share no root
        first_path_met_condition: Whether path1's condition held for every
            node below the common ancestor
        second_path_met_condition: Whether path2's condition held for every
            node below the common ancestor
    """

    path1: Optional[List[Any]]
    path2: Optional[List[Any]]
    common_ancestor_index: int
    first_path_met_condition: bool = True
    second_path_met_condition: bool = True

    @property
    def has_common_ancestor(self) -> bool:
        return self.common_ancestor_index >= 0

    @property
    def common_ancestor(self) -> Optional[Any]:
        """The deepest common ancestor node, or None."""
        if self.common_ancestor_index < 0:
            return None
        return self.path1[self.common_ancestor_index]


class TreeNavigator:
    """Stateless ancestry queries over a tree reached through accessors.

    Example:
        nav = TreeNavigator(lambda n: n.parent, lambda n: n.children)
        nav.get_ancestors(leaf, include_start=True)   # [root, ..., leaf]

    Accessor exceptions propagate to the caller unchanged.
    """

    def __init__(self, parent_of: ParentAccessor, children_of: Optional[ChildrenAccessor] = None):
        """
        Args:
            parent_of: Returns a node's parent, or None for a root
            children_of: Returns a node's ordered children
        """
        self._adapter = FunctionTreeAdapter(parent_of, children_of)

    @classmethod
    def from_adapter(cls, adapter: TreeAdapter, config: Optional[NavigatorConfig] = None) -> 'TreeNavigator':
        """Create a navigator that reads the tree through ``adapter``.

        Args:
            adapter: Adapter supplying parents and children
            config: Optional configuration; when it enables caching the
                adapter is wrapped in a CachingTreeAdapter

        Returns:
            TreeNavigator bound to the (possibly wrapped) adapter
        """
        if config is not None and config.cache.enabled:
            from .adapters.caching import CachingTreeAdapter
            adapter = CachingTreeAdapter(adapter, config.cache)
        navigator = cls(*adapter.accessors())
        navigator._adapter = adapter
        logger.debug("Navigator bound to %r", adapter)
        return navigator

    @property
    def adapter(self) -> TreeAdapter:
        return self._adapter

    def get_ancestors(
        self,
        start: Any,
        stop_at: Any = None,
        include_start: bool = False,
        condition: Optional[Condition] = None,
    ) -> Optional[List[Any]]:
        """Compute the ancestor chain of ``start``, root first.

        Walks parents from ``start`` until there are none left, or until
        ``stop_at`` is reached (``stop_at`` itself is included).

        With ``condition``, every node visited (``start`` too, when included)
        must satisfy it. A single failure makes the whole call return None;
        the nodes that passed before the failure are not returned.

        Args:
            start: Node to start from
            stop_at: Optional ancestor at which to stop
            include_start: Whether ``start`` ends the returned path
            condition: Optional predicate every visited node must satisfy

        Returns:
            Root-first list of nodes, or None if ``start`` is None or
            ``condition`` failed
        """
        if start is None:
            return None

        get_parent = self._adapter.get_parent
        ancestors = []
        if include_start:
            if condition is not None and not condition(start):
                return None
            ancestors.append(start)

        current = get_parent(start)
        while current is not None:
            if condition is not None and not condition(current):
                return None
            ancestors.append(current)
            if current is stop_at:
                break
            current = get_parent(current)

        ancestors.reverse()
        return ancestors

    def is_descendant_of(self, node: Any, possible_ancestor: Any) -> bool:
        """Check whether ``possible_ancestor`` is a strict ancestor of ``node``."""
        get_parent = self._adapter.get_parent
        current = get_parent(node)
        while current is not None:
            if current is possible_ancestor:
                return True
            current = get_parent(current)
        return False

    def deepest_common_ancestor_index(self, path1: Sequence[Any], path2: Sequence[Any]) -> int:
        """Index of the last node shared by the common prefix of two paths.

        Both paths must be root-first. Only the common prefix counts: once
        the paths diverge, nodes shared further along are ignored.

        Returns:
            Index into both paths, or -1 if their roots differ
        """
        return common_prefix_index(path1, path2)

    def deepest_common_ancestor(self, path1: Sequence[Any], path2: Sequence[Any]) -> Optional[Any]:
        """The deepest node shared by two root-first paths, or None."""
        idx = self.deepest_common_ancestor_index(path1, path2)
        if idx < 0:
            return None
        return path1[idx]

    def path_intersection(
        self,
        elem1: Any,
        elem2: Any,
        path1_condition: Optional[Condition] = None,
        path2_condition: Optional[Condition] = None,
    ) -> PathIntersection:
        """Find where the paths of two elements meet and check each branch.

        Both root-first paths include their element. Below the deepest
        common ancestor each branch is checked against its own condition:
        path1 from its element upward, path2 from just under the common
        ancestor downward. Each check stops at its first failure. A missing
        condition counts as met.

        Returns:
            PathIntersection describing both paths
        """
        path1 = self.get_ancestors(elem1, include_start=True)
        path2 = self.get_ancestors(elem2, include_start=True)
        if path1 is None or path2 is None:
            common = -1
        else:
            common = common_prefix_index(path1, path2)

        first_met = True
        if path1 is not None and path1_condition is not None:
            for i in range(len(path1) - 1, common, -1):
                if not path1_condition(path1[i]):
                    first_met = False
                    break

        second_met = True
        if path2 is not None and path2_condition is not None:
            for i in range(common + 1, len(path2)):
                if not path2_condition(path2[i]):
                    second_met = False
                    break

        logger.debug(
            "Path intersection at index %d (conditions met: %s, %s)",
            common, first_met, second_met,
        )
        return PathIntersection(path1, path2, common, first_met, second_met)

    def get_depth(self, node: Any) -> int:
        """Depth of ``node`` where a root has depth 0."""
        return self._adapter.get_depth(node)

    def get_siblings(self, node: Any) -> Iterator[Any]:
        """Nodes sharing ``node``'s parent, excluding ``node`` itself."""
        return self._adapter.get_siblings(node)

    def get_children(self, node: Any) -> Sequence[Any]:
        return self._adapter.get_children(node)

    def __repr__(self) -> str:
        return f"TreeNavigator({self._adapter!r})"
