"""TreeAdapter abstraction for Expanse.

Expanse never owns a tree. Everything it knows about a tree comes through
two accessors: one returning a node's parent and one returning a node's
children. The TreeAdapter packages that pair so it can be wrapped (for
example by ``CachingTreeAdapter``) and handed to a ``TreeNavigator``.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Iterator, Optional, Sequence

ParentAccessor = Callable[[Any], Optional[Any]]
ChildrenAccessor = Callable[[Any], Sequence[Any]]


class TreeAdapter(ABC):
    """Abstract adapter for navigating a caller-owned tree.

    Nodes can be any object. Two nodes are the same node only if they are
    the same object; adapters must return the actual node instances, not
    copies.
    """

    @abstractmethod
    def get_parent(self, node: Any) -> Optional[Any]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent node or None if node is a root
        """
        pass

    @abstractmethod
    def get_children(self, node: Any) -> Sequence[Any]:
        """Get the ordered children of the given node.

        Args:
            node: The parent node

        Returns:
            Sequence of child nodes (empty for leaves)
        """
        pass

    def get_depth(self, node: Any) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.
        Adapters can override for more efficient implementations.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = self.get_parent(node)
        while current is not None:
            depth += 1
            current = self.get_parent(current)
        return depth

    def get_siblings(self, node: Any) -> Iterator[Any]:
        """Get siblings of the given node (excluding the node itself).

        Args:
            node: The node to get siblings for

        Returns:
            Iterator yielding sibling nodes in child order
        """
        parent = self.get_parent(node)
        if parent is None:
            return iter([])  # Root has no siblings
        return (child for child in self.get_children(parent) if child is not node)

    def accessors(self):
        """Return the ``(parent_of, children_of)`` pair for this adapter."""
        return self.get_parent, self.get_children


class FunctionTreeAdapter(TreeAdapter):
    """Adapter built from two plain callables.

    Example:
        adapter = FunctionTreeAdapter(lambda n: n.parent, lambda n: n.children)
    """

    def __init__(self, parent_of: ParentAccessor, children_of: Optional[ChildrenAccessor] = None):
        """
        Args:
            parent_of: Returns a node's parent, or None for a root
            children_of: Returns a node's children; leaves may be treated as
                having none when omitted
        """
        if not callable(parent_of):
            raise TypeError("parent_of must be callable")
        if children_of is not None and not callable(children_of):
            raise TypeError("children_of must be callable")
        self._parent_of = parent_of
        self._children_of = children_of

    def get_parent(self, node: Any) -> Optional[Any]:
        return self._parent_of(node)

    def get_children(self, node: Any) -> Sequence[Any]:
        if self._children_of is None:
            return ()
        return self._children_of(node)

    def __repr__(self) -> str:
        return f"FunctionTreeAdapter(parent_of={self._parent_of!r}, children_of={self._children_of!r})"
