"""Test fixtures for Expanse consumers.

These fixtures provide small in-memory trees and instrumented adapters so
that code built on ``TreeNavigator`` can be tested without a real tree
backend.
"""

from typing import Any, Dict, List, Optional

from ..core.adapter import TreeAdapter


class FixtureNode:
    """Minimal tree node with explicit parent and children links.

    Equality is identity, matching how the navigator treats nodes.
    """

    __slots__ = ("name", "parent", "children")

    def __init__(self, name: str, parent: Optional["FixtureNode"] = None):
        self.name = name
        self.parent = parent
        self.children: List["FixtureNode"] = []
        if parent is not None:
            parent.children.append(self)

    def __repr__(self) -> str:
        return f"FixtureNode({self.name!r})"


def build_tree(layout: Dict[str, Any], parent: Optional[FixtureNode] = None) -> Dict[str, FixtureNode]:
    """Build a tree of FixtureNodes from a nested dict.

    Keys are node names; values are dicts of children (or None for leaves).
    Names must be unique across the whole layout.

    Example:
        nodes = build_tree({"root": {"a": {"b": None}, "c": None}})
        nodes["b"].parent is nodes["a"]   # True

    Returns:
        Mapping of name to node
    """
    nodes: Dict[str, FixtureNode] = {}
    for name, children in layout.items():
        if name in nodes:
            raise ValueError(f"duplicate node name: {name}")
        node = FixtureNode(name, parent)
        nodes[name] = node
        if children:
            for child_name, child in build_tree(children, node).items():
                if child_name in nodes:
                    raise ValueError(f"duplicate node name: {child_name}")
                nodes[child_name] = child
    return nodes


def build_chain(*names: str) -> List[FixtureNode]:
    """Build a single root-to-leaf chain; returns the nodes root-first."""
    chain: List[FixtureNode] = []
    parent = None
    for name in names:
        parent = FixtureNode(name, parent)
        chain.append(parent)
    return chain


class FixtureAdapter(TreeAdapter):
    """Adapter over FixtureNodes that counts accessor calls.

    Useful for asserting how many times a wrapped adapter (for example a
    CachingTreeAdapter) actually reached the underlying tree.
    """

    def __init__(self):
        self.parent_calls = 0
        self.children_calls = 0

    def get_parent(self, node: FixtureNode) -> Optional[FixtureNode]:
        self.parent_calls += 1
        return node.parent

    def get_children(self, node: FixtureNode) -> List[FixtureNode]:
        self.children_calls += 1
        return node.children

    def reset_counts(self) -> None:
        self.parent_calls = 0
        self.children_calls = 0
