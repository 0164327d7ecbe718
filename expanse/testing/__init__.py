"""Testing utilities for Expanse consumers."""

from .fixtures import FixtureNode, FixtureAdapter, build_tree, build_chain

__all__ = ['FixtureNode', 'FixtureAdapter', 'build_tree', 'build_chain']
