"""
Test suite for CachingTreeAdapter.

Verifies that:
- Repeated queries are served from the cache
- Nodes need not be hashable
- Disabled caching passes straight through
- Invalid configurations are rejected up front
"""

import pytest

from expanse import (
    CacheConfig,
    CacheStrategy,
    CachingTreeAdapter,
    ConfigurationError,
    FunctionTreeAdapter,
    NavigatorConfig,
    TreeNavigator,
)
from expanse.testing import FixtureAdapter, build_chain, build_tree


class TestCachingBehaviour:
    """Test cache hits and misses."""

    def test_second_walk_hits_cache(self):
        base = FixtureAdapter()
        nav = TreeNavigator.from_adapter(base, NavigatorConfig(cache=CacheConfig()))
        root, a, b, c = build_chain("root", "A", "B", "C")

        first = nav.get_ancestors(c, include_start=True)
        assert base.parent_calls == 4

        second = nav.get_ancestors(c, include_start=True)
        assert second == first == [root, a, b, c]
        assert base.parent_calls == 4

        stats = nav.adapter.get_cache_stats()
        assert stats['hits'] == 4
        assert stats['misses'] == 4
        assert stats['hit_rate'] == 0.5
        assert stats['parent_entries'] == 4

    def test_overlapping_paths_share_entries(self):
        base = FixtureAdapter()
        cached = CachingTreeAdapter(base)
        nodes = build_tree({"root": {"x": {"x1": None, "x2": None}}})
        nav = TreeNavigator.from_adapter(cached)

        nav.get_ancestors(nodes["x1"])
        calls_after_first = base.parent_calls
        nav.get_ancestors(nodes["x2"])
        # Only x2 -> x is new; x and root were already resolved
        assert base.parent_calls == calls_after_first + 1

    def test_children_cached_and_materialised(self):
        calls = []

        def children_of(node):
            calls.append(node)
            return iter(node.children)

        nodes = build_tree({"root": {"a": None, "b": None}})
        cached = CachingTreeAdapter(FunctionTreeAdapter(lambda n: n.parent, children_of))

        assert list(cached.get_children(nodes["root"])) == [nodes["a"], nodes["b"]]
        assert list(cached.get_children(nodes["root"])) == [nodes["a"], nodes["b"]]
        assert len(calls) == 1

    def test_unhashable_nodes(self):
        root = {"name": "root", "parent": None}
        child = {"name": "child", "parent": root}
        leaf = {"name": "leaf", "parent": child}
        cached = CachingTreeAdapter(FunctionTreeAdapter(lambda n: n["parent"]))
        nav = TreeNavigator.from_adapter(cached)

        path = nav.get_ancestors(leaf, include_start=True)
        assert [n["name"] for n in path] == ["root", "child", "leaf"]
        assert nav.get_ancestors(leaf, include_start=True) == path

    def test_clear_cache(self):
        base = FixtureAdapter()
        cached = CachingTreeAdapter(base)
        _, leaf = build_chain("root", "leaf")

        cached.get_parent(leaf)
        cached.clear_cache()
        cached.get_parent(leaf)
        assert base.parent_calls == 2
        assert cached.get_cache_stats()['misses'] == 2

    def test_lru_eviction(self):
        base = FixtureAdapter()
        cached = CachingTreeAdapter(base, CacheConfig(max_size=2))
        chain = build_chain("a", "b", "c", "d")

        for node in chain:
            cached.get_parent(node)
        assert cached.get_cache_stats()['parent_entries'] == 2

    def test_ttl_strategy(self):
        cached = CachingTreeAdapter(FixtureAdapter(), CacheConfig.short_lived(ttl_seconds=60))
        _, leaf = build_chain("root", "leaf")
        cached.get_parent(leaf)
        cached.get_parent(leaf)
        assert cached.get_cache_stats()['hits'] == 1
        assert cached.get_cache_stats()['strategy'] == 'ttl'


class TestPassThrough:
    """Disabled caching reaches the base adapter every time."""

    def test_disabled_config_wraps_nothing(self):
        base = FixtureAdapter()
        nav = TreeNavigator.from_adapter(base, NavigatorConfig(cache=CacheConfig.disabled()))
        assert nav.adapter is base

    def test_disabled_adapter_passes_through(self):
        base = FixtureAdapter()
        cached = CachingTreeAdapter(base, CacheConfig(strategy=CacheStrategy.NONE))
        _, leaf = build_chain("root", "leaf")

        cached.get_parent(leaf)
        cached.get_parent(leaf)
        assert base.parent_calls == 2
        assert cached.get_cache_stats()['hits'] == 0
        assert cached.get_cache_stats()['parent_entries'] == 0

    def test_base_adapter_accessible(self):
        base = FixtureAdapter()
        assert CachingTreeAdapter(base).get_base_adapter() is base


class TestConfigurationErrors:
    """Invalid cache configurations fail when the adapter is built."""

    def test_ttl_without_ttl_seconds(self):
        with pytest.raises(ConfigurationError, match="ttl_seconds required"):
            CachingTreeAdapter(FixtureAdapter(), CacheConfig(strategy=CacheStrategy.TTL))

    def test_navigator_rejects_bad_cache(self):
        with pytest.raises(ConfigurationError):
            TreeNavigator.from_adapter(FixtureAdapter(), NavigatorConfig(cache=CacheConfig(max_size=0)))
