"""
Caching adapter implementation for Expanse.

Provides a transparent caching layer that can wrap any tree adapter whose
accessors are expensive (database lookups, remote calls, deep attribute
chains). Repeated ancestry queries over the same region of a tree then hit
the cache instead of the underlying accessors.
"""

import logging
from typing import Any, Optional, Sequence

from cachetools import LRUCache, TTLCache

from ..config import CacheConfig, CacheStrategy
from ..core.adapter import TreeAdapter

logger = logging.getLogger(__name__)

_MISSING = object()


def _make_cache(config: CacheConfig):
    if config.strategy is CacheStrategy.TTL:
        return TTLCache(maxsize=config.max_size, ttl=config.ttl_seconds)
    return LRUCache(maxsize=config.max_size)


class CachingTreeAdapter(TreeAdapter):
    """
    Optional caching layer for any tree adapter.

    Parents and children are cached separately. Entries are keyed by node
    identity, so nodes do not need to be hashable; each entry also pins
    its node so that identity cannot be reused while the entry is alive.

    The wrapped accessors are assumed to be free of side effects. If the
    tree changes, call ``clear_cache()`` (or use a TTL config).

    Example:
        base = FunctionTreeAdapter(lookup_parent, lookup_children)
        cached = CachingTreeAdapter(base, CacheConfig(max_size=50000))
        nav = TreeNavigator.from_adapter(cached)
    """

    def __init__(self, base_adapter: TreeAdapter, config: Optional[CacheConfig] = None):
        """
        Initialize caching adapter.

        Args:
            base_adapter: The underlying tree adapter to wrap
            config: Cache configuration (defaults to an LRU cache)

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.config = config or CacheConfig()
        self.config.ensure_valid()
        self._adapter = base_adapter
        self._parents = _make_cache(self.config) if self.config.enabled else None
        self._children = _make_cache(self.config) if self.config.enabled else None

        # Statistics
        self.cache_hits = 0
        self.cache_misses = 0

    def _lookup(self, cache, node: Any, fetch) -> Any:
        if cache is None:
            return fetch(node)

        entry = cache.get(id(node), _MISSING)
        if entry is not _MISSING and entry[0] is node:
            self.cache_hits += 1
            return entry[1]

        self.cache_misses += 1
        value = fetch(node)
        cache[id(node)] = (node, value)
        return value

    def get_parent(self, node: Any) -> Optional[Any]:
        return self._lookup(self._parents, node, self._adapter.get_parent)

    def get_children(self, node: Any) -> Sequence[Any]:
        # Materialise so that lazy iterables can be replayed from the cache
        return self._lookup(self._children, node, lambda n: tuple(self._adapter.get_children(n)))

    def clear_cache(self) -> None:
        """Drop every cached entry; statistics are kept."""
        if self._parents is not None:
            self._parents.clear()
            self._children.clear()
        logger.debug("Cleared accessor caches for %r", self._adapter)

    def get_cache_stats(self) -> dict:
        """
        Get cache statistics.

        Returns:
            Dictionary with hit/miss counts, hit rate and current sizes
        """
        total = self.cache_hits + self.cache_misses
        return {
            'hits': self.cache_hits,
            'misses': self.cache_misses,
            'hit_rate': self.cache_hits / total if total else 0.0,
            'parent_entries': len(self._parents) if self._parents is not None else 0,
            'children_entries': len(self._children) if self._children is not None else 0,
            'strategy': self.config.strategy.value,
        }

    def get_base_adapter(self) -> TreeAdapter:
        return self._adapter

    def __repr__(self) -> str:
        return f"CachingTreeAdapter({self._adapter!r}, strategy={self.config.strategy.value})"
