"""Adapters that wrap other tree adapters."""

from .caching import CachingTreeAdapter

__all__ = [
    'CachingTreeAdapter',
]
