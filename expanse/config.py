"""Configuration system for Expanse.

Most of the library is stateless and needs no configuration. The one place
where callers make a real choice is whether tree accessor results should be
memoised, and how aggressively.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class ConfigurationError(ValueError):
    """Raised when an invalid configuration is handed to a component."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class CacheStrategy(Enum):
    """How accessor results are cached by ``CachingTreeAdapter``."""
    NONE = "none"   # Pass straight through to the wrapped adapter
    LRU = "lru"     # Bounded, least-recently-used eviction
    TTL = "ttl"     # Bounded, entries also expire after ttl_seconds


@dataclass
class CacheConfig:
    """Configuration for accessor caching."""

    strategy: CacheStrategy = CacheStrategy.LRU
    max_size: int = 10000                 # Entries per cache (parents, children)
    ttl_seconds: Optional[float] = None   # Required for TTL

    @classmethod
    def disabled(cls) -> 'CacheConfig':
        """Create config that performs no caching."""
        return cls(strategy=CacheStrategy.NONE)

    @classmethod
    def short_lived(cls, ttl_seconds: float = 300.0, max_size: int = 10000) -> 'CacheConfig':
        """Create config for trees that change underneath the caller.

        Args:
            ttl_seconds: How long an entry stays valid (default 5 minutes)
            max_size: Maximum number of entries per cache

        Returns:
            CacheConfig using the TTL strategy
        """
        return cls(strategy=CacheStrategy.TTL, max_size=max_size, ttl_seconds=ttl_seconds)

    @property
    def enabled(self) -> bool:
        return self.strategy is not CacheStrategy.NONE

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not isinstance(self.strategy, CacheStrategy):
            errors.append(f"unknown cache strategy: {self.strategy!r}")
            return errors

        if self.enabled and self.max_size <= 0:
            errors.append("max_size must be positive")

        if self.strategy is CacheStrategy.TTL:
            if self.ttl_seconds is None:
                errors.append("ttl_seconds required when strategy is TTL")
            elif self.ttl_seconds <= 0:
                errors.append("ttl_seconds must be positive")

        return errors

    def ensure_valid(self) -> None:
        """Raise ConfigurationError if validate() reports problems."""
        errors = self.validate()
        if errors:
            raise ConfigurationError(errors)


@dataclass
class NavigatorConfig:
    """Complete configuration for a TreeNavigator built from an adapter."""

    cache: CacheConfig = field(default_factory=CacheConfig.disabled)

    def validate(self) -> List[str]:
        return [f"cache: {error}" for error in self.cache.validate()]
