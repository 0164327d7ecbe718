"""Equality comparers.

An equality comparer decides whether two objects are equal and hashes them
consistently with that decision. They are used by ``list_ops`` wherever a
caller wants "equal" to mean something other than ``==``.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class EqualityComparer(ABC):
    """Base class for equality comparers."""

    @abstractmethod
    def equals(self, x: Any, y: Any) -> bool:
        pass

    @abstractmethod
    def hash(self, obj: Any) -> int:
        pass

    def __call__(self, x: Any, y: Any) -> bool:
        return self.equals(x, y)


class DefaultEqualityComparer(EqualityComparer):
    """Uses the objects' own ``==`` and ``hash``."""

    def equals(self, x: Any, y: Any) -> bool:
        return x == y

    def hash(self, obj: Any) -> int:
        return hash(obj)


class IdentityEqualityComparer(EqualityComparer):
    """Objects are equal only if they are the same object."""

    def equals(self, x: Any, y: Any) -> bool:
        return x is y

    def hash(self, obj: Any) -> int:
        return id(obj)


class FunctionalEqualityComparer(EqualityComparer):
    """Compares items by the result of applying ``key`` to each.

    Example:
        by_name = FunctionalEqualityComparer(lambda p: p.name.lower())
        by_name.equals(alice, ALICE)   # True
    """

    def __init__(self, key: Callable[[Any], Any], key_comparer: Optional[EqualityComparer] = None):
        self.key = key
        self.key_comparer = key_comparer or DefaultEqualityComparer()

    def equals(self, x: Any, y: Any) -> bool:
        return self.key_comparer.equals(self.key(x), self.key(y))

    def hash(self, obj: Any) -> int:
        return self.key_comparer.hash(self.key(obj))


class NullHandlingEqualityComparer(EqualityComparer):
    """Wraps another comparer so that None never reaches it.

    None equals only None and hashes to 0.
    """

    def __init__(self, inner: EqualityComparer):
        self.inner = inner

    def equals(self, x: Any, y: Any) -> bool:
        if x is None:
            return y is None
        if y is None:
            return False
        return self.inner.equals(x, y)

    def hash(self, obj: Any) -> int:
        if obj is None:
            return 0
        return self.inner.hash(obj)


class _CallableEqualityComparer(EqualityComparer):
    # Two-argument predicates cannot hash consistently, so every object
    # lands in the same bucket.
    def __init__(self, fn: Callable[[Any, Any], bool]):
        self.fn = fn

    def equals(self, x: Any, y: Any) -> bool:
        return bool(self.fn(x, y))

    def hash(self, obj: Any) -> int:
        return 0


def allow_nulls(comparer: EqualityComparer) -> EqualityComparer:
    """Return ``comparer`` wrapped so that it tolerates None operands."""
    if isinstance(comparer, NullHandlingEqualityComparer):
        return comparer
    return NullHandlingEqualityComparer(comparer)


def as_equality(equality: Any = None) -> EqualityComparer:
    """Normalise an equality argument.

    Accepts None (default ``==``), an EqualityComparer, or a two-argument
    predicate ``fn(x, y) -> bool``.
    """
    if equality is None:
        return DefaultEqualityComparer()
    if isinstance(equality, EqualityComparer):
        return equality
    if callable(equality):
        return _CallableEqualityComparer(equality)
    raise TypeError(f"equality must be an EqualityComparer or callable, got {type(equality).__name__}")
