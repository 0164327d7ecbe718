"""Three-way comparison abstraction for Expanse.

Every sorted-sequence operation is written against a single interface,
``ThreeWayComparison``, which compares one item of the sequence against an
implicit target. The different ways callers like to describe an ordering
(a one-argument function, a two-argument comparator plus a search value, a
key extractor plus comparator, or a key extractor relying on the keys' own
ordering) are thin adapters over that interface.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Union

Comparator = Callable[[Any, Any], int]

_MISSING = object()


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the operands' own ordering.

    Returns:
        -1 if a < b, 1 if a > b, 0 otherwise
    """
    return (a > b) - (a < b)


def as_comparator(cmp: Any) -> Comparator:
    """Normalise a comparator argument to a plain two-argument function.

    Accepts either a callable ``cmp(a, b) -> int`` or a comparer object
    exposing ``compare(a, b)``. ``None`` selects ``natural_compare``.

    Raises:
        TypeError: If cmp is neither
    """
    if cmp is None:
        return natural_compare
    compare = getattr(cmp, 'compare', None)
    if callable(compare):
        return compare
    if callable(cmp):
        return cmp
    raise TypeError(f"comparator must be callable or expose compare(), got {type(cmp).__name__}")


class ThreeWayComparison(ABC):
    """Compares a sequence item against an implicit target.

    ``compare(item)`` must return a negative number when ``item`` sorts
    before the target, zero when it matches and a positive number when it
    sorts after. Implementations must be consistent with the order of the
    sequence being searched; this is never checked.
    """

    @abstractmethod
    def compare(self, item: Any) -> int:
        pass

    def __call__(self, item: Any) -> int:
        return self.compare(item)


class DirectComparison(ThreeWayComparison):
    """Wraps a function ``fn(item) -> int`` that already knows the target."""

    def __init__(self, fn: Callable[[Any], int]):
        self.fn = fn

    def compare(self, item: Any) -> int:
        return self.fn(item)

    def __repr__(self) -> str:
        return f"DirectComparison({self.fn!r})"


class ItemComparison(ThreeWayComparison):
    """Compares items against an explicit search value with ``cmp(item, value)``."""

    def __init__(self, search_value: Any, cmp: Any = None):
        self.search_value = search_value
        self.cmp = as_comparator(cmp)

    def compare(self, item: Any) -> int:
        return self.cmp(item, self.search_value)

    def __repr__(self) -> str:
        return f"ItemComparison({self.search_value!r})"


class KeyComparison(ThreeWayComparison):
    """Compares ``key(item)`` against ``match`` with an explicit key comparator."""

    def __init__(self, match: Any, key: Callable[[Any], Any], cmp: Any):
        self.match = match
        self.key = key
        self.cmp = as_comparator(cmp)

    def compare(self, item: Any) -> int:
        return self.cmp(self.key(item), self.match)

    def __repr__(self) -> str:
        return f"KeyComparison({self.match!r})"


class KeyComparableComparison(ThreeWayComparison):
    """Compares ``key(item)`` against ``match`` using the keys' own ordering."""

    def __init__(self, match: Any, key: Callable[[Any], Any]):
        self.match = match
        self.key = key

    def compare(self, item: Any) -> int:
        return natural_compare(self.key(item), self.match)

    def __repr__(self) -> str:
        return f"KeyComparableComparison({self.match!r})"


ComparisonLike = Union[ThreeWayComparison, Callable[[Any], int]]


def as_comparison(
    comparison: Optional[ComparisonLike] = None,
    *,
    value: Any = _MISSING,
    key: Optional[Callable[[Any], Any]] = None,
    cmp: Any = None,
) -> ThreeWayComparison:
    """Build a ThreeWayComparison from any supported calling convention.

    Exactly one of ``comparison`` or ``value`` must be given:

    - ``comparison``: an existing ThreeWayComparison, or ``fn(item) -> int``
    - ``value`` alone (optionally with ``cmp``): ``cmp(item, value)``
    - ``value`` with ``key`` and ``cmp``: ``cmp(key(item), value)``
    - ``value`` with ``key``: natural ordering of ``key(item)`` vs ``value``

    Raises:
        TypeError: On missing or conflicting arguments
    """
    if comparison is not None:
        if value is not _MISSING or key is not None or cmp is not None:
            raise TypeError("comparison cannot be combined with value, key or cmp")
        if isinstance(comparison, ThreeWayComparison):
            return comparison
        if callable(comparison):
            return DirectComparison(comparison)
        raise TypeError(f"comparison must be callable, got {type(comparison).__name__}")

    if value is _MISSING:
        raise TypeError("either a comparison or a search value is required")

    if key is None:
        return ItemComparison(value, cmp)
    if cmp is not None:
        return KeyComparison(value, key, cmp)
    return KeyComparableComparison(value, key)
