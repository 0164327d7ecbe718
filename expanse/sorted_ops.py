"""Binary search and sorted insertion over mutable sequences.

All operations assume the sequence is already sorted consistently with the
comparison supplied. Nothing is validated: an unsorted sequence or an
inconsistent comparison produces an unspecified result.

"Not found" is never an exception. ``binary_search`` returns the bitwise
complement of the insertion point, so ``~result`` recovers the index at
which the target would have to be inserted to keep the sequence sorted.
"""

from typing import Any, Callable, MutableSequence, Optional, Sequence

from .core.comparison import ComparisonLike, ThreeWayComparison, as_comparison

_MISSING = object()


def binary_search(seq: Sequence[Any], comparison: ComparisonLike) -> int:
    """Search a sorted sequence for an item the comparison reports as equal.

    Args:
        seq: Sorted, indexable sequence
        comparison: ThreeWayComparison, or ``fn(item) -> int`` returning a
            negative number when item sorts before the target

    Returns:
        Index of a matching item, or ``~insertion_index`` if there is none
    """
    compare = as_comparison(comparison).compare
    left = 0
    right = len(seq) - 1
    while left <= right:
        mid = left + ((right - left) >> 1)
        result = compare(seq[mid])
        if result == 0:
            return mid
        if result < 0:
            left = mid + 1
        else:
            right = mid - 1
    return ~left


def binary_search_by(seq: Sequence[Any], fn: Callable[[Any], int]) -> int:
    """Binary search with a one-argument three-way function."""
    return binary_search(seq, as_comparison(fn))


def binary_search_value(seq: Sequence[Any], value: Any, cmp: Any = None) -> int:
    """Binary search for ``value`` using ``cmp(item, value)``.

    ``cmp`` defaults to the natural ordering of the items.
    """
    return binary_search(seq, as_comparison(value=value, cmp=cmp))


def binary_search_key(
    seq: Sequence[Any],
    match: Any,
    key: Callable[[Any], Any],
    cmp: Any = None,
) -> int:
    """Binary search comparing ``key(item)`` with ``match``.

    With ``cmp`` the keys are compared as ``cmp(key(item), match)``;
    otherwise the keys' own ordering is used.
    """
    return binary_search(seq, as_comparison(value=match, key=key, cmp=cmp))


def sorted_find(seq: Sequence[Any], comparison: ComparisonLike, default: Any = None) -> Any:
    """Return the item matching ``comparison``, or ``default`` if absent.

    When several items match, which one is returned is unspecified.
    """
    idx = binary_search(seq, comparison)
    if idx < 0:
        return default
    return seq[idx]


def _comparison_for(
    item: Any,
    comparison: Optional[ComparisonLike],
    key: Optional[Callable[[Any], Any]],
    cmp: Any,
    match: Any,
) -> ThreeWayComparison:
    if comparison is not None:
        if key is not None or cmp is not None or match is not _MISSING:
            raise TypeError("comparison cannot be combined with key, cmp or match")
        return as_comparison(comparison)
    if key is not None:
        target = key(item) if match is _MISSING else match
        return as_comparison(value=target, key=key, cmp=cmp)
    if match is not _MISSING:
        raise TypeError("match requires a key function")
    return as_comparison(value=item, cmp=cmp)


def sorted_insert(
    seq: MutableSequence[Any],
    item: Any,
    comparison: Optional[ComparisonLike] = None,
    *,
    key: Optional[Callable[[Any], Any]] = None,
    cmp: Any = None,
    match: Any = _MISSING,
) -> int:
    """Insert ``item`` into a sorted sequence, keeping it sorted.

    The ordering is taken from, in order of precedence: ``comparison``
    (which must locate ``item``'s position); ``key`` (and optional ``cmp``),
    searching for ``key(item)`` or an explicit ``match``; ``cmp`` applied to
    the items themselves; the items' natural ordering.

    Duplicates are allowed. An item equal to an existing one is inserted at
    the index the search lands on, which shifts the existing item right.

    Returns:
        The index ``item`` now occupies
    """
    idx = binary_search(seq, _comparison_for(item, comparison, key, cmp, match))
    if idx < 0:
        idx = ~idx
    seq.insert(idx, item)
    return idx


def add_unique_sorted(
    seq: MutableSequence[Any],
    item: Any,
    comparison: Optional[ComparisonLike] = None,
    *,
    key: Optional[Callable[[Any], Any]] = None,
    cmp: Any = None,
    match: Any = _MISSING,
) -> bool:
    """Insert ``item`` into a sorted sequence unless an equal item exists.

    Takes the same ordering arguments as ``sorted_insert``.

    Returns:
        True if the item was inserted, False if the sequence is unchanged
    """
    idx = binary_search(seq, _comparison_for(item, comparison, key, cmp, match))
    if idx >= 0:
        return False
    seq.insert(~idx, item)
    return True
