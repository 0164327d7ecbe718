"""Small helpers over indexable sequences.

These work on anything supporting ``len()`` and integer indexing, and the
mutating helpers on anything with ``append``.
"""

from typing import Any, Callable, Iterable, Iterator, List, MutableSequence, Optional, Sequence

from .equality import DefaultEqualityComparer, allow_nulls, as_equality

Predicate = Callable[[Any], bool]


def first_index(seq: Sequence[Any], match: Predicate) -> int:
    """Index of the first item satisfying ``match``, or -1."""
    for i in range(len(seq)):
        if match(seq[i]):
            return i
    return -1


def reverse_iter(seq: Sequence[Any]) -> Iterator[Any]:
    """Yield the items of ``seq`` from last to first, by index."""
    for i in range(len(seq) - 1, -1, -1):
        yield seq[i]


def skip(seq: Sequence[Any], count: int) -> Iterator[Any]:
    """Yield the items of ``seq`` after the first ``count``."""
    for i in range(max(count, 0), len(seq)):
        yield seq[i]


def take_range(seq: Sequence[Any], start: int, count: int) -> Iterator[Any]:
    """Yield ``count`` items of ``seq`` starting at ``start``."""
    for i in range(start, start + count):
        yield seq[i]


def last(seq: Sequence[Any], predicate: Optional[Predicate] = None) -> Any:
    """Last item of ``seq`` (satisfying ``predicate``, when given).

    Raises:
        ValueError: If the sequence is empty or nothing matches
    """
    for i in range(len(seq) - 1, -1, -1):
        item = seq[i]
        if predicate is None or predicate(item):
            return item
    if predicate is None:
        raise ValueError("last() called on an empty sequence")
    raise ValueError("no element satisfies the predicate")


def last_or_default(seq: Sequence[Any], predicate: Optional[Predicate] = None, default: Any = None) -> Any:
    """Like ``last`` but returns ``default`` instead of raising."""
    for i in range(len(seq) - 1, -1, -1):
        item = seq[i]
        if predicate is None or predicate(item):
            return item
    return default


def add_unique(seq: MutableSequence[Any], item: Any, equality: Any = None) -> bool:
    """Append ``item`` unless an equal item is already present.

    Args:
        seq: Sequence to append to
        item: Item to add
        equality: EqualityComparer or ``fn(x, y) -> bool``; defaults to ``==``

    Returns:
        True if the item was appended
    """
    comparer = as_equality(equality)
    for existing in seq:
        if comparer.equals(existing, item):
            return False
    seq.append(item)
    return True


def add_range(seq: MutableSequence[Any], *ranges: Iterable[Any]) -> None:
    """Append every item of every iterable in ``ranges``, in order."""
    for items in ranges:
        for item in items:
            seq.append(item)


def split(
    seq: Sequence[Any],
    separator: Any,
    ignore_empty: bool = False,
    start: int = 0,
    end: Optional[int] = None,
) -> Iterator[List[Any]]:
    """Split ``seq[start:end]`` into lists at each ``separator``.

    ``None`` is a valid separator and matches ``None`` items. Separators
    are never part of the yielded chunks. Runs of separators (and a leading
    separator) produce empty chunks unless ``ignore_empty`` is set.
    """
    if end is None:
        end = len(seq)
    eq = allow_nulls(DefaultEqualityComparer())
    chunk_start = start
    for i in range(start, end):
        if eq.equals(seq[i], separator):
            if not ignore_empty or i != chunk_start:
                yield [seq[j] for j in range(chunk_start, i)]
            chunk_start = i + 1
    if chunk_start < end:
        yield [seq[j] for j in range(chunk_start, end)]
