"""Random selection helpers.

Expanse keeps no random number generator of its own. Every helper takes an
optional ``rng`` (a ``random.Random`` instance); when it is omitted the
standard library's module-level generator is used. Pass a seeded
``random.Random`` for reproducible picks, or one per thread if the shared
generator's locking matters.
"""

import random
from typing import Any, Callable, Iterable, Optional, Sequence


def _generator(rng: Optional[random.Random]):
    return random if rng is None else rng


def choose(items: Sequence[Any], rng: Optional[random.Random] = None) -> Any:
    """Pick one item of ``items`` uniformly at random.

    Raises:
        IndexError: If ``items`` is empty
    """
    if not items:
        raise IndexError("cannot choose from an empty sequence")
    return items[_generator(rng).randrange(len(items))]


def choose_weighted(
    seq: Iterable[Any],
    weight: Callable[[Any], float],
    total_weight: Optional[float] = None,
    rng: Optional[random.Random] = None,
) -> Any:
    """Pick one item of ``seq`` with probability proportional to ``weight(item)``.

    Weights must be non-negative; items weighing zero are never picked.

    Args:
        seq: Items to choose from
        weight: Returns the weight of an item
        total_weight: Sum of all weights, if the caller already knows it;
            saves one pass over ``seq``
        rng: Random generator to draw from

    Returns:
        The chosen item, or None if ``seq`` is empty or every weight is 0
    """
    if total_weight is None:
        seq = list(seq)
        total_weight = sum(weight(item) for item in seq)

    target = _generator(rng).random() * total_weight
    cumulative = 0.0
    for item in seq:
        cumulative += weight(item)
        if cumulative > target:
            return item
    return None
