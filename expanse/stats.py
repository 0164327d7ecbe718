"""Order statistics over numeric sequences."""

import math
from typing import Iterable, Sequence


def percentile(sorted_data: Sequence[float], p: float) -> float:
    """Interpolated ``p``-th percentile of ascending ``sorted_data``.

    The rank is ``p / 100 * (n - 1) + 1`` (1-based); values between two
    ranks are linearly interpolated.

    Edge cases:
        - empty data gives 0.0
        - a single value is returned as-is for any ``p``
        - ``p >= 100`` gives the largest value, ``p <= 0`` the smallest

    Args:
        sorted_data: Values in ascending order (not checked)
        p: Percentile in the range 0-100

    Returns:
        The percentile value
    """
    count = len(sorted_data)
    if count == 0:
        return 0.0
    if count == 1:
        return sorted_data[0]
    if p >= 100.0:
        return sorted_data[-1]
    if p <= 0.0:
        return sorted_data[0]

    rank = p / 100.0 * (count - 1) + 1.0
    lower = math.floor(rank)
    left = sorted_data[lower - 1]
    right = sorted_data[lower]
    if left == right:
        return left
    return left + (rank - lower) * (right - left)


def median(seq: Iterable[float], is_presorted: bool = False) -> float:
    """Median of ``seq``.

    Args:
        seq: Numbers; consumed once
        is_presorted: Whether ``seq`` is an ascending sequence that can be
            indexed as-is. Otherwise a sorted copy is made.

    Raises:
        ValueError: If ``seq`` is empty
    """
    if is_presorted and isinstance(seq, Sequence):
        data = seq
    elif is_presorted:
        data = list(seq)
    else:
        data = sorted(seq)

    count = len(data)
    if count == 0:
        raise ValueError("Cannot compute median for an empty set.")

    mid = count // 2
    if count % 2 == 0:
        return (data[mid - 1] + data[mid]) / 2
    return data[mid]
