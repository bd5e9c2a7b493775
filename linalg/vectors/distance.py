"""Distance metrics between vectors of equal length."""

import math
from collections.abc import Iterator, Sequence

from linalg.vectors.vector import Number


def _abs_differences(a: Sequence[Number], b: Sequence[Number]) -> Iterator[float]:
    if len(a) != len(b):
        raise ValueError("vectors must have the same dimension")
    return (abs(float(x) - float(y)) for x, y in zip(a, b))


def euclidean_distance(a: Sequence[Number], b: Sequence[Number]) -> float:
    """Return the straight-line (L2) distance between ``a`` and ``b``."""
    return math.sqrt(sum(d * d for d in _abs_differences(a, b)))


def manhattan_distance(a: Sequence[Number], b: Sequence[Number]) -> float:
    """Return the sum of absolute differences (L1 distance)."""
    return sum(_abs_differences(a, b), 0.0)


def chebyshev_distance(a: Sequence[Number], b: Sequence[Number]) -> float:
    """Return the largest absolute difference (L-infinity distance)."""
    return max(_abs_differences(a, b), default=0.0)