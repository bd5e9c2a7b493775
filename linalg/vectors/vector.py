"""Core vector construction, predicates and elementwise arithmetic.

Vectors are plain sequences of numbers. Every function that builds a new
vector returns a ``list`` of ``float``.
"""

import math
from collections.abc import Sequence

Number = int | float
Vector = list[float]

ORIGIN_3D: tuple[float, float, float] = (0.0, 0.0, 0.0)
UNIT_X: tuple[float, float, float] = (1.0, 0.0, 0.0)
UNIT_Y: tuple[float, float, float] = (0.0, 1.0, 0.0)
UNIT_Z: tuple[float, float, float] = (0.0, 0.0, 1.0)

_UNIT_TOLERANCE = 1e-10
_ALMOST_EQUAL_TOLERANCE = 1e-6


def _require_same_length(a: Sequence[Number], b: Sequence[Number]) -> None:
    if len(a) != len(b):
        raise ValueError("vectors must have the same dimension")


def standard_basis(dim: int) -> list[Vector]:
    """Return the standard basis vectors of a ``dim``-dimensional space."""
    if dim <= 0:
        raise ValueError("dimension must be positive")
    return [[1.0 if i == j else 0.0 for j in range(dim)] for i in range(dim)]


def standard_basis_vector(axis: int, dim: int) -> Vector:
    """Return the unit vector along ``axis`` in a ``dim``-dimensional space."""
    if dim <= 0:
        raise ValueError("dimension must be positive")
    if not 0 <= axis < dim:
        raise IndexError(f"axis {axis} out of bounds for dimension {dim}")
    result = [0.0] * dim
    result[axis] = 1.0
    return result


def new_vector(values: Sequence[Number]) -> Vector:
    """Return a new float vector holding a copy of ``values``."""
    return [float(x) for x in values]


def zeros(size: int) -> Vector:
    """Return a zero vector of ``size`` components; empty for non-positive sizes."""
    if size <= 0:
        return []
    return [0.0] * size


def is_zero(v: Sequence[Number]) -> bool:
    """Return True if every component is zero (an empty vector counts as zero)."""
    return all(x == 0 for x in v)


def is_unit(v: Sequence[Number]) -> bool:
    """Return True if the magnitude of ``v`` is 1 within a small tolerance."""
    return abs(magnitude(v) - 1.0) < _UNIT_TOLERANCE


def is_orthogonal(a: Sequence[Number], b: Sequence[Number]) -> bool:
    """Return True if the dot product of ``a`` and ``b`` is effectively zero."""
    try:
        product = dot(a, b)
    except ValueError as exc:
        raise ValueError(f"checking orthogonality: {exc}") from exc
    return abs(product) < _UNIT_TOLERANCE


def is_parallel(a: Sequence[Number], b: Sequence[Number]) -> bool:
    """Return True if ``a`` and ``b`` point in the same or opposite directions."""
    if is_zero(a) or is_zero(b):
        raise ValueError("zero vectors have no defined direction")
    if len(a) != len(b):
        raise ValueError(
            f"vectors must have same dimension: got {len(a)} and {len(b)}"
        )
    product = dot(normalize(a), normalize(b))
    return abs(abs(product) - 1.0) < _UNIT_TOLERANCE


def almost_equal(a: Sequence[Number], b: Sequence[Number]) -> bool:
    """Return True if all components of ``a`` and ``b`` differ by at most 1e-6."""
    _require_same_length(a, b)
    return all(
        abs(float(x) - float(y)) <= _ALMOST_EQUAL_TOLERANCE for x, y in zip(a, b)
    )


def magnitude(v: Sequence[Number]) -> float:
    """Return the Euclidean length of ``v``."""
    return math.sqrt(sum(float(x) * float(x) for x in v))


def dot(a: Sequence[Number], b: Sequence[Number]) -> float:
    """Return the dot product of two non-empty vectors of equal length."""
    _require_same_length(a, b)
    if not a:
        raise ValueError("vectors cannot be empty")
    return sum((float(x) * float(y) for x, y in zip(a, b)), 0.0)


def scale(scalar: Number, v: Sequence[Number]) -> Vector:
    """Return ``v`` with every component multiplied by ``scalar``."""
    factor = float(scalar)
    return [factor * float(x) for x in v]


def normalize(v: Sequence[Number]) -> Vector:
    """Return the unit vector pointing in the direction of ``v``."""
    if is_zero(v):
        raise ValueError("cannot normalize zero vector")
    length = magnitude(v)
    if length == 0:
        raise ValueError("cannot normalize zero vector")
    return [float(x) / length for x in v]


def add(a: Sequence[Number], b: Sequence[Number]) -> Vector:
    """Return the componentwise sum of ``a`` and ``b``."""
    _require_same_length(a, b)
    return [float(x) + float(y) for x, y in zip(a, b)]


def subtract(a: Sequence[Number], b: Sequence[Number]) -> Vector:
    """Return the componentwise difference ``a - b``."""
    _require_same_length(a, b)
    return [float(x) - float(y) for x, y in zip(a, b)]


def negate(v: Sequence[Number]) -> Vector:
    """Return the additive inverse of ``v``."""
    return scale(-1, v)