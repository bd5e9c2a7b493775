"""Geometric operations on vectors: products, angles, projections and rotations."""

import math
from collections.abc import Sequence

from linalg.vectors.vector import (
    Number,
    Vector,
    add,
    dot,
    is_unit,
    is_zero,
    magnitude,
    normalize,
    scale,
    subtract,
)


def _require_3d(*vectors: Sequence[Number], message: str) -> None:
    if any(len(v) != 3 for v in vectors):
        raise ValueError(message)


def cross(a: Sequence[Number], b: Sequence[Number]) -> Vector:
    """Return the cross product ``a x b`` of two 3D vectors."""
    _require_3d(a, b, message="cross product is only defined for 3D vectors")
    a0, a1, a2 = (float(x) for x in a)
    b0, b1, b2 = (float(x) for x in b)
    return [
        a1 * b2 - a2 * b1,
        a2 * b0 - a0 * b2,
        a0 * b1 - a1 * b0,
    ]


def _angle_cosine(a: Sequence[Number], b: Sequence[Number]) -> float:
    if len(a) != len(b):
        raise ValueError("vectors must have same dimension")
    if not a:
        raise ValueError("vectors cannot be empty")
    if is_zero(a) or is_zero(b):
        raise ValueError("cannot compute angle with zero vector")
    cosine = dot(a, b) / (magnitude(a) * magnitude(b))
    # Rounding can push the value just outside the domain of acos.
    return max(-1.0, min(1.0, cosine))


def angle(a: Sequence[Number], b: Sequence[Number]) -> float:
    """Return the angle between ``a`` and ``b`` in radians, in [0, pi]."""
    return math.acos(_angle_cosine(a, b))


def angle_deg(a: Sequence[Number], b: Sequence[Number]) -> float:
    """Return the angle between ``a`` and ``b`` in degrees, in [0, 180]."""
    return 180 * math.acos(_angle_cosine(a, b)) / math.pi


def scalar_product(
    a: Sequence[Number], b: Sequence[Number], c: Sequence[Number]
) -> float:
    """Return the scalar triple product ``a . (b x c)``."""
    _require_3d(a, b, c, message="scalar triple product requires three 3D vectors")
    return dot(a, cross(b, c))


def vector_product(
    a: Sequence[Number], b: Sequence[Number], c: Sequence[Number]
) -> Vector:
    """Return the vector triple product ``a x (b x c)``."""
    _require_3d(a, b, c, message="vector triple product requires three 3D vectors")
    dot_ac = dot(a, c)
    dot_ab = dot(a, b)
    return subtract(scale(dot_ac, b), scale(dot_ab, c))


def project(a: Sequence[Number], b: Sequence[Number]) -> Vector:
    """Return the projection of ``a`` onto ``b``."""
    if len(a) != len(b):
        raise ValueError("vectors must have the same dimension")
    if not a:
        raise ValueError("vectors cannot be empty")
    if is_zero(b):
        raise ValueError("cannot project onto zero vector")
    b_mag_sq = sum(float(x) * float(x) for x in b)
    factor = dot(a, b) / b_mag_sq
    return [factor * float(x) for x in b]


def reflect(v: Sequence[Number], n: Sequence[Number]) -> Vector:
    """Reflect ``v`` across the normal ``n`` using ``v - 2(v.n)n``."""
    product = dot(v, n)
    return subtract(v, scale(2 * product, n))


def rotate_2d(v: Sequence[Number], angle: float) -> Vector:
    """Rotate a 2D vector counterclockwise by ``angle`` radians."""
    if len(v) != 2:
        raise ValueError("vector must be 2D")
    sin, cos = math.sin(angle), math.cos(angle)
    x, y = float(v[0]), float(v[1])
    return [cos * x - sin * y, sin * x + cos * y]


def rotate_3d(v: Sequence[Number], axis: Sequence[Number], angle: float) -> Vector:
    """Rotate a 3D vector about a unit ``axis`` by ``angle`` radians."""
    _require_3d(v, axis, message="both vectors must be 3D")
    if not is_unit(axis):
        raise ValueError("axis must be a unit vector")
    cos, sin = math.cos(angle), math.sin(angle)
    term1 = scale(cos, v)
    term2 = scale(sin, cross(axis, v))
    term3 = scale(dot(axis, v) * (1 - cos), axis)
    return add(add(term1, term2), term3)


def direction_cosines(v: Sequence[Number]) -> tuple[float, float, float]:
    """Return the cosines of the angles between ``v`` and the x, y and z axes."""
    if len(v) != 3:
        raise ValueError("direction cosines are only defined for 3D vectors")
    if is_zero(v):
        raise ValueError("cannot calculate direction cosines for zero vector")
    l, m, n = normalize(v)
    return l, m, n