"""Conversions between Cartesian, polar, spherical and cylindrical coordinates."""

import math
from collections.abc import Sequence

from linalg.vectors.vector import Number, Vector

_ZERO_RADIUS = 1e-10


def cartesian_to_polar(v: Sequence[Number]) -> tuple[float, float]:
    """Return ``(r, theta)`` for a 2D Cartesian vector, with theta in [-pi, pi]."""
    if len(v) != 2:
        raise ValueError("vector must be 2D")
    x, y = float(v[0]), float(v[1])
    return math.sqrt(x * x + y * y), math.atan2(y, x)


def polar_to_cartesian(r: float, theta: float) -> Vector:
    """Return the 2D Cartesian vector for radius ``r`` and angle ``theta``."""
    if r < 0:
        raise ValueError("radius must be non-negative")
    return [r * math.cos(theta), r * math.sin(theta)]


def cartesian_to_spherical(v: Sequence[Number]) -> tuple[float, float, float]:
    """Return ``(rho, theta, phi)`` for a 3D Cartesian vector.

    ``theta`` is the azimuth in the x-y plane and ``phi`` the angle from the
    positive z axis. The zero vector maps to ``(0, 0, 0)``.
    """
    if len(v) != 3:
        raise ValueError("vector must be 3D")
    x, y, z = (float(c) for c in v)
    rho = math.sqrt(x * x + y * y + z * z)
    if rho < _ZERO_RADIUS:
        return 0.0, 0.0, 0.0
    return rho, math.atan2(y, x), math.acos(z / rho)


def spherical_to_cartesian(rho: float, theta: float, phi: float) -> Vector:
    """Return the 3D Cartesian vector for spherical coordinates."""
    if rho < 0:
        raise ValueError("radius must be non-negative")
    sin_phi = math.sin(phi)
    return [
        rho * sin_phi * math.cos(theta),
        rho * sin_phi * math.sin(theta),
        rho * math.cos(phi),
    ]


def cartesian_to_cylindrical(v: Sequence[Number]) -> tuple[float, float, float]:
    """Return ``(r, theta, z)`` for a 3D Cartesian vector."""
    if len(v) != 3:
        raise ValueError("vector must be 3D")
    x, y, z = (float(c) for c in v)
    return math.sqrt(x * x + y * y), math.atan2(y, x), z


def cylindrical_to_cartesian(r: float, theta: float, z: float) -> Vector:
    """Return the 3D Cartesian vector for cylindrical coordinates."""
    if r < 0:
        raise ValueError("radial distance must be non-negative")
    return [r * math.cos(theta), r * math.sin(theta), float(z)]