"""
Plane geometry for idTech brush faces.

A face plane is stored as normal vector + distance from origin and is derived
from the three ordered points written in the MAP file.  The solid side of a
face is the half-space where ``dot(normal, p) <= dist``.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Tuple

Vec3 = Tuple[float, float, float]

EPSILON = 1e-6

# Points closer than this to an integer coordinate are snapped to it
CORRECT_EPSILON = 0.001


def cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def length(v: Vec3) -> float:
    return math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])


def normalize(v: Vec3) -> Vec3:
    """Return ``v`` scaled to unit length, or the null vector if ``v`` is null."""
    ln = length(v)
    if ln < EPSILON:
        return (0.0, 0.0, 0.0)
    return (v[0] / ln, v[1] / ln, v[2] / ln)


def is_null(v: Vec3) -> bool:
    return length(v) < EPSILON


def corrected(v: Vec3, epsilon: float = CORRECT_EPSILON) -> Vec3:
    """Snap components that are within ``epsilon`` of an integer.

    Editors often write coordinates like ``63.99999`` after rotations; the
    snapped value keeps integer brushes integer.
    """
    return tuple(_correct(c, epsilon) for c in v)


def _correct(c: float, epsilon: float) -> float:
    rounded = float(round(c))
    if abs(c - rounded) < epsilon:
        return rounded
    return c


@dataclass(frozen=True)
class Plane:
    """An oriented plane ``dot(normal, p) = dist``.

    The normal points out of the brush the face belongs to.
    """

    normal: Vec3 = (0.0, 0.0, 1.0)
    dist: float = 0.0

    @classmethod
    def from_three_points(cls, p1: Vec3, p2: Vec3, p3: Vec3) -> Optional["Plane"]:
        """Compute plane from three points (winding order matters).

        Returns None when the points are collinear or coincide; legacy
        editors write such faces and they are dropped rather than rejected.
        """
        normal = cross(sub(p3, p1), sub(p2, p1))
        if is_null(normal):
            return None
        normal = normalize(normal)
        return cls(normal=normal, dist=dot(normal, p1))

    def point_status(self, point: Vec3, epsilon: float = EPSILON) -> int:
        """Return 1 if point is in front of the plane, -1 if behind, 0 if on it."""
        d = dot(self.normal, point) - self.dist
        if d > epsilon:
            return 1
        if d < -epsilon:
            return -1
        return 0
