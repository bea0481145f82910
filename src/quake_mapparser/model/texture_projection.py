"""
Texture axis derivation for brush faces.

Standard, Hexen 2 and Quake 2 faces do not store texture axes: they are
picked from a fixed table of base axes by the face normal (the "paraxial"
projection of the original Quake tools) and then rotated.  Valve 220 faces
store both axes explicitly.
"""

from __future__ import annotations
import math
from typing import Tuple

from quake_mapparser.model.map_types import (
    ExplicitAxisProjection,
    Face,
    ImplicitAxisProjection,
)
from quake_mapparser.model.plane_math import Vec3, dot

# (plane normal, s axis, t axis)
BASE_AXES: Tuple[Tuple[Vec3, Vec3, Vec3], ...] = (
    ((0.0, 0.0, 1.0), (1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),    # floor
    ((0.0, 0.0, -1.0), (1.0, 0.0, 0.0), (0.0, -1.0, 0.0)),   # ceiling
    ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, -1.0)),    # west wall
    ((-1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, -1.0)),   # east wall
    ((0.0, 1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, -1.0)),    # south wall
    ((0.0, -1.0, 0.0), (1.0, 0.0, 0.0), (0.0, 0.0, -1.0)),   # north wall
)


def base_axes(normal: Vec3) -> Tuple[Vec3, Vec3]:
    """Return the unrotated s/t axes for a face normal.

    The first table entry with the greatest dot product wins, so exact
    diagonals prefer floor/ceiling over walls.
    """
    best_index = 0
    best_dot = 0.0
    for i, (axis_normal, _, _) in enumerate(BASE_AXES):
        d = dot(normal, axis_normal)
        if d > best_dot:
            best_dot = d
            best_index = i
    _, s_axis, t_axis = BASE_AXES[best_index]
    return s_axis, t_axis


def _rotate_axes(s_axis: Vec3, t_axis: Vec3, degrees: float) -> Tuple[Vec3, Vec3]:
    if degrees == 0.0:
        return s_axis, t_axis

    # Exact values for right angles avoid drift in the common cases
    if degrees == 90.0:
        sinv, cosv = 1.0, 0.0
    elif degrees == 180.0:
        sinv, cosv = 0.0, -1.0
    elif degrees == 270.0:
        sinv, cosv = -1.0, 0.0
    else:
        angle = math.radians(degrees)
        sinv, cosv = math.sin(angle), math.cos(angle)

    sv = next(i for i, c in enumerate(s_axis) if c != 0.0)
    tv = next(i for i, c in enumerate(t_axis) if c != 0.0)

    rotated = []
    for axis in (s_axis, t_axis):
        v = list(axis)
        ns = cosv * v[sv] - sinv * v[tv]
        nt = sinv * v[sv] + cosv * v[tv]
        v[sv] = ns
        v[tv] = nt
        rotated.append(tuple(v))
    return rotated[0], rotated[1]


def texture_axes(face: Face) -> Tuple[Vec3, Vec3]:
    """Return the (s, t) texture axes of a face, before scaling."""
    projection = face.projection
    if isinstance(projection, ExplicitAxisProjection):
        return projection.x_axis, projection.y_axis
    if isinstance(projection, ImplicitAxisProjection):
        s_axis, t_axis = base_axes(face.normal)
        return _rotate_axes(s_axis, t_axis, projection.rotation)
    raise TypeError(f"Unsupported texture projection: {type(projection).__name__}")


def texture_coordinates(face: Face, point: Vec3) -> Tuple[float, float]:
    """Project a point on the face into texel space.

    Args:
        face: Face whose projection is used
        point: World-space point (normally one of the brush vertices)

    Returns:
        (s, t) texel coordinates before division by texture size
    """
    s_axis, t_axis = texture_axes(face)
    projection = face.projection
    x_scale = projection.x_scale or 1.0
    y_scale = projection.y_scale or 1.0
    s = dot(point, s_axis) / x_scale + projection.x_offset
    t = dot(point, t_axis) / y_scale + projection.y_offset
    return s, t
