"""
Deterministic face ordering for brush assembly.

Later geometric operations break numerical ties by face order, so faces are
put into the order legacy tools produce before a brush is built.  The order
is defined by the principal half-axis each plane normal is closest to:

    +X -> 0, -X -> 1, +Y -> 2, -Y -> 3, +Z -> 4, -Z -> 5

The dominant axis is the component with the largest absolute value; equal
magnitudes resolve to x before y before z.
"""

from __future__ import annotations
from typing import List, Sequence, Tuple

from quake_mapparser.model.map_types import Face
from quake_mapparser.model.plane_math import Plane, Vec3


def half_axis_rank(normal: Vec3) -> int:
    """Return the rank (0-5) of the half-axis closest to ``normal``."""
    axis = 0
    for i in (1, 2):
        if abs(normal[i]) > abs(normal[axis]):
            axis = i
    return axis * 2 + (1 if normal[axis] < 0.0 else 0)


def plane_weight(plane: Plane) -> int:
    return half_axis_rank(plane.normal)


def plane_order_key(plane: Plane) -> Tuple[int, float, float, float, float]:
    """Total order: half-axis rank, then distance, then normal components."""
    nx, ny, nz = plane.normal
    return (half_axis_rank(plane.normal), plane.dist, nx, ny, nz)


def sort_faces(faces: Sequence[Face]) -> List[Face]:
    """Order faces for the geometry kernel.

    Two stable passes: by half-axis rank, then by the full plane key.  The
    second pass alone gives the same result for distinct planes; the first is
    kept so faces with identical planes stay in the order the first pass
    leaves them.
    """
    by_weight = sorted(faces, key=lambda face: plane_weight(face.plane))
    return sorted(by_weight, key=lambda face: plane_order_key(face.plane))
