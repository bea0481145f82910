"""
Geometry kernels that turn a brush's face planes into a convex solid.

The parser only needs to know whether a set of planes bounds a valid finite
region; a kernel either returns the solid's geometry or raises
GeometryError.  ``ConvexBrushKernel`` computes the vertices with numpy by
intersecting plane triples, clipped to the caller's world bounds.
"""

from __future__ import annotations
import itertools
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np

from quake_mapparser.model.map_types import Face, WorldBounds
from quake_mapparser.model.plane_math import Vec3

logger = logging.getLogger(__name__)

MIN_FACE_COUNT = 4


class GeometryError(Exception):
    """Raised when a set of planes does not bound a valid finite region."""


@dataclass
class BrushGeometry:
    """Vertices and bounds of a successfully built brush."""
    vertices: np.ndarray = field(repr=False)
    mins: Vec3 = (0.0, 0.0, 0.0)
    maxs: Vec3 = (0.0, 0.0, 0.0)

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)


class BrushKernel(ABC):
    """Abstract base for brush geometry kernels."""

    @abstractmethod
    def build(self, world_bounds: WorldBounds, faces: Sequence[Face]) -> BrushGeometry:
        """Build the convex solid bounded by ``faces``.

        Raises:
            GeometryError: If the planes are inconsistent or degenerate
        """
        ...


class ConvexBrushKernel(BrushKernel):
    """Vertex enumeration over all plane triples.

    A candidate vertex is kept if it lies inside every face half-space and
    inside the world bounds.  A brush whose solid reaches the world bounds is
    rejected: either a face is missing and the brush is open, or it really
    extends past the volume the caller allows.
    """

    def __init__(self, epsilon: float = 1e-3):
        self.epsilon = epsilon

    def build(self, world_bounds: WorldBounds, faces: Sequence[Face]) -> BrushGeometry:
        if len(faces) < MIN_FACE_COUNT:
            raise GeometryError(
                f"Brush has only {len(faces)} faces, at least {MIN_FACE_COUNT} required"
            )

        face_normals = np.array([face.plane.normal for face in faces], dtype=float)
        face_dists = np.array([face.plane.dist for face in faces], dtype=float)
        bound_normals, bound_dists = _bound_planes(world_bounds)

        normals = np.vstack([face_normals, bound_normals])
        dists = np.concatenate([face_dists, bound_dists])

        points = []
        for triple in itertools.combinations(range(len(normals)), 3):
            index = list(triple)
            matrix = normals[index]
            if abs(np.linalg.det(matrix)) < 1e-9:
                continue
            point = np.linalg.solve(matrix, dists[index])
            if np.all(normals @ point - dists <= self.epsilon):
                points.append(point)

        if not points:
            raise GeometryError("Brush is empty")

        # +0.0 folds negative zeros so unique() merges them
        vertices = np.unique(np.round(np.array(points), 6) + 0.0, axis=0)
        if len(vertices) < 4 or np.linalg.matrix_rank(vertices - vertices[0], tol=self.epsilon) < 3:
            raise GeometryError("Brush has no volume")

        distances_to_bounds = np.abs(vertices @ bound_normals.T - bound_dists)
        if np.any(distances_to_bounds <= self.epsilon):
            raise GeometryError("Brush is not closed or exceeds the world bounds")

        mins = tuple(float(c) for c in vertices.min(axis=0))
        maxs = tuple(float(c) for c in vertices.max(axis=0))
        logger.debug("Built brush with %d vertices, bounds %s - %s", len(vertices), mins, maxs)
        return BrushGeometry(vertices=vertices, mins=mins, maxs=maxs)


def _bound_planes(world_bounds: WorldBounds):
    """Outward facing planes of the world bounds box."""
    normals = np.array([
        (1.0, 0.0, 0.0), (-1.0, 0.0, 0.0),
        (0.0, 1.0, 0.0), (0.0, -1.0, 0.0),
        (0.0, 0.0, 1.0), (0.0, 0.0, -1.0),
    ])
    mins, maxs = world_bounds.mins, world_bounds.maxs
    dists = np.array([maxs[0], -mins[0], maxs[1], -mins[1], maxs[2], -mins[2]], dtype=float)
    return normals, dists


# ---------------------------------------------------------------
# Factory
# ---------------------------------------------------------------

_KERNELS = {
    "convex": ConvexBrushKernel,
}


def get_kernel(name: str, **kwargs) -> BrushKernel:
    """Return a kernel instance for the given name.

    Raises ValueError for unknown kernels.
    """
    cls = _KERNELS.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown brush kernel '{name}'. Available: {list(_KERNELS)}")
    return cls(**kwargs)
