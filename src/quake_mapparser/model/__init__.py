"""
Scene graph and plane geometry for parsed MAP documents.
"""

from .map_types import (
    MapFormat,
    WorldBounds,
    SurfaceAttributes,
    ImplicitAxisProjection,
    ExplicitAxisProjection,
    TextureProjection,
    Face,
    Brush,
    Entity,
    Document,
)
from .plane_math import Plane, Vec3
from .texture_projection import texture_axes, texture_coordinates

__all__ = [
    'MapFormat',
    'WorldBounds',
    'SurfaceAttributes',
    'ImplicitAxisProjection',
    'ExplicitAxisProjection',
    'TextureProjection',
    'Face',
    'Brush',
    'Entity',
    'Document',
    'Plane',
    'Vec3',
    'texture_axes',
    'texture_coordinates',
]
