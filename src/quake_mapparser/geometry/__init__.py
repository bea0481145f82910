"""
Brush assembly: face ordering and convex solid construction.
"""

from .brush_kernel import (
    BrushGeometry,
    BrushKernel,
    ConvexBrushKernel,
    GeometryError,
    get_kernel,
)
from .face_order import half_axis_rank, plane_order_key, sort_faces

__all__ = [
    'BrushGeometry',
    'BrushKernel',
    'ConvexBrushKernel',
    'GeometryError',
    'get_kernel',
    'half_axis_rank',
    'plane_order_key',
    'sort_faces',
]
