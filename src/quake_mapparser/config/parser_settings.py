"""
ParserSettings dataclass: tunables shared by every parse call.

Defaults match what TrenchBroom-era editors write, so most callers never
need to touch them.
"""

from __future__ import annotations
from dataclasses import dataclass, field

from quake_mapparser.model.map_types import WorldBounds

DEFAULT_EMPTY_TEXTURE = "__TB_empty"


@dataclass
class ParserSettings:
    """
    Settings for MapParser.

    Attributes:
        world_bounds: Validity volume used when a parse call does not pass one
        empty_texture_name: Texture name that stands for "no texture"
        correct_epsilon: Point components this close to an integer are snapped
        kernel: Name of the brush geometry kernel (see ``geometry.get_kernel``)
        kernel_epsilon: Plane distance tolerance of the kernel
    """

    world_bounds: WorldBounds = field(default_factory=WorldBounds)
    empty_texture_name: str = DEFAULT_EMPTY_TEXTURE
    correct_epsilon: float = 0.001
    kernel: str = "convex"
    kernel_epsilon: float = 1e-3
