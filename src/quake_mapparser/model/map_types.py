"""
idTech MAP scene graph.

Value types produced by the parser: documents own entities, entities own
brushes, brushes own faces.  All of them are built only after every field has
been read from the source, so a partially parsed object never exists.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

from quake_mapparser.model.plane_math import Plane, Vec3


class MapFormat(Enum):
    """The four dialects of the Quake MAP grammar.

    - QUAKE: ``TEX xoff yoff rot xscale yscale``
    - VALVE: Valve 220, explicit texture axes in brackets
    - HEXEN2: Quake layout plus one trailing legacy flag
    - QUAKE2: Quake layout plus surface contents, flags and value
    """
    UNKNOWN = "unknown"
    QUAKE = "quake"
    VALVE = "valve"
    HEXEN2 = "hexen2"
    QUAKE2 = "quake2"

    @property
    def display_name(self) -> str:
        return _FORMAT_NAMES[self]

    def __str__(self) -> str:
        return self.value


_FORMAT_NAMES = {
    MapFormat.UNKNOWN: "Unknown",
    MapFormat.QUAKE: "Standard",
    MapFormat.VALVE: "Valve",
    MapFormat.HEXEN2: "Hexen 2",
    MapFormat.QUAKE2: "Quake 2",
}


@dataclass(frozen=True)
class WorldBounds:
    """Axis-aligned validity volume handed to the geometry kernel."""
    mins: Vec3 = (-16384.0, -16384.0, -16384.0)
    maxs: Vec3 = (16384.0, 16384.0, 16384.0)

    @classmethod
    def cube(cls, half_size: float) -> "WorldBounds":
        return cls((-half_size, -half_size, -half_size), (half_size, half_size, half_size))


@dataclass(frozen=True)
class SurfaceAttributes:
    """Quake 2 per-face surface fields (zeroed for Hexen 2 faces)."""
    contents: int = 0
    flags: int = 0
    value: float = 0.0


@dataclass(frozen=True)
class ImplicitAxisProjection:
    """Texture projection whose axes are derived from the face normal."""
    x_offset: float = 0.0
    y_offset: float = 0.0
    rotation: float = 0.0
    x_scale: float = 1.0
    y_scale: float = 1.0


@dataclass(frozen=True)
class ExplicitAxisProjection:
    """Valve 220 texture projection with axes stored in the file."""
    x_axis: Vec3 = (1.0, 0.0, 0.0)
    y_axis: Vec3 = (0.0, -1.0, 0.0)
    x_offset: float = 0.0
    y_offset: float = 0.0
    rotation: float = 0.0
    x_scale: float = 1.0
    y_scale: float = 1.0


TextureProjection = Union[ImplicitAxisProjection, ExplicitAxisProjection]


@dataclass(frozen=True)
class Face:
    """
    One bounding plane of a brush.

    The three points are stored as read (after integer correction); the
    plane is derived from them.  ``surface`` is only set for Quake 2 and
    Hexen 2 documents.
    """
    points: Tuple[Vec3, Vec3, Vec3]
    plane: Plane
    texture: str
    projection: TextureProjection
    surface: Optional[SurfaceAttributes] = None
    line: int = 0

    @property
    def normal(self) -> Vec3:
        return self.plane.normal


@dataclass(frozen=True)
class Brush:
    """
    A convex solid: the intersection of the half-spaces of its faces.

    ``faces`` are in the order they were handed to the geometry kernel.
    ``geometry`` is whatever the kernel returned for them.
    """
    faces: Tuple[Face, ...]
    first_line: int = 0
    line_count: int = 0
    geometry: Any = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Entity:
    """
    An entity: key/value properties plus the brushes it owns.

    Point entities (lights, spawns) have no brushes; brush entities
    (worldspawn, doors, triggers) have at least one.
    """
    properties: Dict[str, str] = field(default_factory=dict)
    brushes: Tuple[Brush, ...] = ()
    first_line: int = 0
    line_count: int = 0

    @property
    def classname(self) -> Optional[str]:
        return self.properties.get("classname")

    def get_property(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.properties.get(key, default)


@dataclass
class Document:
    """A parsed MAP file: the detected dialect and its entities."""
    format: MapFormat = MapFormat.UNKNOWN
    entities: List[Entity] = field(default_factory=list)

    @property
    def worldspawn(self) -> Optional[Entity]:
        return next((e for e in self.entities if e.classname == "worldspawn"), None)

    @property
    def brush_count(self) -> int:
        return sum(len(e.brushes) for e in self.entities)
