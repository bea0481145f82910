"""Shared fixtures: MAP text builders and a recording geometry kernel."""

from __future__ import annotations

from typing import List, Sequence

import numpy as np
import pytest

from map_text import make_box_faces, make_brush, make_entity, make_face
from quake_mapparser.geometry.brush_kernel import BrushGeometry, BrushKernel
from quake_mapparser.model.map_types import Face, WorldBounds


@pytest.fixture
def box_faces():
    return make_box_faces


@pytest.fixture
def brush_text():
    return make_brush


@pytest.fixture
def entity_text():
    return make_entity


@pytest.fixture
def face_text():
    return make_face


class RecordingKernel(BrushKernel):
    """Accepts every brush and records what it was asked to build."""

    def __init__(self):
        self.calls: List[tuple] = []

    def build(self, world_bounds: WorldBounds, faces: Sequence[Face]) -> BrushGeometry:
        self.calls.append((world_bounds, list(faces)))
        return BrushGeometry(vertices=np.zeros((0, 3)))


@pytest.fixture
def recording_kernel():
    return RecordingKernel()
