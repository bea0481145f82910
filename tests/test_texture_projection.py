"""Tests for texture axis derivation."""

import pytest

from quake_mapparser.io.map_parser import MapParser
from quake_mapparser.model.map_types import ExplicitAxisProjection, Face, ImplicitAxisProjection
from quake_mapparser.model.plane_math import Plane
from quake_mapparser.model.texture_projection import base_axes, texture_axes, texture_coordinates

FLOOR = Plane((0.0, 0.0, 1.0), 0.0)
POINTS = ((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 0.0, 0.0))


def _floor_face(projection):
    return Face(points=POINTS, plane=FLOOR, texture="floor", projection=projection)


@pytest.mark.parametrize("normal, expected", [
    ((0.0, 0.0, 1.0), ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0))),
    ((0.0, 0.0, -1.0), ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0))),
    ((1.0, 0.0, 0.0), ((0.0, 1.0, 0.0), (0.0, 0.0, -1.0))),
    ((0.0, -1.0, 0.0), ((1.0, 0.0, 0.0), (0.0, 0.0, -1.0))),
    ((0.6, 0.0, 0.8), ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0))),
])
def test_base_axes(normal, expected):
    assert base_axes(normal) == expected


def test_diagonal_prefers_floor():
    assert base_axes((0.0, 0.70710678, 0.70710678)) == ((1.0, 0.0, 0.0), (0.0, -1.0, 0.0))


def test_right_angle_rotation_is_exact():
    s_axis, t_axis = texture_axes(_floor_face(ImplicitAxisProjection(rotation=90.0)))
    assert s_axis == (0.0, 1.0, 0.0)
    assert t_axis == (1.0, 0.0, 0.0)


def test_arbitrary_rotation():
    s_axis, _ = texture_axes(_floor_face(ImplicitAxisProjection(rotation=45.0)))
    assert s_axis == pytest.approx((0.70710678, 0.70710678, 0.0))


def test_explicit_axes_are_returned_as_stored():
    projection = ExplicitAxisProjection(x_axis=(0.0, 0.0, 1.0), y_axis=(1.0, 0.0, 0.0))
    assert texture_axes(_floor_face(projection)) == ((0.0, 0.0, 1.0), (1.0, 0.0, 0.0))


def test_texture_coordinates():
    projection = ImplicitAxisProjection(x_offset=8.0, y_offset=4.0, x_scale=2.0)
    assert texture_coordinates(_floor_face(projection), (16.0, 32.0, 0.0)) == (16.0, -28.0)


def test_zero_scale_is_treated_as_one():
    projection = ImplicitAxisProjection(x_scale=0.0, y_scale=0.0)
    assert texture_coordinates(_floor_face(projection), (16.0, 32.0, 0.0)) == (16.0, -32.0)


def test_parsed_valve_face():
    text = "( 0 0 0 ) ( 0 1 0 ) ( 1 0 0 ) TEX [ 0 1 0 16 ] [ 0 0 -1 0 ] 0 1 1"
    face, = MapParser(text).parse_faces()
    assert texture_axes(face) == ((0.0, 1.0, 0.0), (0.0, 0.0, -1.0))
    assert texture_coordinates(face, (0.0, 8.0, 0.0)) == (24.0, 0.0)


def test_unknown_projection_type():
    with pytest.raises(TypeError):
        texture_axes(_floor_face(object()))
