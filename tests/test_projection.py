from math import isinf, isnan

import pytest

from cubeview.math.primitives import Point3
from cubeview.math.projection import (
    half_fov_tangent,
    is_degenerate_depth,
    project,
    projection_depth,
)
from cubeview.render.camera import CameraSettings

EPSILON = 1e-6


def _camera() -> CameraSettings:
    return CameraSettings(fov_angle_deg=90, camera_dist=10)


def test_origin_projects_to_origin() -> None:
    for camera in (_camera(), CameraSettings(1.0, 10.0), CameraSettings(60.0, 2.5)):
        projected = project(Point3(0.0, 0.0, 0.0), camera)
        assert abs(projected.x) < EPSILON
        assert abs(projected.y) < EPSILON


def test_point_on_target_plane_is_unscaled() -> None:
    projected = project(Point3(5.0, 3.0, 0.0), _camera())
    assert projected.x == pytest.approx(5.0, abs=EPSILON)
    assert projected.y == pytest.approx(3.0, abs=EPSILON)


def test_doubling_depth_halves_the_image() -> None:
    projected = project(Point3(5.0, 3.0, 10.0), _camera())
    assert projected.x == pytest.approx(2.5, abs=EPSILON)
    assert projected.y == pytest.approx(1.5, abs=EPSILON)


def test_point_at_camera_uses_unit_scale() -> None:
    point = Point3(1.0, 1.0, -10.0)
    assert is_degenerate_depth(point, _camera())
    projected = project(point, _camera())
    assert projected.x == pytest.approx(1.0, abs=EPSILON)
    assert projected.y == pytest.approx(1.0, abs=EPSILON)


def test_narrow_field_of_view_magnifies() -> None:
    wide = project(Point3(1.0, 0.0, 0.0), CameraSettings(90.0, 10.0))
    narrow = project(Point3(1.0, 0.0, 0.0), CameraSettings(1.0, 10.0))
    assert narrow.x > wide.x
    assert narrow.x == pytest.approx(1.0 / half_fov_tangent(1.0))


def test_depth_helpers() -> None:
    assert projection_depth(Point3(0.0, 0.0, -1.0), _camera()) == 9.0
    assert not is_degenerate_depth(Point3(0.0, 0.0, -1.0), _camera())


def test_zero_field_of_view_does_not_raise() -> None:
    projected = project(Point3(1.0, -1.0, 0.0), CameraSettings(0.0, 10.0))
    assert isinf(projected.x) and projected.x > 0
    assert isinf(projected.y) and projected.y < 0
    centre = project(Point3(0.0, 0.0, 0.0), CameraSettings(0.0, 10.0))
    assert isnan(centre.x)
