"""Perspective projection onto the view plane."""
from __future__ import annotations

from math import copysign, inf, nan, radians, tan
from typing import TYPE_CHECKING

from cubeview.math.primitives import Point2, Point3

if TYPE_CHECKING:  # pragma: no cover - typing only
    from cubeview.render.camera import CameraSettings


def half_fov_tangent(fov_angle_deg: float) -> float:
    return tan(radians(fov_angle_deg) / 2.0)


def projection_depth(point: Point3, camera: "CameraSettings") -> float:
    """Distance along the view axis from the camera to ``point``."""

    return point.z + camera.camera_dist


def is_degenerate_depth(point: Point3, camera: "CameraSettings") -> bool:
    """True when ``project`` has to fall back to an unscaled result."""

    return projection_depth(point, camera) == 0.0


def _divide(numerator: float, denominator: float) -> float:
    # Float division by zero raises in Python; yield the IEEE 754 result instead.
    if denominator == 0.0:
        if numerator == 0.0 or numerator != numerator:
            return nan
        return copysign(inf, numerator) * copysign(1.0, denominator)
    return numerator / denominator


def project(point: Point3, camera: "CameraSettings") -> Point2:
    """Project ``point`` onto the view plane centred on the origin.

    A point level with the camera has no defined perspective scale; it is
    projected with a scale of 1.0 instead. Field of view values near 0 or 180
    degrees produce very large or non-finite coordinates.
    """

    half_tan = half_fov_tangent(camera.fov_angle_deg)
    depth = projection_depth(point, camera)
    scale = camera.camera_dist / depth if depth != 0.0 else 1.0
    return Point2(_divide(point.x * scale, half_tan), _divide(point.y * scale, half_tan))


__all__ = ["half_fov_tangent", "projection_depth", "is_degenerate_depth", "project"]
