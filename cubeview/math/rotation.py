"""Euler rotation helpers."""
from __future__ import annotations

from math import cos, sin
from typing import Tuple

from cubeview.math.primitives import Orientation, Point3

Matrix3 = Tuple[Tuple[float, float, float], Tuple[float, float, float], Tuple[float, float, float]]


def roll_matrix(theta: float) -> Matrix3:
    """Rotation about the x axis."""

    c = cos(theta)
    s = sin(theta)
    return (
        (1.0, 0.0, 0.0),
        (0.0, c, -s),
        (0.0, s, c),
    )


def pitch_matrix(theta: float) -> Matrix3:
    """Rotation about the y axis."""

    c = cos(theta)
    s = sin(theta)
    return (
        (c, 0.0, s),
        (0.0, 1.0, 0.0),
        (-s, 0.0, c),
    )


def yaw_matrix(theta: float) -> Matrix3:
    """Rotation about the z axis."""

    c = cos(theta)
    s = sin(theta)
    return (
        (c, -s, 0.0),
        (s, c, 0.0),
        (0.0, 0.0, 1.0),
    )


def _apply(matrix: Matrix3, point: Point3) -> Point3:
    r0, r1, r2 = matrix
    return Point3(
        r0[0] * point.x + r0[1] * point.y + r0[2] * point.z,
        r1[0] * point.x + r1[1] * point.y + r1[2] * point.z,
        r2[0] * point.x + r2[1] * point.y + r2[2] * point.z,
    )


def rotate(point: Point3, orientation: Orientation) -> Point3:
    """Rotate ``point`` by ``orientation``.

    Roll is applied first, then pitch, then yaw. The order is fixed; changing
    it changes every projected frame.
    """

    rolled = _apply(roll_matrix(orientation.roll), point)
    pitched = _apply(pitch_matrix(orientation.pitch), rolled)
    return _apply(yaw_matrix(orientation.yaw), pitched)


__all__ = ["Matrix3", "roll_matrix", "pitch_matrix", "yaw_matrix", "rotate"]
