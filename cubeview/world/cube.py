"""Fixed unit cube model."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from cubeview.math.primitives import Point3

CubeVertices = Tuple[Point3, Point3, Point3, Point3, Point3, Point3, Point3, Point3]
Edge = Tuple[int, int]

CUBE_VERTICES: CubeVertices = (
    Point3(-1.0, -1.0, -1.0),  # front bottom left
    Point3(1.0, -1.0, -1.0),  # front bottom right
    Point3(1.0, 1.0, -1.0),  # front top right
    Point3(-1.0, 1.0, -1.0),  # front top left
    Point3(-1.0, -1.0, 1.0),  # back bottom left
    Point3(1.0, -1.0, 1.0),  # back bottom right
    Point3(1.0, 1.0, 1.0),  # back top right
    Point3(-1.0, 1.0, 1.0),  # back top left
)

CUBE_EDGES: Tuple[Edge, ...] = (
    # front face
    (0, 1),
    (1, 2),
    (2, 3),
    (3, 0),
    # back face
    (4, 5),
    (5, 6),
    (6, 7),
    (7, 4),
    # connecting edges
    (0, 4),
    (1, 5),
    (2, 6),
    (3, 7),
)


@dataclass(frozen=True)
class Cube:
    """Eight corners of a cube centred on the origin and the twelve edges joining them."""

    vertices: CubeVertices = CUBE_VERTICES
    edges: Tuple[Edge, ...] = CUBE_EDGES

    @classmethod
    def default(cls) -> "Cube":
        return cls()


__all__ = ["Cube", "CUBE_VERTICES", "CUBE_EDGES", "Edge"]
