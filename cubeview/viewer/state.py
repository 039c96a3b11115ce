"""Viewer state: cursor driven orientation and the per-frame projection pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from math import pi
from typing import Optional, Tuple

from cubeview.engine.input import KeySymbol, update_cursor
from cubeview.engine.logger import ChannelLogger
from cubeview.math.primitives import Orientation, Point2, Point3
from cubeview.math.projection import is_degenerate_depth, project
from cubeview.math.rotation import rotate
from cubeview.render.camera import CameraSettings
from cubeview.render.canvas import BLACK, WHITE, DrawTarget, ViewportHost
from cubeview.world.cube import Cube, Edge

HELP_TEXT = "use the arrow keys to rotate the cube (press 'q' to quit)"
EDGE_WIDTH = 2
VERTEX_RADIUS = 5.0
HELP_TEXT_OFFSET = (10.0, 30.0)


def orientation_from_cursor(cursor: Point2, screen_width: float, screen_height: float) -> Orientation:
    """Map a cursor position to an orientation.

    Horizontal travel across the viewport sweeps pitch through half a turn and
    vertical travel sweeps roll the same way. Yaw stays at zero.
    """

    return Orientation(
        yaw=0.0,
        pitch=(cursor.x / screen_width) * pi,
        roll=(cursor.y / screen_height) * pi,
    )


@dataclass(frozen=True)
class ViewerFrame:
    """Everything needed to draw one frame."""

    orientation: Orientation
    points: Tuple[Point2, ...]
    edges: Tuple[Edge, ...]

    def segments(self) -> list[tuple[Point2, Point2]]:
        return [(self.points[start], self.points[end]) for start, end in self.edges]


class ViewerState:
    """Camera, cube, viewport size and the cursor that orients the cube."""

    def __init__(
        self,
        camera: CameraSettings,
        screen_width: float,
        screen_height: float,
        cube: Optional[Cube] = None,
        cursor: Optional[Point2] = None,
        logger: Optional[ChannelLogger] = None,
        projection_logger: Optional[ChannelLogger] = None,
    ) -> None:
        self.camera = camera
        self.screen_width = float(screen_width)
        self.screen_height = float(screen_height)
        self.cube = cube or Cube.default()
        self.cursor = cursor or Point2(self.screen_width / 2.0, self.screen_height / 2.0)
        self.logger = logger
        self.projection_logger = projection_logger

    @classmethod
    def from_host(
        cls,
        camera: CameraSettings,
        host: ViewportHost,
        logger: Optional[ChannelLogger] = None,
        projection_logger: Optional[ChannelLogger] = None,
    ) -> "ViewerState":
        width, height = host.viewport_size()
        return cls(camera, width, height, logger=logger, projection_logger=projection_logger)

    def handle_key(self, symbol: KeySymbol) -> None:
        previous = self.cursor
        self.cursor = update_cursor(previous, symbol, self.screen_width, self.screen_height)
        if self.logger and self.cursor != previous:
            self.logger.debug(
                "Cursor %s: (%.1f, %.1f) -> (%.1f, %.1f)",
                symbol.value,
                previous.x,
                previous.y,
                self.cursor.x,
                self.cursor.y,
            )

    def orientation(self) -> Orientation:
        return orientation_from_cursor(self.cursor, self.screen_width, self.screen_height)

    def _to_screen(self, vertex: Point3, orientation: Orientation) -> Point2:
        rotated = rotate(vertex, orientation)
        if self.projection_logger and is_degenerate_depth(rotated, self.camera):
            self.projection_logger.debug(
                "Vertex (%.3f, %.3f, %.3f) sits at the camera plane; using unit scale",
                rotated.x,
                rotated.y,
                rotated.z,
            )
        projected = project(rotated, self.camera)
        return projected.translated(self.screen_width / 2.0, self.screen_height / 2.0)

    def project_vertices(self, orientation: Optional[Orientation] = None) -> Tuple[Point2, ...]:
        """Screen positions of the cube vertices, in vertex order."""

        orientation = orientation or self.orientation()
        return tuple(self._to_screen(vertex, orientation) for vertex in self.cube.vertices)

    def frame(self) -> ViewerFrame:
        orientation = self.orientation()
        return ViewerFrame(
            orientation=orientation,
            points=self.project_vertices(orientation),
            edges=self.cube.edges,
        )

    def render(self, target: DrawTarget) -> ViewerFrame:
        """Draw the current frame. Failures from ``target`` propagate."""

        frame = self.frame()
        target.clear(BLACK)
        for start, end in frame.segments():
            target.draw_line(start.as_tuple(), end.as_tuple(), WHITE, EDGE_WIDTH)
        for point in frame.points:
            target.draw_circle(point.as_tuple(), VERTEX_RADIUS, WHITE)
        target.draw_text(
            HELP_TEXT,
            (HELP_TEXT_OFFSET[0], self.screen_height - HELP_TEXT_OFFSET[1]),
            WHITE,
        )
        return frame


__all__ = [
    "HELP_TEXT",
    "EDGE_WIDTH",
    "VERTEX_RADIUS",
    "orientation_from_cursor",
    "ViewerFrame",
    "ViewerState",
]
