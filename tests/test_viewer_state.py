from math import pi

import pygame
import pytest

from cubeview.engine.input import KeySymbol
from cubeview.math.primitives import Orientation, Point2
from cubeview.render.camera import CameraSettings
from cubeview.render.canvas import BLACK, WHITE
from cubeview.viewer.state import (
    EDGE_WIDTH,
    HELP_TEXT,
    VERTEX_RADIUS,
    ViewerState,
    orientation_from_cursor,
)


class _RecordingTarget:
    def __init__(self) -> None:
        self.calls: list[tuple] = []

    def clear(self, color) -> None:
        self.calls.append(("clear", color))

    def draw_line(self, start, end, color, width) -> None:
        self.calls.append(("line", start, end, color, width))

    def draw_circle(self, center, radius, color) -> None:
        self.calls.append(("circle", center, radius, color))

    def draw_text(self, text, position, color) -> None:
        self.calls.append(("text", text, position, color))


class _FailingTarget(_RecordingTarget):
    def draw_circle(self, center, radius, color) -> None:
        raise pygame.error("out of video memory")


class _StubHost:
    def viewport_size(self) -> tuple[float, float]:
        return (640.0, 480.0)

    def poll_keys(self) -> list[KeySymbol]:
        return []


class _StubLogger:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def debug(self, msg: str, *args, **kwargs) -> None:
        self.messages.append(msg % args)


def _make_state(**kwargs) -> ViewerState:
    camera = kwargs.pop("camera", CameraSettings(fov_angle_deg=90, camera_dist=10))
    return ViewerState(camera, 800.0, 600.0, **kwargs)


def test_cursor_starts_at_viewport_centre() -> None:
    state = _make_state()
    assert state.cursor == Point2(400.0, 300.0)


def test_from_host_queries_viewport() -> None:
    state = ViewerState.from_host(CameraSettings(), _StubHost())
    assert (state.screen_width, state.screen_height) == (640.0, 480.0)
    assert state.cursor == Point2(320.0, 240.0)


def test_orientation_from_cursor_pins_yaw() -> None:
    orientation = orientation_from_cursor(Point2(200.0, 450.0), 800.0, 600.0)
    assert orientation.yaw == 0.0
    assert orientation.pitch == pytest.approx(pi / 4.0)
    assert orientation.roll == pytest.approx(3.0 * pi / 4.0)


def test_orientation_follows_cursor() -> None:
    state = _make_state(cursor=Point2(0.0, 0.0))
    assert state.orientation() == Orientation(0.0, 0.0, 0.0)
    state.handle_key(KeySymbol.UP)
    assert state.orientation().roll == pytest.approx(590.0 / 600.0 * pi)


def test_identity_orientation_projects_cube_around_centre() -> None:
    state = _make_state(cursor=Point2(0.0, 0.0))
    points = state.project_vertices()
    assert len(points) == 8
    # Front face (z = -1) sits at depth 9, back face at depth 11.
    assert points[0].x == pytest.approx(400.0 - 10.0 / 9.0)
    assert points[0].y == pytest.approx(300.0 - 10.0 / 9.0)
    assert points[6].x == pytest.approx(400.0 + 10.0 / 11.0)
    assert points[6].y == pytest.approx(300.0 + 10.0 / 11.0)


def test_centred_cursor_gives_quarter_turns() -> None:
    state = _make_state()
    frame = state.frame()
    assert frame.orientation.pitch == pytest.approx(pi / 2.0)
    assert frame.orientation.roll == pytest.approx(pi / 2.0)
    # (-1, -1, -1) rolls to (-1, 1, -1) then pitches to (-1, 1, 1).
    assert frame.points[0].x == pytest.approx(400.0 - 10.0 / 11.0)
    assert frame.points[0].y == pytest.approx(300.0 + 10.0 / 11.0)


def test_frame_is_repeatable() -> None:
    state = _make_state(cursor=Point2(123.0, 456.0))
    first = state.frame()
    second = state.frame()
    assert first == second
    assert first.points == state.project_vertices()


def test_frame_segments_follow_edge_list() -> None:
    frame = _make_state().frame()
    segments = frame.segments()
    assert len(segments) == 12
    for (start, end), (a, b) in zip(frame.edges, segments):
        assert a == frame.points[start]
        assert b == frame.points[end]


def test_handle_key_ignores_other_keys() -> None:
    state = _make_state()
    before = state.frame()
    state.handle_key(KeySymbol.OTHER)
    assert state.frame() == before


def test_handle_key_logs_cursor_moves() -> None:
    logger = _StubLogger()
    state = _make_state(logger=logger)
    state.handle_key(KeySymbol.LEFT)
    state.handle_key(KeySymbol.OTHER)
    assert logger.messages == ["Cursor left: (400.0, 300.0) -> (410.0, 300.0)"]


def test_render_issues_draw_requests_in_order() -> None:
    state = _make_state()
    target = _RecordingTarget()
    frame = state.render(target)

    assert target.calls[0] == ("clear", BLACK)
    lines = target.calls[1:13]
    circles = target.calls[13:21]
    text = target.calls[21:]
    assert all(call[0] == "line" for call in lines)
    assert all(call[0] == "circle" for call in circles)
    assert len(text) == 1

    for call, (start, end) in zip(lines, frame.edges):
        assert call[1] == frame.points[start].as_tuple()
        assert call[2] == frame.points[end].as_tuple()
        assert call[3:] == (WHITE, EDGE_WIDTH)
    for call, point in zip(circles, frame.points):
        assert call[1:] == (point.as_tuple(), VERTEX_RADIUS, WHITE)
    assert text[0] == ("text", HELP_TEXT, (10.0, 570.0), WHITE)


def test_render_propagates_draw_failures() -> None:
    state = _make_state()
    target = _FailingTarget()
    with pytest.raises(pygame.error):
        state.render(target)
    assert [call[0] for call in target.calls].count("line") == 12
    assert not any(call[0] == "text" for call in target.calls)


def test_degenerate_depth_is_logged_but_not_fatal() -> None:
    logger = _StubLogger()
    state = _make_state(
        camera=CameraSettings(fov_angle_deg=90, camera_dist=1),
        cursor=Point2(0.0, 0.0),
        projection_logger=logger,
    )
    points = state.project_vertices()
    # Front face corners sit on the camera plane and fall back to unit scale.
    assert points[0] == Point2(399.0, 299.0)
    assert len(logger.messages) == 4
