import pytest

from cubeview.engine.loop import FrameLoop


def test_events_are_processed_before_each_render() -> None:
    order: list[str] = []
    loop = FrameLoop(lambda: order.append("events"), lambda: order.append("render"))
    assert loop.run(max_frames=3) == 3
    assert order == ["events", "render"] * 3
    assert loop.frames == 3
    assert not loop.running


def test_stop_during_event_processing_skips_render() -> None:
    renders: list[int] = []

    def process_events() -> None:
        if len(renders) == 2:
            loop.stop()

    loop = FrameLoop(process_events, lambda: renders.append(1))
    assert loop.run() == 2


def test_tick_receives_frame_cap() -> None:
    ticks: list[int] = []
    loop = FrameLoop(lambda: None, lambda: None, tick=ticks.append, max_fps=30)
    loop.run(max_frames=2)
    assert ticks == [30, 30]


def test_render_errors_propagate() -> None:
    def render() -> None:
        raise RuntimeError("draw failed")

    loop = FrameLoop(lambda: None, render)
    with pytest.raises(RuntimeError, match="draw failed"):
        loop.run(max_frames=5)
    assert loop.frames == 0
    assert not loop.running
