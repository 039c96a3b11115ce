"""Entry point for the wireframe cube viewer."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import pygame

from cubeview.engine.input import InputBindings, InputMapper, KeySymbol
from cubeview.engine.logger import init_logger
from cubeview.engine.loop import FrameLoop
from cubeview.render.camera import CameraSettings
from cubeview.render.host import PygameHost
from cubeview.viewer.state import ViewerState


SETTINGS_PATH = Path("settings.json")

DEFAULT_SETTINGS: Dict[str, Any] = {
    "resolution": [800, 600],
    "maxFps": 60,
    "caption": "cube",
}


def _positive_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _valid_resolution(value: object) -> bool:
    return isinstance(value, list) and len(value) == 2 and all(_positive_int(v) for v in value)


def load_settings(path: Path = SETTINGS_PATH) -> Dict[str, Any]:
    settings = dict(DEFAULT_SETTINGS)
    if not path.exists():
        return settings
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError:
        return settings
    if isinstance(data, dict):
        settings.update(data)
    if not _valid_resolution(settings["resolution"]):
        settings["resolution"] = list(DEFAULT_SETTINGS["resolution"])
    if not _positive_int(settings["maxFps"]):
        settings["maxFps"] = DEFAULT_SETTINGS["maxFps"]
    if not isinstance(settings["caption"], str):
        settings["caption"] = DEFAULT_SETTINGS["caption"]
    return settings


def main() -> None:
    settings = load_settings()
    logger = init_logger(SETTINGS_PATH)
    app_log = logger.channel("app")

    pygame.init()
    resolution = tuple(settings["resolution"])
    input_mapper = InputMapper(InputBindings.load(SETTINGS_PATH))
    host = PygameHost.open(resolution, settings["caption"], input_mapper)
    clock = pygame.time.Clock()

    camera = CameraSettings.from_settings(SETTINGS_PATH)
    state = ViewerState.from_host(
        camera,
        host,
        logger=logger.channel("input"),
        projection_logger=logger.channel("projection"),
    )
    render_log = logger.channel("render")
    app_log.info(
        "Viewport %.0fx%.0f, fov %.2f deg, camera distance %.2f",
        state.screen_width,
        state.screen_height,
        camera.fov_angle_deg,
        camera.camera_dist,
    )

    def process_events() -> None:
        for symbol in host.poll_keys():
            if symbol is KeySymbol.QUIT:
                loop.stop()
                return
            state.handle_key(symbol)

    def render() -> None:
        frame = state.render(host.canvas)
        render_log.debug(
            "Frame %d pitch=%.3f roll=%.3f", loop.frames, frame.orientation.pitch, frame.orientation.roll
        )
        host.present()

    loop = FrameLoop(
        process_events,
        render,
        tick=clock.tick,
        max_fps=settings["maxFps"],
    )

    try:
        loop.run()
    finally:
        app_log.info("Shutting down after %d frames", loop.frames)
        pygame.quit()


if __name__ == "__main__":
    main()
