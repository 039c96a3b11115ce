"""Frame driven main loop."""
from __future__ import annotations

from typing import Callable, Optional


class FrameLoop:
    """Processes pending input, then renders, once per frame.

    All work happens on the calling thread. Input handling for a frame always
    completes before that frame is rendered.
    """

    def __init__(
        self,
        process_events: Callable[[], None],
        render: Callable[[], None],
        tick: Optional[Callable[[int], object]] = None,
        max_fps: int = 60,
    ) -> None:
        self.process_events = process_events
        self.render = render
        self.tick = tick
        self.max_fps = max_fps
        self.frames = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False

    def run(self, max_frames: Optional[int] = None) -> int:
        """Run until ``stop`` is called or ``max_frames`` frames were drawn."""

        self._running = True
        rendered = 0
        try:
            while self._running:
                if max_frames is not None and rendered >= max_frames:
                    break
                self.process_events()
                if not self._running:
                    break
                self.render()
                rendered += 1
                self.frames += 1
                if self.tick is not None:
                    self.tick(self.max_fps)
        finally:
            self._running = False
        return rendered


__all__ = ["FrameLoop"]
