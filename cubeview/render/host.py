"""pygame window hosting the viewer."""
from __future__ import annotations

from typing import Optional

import pygame

from cubeview.engine.input import InputMapper, KeySymbol
from cubeview.render.canvas import PygameCanvas


class PygameHost:
    """Owns the display surface and turns queued pygame events into key symbols."""

    def __init__(
        self,
        surface: pygame.Surface,
        input_mapper: Optional[InputMapper] = None,
        font: Optional[pygame.font.Font] = None,
    ) -> None:
        self.surface = surface
        self.input = input_mapper or InputMapper()
        self.canvas = PygameCanvas(surface, font)

    @classmethod
    def open(
        cls,
        resolution: tuple[int, int],
        caption: str,
        input_mapper: Optional[InputMapper] = None,
    ) -> "PygameHost":
        surface = pygame.display.set_mode(resolution)
        pygame.display.set_caption(caption)
        return cls(surface, input_mapper)

    def viewport_size(self) -> tuple[float, float]:
        width, height = self.surface.get_size()
        return float(width), float(height)

    def poll_keys(self) -> list[KeySymbol]:
        keys: list[KeySymbol] = []
        for event in pygame.event.get():
            symbol = self.input.translate(event)
            if symbol is not None:
                keys.append(symbol)
        return keys

    def present(self) -> None:
        pygame.display.flip()


__all__ = ["PygameHost"]
