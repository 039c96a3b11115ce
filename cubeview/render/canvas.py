"""Drawing surfaces the viewer renders into."""
from __future__ import annotations

from typing import Optional, Protocol

import pygame

from cubeview.engine.input import KeySymbol

Color = tuple[int, int, int]
PointLike = tuple[float, float]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)


class DrawTarget(Protocol):
    """Minimal set of primitives needed to draw a frame."""

    def clear(self, color: Color) -> None:
        ...

    def draw_line(self, start: PointLike, end: PointLike, color: Color, width: int) -> None:
        ...

    def draw_circle(self, center: PointLike, radius: float, color: Color) -> None:
        ...

    def draw_text(self, text: str, position: PointLike, color: Color) -> None:
        ...


class ViewportHost(Protocol):
    """Window side services: viewport size and pending key presses."""

    def viewport_size(self) -> tuple[float, float]:
        ...

    def poll_keys(self) -> list[KeySymbol]:
        ...


class PygameCanvas:
    """``DrawTarget`` backed by a pygame surface.

    Errors raised by pygame are not caught.
    """

    def __init__(self, surface: pygame.Surface, font: Optional[pygame.font.Font] = None) -> None:
        self.surface = surface
        self._font = font

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.SysFont("consolas", 16)
        return self._font

    def clear(self, color: Color) -> None:
        self.surface.fill(color)

    def draw_line(self, start: PointLike, end: PointLike, color: Color, width: int) -> None:
        pygame.draw.line(self.surface, color, start, end, width)

    def draw_circle(self, center: PointLike, radius: float, color: Color) -> None:
        pygame.draw.circle(self.surface, color, center, radius)

    def draw_text(self, text: str, position: PointLike, color: Color) -> None:
        rendered = self.font.render(text, True, color)
        self.surface.blit(rendered, position)


__all__ = ["Color", "BLACK", "WHITE", "DrawTarget", "ViewportHost", "PygameCanvas"]
