"""Key bindings and the wraparound cursor they drive."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional

import pygame

from cubeview.math.primitives import Point2


class KeySymbol(Enum):
    """Logical keys understood by the viewer."""

    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    QUIT = "quit"
    OTHER = "other"


CURSOR_STEP = 10.0

# Left and right are mirrored on the x axis.
CURSOR_DELTAS: Dict[KeySymbol, tuple[float, float]] = {
    KeySymbol.UP: (0.0, -CURSOR_STEP),
    KeySymbol.DOWN: (0.0, CURSOR_STEP),
    KeySymbol.LEFT: (CURSOR_STEP, 0.0),
    KeySymbol.RIGHT: (-CURSOR_STEP, 0.0),
}

DEFAULT_BINDINGS = {
    "up": ["K_UP"],
    "down": ["K_DOWN"],
    "left": ["K_LEFT"],
    "right": ["K_RIGHT"],
    "quit": ["K_q"],
}


def update_cursor(
    current: Point2,
    symbol: KeySymbol,
    screen_width: float,
    screen_height: float,
) -> Point2:
    """Move ``current`` one step in the direction of ``symbol``.

    The cursor wraps around the viewport edges so the result always lies in
    ``[0, screen_width) x [0, screen_height)``. Symbols without a direction
    return ``current`` untouched.
    """

    delta = CURSOR_DELTAS.get(symbol)
    if delta is None:
        return current
    dx, dy = delta
    return Point2(
        (current.x + dx + screen_width) % screen_width,
        (current.y + dy + screen_height) % screen_height,
    )


@dataclass
class InputBindings:
    """Runtime structure representing current bindings."""

    actions: Dict[str, list[str]] = field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_BINDINGS.items()}
    )

    @classmethod
    def load(cls, path: Path) -> "InputBindings":
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            return cls()
        if not isinstance(data, dict):
            return cls()
        actions = {k: list(v) for k, v in DEFAULT_BINDINGS.items()}
        overrides = data.get("bindings", {})
        if not isinstance(overrides, dict):
            return cls(actions=actions)
        for name, keys in overrides.items():
            if name in DEFAULT_BINDINGS and isinstance(keys, list):
                actions[name] = [str(key) for key in keys]
        return cls(actions=actions)

    def save(self, path: Path) -> None:
        path.write_text(json.dumps({"bindings": self.actions}, indent=2))

    def key_codes(self) -> Dict[int, KeySymbol]:
        """Resolve bound key names to pygame key codes; unknown names are skipped."""

        codes: Dict[int, KeySymbol] = {}
        for name, keys in self.actions.items():
            try:
                symbol = KeySymbol(name)
            except ValueError:
                continue
            for key_name in keys:
                code = getattr(pygame, key_name, None)
                if isinstance(code, int):
                    codes.setdefault(code, symbol)
        return codes


class InputMapper:
    """Translates pygame key events into logical key symbols."""

    def __init__(self, bindings: Optional[InputBindings] = None) -> None:
        self.bindings = bindings or InputBindings()
        self._codes = self.bindings.key_codes()

    def translate(self, event: pygame.event.Event) -> Optional[KeySymbol]:
        if event.type == pygame.QUIT:
            return KeySymbol.QUIT
        if event.type != pygame.KEYDOWN:
            return None
        return self._codes.get(event.key, KeySymbol.OTHER)


__all__ = [
    "KeySymbol",
    "CURSOR_STEP",
    "CURSOR_DELTAS",
    "DEFAULT_BINDINGS",
    "update_cursor",
    "InputBindings",
    "InputMapper",
]
