"""Plain value types shared by the geometry pipeline."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Point3:
    """Immutable point in model space."""

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))


@dataclass(frozen=True)
class Point2:
    """Immutable point on the projection plane or in screen space."""

    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    def translated(self, dx: float, dy: float) -> "Point2":
        return Point2(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class Orientation:
    """Yaw/pitch/roll angles in radians. Angles are not wrapped."""

    yaw: float = 0.0
    pitch: float = 0.0
    roll: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "yaw", float(self.yaw))
        object.__setattr__(self, "pitch", float(self.pitch))
        object.__setattr__(self, "roll", float(self.roll))

    @classmethod
    def identity(cls) -> "Orientation":
        return cls(0.0, 0.0, 0.0)


__all__ = ["Point3", "Point2", "Orientation"]
