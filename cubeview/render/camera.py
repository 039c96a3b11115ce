"""Camera configuration."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

DEFAULT_FOV_DEG = 1.0
DEFAULT_CAMERA_DIST = 10.0


def _valid_fov(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and 0.0 < value < 180.0


def _valid_distance(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0.0


@dataclass
class CameraSettings:
    """Field of view and camera distance used by the projector.

    Values are not validated here. ``fov_angle_deg`` should lie strictly
    between 0 and 180 and ``camera_dist`` should be positive.
    """

    fov_angle_deg: float = DEFAULT_FOV_DEG
    camera_dist: float = DEFAULT_CAMERA_DIST

    def __post_init__(self) -> None:
        self.fov_angle_deg = float(self.fov_angle_deg)
        self.camera_dist = float(self.camera_dist)

    @classmethod
    def from_settings(cls, settings_path: Path) -> "CameraSettings":
        if not settings_path.exists():
            return cls()
        try:
            data = json.loads(settings_path.read_text())
        except json.JSONDecodeError:
            return cls()
        if not isinstance(data, dict):
            return cls()
        fov = data.get("fovDeg", DEFAULT_FOV_DEG)
        dist = data.get("cameraDist", DEFAULT_CAMERA_DIST)
        return cls(
            fov_angle_deg=fov if _valid_fov(fov) else DEFAULT_FOV_DEG,
            camera_dist=dist if _valid_distance(dist) else DEFAULT_CAMERA_DIST,
        )


__all__ = ["CameraSettings", "DEFAULT_FOV_DEG", "DEFAULT_CAMERA_DIST"]
