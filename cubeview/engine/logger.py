"""Viewer logging: stdlib loggers gated by per-channel switches."""
from __future__ import annotations

import json
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

DEFAULT_CHANNELS = {
    "app": True,
    "input": True,
    "projection": False,
    "render": False,
}


@dataclass
class LoggerConfig:
    """Level and channel switches read from settings.json."""

    level: int = logging.INFO
    channels: Dict[str, bool] = field(default_factory=DEFAULT_CHANNELS.copy)

    @classmethod
    def from_settings(cls, settings_path: Path) -> "LoggerConfig":
        config = cls()
        if not settings_path.exists():
            return config
        try:
            data = json.loads(settings_path.read_text())
        except json.JSONDecodeError:
            return config
        if not isinstance(data, dict):
            return config
        level = logging.getLevelName(str(data.get("logLevel", "INFO")).upper())
        if isinstance(level, int):
            config.level = level
        overrides = data.get("logChannels", {})
        if isinstance(overrides, dict):
            config.channels.update({str(k): bool(v) for k, v in overrides.items()})
        return config


class ChannelLogger:
    """Forwards to a stdlib logger while its channel is switched on."""

    def __init__(self, logger: logging.Logger, enabled: bool) -> None:
        self.logger = logger
        self.enabled = enabled

    def _emit(self, level: int, msg: str, args: tuple) -> None:
        if self.enabled:
            self.logger.log(level, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._emit(logging.DEBUG, msg, args)

    def info(self, msg: str, *args) -> None:
        self._emit(logging.INFO, msg, args)


class ViewerLogger:
    """Hands out one ``ChannelLogger`` per channel under the ``cubeview`` namespace."""

    def __init__(self, config: LoggerConfig) -> None:
        logging.basicConfig(level=config.level, format=LOG_FORMAT, stream=sys.stdout)
        self.config = config
        self._channels: Dict[str, ChannelLogger] = {}

    def channel(self, name: str) -> ChannelLogger:
        # Channels missing from the config stay off.
        if name not in self._channels:
            self._channels[name] = ChannelLogger(
                logging.getLogger(f"cubeview.{name}"),
                self.config.channels.get(name, False),
            )
        return self._channels[name]


def init_logger(settings_path: Optional[Path] = None) -> ViewerLogger:
    return ViewerLogger(LoggerConfig.from_settings(settings_path or Path("settings.json")))


__all__ = ["ViewerLogger", "LoggerConfig", "ChannelLogger", "DEFAULT_CHANNELS", "init_logger"]
