"""Runtime settings loaded from settings.json."""
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

DEFAULT_FIELD_SIZE = (200, 120)
DEFAULT_PIXEL_SCALE = 8
DEFAULT_MAX_FPS = 120


@dataclass
class GameSettings:
    """Display and session options for a run of the game."""

    field_size: tuple[int, int] = DEFAULT_FIELD_SIZE
    pixel_scale: int = DEFAULT_PIXEL_SCALE
    max_fps: int = DEFAULT_MAX_FPS
    seed: Optional[int] = None

    @property
    def width(self) -> int:
        return self.field_size[0]

    @property
    def height(self) -> int:
        return self.field_size[1]

    @property
    def window_size(self) -> tuple[int, int]:
        return (self.width * self.pixel_scale, self.height * self.pixel_scale)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSettings":
        size = data.get("fieldSize", DEFAULT_FIELD_SIZE)
        width, height = int(size[0]), int(size[1])
        if width <= 0 or height <= 0:
            width, height = DEFAULT_FIELD_SIZE
        seed = data.get("seed")
        return cls(
            field_size=(width, height),
            pixel_scale=max(1, int(data.get("pixelScale", DEFAULT_PIXEL_SCALE))),
            max_fps=max(1, int(data.get("maxFps", DEFAULT_MAX_FPS))),
            seed=None if seed is None else int(seed),
        )

    @classmethod
    def load(cls, path: Path) -> "GameSettings":
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            return cls()
        return cls.from_dict(data)


__all__ = ["GameSettings", "DEFAULT_FIELD_SIZE", "DEFAULT_PIXEL_SCALE", "DEFAULT_MAX_FPS"]
