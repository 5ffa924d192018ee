"""Keyboard bindings and edge-triggered action state."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

import pygame

from asteroids.engine.logger import ChannelLogger

DEFAULT_BINDINGS = {
    "rotate_left": ["K_LEFT"],
    "rotate_right": ["K_RIGHT"],
    "thrust": ["K_UP"],
    "fire": ["K_SPACE"],
    "quit": ["K_ESCAPE"],
}


def resolve_key(name: str) -> int:
    """Map a binding name such as ``K_SPACE`` to its pygame key code."""

    code = getattr(pygame, name, None)
    if not name.startswith("K_") or not isinstance(code, int):
        raise ValueError(f"Unknown key binding '{name}'")
    return code


@dataclass(frozen=True)
class ShipControls:
    """Snapshot of the player's controls for a single frame."""

    rotate_left: bool = False
    rotate_right: bool = False
    thrust: bool = False
    fire_released: bool = False


@dataclass
class InputBindings:
    """Runtime structure representing current bindings."""

    actions: Dict[str, list[str]] = field(default_factory=lambda: DEFAULT_BINDINGS.copy())

    @classmethod
    def load(cls, path: Path) -> "InputBindings":
        if not path.exists():
            return cls()
        try:
            data = json.loads(path.read_text())
        except json.JSONDecodeError:
            return cls()
        actions = DEFAULT_BINDINGS.copy()
        actions.update({k: list(v) for k, v in data.get("bindings", {}).items()})
        return cls(actions=actions)

    def key_map(self) -> Dict[int, list[str]]:
        """Return a key code -> actions lookup, validating every binding."""

        mapping: Dict[int, list[str]] = {}
        for action, keys in self.actions.items():
            for key in keys:
                mapping.setdefault(resolve_key(key), []).append(action)
        return mapping


class InputMapper:
    """Tracks held keys and release edges for the simulation."""

    def __init__(
        self,
        bindings: Optional[InputBindings] = None,
        logger: Optional[ChannelLogger] = None,
    ) -> None:
        self.bindings = bindings or InputBindings()
        self._key_map = self.bindings.key_map()
        self._logger = logger
        self.action_state: Dict[str, bool] = {action: False for action in self.bindings.actions}
        self.released: Dict[str, bool] = {action: False for action in self.bindings.actions}

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return
        actions = self._key_map.get(event.key)
        if not actions:
            return
        pressed = event.type == pygame.KEYDOWN
        for action in actions:
            if not pressed and self.action_state.get(action, False):
                self.released[action] = True
            self.action_state[action] = pressed
            if self._logger:
                self._logger.debug("%s %s", action, "down" if pressed else "up")

    def action(self, name: str) -> bool:
        return self.action_state.get(name, False)

    def consume_release(self, name: str) -> bool:
        value = self.released.get(name, False)
        self.released[name] = False
        return value

    def controls(self) -> ShipControls:
        """Build this frame's control snapshot, consuming the fire release edge."""

        return ShipControls(
            rotate_left=self.action("rotate_left"),
            rotate_right=self.action("rotate_right"),
            thrust=self.action("thrust"),
            fire_released=self.consume_release("fire"),
        )


__all__ = ["InputMapper", "InputBindings", "ShipControls", "DEFAULT_BINDINGS", "resolve_key"]
