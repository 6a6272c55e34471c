"""Character movement and wrapping around the window edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Vec2 = Tuple[float, float]

DEFAULT_MAX_SPEED = 400.0
SCREEN_WRAP_MARGIN = 256.0


@dataclass
class MovementController:
    """Movement parameters: the wanted direction and top speed in pixels per second."""

    intent: Vec2 = (0.0, 0.0)
    max_speed: float = DEFAULT_MAX_SPEED


def apply_movement(position: Vec2, controller: MovementController, dt: float) -> Vec2:
    """Return ``position`` moved by the controller's velocity over ``dt`` seconds."""
    x, y = position
    ix, iy = controller.intent
    speed = controller.max_speed
    return (x + speed * ix * dt, y + speed * iy * dt)


def screen_wrap(position: Vec2, window_size: Vec2) -> Vec2:
    """Wrap a centre-origin position into the window enlarged by a margin."""
    wrapped = []
    for coordinate, extent in zip(position, window_size):
        size = extent + SCREEN_WRAP_MARGIN
        half = size / 2.0
        wrapped.append((coordinate + half) % size - half)
    return (wrapped[0], wrapped[1])