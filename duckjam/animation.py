"""Player sprite animation state."""

from __future__ import annotations

import enum
from typing import Tuple

from duckjam.timer import Seconds, Timer, TimerMode


class PlayerAnimationState(enum.Enum):
    IDLING = "idling"
    WALKING = "walking"


class PlayerAnimation:
    """Tracks the player's animation frame; tied to the layout of the sprite atlas."""

    IDLE_FRAMES = 2
    IDLE_INTERVAL = 0.5
    WALKING_FRAMES = 6
    WALKING_INTERVAL = 0.05
    WALKING_ATLAS_OFFSET = 6
    STEP_FRAMES = (2, 5)

    def __init__(self) -> None:
        self._enter(PlayerAnimationState.IDLING)

    def _enter(self, state: PlayerAnimationState) -> None:
        interval = (
            self.IDLE_INTERVAL
            if state is PlayerAnimationState.IDLING
            else self.WALKING_INTERVAL
        )
        self._timer = Timer(interval, TimerMode.REPEATING)
        self._frame = 0
        self._state = state

    @property
    def frame(self) -> int:
        return self._frame

    @property
    def state(self) -> PlayerAnimationState:
        return self._state

    def update_timer(self, delta: Seconds) -> None:
        """Advance the frame timer, moving to the next frame when it completes."""
        self._timer.tick(delta)
        if not self._timer.finished():
            return
        frames = (
            self.IDLE_FRAMES
            if self._state is PlayerAnimationState.IDLING
            else self.WALKING_FRAMES
        )
        self._frame = (self._frame + 1) % frames

    def update_state(self, state: PlayerAnimationState) -> None:
        """Switch to ``state``, restarting the animation, if it differs."""
        if self._state is not state:
            self._enter(state)

    def changed(self) -> bool:
        """Whether the frame advanced on the last tick."""
        return self._timer.finished()

    def atlas_index(self) -> int:
        """Sprite index in the atlas for the current frame."""
        if self._state is PlayerAnimationState.IDLING:
            return self._frame
        return self.WALKING_ATLAS_OFFSET + self._frame

    def step_sound_due(self) -> bool:
        """Whether a footstep sound should play on this tick."""
        return (
            self._state is PlayerAnimationState.WALKING
            and self.changed()
            and self._frame in self.STEP_FRAMES
        )


def sprite_flip(intent_x: float, flipped: bool) -> bool:
    """Return the horizontal flip for a sprite moving with ``intent_x``."""
    if intent_x != 0.0:
        return intent_x < 0.0
    return flipped


def state_for_intent(intent: Tuple[float, float]) -> PlayerAnimationState:
    """Idling when there is no movement intent, walking otherwise."""
    x, y = intent
    if x == 0.0 and y == 0.0:
        return PlayerAnimationState.IDLING
    return PlayerAnimationState.WALKING