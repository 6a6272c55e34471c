"""Application states and deferred state transitions."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Generic, Hashable, Optional, TypeVar

T = TypeVar("T", bound=Hashable)


class Screen(enum.Enum):
    """The game's main screens. The first member is the starting screen."""

    SPLASH = "splash"
    TITLE = "title"
    LOADING = "loading"
    GAMEPLAY = "gameplay"


class Menu(enum.Enum):
    """The menu shown on top of the current screen. The first member is the default."""

    NONE = "none"
    MAIN = "main"
    CREDITS = "credits"
    SETTINGS = "settings"
    PAUSE = "pause"


@dataclass(frozen=True)
class Transition(Generic[T]):
    """A change from one state value to another."""

    exited: T
    entered: T


_UNSET = object()


class State(Generic[T]):
    """Holds a current value; requested changes take effect on :meth:`apply`."""

    def __init__(self, initial: T) -> None:
        self._current = initial
        self._pending: object = _UNSET

    def current(self) -> T:
        """The value currently in effect."""
        return self._current

    @property
    def pending(self) -> bool:
        """Whether a change has been requested but not yet applied."""
        return self._pending is not _UNSET

    def set(self, value: T) -> None:
        """Request a change; the most recent request wins."""
        self._pending = value

    def apply(self) -> Optional[Transition[T]]:
        """Apply the requested change, returning the transition if the value changed."""
        if self._pending is _UNSET:
            return None
        new_value = self._pending
        self._pending = _UNSET
        if new_value == self._current:
            return None
        transition = Transition(exited=self._current, entered=new_value)
        self._current = new_value  # type: ignore[assignment]
        return transition