"""Screen, menu and pause flow: which state follows which, and on what input."""

from __future__ import annotations

from collections import defaultdict
from typing import Callable, DefaultDict, Hashable, List, Tuple, Union

import pygame

from duckjam.settings import back_target
from duckjam.states import Menu, Screen, State, Transition

Callback = Callable[[], object]
StateValue = Union[Screen, Menu, bool]

PAUSE_KEYS = (pygame.K_p, pygame.K_ESCAPE)
_MAX_ROUNDS = 32


def _key(state: StateValue) -> Tuple[type, Hashable]:
    if not isinstance(state, (Screen, Menu, bool)):
        raise TypeError(f"not a screen, menu or pause state: {state!r}")
    return (type(state), state)


class GameFlow:
    """Holds the current screen, menu and pause state and moves between them.

    Changes are requested with the ``set_*`` methods or by key presses and
    take effect on :meth:`apply`, which runs the exit and enter callbacks.
    """

    def __init__(self) -> None:
        self._screen: State[Screen] = State(next(iter(Screen)))
        self._menu: State[Menu] = State(next(iter(Menu)))
        self._pause: State[bool] = State(False)
        self._enter: DefaultDict[Tuple[type, Hashable], List[Callback]] = defaultdict(list)
        self._exit: DefaultDict[Tuple[type, Hashable], List[Callback]] = defaultdict(list)
        self._started = False

        self.on_enter(Screen.TITLE, lambda: self._menu.set(Menu.MAIN))
        self.on_exit(Screen.TITLE, lambda: self._menu.set(Menu.NONE))
        self.on_exit(Screen.GAMEPLAY, self._close_menu_and_unpause)
        self.on_enter(Menu.NONE, self._unpause_in_gameplay)

    def _close_menu_and_unpause(self) -> None:
        self._menu.set(Menu.NONE)
        self._pause.set(False)

    def _unpause_in_gameplay(self) -> None:
        if self._screen.current() is Screen.GAMEPLAY:
            self._pause.set(False)

    def screen(self) -> Screen:
        return self._screen.current()

    def menu(self) -> Menu:
        return self._menu.current()

    def paused(self) -> bool:
        return self._pause.current()

    def on_enter(self, state: StateValue, callback: Callback) -> None:
        """Run ``callback`` whenever ``state`` is entered."""
        self._enter[_key(state)].append(callback)

    def on_exit(self, state: StateValue, callback: Callback) -> None:
        """Run ``callback`` whenever ``state`` is left."""
        self._exit[_key(state)].append(callback)

    def set_screen(self, screen: Screen) -> None:
        self._screen.set(screen)

    def set_menu(self, menu: Menu) -> None:
        self._menu.set(menu)

    def press(self, key: int) -> None:
        """React to a key that was just pressed, judged against the current states."""
        screen, menu = self.screen(), self.menu()
        if key == pygame.K_ESCAPE:
            if screen is Screen.SPLASH:
                self._screen.set(Screen.TITLE)
            if menu is Menu.CREDITS:
                self._menu.set(Menu.MAIN)
            elif menu is Menu.PAUSE:
                self._menu.set(Menu.NONE)
            elif menu is Menu.SETTINGS:
                self._menu.set(back_target(screen))
        if screen is Screen.GAMEPLAY:
            if menu is Menu.NONE and key in PAUSE_KEYS:
                self._pause.set(True)
                self._menu.set(Menu.PAUSE)
            elif menu is not Menu.NONE and key == pygame.K_p:
                self._menu.set(Menu.NONE)

    def finish_loading(self) -> bool:
        """Move from the loading screen to gameplay; False if not loading."""
        if self.screen() is not Screen.LOADING:
            return False
        self._screen.set(Screen.GAMEPLAY)
        return True

    def _fire(self, table: DefaultDict[Tuple[type, Hashable], List[Callback]], state: StateValue) -> None:
        for callback in list(table[_key(state)]):
            callback()

    def apply(self) -> List[Transition]:
        """Apply requested changes until none are left; return the transitions made.

        The first call also runs the enter callbacks of the starting states.
        """
        if not self._started:
            self._started = True
            for value in (self.screen(), self.menu(), self.paused()):
                self._fire(self._enter, value)

        transitions: List[Transition] = []
        for _ in range(_MAX_ROUNDS):
            made = []
            for state in (self._screen, self._menu, self._pause):
                transition = state.apply()
                if transition is None:
                    continue
                self._fire(self._exit, transition.exited)
                self._fire(self._enter, transition.entered)
                made.append(transition)
            if not made:
                return transitions
            transitions.extend(made)
        raise RuntimeError("state transitions did not settle")