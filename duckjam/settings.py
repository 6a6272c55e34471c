"""The settings menu and its volume controls."""

from __future__ import annotations

from typing import Callable

from duckjam.states import Menu, Screen
from duckjam.widgets import (
    LABEL_FONT_SIZE,
    LABEL_TEXT,
    Grid,
    Label,
    Row,
    UiRoot,
    button,
    button_small,
    header,
    label,
    ui_root,
)

MIN_VOLUME = 0.0
MAX_VOLUME = 3.0
VOLUME_STEP = 0.1
MENU_Z_INDEX = 2


def lower_volume(volume: float) -> float:
    return max(volume - VOLUME_STEP, MIN_VOLUME)


def raise_volume(volume: float) -> float:
    return min(volume + VOLUME_STEP, MAX_VOLUME)


def volume_label(volume: float) -> str:
    """The volume as a whole percentage, padded to three characters."""
    return f"{100.0 * volume:3.0f}%"


def back_target(screen: Screen) -> Menu:
    """The menu to return to from settings, depending on the current screen."""
    return Menu.MAIN if screen == Screen.TITLE else Menu.PAUSE


def build_settings_menu(
    get_volume: Callable[[], float],
    on_lower: Callable[[], object],
    on_raise: Callable[[], object],
    on_back: Callable[[], object],
) -> UiRoot:
    """The settings menu; the volume label always shows ``get_volume()``."""
    volume_widget = Row(
        [
            button_small("-", on_lower),
            Label(lambda: volume_label(get_volume()), LABEL_FONT_SIZE, LABEL_TEXT),
            button_small("+", on_raise),
        ],
        gap=10,
    )
    grid = Grid(
        [label("Master Volume"), volume_widget],
        columns=2,
        column_width=400,
        row_gap=10,
        column_gap=30,
    )
    return ui_root(
        "Settings Menu",
        [header("Settings"), grid, button("Back", on_back)],
        z_index=MENU_Z_INDEX,
    )