"""The main, credits and pause menus."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Optional, Sequence

from duckjam.settings import MENU_Z_INDEX
from duckjam.widgets import Grid, UiRoot, button, header, label, ui_root

Action = Callable[[], object]

CREDITS_MUSIC = Path("audio/music/Monkeys Spinning Monkeys.ogg")

CREATED_BY = (
    ("Joe Shmoe", "Implemented alligator wrestling AI"),
    ("Jane Doe", "Made the music for the alien invasion"),
)

ASSET_CREDITS = (
    ("Ducky sprite", "CC0"),
    ("Button SFX", "CC0"),
    ("Music", "CC BY 3.0"),
    ("Splash logo", "Used unmodified, with permission, for the splash screen"),
)

GRID_COLUMN_WIDTH = 400
GRID_ROW_GAP = 10
GRID_COLUMN_GAP = 30


def credits_grid(rows: Iterable[Sequence[str]]) -> Grid:
    """A two-column grid of labels, one row per ``(name, description)`` pair."""
    cells = []
    for row in rows:
        if len(row) != 2:
            raise ValueError(f"a credits row needs exactly two entries, got {len(row)}")
        cells.extend(label(text) for text in row)
    return Grid(
        cells,
        columns=2,
        column_width=GRID_COLUMN_WIDTH,
        row_gap=GRID_ROW_GAP,
        column_gap=GRID_COLUMN_GAP,
    )


def build_main_menu(
    on_play: Action,
    on_settings: Action,
    on_credits: Action,
    on_exit: Optional[Action] = None,
) -> UiRoot:
    """The title-screen menu; the Exit button is left out when ``on_exit`` is None."""
    buttons = [
        button("Play", on_play),
        button("Settings", on_settings),
        button("Credits", on_credits),
    ]
    if on_exit is not None:
        buttons.append(button("Exit", on_exit))
    return ui_root("Main Menu", buttons, z_index=MENU_Z_INDEX)


def build_credits_menu(on_back: Action) -> UiRoot:
    """The credits: who made the game and where its assets come from."""
    return ui_root(
        "Credits Menu",
        [
            header("Created by"),
            credits_grid(CREATED_BY),
            header("Assets"),
            credits_grid(ASSET_CREDITS),
            button("Back", on_back),
        ],
        z_index=MENU_Z_INDEX,
    )


def build_pause_menu(on_continue: Action, on_settings: Action, on_quit: Action) -> UiRoot:
    """The menu shown while gameplay is paused."""
    return ui_root(
        "Pause Menu",
        [
            header("Game paused"),
            button("Continue", on_continue),
            button("Settings", on_settings),
            button("Quit to title", on_quit),
        ],
        z_index=MENU_Z_INDEX,
    )