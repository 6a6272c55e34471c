import pytest

from duckjam.menus import (
    ASSET_CREDITS,
    CREATED_BY,
    build_credits_menu,
    build_main_menu,
    build_pause_menu,
    credits_grid,
)
from duckjam.settings import MENU_Z_INDEX
from duckjam.widgets import InteractionEvent


def _noop():
    return None


def _button_texts(root):
    return [b.text for b in root.buttons()]


def test_main_menu_buttons_in_order():
    root = build_main_menu(_noop, _noop, _noop, _noop)
    assert _button_texts(root) == ["Play", "Settings", "Credits", "Exit"]
    assert root.name == "Main Menu"
    assert root.z_index == MENU_Z_INDEX


def test_main_menu_without_exit_has_no_exit_button():
    root = build_main_menu(_noop, _noop, _noop, None)
    assert _button_texts(root) == ["Play", "Settings", "Credits"]


def test_main_menu_buttons_run_their_actions():
    calls = []
    root = build_main_menu(
        lambda: calls.append("play"),
        lambda: calls.append("settings"),
        lambda: calls.append("credits"),
        lambda: calls.append("exit"),
    )
    for item in root.buttons():
        item.action()
    assert calls == ["play", "settings", "credits", "exit"]


def test_credits_grid_flattens_rows_in_order():
    grid = credits_grid([("a", "b"), ("c", "d")])
    assert [cell.text for cell in grid.cells] == ["a", "b", "c", "d"]
    assert grid.columns == 2


def test_credits_grid_rejects_rows_of_wrong_length():
    with pytest.raises(ValueError):
        credits_grid([("only one",)])


def test_credits_menu_structure():
    calls = []
    root = build_credits_menu(lambda: calls.append("back"))
    assert root.name == "Credits Menu"
    assert root.children[0].text == "Created by"
    assert root.children[2].text == "Assets"
    assert [c.text for c in root.children[1].cells] == [t for row in CREATED_BY for t in row]
    assert [c.text for c in root.children[3].cells] == [t for row in ASSET_CREDITS for t in row]
    assert _button_texts(root) == ["Back"]
    root.buttons()[0].action()
    assert calls == ["back"]


def test_pause_menu_structure_and_actions():
    calls = []
    root = build_pause_menu(
        lambda: calls.append("continue"),
        lambda: calls.append("settings"),
        lambda: calls.append("quit"),
    )
    assert root.children[0].text == "Game paused"
    assert _button_texts(root) == ["Continue", "Settings", "Quit to title"]
    for item in root.buttons():
        item.action()
    assert calls == ["continue", "settings", "quit"]


def test_click_on_laid_out_pause_button_runs_action():
    calls = []
    root = build_pause_menu(lambda: calls.append("continue"), _noop, _noop)
    root.layout(800, 600)
    target = root.buttons()[0]
    assert target.pointer_down(target.rect.center)
    assert target.pointer_up(target.rect.center) is InteractionEvent.CLICK
    assert calls == ["continue"]


def test_credits_grid_aligns_first_column_right_and_second_left():
    grid = credits_grid([("short", "a longer description")])
    grid.place(0, 0)
    first, second = grid.cells
    assert first.rect.right == grid.rect.x + grid.column_width
    assert second.rect.x == grid.rect.x + grid.column_width + grid.column_gap