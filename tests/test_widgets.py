import pygame
import pytest

from duckjam.widgets import (
    BUTTON_BACKGROUND,
    BUTTON_HOVERED_BACKGROUND,
    BUTTON_PALETTE,
    BUTTON_PRESSED_BACKGROUND,
    HEADER_TEXT,
    LABEL_TEXT,
    Grid,
    Interaction,
    InteractionEvent,
    Label,
    button,
    button_small,
    header,
    label,
    ui_root,
)


def _motion(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos)


def _down(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def _up(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1)


@pytest.mark.parametrize(
    "interaction, expected",
    [
        (Interaction.NONE, BUTTON_BACKGROUND),
        (Interaction.HOVERED, BUTTON_HOVERED_BACKGROUND),
        (Interaction.PRESSED, BUTTON_PRESSED_BACKGROUND),
    ],
)
def test_palette_colour_for_interaction(interaction, expected):
    assert BUTTON_PALETTE.color_for(interaction) == expected


def test_header_and_label_styles():
    big = header("Settings")
    small = label("Master Volume")
    assert (big.font_size, big.color) == (40, HEADER_TEXT)
    assert (small.font_size, small.color) == (24, LABEL_TEXT)
    assert big.text == "Settings"


def test_button_sizes():
    assert button("Play", lambda: None).size() == (380, 80)
    assert button_small("-", lambda: None).size() == (30, 30)
    assert button("Play", lambda: None).rounded
    assert not button_small("-", lambda: None).rounded


def test_label_follows_callable_text():
    value = ["a"]
    widget = Label(lambda: value[0])
    value[0] = "b"
    assert widget.text == "b"


def test_layout_centres_column_of_buttons():
    first = button("One", lambda: None)
    second = button("Two", lambda: None)
    root = ui_root("Menu", [first, second])
    root.layout(800, 600)
    assert first.rect.centerx == 400
    assert second.rect.centerx == 400
    assert second.rect.top - first.rect.bottom == 20
    assert first.rect.top == 600 - second.rect.bottom


def test_click_runs_action_and_reports_events():
    calls = []
    play = button("Play", lambda: calls.append("play"))
    root = ui_root("Main Menu", [play], z_index=2)
    root.layout(800, 600)
    centre = play.rect.center
    assert root.dispatch(_motion(centre)) == [InteractionEvent.HOVER]
    assert root.dispatch(_motion((centre[0] + 1, centre[1]))) == []
    root.dispatch(_down(centre))
    assert play.interaction is Interaction.PRESSED
    assert root.dispatch(_up(centre)) == [InteractionEvent.CLICK]
    assert calls == ["play"]
    assert play.interaction is Interaction.HOVERED


def test_release_outside_does_not_click():
    calls = []
    play = button("Play", lambda: calls.append(1))
    root = ui_root("Main Menu", [play])
    root.layout(800, 600)
    root.dispatch(_down(play.rect.center))
    assert root.dispatch(_up((0, 0))) == []
    assert calls == []
    assert play.interaction is Interaction.NONE


def test_leaving_button_resets_hover():
    play = button("Play", lambda: None)
    root = ui_root("Main Menu", [play])
    root.layout(800, 600)
    root.dispatch(_motion(play.rect.center))
    root.dispatch(_motion((0, 0)))
    assert play.interaction is Interaction.NONE
    assert root.dispatch(_motion(play.rect.center)) == [InteractionEvent.HOVER]


def test_other_events_are_ignored():
    root = ui_root("Main Menu", [button("Play", lambda: None)])
    root.layout(800, 600)
    assert root.dispatch(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)) == []


def test_grid_justifies_columns():
    cells = [button_small(str(n), lambda: None) for n in range(4)]
    grid = Grid(cells, columns=2, column_width=400, row_gap=10, column_gap=30)
    root = ui_root("Grid", [grid])
    root.layout(1000, 600)
    assert cells[0].rect.right == grid.rect.x + 400
    assert cells[1].rect.left - cells[0].rect.right == 30
    assert cells[2].rect.top - cells[0].rect.bottom == 10
    assert all(grid.rect.contains(cell.rect) for cell in cells)
    assert root.buttons() == cells


def test_grid_needs_a_column():
    with pytest.raises(ValueError):
        Grid([], columns=0)


def test_button_draws_palette_colour():
    play = button("Play", lambda: None)
    root = ui_root("Main Menu", [play])
    root.layout(800, 600)
    surface = pygame.Surface((800, 600))
    point = (play.rect.x + 50, play.rect.centery)
    root.draw(surface)
    assert tuple(surface.get_at(point))[:3] == BUTTON_BACKGROUND
    root.dispatch(_motion(play.rect.center))
    root.draw(surface)
    assert tuple(surface.get_at(point))[:3] == BUTTON_HOVERED_BACKGROUND