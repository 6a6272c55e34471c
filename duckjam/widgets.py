"""Reusable UI widgets, the colour palette and pointer interaction."""

from __future__ import annotations

import abc
import enum
from dataclasses import dataclass
from functools import lru_cache
from typing import Callable, Iterable, Iterator, List, Optional, Sequence, Tuple, Union

import pygame

Color = Tuple[int, int, int]
Point = Tuple[int, int]
Text = Union[str, Callable[[], str]]

LABEL_TEXT: Color = (0xDD, 0xD3, 0x69)
HEADER_TEXT: Color = (0xFC, 0xFB, 0xCC)
BUTTON_TEXT: Color = (0xEC, 0xEC, 0xEC)
BUTTON_BACKGROUND: Color = (0x46, 0x66, 0xBF)
BUTTON_HOVERED_BACKGROUND: Color = (0x62, 0x99, 0xD1)
BUTTON_PRESSED_BACKGROUND: Color = (0x3D, 0x49, 0x99)

HEADER_FONT_SIZE = 40
LABEL_FONT_SIZE = 24
BUTTON_FONT_SIZE = 40
ROOT_ROW_GAP = 20
BUTTON_SIZE: Point = (380, 80)
SMALL_BUTTON_SIZE: Point = (30, 30)


@lru_cache(maxsize=None)
def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


class Interaction(enum.Enum):
    """The pointer's current relation to a widget."""

    NONE = "none"
    HOVERED = "hovered"
    PRESSED = "pressed"


class InteractionEvent(enum.Enum):
    """Something that happened to a button and may deserve a sound."""

    HOVER = "hover"
    CLICK = "click"


@dataclass(frozen=True)
class InteractionPalette:
    """Background colours for each interaction state."""

    none: Color
    hovered: Color
    pressed: Color

    def color_for(self, interaction: Interaction) -> Color:
        if interaction is Interaction.HOVERED:
            return self.hovered
        if interaction is Interaction.PRESSED:
            return self.pressed
        return self.none


BUTTON_PALETTE = InteractionPalette(
    none=BUTTON_BACKGROUND,
    hovered=BUTTON_HOVERED_BACKGROUND,
    pressed=BUTTON_PRESSED_BACKGROUND,
)


class Widget(abc.ABC):
    """Something with a size that can be placed, drawn and may hold buttons."""

    def __init__(self) -> None:
        self.rect = pygame.Rect(0, 0, 0, 0)

    @abc.abstractmethod
    def size(self) -> Point:
        """The width and height the widget needs."""

    def place(self, x: int, y: int) -> None:
        """Put the widget's top-left corner at ``(x, y)`` and lay out its content."""
        self.rect = pygame.Rect((x, y), self.size())
        self._place_children()

    def _place_children(self) -> None:
        pass

    def iter_buttons(self) -> Iterator[Button]:
        return iter(())

    @abc.abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Draw the widget at its placed position."""


class Label(Widget):
    """A line of text; ``text`` may be a callable producing the current text."""

    def __init__(
        self,
        text: Text,
        font_size: int = LABEL_FONT_SIZE,
        color: Color = LABEL_TEXT,
    ) -> None:
        super().__init__()
        self._text = text
        self.font_size = font_size
        self.color = color

    @property
    def text(self) -> str:
        return self._text() if callable(self._text) else self._text

    @text.setter
    def text(self, value: Text) -> None:
        self._text = value

    def size(self) -> Point:
        return _font(self.font_size).size(self.text)

    def draw(self, surface: pygame.Surface) -> None:
        rendered = _font(self.font_size).render(self.text, True, self.color)
        surface.blit(rendered, rendered.get_rect(center=self.rect.center))


class Button(Widget):
    """A clickable box with centred text that runs ``action`` when clicked."""

    def __init__(
        self,
        text: str,
        action: Callable[[], object],
        size: Point = BUTTON_SIZE,
        rounded: bool = True,
    ) -> None:
        super().__init__()
        self.text = text
        self.action = action
        self._size = (int(size[0]), int(size[1]))
        self.rounded = rounded
        self.palette = BUTTON_PALETTE
        self.interaction = Interaction.NONE

    def size(self) -> Point:
        return self._size

    def iter_buttons(self) -> Iterator[Button]:
        yield self

    @property
    def background(self) -> Color:
        return self.palette.color_for(self.interaction)

    def pointer_moved(self, position: Point) -> Optional[InteractionEvent]:
        """Track hovering; return HOVER when the pointer enters the button."""
        if not self.rect.collidepoint(position):
            self.interaction = Interaction.NONE
            return None
        if self.interaction is Interaction.NONE:
            self.interaction = Interaction.HOVERED
            return InteractionEvent.HOVER
        return None

    def pointer_down(self, position: Point) -> bool:
        """Press the button if the pointer is over it; return whether it was hit."""
        if self.rect.collidepoint(position):
            self.interaction = Interaction.PRESSED
            return True
        return False

    def pointer_up(self, position: Point) -> Optional[InteractionEvent]:
        """Release the pointer; a press released over the button is a click."""
        inside = bool(self.rect.collidepoint(position))
        was_pressed = self.interaction is Interaction.PRESSED
        self.interaction = Interaction.HOVERED if inside else Interaction.NONE
        if inside and was_pressed:
            self.action()
            return InteractionEvent.CLICK
        return None

    def draw(self, surface: pygame.Surface) -> None:
        radius = min(self.rect.width, self.rect.height) // 2 if self.rounded else 0
        pygame.draw.rect(surface, self.background, self.rect, border_radius=radius)
        rendered = _font(BUTTON_FONT_SIZE).render(self.text, True, BUTTON_TEXT)
        surface.blit(rendered, rendered.get_rect(center=self.rect.center))


class Grid(Widget):
    """Cells in fixed-width columns; even columns align right, odd ones left."""

    def __init__(
        self,
        cells: Iterable[Widget],
        columns: int = 2,
        column_width: int = 400,
        row_gap: int = 10,
        column_gap: int = 30,
    ) -> None:
        super().__init__()
        if columns < 1:
            raise ValueError(f"a grid needs at least one column, got {columns}")
        self.cells = list(cells)
        self.columns = columns
        self.column_width = column_width
        self.row_gap = row_gap
        self.column_gap = column_gap

    def _rows(self) -> List[List[Widget]]:
        return [
            self.cells[start : start + self.columns]
            for start in range(0, len(self.cells), self.columns)
        ]

    def _row_heights(self) -> List[int]:
        return [max(cell.size()[1] for cell in row) for row in self._rows()]

    def size(self) -> Point:
        width = self.columns * self.column_width + (self.columns - 1) * self.column_gap
        heights = self._row_heights()
        height = sum(heights) + self.row_gap * max(len(heights) - 1, 0)
        return (width, height)

    def _place_children(self) -> None:
        top = self.rect.y
        for row, height in zip(self._rows(), self._row_heights()):
            for column, cell in enumerate(row):
                width, cell_height = cell.size()
                left = self.rect.x + column * (self.column_width + self.column_gap)
                x = left + self.column_width - width if column % 2 == 0 else left
                cell.place(x, top + (height - cell_height) // 2)
            top += height + self.row_gap

    def iter_buttons(self) -> Iterator[Button]:
        for cell in self.cells:
            yield from cell.iter_buttons()

    def draw(self, surface: pygame.Surface) -> None:
        for cell in self.cells:
            cell.draw(surface)


class Row(Widget):
    """Widgets side by side, vertically centred, separated by ``gap``."""

    def __init__(self, children: Iterable[Widget], gap: int = 0) -> None:
        super().__init__()
        self.children = list(children)
        self.gap = gap

    def size(self) -> Point:
        sizes = [child.size() for child in self.children]
        width = sum(w for w, _ in sizes) + self.gap * max(len(sizes) - 1, 0)
        height = max((h for _, h in sizes), default=0)
        return (width, height)

    def _place_children(self) -> None:
        x = self.rect.x
        for child in self.children:
            width, height = child.size()
            child.place(x, self.rect.y + (self.rect.height - height) // 2)
            x += width + self.gap

    def iter_buttons(self) -> Iterator[Button]:
        for child in self.children:
            yield from child.iter_buttons()

    def draw(self, surface: pygame.Surface) -> None:
        for child in self.children:
            child.draw(surface)


class UiRoot:
    """A full-window column of widgets centred both ways."""

    def __init__(self, name: str, children: Sequence[Widget], z_index: int = 0) -> None:
        self.name = name
        self.children = list(children)
        self.z_index = z_index

    def buttons(self) -> List[Button]:
        return [button for child in self.children for button in child.iter_buttons()]

    def layout(self, width: int, height: int) -> None:
        """Place the children for a window of the given size."""
        sizes = [child.size() for child in self.children]
        total = sum(h for _, h in sizes) + ROOT_ROW_GAP * max(len(sizes) - 1, 0)
        y = (height - total) // 2
        for child, (child_width, child_height) in zip(self.children, sizes):
            child.place((width - child_width) // 2, y)
            y += child_height + ROOT_ROW_GAP

    def dispatch(self, event: pygame.event.Event) -> List[InteractionEvent]:
        """Feed a pygame mouse event to the buttons; return what happened."""
        buttons = self.buttons()
        if event.type == pygame.MOUSEMOTION:
            results = [button.pointer_moved(event.pos) for button in buttons]
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            for button in buttons:
                button.pointer_down(event.pos)
            return []
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            results = [button.pointer_up(event.pos) for button in buttons]
        else:
            return []
        return [result for result in results if result is not None]

    def draw(self, surface: pygame.Surface) -> None:
        for child in self.children:
            child.draw(surface)


def ui_root(name: str, children: Sequence[Widget], z_index: int = 0) -> UiRoot:
    return UiRoot(name, children, z_index)


def header(text: Text) -> Label:
    """A large header label."""
    return Label(text, HEADER_FONT_SIZE, HEADER_TEXT)


def label(text: Text) -> Label:
    """A regular text label."""
    return Label(text, LABEL_FONT_SIZE, LABEL_TEXT)


def button(text: str, action: Callable[[], object]) -> Button:
    """A large rounded button."""
    return Button(text, action, BUTTON_SIZE, True)


def button_small(text: str, action: Callable[[], object]) -> Button:
    """A small square button."""
    return Button(text, action, SMALL_BUTTON_SIZE, False)