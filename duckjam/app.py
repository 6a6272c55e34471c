"""The game window: event loop, screens, menus and the command line."""

from __future__ import annotations

import argparse
import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, Tuple, Union

import pygame

from duckjam.audio import AudioPlayer, Playable
from duckjam.menus import CREDITS_MUSIC, build_credits_menu, build_main_menu, build_pause_menu
from duckjam.player import Level, LevelAssets, PlayerAssets
from duckjam.screens import GameFlow
from duckjam.settings import back_target, build_settings_menu, lower_volume, raise_volume
from duckjam.splash import SPLASH_BACKGROUND_COLOR, SPLASH_IMAGE, SplashScreen
from duckjam.states import Menu, Screen
from duckjam.widgets import InteractionEvent, UiRoot, label, ui_root

log = logging.getLogger(__name__)

DEFAULT_ASSET_DIR = Path("assets")
DEFAULT_SIZE = (1280, 720)
WINDOW_TITLE = "Duck Jam"
FRAME_RATE = 60
TOGGLE_DEBUG_KEY = pygame.K_BACKQUOTE
PAUSE_OVERLAY_COLOR = (0, 0, 0, 204)
PAUSE_OVERLAY_Z_INDEX = 1
DEBUG_OUTLINE_COLOR = (255, 0, 0)

INTERACTION_HOVER = Path("audio/sound_effects/button_hover.ogg")
INTERACTION_CLICK = Path("audio/sound_effects/button_click.ogg")


@dataclass
class _InteractionAssets:
    hover: Optional[Playable]
    click: Optional[Playable]


def _init_mixer() -> bool:
    if pygame.mixer.get_init():
        return True
    try:
        pygame.mixer.init()
    except pygame.error as error:
        log.warning("audio unavailable: %s", error)
        return False
    return True


class App:
    """The running game."""

    def __init__(
        self,
        asset_dir: Union[str, Path] = DEFAULT_ASSET_DIR,
        size: Tuple[int, int] = DEFAULT_SIZE,
        dev: bool = False,
    ) -> None:
        pygame.init()
        self._audio_ready = _init_mixer()
        self.surface = pygame.display.set_mode(size, pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)

        self.asset_dir = Path(asset_dir)
        self.dev = dev
        self.flow = GameFlow()
        self.audio = AudioPlayer()
        self.running = True
        self.debug_ui = False
        self.held_keys: Set[int] = set()
        self._rng = random.Random()

        self.splash: Optional[SplashScreen] = None
        self.level: Optional[Level] = None
        self.menu_ui: Optional[UiRoot] = None
        self.screen_ui: Optional[UiRoot] = None
        self.interaction_assets: Optional[_InteractionAssets] = None
        self.credits_music: Optional[Playable] = None
        self.player_assets: Optional[PlayerAssets] = None
        self.level_assets: Optional[LevelAssets] = None
        self.load_error: Optional[Exception] = None

        self._register_callbacks()

    # -- state callbacks -------------------------------------------------

    def _register_callbacks(self) -> None:
        flow = self.flow
        flow.on_enter(Screen.SPLASH, self._enter_splash)
        flow.on_exit(Screen.SPLASH, self._exit_splash)
        flow.on_enter(Screen.TITLE, self._load_title_assets)
        flow.on_enter(Screen.LOADING, self._enter_loading)
        flow.on_exit(Screen.LOADING, self._clear_screen_ui)
        flow.on_enter(Screen.GAMEPLAY, self._spawn_level)
        flow.on_exit(Screen.GAMEPLAY, self._despawn_level)

        flow.on_enter(Menu.NONE, lambda: self._show_menu(None))
        flow.on_enter(Menu.MAIN, self._open_main_menu)
        flow.on_enter(Menu.SETTINGS, self._open_settings_menu)
        flow.on_enter(Menu.PAUSE, self._open_pause_menu)
        flow.on_enter(Menu.CREDITS, self._open_credits_menu)
        flow.on_exit(Menu.CREDITS, lambda: self.audio.stop_scope(Menu.CREDITS))

    def _asset(self, relative: Path) -> Optional[Path]:
        path = self.asset_dir / relative
        return path if path.is_file() else None

    def _load_sound(self, relative: Path) -> Optional[Playable]:
        path = self._asset(relative)
        if path is None or not self._audio_ready:
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as error:
            log.warning("cannot load %s: %s", path, error)
            return None

    def _enter_splash(self) -> None:
        image = None
        path = self._asset(SPLASH_IMAGE)
        if path is not None:
            try:
                image = pygame.image.load(str(path))
            except pygame.error as error:
                log.warning("cannot load %s: %s", path, error)
        self.splash = SplashScreen(image)

    def _exit_splash(self) -> None:
        self.splash = None

    def _load_title_assets(self) -> None:
        if self.interaction_assets is None:
            self.interaction_assets = _InteractionAssets(
                hover=self._load_sound(INTERACTION_HOVER),
                click=self._load_sound(INTERACTION_CLICK),
            )
        if self.credits_music is None:
            self.credits_music = self._load_sound(CREDITS_MUSIC)

    def _enter_loading(self) -> None:
        self.load_error = None
        self.screen_ui = ui_root("Loading Screen", [label("Loading...")])
        self._layout(self.screen_ui)

    def _clear_screen_ui(self) -> None:
        self.screen_ui = None

    def _load_gameplay_assets(self) -> None:
        if self.player_assets is None:
            self.player_assets = PlayerAssets.load(self.asset_dir)
        if self.level_assets is None:
            self.level_assets = LevelAssets.load(self.asset_dir)

    def _spawn_level(self) -> None:
        try:
            self._load_gameplay_assets()
        except (FileNotFoundError, pygame.error) as error:
            self.load_error = error
            return
        assert self.player_assets is not None and self.level_assets is not None
        self.level = Level(self.player_assets, self.level_assets, self.audio)

    def _despawn_level(self) -> None:
        if self.level is not None:
            self.level.close()
            self.level = None

    def _show_menu(self, ui: Optional[UiRoot]) -> None:
        self.menu_ui = ui
        if ui is not None:
            self._layout(ui)

    def _request_exit(self) -> None:
        self.running = False

    def _open_main_menu(self) -> None:
        self._show_menu(
            build_main_menu(
                on_play=lambda: self.flow.set_screen(Screen.LOADING),
                on_settings=lambda: self.flow.set_menu(Menu.SETTINGS),
                on_credits=lambda: self.flow.set_menu(Menu.CREDITS),
                on_exit=self._request_exit,
            )
        )

    def _open_settings_menu(self) -> None:
        self._show_menu(
            build_settings_menu(
                get_volume=self.audio.global_volume,
                on_lower=lambda: self.audio.set_global_volume(
                    lower_volume(self.audio.global_volume())
                ),
                on_raise=lambda: self.audio.set_global_volume(
                    raise_volume(self.audio.global_volume())
                ),
                on_back=lambda: self.flow.set_menu(back_target(self.flow.screen())),
            )
        )

    def _open_pause_menu(self) -> None:
        self._show_menu(
            build_pause_menu(
                on_continue=lambda: self.flow.set_menu(Menu.NONE),
                on_settings=lambda: self.flow.set_menu(Menu.SETTINGS),
                on_quit=lambda: self.flow.set_screen(Screen.TITLE),
            )
        )

    def _open_credits_menu(self) -> None:
        self._show_menu(build_credits_menu(lambda: self.flow.set_menu(Menu.MAIN)))
        if self.credits_music is not None:
            self.audio.play_music(self.credits_music, scope=Menu.CREDITS)

    # -- frame work --------------------------------------------------------

    def _roots(self) -> Iterator[UiRoot]:
        roots = [root for root in (self.screen_ui, self.menu_ui) if root is not None]
        return iter(sorted(roots, key=lambda root: root.z_index))

    def _layout(self, ui: UiRoot) -> None:
        ui.layout(*self.surface.get_size())

    def _window_size(self) -> Tuple[float, float]:
        width, height = self.surface.get_size()
        return (float(width), float(height))

    def _play_interaction(self, events: List[InteractionEvent]) -> None:
        assets = self.interaction_assets
        if assets is None:
            return
        for event in events:
            sound = assets.hover if event is InteractionEvent.HOVER else assets.click
            if sound is not None:
                self.audio.play_sound_effect(sound)

    def handle_event(self, event: pygame.event.Event) -> None:
        """React to one pygame event."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            self.held_keys.add(event.key)
            self.flow.press(event.key)
            if self.dev and event.key == TOGGLE_DEBUG_KEY:
                self.debug_ui = not self.debug_ui
        elif event.type == pygame.KEYUP:
            self.held_keys.discard(event.key)
        elif event.type == pygame.VIDEORESIZE:
            for root in self._roots():
                self._layout(root)
        elif event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            top = self.menu_ui if self.menu_ui is not None else self.screen_ui
            if top is not None:
                self._play_interaction(top.dispatch(event))

    def update(self, dt: float) -> None:
        """Apply state changes and advance the game by ``dt`` seconds."""
        for transition in self.flow.apply():
            if self.dev:
                log.info("transition: %s => %s", transition.exited, transition.entered)

        screen = self.flow.screen()
        if screen is Screen.SPLASH and self.splash is not None:
            if self.splash.update(dt):
                self.flow.set_screen(Screen.TITLE)
        elif screen is Screen.LOADING and self.load_error is None:
            try:
                self._load_gameplay_assets()
            except (FileNotFoundError, pygame.error) as error:
                log.error("cannot load gameplay assets: %s", error)
                self.load_error = error
            else:
                self.flow.finish_loading()
        elif screen is Screen.GAMEPLAY and self.level is not None and not self.flow.paused():
            self.level.update(dt, self.held_keys, self._window_size(), self._rng)

        self.audio.prune()

    def _draw_debug(self) -> None:
        for root in self._roots():
            for child in root.children:
                pygame.draw.rect(self.surface, DEBUG_OUTLINE_COLOR, child.rect, 1)
            for item in root.buttons():
                pygame.draw.rect(self.surface, DEBUG_OUTLINE_COLOR, item.rect, 1)

    def draw(self) -> None:
        """Draw the current frame and show it."""
        self.surface.fill(SPLASH_BACKGROUND_COLOR)
        if self.splash is not None:
            self.splash.draw(self.surface)
        if self.level is not None:
            self.level.draw(self.surface)

        overlay_drawn = False
        for root in self._roots():
            if self.flow.paused() and not overlay_drawn and root.z_index > PAUSE_OVERLAY_Z_INDEX:
                self._draw_pause_overlay()
                overlay_drawn = True
            root.draw(self.surface)
        if self.flow.paused() and not overlay_drawn:
            self._draw_pause_overlay()

        if self.debug_ui:
            self._draw_debug()
        pygame.display.flip()

    def _draw_pause_overlay(self) -> None:
        overlay = pygame.Surface(self.surface.get_size(), pygame.SRCALPHA)
        overlay.fill(PAUSE_OVERLAY_COLOR)
        self.surface.blit(overlay, (0, 0))

    def run(self) -> int:
        """Run the game until the window closes; return the exit status."""
        clock = pygame.time.Clock()
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                if not self.running:
                    break
                self.update(clock.tick(FRAME_RATE) / 1000.0)
                self.draw()
        finally:
            pygame.quit()
        return 0


def _window_size(text: str) -> Tuple[int, int]:
    width, _, height = text.lower().partition("x")
    try:
        size = (int(width), int(height))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if min(size) <= 0:
        raise argparse.ArgumentTypeError(f"window size must be positive, got {text!r}")
    return size


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="duckjam", description="A small duck game.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=DEFAULT_ASSET_DIR,
        help="directory holding the game's images and sounds",
    )
    parser.add_argument(
        "--size",
        type=_window_size,
        default=DEFAULT_SIZE,
        help="window size as WIDTHxHEIGHT",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="log state transitions and allow toggling the UI debug overlay",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    if args.dev:
        logging.basicConfig(level=logging.INFO)
    return App(args.assets, args.size, args.dev).run()