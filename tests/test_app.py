from pathlib import Path

import pygame
import pytest

from duckjam.app import DEFAULT_ASSET_DIR, DEFAULT_SIZE, App, parse_args
from duckjam.splash import SPLASH_BACKGROUND_COLOR
from duckjam.states import Menu, Screen


@pytest.fixture
def make_app(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")

    def factory(dev=False):
        return App(tmp_path, (640, 480), dev)

    return factory


def _to_title(app):
    app.update(0.0)
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    app.update(0.0)


def _button(app, text):
    return next(b for b in app.menu_ui.buttons() if b.text == text)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.assets == DEFAULT_ASSET_DIR
    assert args.size == DEFAULT_SIZE
    assert args.dev is False


def test_parse_args_options():
    args = parse_args(["--assets", "data", "--size", "800x600", "--dev"])
    assert args.assets == Path("data")
    assert args.size == (800, 600)
    assert args.dev is True


@pytest.mark.parametrize("bad", ["800", "wide", "0x600"])
def test_parse_args_rejects_bad_size(bad):
    with pytest.raises(SystemExit):
        parse_args(["--size", bad])


def test_starts_on_splash(make_app):
    app = make_app()
    app.update(0.0)
    assert app.flow.screen() is Screen.SPLASH
    assert app.splash.alpha() == 0.0


def test_splash_ends_on_timer_and_opens_main_menu(make_app):
    app = make_app()
    app.update(0.0)
    app.update(2.0)
    app.update(0.0)
    assert app.flow.screen() is Screen.TITLE
    assert app.flow.menu() is Menu.MAIN
    assert [b.text for b in app.menu_ui.buttons()] == ["Play", "Settings", "Credits", "Exit"]
    assert app.splash is None


def test_escape_skips_splash(make_app):
    app = make_app()
    _to_title(app)
    assert app.flow.screen() is Screen.TITLE


def test_quit_event_stops_running(make_app):
    app = make_app()
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert app.running is False


def test_exit_button_stops_running(make_app):
    app = make_app()
    _to_title(app)
    _button(app, "Exit").action()
    assert app.running is False


def test_held_keys_follow_key_events(make_app):
    app = make_app()
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a))
    assert pygame.K_a in app.held_keys
    app.handle_event(pygame.event.Event(pygame.KEYUP, key=pygame.K_a))
    assert pygame.K_a not in app.held_keys


@pytest.mark.parametrize("dev", [True, False])
def test_debug_toggle_only_in_dev(make_app, dev):
    app = make_app(dev=dev)
    app.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKQUOTE))
    assert app.debug_ui is dev


def test_play_without_assets_stays_loading(make_app):
    app = make_app()
    _to_title(app)
    _button(app, "Play").action()
    app.update(0.0)
    app.update(0.0)
    assert app.flow.screen() is Screen.LOADING
    assert isinstance(app.load_error, FileNotFoundError)
    assert app.screen_ui.children[0].text == "Loading..."
    assert app.menu_ui is None


def test_clicking_settings_button_opens_settings(make_app):
    app = make_app()
    _to_title(app)
    target = _button(app, "Settings")
    centre = target.rect.center
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=centre, button=1))
    app.handle_event(pygame.event.Event(pygame.MOUSEBUTTONUP, pos=centre, button=1))
    app.update(0.0)
    assert app.flow.menu() is Menu.SETTINGS
    assert [b.text for b in app.menu_ui.buttons()] == ["-", "+", "Back"]


def test_settings_buttons_change_volume(make_app):
    app = make_app()
    _to_title(app)
    app.flow.set_menu(Menu.SETTINGS)
    app.update(0.0)
    before = app.audio.global_volume()
    _button(app, "-").action()
    assert app.audio.global_volume() < before
    _button(app, "+").action()
    assert app.audio.global_volume() == pytest.approx(before)


def test_credits_back_returns_to_main(make_app):
    app = make_app()
    _to_title(app)
    _button(app, "Credits").action()
    app.update(0.0)
    assert app.flow.menu() is Menu.CREDITS
    _button(app, "Back").action()
    app.update(0.0)
    assert app.flow.menu() is Menu.MAIN


def test_draw_fills_background(make_app):
    app = make_app()
    app.update(0.0)
    app.draw()
    assert tuple(app.surface.get_at((0, 0)))[:3] == SPLASH_BACKGROUND_COLOR