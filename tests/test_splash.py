import pygame
import pytest

from duckjam.splash import (
    SPLASH_BACKGROUND_COLOR,
    SPLASH_DURATION_SECS,
    FadeInOut,
    SplashScreen,
)


def test_fade_is_transparent_at_both_ends():
    assert FadeInOut(t=0.0).alpha() == 0.0
    assert FadeInOut(t=SPLASH_DURATION_SECS).alpha() == pytest.approx(0.0)
    assert FadeInOut(t=SPLASH_DURATION_SECS * 2).alpha() == pytest.approx(0.0)


def test_fade_is_opaque_in_the_middle():
    assert FadeInOut(t=SPLASH_DURATION_SECS / 2).alpha() == 1.0


def test_fade_is_symmetric():
    for t in (0.05, 0.1, 0.2, 0.25):
        early = FadeInOut(t=t).alpha()
        late = FadeInOut(t=SPLASH_DURATION_SECS - t).alpha()
        assert early == pytest.approx(late)


def test_fade_in_rises():
    values = [FadeInOut(t=t).alpha() for t in (0.0, 0.1, 0.2, 0.3)]
    assert values == sorted(values)
    assert values[0] < values[-1]


def test_advance_moves_time():
    fade = FadeInOut()
    fade.advance(0.25)
    fade.advance(0.25)
    assert fade.t == pytest.approx(0.5)


def test_fade_rejects_zero_duration():
    with pytest.raises(ValueError):
        FadeInOut(fade_duration=0.0)


def test_splash_finishes_once():
    splash = SplashScreen(None)
    assert splash.update(0.9) is False
    assert splash.update(0.9) is True
    assert splash.update(0.9) is False


def test_splash_draws_background_and_image():
    image = pygame.Surface((10, 10))
    image.fill((255, 255, 255))
    splash = SplashScreen(image)
    surface = pygame.Surface((100, 100))
    splash.draw(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == SPLASH_BACKGROUND_COLOR
    splash.update(SPLASH_DURATION_SECS / 2)
    splash.draw(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == (255, 255, 255)
    assert tuple(surface.get_at((0, 0)))[:3] == SPLASH_BACKGROUND_COLOR