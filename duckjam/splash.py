"""The splash screen shown briefly at startup."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pygame

from duckjam.timer import Timer, TimerMode

SPLASH_BACKGROUND_COLOR = (40, 40, 40)
SPLASH_DURATION_SECS = 1.8
SPLASH_FADE_DURATION_SECS = 0.6
SPLASH_IMAGE = Path("images/splash.png")
IMAGE_WIDTH_FRACTION = 0.7


@dataclass
class FadeInOut:
    """A trapezoid-shaped fade: in, hold at full opacity, then out."""

    total_duration: float = SPLASH_DURATION_SECS
    fade_duration: float = SPLASH_FADE_DURATION_SECS
    t: float = 0.0

    def __post_init__(self) -> None:
        if self.total_duration <= 0 or self.fade_duration <= 0:
            raise ValueError("fade durations must be positive")

    def alpha(self) -> float:
        t = min(max(self.t / self.total_duration, 0.0), 1.0)
        fade = self.fade_duration / self.total_duration
        return min((1.0 - abs(2.0 * t - 1.0)) / fade, 1.0)

    def advance(self, dt: float) -> None:
        self.t += dt


class SplashScreen:
    """Fades an image in and out and reports when to move on."""

    def __init__(self, image: Optional[pygame.Surface]) -> None:
        self.image = image
        self.fade = FadeInOut()
        self.timer = Timer(SPLASH_DURATION_SECS, TimerMode.ONCE)

    def update(self, dt: float) -> bool:
        """Advance by ``dt`` seconds; True on the frame the splash is over."""
        self.fade.advance(dt)
        self.timer.tick(dt)
        return self.timer.just_finished()

    def alpha(self) -> float:
        return self.fade.alpha()

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(SPLASH_BACKGROUND_COLOR)
        if self.image is None:
            return
        width = max(1, round(surface.get_width() * IMAGE_WIDTH_FRACTION))
        source_width, source_height = self.image.get_size()
        height = max(1, round(width * source_height / max(source_width, 1)))
        try:
            scaled = pygame.transform.smoothscale(self.image, (width, height))
        except ValueError:
            scaled = pygame.transform.scale(self.image, (width, height))
        scaled.set_alpha(round(self.alpha() * 255))
        surface.blit(scaled, scaled.get_rect(center=surface.get_rect().center))