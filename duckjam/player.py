"""The player character, its assets and the level it lives in."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Collection, List, Optional, Tuple, Union

import pygame

from duckjam.animation import PlayerAnimation, sprite_flip, state_for_intent
from duckjam.audio import AudioPlayer, Playable
from duckjam.movement import MovementController, Vec2, apply_movement, screen_wrap
from duckjam.states import Screen
from duckjam.timer import Seconds

PathLike = Union[str, Path]

TILE_SIZE = 32
ATLAS_COLUMNS = 6
ATLAS_ROWS = 2
ATLAS_PADDING = 1
PLAYER_SCALE = 8
PLAYER_MAX_SPEED = 400.0

PLAYER_IMAGE = Path("images/ducky.png")
STEP_SOUNDS = (
    Path("audio/sound_effects/step2.ogg"),
    Path("audio/sound_effects/step3.ogg"),
    Path("audio/sound_effects/step4.ogg"),
)
LEVEL_MUSIC = Path("audio/music/Fluffing A Duck.ogg")

UP_KEYS = (pygame.K_w, pygame.K_UP)
DOWN_KEYS = (pygame.K_s, pygame.K_DOWN)
LEFT_KEYS = (pygame.K_a, pygame.K_LEFT)
RIGHT_KEYS = (pygame.K_d, pygame.K_RIGHT)
MOVEMENT_KEYS = UP_KEYS + DOWN_KEYS + LEFT_KEYS + RIGHT_KEYS


def directional_intent(pressed: Collection[int]) -> Vec2:
    """Turn the held key codes into a unit (or zero) movement direction."""

    def held(keys: Tuple[int, ...]) -> bool:
        return any(key in pressed for key in keys)

    x = float(held(RIGHT_KEYS)) - float(held(LEFT_KEYS))
    y = float(held(UP_KEYS)) - float(held(DOWN_KEYS))
    length = math.hypot(x, y)
    if length == 0.0:
        return (0.0, 0.0)
    return (x / length, y / length)


def atlas_rect(index: int) -> pygame.Rect:
    """The area of sprite ``index`` in the player's texture atlas."""
    count = ATLAS_COLUMNS * ATLAS_ROWS
    if not 0 <= index < count:
        raise IndexError(f"atlas index {index} out of range 0..{count - 1}")
    row, column = divmod(index, ATLAS_COLUMNS)
    stride = TILE_SIZE + ATLAS_PADDING
    return pygame.Rect(column * stride, row * stride, TILE_SIZE, TILE_SIZE)


def _require(asset_dir: PathLike, relative: Path) -> Path:
    path = Path(asset_dir) / relative
    if not path.is_file():
        raise FileNotFoundError(f"missing asset: {path}")
    return path


@dataclass
class PlayerAssets:
    ducky: pygame.Surface
    steps: List[Playable] = field(default_factory=list)

    @classmethod
    def load(cls, asset_dir: PathLike) -> PlayerAssets:
        image_path = _require(asset_dir, PLAYER_IMAGE)
        step_paths = [_require(asset_dir, step) for step in STEP_SOUNDS]
        return cls(
            ducky=pygame.image.load(str(image_path)),
            steps=[pygame.mixer.Sound(str(path)) for path in step_paths],
        )


@dataclass
class LevelAssets:
    music: Playable

    @classmethod
    def load(cls, asset_dir: PathLike) -> LevelAssets:
        return cls(music=pygame.mixer.Sound(str(_require(asset_dir, LEVEL_MUSIC))))


class Player:
    """The duck: movement, animation and where it is drawn."""

    def __init__(self, max_speed: float = PLAYER_MAX_SPEED) -> None:
        self.position: Vec2 = (0.0, 0.0)
        self.controller = MovementController(max_speed=max_speed)
        self.animation = PlayerAnimation()
        self.flip_x = False

    def record_input(self, intent: Vec2) -> None:
        self.controller.intent = intent

    def tick_animation(self, delta: Seconds) -> None:
        self.animation.update_timer(delta)

    def update_animation(self) -> None:
        """Face the movement direction and pick idling or walking."""
        self.flip_x = sprite_flip(self.controller.intent[0], self.flip_x)
        self.animation.update_state(state_for_intent(self.controller.intent))

    def apply_movement(self, dt: float, window_size: Vec2) -> None:
        moved = apply_movement(self.position, self.controller, dt)
        self.position = screen_wrap(moved, window_size)

    def step_sound_due(self) -> bool:
        return self.animation.step_sound_due()

    def atlas_index(self) -> int:
        return self.animation.atlas_index()

    def draw(self, surface: pygame.Surface, assets: PlayerAssets) -> None:
        """Draw the current frame centred on the player's world position."""
        frame = assets.ducky.subsurface(atlas_rect(self.atlas_index()))
        side = TILE_SIZE * PLAYER_SCALE
        sprite = pygame.transform.scale(frame, (side, side))
        if self.flip_x:
            sprite = pygame.transform.flip(sprite, True, False)
        x, y = self.position
        centre = (
            round(surface.get_width() / 2 + x),
            round(surface.get_height() / 2 - y),
        )
        surface.blit(sprite, sprite.get_rect(center=centre))


class Level:
    """The gameplay level: the player plus its background music."""

    MUSIC_SCOPE = Screen.GAMEPLAY

    def __init__(
        self,
        player_assets: PlayerAssets,
        level_assets: LevelAssets,
        audio: AudioPlayer,
    ) -> None:
        self.player_assets = player_assets
        self.level_assets = level_assets
        self.audio = audio
        self.player = Player(PLAYER_MAX_SPEED)
        audio.play_music(level_assets.music, scope=self.MUSIC_SCOPE)

    def update(
        self,
        dt: float,
        pressed: Collection[int],
        window_size: Vec2,
        rng: Optional[Any] = None,
    ) -> None:
        """Advance the level by one frame of ``dt`` seconds."""
        chooser = rng if rng is not None else random
        self.player.tick_animation(dt)
        self.player.record_input(directional_intent(pressed))
        self.player.update_animation()
        if self.player.step_sound_due():
            self.audio.play_sound_effect(chooser.choice(self.player_assets.steps))
        self.player.apply_movement(dt, window_size)

    def draw(self, surface: pygame.Surface) -> None:
        self.player.draw(surface, self.player_assets)

    def close(self) -> None:
        """Stop everything the level started."""
        self.audio.stop_scope(self.MUSIC_SCOPE)