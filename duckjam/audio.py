"""Music and sound-effect playback with a shared global volume."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Hashable, List, Optional, Protocol


class Channel(Protocol):
    def set_volume(self, value: float) -> None: ...

    def stop(self) -> None: ...

    def get_busy(self) -> bool: ...


class Playable(Protocol):
    def play(self, loops: int = 0) -> Optional[Channel]: ...


class AudioCategory(enum.Enum):
    MUSIC = "music"
    SOUND_EFFECT = "sound_effect"


@dataclass
class _Playback:
    channel: Channel
    category: AudioCategory
    scope: Optional[Hashable]
    volume: float = 1.0


class AudioPlayer:
    """Starts sounds and keeps running ones in step with the global volume.

    Music loops until its scope is stopped; sound effects are dropped once
    they have finished playing.
    """

    def __init__(self, global_volume: float = 1.0) -> None:
        self._global_volume = self._checked(global_volume)
        self._playing: List[_Playback] = []

    @staticmethod
    def _checked(volume: float) -> float:
        if volume < 0:
            raise ValueError(f"volume must not be negative, got {volume!r}")
        return float(volume)

    def __len__(self) -> int:
        return len(self._playing)

    def global_volume(self) -> float:
        return self._global_volume

    def set_global_volume(self, volume: float) -> None:
        """Change the global volume and apply it to everything already playing."""
        self._global_volume = self._checked(volume)
        for playback in self._playing:
            playback.channel.set_volume(self._global_volume * playback.volume)

    def _start(
        self,
        sound: Playable,
        category: AudioCategory,
        loops: int,
        scope: Optional[Hashable],
    ) -> Optional[Channel]:
        channel = sound.play(loops=loops)
        if channel is None:
            return None
        playback = _Playback(channel=channel, category=category, scope=scope)
        channel.set_volume(self._global_volume * playback.volume)
        self._playing.append(playback)
        return channel

    def play_music(self, sound: Playable, scope: Optional[Hashable] = None) -> Optional[Channel]:
        """Loop ``sound`` until :meth:`stop_scope` is called with ``scope``."""
        return self._start(sound, AudioCategory.MUSIC, -1, scope)

    def play_sound_effect(self, sound: Playable) -> Optional[Channel]:
        """Play ``sound`` once."""
        return self._start(sound, AudioCategory.SOUND_EFFECT, 0, None)

    def stop_scope(self, scope: Hashable) -> int:
        """Stop every sound started with ``scope``; return how many were stopped."""
        kept: List[_Playback] = []
        stopped = 0
        for playback in self._playing:
            if playback.scope is not None and playback.scope == scope:
                playback.channel.stop()
                stopped += 1
            else:
                kept.append(playback)
        self._playing = kept
        return stopped

    def prune(self) -> int:
        """Forget sounds that have finished; return how many were removed."""
        before = len(self._playing)
        self._playing = [p for p in self._playing if p.channel.get_busy()]
        return before - len(self._playing)

    def count(self, category: Optional[AudioCategory] = None) -> int:
        """Number of sounds playing, optionally limited to one category."""
        if category is None:
            return len(self._playing)
        return sum(1 for p in self._playing if p.category is category)