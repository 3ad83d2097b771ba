"""Drive an audio output from a Playlist: transport, repeat, shuffle, volume, keys."""

from __future__ import annotations

import logging
import random
from typing import Any, Callable, Iterable, Protocol

from music_player.playlist import Playlist
from music_player.settings import (
    DEFAULT_RATE,
    DEFAULT_VOLUME,
    KEY_BINDINGS,
    PLAYBACK_RATES,
    VOLUME_STEP,
)
from music_player.track import Track, format_time, track_from_record

log = logging.getLogger("music_player.session")


class AudioOutput(Protocol):
    """Whatever plays a locator. The host reports the end of a track via PlayerSession.on_ended()."""

    def load(self, url: str) -> None: ...

    def play(self) -> None: ...

    def pause(self) -> None: ...

    def seek(self, seconds: float) -> None: ...

    def set_volume(self, volume: float) -> None: ...

    def set_rate(self, rate: float) -> None: ...


class PlayerSession:
    """One playback session over one Playlist. Single owner; calls must not overlap."""

    def __init__(
        self,
        audio: AudioOutput,
        playlist: Playlist | None = None,
        on_track_change: Callable[[Track | None], None] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._audio = audio
        self._playlist = playlist if playlist is not None else Playlist()
        self._on_track_change = on_track_change
        self._rng = rng
        self._playing = False
        self._repeat = False
        self._volume = DEFAULT_VOLUME
        self._rate = DEFAULT_RATE
        self._position = 0.0

    @property
    def playlist(self) -> Playlist:
        return self._playlist

    @property
    def playing(self) -> bool:
        return self._playing

    @property
    def repeat(self) -> bool:
        return self._repeat

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def rate(self) -> float:
        return self._rate

    @property
    def position(self) -> float:
        return self._position

    def current_track(self) -> Track | None:
        return self._playlist.current_track()

    def load_tracks(self, tracks: Iterable[Track | dict[str, Any]]) -> None:
        """
        Rebuild the playlist from a fresh catalog, in order.
        The previously current track stays current if it is still in the catalog.
        A record that fails conversion raises before the playlist is touched.
        """
        converted = [
            item if isinstance(item, Track) else track_from_record(item)
            for item in tracks
        ]
        previous = self._playlist.current_track()
        self._playlist.reset()
        for track in converted:
            self._playlist.insert(track)
        if previous is not None:
            self._playlist.select_by_id(previous.id)
        log.info(
            "Loaded %d tracks (%s)",
            len(self._playlist),
            self._playlist.formatted_total_duration(),
        )
        self._load_current()

    def toggle_play(self) -> bool:
        """Play or pause the current track. Returns the new playing state."""
        if self._playlist.current_track() is None:
            return False
        if self._playing:
            self._audio.pause()
        else:
            self._audio.play()
        self._playing = not self._playing
        return self._playing

    def next(self) -> Track | None:
        track = self._playlist.next_track()
        if track is not None:
            self._load_current()
        return track

    def previous(self) -> Track | None:
        track = self._playlist.prev_track()
        if track is not None:
            self._load_current()
        return track

    def select(self, track_id: str) -> Track | None:
        track = self._playlist.select_by_id(track_id)
        if track is None:
            log.debug("No track with id %s", track_id)
            return None
        self._load_current()
        return track

    def on_ended(self) -> None:
        """Audio output finished the current track."""
        if self._playlist.current_track() is None:
            return
        if self._repeat:
            self._position = 0.0
            self._audio.seek(0)
            self._audio.play()
        else:
            self.next()

    def on_time_update(self, seconds: float) -> None:
        self._position = seconds

    def toggle_shuffle(self) -> bool:
        if self._playlist.is_shuffled():
            self._playlist.restore_order()
        else:
            self._playlist.shuffle(self._rng)
        return self._playlist.is_shuffled()

    def toggle_repeat(self) -> bool:
        self._repeat = not self._repeat
        return self._repeat

    def set_volume(self, volume: float) -> float:
        self._volume = round(min(1.0, max(0.0, volume)), 2)
        self._audio.set_volume(self._volume)
        return self._volume

    def volume_up(self) -> float:
        return self.set_volume(self._volume + VOLUME_STEP)

    def volume_down(self) -> float:
        return self.set_volume(self._volume - VOLUME_STEP)

    def set_playback_rate(self, rate: float) -> None:
        if rate not in PLAYBACK_RATES:
            raise ValueError(f"unsupported playback rate: {rate}")
        self._rate = rate
        self._audio.set_rate(rate)

    def seek_percent(self, percent: float) -> float | None:
        """Seek to percent (0-100) of the current track. Returns the new position in seconds."""
        track = self._playlist.current_track()
        if track is None:
            return None
        percent = min(100.0, max(0.0, percent))
        self._position = percent / 100 * track.duration
        self._audio.seek(self._position)
        return self._position

    def handle_key(self, code: str) -> bool:
        """Run the action bound to a key code. Returns False for unbound keys."""
        action = KEY_BINDINGS.get(code)
        if action is None:
            return False
        getattr(self, action)()
        return True

    def visible_tracks(self, query: str = "") -> list[Track]:
        """Tracks for the list view: everything for a blank query, else search results."""
        query = query.strip()
        if not query:
            return self._playlist.all_tracks()
        return self._playlist.search(query)

    def summary(self) -> str:
        count = len(self._playlist)
        noun = "track" if count == 1 else "tracks"
        return f"{count} {noun} • {self._playlist.formatted_total_duration()}"

    def position_label(self) -> str:
        track = self._playlist.current_track()
        length = track.duration if track is not None else 0
        return f"{format_time(self._position)} / {format_time(length)}"

    def _load_current(self) -> None:
        track = self._playlist.current_track()
        self._position = 0.0
        if track is None:
            if self._playing:
                self._audio.pause()
                self._playing = False
        else:
            log.debug("Loading %s - %s", track.artist, track.title)
            self._audio.load(track.audio_url)
            self._audio.set_volume(self._volume)
            self._audio.set_rate(self._rate)
            if self._playing:
                self._audio.play()
        if self._on_track_change:
            self._on_track_change(track)
