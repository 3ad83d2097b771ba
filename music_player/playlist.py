"""Playlist state: circular doubly linked ring of tracks with a current cursor (no UI)."""

import logging
import random
from typing import Iterator

from music_player.track import Track, format_duration

log = logging.getLogger("music_player.playlist")

FORWARD = "forward"
BACKWARD = "backward"


class _Node:
    """Ring link. next owns the following node; prev is only a traversal aid."""

    __slots__ = ("track", "next", "prev")

    def __init__(self, track: Track) -> None:
        self.track = track
        self.next: "_Node" = self
        self.prev: "_Node" = self


class Playlist:
    """
    Circular doubly linked playlist with a current track.
    Navigation wraps at both ends. Duplicate ids are not rejected; lookups act
    on the first match from head.
    """

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._current: _Node | None = None
        self._size = 0
        self._shuffled = False
        self._original_order: tuple[Track, ...] = ()

    def insert(self, track: Track) -> None:
        node = _Node(track)
        if self._head is None:
            self._head = node
            self._current = node
        else:
            tail = self._head.prev
            node.next = self._head
            node.prev = tail
            tail.next = node
            self._head.prev = node
        self._size += 1
        self._refresh_original_order()

    def advance(self, direction: str = FORWARD) -> Track | None:
        """Move current one step and return it. Wraps at both ends; None when empty."""
        if direction not in (FORWARD, BACKWARD):
            raise ValueError(f"unknown direction: {direction!r}")
        if self._current is None:
            return None
        if direction == FORWARD:
            self._current = self._current.next
        else:
            self._current = self._current.prev
        return self._current.track

    def next_track(self) -> Track | None:
        return self.advance(FORWARD)

    def prev_track(self) -> Track | None:
        return self.advance(BACKWARD)

    def current_track(self) -> Track | None:
        return self._current.track if self._current is not None else None

    def head_track(self) -> Track | None:
        return self._head.track if self._head is not None else None

    def select_by_id(self, track_id: str) -> Track | None:
        """Make the first track with this id current. None (current unchanged) if absent."""
        node = self._find(track_id)
        if node is None:
            return None
        self._current = node
        return node.track

    def remove(self, track_id: str) -> bool:
        """Unlink the first track with this id. Head/current move to its successor."""
        node = self._find(track_id)
        if node is None:
            return False
        if self._size == 1:
            self.clear()
            self._refresh_original_order()
            return True
        node.prev.next = node.next
        node.next.prev = node.prev
        if node is self._head:
            self._head = node.next
        if node is self._current:
            self._current = node.next
        node.next = node.prev = node
        self._size -= 1
        self._refresh_original_order()
        return True

    def clear(self) -> None:
        """Drop every track. Leaves the shuffled flag and the restore snapshot alone."""
        self._head = None
        self._current = None
        self._size = 0

    def reset(self) -> None:
        """Clear and forget shuffle state; use before rebuilding from a new catalog."""
        self.clear()
        self._shuffled = False
        self._original_order = ()

    def shuffle(self, rng: random.Random | None = None) -> None:
        """Fisher-Yates shuffle of the ring, keeping the current track selected."""
        if self._size <= 1:
            return
        rng = rng or random
        tracks = self.all_tracks()
        for i in range(len(tracks) - 1, 0, -1):
            j = rng.randrange(i + 1)
            tracks[i], tracks[j] = tracks[j], tracks[i]
        # Raised first so the rebuild does not overwrite the restore snapshot.
        self._shuffled = True
        self._rebuild(tracks)
        log.debug("Shuffled %d tracks", self._size)

    def restore_order(self) -> None:
        """Undo shuffle: rebuild in the pre-shuffle order, keeping the current track."""
        if not self._shuffled or not self._original_order:
            return
        self._rebuild(list(self._original_order))
        self._shuffled = False
        log.debug("Restored original order of %d tracks", self._size)

    def all_tracks(self) -> list[Track]:
        return list(self)

    def original_order(self) -> list[Track]:
        return list(self._original_order)

    def search(self, query: str) -> list[Track]:
        """Case-insensitive substring match on title, artist or genre."""
        term = query.lower()
        return [
            t for t in self
            if term in t.title.lower()
            or term in t.artist.lower()
            or (t.genre is not None and term in t.genre.lower())
        ]

    def by_genre(self, genre: str) -> list[Track]:
        wanted = genre.lower()
        return [t for t in self if t.genre is not None and t.genre.lower() == wanted]

    def total_duration(self) -> int:
        return sum(t.duration for t in self)

    def formatted_total_duration(self) -> str:
        return format_duration(self.total_duration())

    def is_empty(self) -> bool:
        return self._size == 0

    def is_shuffled(self) -> bool:
        return self._shuffled

    def _find(self, track_id: str) -> _Node | None:
        node = self._head
        for _ in range(self._size):
            if node.track.id == track_id:
                return node
            node = node.next
        return None

    def _rebuild(self, tracks: list[Track]) -> None:
        current = self.current_track()
        self.clear()
        for track in tracks:
            self.insert(track)
        if current is not None:
            self.select_by_id(current.id)

    def _refresh_original_order(self) -> None:
        if not self._shuffled:
            self._original_order = tuple(self)

    def __iter__(self) -> Iterator[Track]:
        node = self._head
        for _ in range(self._size):
            yield node.track
            node = node.next

    def __contains__(self, track_id: object) -> bool:
        return any(t.id == track_id for t in self)

    def __len__(self) -> int:
        return self._size
