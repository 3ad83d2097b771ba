"""Track catalog: built-in seed tracks and read-only JSON catalog files (no UI)."""

import json
import logging
import os

from music_player.track import Track, track_from_record

log = logging.getLogger("music_player.catalog")

_PLACEHOLDER_AUDIO = "https://www.soundjay.com/misc/sounds/bell-ringing-05.wav"

# (title, artist, duration seconds, genre)
DEFAULT_TRACKS = [
    ("Shape of You", "Ed Sheeran", 233, "Pop"),
    ("Blinding Lights", "The Weeknd", 200, "Pop"),
    ("Someone Like You", "Adele", 285, "Soul"),
    ("Uptown Funk", "Mark Ronson ft. Bruno Mars", 270, "Funk"),
    ("Rolling in the Deep", "Adele", 228, "Soul"),
    ("Bad Guy", "Billie Eilish", 194, "Alternative"),
    ("Thinking Out Loud", "Ed Sheeran", 281, "Pop"),
    ("Watermelon Sugar", "Harry Styles", 174, "Pop"),
    ("Levitating", "Dua Lipa", 203, "Pop"),
    ("Stay", "The Kid LAROI & Justin Bieber", 141, "Pop"),
    ("Perfect", "Ed Sheeran", 263, "Pop"),
    ("Anti-Hero", "Taylor Swift", 200, "Pop"),
]


def default_catalog() -> list[Track]:
    """Seed tracks with ids '1', '2', ... in listed order."""
    return [
        Track(
            id=str(i),
            title=title,
            artist=artist,
            duration=duration,
            audio_url=_PLACEHOLDER_AUDIO,
            genre=genre,
        )
        for i, (title, artist, duration, genre) in enumerate(DEFAULT_TRACKS, start=1)
    ]


def load_catalog(path: str) -> list[Track]:
    """
    Read a JSON array of store records from path.
    Unreadable or invalid files give an empty list; bad records are skipped.
    """
    if not os.path.isfile(path):
        log.warning("Catalog not found: %s", path)
        return []
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        log.warning("Could not read catalog %s: %s", path, e)
        return []
    if not isinstance(data, list):
        log.warning("Catalog %s is not a list of tracks", path)
        return []

    tracks: list[Track] = []
    for i, record in enumerate(data):
        if not isinstance(record, dict):
            log.warning("Skipping catalog entry %d: not an object", i)
            continue
        try:
            tracks.append(track_from_record(record))
        except (KeyError, TypeError, ValueError) as e:
            log.warning("Skipping catalog entry %d: %r", i, e)
    log.debug("Loaded %d tracks from %s", len(tracks), path)
    return tracks
