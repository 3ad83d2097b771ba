"""Track record and duration formatting (no UI)."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Track:
    """One catalog entry. duration is whole seconds."""

    id: str
    title: str
    artist: str
    duration: int
    audio_url: str
    cover_url: str | None = None
    genre: str | None = None

    def formatted_duration(self) -> str:
        minutes, seconds = divmod(self.duration, 60)
        return f"{minutes}:{seconds:02d}"


def format_duration(total_seconds: int) -> str:
    """Return 'H:MM:SS' when there is at least one hour, else 'M:SS'."""
    hours, rest = divmod(total_seconds, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"


def format_time(seconds: float) -> str:
    """Playback position as 'M:SS' (fraction dropped)."""
    mins, secs = divmod(int(seconds), 60)
    return f"{mins}:{secs:02d}"


def track_from_record(record: dict[str, Any]) -> Track:
    """
    Build a Track from a store record.
    Accepts the store's camelCase keys ('_id', 'audioUrl', 'coverUrl') or the
    snake_case field names. Raises KeyError if a required field is missing.
    """
    track_id = record["_id"] if "_id" in record else record["id"]
    audio_url = record["audioUrl"] if "audioUrl" in record else record["audio_url"]
    return Track(
        id=str(track_id),
        title=record["title"],
        artist=record["artist"],
        duration=int(record["duration"]),
        audio_url=audio_url,
        cover_url=record.get("coverUrl", record.get("cover_url")),
        genre=record.get("genre"),
    )
