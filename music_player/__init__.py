"""Music player core: circular playlist, track records, playback session."""

from music_player.playlist import BACKWARD, FORWARD, Playlist
from music_player.session import AudioOutput, PlayerSession
from music_player.track import Track, format_duration, track_from_record
from music_player.version import __version__

__all__ = [
    'AudioOutput',
    'BACKWARD',
    'FORWARD',
    'PlayerSession',
    'Playlist',
    'Track',
    '__version__',
    'format_duration',
    'track_from_record',
]
