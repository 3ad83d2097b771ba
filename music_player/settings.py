"""Player defaults and key bindings."""

# Volume is a 0..1 gain; arrow keys move it by VOLUME_STEP.
DEFAULT_VOLUME = 0.7
VOLUME_STEP = 0.1

PLAYBACK_RATES = (0.5, 0.75, 1.0, 1.25, 1.5, 2.0)
DEFAULT_RATE = 1.0

# Key code -> PlayerSession method name
KEY_BINDINGS = {
    "Space": "toggle_play",
    "ArrowRight": "next",
    "ArrowLeft": "previous",
    "ArrowUp": "volume_up",
    "ArrowDown": "volume_down",
}

# Overrides the log directory used by log_config.setup_logging().
LOG_DIR_ENV = "MUSIC_PLAYER_LOG_DIR"
LOG_DIR_NAME = "MusicPlayer"
