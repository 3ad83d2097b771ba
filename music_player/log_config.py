"""Configure application logging to a file and stderr."""

import logging
import os
import sys

from music_player.settings import LOG_DIR_ENV, LOG_DIR_NAME

# Set by setup_logging(); lets the host show where the log file lives.
LOG_FILE_PATH: str | None = None


def _log_dir() -> str:
    override = os.environ.get(LOG_DIR_ENV)
    if override:
        return override
    return os.path.join(os.environ.get("TEMP", os.path.expanduser("~")), LOG_DIR_NAME)


def setup_logging() -> None:
    """Configure package logger: file in log dir at DEBUG + stderr at INFO."""
    root = logging.getLogger("music_player")
    root.setLevel(logging.DEBUG)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    global LOG_FILE_PATH
    log_path = None
    try:
        log_dir = _log_dir()
        os.makedirs(log_dir, exist_ok=True)
        log_path = os.path.join(log_dir, "app.log")
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)
        LOG_FILE_PATH = log_path
    except OSError:
        log_path = None

    eh = logging.StreamHandler(sys.stderr)
    eh.setLevel(logging.INFO)
    eh.setFormatter(fmt)
    root.addHandler(eh)

    root.info("Logging started; file: %s", log_path or "(none)")
