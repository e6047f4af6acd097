# todo/config.py

from pathlib import Path

DEFAULT_CONFIG = {
    "app_name": "todo",
    "store_file": "todo.json",  # Relative: opened in whatever the cwd is at call time.
    "logging_level": "WARNING",
}


def store_path() -> Path:
    """Return the backing store path for this invocation."""
    return Path(DEFAULT_CONFIG["store_file"])
