import logging
import sys

from todo.config import DEFAULT_CONFIG

_handler: logging.Handler | None = None


class _LevelPrefixFormatter(logging.Formatter):
    """Render records as `Warning: message`."""

    def format(self, record: logging.LogRecord) -> str:
        message = f"{record.levelname.title()}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(level: str | None = None) -> None:
    """Route `todo.*` logs to the current stderr. Safe to call once per invocation."""
    global _handler

    pkg_logger = logging.getLogger("todo")
    if _handler is not None:
        pkg_logger.removeHandler(_handler)

    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_LevelPrefixFormatter())
    pkg_logger.addHandler(_handler)

    level_name = (level or DEFAULT_CONFIG["logging_level"]).upper()
    pkg_logger.setLevel(getattr(logging, level_name, logging.WARNING))


def reset_logging() -> None:
    """Detach the handler installed by setup_logging."""
    global _handler

    pkg_logger = logging.getLogger("todo")
    if _handler is not None:
        pkg_logger.removeHandler(_handler)
        _handler = None
    pkg_logger.setLevel(logging.NOTSET)
