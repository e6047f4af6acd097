"""Task Store persistence: the backing JSON file is read once and written once per run."""

import json
import logging
from pathlib import Path

from todo import config
from todo.errors import SerializationError, StorageReadError, StorageWriteError
from todo.models import TaskList

logger = logging.getLogger(__name__)

CORRUPT_STORE_WARNING = "Invalid JSON in todo file. Starting with empty list."


def encode(task_list: TaskList) -> str:
    return json.dumps(task_list.to_dict(), indent=2, ensure_ascii=False)


def _reject_duplicate_keys(pairs: list[tuple]) -> dict:
    data = {}
    for key, value in pairs:
        if key in data:
            raise ValueError(f"Duplicate key {key!r}")
        data[key] = value
    return data


def decode(contents: str) -> TaskList:
    """Parse store contents. Raises ValueError on malformed JSON or structure."""
    return TaskList.from_dict(json.loads(contents, object_pairs_hook=_reject_duplicate_keys))


def load(path: Path | None = None) -> TaskList:
    """Load the task list.

    Missing or blank file -> empty list. Undecodable content -> empty list and a
    warning; the bad content is overwritten by the next save. Any other read
    failure raises StorageReadError.
    """
    path = path or config.store_path()
    try:
        exists = path.exists()
    except OSError as e:
        raise StorageReadError(str(e), path) from e

    if not exists:
        logger.debug("No store at %s, starting empty", path)
        return TaskList()

    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StorageReadError(str(e), path) from e

    if not contents.strip():
        return TaskList()

    try:
        task_list = decode(contents)
    except (ValueError, RecursionError) as e:
        logger.debug("Failed to decode %s: %s", path, e)
        logger.warning(CORRUPT_STORE_WARNING)
        return TaskList()

    logger.debug("Loaded %d tasks from %s", len(task_list), path)
    return task_list


def save(task_list: TaskList, path: Path | None = None) -> None:
    """Overwrite the whole store with `task_list`."""
    path = path or config.store_path()
    try:
        payload = encode(task_list).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode tasks: {e}", path) from e

    try:
        path.write_bytes(payload)
    except OSError as e:
        raise StorageWriteError(str(e), path) from e

    logger.debug("Saved %d tasks to %s", len(task_list), path)


__all__ = ["CORRUPT_STORE_WARNING", "decode", "encode", "load", "save"]
