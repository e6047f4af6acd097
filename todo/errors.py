from pathlib import Path


class TodoError(Exception):
    """Base exception for todo domain errors."""

    pass


class StorageError(TodoError):
    """Raised when the backing store cannot be read or written."""

    def __init__(self, message: str, path: Path | None = None):
        super().__init__(message)
        self.path = path


class StorageReadError(StorageError):
    """Raised when the backing store exists but cannot be read."""

    pass


class StorageWriteError(StorageError):
    """Raised when the backing store cannot be written."""

    pass


class SerializationError(StorageError):
    """Raised when a task list cannot be encoded."""

    pass


class InvalidIndexError(TodoError):
    """Raised when a 1-based task index falls outside the list."""

    def __init__(self, index: int, upper: int, lower: int = 1):
        self.index = index
        self.lower = lower
        self.upper = upper
        super().__init__(
            f"Invalid index {index}. Please use a number between {lower} and {upper}"
        )
