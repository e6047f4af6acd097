"""todo: add, list and remove tasks persisted to a local JSON file."""

__version__ = "0.1.0"

__all__ = ["__version__"]
