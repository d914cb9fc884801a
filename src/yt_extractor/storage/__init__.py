"""Output adapters for extraction results."""

from .json_storage import JsonStorage, OutputMode

__all__ = ["JsonStorage", "OutputMode"]
