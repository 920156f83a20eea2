# src/scoreforge/storage/__init__.py

"""Key-value persistence port and its adapters."""

from .base import KeyValueStore
from .memory import MemoryStore
from .sql import SqlKeyValueStore

__all__ = ["KeyValueStore", "MemoryStore", "SqlKeyValueStore"]
