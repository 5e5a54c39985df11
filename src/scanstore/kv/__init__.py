"""Ordered key-value stores."""

from .base import OrderedKeyValueStore
from .memory import MemoryKeyValueStore
from .sqlite import SQLiteKeyValueStore

__all__ = ["MemoryKeyValueStore", "OrderedKeyValueStore", "SQLiteKeyValueStore"]
