"""Storage backends."""

from .base import Storage
from .facade import ListFacade
from .ordered import OrderedStorage

__all__ = ["ListFacade", "OrderedStorage", "Storage"]
