"""Storage backends for users and courses."""

from .base import BaseStorage
from .storage import Storage
from .storage_factory import get_storage

__all__ = ["BaseStorage", "Storage", "get_storage"]
