"""Adapters module - KeyValueStore implementations.

This package contains concrete implementations (adapters) for the storage port:
- json_file: Local JSON file storage (default)
- memory: Process-local dictionary storage
"""

from .json_file import JsonFileStore
from .memory import InMemoryStore

__all__ = [
    "JsonFileStore",
    "InMemoryStore",
]
