"""Storage port definitions."""

from .repository import KeyValueStore

__all__ = ["KeyValueStore"]
