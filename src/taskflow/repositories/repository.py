"""Storage abstraction layer for TaskFlow.

This module defines the port the persistence adapter talks to, following the
Ports & Adapters pattern: the task logic never touches a concrete store, it
receives something that can ``get`` and ``set`` string values by key.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """Abstract base class for a synchronous string key-value store.

    Implementations may raise from either method when the underlying
    storage is unavailable; callers decide how to recover.
    """

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Read the value stored under *key*.

        Args:
            key: Entry name

        Returns:
            The stored string, or None when the entry is absent

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("KeyValueStore.get() must be implemented by adapter")

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Write *value* under *key*, replacing any previous value.

        Args:
            key: Entry name
            value: String payload

        Raises:
            NotImplementedError: Must be implemented by concrete adapter
        """
        raise NotImplementedError("KeyValueStore.set() must be implemented by adapter")
