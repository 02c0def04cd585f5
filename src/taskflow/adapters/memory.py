"""In-memory key-value store."""

from __future__ import annotations

from taskflow.repositories import KeyValueStore


class InMemoryStore(KeyValueStore):
    """Dict-backed store for embedding and tests.

    Args:
        initial: Optional entries to start with
        fail_writes: When True, every ``set`` raises OSError, mimicking a
            full or unavailable backing store
    """

    def __init__(self, initial: dict[str, str] | None = None, *, fail_writes: bool = False):
        self._data: dict[str, str] = dict(initial or {})
        self.fail_writes = fail_writes

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise OSError("store is not writable")
        self._data[key] = value

    def clear(self) -> None:
        """Remove every entry."""
        self._data.clear()
