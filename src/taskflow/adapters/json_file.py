"""JSON file key-value store.

All entries live in one JSON object on disk, mapping entry names to string
values. This plays the role a browser's local storage plays for a web
front end: one small, durable, per-user bag of strings.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from taskflow.repositories import KeyValueStore
from taskflow.utils.logger import get_logger


class JsonFileStore(KeyValueStore):
    """Key-value store backed by a single JSON file.

    Provides:
    - Missing file treated as an empty store
    - Unreadable file replaced on the next write
    - Automatic parent directory creation on first write
    - Atomic replace on write (temp file + rename)
    - Owner-only file permissions
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read_all(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        with open(self.path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self.path} must contain a JSON object")
        return data

    def get(self, key: str) -> str | None:
        """Return the value stored under *key*, or None if absent.

        Raises:
            json.JSONDecodeError: If the store file is not valid JSON
            ValueError: If the store file is not a JSON object
        """
        value = self._read_all().get(key)
        if value is None:
            return None
        return str(value)

    def set(self, key: str, value: str) -> None:
        """Store *value* under *key*, keeping other readable entries intact.

        A corrupt store file is discarded and rewritten from scratch.
        """
        try:
            data = self._read_all()
        except ValueError as e:
            get_logger("store").warning(
                "discarding unreadable store file %s: %s", self.path, e
            )
            data = {}
        data[key] = value

        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)
        self.path.chmod(0o600)
