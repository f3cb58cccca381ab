"""Key-value storage backends for persisted notes.

Both backends mimic a browser's origin-scoped local storage: string keys,
string values, whole-value overwrites, and a total size quota.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

DEFAULT_QUOTA_BYTES = 5 * 1024 * 1024


class StorageError(Exception):
    """Base exception for storage errors."""
    pass


class StorageUnavailableError(StorageError):
    """Storage is disabled or cannot be read or written."""
    pass


class StorageQuotaExceededError(StorageError):
    """A write would exceed the storage quota."""
    pass


class KeyValueStorage(Protocol):
    """The subset of the local-storage API the notes app relies on."""

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...


def _check_quota(items: dict[str, str], quota: int | None) -> None:
    """Raise if the encoded size of all keys and values exceeds ``quota``."""
    if quota is None:
        return
    size = sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in items.items())
    if size > quota:
        raise StorageQuotaExceededError(
            f"Storage quota exceeded: {size} bytes > {quota} bytes"
        )


class MemoryStorage:
    """In-process storage. Set ``available = False`` to simulate disabled storage."""

    def __init__(self, quota_bytes: int | None = DEFAULT_QUOTA_BYTES) -> None:
        self._items: dict[str, str] = {}
        self._quota = quota_bytes
        self.available = True

    def _ensure_available(self) -> None:
        if not self.available:
            raise StorageUnavailableError("Storage is disabled")

    def get_item(self, key: str) -> str | None:
        self._ensure_available()
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._ensure_available()
        _check_quota({**self._items, key: value}, self._quota)
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._ensure_available()
        self._items.pop(key, None)


class JsonFileStorage:
    """Storage backed by a JSON object on disk (``{key: value}``)."""

    def __init__(
        self, path: Path, quota_bytes: int | None = DEFAULT_QUOTA_BYTES
    ) -> None:
        self._path = Path(path)
        self._quota = quota_bytes

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        """Read every item. A missing file is an empty store."""
        if not self._path.exists():
            return {}
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageUnavailableError(
                f"Cannot read storage file {self._path}: {e}"
            ) from e
        if not isinstance(raw, dict):
            raise StorageUnavailableError(
                f"Storage file {self._path} does not hold a JSON object"
            )
        bad_keys = [k for k, v in raw.items() if not isinstance(v, str)]
        if bad_keys:
            raise StorageUnavailableError(
                f"Storage file {self._path} holds non-string values under {bad_keys}"
            )
        return raw

    def _write(self, items: dict[str, str]) -> None:
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(items, ensure_ascii=False), encoding="utf-8")
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageUnavailableError(
                f"Cannot write storage file {self._path}: {e}"
            ) from e

    def get_item(self, key: str) -> str | None:
        return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read()
        items[key] = value
        _check_quota(items, self._quota)
        self._write(items)
        logger.debug("Wrote %d chars under %r to %s", len(value), key, self._path)

    def remove_item(self, key: str) -> None:
        items = self._read()
        if items.pop(key, None) is not None:
            self._write(items)
