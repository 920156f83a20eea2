# src/scoreforge/storage/memory.py

"""In-memory key-value store."""

from __future__ import annotations

from scoreforge.exceptions import StorageUnavailableError

# Marks a staged delete.
_DELETED = object()


class MemoryStore:
    """Dict-backed store for tests and throwaway sessions.

    Writes are staged and readable straight away, but only become committed
    on :meth:`flush`; a failed flush discards them, as the SQL store's
    rollback does. Setting ``available`` to False makes every operation
    raise ``StorageUnavailableError``, which simulates a lost backend.
    """

    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})
        self._staged: dict[str, object] = {}
        self.flush_count = 0
        self.available = True

    def _check(self, operation: str, key: str | None = None) -> None:
        if not self.available:
            raise StorageUnavailableError(operation, key, "memory store offline")

    def _lookup(self, key: str, default):
        if key in self._staged:
            value = self._staged[key]
            return default if value is _DELETED else value
        return self._values.get(key, default)

    def get(self, key: str, default: str = "") -> str:
        self._check("get", key)
        return self._lookup(key, default)

    def set(self, key: str, value: str) -> None:
        self._check("set", key)
        self._staged[key] = value

    def delete(self, key: str) -> None:
        self._check("delete", key)
        self._staged[key] = _DELETED

    def flush(self) -> None:
        try:
            self._check("flush")
        except StorageUnavailableError:
            self._staged.clear()
            raise
        for key, value in self._staged.items():
            if value is _DELETED:
                self._values.pop(key, None)
            else:
                self._values[key] = value
        self._staged.clear()
        self.flush_count += 1

    def __contains__(self, key: str) -> bool:
        return self._lookup(key, None) is not None

    def keys(self) -> list[str]:
        return [key for key in {**self._values, **self._staged} if key in self]
