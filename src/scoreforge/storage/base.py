# src/scoreforge/storage/base.py

"""The key-value persistence port consumed by the high score service."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """A durable, string-keyed, string-valued store.

    Writes may be staged until :meth:`flush` is called; ``flush`` is the
    durability point. Implementations raise
    :class:`~scoreforge.exceptions.StorageUnavailableError` when the backend
    cannot be reached.
    """

    def get(self, key: str, default: str = "") -> str:
        """Return the value stored at ``key``, or ``default`` if absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` at ``key``, replacing any previous value."""
        ...

    def delete(self, key: str) -> None:
        """Remove ``key``. Deleting a missing key is not an error."""
        ...

    def flush(self) -> None:
        """Make all previous writes durable."""
        ...
