"""Persistent data used by the login helpers (CSRF state)."""
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class PersistentDataHandler(Protocol):
    """Key/value storage that survives between the login redirect and the callback."""

    def get(self, key: str) -> Optional[Any]:
        ...

    def set(self, key: str, value: Any) -> None:
        ...


class MemoryPersistentData:
    """In-memory storage, shared for the lifetime of the object."""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def get(self, key: str) -> Optional[Any]:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
