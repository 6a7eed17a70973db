"""Simple memory-backed key-value backend

Values live in a flat dict `{<physical key>: <string value>}` for the
lifetime of the instance.
"""
from threading import RLock
from typing import Dict, List, Optional, Sequence, Tuple

from .base import KeyValueBackend


class MemoryBackend(KeyValueBackend):
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._lock = RLock()
        self._store: Dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> Optional[str]:
        with self._lock:
            return self._store.get(key)

    async def set(self, key: str, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"MemoryBackend stores strings, got {type(value).__name__}")
        with self._lock:
            self._store[key] = value

    async def remove(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    async def list_all_keys(self) -> List[str]:
        with self._lock:
            return list(self._store.keys())

    async def multi_get(self, keys: Sequence[str]) -> List[Tuple[str, Optional[str]]]:
        with self._lock:
            return [(k, self._store.get(k)) for k in keys]

    async def multi_remove(self, keys: Sequence[str]) -> None:
        with self._lock:
            for k in keys:
                self._store.pop(k, None)

    def snapshot(self) -> Dict[str, str]:
        """Return a copy of the raw contents (used by tests and the CLI)."""
        with self._lock:
            return dict(self._store)
