"""Key-value backend interface definitions.

Defines the KeyValueBackend abstract class consumed by
`tenant_store.storage.NamespacedStore`. Backends store opaque string
values under flat string keys; they know nothing about tenants.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Tuple


class KeyValueBackend(ABC):
    """Abstract asynchronous flat key-value store.

    Errors raised by implementations are propagated unchanged by the
    layers above.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the value stored under `key`, or None if absent."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store `value` under `key`, replacing any previous value."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete `key`. Removing a missing key is not an error."""

    @abstractmethod
    async def list_all_keys(self) -> List[str]:
        """Return every key held by the backend."""

    @abstractmethod
    async def multi_get(self, keys: Sequence[str]) -> List[Tuple[str, Optional[str]]]:
        """Return `(key, value)` pairs for `keys` in one round-trip.

        Result order is implementation defined.
        """

    @abstractmethod
    async def multi_remove(self, keys: Sequence[str]) -> None:
        """Delete all of `keys` in one round-trip."""

    async def close(self) -> None:
        """Release backend resources. No-op by default."""
        return None
