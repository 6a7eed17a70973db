"""Tenant-namespaced facade over a flat key-value backend.

Logical `(tenant, key)` pairs are stored under the physical key
``<tenant><separator><key>``. Tenant prefixes never contain the separator,
so decoding strips a fixed-length head and logical keys may contain the
separator freely. Backend errors are never caught here.
"""
from __future__ import annotations
import logging
from typing import Any, List, Optional, Sequence, Tuple

from .interfaces import KeyValueBackendProtocol
from .serializer import JSONValueCodec, ValueCodec

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "#"


def validate_separator(separator: str) -> str:
    """Reject separators that could occur inside a registry-derived prefix."""
    if not separator:
        raise ValueError("Key separator must not be empty")
    if any(c.isalnum() or c == "_" for c in separator):
        raise ValueError(f"Key separator {separator!r} must not contain letters, digits or '_'")
    return separator


class NamespacedStore:
    """Facade exposing per-tenant get/set/remove and bulk operations.

    The tenant argument of every operation is a prefix string, usually
    obtained from `TenantRegistry.get_tenant`. Composite operations
    (`get_all_key_value_pairs`, `clear`) make two sequential backend calls
    and are not atomic with respect to concurrent writers.
    """

    def __init__(
        self,
        backend: KeyValueBackendProtocol,
        codec: Optional[ValueCodec] = None,
        separator: str = KEY_SEPARATOR,
    ) -> None:
        self.backend = backend
        self.codec = codec or JSONValueCodec()
        self.separator = validate_separator(separator)

    def _namespace(self, tenant: str) -> str:
        if not isinstance(tenant, str) or not tenant:
            raise ValueError("Tenant prefix must be a non-empty string")
        if self.separator in tenant:
            raise ValueError(f"Tenant prefix {tenant!r} must not contain {self.separator!r}")
        return tenant + self.separator

    def physical_key(self, tenant: str, key: str) -> str:
        return self._namespace(tenant) + key

    def logical_key(self, tenant: str, physical_key: str) -> str:
        return physical_key[len(self._namespace(tenant)):]

    async def get_item(self, tenant: str, key: str) -> Any:
        raw = await self.backend.get(self.physical_key(tenant, key))
        return self.codec.load(raw)

    async def set_item(self, tenant: str, key: str, value: Any) -> None:
        physical = self.physical_key(tenant, key)
        await self.backend.set(physical, self.codec.dump(value))

    async def remove_item(self, tenant: str, key: str) -> None:
        await self.backend.remove(self.physical_key(tenant, key))

    async def get_all_keys(self, tenant: str) -> List[str]:
        """Logical keys stored under `tenant`, in backend order.

        The backend has no prefix scan, so this lists every key it holds.
        """
        namespace = self._namespace(tenant)
        keys = await self.backend.list_all_keys()
        found = [k[len(namespace):] for k in keys if k.startswith(namespace)]
        logger.debug("Tenant %s: %d of %d backend keys", tenant, len(found), len(keys))
        return found

    async def multi_get(self, tenant: str, keys: Sequence[str]) -> List[Tuple[str, Any]]:
        """Fetch `keys` in one backend call.

        Returns `(logical key, value)` pairs in the order the backend
        returns them.
        """
        namespace = self._namespace(tenant)
        pairs = await self.backend.multi_get([namespace + k for k in keys])
        return [(physical[len(namespace):], self.codec.load(raw)) for physical, raw in pairs]

    async def multi_remove(self, tenant: str, keys: Sequence[str]) -> None:
        namespace = self._namespace(tenant)
        await self.backend.multi_remove([namespace + k for k in keys])

    async def get_all_key_value_pairs(self, tenant: str) -> List[Tuple[str, Any]]:
        keys = await self.get_all_keys(tenant)
        return await self.multi_get(tenant, keys)

    async def clear(self, tenant: str) -> None:
        keys = await self.get_all_keys(tenant)
        await self.multi_remove(tenant, keys)
        logger.debug("Cleared %d keys of tenant %s", len(keys), tenant)

    def scoped(self, tenant: str) -> "TenantScope":
        return TenantScope(self, tenant)


class TenantScope:
    """A `NamespacedStore` bound to a single tenant prefix."""

    def __init__(self, store: NamespacedStore, tenant: str) -> None:
        store._namespace(tenant)
        self.store = store
        self.tenant = tenant

    async def get_item(self, key: str) -> Any:
        return await self.store.get_item(self.tenant, key)

    async def set_item(self, key: str, value: Any) -> None:
        await self.store.set_item(self.tenant, key, value)

    async def remove_item(self, key: str) -> None:
        await self.store.remove_item(self.tenant, key)

    async def get_all_keys(self) -> List[str]:
        return await self.store.get_all_keys(self.tenant)

    async def multi_get(self, keys: Sequence[str]) -> List[Tuple[str, Any]]:
        return await self.store.multi_get(self.tenant, keys)

    async def multi_remove(self, keys: Sequence[str]) -> None:
        await self.store.multi_remove(self.tenant, keys)

    async def get_all_key_value_pairs(self) -> List[Tuple[str, Any]]:
        return await self.store.get_all_key_value_pairs(self.tenant)

    async def clear(self) -> None:
        await self.store.clear(self.tenant)

    def __repr__(self) -> str:  # pragma: no cover - convenience
        return f"TenantScope(tenant={self.tenant!r})"
