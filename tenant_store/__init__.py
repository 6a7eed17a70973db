"""Tenant-namespaced storage over a flat asynchronous key-value backend."""

from tenant_store.tenants import TenantRegistry
from tenant_store.storage import (
    KEY_SEPARATOR,
    FileBackend,
    KeyValueBackend,
    MemoryBackend,
    NamespacedStore,
    TenantScope,
)

__version__ = "0.1.0"

__all__ = [
    "TenantRegistry",
    "KEY_SEPARATOR",
    "KeyValueBackend",
    "MemoryBackend",
    "FileBackend",
    "NamespacedStore",
    "TenantScope",
]
