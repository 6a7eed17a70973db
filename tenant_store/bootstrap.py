"""Bootstrap helpers for tenant_store.

Composes the tenant registry, backend and namespaced facade from
`StoreSettings` so callers do not need to wire them by hand.
"""
from dataclasses import dataclass
from typing import Optional

from tenant_store.config import StoreSettings
from tenant_store.storage import NamespacedStore, KeyValueBackendProtocol, create_backend, get_codec
from tenant_store.tenants import TenantRegistry


@dataclass
class TenantStorage:
    settings: StoreSettings
    registry: TenantRegistry
    backend: KeyValueBackendProtocol
    store: NamespacedStore

    def resolve_tenant(self, name: str) -> str:
        """Map a registered identifier to its prefix; other names are used as raw prefixes."""
        return self.registry.get_tenant(name) or name


def bootstrap_storage(
    settings: Optional[StoreSettings] = None,
    backend: Optional[KeyValueBackendProtocol] = None,
) -> TenantStorage:
    """Build a `TenantStorage` from settings.

    Parameters
    - settings: store settings; defaults are used when omitted
    - backend: an externally provided backend, overriding `settings.backend`
    """
    settings = settings or StoreSettings()
    registry = TenantRegistry(settings.tenants)
    if backend is None:
        backend = create_backend(settings.backend, data_dir=settings.data_dir)
    store = NamespacedStore(backend, codec=get_codec(settings.codec), separator=settings.separator)
    return TenantStorage(settings=settings, registry=registry, backend=backend, store=store)
