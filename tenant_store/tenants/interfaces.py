from typing import Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class TenantRegistryProtocol(Protocol):
    """Registry protocol mirroring `tenant_store.tenants.TenantRegistry`."""

    def add_tenant(self, identifier: str) -> str: ...

    def remove_tenant(self, identifier: str) -> None: ...

    def clear_tenants(self) -> None: ...

    def get_tenant(self, identifier: str) -> Optional[str]: ...

    def list_tenants(self) -> Dict[str, str]: ...
