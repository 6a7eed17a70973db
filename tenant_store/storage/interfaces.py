from typing import List, Optional, Protocol, Sequence, Tuple, runtime_checkable


@runtime_checkable
class KeyValueBackendProtocol(Protocol):
    """Backend protocol mirroring `tenant_store.storage.KeyValueBackend`.

    Host environments may pass any object with these coroutine methods to
    `NamespacedStore`; subclassing the abstract base class is optional.
    """

    async def get(self, key: str) -> Optional[str]: ...

    async def set(self, key: str, value: str) -> None: ...

    async def remove(self, key: str) -> None: ...

    async def list_all_keys(self) -> List[str]: ...

    async def multi_get(self, keys: Sequence[str]) -> List[Tuple[str, Optional[str]]]: ...

    async def multi_remove(self, keys: Sequence[str]) -> None: ...
