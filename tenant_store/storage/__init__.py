"""Storage abstraction package for tenant_store."""

from .base import KeyValueBackend
from .interfaces import KeyValueBackendProtocol
from .memory_backend import MemoryBackend
from .file_backend import FileBackend
from .serializer import JSONValueCodec, TaggedValueCodec, ValueCodec, get_codec
from .namespaced import KEY_SEPARATOR, NamespacedStore, TenantScope


def create_backend(name: str = "memory", **options) -> KeyValueBackend:
    """Construct a reference backend by name.

    - ``memory``: `MemoryBackend`, options are ignored.
    - ``file``: `FileBackend`, accepts ``data_dir``.
    """
    if name == "memory":
        return MemoryBackend()
    if name == "file":
        return FileBackend(data_dir=options.get("data_dir") or "./data")
    raise ValueError(f"Unknown storage backend {name!r}; expected 'memory' or 'file'")


__all__ = [
    "KeyValueBackend",
    "KeyValueBackendProtocol",
    "MemoryBackend",
    "FileBackend",
    "ValueCodec",
    "JSONValueCodec",
    "TaggedValueCodec",
    "get_codec",
    "KEY_SEPARATOR",
    "NamespacedStore",
    "TenantScope",
    "create_backend",
]
