import asyncio

from tenant_store.bootstrap import bootstrap_storage
from tenant_store.config import StoreSettings
from tenant_store.storage import FileBackend, MemoryBackend, TaggedValueCodec


def test_bootstrap_defaults():
    storage = bootstrap_storage()
    assert isinstance(storage.backend, MemoryBackend)
    assert storage.registry.list_tenants() == {}
    assert storage.store.separator == '#'


def test_bootstrap_registers_configured_tenants(tmp_path):
    settings = StoreSettings(
        backend='file', data_dir=str(tmp_path), codec='tagged', tenants=['downloader', 'memes galore']
    )
    storage = bootstrap_storage(settings)
    assert isinstance(storage.backend, FileBackend)
    assert isinstance(storage.store.codec, TaggedValueCodec)
    assert storage.registry.list_tenants() == {'downloader': 'DOWNLOADER', 'memesGalore': 'MEMES_GALORE'}


def test_bootstrap_uses_provided_backend():
    backend = MemoryBackend()
    storage = bootstrap_storage(StoreSettings(tenants=['cache']), backend=backend)
    prefix = storage.resolve_tenant('cache')
    asyncio.run(storage.store.set_item(prefix, 'k', 'v'))
    assert backend.snapshot() == {'CACHE#k': 'v'}


def test_resolve_tenant_falls_back_to_raw_prefix():
    storage = bootstrap_storage(StoreSettings(tenants=['cache']))
    assert storage.resolve_tenant('Cache') == 'CACHE'
    assert storage.resolve_tenant('LEGACY') == 'LEGACY'
