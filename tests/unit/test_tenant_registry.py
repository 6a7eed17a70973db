import pytest

from tenant_store.tenants import TenantRegistry, TenantRegistryProtocol


def test_add_tenant_normalizes_identifier():
    reg = TenantRegistry()
    prefix = reg.add_tenant('memes galore')
    assert prefix == 'MEMES_GALORE'
    assert reg.list_tenants() == {'memesGalore': 'MEMES_GALORE'}


def test_add_tenant_is_idempotent_for_near_duplicates():
    reg = TenantRegistry()
    reg.add_tenant('memes galore')
    reg.add_tenant('Memes Galore')
    reg.add_tenant('memes_galore')
    assert len(reg) == 1


def test_get_tenant_returns_prefix_or_none():
    reg = TenantRegistry(['downloader', 'cache'])
    assert reg.get_tenant('downloader') == 'DOWNLOADER'
    assert reg.get_tenant('CACHE') == 'CACHE'
    assert reg.get_tenant('missing') is None
    assert reg.get_tenant('###') is None


def test_remove_tenant():
    reg = TenantRegistry(['downloader', 'cache'])
    reg.remove_tenant('downloader')
    assert not reg.list_tenants().get('downloader')
    assert 'cache' in reg
    # removing an absent tenant is a no-op
    reg.remove_tenant('downloader')
    assert len(reg) == 1


def test_clear_tenants():
    reg = TenantRegistry(['downloader', 'cache'])
    reg.clear_tenants()
    assert reg.list_tenants() == {}


def test_list_tenants_returns_copy():
    reg = TenantRegistry(['downloader'])
    listed = reg.list_tenants()
    listed['other'] = 'OTHER'
    assert reg.list_tenants() == {'downloader': 'DOWNLOADER'}


def test_instances_are_independent():
    a = TenantRegistry(['downloader'])
    b = TenantRegistry()
    assert b.get_tenant('downloader') is None
    assert 'downloader' in a


def test_add_tenant_rejects_unusable_identifier():
    reg = TenantRegistry()
    with pytest.raises(ValueError):
        reg.add_tenant('   ')


def test_registry_satisfies_protocol():
    assert isinstance(TenantRegistry(), TenantRegistryProtocol)


def test_add_tenant_rejects_prefix_owned_by_another_identifier():
    reg = TenantRegistry(['a b c'])
    assert reg.list_tenants() == {'aBC': 'A_BC'}
    with pytest.raises(ValueError):
        reg.add_tenant('a bc')
    assert reg.list_tenants() == {'aBC': 'A_BC'}


def test_listed_identifiers_resolve_to_their_tenant():
    reg = TenantRegistry(['a b c', 'memes galore'])
    for identifier, prefix in reg.list_tenants().items():
        assert reg.get_tenant(identifier) == prefix
        assert reg.add_tenant(identifier) == prefix
    assert len(reg) == 2
    reg.remove_tenant('aBC')
    assert reg.list_tenants() == {'memesGalore': 'MEMES_GALORE'}
