import pytest
import yaml
from pydantic import ValidationError

from tenant_store.config import StoreSettings, dump_settings, load_settings


def test_missing_file_gives_defaults(tmp_path):
    s = load_settings(tmp_path / 'nope.yml')
    assert s == StoreSettings()
    assert s.backend == 'memory'
    assert s.separator == '#'
    assert s.codec == 'json'


def test_load_settings_from_yaml(tmp_path):
    path = tmp_path / 'tenant_store.yml'
    path.write_text(yaml.safe_dump({
        'backend': 'file',
        'data_dir': str(tmp_path / 'data'),
        'codec': 'tagged',
        'tenants': ['downloader', 'memes galore'],
        'log_level': 'debug',
    }))
    s = load_settings(path)
    assert s.backend == 'file'
    assert s.codec == 'tagged'
    assert s.tenants == ['downloader', 'memes galore']
    assert s.log_level == 'DEBUG'


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / 'empty.yml'
    path.write_text('')
    assert load_settings(path) == StoreSettings()


@pytest.mark.parametrize('data', [
    {'backend': 'redis'},
    {'codec': 'pickle'},
    {'separator': '_'},
    {'separator': ''},
    {'log_level': 'LOUD'},
])
def test_invalid_settings_raise(tmp_path, data):
    path = tmp_path / 'bad.yml'
    path.write_text(yaml.safe_dump(data))
    with pytest.raises(ValidationError):
        load_settings(path)


def test_dump_and_reload(tmp_path):
    path = tmp_path / 'out.yml'
    s = StoreSettings(backend='file', tenants=['cache'])
    dump_settings(s, path)
    assert load_settings(path) == s
