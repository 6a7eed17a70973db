from __future__ import annotations
import logging
from pathlib import Path
from typing import List, Literal, Optional

import yaml
from pydantic import BaseModel, field_validator

from tenant_store.storage.namespaced import KEY_SEPARATOR, validate_separator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path('tenant_store.yml')


class StoreSettings(BaseModel):
    backend: Literal['memory', 'file'] = 'memory'
    data_dir: str = './data'
    codec: Literal['json', 'tagged'] = 'json'
    separator: str = KEY_SEPARATOR
    tenants: List[str] = []
    log_level: str = 'WARNING'

    @field_validator('separator')
    @classmethod
    def _check_separator(cls, value: str) -> str:
        return validate_separator(value)

    @field_validator('log_level')
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'unknown log level {value!r}')
        return level


def load_settings(path: Optional[Path | str] = None) -> StoreSettings:
    """Load settings from a YAML file.

    A missing file yields the defaults; malformed content raises
    `pydantic.ValidationError` (or `yaml.YAMLError` for broken YAML).
    """
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        logger.debug('No settings file at %s; using defaults', cfg_path)
        return StoreSettings()
    with cfg_path.open('r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    settings = StoreSettings(**data)
    logger.debug('Loaded settings from %s', cfg_path)
    return settings


def dump_settings(settings: StoreSettings, path: Path | str) -> None:
    with Path(path).open('w', encoding='utf-8') as f:
        yaml.safe_dump(settings.model_dump(), f, sort_keys=False)
