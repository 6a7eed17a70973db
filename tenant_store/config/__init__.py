from .config import DEFAULT_CONFIG_PATH, StoreSettings, dump_settings, load_settings

__all__ = ["DEFAULT_CONFIG_PATH", "StoreSettings", "dump_settings", "load_settings"]
