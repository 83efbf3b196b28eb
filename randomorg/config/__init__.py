"""Configuration module for randomorg."""

from randomorg.config.loader import clear_config_cache, get_config, get_config_path, load_config, save_config
from randomorg.config.schema import Config, LogConfig

__all__ = [
    "Config",
    "LogConfig",
    "load_config",
    "save_config",
    "get_config_path",
    "get_config",
    "clear_config_cache",
]
