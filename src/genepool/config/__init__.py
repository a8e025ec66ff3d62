"""Settings, YAML configuration and logging setup."""

from .loader import ConfigError, load_config
from .logging_conf import JSONFormatter, configure_logging
from .schemas import EvolutionConfig
from .settings import ENV_PREFIX, Settings, get_settings, reset_settings_cache

__all__ = [
    "ConfigError",
    "load_config",
    "JSONFormatter",
    "configure_logging",
    "EvolutionConfig",
    "ENV_PREFIX",
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
