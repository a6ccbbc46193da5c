"""
Configuration management for the Assistants client.

Usage:
    from assistants.config import load_config, ConfigManager

    config = load_config()              # env + config.yaml, cached
    manager = ConfigManager(config_dir)
    manager.update({"max_attempts": 5})
"""

from .schemas import (
    ClientConfig,
    DEFAULT_BASE_URL,
    DEFAULT_BETA_VERSION,
    default_settings,
    resolve_env_vars,
    resolve_settings,
)

from .config_file import (
    ConfigManager,
    CONFIG_FILENAME,
)

from .runtime import (
    get_config_dir,
    load_config,
    reload_config,
)


__all__ = [
    # Schemas
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "DEFAULT_BETA_VERSION",
    "default_settings",
    "resolve_env_vars",
    "resolve_settings",
    # Config file
    "ConfigManager",
    "CONFIG_FILENAME",
    # Runtime
    "get_config_dir",
    "load_config",
    "reload_config",
]
