"""
Runtime configuration access.

Precedence (lowest to highest):
    defaults -> {config_dir}/config.yaml -> environment (.env included)

ASSISTANTS_CONFIG_DIR locates the config directory.
"""

import os
from pathlib import Path
from functools import lru_cache
from dotenv import load_dotenv

from .schemas import ClientConfig
from .config_file import ConfigManager


ENV_OVERRIDES = {
    "api_key": "OPENAI_API_KEY",
    "organization": "OPENAI_ORGANIZATION",
    "base_url": "ASSISTANTS_BASE_URL",
    "log_level": "ASSISTANTS_LOG_LEVEL",
    "log_dir": "ASSISTANTS_LOG_DIR",
}


def get_config_dir() -> Path:
    """Get the config directory from environment."""
    return Path(os.getenv('ASSISTANTS_CONFIG_DIR', '~/.config/assistants')).expanduser().resolve()


def env_overrides() -> dict:
    return {field: os.getenv(var) for field, var in ENV_OVERRIDES.items() if os.getenv(var)}


@lru_cache(maxsize=1)
def load_config() -> ClientConfig:
    """
    Load and cache the client configuration.

    Raises:
        pydantic.ValidationError: If no API key is configured anywhere
    """
    load_dotenv()
    manager = ConfigManager(get_config_dir())
    return manager.load(overrides=env_overrides())


def reload_config() -> ClientConfig:
    """Force reload of client config (clears cache)."""
    load_config.cache_clear()
    return load_config()
