"""
Config file loading and management.

The config file lives at {config_dir}/config.yaml and contains the raw
ClientConfig fields. String values may reference environment variables
with ${VAR} syntax; they are resolved at load time, never on save.
"""

from pathlib import Path
from typing import Any, Dict
import yaml

from .schemas import ClientConfig, default_settings, resolve_settings


CONFIG_FILENAME = "config.yaml"


class ConfigManager:
    """
    Manages the on-disk client configuration.

    Usage:
        manager = ConfigManager(config_dir)
        settings = manager.load_settings()   # raw dict, unresolved
        config = manager.load()              # ClientConfig, resolved
        manager.save(settings)
    """

    def __init__(self, config_dir: Path):
        self.config_dir = Path(config_dir).expanduser().resolve()
        self.config_path = self.config_dir / CONFIG_FILENAME

    def exists(self) -> bool:
        return self.config_path.exists()

    def load_settings(self) -> Dict[str, Any]:
        """
        Load raw settings from disk.

        Returns default settings if the file doesn't exist.
        """
        if not self.config_path.exists():
            return default_settings()

        with open(self.config_path, "r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {self.config_path}")

        return {**default_settings(), **data}

    def load(self, overrides: Dict[str, Any] = None) -> ClientConfig:
        """
        Load settings, resolve env references and validate.

        Args:
            overrides: Values applied after the file (e.g. from the environment)
        """
        data = resolve_settings(self.load_settings())
        if overrides:
            data.update({k: v for k, v in overrides.items() if v not in (None, "")})
        return ClientConfig.model_validate(data)

    def save(self, settings: Dict[str, Any]) -> None:
        """
        Save raw settings to disk.

        Creates the config directory if needed.
        """
        self.config_dir.mkdir(parents=True, exist_ok=True)

        data = {k: (str(v) if isinstance(v, Path) else v) for k, v in settings.items() if v is not None}

        with open(self.config_path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)

    def update(self, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Update specific fields in the config file and return the new raw settings."""
        settings = self.load_settings()
        settings.update(updates)
        # Validate before persisting so a bad value never reaches disk
        ClientConfig.model_validate({**resolve_settings(settings), "api_key": "placeholder"})
        self.save(settings)
        return settings
