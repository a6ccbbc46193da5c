"""
Pytest configuration for project root.

Ensures project modules can be imported in tests and keeps tests away
from the developer's real configuration.
"""

import sys
import pytest
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point config discovery at an empty directory and clear env credentials."""
    from assistants.config import load_config

    for var in (
        "OPENAI_API_KEY",
        "OPENAI_ORGANIZATION",
        "ASSISTANTS_BASE_URL",
        "ASSISTANTS_LOG_LEVEL",
        "ASSISTANTS_LOG_DIR",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("ASSISTANTS_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.chdir(tmp_path)

    load_config.cache_clear()
    yield tmp_path / "config"
    load_config.cache_clear()
