"""
Configuration schemas for the Assistants client.

A single frozen ClientConfig holds everything the request pipeline needs:
credential, endpoint, header versions, timeouts and retry settings.
The YAML config file stores the same fields, with ${ENV_VAR} references
allowed in any string value.
"""

from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field, field_validator
import os
import re


DEFAULT_BASE_URL = "https://api.openai.com/v1/"
DEFAULT_BETA_VERSION = "assistants=v1"


class ClientConfig(BaseModel):
    """
    Read-only client configuration.

    Constructed once and shared by every component of a client instance.
    """
    api_key: str = Field(
        ...,
        description="Bearer credential sent on every request (REQUIRED)"
    )
    organization: Optional[str] = Field(
        None,
        description="Organization header value (optional)"
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base endpoint prefix all resource paths are joined onto"
    )
    beta_version: str = Field(
        default=DEFAULT_BETA_VERSION,
        description="Feature-version header value"
    )
    timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="Per-attempt transport timeout"
    )
    max_attempts: int = Field(
        default=3,
        ge=1,
        description="Transport attempts per logical request"
    )
    backoff_unit_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Backoff time unit; delay after attempt n is 2**n units"
    )
    backoff_jitter: bool = Field(
        default=False,
        description="Scale backoff delays by a random factor in [0.5, 1.5)"
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_dir: Optional[Path] = Field(
        None,
        description="Directory for JSONL request logs (disabled when unset)"
    )
    log_console: bool = Field(
        default=False,
        description="Echo log records to the console"
    )

    @field_validator('api_key')
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        if not v or v.strip() == '':
            raise ValueError(
                "OPENAI_API_KEY is required. "
                "Set it in the environment or run: assistants config init"
            )
        return v.strip()

    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must be an absolute http(s) URL, got: {v!r}")
        return v if v.endswith("/") else v + "/"

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @field_validator('log_dir')
    @classmethod
    def validate_log_dir(cls, v: Optional[Path]) -> Optional[Path]:
        if v is None:
            return None
        return Path(v).expanduser().resolve()

    model_config = {
        "frozen": True,
        "validate_assignment": True
    }


def default_settings() -> Dict[str, Any]:
    """Settings written by `assistants config init`."""
    return {
        "api_key": "${OPENAI_API_KEY}",
        "organization": "${OPENAI_ORGANIZATION}",
        "base_url": DEFAULT_BASE_URL,
        "beta_version": DEFAULT_BETA_VERSION,
        "timeout_seconds": 120.0,
        "max_attempts": 3,
        "backoff_unit_seconds": 1.0,
        "backoff_jitter": False,
        "log_level": "INFO",
    }


def resolve_env_vars(value: Any) -> Any:
    """
    Resolve ${ENV_VAR} references in a string.

    Examples:
        "${OPENAI_API_KEY}" -> actual value from environment
        "literal-value" -> "literal-value"
        "${MISSING_VAR}" -> "" (empty string if not set)
    """
    if not isinstance(value, str):
        return value

    pattern = r'\$\{([^}]+)\}'

    def replace(match):
        var_name = match.group(1)
        return os.environ.get(var_name, "")

    return re.sub(pattern, replace, value)


def resolve_settings(data: Dict[str, Any]) -> Dict[str, Any]:
    """Resolve env references in every string value, dropping values that resolve empty."""
    resolved = {}
    for key, value in data.items():
        value = resolve_env_vars(value)
        if isinstance(value, str) and value == "" and key != "api_key":
            continue
        resolved[key] = value
    return resolved
