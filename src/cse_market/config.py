"""Pydantic Settings configuration management."""

import logging
import os
from pathlib import Path
from typing import Annotated

from pydantic import BeforeValidator, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cse_market.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.cse.lk/api"


def _find_project_root() -> Path:
    """Find project root directory (contains pyproject.toml or .env).

    Priority check for PROJECT_ROOT environment variable for Docker scenarios.
    """
    env_root = os.environ.get("PROJECT_ROOT")
    if env_root:
        path = Path(env_root)
        if path.exists():
            return path.resolve()

    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists() or (parent / ".env").exists():
            return parent
    return current.parents[2]


_PROJECT_ROOT = _find_project_root()


def _parse_bool(value: str | bool | None) -> bool:
    """Parse boolean value from string or bool."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return str(value).lower() in ("true", "1", "yes")


EnvBool = Annotated[bool, BeforeValidator(_parse_bool)]

_COMMON_CONFIG = SettingsConfigDict(
    env_file=_PROJECT_ROOT / ".env",
    env_file_encoding="utf-8",
    extra="ignore",
    populate_by_name=True,
)


# ==========================================
# Nested configuration classes
# ==========================================


class ApiConfig(BaseSettings):
    """Remote market-data API configuration."""

    model_config = _COMMON_CONFIG

    base_url: str = Field(default=DEFAULT_BASE_URL, validation_alias="CSE_API_BASE_URL")
    cache_timeout_ms: int = Field(default=30_000, ge=0, validation_alias="CSE_CACHE_TIMEOUT_MS")
    request_timeout: float = Field(default=30.0, gt=0, validation_alias="CSE_REQUEST_TIMEOUT")
    max_connections: int = Field(default=10, ge=1, le=100, validation_alias="CSE_MAX_CONNECTIONS")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ConfigurationError(f"CSE_API_BASE_URL must be an http(s) URL, got: {v!r}")
        return v.rstrip("/")


class RefreshConfig(BaseSettings):
    """Auto-refresh configuration."""

    model_config = _COMMON_CONFIG

    refresh_interval_ms: int = Field(default=60_000, ge=1_000, validation_alias="REFRESH_INTERVAL_MS")


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = _COMMON_CONFIG

    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    log_dir: str = Field(default="./logs", validation_alias="LOG_DIR")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if v.upper() not in valid_levels:
            raise ConfigurationError(f"Log level must be one of {valid_levels}")
        return v.upper()


# ==========================================
# Main configuration class
# ==========================================


class Config(BaseSettings):
    """Main configuration class.

    Loads every section from environment variables and the project ``.env``
    file. Each nested section reads its own variables independently.
    """

    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
        env_parse_none_str="null",
    )

    debug: EnvBool = Field(default=False, validation_alias="DEBUG")

    api: ApiConfig = Field(default_factory=ApiConfig)
    refresh: RefreshConfig = Field(default_factory=RefreshConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_config_safe() -> tuple[Config | None, list[str]]:
    """Safely load configuration.

    Returns:
        tuple: (Config object or None, list of error messages)
    """
    errors = []
    try:
        return Config(), []
    except ValidationError as e:
        errors.append(f"Failed to load configuration: {e}")
        return None, errors
    except ConfigurationError as e:
        errors.append(f"Invalid configuration: {e}")
        return None, errors
