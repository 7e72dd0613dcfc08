"""
Unhyped Configuration Module
============================

Centralized configuration management using environment variables.
Supports both .env files and system environment variables.

Environment Variables:
    UNHYPED_KNOWLEDGE_BASE: JSON ingredient issue table replacing the bundled one (optional)
    UNHYPED_SOCIAL_SOURCE: Source tag for social records without one (default: tiktok)

    LOG_LEVEL: Root log level (default: INFO)
    LOG_FILE: Log file path, rotated (optional)
    LOG_JSON: JSON structured logs (default: false)

    API_HOST: API bind host (default: 127.0.0.1)
    API_PORT: API port (default: 8000)
    CORS_ORIGINS: Extra allowed origins, comma-separated (optional)

    ENVIRONMENT: development | production (default: development)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from .. import __version__


# Load environment variables from .env file if present
env_path = Path(__file__).parent.parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


def get_env(key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    """
    Get environment variable with optional default and required validation.

    Raises:
        ValueError: If required=True and variable is not set
    """
    value = os.getenv(key, default)
    if required and value is None:
        raise ValueError(f"Required environment variable '{key}' is not set")
    return value


def get_env_int(key: str, default: int) -> int:
    """Get environment variable as integer."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be an integer, got: {value}")


def get_env_bool(key: str, default: bool) -> bool:
    """Get environment variable as boolean."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.lower() in ("true", "1", "yes", "on")


def get_env_list(key: str) -> List[str]:
    """Get a comma-separated environment variable as a list."""
    value = os.getenv(key, "")
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass
class EngineConfig:
    """Reality check engine configuration."""

    knowledge_base_path: Optional[str] = field(default_factory=lambda: get_env("UNHYPED_KNOWLEDGE_BASE"))
    social_source: str = field(default_factory=lambda: get_env("UNHYPED_SOCIAL_SOURCE", "tiktok"))

    def __post_init__(self):
        """Validate configuration."""
        if self.knowledge_base_path and not Path(self.knowledge_base_path).is_file():
            raise ValueError(f"UNHYPED_KNOWLEDGE_BASE file not found: {self.knowledge_base_path}")
        if not self.social_source:
            raise ValueError("UNHYPED_SOCIAL_SOURCE cannot be empty")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: get_env("LOG_LEVEL", "INFO"))
    log_file: Optional[str] = field(default_factory=lambda: get_env("LOG_FILE"))
    json_logs: bool = field(default_factory=lambda: get_env_bool("LOG_JSON", False))


@dataclass
class ApiConfig:
    """HTTP API configuration."""

    host: str = field(default_factory=lambda: get_env("API_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: get_env_int("API_PORT", 8000))
    cors_origins: List[str] = field(default_factory=lambda: get_env_list("CORS_ORIGINS"))

    def __post_init__(self):
        """Validate configuration."""
        if not 0 < self.port < 65536:
            raise ValueError(f"API_PORT must be within 1-65535, got: {self.port}")


@dataclass
class Settings:
    """Main application settings container."""

    engine: EngineConfig = field(default_factory=EngineConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    # Application metadata
    app_name: str = "unhyped"
    app_version: str = __version__
    environment: str = field(default_factory=lambda: get_env("ENVIRONMENT", "development"))


def load_settings() -> Settings:
    """
    Load and validate all application settings.

    Raises:
        ValueError: If configuration is invalid
    """
    return Settings()


# Global settings instance (lazy-loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance (singleton pattern)."""
    global _settings
    if _settings is None:
        _settings = load_settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None

