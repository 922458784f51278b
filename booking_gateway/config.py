"""
Configuration Management
Environment-based configuration for the booking gateway
"""

import logging
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_BACKEND_URL = "http://localhost:3000"


class Settings(BaseSettings):
    # App config
    app_name: str = "Agenda Booking Gateway"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8080

    # Logging
    log_level: str = "INFO"
    log_format: str = "default"
    logging_config_path: Optional[str] = None

    # Backend service the /api routes forward to
    private_api_base: str = DEFAULT_BACKEND_URL
    backend_timeout_seconds: float = 30.0

    # Notifications
    notification_ttl_ms: int = 3000

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("private_api_base")
    @classmethod
    def validate_backend_url(cls, v):
        if not v:
            return DEFAULT_BACKEND_URL
        return v

    @field_validator("notification_ttl_ms")
    @classmethod
    def validate_notification_ttl(cls, v):
        if v <= 0:
            raise ValueError("Notification TTL must be a positive number of milliseconds")
        return v

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("default", "detailed", "json"):
            raise ValueError("LOG_FORMAT must be one of: default, detailed, json")
        return v

    def log_config(self):
        """Log configuration (without sensitive data)"""
        logger.info(f"Backend: {self.private_api_base} (timeout {self.backend_timeout_seconds}s)")
        logger.info(f"Notification TTL: {self.notification_ttl_ms}ms")
        logger.info(f"CORS origins: {', '.join(self.cors_origins)}")


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment"""
    global _settings
    _settings = None
