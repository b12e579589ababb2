"""
Environment configuration for the Hostelia dashboard service.
Uses Pydantic's settings management to handle environment variables
with proper type validation and default values.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Set

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from .env file if it exists
env_path = Path('.') / '.env'
load_dotenv(dotenv_path=env_path)


def _split_list(value: str) -> List[str]:
    """Parse a JSON list or a comma separated string into a list."""
    value = value.strip()
    if value.startswith('[') and value.endswith(']'):
        try:
            return [str(item).strip() for item in json.loads(value)]
        except json.JSONDecodeError:
            pass
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Application configuration
    APP_NAME: str = "Hostelia"
    API_VERSION: str = "v1"
    API_V1_STR: str = "/api/v1"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"

    # Server configuration
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: str = Field(default="*", description="Comma separated or JSON list")

    # Upstream backend (document-store REST API)
    BACKEND_API_URL: str = "http://localhost:3000/api"
    BACKEND_TIMEOUT: float = 10.0
    TOKEN_STORE_PATH: Optional[str] = None

    # Fee / complaint document uploads
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024
    ALLOWED_EXTENSIONS: str = "png,jpg,jpeg,pdf"

    # Monitoring and logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "text"
    LOG_DIR: Optional[str] = None

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalise and check the log level name"""
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("LOG_FORMAT")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        fmt = v.strip().lower()
        if fmt not in {"text", "json"}:
            raise ValueError("LOG_FORMAT must be 'text' or 'json'")
        return fmt

    @field_validator("BACKEND_API_URL")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    def get_cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS into a list"""
        return _split_list(self.CORS_ORIGINS) or ["*"]

    def get_allowed_extensions(self) -> Set[str]:
        """Parse ALLOWED_EXTENSIONS into a set without leading dots"""
        return {ext.lower().lstrip('.') for ext in _split_list(self.ALLOWED_EXTENSIONS)}

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.ENVIRONMENT == "production"

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.ENVIRONMENT == "development"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
