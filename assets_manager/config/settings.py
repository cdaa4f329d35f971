"""
Application settings and configuration management using Pydantic BaseSettings.
"""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Environment enumeration"""
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class DatabaseConfig(BaseSettings):
    """Backing store configuration settings."""
    model_config = SettingsConfigDict(env_prefix="DB_", extra="ignore")

    path: str = Field(default="assets_manager.db")
    connection_timeout: float = Field(default=30.0)
    enable_foreign_keys: bool = Field(default=True)

    @property
    def absolute_path(self) -> str:
        """Get absolute path to the database file."""
        if self.path == ":memory:":
            return self.path
        return str(Path(self.path).resolve())


class SecurityConfig(BaseSettings):
    """Security configuration settings."""
    model_config = SettingsConfigDict(env_prefix="SECURITY_", extra="ignore")

    secret_key: str = Field(default="dev-secret-key-change-in-production")
    session_timeout_minutes: int = Field(default=480, gt=0)
    bcrypt_rounds: int = Field(default=12, ge=4, le=15)

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str) -> str:
        if not v:
            import secrets
            return secrets.token_urlsafe(32)
        if len(v) < 32:
            raise ValueError("Secret key must be at least 32 characters long")
        return v


class ApiConfig(BaseSettings):
    """Store API location as seen by the client."""
    model_config = SettingsConfigDict(env_prefix="API_", extra="ignore")

    base_url: str = Field(default="http://localhost:8000")
    timeout: float = Field(default=10.0, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class AppConfig(BaseSettings):
    """Application configuration settings."""
    model_config = SettingsConfigDict(env_prefix="APP_", extra="ignore")

    environment: Environment = Field(default=Environment.DEVELOPMENT)
    log_level: str = Field(default="INFO")
    page_title: str = Field(default="AssetsManager")
    page_icon: str = Field(default="💰")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT


def _load_env_file() -> None:
    """Load environment variables from .env file so nested groups see them."""
    env_file = Path(".env")
    if env_file.exists():
        from dotenv import load_dotenv
        load_dotenv(env_file)


class Settings(BaseSettings):
    """Centralized application settings manager using Pydantic BaseSettings."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)
    api: ApiConfig = Field(default_factory=ApiConfig)
    app: AppConfig = Field(default_factory=AppConfig)

    def __init__(self, **kwargs):
        _load_env_file()
        super().__init__(**kwargs)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
