"""
Configuration Management

This module provides centralized configuration management
for the AssetsManager application.
"""

from .settings import (
    Settings,
    DatabaseConfig,
    SecurityConfig,
    ApiConfig,
    AppConfig,
    Environment,
    get_settings,
)

__all__ = [
    "Settings",
    "DatabaseConfig",
    "SecurityConfig",
    "ApiConfig",
    "AppConfig",
    "Environment",
    "get_settings",
]
