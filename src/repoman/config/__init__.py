"""
Configuration management for Repoman.

Handles loading configuration from:
- Default settings
- User config file (~/.config/repoman/config.yaml)

Modified: 2026-10-19
"""

from repoman.config.settings import (
    Settings,
    GitHubSettings,
    CredentialSettings,
    LoggingSettings,
    get_config_dir,
)

__all__ = [
    "Settings",
    "GitHubSettings",
    "CredentialSettings",
    "LoggingSettings",
    "get_config_dir",
]
