"""
Configuration management for Repoman.

Hierarchical settings loading: defaults → config file

Modified: 2026-10-19
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Any, Optional

from repoman import __version__
from repoman.core.exceptions import ConfigurationError


@dataclass
class GitHubSettings:
    """GitHub API settings."""

    api_url: str = "https://api.github.com"
    user_agent: str = f"repoman/{__version__}"
    timeout: float = 30.0
    owner: Optional[str] = None  # None = resolve from repo data / profile


@dataclass
class CredentialSettings:
    """Credential file settings."""

    path: str = "config.json"


@dataclass
class LoggingSettings:
    """Logging settings."""

    level: str = "ERROR"


@dataclass
class Settings:
    """Main settings container."""

    github: GitHubSettings = field(default_factory=GitHubSettings)
    credentials: CredentialSettings = field(default_factory=CredentialSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """
        Load settings from the config file.

        Priority:
        1. Default values (defined in dataclasses)
        2. Config file (~/.config/repoman/config.yaml)

        Args:
            config_path: Optional path to config file

        Returns:
            Settings instance

        Raises:
            ConfigurationError: If the file cannot be read or parsed
        """
        settings = cls()

        if config_path is None:
            config_path = get_config_dir() / "config.yaml"

        if not config_path.exists():
            return settings

        try:
            with open(config_path) as f:
                config_data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Cannot read config file {config_path}: {e}")

        if not isinstance(config_data, dict):
            raise ConfigurationError(f"Config file {config_path} must contain a mapping")

        gh = _section(config_data, "github", config_path)
        creds = _section(config_data, "credentials", config_path)
        log = _section(config_data, "logging", config_path)

        try:
            # GitHub settings
            if gh is not None:
                settings.github = GitHubSettings(
                    api_url=str(gh.get("api_url", "https://api.github.com")),
                    user_agent=str(gh.get("user_agent", f"repoman/{__version__}")),
                    timeout=float(gh.get("timeout", 30.0)),
                    owner=gh.get("owner"),
                )

            # Credential settings
            if creds is not None:
                settings.credentials = CredentialSettings(
                    path=str(creds.get("path", "config.json")),
                )

            # Logging settings
            if log is not None:
                settings.logging = LoggingSettings(
                    level=str(log.get("level", "ERROR")).upper(),
                )
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid value in config file {config_path}: {e}")

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return {
            "github": {
                "api_url": self.github.api_url,
                "user_agent": self.github.user_agent,
                "timeout": self.github.timeout,
                "owner": self.github.owner,
            },
            "credentials": {"path": self.credentials.path},
            "logging": {"level": self.logging.level},
        }


def get_config_dir() -> Path:
    """Get configuration directory (not created)."""
    return Path.home() / ".config" / "repoman"


def _section(config_data: Dict[str, Any], name: str, config_path: Path) -> Optional[Dict[str, Any]]:
    """Return one top-level section, or None if absent; it must be a mapping."""
    if name not in config_data:
        return None
    section = config_data[name] or {}
    if not isinstance(section, dict):
        raise ConfigurationError(
            f"Section '{name}' in config file {config_path} must be a mapping"
        )
    return section
