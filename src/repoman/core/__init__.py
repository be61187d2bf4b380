"""
Core business logic for Repoman.

Credential storage, the GitHub client and the repository operations the
menu dispatches to.

Modified: 2026-10-19
"""

from repoman.core.exceptions import (
    RepomanError,
    CredentialError,
    GitHubAPIError,
    NetworkError,
    ConfigurationError,
)

__all__ = [
    "RepomanError",
    "CredentialError",
    "GitHubAPIError",
    "NetworkError",
    "ConfigurationError",
]
