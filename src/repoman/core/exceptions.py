"""
Custom exceptions for Repoman.

Modified: 2026-10-19
"""

from typing import Optional


class RepomanError(Exception):
    """Base exception for all Repoman errors."""

    pass


class CredentialError(RepomanError):
    """Raised when the credential file cannot be written."""

    pass


class GitHubAPIError(RepomanError):
    """Raised when the GitHub API answers with a non-success status."""

    def __init__(self, status_code: int, reason: str = "", body: Optional[str] = None):
        self.status_code = status_code
        self.reason = reason
        self.body = body or ""
        super().__init__(f"GitHub API error: {self.status}")

    @property
    def status(self) -> str:
        """Status line as shown to the user, e.g. ``404 Not Found``."""
        if self.reason:
            return f"{self.status_code} {self.reason}"
        return str(self.status_code)


class NetworkError(RepomanError):
    """Raised when a request never got an HTTP response."""

    pass


class ConfigurationError(RepomanError):
    """Raised when configuration is invalid or unreadable."""

    pass
