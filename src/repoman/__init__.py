"""
Repoman - GitHub Repository Manager

A terminal menu for listing, creating, updating and deleting
your GitHub repositories with a personal access token.

Created: 2026-10-19
"""

__version__ = "0.1.0"
