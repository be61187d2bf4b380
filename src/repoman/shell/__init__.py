"""
Text menu interface for Repoman.

Modified: 2026-10-19
"""

from repoman.shell.menu import Menu, Shell

__all__ = ["Menu", "Shell"]
