"""
Shared helpers for Repoman.

Modified: 2026-10-19
"""
