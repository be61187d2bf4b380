"""
Terminal input helpers.

All interactive reads go through these functions so the shell, the
credential store and the repository operations share one behavior:
one line per read, surrounding whitespace trimmed, blank allowed.

Modified: 2026-10-19
"""

import click


def get_input(prompt: str) -> str:
    """Read one line from the terminal; blank input returns ``""``."""
    value = click.prompt(prompt, default="", show_default=False, prompt_suffix=": ")
    return value.strip()


def get_secret(prompt: str) -> str:
    """Read a value without echoing it (used for tokens)."""
    return click.prompt(prompt, hide_input=True, prompt_suffix=": ")


def confirm(prompt: str) -> bool:
    """
    Ask a y/n question.

    Only ``y`` (any case) counts as yes; everything else, including
    blank input, is a no.
    """
    return get_input(f"{prompt} (y/n)").lower() == "y"
