"""
Local storage for the GitHub personal access token.

The token lives in a small JSON file (``{"token": "..."}``). When the file
is missing or unreadable the user is asked for a token on the terminal.

Modified: 2026-10-19
"""

import json
import logging
from pathlib import Path
from typing import Callable, Optional

import click

from repoman.core.exceptions import CredentialError
from repoman.core.models import Credential
from repoman.utils.prompts import get_secret


logger = logging.getLogger(__name__)

DEFAULT_TOKEN_FILE = Path("config.json")


class TokenManager:
    """
    Credential store for the GitHub token.

    Owns the credential file. Callers get an immutable Credential back and
    pass its token to the API client per call.
    """

    def __init__(
        self,
        token_file: Optional[Path] = None,
        prompt: Optional[Callable[[str], str]] = None,
    ):
        """
        Initialize the token manager.

        Args:
            token_file: Path to store/load the token (default: ./config.json)
            prompt: Function used to ask for a token (default: hidden terminal input)
        """
        self.token_file = Path(token_file) if token_file is not None else DEFAULT_TOKEN_FILE
        self._prompt = prompt or get_secret

    def get_or_prompt(self) -> Credential:
        """
        Return the stored token, asking for one if there is none.

        Returns:
            Credential loaded from disk or entered by the user

        Raises:
            CredentialError: If a newly entered token cannot be saved
        """
        token = self.load()
        if token is not None:
            logger.debug("Loaded token from %s", self.token_file)
            return Credential(token)

        token = self._prompt("Enter your GitHub token")
        self.save(token)
        return Credential(token)

    def update(self) -> Credential:
        """
        Ask for a new token and overwrite the stored one.

        Raises:
            CredentialError: If the token cannot be saved
        """
        token = self._prompt("Enter a new GitHub token")
        self.save(token)
        return Credential(token)

    def save(self, token: str) -> None:
        """
        Save token to file.

        Args:
            token: GitHub access token

        Raises:
            CredentialError: If the file cannot be written
        """
        data = {"token": token}

        try:
            self.token_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.token_file, "w") as f:
                json.dump(data, f)

            # Set restrictive permissions (owner read/write only)
            self.token_file.chmod(0o600)
        except OSError as e:
            raise CredentialError(f"Cannot save token to {self.token_file}: {e}") from e

        logger.info("Saved token to %s", self.token_file)
        click.echo("✓ Token saved successfully!")

    def load(self) -> Optional[str]:
        """
        Load token from file.

        Returns:
            The stored token, or None if the file is missing or malformed
        """
        try:
            with open(self.token_file, "r") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.debug("No usable token file at %s: %s", self.token_file, e)
            return None

        if not isinstance(data, dict):
            return None

        token = data.get("token")
        if not isinstance(token, str):
            return None
        return token
