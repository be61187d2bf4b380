"""
Interactive menu loop.

Modified: 2026-10-19
"""

import logging
from typing import Callable, Dict, Optional

import click

from repoman.core.credentials import TokenManager
from repoman.core.exceptions import CredentialError, RepomanError
from repoman.core.models import Credential
from repoman.core.repository_manager import RepositoryManager
from repoman.utils.prompts import get_input


logger = logging.getLogger(__name__)


class Menu:
    """The fixed six-option main menu."""

    TITLE = "=== GitHub Repository Manager ==="

    OPTIONS = [
        ("1", "List repositories"),
        ("2", "Create a repository"),
        ("3", "Update a repository"),
        ("4", "Delete a repository"),
        ("5", "Change token"),
        ("6", "Exit"),
    ]

    def render(self) -> None:
        click.echo(f"\n{self.TITLE}")
        for key, label in self.OPTIONS:
            click.echo(f"{key}. {label}")


class Shell:
    """
    Main loop: show the menu, read a choice, run it, repeat until exit.

    The only state is the current Credential. A token change replaces it
    and later operations receive the new token.
    """

    EXIT = "6"

    def __init__(
        self,
        token_manager: TokenManager,
        repositories: RepositoryManager,
        credential: Credential,
        menu: Optional[Menu] = None,
    ):
        self.token_manager = token_manager
        self.repositories = repositories
        self.credential = credential
        self.menu = menu or Menu()

        self._operations: Dict[str, Callable[[str], None]] = {
            "1": self.repositories.list,
            "2": self.repositories.create,
            "3": self.repositories.update,
            "4": self.repositories.delete,
        }

    def run(self) -> None:
        """Run until the user picks exit."""
        while True:
            self.menu.render()
            choice = get_input("Choose an action (1-6)")

            if choice == self.EXIT:
                click.echo("Goodbye!")
                return

            self.handle(choice)

    def handle(self, choice: str) -> None:
        """
        Dispatch one menu choice.

        Errors from a repository operation are reported and the loop goes
        on; a token that cannot be saved is fatal and propagates.
        """
        if choice == "5":
            self.credential = self.token_manager.update()
            return

        operation = self._operations.get(choice)
        if operation is None:
            click.echo("Invalid choice. Please try again.")
            return

        try:
            operation(self.credential.token)
        except CredentialError:
            raise
        except RepomanError as e:
            logger.warning("Menu action %s failed: %s", choice, e)
            click.echo(f"✗ {e}", err=True)
