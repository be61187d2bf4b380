"""
Interactive repository operations.

Each operation is a fixed sequence: fetch, prompt, validate, call, render.
Non-success statuses are rendered here and never raised further; transport
errors propagate to the shell's per-operation boundary.

Modified: 2026-10-19
"""

import logging
from typing import Dict, List, Optional

import click

from repoman.core.exceptions import GitHubAPIError, RepomanError
from repoman.core.github_client import GitHubAPIClient
from repoman.core.models import CreateRepositoryRequest, Repository, build_update
from repoman.utils.prompts import confirm, get_input


logger = logging.getLogger(__name__)


def parse_choice(choice: str, count: int) -> Optional[int]:
    """
    Turn a 1-based picker answer into a list index.

    Returns:
        Zero-based index, or None when the input is not a number in 1..count
    """
    try:
        number = int(choice)
    except ValueError:
        return None
    if 1 <= number <= count:
        return number - 1
    return None


class RepositoryManager:
    """
    Menu-facing operations on the authenticated user's repositories.

    Holds no token: every operation takes the current one from the caller.
    """

    def __init__(self, client: GitHubAPIClient, owner: Optional[str] = None):
        """
        Args:
            client: GitHub API client
            owner: Fixed owner login for update/delete URLs (default: resolve per repo)
        """
        self.client = client
        self.owner = owner

    def list(self, token: str) -> None:
        """Print the user's repositories as a numbered list."""
        try:
            repositories = self.client.list_repositories(token)
        except GitHubAPIError as e:
            click.echo(f"Error: {e.status}")
            return

        if not repositories:
            click.echo("You have no repositories.")
            return

        click.echo("\nYour repositories:")
        for i, repo in enumerate(repositories, start=1):
            click.echo(f"{i}. {repo.name} - {repo.url}")
            if repo.has_description:
                click.echo(f"   Description: {repo.description}")

    def create(self, token: str) -> None:
        """Prompt for name, description and visibility, then create the repository."""
        name = get_input("Enter a name for the new repository")
        description = get_input("Enter a description (press Enter to skip)")
        private = confirm("Make the repository private?")

        request = CreateRepositoryRequest(
            name=name,
            description=description or None,
            private=private,
        )

        try:
            repo = self.client.create_repository(token, request)
        except GitHubAPIError as e:
            click.echo(f"Error creating repository: {e.status}")
            click.echo(f"Error details: {e.body}")
            return

        logger.info("Created repository %s", repo.name)
        click.echo(f"Repository created: {repo.url}")

    def update(self, token: str) -> None:
        """Pick a repository and set a new description on it."""
        repositories = self._fetch(token, "update")
        if not repositories:
            return

        click.echo("\nSelect a repository to update:")
        self._render_picker(repositories)

        index = parse_choice(get_input("Enter the repository number"), len(repositories))
        if index is None:
            click.echo("Invalid choice.")
            return

        repo = repositories[index]
        changes = build_update(
            get_input(f"Enter a new description for {repo.name} (press Enter to skip)")
        )
        if not changes:
            click.echo("Nothing to update.")
            return

        try:
            owner = self._owner_for(token, repo)
            self.client.update_repository(token, owner, repo.name, changes)
        except GitHubAPIError as e:
            click.echo(f"Error updating repository: {e.status}")
            click.echo(f"Error details: {e.body}")
            return

        logger.info("Updated repository %s/%s", owner, repo.name)
        click.echo("Repository updated!")

    def delete(self, token: str) -> None:
        """Pick one repository (or ``all``) and delete after confirmation."""
        repositories = self._fetch(token, "delete")
        if not repositories:
            return

        click.echo("\nSelect a repository to delete:")
        self._render_picker(repositories)

        choice = get_input("Enter the repository number (or 'all' to delete everything)")

        if choice.lower() == "all":
            if not confirm("Are you sure you want to delete ALL repositories?"):
                click.echo("Operation cancelled.")
                return

            resolved: Dict[str, str] = {}
            for repo in repositories:
                # One failure must not stop the rest
                try:
                    self._delete_one(token, self._owner_for(token, repo, resolved), repo)
                except RepomanError as e:
                    click.echo(f"Error deleting repository '{repo.name}': {e}")
            return

        index = parse_choice(choice, len(repositories))
        if index is None:
            click.echo("Invalid choice.")
            return

        repo = repositories[index]
        if not confirm(f"Are you sure you want to delete repository '{repo.name}'?"):
            click.echo("Operation cancelled.")
            return

        try:
            owner = self._owner_for(token, repo)
        except GitHubAPIError as e:
            click.echo(f"Error deleting repository '{repo.name}': {e.status}")
            click.echo(f"Error details: {e.body}")
            return

        self._delete_one(token, owner, repo)

    def _delete_one(self, token: str, owner: str, repo: Repository) -> None:
        try:
            self.client.delete_repository(token, owner, repo.name)
        except GitHubAPIError as e:
            click.echo(f"Error deleting repository '{repo.name}': {e.status}")
            click.echo(f"Error details: {e.body}")
            return

        logger.info("Deleted repository %s/%s", owner, repo.name)
        click.echo(f"Repository '{repo.name}' deleted.")

    def _fetch(self, token: str, action: str) -> List[Repository]:
        """Fresh list for a picker; prints why when there is nothing to pick."""
        try:
            repositories = self.client.list_repositories(token)
        except GitHubAPIError as e:
            click.echo(f"Error fetching repositories: {e.status}")
            return []

        if not repositories:
            click.echo(f"You have no repositories to {action}.")
        return repositories

    @staticmethod
    def _render_picker(repositories: List[Repository]) -> None:
        for i, repo in enumerate(repositories, start=1):
            click.echo(f"{i}. {repo.name}")

    def _owner_for(
        self, token: str, repo: Repository, resolved: Optional[Dict[str, str]] = None
    ) -> str:
        """
        Owner segment for /repos/{owner}/{name}.

        Configured owner first, then the owner reported with the repository,
        then the token's own login. ``resolved`` keeps that login for the
        rest of a bulk operation.
        """
        if self.owner:
            return self.owner
        if repo.owner:
            return repo.owner
        if resolved is not None and "login" in resolved:
            return resolved["login"]
        login = self.client.get_authenticated_login(token)
        if resolved is not None:
            resolved["login"] = login
        return login
