"""
CLI entry point for Repoman.

Modified: 2026-10-19
"""

import logging
import sys
from pathlib import Path

import click

from repoman import __version__
from repoman.config.settings import Settings
from repoman.core.credentials import TokenManager
from repoman.core.exceptions import ConfigurationError, CredentialError
from repoman.core.github_client import GitHubAPIClient
from repoman.core.repository_manager import RepositoryManager
from repoman.shell.menu import Shell


def setup_logging(level: str) -> None:
    """Send log records to stderr at the configured level."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.ERROR),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.command()
@click.version_option(version=__version__)
def cli():
    """Repoman - manage your GitHub repositories from a text menu."""
    try:
        settings = Settings.load()
    except ConfigurationError as e:
        click.echo(f"✗ Configuration error: {e}", err=True)
        sys.exit(1)

    setup_logging(settings.logging.level)

    try:
        token_manager = TokenManager(token_file=Path(settings.credentials.path))
        credential = token_manager.get_or_prompt()

        with GitHubAPIClient(settings) as client:
            repositories = RepositoryManager(client, owner=settings.github.owner)
            Shell(token_manager, repositories, credential).run()

    except CredentialError as e:
        click.echo(f"✗ Token error: {e}", err=True)
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo("\nGoodbye!")
    except click.Abort:
        raise
    except Exception as e:
        click.echo(f"✗ Unexpected error: {e}", err=True)
        sys.exit(1)


def main():
    cli()


if __name__ == "__main__":
    main()
