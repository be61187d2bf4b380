"""
Tests for the menu loop.

Modified: 2026-10-19
"""

from unittest.mock import Mock

import pytest

from repoman.core.credentials import TokenManager
from repoman.core.exceptions import CredentialError, GitHubAPIError, NetworkError
from repoman.core.models import Credential
from repoman.core.repository_manager import RepositoryManager
from repoman.shell.menu import Menu, Shell


@pytest.fixture
def token_manager():
    manager = Mock(spec=TokenManager)
    manager.update.return_value = Credential("ghp_new")
    return manager


@pytest.fixture
def repositories():
    return Mock(spec=RepositoryManager)


@pytest.fixture
def shell(token_manager, repositories):
    return Shell(token_manager, repositories, Credential("ghp_old"))


class TestMenu:
    """Test menu rendering."""

    def test_render(self, capsys):
        Menu().render()

        out = capsys.readouterr().out
        assert "=== GitHub Repository Manager ===" in out
        for line in [
            "1. List repositories",
            "2. Create a repository",
            "3. Update a repository",
            "4. Delete a repository",
            "5. Change token",
            "6. Exit",
        ]:
            assert line in out


class TestShell:
    """Test Shell dispatch."""

    @pytest.mark.parametrize(
        "choice,method",
        [("1", "list"), ("2", "create"), ("3", "update"), ("4", "delete")],
    )
    def test_dispatch(self, shell, repositories, choice, method):
        shell.handle(choice)

        getattr(repositories, method).assert_called_once_with("ghp_old")

    @pytest.mark.parametrize("choice", ["0", "7", "list", ""])
    def test_invalid_choice(self, shell, repositories, capsys, choice):
        shell.handle(choice)

        assert "Invalid choice. Please try again." in capsys.readouterr().out
        repositories.list.assert_not_called()

    def test_token_refresh_replaces_credential(self, shell, token_manager, repositories):
        old = shell.credential

        shell.handle("5")
        shell.handle("1")

        token_manager.update.assert_called_once()
        assert shell.credential == Credential("ghp_new")
        assert old == Credential("ghp_old")
        repositories.list.assert_called_once_with("ghp_new")

    def test_operation_error_is_reported(self, shell, repositories, capsys):
        repositories.list.side_effect = NetworkError("Request to GitHub failed: timeout")

        shell.handle("1")

        captured = capsys.readouterr()
        assert "✗ Request to GitHub failed: timeout" in captured.err

    def test_api_error_is_reported(self, shell, repositories, capsys):
        repositories.delete.side_effect = GitHubAPIError(401, "Bad credentials")

        shell.handle("4")

        assert "✗ GitHub API error: 401 Bad credentials" in capsys.readouterr().err

    def test_credential_error_is_fatal(self, shell, token_manager):
        token_manager.update.side_effect = CredentialError("Cannot save token")

        with pytest.raises(CredentialError):
            shell.handle("5")

    def test_run_until_exit(self, shell, repositories, terminal, capsys):
        terminal.feed("9", "1", "6")

        shell.run()

        out = capsys.readouterr().out
        assert out.count("=== GitHub Repository Manager ===") == 3
        assert "Invalid choice. Please try again." in out
        assert out.rstrip().endswith("Goodbye!")
        repositories.list.assert_called_once_with("ghp_old")

    def test_run_continues_after_error(self, shell, repositories, terminal):
        repositories.list.side_effect = [NetworkError("down"), None]
        terminal.feed("1", "1", "6")

        shell.run()

        assert repositories.list.call_count == 2
