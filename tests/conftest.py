"""Shared test fixtures for Repoman tests.

Created: 2026-10-19
"""

from typing import List
from unittest.mock import Mock

import click
import pytest

from repoman.config.settings import Settings
from repoman.core.github_client import GitHubAPIClient
from repoman.core.models import Repository
from tests.utils import RecordingTransport


class ScriptedTerminal:
    """Answers click prompts from a fixed script and records what was asked."""

    def __init__(self):
        self.answers: List[str] = []
        self.prompts: List[str] = []

    def feed(self, *answers: str) -> None:
        self.answers.extend(answers)

    def prompt(self, text: str, **kwargs) -> str:
        self.prompts.append(text)
        if not self.answers:
            raise AssertionError(f"Unexpected prompt: {text!r}")
        return self.answers.pop(0)


@pytest.fixture
def terminal(monkeypatch):
    """Replace click.prompt with scripted answers.

    Usage:
        terminal.feed("1", "y")
    """
    scripted = ScriptedTerminal()
    monkeypatch.setattr(click, "prompt", scripted.prompt)
    return scripted


@pytest.fixture
def mock_api_client():
    """Mock GitHubAPIClient with an empty repository list."""
    client = Mock(spec=GitHubAPIClient)
    client.list_repositories.return_value = []
    client.get_authenticated_login.return_value = "test_user"
    return client


@pytest.fixture
def sample_repos():
    """Standard set of test repos."""
    return [
        Repository(
            id=1,
            name="hello-world",
            url="https://github.com/test_user/hello-world",
            description="My first repository",
            owner="test_user",
        ),
        Repository(
            id=2,
            name="dotfiles",
            url="https://github.com/test_user/dotfiles",
            description=None,
            owner="test_user",
        ),
        Repository(
            id=3,
            name="infra",
            url="https://github.com/acme/infra",
            description="",
            owner="acme",
        ),
    ]


@pytest.fixture
def make_api():
    """Build a real GitHubAPIClient on top of a recording mock transport.

    Usage:
        recorder, client = make_api(handler)
    """
    clients = []

    def factory(handler, settings=None):
        recorder = RecordingTransport(handler)
        client = GitHubAPIClient(settings or Settings(), transport=recorder.transport)
        clients.append(client)
        return recorder, client

    yield factory

    for client in clients:
        client.close()
