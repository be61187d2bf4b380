"""
GitHub REST client for the authenticated user's repositories.

Service layer consumed by the repository operations. The token is passed
in on every call and only ever used as the Authorization header.

Modified: 2026-10-19
"""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from github import Auth, Github, GithubException

from repoman.config.settings import Settings
from repoman.core.exceptions import GitHubAPIError, NetworkError, RepomanError
from repoman.core.models import CreateRepositoryRequest, Repository


logger = logging.getLogger(__name__)


class GitHubAPIClient:
    """
    GitHub API client for list, create, update and delete of repositories.

    Uses httpx for the repository calls so non-success bodies can be shown
    verbatim, and PyGithub for the profile lookup of the token owner.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize GitHub API client.

        Args:
            settings: Settings instance (default: built-in defaults)
            transport: Optional httpx transport, mainly for tests
        """
        self.settings = settings or Settings()
        gh = self.settings.github
        self._http = httpx.Client(
            base_url=gh.api_url,
            headers={
                "User-Agent": gh.user_agent,
                "Accept": "application/vnd.github+json",
            },
            timeout=gh.timeout,
            transport=transport,
        )

    def __enter__(self) -> "GitHubAPIClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def list_repositories(self, token: str) -> List[Repository]:
        """
        Get the repositories of the authenticated user.

        Args:
            token: GitHub access token

        Returns:
            List of Repository objects, in API order

        Raises:
            GitHubAPIError: On non-success status
            NetworkError: If the request fails before a response arrives
        """
        response = self._request("GET", "/user/repos", token)
        data = self._decode(response)
        if not isinstance(data, list):
            raise RepomanError("Unexpected response from GitHub: expected a list of repositories")
        try:
            return [Repository.from_api_response(item) for item in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RepomanError(f"Unexpected repository data from GitHub: {e}")

    def create_repository(self, token: str, request: CreateRepositoryRequest) -> Repository:
        """
        Create a repository for the authenticated user.

        Args:
            token: GitHub access token
            request: Name, description and visibility of the new repository

        Returns:
            The created Repository

        Raises:
            GitHubAPIError: On non-success status
            NetworkError: If the request fails before a response arrives
        """
        response = self._request("POST", "/user/repos", token, json=request.to_payload())
        return self._repository(response)

    def update_repository(
        self, token: str, owner: str, name: str, changes: Dict[str, Any]
    ) -> Repository:
        """
        Apply a partial update to one repository.

        Args:
            token: GitHub access token
            owner: Repository owner login
            name: Repository name
            changes: Sparse mapping of field name to new value

        Returns:
            The updated Repository

        Raises:
            GitHubAPIError: On non-success status
            NetworkError: If the request fails before a response arrives
        """
        response = self._request("PATCH", f"/repos/{owner}/{name}", token, json=changes)
        return self._repository(response)

    def delete_repository(self, token: str, owner: str, name: str) -> None:
        """
        Delete one repository.

        Raises:
            GitHubAPIError: On non-success status
            NetworkError: If the request fails before a response arrives
        """
        self._request("DELETE", f"/repos/{owner}/{name}", token)

    def get_authenticated_login(self, token: str) -> str:
        """
        Look up the login of the user the token belongs to.

        Args:
            token: GitHub access token

        Returns:
            The user's login

        Raises:
            GitHubAPIError: If GitHub rejects the lookup
            NetworkError: If GitHub cannot be reached
        """
        gh = self.settings.github
        client = Github(
            auth=Auth.Token(token),
            base_url=gh.api_url,
            user_agent=gh.user_agent,
            timeout=int(gh.timeout),
        )
        try:
            login = client.get_user().login
        except GithubException as e:
            message = e.data.get("message", "") if isinstance(e.data, dict) else ""
            raise GitHubAPIError(e.status, message, json.dumps(e.data))
        except Exception as e:
            raise NetworkError(f"Failed to look up authenticated user: {e}") from e
        finally:
            client.close()

        logger.debug("Resolved authenticated user %s", login)
        return login

    def _request(self, method: str, path: str, token: str, **kwargs) -> httpx.Response:
        """Send one authenticated request and raise on non-success status."""
        headers = {"Authorization": f"token {token}"}
        try:
            response = self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path, e)
            raise NetworkError(f"Request to GitHub failed: {e}") from e

        logger.debug("%s %s -> %s", method, path, response.status_code)

        if not response.is_success:
            logger.warning("%s %s returned %s", method, path, response.status_code)
            raise GitHubAPIError(response.status_code, response.reason_phrase, response.text)

        return response

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RepomanError(f"GitHub returned invalid JSON: {e}")

    def _repository(self, response: httpx.Response) -> Repository:
        data = self._decode(response)
        try:
            return Repository.from_api_response(data)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise RepomanError(f"Unexpected repository data from GitHub: {e}")
