"""Test utilities and helper functions.

Created: 2026-10-19
"""

import json
from typing import Any, Callable, Dict, List

import httpx


def repo_json(id: int, name: str, owner: str = "test_user", **overrides) -> Dict[str, Any]:
    """Factory for repository objects shaped like the REST API's.

    Example:
        data = repo_json(1, "hello", description="Hi")
    """
    data = {
        "id": id,
        "name": name,
        "full_name": f"{owner}/{name}",
        "owner": {"login": owner},
        "html_url": f"https://github.com/{owner}/{name}",
        "description": None,
        "private": False,
    }
    data.update(overrides)
    return data


class RecordingTransport:
    """httpx.MockTransport wrapper that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []
        self._handler = handler
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def calls(self, method: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content)
