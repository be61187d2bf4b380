"""
Core data models for Repoman.

Modified: 2026-10-19
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Credential:
    """
    GitHub access token held by the shell.

    Immutable: a token refresh produces a new Credential instead of
    changing this one. The token is kept out of ``repr``.
    """

    token: str = field(repr=False)


@dataclass
class Repository:
    """
    A repository as returned by the GitHub REST API.

    Only the fields the menu renders or needs to address the repository
    are kept.
    """

    id: int
    name: str
    url: str
    description: Optional[str] = None
    owner: Optional[str] = None

    @classmethod
    def from_api_response(cls, data: Dict[str, Any]) -> "Repository":
        """
        Create a Repository from a decoded REST API repository object.

        Args:
            data: JSON object from ``/user/repos`` or ``/repos/{owner}/{name}``

        Returns:
            Repository instance

        Raises:
            KeyError: If ``id``, ``name`` or ``html_url`` is missing
        """
        owner = data.get("owner") or {}
        return cls(
            id=int(data["id"]),
            name=data["name"],
            url=data["html_url"],
            description=data.get("description"),
            owner=owner.get("login") if isinstance(owner, dict) else None,
        )

    @property
    def has_description(self) -> bool:
        return bool(self.description)


@dataclass
class CreateRepositoryRequest:
    """Body of a ``POST /user/repos`` call."""

    name: str
    description: Optional[str] = None
    private: bool = False

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": self.name, "private": self.private}
        if self.description:
            payload["description"] = self.description
        return payload


def build_update(description: str) -> Dict[str, Any]:
    """
    Build the sparse mapping sent with ``PATCH /repos/{owner}/{name}``.

    Blank input leaves the field out, so an empty mapping means there is
    nothing to update.
    """
    changes: Dict[str, Any] = {}
    if description:
        changes["description"] = description
    return changes
