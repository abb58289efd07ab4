"""GitHub REST client for a user's public repositories."""

import logging
from typing import Any

import httpx

from core.config import settings
from core.exceptions import GitHubProfileNotFoundError

logger = logging.getLogger(__name__)

# Five oldest-first repositories, like the profile page shows them
REPOS_PER_PAGE = 5


class GitHubClient:
    """Read-only lookup of a GitHub user's repositories.

    Nothing is cached or persisted; every call goes upstream.
    """

    def __init__(
        self,
        base_url: str = settings.github_api_url,
        client_id: str = settings.github_client_id,
        client_secret: str = settings.github_client_secret,
        token: str = settings.github_token,
        timeout: float = settings.github_timeout_seconds,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client_id = client_id
        self._client_secret = client_secret
        self._token = token
        self._timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "User-Agent": "connect-api",
            "Accept": "application/vnd.github+json",
        }
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def _params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "per_page": REPOS_PER_PAGE,
            "sort": "created",
            "direction": "asc",
        }
        if self._client_id and self._client_secret:
            params["client_id"] = self._client_id
            params["client_secret"] = self._client_secret
        return params

    async def get_user_repos(self, username: str) -> list[dict[str, Any]]:
        """
        Fetch a user's repositories, oldest first.

        Raises:
            GitHubProfileNotFoundError: On any non-200 answer or transport failure
        """
        url = f"{self._base_url}/users/{username}/repos"
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, params=self._params(), headers=self._headers())
        except httpx.HTTPError as e:
            logger.warning("GitHub request for %s failed: %s", username, e)
            raise GitHubProfileNotFoundError(username) from e

        if response.status_code != 200:
            logger.info("GitHub returned %d for %s", response.status_code, username)
            raise GitHubProfileNotFoundError(username)

        return response.json()  # type: ignore[no-any-return]
