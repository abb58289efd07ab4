"""Unit tests for GitHubClient."""

import httpx
import pytest

from core.exceptions import GitHubProfileNotFoundError
from infrastructure.github.client import REPOS_PER_PAGE, GitHubClient


def _client(handler, **kwargs) -> GitHubClient:
    options = {
        "base_url": "https://api.github.test/",
        "client_id": "",
        "client_secret": "",
        "token": "",
    }
    options.update(kwargs)
    return GitHubClient(transport=httpx.MockTransport(handler), **options)


class TestGetUserRepos:
    @pytest.mark.asyncio
    async def test_requests_five_oldest_repos(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"name": "hello-world"}])

        repos = await _client(handler).get_user_repos("octocat")

        assert repos == [{"name": "hello-world"}]
        request = seen[0]
        assert request.url.path == "/users/octocat/repos"
        assert request.url.params["per_page"] == str(REPOS_PER_PAGE)
        assert request.url.params["sort"] == "created"
        assert request.url.params["direction"] == "asc"
        assert request.headers["user-agent"]
        assert "authorization" not in request.headers

    @pytest.mark.asyncio
    async def test_sends_credentials_when_configured(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[])

        client = _client(handler, client_id="id", client_secret="secret", token="tok")
        await client.get_user_repos("octocat")

        request = seen[0]
        assert request.url.params["client_id"] == "id"
        assert request.url.params["client_secret"] == "secret"
        assert request.headers["authorization"] == "Bearer tok"

    @pytest.mark.asyncio
    async def test_non_200_raises_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"message": "Not Found"})

        with pytest.raises(GitHubProfileNotFoundError) as exc_info:
            await _client(handler).get_user_repos("ghost")

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "No Github profile found"

    @pytest.mark.asyncio
    async def test_transport_failure_raises_not_found(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        with pytest.raises(GitHubProfileNotFoundError):
            await _client(handler).get_user_repos("octocat")
