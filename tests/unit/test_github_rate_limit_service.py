"""
Unit tests for the GitHub rate limit service
"""
import socket
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock, patch

import aiohttp
import pytest

from tracker_cli.exceptions import GitHubError
from tracker_cli.services.github_rate_limit_service import GitHubRateLimitService, RateLimit


RESPONSE = {
    "resources": {
        "core": {"limit": 5000, "remaining": 4321, "reset": 1700000000, "used": 679}
    },
    "rate": {"limit": 5000, "remaining": 4321, "reset": 1700000000},
}


def mock_client_session(status=200, payload=None, text=""):
    """Patchable replacement for aiohttp.ClientSession"""
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value=text)

    get_context = MagicMock()
    get_context.__aenter__ = AsyncMock(return_value=response)
    get_context.__aexit__ = AsyncMock(return_value=False)

    session = MagicMock()
    session.get = MagicMock(return_value=get_context)

    session_context = MagicMock()
    session_context.__aenter__ = AsyncMock(return_value=session)
    session_context.__aexit__ = AsyncMock(return_value=False)

    return MagicMock(return_value=session_context), session


class TestRateLimit:
    """Test parsing of the API response"""

    def test_from_response(self):
        rate_limit = RateLimit.from_response(RESPONSE)

        assert rate_limit.limit == 5000
        assert rate_limit.remaining == 4321
        assert rate_limit.reset == datetime.fromtimestamp(1700000000)

    def test_from_incomplete_response(self):
        with pytest.raises(GitHubError, match="Unexpected rate limit response"):
            RateLimit.from_response({"resources": {}})


class TestGitHubRateLimitService:
    """Test requests against a mocked aiohttp session"""

    def test_get_rate_limit(self):
        client_session, session = mock_client_session(payload=RESPONSE)
        service = GitHubRateLimitService("https://api.github.com/")

        with patch("aiohttp.ClientSession", client_session):
            rate_limit = service.get_rate_limit()

        assert rate_limit.remaining == 4321
        session.get.assert_called_once_with("https://api.github.com/rate_limit")

    def test_token_is_sent(self):
        client_session, _ = mock_client_session(payload=RESPONSE)
        service = GitHubRateLimitService(token="abc123")

        with patch("aiohttp.ClientSession", client_session):
            service.get_rate_limit()

        headers = client_session.call_args.kwargs["headers"]
        assert headers["Authorization"] == "token abc123"

    def test_anonymous_request_has_no_authorization(self):
        client_session, _ = mock_client_session(payload=RESPONSE)
        service = GitHubRateLimitService()

        with patch("aiohttp.ClientSession", client_session):
            service.get_rate_limit()

        headers = client_session.call_args.kwargs["headers"]
        assert "Authorization" not in headers

    def test_http_error_status(self):
        client_session, _ = mock_client_session(status=401, text="Bad credentials")
        service = GitHubRateLimitService(token="wrong")

        with patch("aiohttp.ClientSession", client_session):
            with pytest.raises(GitHubError, match="HTTP 401: Bad credentials"):
                service.get_rate_limit()

    def test_connection_error(self):
        client_session = MagicMock(side_effect=aiohttp.ClientError("refused"))
        service = GitHubRateLimitService()

        with patch("aiohttp.ClientSession", client_session):
            with pytest.raises(GitHubError, match="Cannot connect to GitHub: refused"):
                service.get_rate_limit()

    def test_timeout_when_server_never_answers(self):
        server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        server.bind(("127.0.0.1", 0))
        server.listen(1)
        host, port = server.getsockname()
        service = GitHubRateLimitService(f"http://{host}:{port}", timeout=0.3)

        try:
            with pytest.raises(GitHubError, match="Cannot connect to GitHub"):
                service.get_rate_limit()
        finally:
            server.close()

    def test_invalid_json_body(self):
        client_session, session = mock_client_session(payload=None)
        response = session.get.return_value.__aenter__.return_value
        response.json = AsyncMock(side_effect=ValueError("Expecting value"))
        service = GitHubRateLimitService()

        with patch("aiohttp.ClientSession", client_session):
            with pytest.raises(GitHubError, match="Invalid rate limit response: Expecting value"):
                service.get_rate_limit()
