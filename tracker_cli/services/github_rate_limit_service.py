"""
GitHub Rate Limit Service

Queries the GitHub API for the remaining request quota of the configured
token (or of the anonymous client).
"""
import asyncio
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

import aiohttp

from tracker_cli.exceptions import GitHubError


@dataclass
class RateLimit:
    """Core API rate limit"""
    limit: int
    remaining: int
    reset: datetime

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "RateLimit":
        try:
            core = data["resources"]["core"]
            return cls(
                limit=int(core["limit"]),
                remaining=int(core["remaining"]),
                reset=datetime.fromtimestamp(int(core["reset"])),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise GitHubError(f"Unexpected rate limit response: {e}")


class GitHubRateLimitService:
    """Fetches rate limit information from the GitHub API"""

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        token: Optional[str] = None,
        timeout: float = 10.0,
    ):
        self.logger = logging.getLogger(__name__)
        self.api_url = api_url.rstrip("/")
        self.token = token
        self.timeout = timeout

    def _headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github+json"}
        if self.token:
            headers["Authorization"] = f"token {self.token}"
        return headers

    async def fetch_rate_limit(self) -> RateLimit:
        """
        Request the current rate limit.

        Returns:
            RateLimit of the core API

        Raises:
            GitHubError: On connection problems, timeouts, a non-200 response
                         or a malformed body
        """
        url = f"{self.api_url}/rate_limit"
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(headers=self._headers(), timeout=timeout) as session:
                async with session.get(url) as resp:
                    if resp.status != 200:
                        raise GitHubError(f"HTTP {resp.status}: {await resp.text()}")
                    data = await resp.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            reason = str(e) or type(e).__name__
            self.logger.error(f"Connection error: {reason}")
            raise GitHubError(f"Cannot connect to GitHub: {reason}")
        except ValueError as e:
            self.logger.error(f"Invalid rate limit response: {e}")
            raise GitHubError(f"Invalid rate limit response: {e}")

        rate_limit = RateLimit.from_response(data)
        self.logger.debug(f"GitHub rate limit: {rate_limit.remaining}/{rate_limit.limit}")
        return rate_limit

    def get_rate_limit(self) -> RateLimit:
        """Blocking wrapper around fetch_rate_limit"""
        return asyncio.run(self.fetch_rate_limit())
