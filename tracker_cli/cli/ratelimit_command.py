"""
Rate Limit Command

Shows the remaining GitHub API quota.
"""
from argparse import Namespace

from .base_command import TrackerCommand


class RateLimitCommand(TrackerCommand):
    """Command to display the GitHub rate limit"""

    @property
    def name(self) -> str:
        return "ratelimit"

    @property
    def help(self) -> str:
        return "Show the GitHub API rate limit"

    def execute(self, args: Namespace) -> int:
        self.display_github_rate_limit()
        return 0
