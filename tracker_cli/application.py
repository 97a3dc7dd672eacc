"""
Tracker Application

Holds the services shared by all commands of one CLI run: configuration,
console, logger, project repository and GitHub client.
"""
import logging
from typing import Optional

from .config_loader import AppConfig
from .console_io import ConsoleIO, ProgressBar
from .services.github_rate_limit_service import GitHubRateLimitService
from .services.project_repository import ProjectRepository


class TrackerApplication:
    """Services for one command run, passed explicitly to commands"""

    def __init__(
        self,
        config: AppConfig,
        io: Optional[ConsoleIO] = None,
        logger: Optional[logging.Logger] = None,
        repository: Optional[ProjectRepository] = None,
        github: Optional[GitHubRateLimitService] = None,
    ):
        self.config = config
        self.io = io or ConsoleIO()
        self.logger = logger or logging.getLogger("tracker")
        self.repository = repository or ProjectRepository(
            config.database_path, config.table_prefix
        )
        self.github = github or GitHubRateLimitService(
            config.github_api_url, config.github_token
        )

    def out(self, text: str = "", nl: bool = True) -> "TrackerApplication":
        self.io.out(text, nl)
        return self

    def debug_out(self, text: str) -> "TrackerApplication":
        self.io.debug_out(text)
        return self

    def get_progress_bar(self, target: int) -> ProgressBar:
        """
        Create a progress bar counting to target.

        The bar is silent when progress bars are disabled in the config.
        """
        if not self.config.use_progress_bar:
            return ProgressBar(self.io.console, target, disable=True)
        return self.io.progress_bar(target)

    def display_github_rate_limit(self) -> "TrackerApplication":
        """Print the remaining GitHub API quota"""
        rate_limit = self.github.get_rate_limit()
        self.out(
            f"GitHub rate limit: <b>{rate_limit.remaining}</b> of {rate_limit.limit} "
            f"requests remaining (reset at {rate_limit.reset:%H:%M:%S})"
        )
        return self
