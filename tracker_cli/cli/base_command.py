"""
Base Command Class

Provides the foundation for all tracker CLI commands: console output,
logging, progress bars and selection of the project to work on.
"""
import logging
from abc import ABC, abstractmethod
from argparse import ArgumentParser, Namespace
from dataclasses import dataclass
from typing import Any, List, Optional

from ..console_io import ProgressBar, strip_markup
from ..exceptions import ApplicationNotSetError
from ..services.project_repository import Project
from ..services.project_selection_service import ProjectSelectionService


@dataclass
class CommandOption:
    """A command line option declared by a command"""
    long_name: str
    description: str
    short_name: Optional[str] = None
    type: Any = str
    default: Any = None

    def add_to_parser(self, parser: ArgumentParser) -> None:
        flags = [f"--{self.long_name}"]
        if self.short_name:
            flags.append(f"-{self.short_name}")

        if self.type is bool:
            parser.add_argument(*flags, action="store_true", help=self.description)
        else:
            parser.add_argument(
                *flags, type=self.type, default=self.default, help=self.description
            )


PROJECT_OPTION = CommandOption(
    "project", "Id of the project to process, prompts when omitted", short_name="p", type=int
)


class TrackerCommand(ABC):
    """Abstract base class for tracker CLI commands"""

    def __init__(self):
        self.options: List[CommandOption] = []
        self._application = None
        self._logger: Optional[logging.Logger] = None

    @property
    @abstractmethod
    def name(self) -> str:
        """Command name used in CLI"""
        pass

    @property
    @abstractmethod
    def help(self) -> str:
        """Help text for the command"""
        pass

    @abstractmethod
    def execute(self, args: Namespace) -> int:
        """
        Execute the command.

        Args:
            args: Parsed command line arguments

        Returns:
            Exit code (0 for success, non-zero for failure)
        """
        pass

    def get_description(self) -> str:
        return self.help

    def add_option(self, option: CommandOption) -> "TrackerCommand":
        self.options.append(option)
        return self

    def add_arguments(self, parser: ArgumentParser) -> None:
        """
        Add command-specific arguments to the parser.

        Registers every declared option; override to add positionals.

        Args:
            parser: ArgumentParser instance to add arguments to
        """
        for option in self.options:
            option.add_to_parser(parser)

    def validate_args(self, args: Namespace) -> Optional[str]:
        """
        Validate command arguments.

        Args:
            args: Parsed arguments

        Returns:
            Error message if validation fails, None if valid
        """
        return None

    def set_application(self, application) -> "TrackerCommand":
        self._application = application
        return self

    def get_application(self):
        """
        Get the application this command runs in.

        Raises:
            ApplicationNotSetError: If no application was attached
        """
        if self._application is None:
            raise ApplicationNotSetError("Application not set")
        return self._application

    def set_logger(self, logger: logging.Logger) -> None:
        self._logger = logger

    @property
    def logger(self) -> logging.Logger:
        if self._logger is None:
            return self.get_application().logger
        return self._logger

    def out(self, text: str = "", nl: bool = True) -> "TrackerCommand":
        """Write a string to standard output, optionally without new line"""
        self.get_application().out(text, nl)
        return self

    def debug_out(self, text: str) -> "TrackerCommand":
        """Write a string to standard output in verbose mode"""
        self.get_application().debug_out(text)
        return self

    def log_out(self, text: str) -> "TrackerCommand":
        """Pass a string to the logger with the color markup removed"""
        self.logger.info(strip_markup(text))
        return self

    def out_ok(self) -> "TrackerCommand":
        return self.out("<ok>ok</ok>")

    def display_github_rate_limit(self) -> "TrackerCommand":
        self.get_application().display_github_rate_limit()
        return self

    def get_progress_bar(self, target: int) -> ProgressBar:
        return self.get_application().get_progress_bar(target)

    def select_project(self, args: Namespace) -> Project:
        """
        Select the project to process.

        Uses the --project/-p option when given, prompts otherwise. The id
        of the selected project is written back to args.project so later
        steps of the run do not prompt again.

        Raises:
            AbortError: On a cancelled or invalid selection
        """
        application = self.get_application()
        service = ProjectSelectionService(application.repository, application.io, self.logger)

        project = service.select(getattr(args, "project", None))
        args.project = project.project_id
        return project
