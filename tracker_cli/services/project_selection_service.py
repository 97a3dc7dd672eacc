"""
Project Selection Service

Resolves which project a command operates on, either from an explicit
project id or from an interactive numbered menu.
"""
import logging
import re
from typing import Dict, Optional, Sequence

from tracker_cli.console_io import ConsoleIO, strip_markup
from tracker_cli.exceptions import AbortError
from tracker_cli.services.project_repository import Project, ProjectRepository

LEADING_INT_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


def parse_menu_choice(response: str) -> int:
    """
    Convert a typed answer to a number.

    Leading whitespace and an optional sign are accepted, trailing garbage is
    ignored. Anything without leading digits counts as 0.
    """
    match = LEADING_INT_PATTERN.match(response)
    return int(match.group(1)) if match else 0


def select_project(
    explicit_id: Optional[int],
    projects: Sequence[Project],
    io: ConsoleIO,
    logger: logging.Logger,
) -> Project:
    """
    Pick a project by id or by asking the operator.

    An explicit id is looked up among all projects, GitHub linkage is not
    required on that path. Without one, only projects linked to GitHub are
    offered, numbered from 1 in the order received.

    Args:
        explicit_id: Project id given on the command line, 0/None to prompt
        projects: Candidate projects
        io: Console to prompt on
        logger: Receives the selected project

    Returns:
        The selected project

    Raises:
        AbortError: "Aborted" on an empty or zero answer,
                    "Invalid project" on an unknown id or menu number
    """
    if explicit_id:
        selected = next((p for p in projects if p.project_id == explicit_id), None)
        if selected is None:
            raise AbortError("Invalid project")
    else:
        io.out().out("<b>Available projects:</b>").out()

        checks: Dict[int, Project] = {}
        for project in projects:
            if project.is_selectable:
                number = len(checks) + 1
                io.out(f"  <b>{number}</b> (id: {project.project_id}) {project.title}")
                checks[number] = project

        io.out().out("<question>Select a project:</question> ", False)

        choice = parse_menu_choice(io.read_line().strip())
        if not choice:
            raise AbortError("Aborted")
        if choice not in checks:
            raise AbortError("Invalid project")

        selected = checks[choice]

    logger.info(strip_markup(f"Processing project: <info>{selected.title}</info>"))
    return selected


class ProjectSelectionService:
    """Selects projects from the repository for a command run"""

    def __init__(
        self,
        repository: ProjectRepository,
        io: ConsoleIO,
        logger: Optional[logging.Logger] = None,
    ):
        self.repository = repository
        self.io = io
        self.logger = logger or logging.getLogger(__name__)

    def select(self, explicit_id: Optional[int] = None) -> Project:
        """Fetch the current project list and select one of them"""
        projects = self.repository.list_projects()
        return select_project(explicit_id, projects, self.io, self.logger)
