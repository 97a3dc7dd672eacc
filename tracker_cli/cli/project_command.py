"""
Project Command

Selects a project and shows its details.
"""
from argparse import Namespace

from .base_command import PROJECT_OPTION, TrackerCommand


class ProjectCommand(TrackerCommand):
    """Command to select a project and show it"""

    def __init__(self):
        super().__init__()
        self.add_option(PROJECT_OPTION)

    @property
    def name(self) -> str:
        return "project"

    @property
    def help(self) -> str:
        return "Select a project and show its details"

    def execute(self, args: Namespace) -> int:
        project = self.select_project(args)

        self.out()
        self.out(f"Project: <b>{project.title}</b>")
        self.out(f"Id: {project.project_id}")
        if project.is_selectable:
            self.out(f"GitHub: <info>{project.github_slug}</info>")
        else:
            self.out("GitHub: <comment>not linked</comment>")

        return 0
