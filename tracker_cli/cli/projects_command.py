"""
Projects Command

Lists the projects known to the tracker.
"""
from argparse import Namespace

from .base_command import CommandOption, TrackerCommand


class ProjectsCommand(TrackerCommand):
    """Command to list all tracked projects"""

    def __init__(self):
        super().__init__()
        self.add_option(CommandOption(
            "selectable", "Only list projects linked to a GitHub repository", type=bool
        ))

    @property
    def name(self) -> str:
        return "projects"

    @property
    def help(self) -> str:
        return "List tracked projects"

    def execute(self, args: Namespace) -> int:
        projects = self.get_application().repository.list_projects()
        if args.selectable:
            projects = [p for p in projects if p.is_selectable]

        if not projects:
            self.out("No projects found")
            return 0

        self.out().out("<b>Projects:</b>").out()
        for project in projects:
            if project.is_selectable:
                self.out(f"  <b>{project.project_id}</b> {project.title} <info>{project.github_slug}</info>")
            else:
                self.out(f"  <b>{project.project_id}</b> {project.title} <comment>(no GitHub repository)</comment>")

        self.debug_out(f"{len(projects)} projects listed")
        return 0
