"""
Command Registry

Central registry for all CLI commands.
"""
from argparse import ArgumentParser, Namespace
from typing import Dict, Optional

from .base_command import TrackerCommand
from .project_command import ProjectCommand
from .projects_command import ProjectsCommand
from .ratelimit_command import RateLimitCommand


class CommandRegistry:
    """Registry for all available commands"""

    def __init__(self):
        self.commands: Dict[str, TrackerCommand] = {}
        self.aliases: Dict[str, str] = {}
        self._register_commands()
        self._register_aliases()

    def _register_commands(self) -> None:
        """Register all available commands"""
        command_classes = [
            ProjectsCommand,
            ProjectCommand,
            RateLimitCommand,
        ]

        for cmd_class in command_classes:
            cmd = cmd_class()
            self.commands[cmd.name] = cmd

    def _register_aliases(self) -> None:
        """Register command aliases"""
        self.aliases["ls"] = "projects"
        self.aliases["info"] = "project"

    def setup_parser(self, parser: ArgumentParser) -> None:
        """Set up argument parser with all commands"""
        subparsers = parser.add_subparsers(
            dest="command",
            help="Available commands"
        )

        for cmd in self.commands.values():
            subparser = subparsers.add_parser(cmd.name, help=cmd.get_description())
            cmd.add_arguments(subparser)

        for alias, target in self.aliases.items():
            if target in self.commands:
                cmd = self.commands[target]
                subparser = subparsers.add_parser(
                    alias,
                    help=f"{cmd.get_description()} (alias for {target})"
                )
                cmd.add_arguments(subparser)

    def resolve(self, name: str) -> Optional[TrackerCommand]:
        """Get a command by name or alias"""
        return self.commands.get(self.aliases.get(name, name))

    def execute_command(self, args: Namespace, application) -> int:
        """
        Validate and execute the command named in args.

        Errors raised by the command propagate to the caller.
        """
        cmd = self.resolve(args.command)
        if cmd is None:
            return 1

        error = cmd.validate_args(args)
        if error:
            application.out(f"<error>Error: {error}</error>")
            return 1

        cmd.set_application(application)
        return cmd.execute(args)

    def get_command(self, name: str) -> Optional[TrackerCommand]:
        return self.commands.get(name)
