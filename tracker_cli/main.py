"""
Main entry point for the tracker command line tools
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .application import TrackerApplication
from .cli.command_registry import CommandRegistry
from .config_loader import AppConfig, ConfigLoader
from .console_io import ConsoleIO
from .exceptions import AbortError, TrackerError

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def build_parser(registry: CommandRegistry) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tracker",
        description="Issue tracker command line tools",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # List all projects
  tracker projects

  # Pick a project from a menu
  tracker project

  # Show a project without prompting
  tracker project --project 3
        """
    )

    parser.add_argument(
        '--config', '-c',
        type=Path,
        default=None,
        help='Path to a tracker.yaml/tracker.json configuration file'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show debug output'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Suppress console output'
    )

    parser.add_argument(
        '--log-level', '-l',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default=None,
        help='Logging level (default: from config, INFO)'
    )

    registry.setup_parser(parser)
    return parser


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=LOG_FORMAT
    )

    if config.log_file:
        config.log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(file_handler)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    registry = CommandRegistry()
    parser = build_parser(registry)
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    io = ConsoleIO(verbose=args.verbose, quiet=args.quiet)

    try:
        config = ConfigLoader().load_config(args.config)
    except TrackerError as e:
        io.out(f"<error>Configuration error: {e}</error>")
        return 1

    if args.log_level:
        config.log_level = args.log_level
    configure_logging(config)

    logger = logging.getLogger("tracker")
    application = TrackerApplication(config, io=io, logger=logger)
    io.debug_out(f"Using database {config.database_path}")

    try:
        return registry.execute_command(args, application)
    except AbortError as e:
        io.out().out(f"<error>{e}</error>")
        return 1
    except TrackerError as e:
        logger.error(f"{args.command} failed: {e}")
        io.out(f"<error>Error: {e}</error>")
        return 1


if __name__ == '__main__':
    sys.exit(main())
