"""
Tracker CLI Exceptions

Errors raised by commands and services. Everything derives from TrackerError
so the entry point can turn them into a clean exit instead of a traceback.
"""


class TrackerError(Exception):
    """Base class for all tracker CLI errors"""
    pass


class AbortError(TrackerError):
    """The current command was cancelled or given invalid input"""
    pass


class ApplicationNotSetError(TrackerError):
    """A command was used before an application was attached to it"""
    pass


class ConfigError(TrackerError):
    """Configuration file could not be loaded or holds invalid values"""
    pass


class RepositoryError(TrackerError):
    """The project database could not be read"""
    pass


class GitHubError(TrackerError):
    """The GitHub API could not be queried"""
    pass
