"""
Console IO

Line based console input and output for the tracker commands. Output text
may carry a small inline markup (<b>, <info>, <comment>, <question>, <error>,
<ok>) which is rendered with rich styles on the console and stripped before
the same text reaches a logger.
"""
import re
import sys
from typing import Optional, TextIO

from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, TaskID, TextColumn

MARKUP_PATTERN = re.compile(r"<[a-z/]+>")

TAG_PATTERN = re.compile(r"<(/?)([a-z]+)>")

TAG_STYLES = {
    "b": "bold",
    "info": "green",
    "comment": "yellow",
    "question": "bold cyan",
    "error": "bold red",
    "ok": "bold green",
}


def strip_markup(text: str) -> str:
    """Remove inline markup tags, e.g. before sending text to a logger"""
    return MARKUP_PATTERN.sub("", text)


def to_rich_markup(text: str) -> str:
    """
    Translate inline markup into rich console markup.

    Literal square brackets are escaped so rich prints them as-is.
    Unknown tags are left untouched.
    """
    def replace(match: "re.Match[str]") -> str:
        closing, tag = match.groups()
        style = TAG_STYLES.get(tag)
        if style is None:
            return match.group(0)
        return f"[/{style}]" if closing else f"[{style}]"

    return TAG_PATTERN.sub(replace, escape(text))


class ProgressBar:
    """A single-task progress bar counting up to a target number"""

    def __init__(self, console: Console, target: int, disable: bool = False):
        self.target = target
        self.progress = Progress(
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            console=console,
            disable=disable,
        )
        self.task_id: Optional[TaskID] = None

    def start(self) -> "ProgressBar":
        if self.task_id is None:
            self.progress.start()
            self.task_id = self.progress.add_task("", total=self.target)
        return self

    def update(self, current: int) -> None:
        """Set the absolute progress"""
        self.start()
        self.progress.update(self.task_id, completed=min(current, self.target))

    def advance(self, step: int = 1) -> None:
        self.start()
        self.progress.advance(self.task_id, step)

    @property
    def completed(self) -> int:
        if self.task_id is None:
            return 0
        return int(self.progress.tasks[0].completed)

    def finish(self) -> None:
        if self.task_id is not None:
            self.progress.stop()

    def __enter__(self) -> "ProgressBar":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish()


class ConsoleIO:
    """Reads lines from and writes styled lines to the terminal"""

    def __init__(
        self,
        stdout: Optional[TextIO] = None,
        stdin: Optional[TextIO] = None,
        verbose: bool = False,
        quiet: bool = False,
    ):
        self.stdin = stdin or sys.stdin
        self.console = Console(file=stdout or sys.stdout, highlight=False, emoji=False)
        self.verbose = verbose
        self.quiet = quiet

    def out(self, text: str = "", nl: bool = True) -> "ConsoleIO":
        """
        Write a line of (marked up) text.

        Args:
            text: Text to display
            nl: Append a new line at the end of the text
        """
        if not self.quiet:
            self.console.print(to_rich_markup(text), end="\n" if nl else "", soft_wrap=True)
        return self

    def debug_out(self, text: str) -> "ConsoleIO":
        """Write a line only in verbose mode"""
        if self.verbose:
            self.out(f"<comment>DEBUG</comment> {text}")
        return self

    def read_line(self) -> str:
        """Block until one line is read; end of input reads as an empty line"""
        line = self.stdin.readline()
        return line.rstrip("\r\n")

    def progress_bar(self, target: int) -> ProgressBar:
        return ProgressBar(self.console, target, disable=self.quiet)
