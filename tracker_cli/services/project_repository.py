"""
Project Repository

Read-only access to the tracked projects stored in the tracker database.
"""
import logging
import re
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional

from tracker_cli.exceptions import RepositoryError

PREFIX_PATTERN = re.compile(r"[A-Za-z0-9_]*")


@dataclass(frozen=True)
class Project:
    """A tracked project as needed for project selection"""
    project_id: int
    title: str
    gh_user: str = ""
    gh_project: str = ""

    @property
    def is_selectable(self) -> bool:
        """Projects need a GitHub owner and repository to show up in menus"""
        return bool(self.gh_user and self.gh_project)

    @property
    def github_slug(self) -> Optional[str]:
        if not self.is_selectable:
            return None
        return f"{self.gh_user}/{self.gh_project}"

    @classmethod
    def from_db_row(cls, row: sqlite3.Row) -> "Project":
        return cls(
            project_id=int(row["project_id"]),
            title=row["title"] or "",
            gh_user=row["gh_user"] or "",
            gh_project=row["gh_project"] or "",
        )


class ProjectRepository:
    """Loads projects from the <prefix>tracker_projects table"""

    def __init__(self, db_path: Path, table_prefix: str = "jos_"):
        if not PREFIX_PATTERN.fullmatch(table_prefix):
            raise ValueError(f"Invalid table prefix: '{table_prefix}'")

        self.logger = logging.getLogger(__name__)
        self.db_path = Path(db_path)
        self.table_name = f"{table_prefix}tracker_projects"

    @contextmanager
    def _get_connection(self) -> Iterator[sqlite3.Connection]:
        """Open a read-only connection to the database"""
        if not self.db_path.exists():
            raise RepositoryError(f"Database not found: {self.db_path}")

        conn = sqlite3.connect(self.db_path.resolve().as_uri() + "?mode=ro", uri=True)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def _query(self, sql: str, params: tuple = ()) -> List[sqlite3.Row]:
        try:
            with self._get_connection() as conn:
                return conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            self.logger.error(f"Error reading {self.table_name}: {e}")
            raise RepositoryError(f"Cannot read projects: {e}")

    def list_projects(self) -> List[Project]:
        """
        Fetch all projects in database order.

        Returns:
            List of projects, a fresh query on every call
        """
        rows = self._query(
            f'SELECT project_id, title, gh_user, gh_project FROM "{self.table_name}"'
        )
        projects = [Project.from_db_row(row) for row in rows]
        self.logger.debug(f"Loaded {len(projects)} projects from {self.table_name}")
        return projects

