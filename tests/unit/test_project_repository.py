"""
Unit tests for the project repository
"""
import sqlite3

import pytest

from tracker_cli.exceptions import RepositoryError
from tracker_cli.services.project_repository import Project, ProjectRepository


class TestProject:
    """Test the project data model"""

    def test_selectable_needs_owner_and_repository(self):
        assert Project(1, "A", "owner", "repo").is_selectable
        assert not Project(1, "A", "owner", "").is_selectable
        assert not Project(1, "A", "", "repo").is_selectable
        assert not Project(1, "A").is_selectable

    def test_github_slug(self):
        assert Project(1, "A", "joomla", "joomla-cms").github_slug == "joomla/joomla-cms"
        assert Project(1, "A").github_slug is None

    def test_project_is_immutable(self):
        project = Project(1, "A")
        with pytest.raises(AttributeError):
            project.title = "B"


class TestProjectRepository:
    """Test reading projects from SQLite"""

    def test_list_projects_in_table_order(self, projects_db):
        repository = ProjectRepository(projects_db)

        projects = repository.list_projects()

        assert [p.project_id for p in projects] == [1, 2, 3, 4]
        assert projects[0] == Project(1, "Joomla! CMS", "joomla", "joomla-cms")

    def test_null_columns_become_empty_strings(self, projects_db):
        repository = ProjectRepository(projects_db)

        documentation = repository.list_projects()[3]

        assert documentation.gh_user == ""
        assert documentation.gh_project == ""
        assert not documentation.is_selectable

    def test_path_with_uri_characters(self, tmp_path):
        db_dir = tmp_path / "a#b?c%d"
        db_dir.mkdir()
        conn = sqlite3.connect(db_dir / "tracker.db")
        conn.execute(
            "CREATE TABLE jos_tracker_projects "
            "(project_id INTEGER, title TEXT, gh_user TEXT, gh_project TEXT)"
        )
        conn.execute("INSERT INTO jos_tracker_projects VALUES (5, 'Five', 'o', 'r')")
        conn.commit()
        conn.close()
        before = sorted(p.name for p in tmp_path.iterdir())

        projects = ProjectRepository(db_dir / "tracker.db").list_projects()

        assert projects == [Project(5, "Five", "o", "r")]
        assert sorted(p.name for p in tmp_path.iterdir()) == before

    def test_table_prefix(self, tmp_path):
        db_path = tmp_path / "other.db"
        conn = sqlite3.connect(db_path)
        conn.execute(
            "CREATE TABLE xyz_tracker_projects "
            "(project_id INTEGER, title TEXT, gh_user TEXT, gh_project TEXT)"
        )
        conn.execute("INSERT INTO xyz_tracker_projects VALUES (9, 'Nine', 'o', 'r')")
        conn.commit()
        conn.close()

        repository = ProjectRepository(db_path, table_prefix="xyz_")

        assert repository.table_name == "xyz_tracker_projects"
        assert repository.list_projects() == [Project(9, "Nine", "o", "r")]

    def test_invalid_table_prefix(self, tmp_path):
        with pytest.raises(ValueError, match="Invalid table prefix"):
            ProjectRepository(tmp_path / "tracker.db", table_prefix="x; DROP")

    def test_missing_database(self, tmp_path):
        repository = ProjectRepository(tmp_path / "missing.db")

        with pytest.raises(RepositoryError, match="Database not found"):
            repository.list_projects()

    def test_missing_table(self, tmp_path, caplog):
        db_path = tmp_path / "empty.db"
        sqlite3.connect(db_path).close()
        repository = ProjectRepository(db_path)

        with pytest.raises(RepositoryError, match="Cannot read projects"):
            repository.list_projects()

        assert "Error reading jos_tracker_projects" in caplog.text

    def test_database_is_not_modified(self, projects_db):
        before = projects_db.read_bytes()

        ProjectRepository(projects_db).list_projects()

        assert projects_db.read_bytes() == before
