"""Shared pytest fixtures for the tracker CLI tests"""

import sqlite3

import pytest


PROJECT_ROWS = [
    (1, "Joomla! CMS", "joomla", "joomla-cms"),
    (2, "Tracker Sandbox", "", ""),
    (3, "Joomla! Framework", "joomla-framework", "framework"),
    (4, "Documentation", None, None),
]


def create_projects_db(db_path, rows=PROJECT_ROWS, prefix="jos_"):
    """Create a tracker database holding the given project rows"""
    conn = sqlite3.connect(db_path)
    try:
        conn.execute(
            f"CREATE TABLE {prefix}tracker_projects ("
            "project_id INTEGER PRIMARY KEY, title TEXT NOT NULL, "
            "gh_user TEXT, gh_project TEXT)"
        )
        conn.executemany(
            f"INSERT INTO {prefix}tracker_projects VALUES (?, ?, ?, ?)", rows
        )
        conn.commit()
    finally:
        conn.close()
    return db_path


@pytest.fixture
def projects_db(tmp_path):
    """Path to a tracker database with four sample projects"""
    return create_projects_db(tmp_path / "tracker.db")
