"""Database schema definitions for the local SQLite task file."""

from __future__ import annotations

# Schema version tracking
SCHEMA_VERSION = 1

# AUTOINCREMENT keeps ids of deleted rows from being handed out again.
CREATE_TASKS_TABLE = """
CREATE TABLE IF NOT EXISTS tasks (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL CHECK (length(trim(title)) > 0),
    deadline DATE NOT NULL,
    is_completed BOOLEAN NOT NULL DEFAULT 0
)
"""

CREATE_TASKS_DEADLINE_INDEX = """
CREATE INDEX IF NOT EXISTS idx_tasks_completed_deadline
ON tasks(is_completed, deadline)
"""

ALL_TABLES = [
    CREATE_TASKS_TABLE,
]

ALL_INDEXES = [
    CREATE_TASKS_DEADLINE_INDEX,
]
