"""Migration 001: the tasks table and its display-order index."""

import sqlite3

from taskdesk_cli.adapters.sqlite import schema

from .runner import Migration


class InitialSchemaMigration(Migration):
    version = 1
    description = "Initial database schema"

    def up(self, connection: sqlite3.Connection) -> None:
        for statement in (*schema.ALL_TABLES, *schema.ALL_INDEXES):
            connection.execute(statement)
