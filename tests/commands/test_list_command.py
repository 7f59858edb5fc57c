"""Unit tests for the 'list' command."""

import json
from datetime import date

import yaml
from typer.testing import CliRunner

from taskdesk_cli.commands.list_command import app

runner = CliRunner()


class TestListCommand:
    def test_empty_database(self, db_path):
        result = runner.invoke(app, ["--db", str(db_path)])

        assert result.exit_code == 0
        assert "No tasks to display" in result.output

    def test_json_is_sorted_for_display(self, db_path, seed):
        seed(
            ("Done early", date(2020, 1, 1), True),
            ("Later", date(2099, 3, 1)),
            ("Sooner", date(2099, 1, 1)),
        )

        result = runner.invoke(app, ["--json", "--db", str(db_path)])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [t["title"] for t in data] == ["Sooner", "Later", "Done early"]
        assert data[2]["status"] == "done"
        assert data[2]["overdue_days"] == 0

    def test_overdue_task_is_flagged(self, db_path, seed):
        seed(("Late", date(2020, 1, 1)))

        result = runner.invoke(app, ["-o", "json", "--db", str(db_path)])

        task = json.loads(result.output)[0]
        assert task["status"] == "overdue"
        assert task["overdue_days"] == (date.today() - date(2020, 1, 1)).days

    def test_pretty_output_shows_overdue_days(self, db_path, seed):
        seed(("Late", date(2020, 1, 1)))

        result = runner.invoke(app, ["--db", str(db_path)])

        assert result.exit_code == 0
        assert "Late" in result.output
        assert "d overdue" in result.output

    def test_yaml_output(self, db_path, seed):
        seed(("Buy milk", date(2099, 1, 1)))

        result = runner.invoke(app, ["-o", "yaml", "--db", str(db_path)])

        data = yaml.safe_load(result.output)
        assert data[0]["title"] == "Buy milk"
        assert data[0]["deadline"] == "2099-01-01"

    def test_status_filter(self, db_path, seed):
        seed(("Open", date(2099, 1, 1)), ("Closed", date(2099, 1, 1), True))

        result = runner.invoke(app, ["--status", "completed", "--json", "--db", str(db_path)])

        assert [t["title"] for t in json.loads(result.output)] == ["Closed"]

    def test_unknown_status(self, db_path):
        result = runner.invoke(app, ["--status", "someday", "--db", str(db_path)])

        assert result.exit_code == 2
        assert "Unknown status" in result.output

    def test_unknown_output_format(self, db_path):
        result = runner.invoke(app, ["-o", "xml", "--db", str(db_path)])

        assert result.exit_code == 2
        assert "Unknown output format" in result.output

    def test_listing_twice_is_identical(self, db_path, seed):
        seed(("A", date(2099, 1, 1)), ("B", date(2099, 1, 1)))

        first = runner.invoke(app, ["--json", "--db", str(db_path)]).output
        second = runner.invoke(app, ["--json", "--db", str(db_path)]).output

        assert first == second
        assert [t["title"] for t in json.loads(first)] == ["A", "B"]
