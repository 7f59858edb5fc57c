"""Unit tests for the 'delete' command."""

from datetime import date

from typer.testing import CliRunner

from taskdesk_cli.commands.delete_command import app

runner = CliRunner()


class TestDeleteCommand:
    def test_delete_with_yes(self, db_path, seed, stored_tasks):
        keep, drop = seed(("Keep", date(2099, 1, 1)), ("Drop", date(2099, 1, 1)))

        result = runner.invoke(app, [str(drop.id), "--yes", "--db", str(db_path)])

        assert result.exit_code == 0, result.output
        assert f"Task deleted: #{drop.id}" in result.output
        assert stored_tasks() == [keep]

    def test_confirmation_declined(self, db_path, seed, stored_tasks):
        (task,) = seed(("Keep", date(2099, 1, 1)))

        result = runner.invoke(app, [str(task.id), "--db", str(db_path)], input="n\n")

        assert result.exit_code == 0
        assert "Delete task 'Keep'?" in result.output
        assert "Cancelled" in result.output
        assert stored_tasks() == [task]

    def test_confirmation_accepted(self, db_path, seed, stored_tasks):
        (task,) = seed(("Drop", date(2099, 1, 1)))

        result = runner.invoke(app, [str(task.id), "--db", str(db_path)], input="y\n")

        assert result.exit_code == 0
        assert stored_tasks() == []

    def test_missing_task(self, db_path):
        result = runner.invoke(app, ["7", "--yes", "--db", str(db_path)])

        assert result.exit_code == 5
        assert "Task not found: 7" in result.output

    def test_non_numeric_id_is_usage_error(self, db_path):
        result = runner.invoke(app, ["abc", "--db", str(db_path)])

        assert result.exit_code == 2
