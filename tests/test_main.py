"""End-to-end tests through the top-level CLI app."""

import json

from typer.testing import CliRunner

from taskdesk_cli import __version__
from taskdesk_cli.main import app

runner = CliRunner()


def test_help_lists_commands():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    for name in ("add", "list", "show", "edit", "complete", "reopen", "delete", "menu", "config"):
        assert name in result.output


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_full_task_lifecycle(db_path):
    db = ["--db", str(db_path)]

    added = runner.invoke(app, ["add", "Buy milk", "-d", "2099-01-01", *db])
    assert added.exit_code == 0, added.output
    assert "#1" in added.output

    edited = runner.invoke(app, ["edit", "1", "--title", "Buy bread", "--done", *db])
    assert edited.exit_code == 0, edited.output

    listed = runner.invoke(app, ["list", "--json", *db])
    (task,) = json.loads(listed.output)
    assert (task["id"], task["title"], task["completed"]) == (1, "Buy bread", True)

    deleted = runner.invoke(app, ["delete", "1", "--yes", *db])
    assert deleted.exit_code == 0

    shown = runner.invoke(app, ["show", "1", *db])
    assert shown.exit_code == 5

    readded = runner.invoke(app, ["add", "Again", "-d", "2099-01-01", *db])
    assert "#2" in readded.output


def test_unopenable_database_is_storage_error(tmp_path):
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("")

    result = runner.invoke(app, ["list", "--db", str(blocker / "tasks.db")])

    assert result.exit_code == 7
    assert "Storage error" in result.output


def test_color_setting_is_applied(db_path):
    from taskdesk_cli.services.config_service import get_config_service
    from taskdesk_cli.utils.ui.console import get_console

    get_config_service().set("output.color", False)
    try:
        result = runner.invoke(app, ["list", "--db", str(db_path)])
        assert result.exit_code == 0
        assert get_console().no_color is True
    finally:
        get_console().no_color = False
