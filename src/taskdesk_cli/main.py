"""Main entry point for TaskDesk CLI."""

import typer

from taskdesk_cli.commands import (
    add_command,
    complete_command,
    config,
    delete_command,
    edit_command,
    list_command,
    menu_command,
    reopen_command,
    show_command,
    version_command,
)
from taskdesk_cli.services.config_service import get_config_service
from taskdesk_cli.utils.ui.console import get_console

app = typer.Typer(
    name="taskdesk",
    help="Keep a local task list: add, list, edit, complete and delete tasks",
    no_args_is_help=True,
)


@app.callback()
def main_callback() -> None:
    """Apply output settings shared by every command."""
    if not get_config_service().config.output.color:
        get_console().no_color = True


app.command("add")(add_command.add_command)
app.command("list")(list_command.list_command)
app.command("show")(show_command.show_command)
app.command("edit")(edit_command.edit_command)
app.command("complete")(complete_command.complete_command)
app.command("reopen")(reopen_command.reopen_command)
app.command("delete")(delete_command.delete_command)
app.command("menu")(menu_command.menu_command)
app.command("version")(version_command.version)

app.add_typer(config.app, name="config", help="Configuration management")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
