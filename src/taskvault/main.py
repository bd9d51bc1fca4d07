"""Main entry point for TaskVault."""

import typer

from taskvault import __version__
from taskvault.commands import auth, config, tasks
from taskvault.utils.typer_helpers import SuggestingGroup
from taskvault.utils.ui.console import get_console

app = typer.Typer(
    name="taskvault",
    cls=SuggestingGroup,
    help="A local task manager with user accounts",
    no_args_is_help=True,
)

console = get_console()

# Account and task commands live at the top level
for sub_app in (auth.app, tasks.app):
    app.registered_commands.extend(sub_app.registered_commands)

app.add_typer(config.app, name="config", help="Configuration management")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"[bold]TaskVault[/bold] version [cyan]{__version__}[/cyan]")


def main():
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
