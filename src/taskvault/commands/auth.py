"""Account commands: register, login, logout, whoami."""

from typing import Annotated

import typer

from taskvault.exceptions import ValidationError
from taskvault.utils.typer_helpers import SuggestingGroup
from taskvault.utils.ui.console import get_console
from taskvault.utils.ui.formatters import format_account, format_success, format_tasks
from taskvault.utils.validators import validate_email, validate_password

from .context import get_app_context, resolve_output
from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Account commands")
console = get_console()


@app.command()
@command_wrapper
def register(
    ctx: typer.Context,
    name: Annotated[str | None, typer.Option("--name", help="Display name")] = None,
    email: Annotated[str | None, typer.Option("--email", help="Email address")] = None,
    password: Annotated[
        str | None, typer.Option("--password", help="Password (min. 6 characters)")
    ] = None,
) -> None:
    """Create a new account."""
    if name is None:
        name = typer.prompt("Name")
    if email is None:
        email = typer.prompt("Email")
    if password is None:
        password = typer.prompt("Password", hide_input=True)

    name = name.strip()
    email = email.strip()
    if not name or not email or not password:
        raise ValidationError("All fields are required")
    validate_email(email)
    validate_password(password)

    account = get_app_context(ctx).accounts.register(name, email, password)
    format_success(f"Account created for {account.email}. You can now log in.")


@app.command()
@command_wrapper
def login(
    ctx: typer.Context,
    email: Annotated[str | None, typer.Option("--email", help="Email address")] = None,
    password: Annotated[str | None, typer.Option("--password", help="Password")] = None,
) -> None:
    """Log in and show your tasks."""
    if email is None:
        email = typer.prompt("Email")
    if password is None:
        password = typer.prompt("Password", hide_input=True)

    app_ctx = get_app_context(ctx)
    account = app_ctx.accounts.login(email, password)

    format_success(f"Logged in as {account.name} <{account.email}>")
    format_tasks(app_ctx.tasks.get_user_tasks(account.id), resolve_output(ctx, None))


@app.command()
@command_wrapper
def logout(ctx: typer.Context) -> None:
    """Log out of the current account."""
    get_app_context(ctx).accounts.logout()
    format_success("Logged out")


@app.command()
@command_wrapper(auth_required=True)
def whoami(
    ctx: typer.Context,
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Output format (table/json)")
    ] = None,
    json_opt: Annotated[bool, typer.Option("--json", help="Output as JSON")] = False,
) -> None:
    """Show the logged-in account."""
    account = get_app_context(ctx).accounts.require_current_user()
    format_account(account, resolve_output(ctx, output, json_opt))
