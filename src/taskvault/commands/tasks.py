"""Task commands: add, list, complete, delete, search."""

from typing import Annotated

import typer

from taskvault.exceptions import ValidationError
from taskvault.utils.task_helpers import resolve_task
from taskvault.utils.typer_helpers import SuggestingGroup
from taskvault.utils.ui.console import get_console
from taskvault.utils.ui.formatters import (
    format_json,
    format_success,
    format_tasks,
    format_warning,
    task_to_dict,
)
from taskvault.utils.validators import validate_future_deadline

from .context import get_app_context, resolve_output
from .decorators import command_wrapper

app = typer.Typer(cls=SuggestingGroup, help="Task commands")
console = get_console()

OutputOption = Annotated[
    str | None, typer.Option("--output", "-o", help="Output format (table/json)")
]
JsonOption = Annotated[
    bool, typer.Option("--json", help="Output as JSON (alias for --output json)")
]


def _show_current_tasks(ctx: typer.Context, output: str) -> None:
    app_ctx = get_app_context(ctx)
    account = app_ctx.accounts.require_current_user()
    format_tasks(app_ctx.tasks.get_user_tasks(account.id), output)


@app.command("add")
@command_wrapper(auth_required=True)
def add(
    ctx: typer.Context,
    title: Annotated[str, typer.Argument(help="Task title")],
    description: Annotated[
        str | None, typer.Option("--description", "-d", help="Task description")
    ] = None,
    deadline: Annotated[
        str | None,
        typer.Option(
            "--deadline", help="Deadline, ISO format (2030-01-31 or 2030-01-31T17:00)"
        ),
    ] = None,
    output: OutputOption = None,
    json_opt: JsonOption = False,
) -> None:
    """Create a task with a deadline."""
    output = resolve_output(ctx, output, json_opt)
    if description is None:
        description = typer.prompt("Description")
    if deadline is None:
        deadline = typer.prompt("Deadline")

    if not title.strip():
        raise ValidationError("Title is required")
    if not description.strip():
        raise ValidationError("Description is required")
    if not deadline.strip():
        raise ValidationError("Deadline is required")
    due = validate_future_deadline(deadline)

    app_ctx = get_app_context(ctx)
    account = app_ctx.accounts.require_current_user()
    task = app_ctx.tasks.create_task(title, description, due, account.id)

    if output == "json":
        format_json(task_to_dict(task))
        return
    format_success(f"Task created: {task.title}")
    _show_current_tasks(ctx, output)


@app.command("list")
@command_wrapper(auth_required=True)
def list_tasks(
    ctx: typer.Context, output: OutputOption = None, json_opt: JsonOption = False
) -> None:
    """List your tasks."""
    _show_current_tasks(ctx, resolve_output(ctx, output, json_opt))


@app.command("complete")
@command_wrapper(auth_required=True)
def complete(
    ctx: typer.Context,
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
    output: OutputOption = None,
    json_opt: JsonOption = False,
) -> None:
    """Mark a task as completed."""
    output = resolve_output(ctx, output, json_opt)
    app_ctx = get_app_context(ctx)
    account = app_ctx.accounts.require_current_user()
    task = resolve_task(app_ctx.tasks.get_user_tasks(account.id), task_id)

    if task.completed:
        format_warning(f"Task already completed: {task.title}")
    else:
        app_ctx.tasks.complete_task(task.id)
        format_success(f"✓ Completed: {task.title}")
    _show_current_tasks(ctx, output)


@app.command("delete")
@command_wrapper(auth_required=True)
def delete(
    ctx: typer.Context,
    task_id: Annotated[str, typer.Argument(help="Task ID or suffix")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
    output: OutputOption = None,
    json_opt: JsonOption = False,
) -> None:
    """Delete a task that is not completed yet."""
    output = resolve_output(ctx, output, json_opt)
    app_ctx = get_app_context(ctx)
    account = app_ctx.accounts.require_current_user()
    task = resolve_task(app_ctx.tasks.get_user_tasks(account.id), task_id)

    if task.completed:
        format_warning(f"Completed tasks cannot be deleted: {task.title}")
        return

    if not yes and not typer.confirm(f"Delete task '{task.title}'?", default=False):
        console.print("[yellow]Cancelled.[/yellow]")
        return

    app_ctx.tasks.delete_task(task.id)
    format_success(f"Deleted: {task.title}")
    _show_current_tasks(ctx, output)


@app.command("search")
@command_wrapper(auth_required=True)
def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Text to look for in title or description")] = "",
    output: OutputOption = None,
    json_opt: JsonOption = False,
) -> None:
    """Search your tasks by keyword (case-insensitive)."""
    app_ctx = get_app_context(ctx)
    account = app_ctx.accounts.require_current_user()
    matches = app_ctx.tasks.search_tasks(query, account.id)
    format_tasks(matches, resolve_output(ctx, output, json_opt))
