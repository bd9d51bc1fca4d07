"""Output formatters for TaskVault records."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

from rich.markup import escape
from rich.table import Table

from taskvault.models import Account, Task
from taskvault.utils.dates import is_past

from .console import get_console


def calculate_unique_suffixes(task_ids: list[str]) -> dict[str, int]:
    """
    Calculate minimum unique suffix length for each task ID.

    Starts from length 1 and grows until unique among all IDs.

    Args:
        task_ids: List of full task IDs

    Returns:
        Dict mapping task_id -> required suffix length
    """
    result = {}

    for task_id in task_ids:
        for length in range(1, len(task_id) + 1):
            suffix = task_id[-length:]
            conflicts = [
                tid for tid in task_ids if tid != task_id and tid.endswith(suffix)
            ]
            if not conflicts:
                result[task_id] = length
                break
        else:
            result[task_id] = len(task_id)

    return result


def format_error(message: str) -> None:
    """Format and display an error message."""
    get_console().print(f"[bold red]Error:[/bold red] {escape(message)}")


def format_success(message: str) -> None:
    """Format and display a success message."""
    get_console().print(f"[bold green]Success:[/bold green] {escape(message)}")


def format_warning(message: str) -> None:
    """Format and display a warning message."""
    get_console().print(f"[bold yellow]Warning:[/bold yellow] {escape(message)}")


def format_json(data: Any) -> None:
    """Print data as indented JSON on stdout."""
    print(json.dumps(data, indent=2, default=str, ensure_ascii=False))


def task_status(task: Task, now: datetime | None = None) -> str:
    """One of "done", "overdue" or "pending"."""
    if task.completed:
        return "done"
    if is_past(task.deadline, now):
        return "overdue"
    return "pending"


_STATUS_STYLES = {
    "done": "[dim]✓ done[/dim]",
    "overdue": "[red]overdue[/red]",
    "pending": "[green]on time[/green]",
}


def format_due(deadline: datetime) -> str:
    if deadline.hour == 0 and deadline.minute == 0 and deadline.second == 0:
        return deadline.strftime("%Y-%m-%d")
    return deadline.strftime("%Y-%m-%d %H:%M")


def task_to_dict(task: Task) -> dict:
    return task.model_dump(mode="json", by_alias=True)


def account_to_dict(account: Account) -> dict:
    return account.model_dump(mode="json", exclude={"password"})


def format_tasks(tasks: list[Task], output: str = "table", now: datetime | None = None) -> None:
    """Render a task list as a table or JSON."""
    if output == "json":
        format_json([task_to_dict(t) for t in tasks])
        return

    console = get_console()
    if not tasks:
        console.print("[yellow]No tasks found.[/yellow]")
        return

    suffixes = calculate_unique_suffixes([t.id for t in tasks])

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title", style="bold")
    table.add_column("Description")
    table.add_column("Deadline", no_wrap=True)
    table.add_column("Status", no_wrap=True)

    for task in tasks:
        status = task_status(task, now)
        title = escape(task.title)
        if task.completed:
            title = f"[strike]{title}[/strike]"
        table.add_row(
            task.id[-max(suffixes[task.id], 6):],
            title,
            escape(task.description),
            format_due(task.deadline),
            _STATUS_STYLES[status],
        )

    console.print(table)


def format_account(account: Account, output: str = "table") -> None:
    """Render one account (never its password)."""
    if output == "json":
        format_json(account_to_dict(account))
        return

    console = get_console()
    console.print(f"[bold]{escape(account.name)}[/bold] <{escape(account.email)}>")
    console.print(f"[dim]ID: {account.id}[/dim]")
