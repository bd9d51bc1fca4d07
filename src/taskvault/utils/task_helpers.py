"""Task helper utilities."""

from taskvault.models import Task


class TaskNotFoundError(LookupError):
    """Raised when an ID or suffix does not resolve to exactly one task."""


def _find_shortest_unique_suffix(task_ids: list[str], target_id: str) -> str:
    """
    Find the shortest suffix of target_id that uniquely identifies it.

    Args:
        task_ids: List of all task IDs
        target_id: The task ID to find a unique suffix for

    Returns:
        The shortest unique suffix
    """
    for length in range(1, len(target_id) + 1):
        suffix = target_id[-length:]
        matches = [tid for tid in task_ids if tid.endswith(suffix)]
        if len(matches) == 1:
            return suffix
    return target_id


def resolve_task(tasks: list[Task], task_id_or_suffix: str) -> Task:
    """
    Resolve a task ID or suffix to a task among ``tasks``.

    Args:
        tasks: Candidate tasks (normally the current account's)
        task_id_or_suffix: Full task ID or the tail of one, as shown by `list`

    Returns:
        The matching task

    Raises:
        TaskNotFoundError: If no task or several tasks match
    """
    for task in tasks:
        if task.id == task_id_or_suffix:
            return task

    matching = [t for t in tasks if task_id_or_suffix and t.id.endswith(task_id_or_suffix)]

    if not matching:
        raise TaskNotFoundError(f"No task found with ID or suffix '{task_id_or_suffix}'")

    if len(matching) > 1:
        all_ids = [t.id for t in tasks]
        suggestions = []
        for task in matching:
            unique_suffix = _find_shortest_unique_suffix(all_ids, task.id)
            title = task.title
            if len(title) > 70:
                title = title[:67] + "..."
            suggestions.append(f"  [{unique_suffix}] {title}")

        raise TaskNotFoundError(
            f"Multiple tasks match suffix '{task_id_or_suffix}':\n"
            + "\n".join(suggestions)
            + "\n\nUse the suffix in brackets to select a specific task."
        )

    return matching[0]
