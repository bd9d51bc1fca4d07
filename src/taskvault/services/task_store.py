"""Task store - business logic for task operations.

The store owns the full task collection, loaded from storage at construction
and persisted after every mutation. Completing and deleting unknown ids are
silent no-ops; a completed task can no longer be deleted.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, date, datetime

from taskvault.models import TASK_LIST, Task
from taskvault.repositories.storage import TASKS_KEY, KeyValueStorage
from taskvault.utils.dates import parse_deadline

from .store_utils import load_value, require_fields, save_value

logger = logging.getLogger(__name__)


class TaskStore:
    """Store for tasks owned by accounts.

    Deadlines in the past are accepted here; rejecting them is left to the
    caller collecting user input.
    """

    def __init__(self, storage: KeyValueStorage):
        """Load tasks from storage.

        Args:
            storage: Key-value backend shared with the account store
        """
        self.storage = storage
        self._tasks: list[Task] = load_value(storage, TASKS_KEY, TASK_LIST, [])
        logger.debug("loaded %d task(s)", len(self._tasks))

    @property
    def tasks(self) -> list[Task]:
        """Snapshot of every task in insertion order."""
        return list(self._tasks)

    def _save(self, tasks: list[Task]) -> None:
        save_value(self.storage, TASKS_KEY, TASK_LIST, tasks)
        self._tasks = tasks

    def get_task(self, task_id: str) -> Task | None:
        return next((t for t in self._tasks if t.id == task_id), None)

    def create_task(
        self,
        title: str,
        description: str,
        deadline: str | date | datetime,
        user_id: str,
    ) -> Task:
        """Create a new task.

        Args:
            title: Task title (trimmed)
            description: Task description (trimmed)
            deadline: ISO-8601 string or datetime
            user_id: Owning account ID

        Returns:
            Created Task object

        Raises:
            ValidationError: If a field is empty or the deadline is invalid
            PersistenceError: If the collection cannot be saved
        """
        require_fields(
            title=title, description=description, deadline=deadline, user_id=user_id
        )
        title = title.strip()
        description = description.strip()
        # Title and description must survive trimming
        require_fields(title=title, description=description)
        parsed_deadline = parse_deadline(deadline)

        task = Task(
            id=str(uuid.uuid4()),
            title=title,
            description=description,
            deadline=parsed_deadline,
            user_id=user_id,
            completed=False,
            created_at=datetime.now(UTC),
        )
        self._save([*self._tasks, task])

        logger.info("created task %s for account %s", task.id, user_id)
        return task

    def get_user_tasks(self, user_id: str) -> list[Task]:
        """List an account's tasks in insertion order."""
        if not user_id:
            return []
        return [t for t in self._tasks if t.user_id == user_id]

    def complete_task(self, task_id: str) -> None:
        """Mark a task as completed. Unknown ids are ignored."""
        task = self.get_task(task_id)
        if task is None or task.completed:
            return

        done = task.model_copy(update={"completed": True})
        self._save([done if t.id == task_id else t for t in self._tasks])
        logger.info("completed task %s", task_id)

    def delete_task(self, task_id: str) -> None:
        """Delete an incomplete task. Unknown or completed tasks are ignored."""
        task = self.get_task(task_id)
        if task is None or task.completed:
            return

        self._save([t for t in self._tasks if t.id != task_id])
        logger.info("deleted task %s", task_id)

    def search_tasks(self, query: str, user_id: str) -> list[Task]:
        """Case-insensitive substring search over title and description.

        An empty query returns every task of the account.
        """
        needle = (query or "").casefold()
        return [
            t
            for t in self.get_user_tasks(user_id)
            if needle in t.title.casefold() or needle in t.description.casefold()
        ]
