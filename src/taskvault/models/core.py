"""Account and task data models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter


class Account(BaseModel):
    """Account model representing a registered user identity.

    Attributes:
        id: Unique identifier for the account
        name: Display name
        email: Login email, unique across all accounts (exact match)
        password: Password, stored verbatim
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str
    password: str = Field(repr=False)


class Task(BaseModel):
    """Task model representing a to-do item owned by one account.

    Records are immutable; stores replace a task instead of editing it.
    Field aliases match the persisted layout (``userId``, ``createdAt``).

    Attributes:
        id: Unique identifier for the task
        title: Short title, trimmed
        description: Longer description, trimmed
        deadline: Point in time the task is due
        user_id: Owning account ID (not checked against the account store)
        completed: Completion status
        created_at: Creation timestamp (UTC)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    title: str
    description: str
    deadline: datetime
    user_id: str = Field(alias="userId")
    completed: bool = False
    created_at: datetime = Field(alias="createdAt")


# Codecs for the persisted collections
ACCOUNT_LIST = TypeAdapter(list[Account])
TASK_LIST = TypeAdapter(list[Task])
