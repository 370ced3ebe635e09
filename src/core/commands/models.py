# src/core/commands/models.py
"""Command data models produced by the command parser.

Each parsed input line becomes exactly one of the frozen dataclasses
below. Together they form the Command union, tagged by the class-level
``kind`` so an executor can match on it exhaustively.

Example:
    >>> from src.core.commands import parse_command
    >>> command = parse_command("mark 3")
    >>> command
    MarkTask(index=2)
    >>> command.kind
    <CommandKind.MARK_TASK: 'mark_task'>
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar

from src.core.commands.datetime_parser import format_datetime
from src.core.commands.errors import InvalidTaskError


class CommandKind(str, Enum):
    """Tag identifying each Command variant."""

    ADD_TODO = "add_todo"
    ADD_DEADLINE = "add_deadline"
    ADD_EVENT = "add_event"
    LIST_TASKS = "list_tasks"
    MARK_TASK = "mark_task"
    UNMARK_TASK = "unmark_task"
    DELETE_TASK = "delete_task"
    EXIT = "exit"
    INVALID = "invalid"


def _require_description(description: str) -> None:
    if not description.strip():
        raise InvalidTaskError("Task description must not be blank")


def _require_index(index: int) -> None:
    if index < 0:
        raise InvalidTaskError(f"Task index must not be negative, got {index}")


@dataclass(frozen=True)
class AddToDo:
    """Add a task with only a description.

    Attributes:
        description: Free-text task description.
    """

    kind: ClassVar[CommandKind] = CommandKind.ADD_TODO
    COMMAND_WORD: ClassVar[str] = "todo"

    description: str

    def __post_init__(self) -> None:
        _require_description(self.description)

    def describe(self) -> str:
        return f"add todo {self.description!r}"


@dataclass(frozen=True)
class AddDeadline:
    """Add a task that is due at a point in time.

    Attributes:
        description: Free-text task description.
        due_at: When the task is due.
    """

    kind: ClassVar[CommandKind] = CommandKind.ADD_DEADLINE
    COMMAND_WORD: ClassVar[str] = "deadline"

    description: str
    due_at: datetime

    def __post_init__(self) -> None:
        _require_description(self.description)

    def describe(self) -> str:
        return f"add deadline {self.description!r} by {format_datetime(self.due_at)}"


@dataclass(frozen=True)
class AddEvent:
    """Add a task spanning a period of time.

    The period is stored as given: starts_at is not required to come
    before ends_at.

    Attributes:
        description: Free-text task description.
        starts_at: When the event starts.
        ends_at: When the event ends.
    """

    kind: ClassVar[CommandKind] = CommandKind.ADD_EVENT
    COMMAND_WORD: ClassVar[str] = "event"

    description: str
    starts_at: datetime
    ends_at: datetime

    def __post_init__(self) -> None:
        _require_description(self.description)

    def describe(self) -> str:
        return (
            f"add event {self.description!r} from {format_datetime(self.starts_at)}"
            f" to {format_datetime(self.ends_at)}"
        )


@dataclass(frozen=True)
class ListTasks:
    """List tasks whose dates fall within [start, end].

    Defaults cover every representable datetime.

    Attributes:
        start: Inclusive lower bound.
        end: Inclusive upper bound, never before start.
    """

    kind: ClassVar[CommandKind] = CommandKind.LIST_TASKS
    COMMAND_WORD: ClassVar[str] = "list"

    start: datetime = datetime.min
    end: datetime = datetime.max

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise InvalidTaskError("List range start is after its end")

    def describe(self) -> str:
        return f"list from {format_datetime(self.start)} to {format_datetime(self.end)}"


@dataclass(frozen=True)
class MarkTask:
    """Mark the task at a zero-based index as done."""

    kind: ClassVar[CommandKind] = CommandKind.MARK_TASK
    COMMAND_WORD: ClassVar[str] = "mark"

    index: int

    def __post_init__(self) -> None:
        _require_index(self.index)

    def describe(self) -> str:
        return f"mark task #{self.index + 1}"


@dataclass(frozen=True)
class UnmarkTask:
    """Mark the task at a zero-based index as not done."""

    kind: ClassVar[CommandKind] = CommandKind.UNMARK_TASK
    COMMAND_WORD: ClassVar[str] = "unmark"

    index: int

    def __post_init__(self) -> None:
        _require_index(self.index)

    def describe(self) -> str:
        return f"unmark task #{self.index + 1}"


@dataclass(frozen=True)
class DeleteTask:
    """Delete the task at a zero-based index."""

    kind: ClassVar[CommandKind] = CommandKind.DELETE_TASK
    COMMAND_WORD: ClassVar[str] = "delete"

    index: int

    def __post_init__(self) -> None:
        _require_index(self.index)

    def describe(self) -> str:
        return f"delete task #{self.index + 1}"


@dataclass(frozen=True)
class Exit:
    """End the session."""

    kind: ClassVar[CommandKind] = CommandKind.EXIT
    COMMAND_WORD: ClassVar[str] = "bye"

    def describe(self) -> str:
        return "exit"


@dataclass(frozen=True)
class Invalid:
    """Input that could not be parsed.

    Attributes:
        message: User-facing explanation, rendered by the executor.
    """

    kind: ClassVar[CommandKind] = CommandKind.INVALID
    COMMAND_WORD: ClassVar[str | None] = None

    message: str

    def describe(self) -> str:
        return f"invalid ({self.message.splitlines()[0] if self.message else ''})"


Command = (
    AddToDo
    | AddDeadline
    | AddEvent
    | ListTasks
    | MarkTask
    | UnmarkTask
    | DeleteTask
    | Exit
    | Invalid
)
