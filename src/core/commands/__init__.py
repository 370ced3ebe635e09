"""Command parsing core for the task tracker.

This module provides:
- parse_command: Function turning one input line into a Command
- Command models: AddToDo, AddDeadline, AddEvent, ListTasks, MarkTask,
  UnmarkTask, DeleteTask, Exit, Invalid (tagged by CommandKind)
- parse_datetime / format_datetime: Shared date/time parsing and display
- USAGES and message constants shown for invalid input
- CommandParseError, InvalidTaskError, DateTimeParseError
"""

from src.core.commands.datetime_parser import format_datetime, parse_datetime
from src.core.commands.errors import (
    CommandParseError,
    DateTimeParseError,
    InvalidTaskError,
)
from src.core.commands.messages import (
    INVALID_COMMAND,
    INVALID_DATE_RANGE,
    INVALID_INDEX,
    INVALID_TASK,
    USAGES,
)
from src.core.commands.models import (
    AddDeadline,
    AddEvent,
    AddToDo,
    Command,
    CommandKind,
    DeleteTask,
    Exit,
    Invalid,
    ListTasks,
    MarkTask,
    UnmarkTask,
)
from src.core.commands.parser import COMMAND_WORDS, parse_command

__all__ = [
    "AddDeadline",
    "AddEvent",
    "AddToDo",
    "Command",
    "CommandKind",
    "DeleteTask",
    "Exit",
    "Invalid",
    "ListTasks",
    "MarkTask",
    "UnmarkTask",
    "COMMAND_WORDS",
    "parse_command",
    "parse_datetime",
    "format_datetime",
    "USAGES",
    "INVALID_COMMAND",
    "INVALID_TASK",
    "INVALID_DATE_RANGE",
    "INVALID_INDEX",
    "CommandParseError",
    "InvalidTaskError",
    "DateTimeParseError",
]
