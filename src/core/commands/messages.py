# src/core/commands/messages.py
"""User-facing messages and per-command usage strings.

The todo, deadline and event usages are shown by their argument parsers
when the arguments are malformed. The list, mark, unmark and delete
usages are never returned by a parser: list falls back to all tasks and
the index commands report INVALID_INDEX. They are in USAGES for
executors and help screens.
"""

from collections.abc import Mapping
from types import MappingProxyType

from src.core.commands.models import CommandKind

INVALID_COMMAND = "unrecognized command"
INVALID_TASK = "invalid task"
INVALID_DATE_RANGE = "invalid date range: from must not be after to"
INVALID_INDEX = "invalid index: please provide a positive task number"

TODO_USAGE = "todo <description>"
DEADLINE_USAGE = "deadline <description> /by <date/time>"
EVENT_USAGE = "event <description> /from <date/time> /to <date/time>"
LIST_USAGE = "list [/from <date/time> /to <date/time>]"
MARK_USAGE = "mark <task number>"
UNMARK_USAGE = "unmark <task number>"
DELETE_USAGE = "delete <task number>"

# Read-only: executors may look these up but never change them
USAGES: Mapping[CommandKind, str] = MappingProxyType(
    {
        CommandKind.ADD_TODO: TODO_USAGE,
        CommandKind.ADD_DEADLINE: DEADLINE_USAGE,
        CommandKind.ADD_EVENT: EVENT_USAGE,
        CommandKind.LIST_TASKS: LIST_USAGE,
        CommandKind.MARK_TASK: MARK_USAGE,
        CommandKind.UNMARK_TASK: UNMARK_USAGE,
        CommandKind.DELETE_TASK: DELETE_USAGE,
    }
)


def usage_error(kind: CommandKind) -> str:
    """Build the message shown when a command's arguments are malformed.

    Args:
        kind: The command kind whose usage should be shown.

    Returns:
        The invalid-task message followed by the usage line.
    """
    return f"{INVALID_TASK}\n{USAGES[kind]}"
