# src/core/commands/task_parser.py
"""Argument parsers for each command kind.

Every function takes the trimmed argument string that followed the
command word and returns a Command. Malformed input becomes an Invalid
command rather than an exception; only InvalidTaskError raised while
building a command value is left for the dispatcher to handle.
"""

import logging
import re
from datetime import datetime

from src.core.commands.datetime_parser import parse_datetime
from src.core.commands.errors import DateTimeParseError
from src.core.commands.messages import (
    INVALID_DATE_RANGE,
    INVALID_INDEX,
    usage_error,
)
from src.core.commands.models import (
    AddDeadline,
    AddEvent,
    AddToDo,
    Command,
    CommandKind,
    DeleteTask,
    Invalid,
    ListTasks,
    MarkTask,
    UnmarkTask,
)

logger = logging.getLogger(__name__)

# Descriptions and start times stop at the first following flag
LIST_PATTERN = re.compile(r"/from (?P<start>.*?) /to (?P<end>.*)")
DEADLINE_PATTERN = re.compile(r"(?P<description>.*?) /by (?P<by>.*)")
TODO_PATTERN = re.compile(r"(?P<description>.*)")
EVENT_PATTERN = re.compile(
    r"(?P<description>.*?) /from (?P<start>.*?) /to (?P<end>.*)"
)
INDEX_PATTERN = re.compile(r"(?P<index>[0-9]+)")

# Largest accepted task number (signed 32-bit maximum)
MAX_TASK_NUMBER = 2**31 - 1


def parse_list_command(arguments: str) -> Command:
    """Parse the arguments of a list command.

    Format: ``list [/from START /to END]``. Arguments that do not follow
    this layout are ignored and every task is listed.

    Args:
        arguments: Text after the command word.

    Returns:
        ListTasks, or Invalid if a date fails to parse or the range is
        reversed.
    """
    match = LIST_PATTERN.fullmatch(arguments)
    if not match:
        return ListTasks(datetime.min, datetime.max)

    try:
        start = parse_datetime(match.group("start"))
        end = parse_datetime(match.group("end"))
    except DateTimeParseError as e:
        return Invalid(str(e))

    if start > end:
        return Invalid(INVALID_DATE_RANGE)

    return ListTasks(start, end)


def parse_todo_command(arguments: str) -> Command:
    """Parse the arguments of a todo command.

    Format: ``todo DESCRIPTION``.

    Args:
        arguments: Text after the command word.

    Returns:
        AddToDo, or Invalid with the todo usage if the description is empty.
    """
    match = TODO_PATTERN.fullmatch(arguments)
    if not match or not match.group("description"):
        return Invalid(usage_error(CommandKind.ADD_TODO))

    return AddToDo(match.group("description"))


def parse_deadline_command(arguments: str) -> Command:
    """Parse the arguments of a deadline command.

    Format: ``deadline DESCRIPTION /by DATETIME``.

    Args:
        arguments: Text after the command word.

    Returns:
        AddDeadline, or Invalid with the deadline usage or the date error.
    """
    match = DEADLINE_PATTERN.fullmatch(arguments)
    if not match or not match.group("description"):
        return Invalid(usage_error(CommandKind.ADD_DEADLINE))

    try:
        due_at = parse_datetime(match.group("by"))
    except DateTimeParseError as e:
        return Invalid(str(e))

    return AddDeadline(match.group("description"), due_at)


def parse_event_command(arguments: str) -> Command:
    """Parse the arguments of an event command.

    Format: ``event DESCRIPTION /from DATETIME /to DATETIME``. Unlike
    list, a start after the end is accepted.

    Args:
        arguments: Text after the command word.

    Returns:
        AddEvent, or Invalid with the event usage or the first date error.
    """
    match = EVENT_PATTERN.fullmatch(arguments)
    if not match or not match.group("description"):
        return Invalid(usage_error(CommandKind.ADD_EVENT))

    try:
        starts_at = parse_datetime(match.group("start"))
        ends_at = parse_datetime(match.group("end"))
    except DateTimeParseError as e:
        return Invalid(str(e))

    return AddEvent(match.group("description"), starts_at, ends_at)


def parse_index(arguments: str) -> int:
    """Convert a 1-based task number into a zero-based index.

    Task numbers above MAX_TASK_NUMBER are rejected like any other
    malformed input.

    Args:
        arguments: Text after the command word.

    Returns:
        The zero-based index, or -1 if the text is not a plain number in
        range.
    """
    match = INDEX_PATTERN.fullmatch(arguments)
    if not match:
        return -1

    # Leading zeros do not count toward the length limit
    digits = match.group("index").lstrip("0") or "0"
    if len(digits) > len(str(MAX_TASK_NUMBER)):
        return -1

    number = int(digits)
    if number > MAX_TASK_NUMBER:
        return -1

    return number - 1


def parse_mark_command(arguments: str, is_mark: bool) -> Command:
    """Parse the arguments of a mark or unmark command.

    Args:
        arguments: Text after the command word.
        is_mark: True for mark, False for unmark.

    Returns:
        MarkTask or UnmarkTask, or Invalid if the index is not valid.
    """
    index = parse_index(arguments)
    if index < 0:
        logger.debug("Rejected task number %r", arguments)
        return Invalid(INVALID_INDEX)

    if is_mark:
        return MarkTask(index)
    return UnmarkTask(index)


def parse_delete_command(arguments: str) -> Command:
    """Parse the arguments of a delete command.

    Args:
        arguments: Text after the command word.

    Returns:
        DeleteTask, or Invalid if the index is not valid.
    """
    index = parse_index(arguments)
    if index < 0:
        logger.debug("Rejected task number %r", arguments)
        return Invalid(INVALID_INDEX)

    return DeleteTask(index)
