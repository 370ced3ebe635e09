# src/core/commands/parser.py
"""Pure function-based dispatcher turning an input line into a Command."""

import logging
import re
from collections.abc import Callable
from functools import partial
from types import MappingProxyType

from src.core.commands.errors import InvalidTaskError
from src.core.commands.messages import INVALID_COMMAND, INVALID_TASK
from src.core.commands.models import (
    AddDeadline,
    AddEvent,
    AddToDo,
    Command,
    DeleteTask,
    Exit,
    Invalid,
    ListTasks,
    MarkTask,
    UnmarkTask,
)
from src.core.commands.task_parser import (
    parse_deadline_command,
    parse_delete_command,
    parse_event_command,
    parse_list_command,
    parse_mark_command,
    parse_todo_command,
)

logger = logging.getLogger(__name__)

# Command word, then everything after it
COMMAND_PATTERN = re.compile(r"(?P<command>\S+)(?P<arguments>.*)")

_ARGUMENT_PARSERS: MappingProxyType[str, Callable[[str], Command]] = MappingProxyType(
    {
        ListTasks.COMMAND_WORD: parse_list_command,
        AddDeadline.COMMAND_WORD: parse_deadline_command,
        AddToDo.COMMAND_WORD: parse_todo_command,
        AddEvent.COMMAND_WORD: parse_event_command,
        MarkTask.COMMAND_WORD: partial(parse_mark_command, is_mark=True),
        UnmarkTask.COMMAND_WORD: partial(parse_mark_command, is_mark=False),
        DeleteTask.COMMAND_WORD: parse_delete_command,
        Exit.COMMAND_WORD: lambda arguments: Exit(),
    }
)

COMMAND_WORDS: tuple[str, ...] = tuple(_ARGUMENT_PARSERS)


def parse_command(text: str) -> Command:
    """Parse one line of user input into a Command.

    The first whitespace-delimited token selects the command; the trimmed
    remainder is handed to that command's argument parser. Command words
    are matched exactly, so ``LIST`` is not ``list``.

    Args:
        text: The raw input line.

    Returns:
        The parsed Command. Unparseable input yields Invalid carrying a
        user-facing message; this function does not raise for bad input.

    Examples:
        >>> parse_command("todo read book")
        AddToDo(description='read book')

        >>> parse_command("mark 3")
        MarkTask(index=2)

        >>> parse_command("dance")
        Invalid(message='unrecognized command')
    """
    match = COMMAND_PATTERN.fullmatch(text.strip())
    if not match:
        logger.debug("No command word in input %r", text)
        return Invalid(INVALID_COMMAND)

    command_word = match.group("command")
    arguments = match.group("arguments").strip()

    argument_parser = _ARGUMENT_PARSERS.get(command_word)
    if argument_parser is None:
        logger.debug(
            "Unknown command word %r",
            command_word,
            extra={"command_word": command_word},
        )
        return Invalid(INVALID_COMMAND)

    try:
        command = argument_parser(arguments)
    except InvalidTaskError as e:
        logger.debug(
            "Rejected %s command: %s",
            command_word,
            e,
            extra={"command_word": command_word},
        )
        return Invalid(INVALID_TASK)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Parsed %r as %s",
            text,
            command.describe(),
            extra={"command_word": command_word},
        )
    return command
