# src/core/commands/errors.py
"""Exceptions raised inside the command-parsing core.

None of these cross the dispatcher boundary: argument parsers turn
DateTimeParseError into an Invalid command, and parse_command turns
InvalidTaskError into one.
"""


class CommandParseError(Exception):
    """Base class for command parsing failures."""


class InvalidTaskError(CommandParseError):
    """Raised when a command value would be built from invalid task data."""


class DateTimeParseError(CommandParseError, ValueError):
    """Raised when text matches none of the accepted date/time formats.

    The message is meant to be shown to the user as-is.

    Attributes:
        text: The rejected input text.
    """

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text
