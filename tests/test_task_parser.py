"""Tests for the per-command argument parsers."""

from datetime import datetime

from src.core.commands.messages import (
    DEADLINE_USAGE,
    EVENT_USAGE,
    INVALID_DATE_RANGE,
    INVALID_INDEX,
    INVALID_TASK,
    TODO_USAGE,
)
from src.core.commands.models import (
    AddDeadline,
    AddEvent,
    AddToDo,
    DeleteTask,
    Invalid,
    ListTasks,
    MarkTask,
    UnmarkTask,
)
from src.core.commands.task_parser import (
    parse_deadline_command,
    parse_delete_command,
    parse_event_command,
    parse_index,
    parse_list_command,
    parse_mark_command,
    parse_todo_command,
)


class TestParseListCommand:
    """Tests for parse_list_command."""

    def test_empty_arguments_cover_all_time(self):
        """Test that no range defaults to every representable datetime."""
        result = parse_list_command("")
        assert result == ListTasks(datetime.min, datetime.max)

    def test_unmatched_arguments_cover_all_time(self):
        """Test that arguments without the range layout are ignored."""
        assert parse_list_command("everything") == ListTasks()
        assert parse_list_command("/from 2024-01-01") == ListTasks()

    def test_range(self):
        """Test a range with date and date-time bounds."""
        result = parse_list_command("/from 2024-01-01 /to 2024-01-31 2359")
        assert result == ListTasks(datetime(2024, 1, 1), datetime(2024, 1, 31, 23, 59))

    def test_equal_bounds(self):
        """Test that a single instant is a valid range."""
        result = parse_list_command("/from 2024-01-01 /to 2024-01-01")
        assert result == ListTasks(datetime(2024, 1, 1), datetime(2024, 1, 1))

    def test_bounds_with_spaces(self):
        """Test that bounds may contain whitespace."""
        result = parse_list_command("/from Jan 1 2024 /to Feb 2 2024 10:30")
        assert result == ListTasks(datetime(2024, 1, 1), datetime(2024, 2, 2, 10, 30))

    def test_reversed_range(self):
        """Test that start after end is rejected."""
        result = parse_list_command("/from 2024-01-01 /to 2023-01-01")
        assert result == Invalid(INVALID_DATE_RANGE)

    def test_bad_start(self):
        """Test that an unparseable start returns the date error."""
        result = parse_list_command("/from yesterday /to 2024-01-01")
        assert isinstance(result, Invalid)
        assert "yesterday" in result.message

    def test_bad_end(self):
        """Test that an unparseable end returns the date error."""
        result = parse_list_command("/from 2024-01-01 /to later")
        assert isinstance(result, Invalid)
        assert "later" in result.message


class TestParseTodoCommand:
    """Tests for parse_todo_command."""

    def test_description(self):
        """Test a plain description."""
        assert parse_todo_command("buy milk") == AddToDo("buy milk")

    def test_description_with_flags(self):
        """Test that flag-like text is kept in a todo description."""
        result = parse_todo_command("read /by tomorrow")
        assert result == AddToDo("read /by tomorrow")

    def test_empty(self):
        """Test that an empty description returns the todo usage."""
        result = parse_todo_command("")
        assert result == Invalid(f"{INVALID_TASK}\n{TODO_USAGE}")


class TestParseDeadlineCommand:
    """Tests for parse_deadline_command."""

    def test_deadline(self):
        """Test description and due date-time."""
        result = parse_deadline_command("Submit report /by 2024-03-01 1800")
        assert result == AddDeadline("Submit report", datetime(2024, 3, 1, 18, 0))

    def test_date_only_is_midnight(self):
        """Test that a date-only due date lands on midnight."""
        result = parse_deadline_command("Pay rent /by 1/4/2024")
        assert result == AddDeadline("Pay rent", datetime(2024, 4, 1, 0, 0))

    def test_description_stops_at_first_flag(self):
        """Test that the description ends at the first /by."""
        result = parse_deadline_command("a /by 2024-01-01 /by 2024-02-02")
        assert isinstance(result, Invalid)
        assert "2024-01-01 /by 2024-02-02" in result.message

    def test_missing_flag(self):
        """Test that a missing /by returns the deadline usage."""
        result = parse_deadline_command("Submit report 2024-03-01")
        assert result == Invalid(f"{INVALID_TASK}\n{DEADLINE_USAGE}")

    def test_flag_without_space(self):
        """Test that /by must be separated by spaces."""
        result = parse_deadline_command("Submit report/by 2024-03-01")
        assert result == Invalid(f"{INVALID_TASK}\n{DEADLINE_USAGE}")

    def test_empty_description(self):
        """Test that an empty description returns the deadline usage."""
        result = parse_deadline_command(" /by 2024-03-01")
        assert result == Invalid(f"{INVALID_TASK}\n{DEADLINE_USAGE}")

    def test_bad_date(self):
        """Test that an unparseable date returns the date error."""
        result = parse_deadline_command("Submit report /by next week")
        assert isinstance(result, Invalid)
        assert "next week" in result.message


class TestParseEventCommand:
    """Tests for parse_event_command."""

    def test_event(self):
        """Test description with start and end."""
        result = parse_event_command(
            "Conference /from 2024-06-01 0900 /to 2024-06-03 1700"
        )
        assert result == AddEvent(
            "Conference",
            datetime(2024, 6, 1, 9, 0),
            datetime(2024, 6, 3, 17, 0),
        )

    def test_reversed_range_is_accepted(self):
        """Test that event does not check the order of start and end."""
        result = parse_event_command("Trip /from 2024-05-01 /to 2024-04-01")
        assert result == AddEvent("Trip", datetime(2024, 5, 1), datetime(2024, 4, 1))

    def test_missing_to(self):
        """Test that a missing /to returns the event usage."""
        result = parse_event_command("Trip /from 2024-05-01")
        assert result == Invalid(f"{INVALID_TASK}\n{EVENT_USAGE}")

    def test_flags_out_of_order(self):
        """Test that /to before /from returns the event usage."""
        result = parse_event_command("Trip /to 2024-05-01 /from 2024-04-01")
        assert result == Invalid(f"{INVALID_TASK}\n{EVENT_USAGE}")

    def test_empty_description(self):
        """Test that an empty description returns the event usage."""
        result = parse_event_command(" /from 2024-05-01 /to 2024-05-02")
        assert result == Invalid(f"{INVALID_TASK}\n{EVENT_USAGE}")

    def test_first_bad_date_wins(self):
        """Test that the start date error is reported before the end's."""
        result = parse_event_command("Trip /from soon /to later")
        assert isinstance(result, Invalid)
        assert "soon" in result.message
        assert "later" not in result.message


class TestParseIndex:
    """Tests for parse_index."""

    def test_one_based_to_zero_based(self):
        """Test that task numbers become zero-based indices."""
        assert parse_index("1") == 0
        assert parse_index("42") == 41

    def test_leading_zeros(self):
        """Test that leading zeros are accepted."""
        assert parse_index("007") == 6

    def test_zero(self):
        """Test that 0 yields the invalid sentinel."""
        assert parse_index("0") == -1

    def test_not_a_number(self):
        """Test that non-digit input yields the invalid sentinel."""
        assert parse_index("") == -1
        assert parse_index("abc") == -1
        assert parse_index("1 2") == -1
        assert parse_index("+3") == -1
        assert parse_index("2.5") == -1

    def test_non_ascii_digits(self):
        """Test that only ASCII digits are accepted."""
        assert parse_index("٣") == -1

    def test_largest_task_number(self):
        """Test that the signed 32-bit maximum is still accepted."""
        assert parse_index("2147483647") == 2147483646

    def test_task_number_out_of_range(self):
        """Test that numbers beyond the signed 32-bit maximum are rejected."""
        assert parse_index("2147483648") == -1
        assert parse_index("99999999999") == -1

    def test_leading_zeros_do_not_overflow(self):
        """Test that padding zeros are ignored when checking the range."""
        assert parse_index("0" * 20 + "5") == 4

    def test_very_long_digit_string(self):
        """Test that digit strings past int()'s conversion limit are rejected."""
        assert parse_index("1" * 5000) == -1
        assert parse_index("9" * 4301) == -1


class TestParseMarkAndDelete:
    """Tests for parse_mark_command and parse_delete_command."""

    def test_mark(self):
        """Test mark with a valid task number."""
        assert parse_mark_command("3", True) == MarkTask(2)

    def test_unmark(self):
        """Test unmark with a valid task number."""
        assert parse_mark_command("3", False) == UnmarkTask(2)

    def test_mark_invalid(self):
        """Test mark with an invalid task number."""
        assert parse_mark_command("0", True) == Invalid(INVALID_INDEX)
        assert parse_mark_command("abc", False) == Invalid(INVALID_INDEX)

    def test_delete(self):
        """Test delete with a valid task number."""
        assert parse_delete_command("1") == DeleteTask(0)

    def test_delete_invalid(self):
        """Test delete with an invalid task number."""
        assert parse_delete_command("") == Invalid(INVALID_INDEX)
        assert parse_delete_command("first") == Invalid(INVALID_INDEX)
