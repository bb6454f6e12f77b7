# tests/test_parser.py

from __future__ import annotations

import pytest

from nebula.cli import messages
from nebula.cli.parser import CommandKind, parse_command
from nebula.core.errors import CommandError


def _error(line: str, task_count: int = 0) -> str:
    with pytest.raises(CommandError) as exc:
        parse_command(line, task_count)
    return exc.value.message


@pytest.mark.parametrize(
    "line, kind",
    [("bye", CommandKind.BYE), ("list", CommandKind.LIST), ("  help  ", CommandKind.HELP)],
)
def test_zero_argument_commands(line: str, kind: CommandKind) -> None:
    assert parse_command(line, 0).kind is kind


def test_empty_and_unknown() -> None:
    assert _error("") == messages.EMPTY_COMMAND
    assert _error("   ") == messages.EMPTY_COMMAND
    assert _error("blah 1") == messages.UNKNOWN_COMMAND
    assert _error("todos read") == messages.UNKNOWN_COMMAND
    assert _error("list everything") == messages.UNKNOWN_COMMAND


def test_index_commands_validate_number_and_range() -> None:
    cmd = parse_command("mark 2", task_count=2)
    assert cmd.kind is CommandKind.MARK
    assert cmd.index == 2
    assert parse_command("delete 1", task_count=1).index == 1

    assert _error("mark", 2) == messages.NOT_A_NUMBER
    assert _error("unmark two", 2) == messages.NOT_A_NUMBER
    assert _error("delete 1 2", 2) == messages.NOT_A_NUMBER
    assert _error("mark 5", 2) == messages.TASK_DOES_NOT_EXIST
    assert _error("mark 0", 2) == messages.TASK_DOES_NOT_EXIST
    assert _error("delete -1", 2) == messages.TASK_DOES_NOT_EXIST
    assert _error("unmark 1", 0) == messages.TASK_DOES_NOT_EXIST



@pytest.mark.parametrize("raw", ["1_0", "+3", "\u0663", "1.0", "0x2", " 2 2"])
def test_index_must_be_plain_ascii_digits(raw: str) -> None:
    assert _error(f"mark {raw}", 10) == messages.NOT_A_NUMBER


def test_find_needs_exactly_one_keyword() -> None:
    assert parse_command("find book", 0).keyword == "book"
    assert _error("find") == messages.MISSING_KEYWORD
    assert _error("find   ") == messages.MISSING_KEYWORD
    assert _error("find two words") == messages.TOO_MANY_KEYWORDS


def test_todo() -> None:
    cmd = parse_command("todo read book", 0)
    assert cmd.kind is CommandKind.TODO
    assert cmd.description == "read book"
    assert _error("todo") == messages.MISSING_DESCRIPTION
    assert _error("todo    ") == messages.MISSING_DESCRIPTION


def test_deadline() -> None:
    cmd = parse_command("deadline submit report /by 2024-12-01 18:00", 0)
    assert cmd.kind is CommandKind.DEADLINE
    assert cmd.description == "submit report"
    assert cmd.by is not None
    assert cmd.by.raw == "2024-12-01 18:00"

    assert parse_command("deadline pay rent /by 2024-12-01", 0).by.raw == "2024-12-01"

    assert _error("deadline") == messages.MISSING_DESCRIPTION
    assert _error("deadline submit report") == messages.BAD_DEADLINE_FORMAT
    assert _error("deadline /by 2024-12-01") == messages.MISSING_DESCRIPTION
    assert _error("deadline submit /by friday") == messages.BAD_DATE
    assert _error("deadline submit /by") == messages.BAD_DATE


def test_event() -> None:
    cmd = parse_command("event team sync /from 2024-09-12 09:00 /to 2024-09-12 10:00", 0)
    assert cmd.kind is CommandKind.EVENT
    assert cmd.description == "team sync"
    assert cmd.start is not None and cmd.start.raw == "2024-09-12 09:00"
    assert cmd.end is not None and cmd.end.raw == "2024-09-12 10:00"

    assert _error("event") == messages.MISSING_DESCRIPTION
    assert _error("event team sync /from 2024-09-12") == messages.BAD_EVENT_FORMAT
    assert _error("event team sync /to 2024-09-12") == messages.BAD_EVENT_FORMAT
    assert _error("event team sync /to 2024-09-12 /from 2024-09-11") == messages.BAD_EVENT_FORMAT
    assert _error("event /from 2024-09-12 /to 2024-09-13") == messages.MISSING_DESCRIPTION
    assert _error("event x /from noon /to 2024-09-13") == messages.BAD_DATE
    assert _error("event x /from 2024-09-12 /to later") == messages.BAD_DATE


def test_pipe_is_rejected_in_free_text() -> None:
    assert _error("todo a | b") == messages.BAD_CHARACTER
    assert _error("deadline a | b /by 2024-12-01") == messages.BAD_CHARACTER


def test_keyword_may_contain_pipe() -> None:
    cmd = parse_command("find a|b", 0)
    assert cmd.kind is CommandKind.FIND
    assert cmd.keyword == "a|b"


def test_command_word_is_case_insensitive() -> None:
    assert parse_command("LIST", 0).kind is CommandKind.LIST
    assert parse_command("Todo Read", 0).description == "Read"
