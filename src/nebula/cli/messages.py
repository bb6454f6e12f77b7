# src/nebula/cli/messages.py

"""User-facing text. Everything printed to stdout that is not task data lives here."""

from __future__ import annotations


def greeting(app_name: str) -> str:
    return f"Hello! I'm {app_name}.\nWhat can I do for you? (type 'help' to see the commands)"


def goodbye() -> str:
    return "Bye. Hope to see you again soon!"


def internal_error() -> str:
    return "Something went wrong while handling that command. Nothing was changed."


# ---- validation failures ----

EMPTY_COMMAND = "Please enter a command!"
UNKNOWN_COMMAND = "Sorry, I don't know what that means. Type 'help' to see the available commands."
NOT_A_NUMBER = "Please give a task number, e.g. 'mark 2'."
TASK_DOES_NOT_EXIST = "That task does not exist! Use 'list' to see the task numbers."
MISSING_KEYWORD = "Please give one keyword to search for, e.g. 'find book'."
TOO_MANY_KEYWORDS = "Please search with exactly one keyword (no spaces)."
MISSING_DESCRIPTION = "The description of a task cannot be empty!"
BAD_DEADLINE_FORMAT = "A deadline needs a due date: deadline <description> /by <date>"
BAD_EVENT_FORMAT = "An event needs a start and an end: event <description> /from <date> /to <date>"
BAD_DATE = "Dates must look like yyyy-mm-dd HH:mm (24-hour clock) or yyyy-mm-dd."
BAD_CHARACTER = "Descriptions cannot contain the '|' character."
