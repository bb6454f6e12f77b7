# src/nebula/core/errors.py

from __future__ import annotations


class NebulaError(Exception):
    """Base class for errors whose message is safe to show to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class CommandError(NebulaError):
    """A command line failed validation. Nothing was changed."""


class InvalidDateError(NebulaError, ValueError):
    """Text is neither `yyyy-mm-dd HH:mm` nor `yyyy-mm-dd`."""


class TaskIndexError(NebulaError, IndexError):
    """A 1-based task number points outside the list."""
