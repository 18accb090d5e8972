"""Shared helpers: identifiers, number formatting, key checks and validated prompts."""

from __future__ import annotations

import sys
import uuid
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

T = TypeVar("T")

INVALID_INPUT = "Invalid input. Please try again.\n"


class MissingKeyError(KeyError):
    """Raised when serialized data lacks a required key."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"{self.key} does not exist in JSON"


def require_keys(data: Mapping[str, Any], keys: Iterable[str]) -> None:
    """Raise MissingKeyError for the first of ``keys`` absent from ``data``."""
    for key in keys:
        if key not in data:
            raise MissingKeyError(key)


def generate_uuid_v4() -> str:
    """Return a new random version-4 UUID as a string."""
    return str(uuid.uuid4())


def format_with_commas(value: float | int) -> str:
    """Group digits by thousands; floats get two decimal places."""
    if isinstance(value, int) and not isinstance(value, bool):
        return f"{value:,}"
    return f"{float(value):,.2f}"


def _read_line() -> str:
    line = sys.stdin.readline()
    if not line:
        raise EOFError("end of input")
    return line


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _accept_all(_value: Any) -> bool:
    return True


def prompt_with_validation(
    prompt: str,
    parse: Callable[[str], T],
    checker: Callable[[T], bool] | None = None,
    read: Callable[[], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> T:
    """Ask until a line parses with ``parse`` and satisfies ``checker``."""
    check = checker or _accept_all
    read = read or _read_line
    write = write or _write
    while True:
        write(prompt)
        line = read()
        try:
            value = parse(line.strip())
        except (ValueError, TypeError):
            write(INVALID_INPUT)
            continue
        if check(value):
            return value
        write(INVALID_INPUT)


def prompt_full_line_with_validation(
    prompt: str,
    checker: Callable[[str], bool] | None = None,
    remove_whitespace: bool = True,
    read: Callable[[], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> str:
    """Ask for a whole line until ``checker`` accepts it.

    With ``remove_whitespace`` blank lines are skipped and leading
    whitespace is dropped.
    """
    check = checker or _accept_all
    read = read or _read_line
    write = write or _write
    while True:
        write(prompt)
        line = read()
        if remove_whitespace:
            while not line.strip():
                line = read()
            line = line.lstrip()
        line = line.rstrip("\r\n")
        if check(line):
            return line
        write(INVALID_INPUT)