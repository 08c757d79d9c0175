"""Internal shared constants and validation for csvdetect."""

from __future__ import annotations

from collections.abc import Iterable

#: Candidate field delimiters, in evaluation order.
FIELD_DELIMITERS: tuple[str, ...] = (",", ";", "\t", "|")

#: Row delimiter shared by every candidate dialect.
ROW_DELIMITER: str = "\n"

#: Escape (quote) character shared by every candidate dialect.
ESCAPE_CHARACTER: str = '"'

#: Human-readable names for the default delimiters.
DELIMITER_NAMES: dict[str, str] = {
    ",": "comma",
    ";": "semicolon",
    "\t": "tab",
    "|": "pipe",
}


def _validate_char(value: str, name: str) -> None:
    """Raise ValueError if *value* is not a single-character string."""
    if not isinstance(value, str) or len(value) != 1:
        msg = f"{name} must be a single character, got {value!r}"
        raise ValueError(msg)


def _validate_delimiters(delimiters: Iterable[str]) -> tuple[str, ...]:
    """Return *delimiters* as a tuple, raising ValueError on invalid entries.

    Each candidate must be a single character distinct from the fixed row
    delimiter and escape character.  Duplicates are rejected so that every
    candidate is scored exactly once.
    """
    if isinstance(delimiters, str):
        msg = "delimiters must be a sequence of characters, not a string"
        raise ValueError(msg)
    result = tuple(delimiters)
    for delimiter in result:
        _validate_char(delimiter, "delimiter")
        if delimiter in (ROW_DELIMITER, ESCAPE_CHARACTER):
            msg = f"delimiter {delimiter!r} collides with the row delimiter or escape character"
            raise ValueError(msg)
    if len(set(result)) != len(result):
        msg = "delimiters must not contain duplicates"
        raise ValueError(msg)
    return result


def delimiter_name(delimiter: str) -> str:
    """Return the display name of *delimiter* (the character itself if unnamed)."""
    return DELIMITER_NAMES.get(delimiter, delimiter)
