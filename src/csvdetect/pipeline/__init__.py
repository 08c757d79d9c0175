"""Dialect detection stages and shared types."""

from __future__ import annotations

import dataclasses

from csvdetect._utils import ESCAPE_CHARACTER, ROW_DELIMITER, _validate_char
from csvdetect.enums import AbstractionError


@dataclasses.dataclass(frozen=True, slots=True)
class Dialect:
    """Formatting convention of a delimiter-separated text.

    Only the field delimiter varies between candidates; the row delimiter and
    escape character default to line feed and double quote.
    """

    field_delimiter: str
    row_delimiter: str = ROW_DELIMITER
    escape_character: str = ESCAPE_CHARACTER

    def __post_init__(self) -> None:
        _validate_char(self.field_delimiter, "field_delimiter")
        _validate_char(self.row_delimiter, "row_delimiter")
        _validate_char(self.escape_character, "escape_character")
        if len({self.field_delimiter, self.row_delimiter, self.escape_character}) != 3:
            msg = "field delimiter, row delimiter and escape character must differ"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, str]:
        """Convert this dialect to a plain dict."""
        return {
            "field_delimiter": self.field_delimiter,
            "row_delimiter": self.row_delimiter,
            "escape_character": self.escape_character,
        }


#: Returned when no candidate dialect could be scored.
DEFAULT_DIALECT = Dialect(field_delimiter=",")


@dataclasses.dataclass(frozen=True, slots=True)
class DialectScore:
    """Consistency score of one candidate dialect.

    *diagnostics* holds the escaping problems met while interpreting the
    text under *dialect*, in the order they were found.
    """

    dialect: Dialect
    score: float
    diagnostics: tuple[AbstractionError, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Convert this score to a plain dict.

        :returns: A dict with ``'dialect'``, ``'score'`` and ``'diagnostics'`` keys.
        """
        return {
            "dialect": self.dialect.to_dict(),
            "score": self.score,
            "diagnostics": [d.value for d in self.diagnostics],
        }
