"""Enumerations for csvdetect."""

import enum


class Abstraction(enum.Enum):
    """Symbol of the abstract representation of delimited text.

    The value is the single-letter code used when rendering an abstraction,
    e.g. ``"CDCDC"`` for one row of three fields.
    """

    CELL = "C"
    FIELD_DELIMITER = "D"
    ROW_DELIMITER = "R"


class AbstractionError(enum.Enum):
    """Non-fatal problem found while building an abstraction."""

    #: An escape character appeared after a field had already started
    #: (``foo,x"bar"``) or was not followed by a delimiter when closing
    #: (``foo,"bar"x``).
    INVALID_ESCAPE_CHARACTER_POSITION = "invalid_escape_character_position"
    #: The last escaped field was never closed (``foo,"bar``).
    UNBALANCED_ESCAPE_CHARACTERS = "unbalanced_escape_characters"


class FieldType(enum.Enum):
    """Coarse semantic type of a single field value."""

    CURRENCY = "currency"
    DATE = "date"
    EMPTY = "empty"
    NOT_AVAILABLE = "not_available"
    NUMBER = "number"
    URL = "url"
    UUID = "uuid"
