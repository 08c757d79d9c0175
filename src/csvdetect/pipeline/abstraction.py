"""Stage 1: Abstraction of raw text under a candidate dialect.

The text is reduced to a sequence of cells and delimiters.  For example, with
``,`` as field delimiter::

    one,two,three
    foo,funny ;),bar

becomes ``CDCDC R CDCDC`` (``C`` cell, ``D`` field delimiter, ``R`` row
delimiter), while ``;`` gives ``C R CDC``.  The correct dialect tends to
produce many identical rows, which is what the pattern score measures.

Every delimiter symbol is surrounded by cells: empty cells are synthesized
wherever two delimiters meet or a delimiter starts the text.
"""

from __future__ import annotations

from csvdetect.enums import Abstraction, AbstractionError
from csvdetect.pipeline import Dialect

_CELL = Abstraction.CELL
_FIELD_DELIMITER = Abstraction.FIELD_DELIMITER
_ROW_DELIMITER = Abstraction.ROW_DELIMITER


def _append_delimiter(abstraction: list[Abstraction], symbol: Abstraction) -> None:
    """Append *symbol*, preceded by an empty cell unless a cell is open."""
    if not abstraction or abstraction[-1] is not _CELL:
        abstraction.append(_CELL)
    abstraction.append(symbol)


def make_abstraction(
    text: str, dialect: Dialect
) -> tuple[list[Abstraction], list[AbstractionError]]:
    """Interpret *text* with *dialect* and return its abstraction.

    Malformed escaping never stops the scan; it is reported in the returned
    error list instead.

    :param text: The complete raw text.
    :param dialect: The dialect used to speculatively interpret *text*.
    :returns: A ``(abstraction, errors)`` tuple.
    """
    abstraction: list[Abstraction] = []
    errors: list[AbstractionError] = []
    escaped = False

    chars = iter(text)
    # Character read ahead while closing an escaped field, handled next.
    pending: str | None = None
    while True:
        if pending is not None:
            char, pending = pending, None
        else:
            char = next(chars, None)
            if char is None:
                break

        if char == dialect.field_delimiter:
            if not escaped:
                _append_delimiter(abstraction, _FIELD_DELIMITER)
        elif char == dialect.row_delimiter:
            if not escaped:
                _append_delimiter(abstraction, _ROW_DELIMITER)
        elif char == dialect.escape_character:
            if not escaped:
                if abstraction and abstraction[-1] is _CELL:
                    # Escape opened after the field content started
                    errors.append(AbstractionError.INVALID_ESCAPE_CHARACTER_POSITION)
                escaped = True
                continue

            # Inside an escaped field: either a doubled escape character or
            # the end of the field.
            following = next(chars, None)
            if following == dialect.escape_character:
                continue
            escaped = False
            if following is None:
                continue
            if following not in (dialect.field_delimiter, dialect.row_delimiter):
                errors.append(AbstractionError.INVALID_ESCAPE_CHARACTER_POSITION)
            pending = following
        elif not abstraction or abstraction[-1] is not _CELL:
            abstraction.append(_CELL)

    if abstraction and abstraction[-1] is _FIELD_DELIMITER:
        abstraction.append(_CELL)

    if escaped:
        errors.append(AbstractionError.UNBALANCED_ESCAPE_CHARACTERS)

    return abstraction, errors


def render_abstraction(abstraction: list[Abstraction]) -> str:
    """Render *abstraction* as a string of symbol codes, e.g. ``"CDCRCDC"``."""
    return "".join(symbol.value for symbol in abstraction)
