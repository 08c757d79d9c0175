"""Header row detection from per-field types."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from csvdetect.enums import FieldType
from csvdetect.fieldtypes import detect_type

TypeRow = Sequence[FieldType | None]


def classify_rows(rows: Iterable[Sequence[str]]) -> list[list[FieldType | None]]:
    """Classify every field of a tokenized grid with :func:`detect_type`."""
    return [[detect_type(field) for field in row] for row in rows]


def is_header_present(rows: Iterable[TypeRow]) -> bool | None:
    """Decide whether the first row of a type matrix is a header.

    A header row is expected to hold text only (no detected types) while the
    data rows below it share one type pattern.

    :param rows: One sequence of field types (``None`` = undetected) per row.
    :returns: ``True`` if there is a header row, ``False`` if there is none,
        ``None`` if the types give no evidence either way.
    """
    matrix = [list(row) for row in rows]
    if not matrix:
        return False

    first, rest = matrix[0], matrix[1:]
    if any(t is not None for t in first):
        # A typed value in the first row means it is data
        return False

    if all(t is None for row in rest for t in row):
        return None

    # rest is non-empty here: it holds at least one detected type
    if any(t is not None for t in rest[0]) and all(row == rest[0] for row in rest):
        return True

    return None
