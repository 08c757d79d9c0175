"""Field type classification.

Each field string is checked against an ordered table of predicates and gets
the type of the first one that matches the *whole* string.  A value embedded
in other text (``"x 1234"``, ``"1234 x"``) matches nothing.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from dateutil import parser as dateparser

from csvdetect.enums import FieldType

_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)\.?"
)
_DAY = r"\d{1,2}(?:st|nd|rd|th)?"
_YEAR = r"(?:\d{4}|\d{2})"
# Optional leading day name: "Wed, ", "Wednesday ", "Thu. "
_WEEKDAY = (
    r"(?:(?:mon|tue(?:s)?|wed(?:nes)?|thu(?:rs)?|fri|sat(?:ur)?|sun)(?:day)?\.?,?\s+)?"
)

# Written date shapes.  dateutil alone is too lenient (it reads "1234" as a
# year), so a field must have one of these shapes before it is parsed.
_DATE_PATTERNS: tuple[re.Pattern[str], ...] = (
    # 01/04/1999, 01.04.1999, 1-4-99
    re.compile(r"\d{1,2}([./-])\d{1,2}\1" + _YEAR),
    # 1999-04-01, 1999/04/01
    re.compile(r"\d{4}([./-])\d{1,2}\1\d{1,2}"),
    # April 1st, 1999 / Apr. 1 1999 / Wed, Oct 4, 2023
    re.compile(_WEEKDAY + _MONTH + r"\s+" + _DAY + r",?\s+" + _YEAR, re.IGNORECASE),
    # 1st of April, 1999 / 1 April 1999 / Sunday 4 July 1976
    re.compile(
        _WEEKDAY + _DAY + r"\s+(?:of\s+)?" + _MONTH + r",?\s+" + _YEAR, re.IGNORECASE
    ),
)

_HOST = r"(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z]{2,63}"
_IPV4_OCTET = r"(?:25[0-5]|2[0-4]\d|1\d\d|[1-9]?\d)"
_IPV4 = r"(?:" + _IPV4_OCTET + r"\.){3}" + _IPV4_OCTET

# localhost and IP hosts only count when a scheme is given
_URL_RE = re.compile(
    r"(?:[a-z][a-z0-9+.-]*://(?:" + _HOST + r"|localhost|" + _IPV4 + r")"
    + r"|" + _HOST + r")"
    + r"(?::\d{1,5})?"  # port
    + r"(?:[/?#]\S*)?",  # path, query, fragment
    re.IGNORECASE,
)

_EMAIL_RE = re.compile(r"[a-z0-9!#$%&'*+/=?^_`{|}~.-]+@" + _HOST, re.IGNORECASE)

_UUID_RE = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)

# C99-style hexadecimal float: 0x1A, -0x1.8p3
_HEX_FLOAT_RE = re.compile(
    r"[+-]?0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?", re.IGNORECASE
)

_NOT_AVAILABLE: frozenset[str] = frozenset({"n/a", "na"})


def is_currency(field: str) -> bool:  # noqa: ARG001
    """Currency detection is not implemented; never matches."""
    return False


def is_date(field: str) -> bool:
    """Return True if *field* is a written calendar date."""
    if not any(p.fullmatch(field) for p in _DATE_PATTERNS):
        return False
    try:
        dateparser.parse(field)
    except (ValueError, OverflowError):
        return False
    return True


def is_empty(field: str) -> bool:
    return field == ""


def is_not_available(field: str) -> bool:
    return field.lower() in _NOT_AVAILABLE


def is_number(field: str) -> bool:
    """Return True if *field* is a floating-point literal, ``NaN`` included.

    Hexadecimal literals with a ``0x`` prefix (``0x1A``, ``0x1p3``) count as
    numbers.  ``float()`` also accepts surrounding whitespace, digit-group
    underscores and non-ASCII digits; those are rejected here.
    """
    if not field.isascii() or field != field.strip() or "_" in field:
        return False
    try:
        float(field)
    except ValueError:
        pass
    else:
        return True
    # float.fromhex also takes bare hex digits ("1A"), so require the prefix
    if _HEX_FLOAT_RE.fullmatch(field) is None:
        return False
    try:
        float.fromhex(field)
    except (ValueError, OverflowError):
        return False
    return True


def is_url(field: str) -> bool:
    """Return True if *field* is a domain, URL or e-mail address."""
    return _URL_RE.fullmatch(field) is not None or _EMAIL_RE.fullmatch(field) is not None


def is_uuid(field: str) -> bool:
    return _UUID_RE.fullmatch(field) is not None


#: Type checks in priority order; the first match wins.
FIELD_TYPE_CHECKS: tuple[tuple[FieldType, Callable[[str], bool]], ...] = (
    (FieldType.CURRENCY, is_currency),
    (FieldType.DATE, is_date),
    (FieldType.EMPTY, is_empty),
    (FieldType.NOT_AVAILABLE, is_not_available),
    (FieldType.NUMBER, is_number),
    (FieldType.URL, is_url),
    (FieldType.UUID, is_uuid),
)


def detect_type(
    field: str,
    checks: tuple[tuple[FieldType, Callable[[str], bool]], ...] = FIELD_TYPE_CHECKS,
) -> FieldType | None:
    """Return the type of *field*, or ``None`` if no check matches.

    :param field: The field's contents.
    :param checks: Ordered ``(type, predicate)`` pairs to evaluate.
    """
    for field_type, check in checks:
        if check(field):
            return field_type
    return None
