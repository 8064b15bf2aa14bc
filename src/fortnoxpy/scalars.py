"""Tolerant decoding of Fortnox scalar values.

Fortnox is inconsistent about JSON types. Depending on the resource and API
version a numeric field can arrive as ``12.5`` or ``"12.5"``, a textual
identifier can arrive as a bare number, and dates are ``YYYY-MM-DD`` strings
that are blank when unset.

The module has two layers:

- raw functions (``decode_numeric``, ``decode_date``, ...) that work on the
  JSON text of a single value;
- annotated pydantic types (``Floatish``, ``Intish``, ``Stringish``, ``Date``)
  that run the raw functions on values coming out of the JSON parser, so the
  resource models can declare plain Python types.
"""

import json
import math
import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, PlainValidator

from fortnoxpy.exceptions import MalformedDateError, MalformedNumberError

DATE_LENGTH = 10

_DATE_PATTERN = re.compile(r"\s*([+-]?\d+)-([+-]?\d+)-([+-]?\d+)")


def _as_text(raw: bytes | str) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    return raw


def _preview(text: str, length: int = 30) -> str:
    return text[:length]


# =============================================================================
# Numbers
# =============================================================================


def decode_numeric(raw: bytes | str, kind: type[int] | type[float] = float) -> int | float:
    """Decode a number that may be wrapped in quotes.

    Args:
        raw: JSON text of the value, e.g. ``b'"3.14"'`` or ``b'3.14'``
        kind: ``float`` or ``int``

    Returns:
        The decoded number. Empty input, an empty quoted string and JSON
        null all decode to zero.

    Raises:
        MalformedNumberError: If the content is not a number of ``kind``
    """
    text = _as_text(raw)
    if not text:
        return kind()

    if text[0] == '"':
        text = text[1:-1]
        if not text:
            return kind()

    try:
        value = json.loads(text)
    except ValueError as e:
        raise MalformedNumberError(f"malformed number: {_preview(text)!r}") from e

    if value is None:
        return kind()
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedNumberError(f"malformed number: {_preview(text)!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise MalformedNumberError(f"non-finite number: {_preview(text)!r}")

    if kind is int:
        if isinstance(value, float):
            raise MalformedNumberError(f"expected an integer: {_preview(text)!r}")
        return value
    try:
        return float(value)
    except OverflowError as e:
        raise MalformedNumberError(f"number out of range: {_preview(text)!r}") from e


def encode_numeric(value: int | float) -> bytes:
    """Encode a number as a bare JSON numeral. Never quoted."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedNumberError(f"not a number: {value!r}")
    try:
        return json.dumps(value, allow_nan=False).encode()
    except ValueError as e:
        raise MalformedNumberError(f"non-finite number: {value!r}") from e


# =============================================================================
# Strings
# =============================================================================


def decode_string_tolerant(raw: bytes | str) -> str:
    """Decode a string that may have been sent as a bare token.

    ``b'"abc"'`` decodes as a normal JSON string, ``b'12345'`` and
    ``b'true'`` are taken verbatim, and ``b'null'`` decodes to ``""``.
    """
    text = _as_text(raw)
    if not text:
        return ""
    if text[0] != '"':
        if text == "null":
            return ""
        return text

    value = json.loads(text)
    if not isinstance(value, str):
        raise ValueError(f"malformed string: {_preview(text)!r}")
    return value


# =============================================================================
# Dates
# =============================================================================


@dataclass(frozen=True)
class FortnoxDate:
    """Calendar date as Fortnox sends it.

    The zero date (any component 0) means "not set" and encodes to null.
    """

    year: int = 0
    month: int = 0
    day: int = 0

    @classmethod
    def from_date(cls, value: date) -> "FortnoxDate":
        if isinstance(value, datetime):
            value = value.date()
        return cls(value.year, value.month, value.day)

    @classmethod
    def parse(cls, text: str) -> "FortnoxDate":
        """Parse ``YYYY-MM-DD``.

        Strings that are not exactly 10 characters long yield the zero date.

        Raises:
            MalformedDateError: If a 10-character string does not scan as
                three hyphen separated integers
        """
        if len(text) != DATE_LENGTH:
            return cls()

        match = _DATE_PATTERN.match(text)
        if match is None:
            raise MalformedDateError(f"malformed date: {text!r}")
        year, month, day = (int(part) for part in match.groups())
        return cls(year, month, day)

    @property
    def is_zero(self) -> bool:
        return self.year == 0 or self.month == 0 or self.day == 0

    def to_date(self) -> date | None:
        """Return a ``datetime.date``, or None for the zero date."""
        if self.is_zero:
            return None
        return date(self.year, self.month, self.day)

    def to_json(self) -> bytes:
        return encode_date(self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def decode_date(raw: bytes | str) -> FortnoxDate:
    """Decode the JSON text of a date value.

    Raises:
        MalformedDateError: If the value is not a JSON string, or is a
            10-character string that is not a date
    """
    text = _as_text(raw)
    if not text:
        return FortnoxDate()

    try:
        value = json.loads(text)
    except ValueError as e:
        raise MalformedDateError(f"malformed date: {_preview(text)!r}") from e

    if value is None:
        return FortnoxDate()
    if not isinstance(value, str):
        raise MalformedDateError(f"expected a date string: {_preview(text)!r}")
    return FortnoxDate.parse(value)


def encode_date(year: int, month: int, day: int) -> bytes:
    """Encode a date. Any zero component gives ``null``."""
    if year == 0 or month == 0 or day == 0:
        return b"null"
    return f'"{year:04d}-{month:02d}-{day:02d}"'.encode()


# =============================================================================
# Pydantic types
# =============================================================================


class RawNumber(str):
    """Source text of a JSON number with a fraction or exponent.

    Lets the validators see ``2.00`` rather than the float ``2.0``.
    """


def loads(content: bytes | str) -> Any:
    """Parse a JSON document, keeping non-integer numbers as RawNumber."""
    return json.loads(content, parse_float=RawNumber)


def _to_raw(value: Any) -> str | None:
    if isinstance(value, RawNumber):
        return str(value)
    try:
        return json.dumps(value)
    except (TypeError, ValueError):
        return None


def _validate_float(value: Any) -> Any:
    raw = _to_raw(value)
    if raw is None:
        raise MalformedNumberError(f"not a number: {value!r}")
    return decode_numeric(raw, float)


def _validate_int(value: Any) -> Any:
    raw = _to_raw(value)
    if raw is None:
        raise MalformedNumberError(f"not an integer: {value!r}")
    return decode_numeric(raw, int)


def _validate_string(value: Any) -> Any:
    if isinstance(value, str):
        return str(value)
    raw = _to_raw(value)
    if raw is None:
        return value
    return decode_string_tolerant(raw)


def _validate_date(value: Any) -> FortnoxDate:
    if isinstance(value, FortnoxDate):
        return value
    if isinstance(value, date):
        return FortnoxDate.from_date(value)
    raw = _to_raw(value)
    if raw is None:
        raise MalformedDateError(f"not a date: {value!r}")
    return decode_date(raw)


def _serialize_date(value: FortnoxDate) -> str | None:
    if value.is_zero:
        return None
    return str(value)


Floatish = Annotated[float, BeforeValidator(_validate_float)]
Intish = Annotated[int, BeforeValidator(_validate_int)]
Stringish = Annotated[str, BeforeValidator(_validate_string)]
Date = Annotated[
    FortnoxDate,
    PlainValidator(_validate_date),
    PlainSerializer(_serialize_date, return_type=str | None),
]
