"""
Period Serialization Module.

This module provides the hooks for embedding Period values in structured documents. A Period is always written
as a single string holding its canonical ISO 8601 form, e.g. ``{"interval": "P2W"}``.

Three integrations are provided:

- ``marshal_json`` / ``unmarshal_json`` convert between a Period and a raw JSON string token.
- ``PeriodJSONEncoder`` and ``period_object_hook`` plug into the standard library ``json.dumps`` / ``json.loads``.
- ``PydanticPeriod`` is an annotated type for use as a field in pydantic models.
"""

import json
from collections.abc import Callable, Iterable
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from iso_period.exceptions import InvalidCharacterError, InvalidQuotedLengthError
from iso_period.period import Period


def marshal_json(period: Period) -> str:
    """Return the canonical string of a Period as a quoted JSON string token.

    Args:
        period: The Period to serialize.

    Returns:
        A JSON string token, e.g. '"P1Y2M3W4D"'.
    """
    return json.dumps(period.format())


def unmarshal_json(token: str | bytes, period: Period | None = None) -> Period:
    """Parse a quoted JSON string token into a Period.

    Exactly one character is stripped from each end of the token and the remainder is parsed. Escape sequences
    are not processed; valid period strings never contain characters that need escaping.

    Args:
        token: A JSON string token, e.g. '"P1Y"'.
        period: An existing Period to parse into, in place. A new Period is created if not given.

    Returns:
        The populated Period.

    Raises:
        InvalidQuotedLengthError: If the token is not a string, or is shorter than two characters.
        InvalidCharacterError: If a bytes token is not valid UTF-8.
        PeriodFormatError: If the unquoted content is not a valid period string.
    """
    if isinstance(token, bytes):
        try:
            token = token.decode("utf-8")
        except UnicodeDecodeError as err:
            raise InvalidCharacterError(f"\\x{token[err.start]:02x}", err.start) from err
    if not isinstance(token, str):
        raise InvalidQuotedLengthError(f"invalid JSON string token: {type(token).__name__}")
    if len(token) < 2:
        raise InvalidQuotedLengthError()

    if period is None:
        period = Period()
    period.parse(token[1:-1])
    return period


class PeriodJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes Period values as their canonical period string.

    Usage: ``json.dumps({"interval": Period(weeks=2)}, cls=PeriodJSONEncoder)``
    """

    def default(self, o: Any) -> Any:
        if isinstance(o, Period):
            return o.format()
        return super().default(o)


def period_object_hook(keys: Iterable[str]) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Build a ``json.loads`` object hook that parses the values of the given keys into Period objects.

    Args:
        keys: The names of the object members that hold period strings.

    Returns:
        An object hook for ``json.loads(..., object_hook=...)``.
    """
    period_keys = frozenset(keys)

    def hook(obj: dict[str, Any]) -> dict[str, Any]:
        for key in period_keys.intersection(obj):
            if isinstance(obj[key], str):
                obj[key] = Period.of(obj[key])
        return obj

    return hook


def _validate_period(value: Any) -> Period:
    """Accept an existing Period (copied) or a period string (parsed).

    Args:
        value: The raw field value.

    Returns:
        A Period owned by the model.
    """
    if isinstance(value, Period):
        return value.copy()
    if isinstance(value, str):
        return Period.of(value)
    raise ValueError(f"Expected a Period or a period string, got {type(value).__name__}")


def _serialize_period(period: Period) -> str:
    return period.format()


PydanticPeriod = Annotated[
    Period,
    PlainValidator(_validate_period),
    PlainSerializer(_serialize_period, return_type=str),
    WithJsonSchema({"type": "string", "examples": ["P1Y2M3W4D"]}),
]
