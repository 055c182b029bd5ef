"""
Period: an amount of calendar time.

More specifically, a period is a quantity of years, months, weeks
and days, written in the ISO 8601 "PnYnMnWnD" form.  A period is not
an accurate measurement of time; months and years have no fixed
length, so a period is never resolved to a number of seconds.  It is
a way of expressing a duration in human terms, such as "repeat every
2 weeks".

Each of the four amounts is held as a float and may carry a fraction
("P1.5Y") or a sign ("P-1M").

The Period class is the public face of this module. It provides two
operations that map between Period objects and strings:

    def parse( self , text: str ) -> None:

    def format( self ) -> str:

The format() method always writes the amounts in the order years,
months, weeks, days and writes the zero period as "P0D".  The parse()
method accepts the amounts in any order.  Anything from a "T" time
designator onwards is discarded by parse() and is never validated.

Example usage:

    To create a Period object either construct one directly or use
    one of the static methods of the Period class:

       p0d = Period()
       p2w = Period(weeks=2)
       p2w = Period.of_weeks( 2 )
       p2w = Period.of( "P2W" )
       p1y6m = Period.of( "P1Y6M" )
       p18m = Period.of_months( 18 )

    Note that p1y6m and p18m are not equal; periods are never
    canonicalised.

"""

import logging
import math
from collections.abc import Mapping
from dataclasses import (
    asdict,
    dataclass,
    fields,
    replace,
)
from decimal import Decimal
from typing import Any

from iso_period.enums import PeriodUnit
from iso_period.exceptions import (
    InvalidCharacterError,
    InvalidNumberError,
    MissingPrefixError,
    PeriodValidationError,
)

logger = logging.getLogger(__name__)

PERIOD_DESIGNATOR = "P"
TIME_DESIGNATOR = "T"
ZERO_PERIOD = "P0D"

_NUMERAL_CHARS = frozenset("0123456789.")


def _format_magnitude(value: float) -> str:
    """Convert the absolute value of a float to the shortest decimal string
    that reads back as the same float.

    Python's repr() already gives the shortest round-tripping digits, but
    switches to scientific notation for very large and very small values.
    Those are expanded back to plain positional notation here.

    Args:
        value: The float to be converted

    Returns:
        A string such as "1", "1.5" or "0.0000001"
    """
    text = repr(abs(float(value)))
    if "e" in text:
        text = format(Decimal(text), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def _str2float(numeral: str) -> float:
    """Convert the numeral in front of a unit designator to a float

    Args:
        numeral: A string of digits and "." characters

    Returns:
        The float value read from the string

    Raises:
        InvalidNumberError if the string is not a decimal number, or is
        too large to be held as a finite float
    """
    try:
        value = float(numeral)
    except ValueError:
        raise InvalidNumberError(numeral) from None
    if math.isinf(value):
        raise InvalidNumberError(numeral)
    return value


# ------------------------------------------------------------------------------
# Period
# ------------------------------------------------------------------------------
@dataclass
class Period:
    """An amount of time in years, months, weeks and days.

    Period instances are mutable: the fields can be assigned directly, and
    parse() overwrites all four fields in place.  Use copy() where an
    independent value is needed.

    Period instances compare equal when all four fields are equal.  No
    attempt is made to compare periods with different units, so
    Period(weeks=4) != Period(months=1).
    """

    years: float = 0.0
    months: float = 0.0
    weeks: float = 0.0
    days: float = 0.0

    def __post_init__(self) -> None:
        for field in fields(self):
            setattr(self, field.name, float(getattr(self, field.name)))

    @staticmethod
    def of(period_string: str) -> "Period":
        """Return a new Period from an ISO 8601 period string

        Args:
            period_string: A period string such as "P1Y" or "P2W3D"

        Returns:
            A Period object defined by the supplied string

        Raises:
            PeriodFormatError if the string is not a valid period
        """
        period = Period()
        period.parse(period_string)
        return period

    @staticmethod
    def of_years(no_of_years: float) -> "Period":
        """Return a Period of n-years

        Args:
            no_of_years: The number of years in the period

        Returns:
            A Period object
        """
        return Period(years=no_of_years)

    @staticmethod
    def of_months(no_of_months: float) -> "Period":
        """Return a Period of n-months

        Args:
            no_of_months: The number of months in the period

        Returns:
            A Period object
        """
        return Period(months=no_of_months)

    @staticmethod
    def of_weeks(no_of_weeks: float) -> "Period":
        """Return a Period of n-weeks

        Args:
            no_of_weeks: The number of weeks in the period

        Returns:
            A Period object
        """
        return Period(weeks=no_of_weeks)

    @staticmethod
    def of_days(no_of_days: float) -> "Period":
        """Return a Period of n-days

        Args:
            no_of_days: The number of days in the period

        Returns:
            A Period object
        """
        return Period(days=no_of_days)

    @staticmethod
    def from_dict(mapping: Mapping[str, Any]) -> "Period":
        """Return a Period from a mapping of field name to amount

        Missing fields default to zero.

        Args:
            mapping: A mapping such as {"years": 1, "days": 2}

        Returns:
            A Period object

        Raises:
            PeriodValidationError if the mapping contains a key that is
            not a Period field, or an amount that is not a number
        """
        unknown = sorted(set(mapping) - {unit.field_name for unit in PeriodUnit})
        if unknown:
            raise PeriodValidationError(f"Unknown period fields: {unknown}")
        try:
            return Period(**mapping)
        except (TypeError, ValueError) as err:
            raise PeriodValidationError(f"Invalid period amounts: {dict(mapping)}") from err

    @staticmethod
    def from_json(token: str) -> "Period":
        """Return a Period from a quoted JSON string token such as '"P1Y"'

        See iso_period.serialization.unmarshal_json
        """
        from iso_period.serialization import unmarshal_json  # noqa: PLC0415

        return unmarshal_json(token)

    def parse(self, text: str) -> None:
        """Parse an ISO 8601 period string into this Period, in place.

        The string must start with "P" and is followed by any number of
        optionally signed amounts, each closed by one of the unit
        designators "Y", "M", "W" or "D".  Amounts may have a fractional
        part.  A designator that appears more than once overwrites the
        earlier amount, and a designator with no amount in front of it
        is skipped.  Everything from a "T" onwards is discarded.

        All four fields are reset to zero before the string is read.  If
        an error is raised the fields must not be relied upon.

        Args:
            text: The period string

        Raises:
            MissingPrefixError if the string is shorter than two
            characters or does not start with "P"
            InvalidNumberError if an amount is not a decimal number
            InvalidCharacterError if the string contains any other
            character
        """
        if not isinstance(text, str) or len(text) < 2 or text[0] != PERIOD_DESIGNATOR:
            raise MissingPrefixError()

        self.years = 0.0
        self.months = 0.0
        self.weeks = 0.0
        self.days = 0.0

        time_index = text.find(TIME_DESIGNATOR)
        if time_index != -1:
            logger.debug("Discarding time component %r of period %r", text[time_index:], text)
            text = text[:time_index]

        if text == ZERO_PERIOD:
            return

        numeral = ""
        negative = False
        for position, char in enumerate(text[1:], start=1):
            if char == "-":
                negative = True
            elif char == "+":
                negative = False
            elif char in _NUMERAL_CHARS:
                numeral += char
            else:
                unit = PeriodUnit.of_designator(char)
                if unit is None:
                    raise InvalidCharacterError(char, position)
                if not numeral:
                    logger.debug("Skipping designator %r with no amount at position %d of %r", char, position, text)
                    continue

                value = _str2float(numeral)
                setattr(self, unit.field_name, -value if negative else value)

                numeral = ""
                negative = False

    def format(self, signed: bool = False) -> str:
        """Return the ISO 8601 period string of this Period

        Amounts are written in the order years, months, weeks, days and
        zero amounts are left out.  A period where every amount is zero
        is written as "P0D".

        Args:
            signed: Write a "-" in front of negative amounts.  By default
                    the sign is dropped and every amount is written as its
                    absolute value.

        Returns:
            A period string such as "P1Y2M3W4D"
        """
        if self.is_zero():
            return ZERO_PERIOD

        elems = [PERIOD_DESIGNATOR]
        for unit in PeriodUnit:
            value = getattr(self, unit.field_name)
            if value == 0:
                continue
            if signed and value < 0:
                elems.append("-")
            elems.append(_format_magnitude(value))
            elems.append(unit.value)
        return "".join(elems)

    def to_json(self) -> str:
        """Return this Period as a quoted JSON string token such as '"P1Y"'

        See iso_period.serialization.marshal_json
        """
        from iso_period.serialization import marshal_json  # noqa: PLC0415

        return marshal_json(self)

    def to_dict(self) -> dict[str, float]:
        """Return the four fields of this Period keyed by field name"""
        return asdict(self)

    def is_zero(self) -> bool:
        """Whether every amount in this Period is zero"""
        return self.years == 0 and self.months == 0 and self.weeks == 0 and self.days == 0

    def copy(self) -> "Period":
        """Return an independent copy of this Period"""
        return replace(self)

    def __str__(self) -> str:
        return self.format()


def parse_period(period_string: str) -> Period:
    """Return a new Period from an ISO 8601 period string

    Args:
        period_string: A period string such as "P1Y" or "P2W3D"

    Returns:
        A Period object defined by the supplied string
    """
    return Period.of(period_string)


def format_period(period: Period, signed: bool = False) -> str:
    """Return the ISO 8601 period string of a Period

    Args:
        period: The Period to be formatted
        signed: Write a "-" in front of negative amounts

    Returns:
        A period string such as "P1Y2M3W4D"
    """
    return period.format(signed=signed)
