"""
Period Utility Module.

This module provides helper functions for working with columns of periods in Polars data.

A column of period strings is converted to a struct column with one Float64 field per unit, and back again.
"""

import polars as pl

from iso_period.enums import PeriodUnit
from iso_period.exceptions import PeriodValidationError
from iso_period.period import Period

PERIOD_STRUCT = pl.Struct({unit.field_name: pl.Float64 for unit in PeriodUnit})


def parse_period_series(series: pl.Series) -> pl.Series:
    """Parse a Series of period strings into a Series of period structs.

    Null values are kept as nulls. Any other value must be a valid period string.

    Args:
        series: A `Polars` String Series of period strings, e.g. ["P1Y", "P2W", None].

    Returns:
        A `Polars` Series of dtype ``PERIOD_STRUCT``, with the same name as the input series.

    Raises:
        PeriodValidationError: If the series is not a String series.
        PeriodFormatError: If any value is not a valid period string.
    """
    if series.dtype not in (pl.String, pl.Null):
        raise PeriodValidationError(f"Period strings must be a String series, not {series.dtype}")

    values = [None if value is None else Period.of(value).to_dict() for value in series.to_list()]
    return pl.Series(series.name, values, dtype=PERIOD_STRUCT)


def format_period_series(series: pl.Series, signed: bool = False) -> pl.Series:
    """Format a Series of period structs into a Series of period strings.

    Null rows are kept as nulls. A null field within a non-null row is treated as zero.

    Args:
        series: A `Polars` Struct Series whose fields are a subset of years, months, weeks and days.
        signed: Write a "-" in front of negative amounts.

    Returns:
        A `Polars` String Series of canonical period strings, with the same name as the input series.

    Raises:
        PeriodValidationError: If the series is not a Struct series, or has fields that are not period units.
    """
    if not isinstance(series.dtype, pl.Struct):
        raise PeriodValidationError(f"Period structs must be a Struct series, not {series.dtype}")

    unknown = sorted({field.name for field in series.dtype.fields} - {unit.field_name for unit in PeriodUnit})
    if unknown:
        raise PeriodValidationError(f"Unknown period fields: {unknown}")

    values = []
    for is_null, row in zip(series.is_null().to_list(), series.to_list()):
        if is_null or row is None:
            values.append(None)
            continue
        fields = {name: value for name, value in row.items() if value is not None}
        values.append(Period.from_dict(fields).format(signed=signed))
    return pl.Series(series.name, values, dtype=pl.String)
