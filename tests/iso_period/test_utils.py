import unittest

import polars as pl
from parameterized import parameterized
from polars.testing import assert_series_equal

from iso_period import Period
from iso_period.exceptions import InvalidCharacterError, PeriodValidationError
from iso_period.utils import PERIOD_STRUCT, format_period_series, parse_period_series


def _struct_series(name: str, periods: list[Period | None]) -> pl.Series:
    return pl.Series(name, [None if p is None else p.to_dict() for p in periods], dtype=PERIOD_STRUCT)


class TestParsePeriodSeries(unittest.TestCase):
    @parameterized.expand([
        ("simple", ["P1Y", "P2W3D"], [Period(years=1), Period(weeks=2, days=3)]),
        ("with nulls", ["P1M", None, "P0D"], [Period(months=1), None, Period()]),
        ("signs and decimals", ["P-1.5Y", "P+2D"], [Period(years=-1.5), Period(days=2)]),
        ("time discarded", ["P1DT12H"], [Period(days=1)]),
        ("empty", [], []),
    ])
    def test_parse_period_series(self, _, values, expected):
        result = parse_period_series(pl.Series("interval", values, dtype=pl.String))
        assert_series_equal(result, _struct_series("interval", expected))

    def test_all_null_series(self):
        """Test a series with no dtype information is accepted."""
        result = parse_period_series(pl.Series("interval", [None, None]))
        assert_series_equal(result, _struct_series("interval", [None, None]))

    def test_invalid_value(self):
        with self.assertRaises(InvalidCharacterError):
            parse_period_series(pl.Series("interval", ["P1Y", "P1X"]))

    def test_not_string_series(self):
        with self.assertRaises(PeriodValidationError) as err:
            parse_period_series(pl.Series("interval", [1, 2]))
        self.assertEqual("Period strings must be a String series, not Int64", str(err.exception))


class TestFormatPeriodSeries(unittest.TestCase):
    @parameterized.expand([
        ("simple", [Period(years=1), Period(weeks=2, days=3)], ["P1Y", "P2W3D"]),
        ("with nulls", [Period(months=1), None, Period()], ["P1M", None, "P0D"]),
        ("signs dropped", [Period(years=-1.5)], ["P1.5Y"]),
        ("empty", [], []),
    ])
    def test_format_period_series(self, _, periods, expected):
        result = format_period_series(_struct_series("interval", periods))
        assert_series_equal(result, pl.Series("interval", expected, dtype=pl.String))

    def test_signed(self):
        result = format_period_series(_struct_series("interval", [Period(years=-1, days=2)]), signed=True)
        assert_series_equal(result, pl.Series("interval", ["P-1Y2D"], dtype=pl.String))

    def test_partial_struct(self):
        """Test a struct with only some of the period fields, and null fields within a row."""
        series = pl.Series(
            "interval",
            [{"weeks": 2.0, "days": None}, {"weeks": None, "days": 1.0}],
            dtype=pl.Struct({"weeks": pl.Float64, "days": pl.Float64}),
        )
        result = format_period_series(series)
        assert_series_equal(result, pl.Series("interval", ["P2W", "P1D"], dtype=pl.String))

    def test_row_of_null_fields_is_zero(self):
        """Test a non-null row whose fields are all null is formatted as the zero period, not a null."""
        series = pl.Series(
            "interval",
            [{"weeks": None, "days": None}, None],
            dtype=pl.Struct({"weeks": pl.Float64, "days": pl.Float64}),
        )
        self.assertEqual(1, series.null_count())
        result = format_period_series(series)
        assert_series_equal(result, pl.Series("interval", ["P0D", None], dtype=pl.String))

    def test_unknown_struct_fields(self):
        series = pl.Series("interval", [{"hours": 1.0}], dtype=pl.Struct({"hours": pl.Float64}))
        with self.assertRaises(PeriodValidationError) as err:
            format_period_series(series)
        self.assertEqual("Unknown period fields: ['hours']", str(err.exception))

    def test_not_struct_series(self):
        with self.assertRaises(PeriodValidationError):
            format_period_series(pl.Series("interval", ["P1Y"]))

    def test_round_trip(self):
        strings = pl.Series("interval", ["P1Y2M3W4D", None, "P0.5D", "P0D"], dtype=pl.String)
        assert_series_equal(format_period_series(parse_period_series(strings)), strings)
