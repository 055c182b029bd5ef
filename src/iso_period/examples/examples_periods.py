from iso_period import Period


def simple_factory_methods() -> None:
    # [start_block_1]
    from iso_period import Period

    # Create periods using specific methods
    Period()
    Period.of_years(1)
    Period.of_months(3)
    Period.of_weeks(2)
    Period.of_days(1.5)
    Period(years=1, months=6)
    # [end_block_1]


def iso_factory_methods() -> None:
    # [start_block_2]
    # Using ISO 8601 period strings
    Period.of("P1Y")
    Period.of("P3M")
    Period.of("P2W")
    Period.of("P1.5D")
    Period.of("P1Y2M3W4D")
    Period.of("P-1M")

    # The time component is discarded
    Period.of("P1DT12H")
    # [end_block_2]


def formatting() -> None:
    # [start_block_3]
    period = Period(years=1, months=2.5)
    print(period)  # P1Y2.5M
    print(Period())  # P0D

    # Signs are dropped unless asked for
    negative = Period(days=-3)
    print(negative.format())  # P3D
    print(negative.format(signed=True))  # P-3D
    # [end_block_3]


def parse_in_place() -> None:
    # [start_block_4]
    period = Period(years=5)
    period.parse("P2W")
    print(repr(period))  # Period(years=0.0, months=0.0, weeks=2.0, days=0.0)
    # [end_block_4]
