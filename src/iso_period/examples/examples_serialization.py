from iso_period import Period


def json_documents() -> None:
    # [start_block_1]
    import json

    from iso_period.serialization import PeriodJSONEncoder, period_object_hook

    document = {"name": "backup", "interval": Period(weeks=2)}
    text = json.dumps(document, cls=PeriodJSONEncoder)
    print(text)  # {"name": "backup", "interval": "P2W"}

    loaded = json.loads(text, object_hook=period_object_hook(["interval"]))
    print(repr(loaded["interval"]))
    # [end_block_1]


def json_tokens() -> None:
    # [start_block_2]
    token = Period(years=1, months=2, weeks=3, days=4).to_json()
    print(token)  # "P1Y2M3W4D"
    print(Period.from_json(token))
    # [end_block_2]


def pydantic_models() -> None:
    # [start_block_3]
    from pydantic import BaseModel

    from iso_period.serialization import PydanticPeriod

    class Schedule(BaseModel):
        name: str
        every: PydanticPeriod

    schedule = Schedule(name="report", every="P1M")
    print(schedule.model_dump_json())  # {"name":"report","every":"P1M"}
    # [end_block_3]


def polars_columns() -> None:
    # [start_block_4]
    import polars as pl

    from iso_period.utils import format_period_series, parse_period_series

    periods = parse_period_series(pl.Series("interval", ["P1Y", "P2W3D", None]))
    print(periods.struct.unnest())
    print(format_period_series(periods))
    # [end_block_4]
