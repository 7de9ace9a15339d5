"""Series aligners: zip raw payload series into typed samples.

Raw series are JSON arrays of tuples whose first slot is an epoch timestamp
in milliseconds. Timestamps must be integer-encoded; the other slots may be
integer or real.
"""

from datetime import tzinfo
from typing import Any

from meteo.errors import AlignmentError, EmptySeriesError, ShapeError
from meteo.models.forecast import IconSample, RangedSample, SampleValue, WindSample
from meteo.models.numeric import cell_from_json, cells_from_json
from meteo.normalize.timestamps import timestamp_to_hour

# Night variants of the weather symbols are offset by 100.
NIGHT_SYMBOL_OFFSET = 100


def require_field(obj: Any, key: str, kind: type | tuple[type, ...]) -> Any:
    """Return ``obj[key]``, raising ShapeError if absent or of the wrong type."""
    if not isinstance(obj, dict) or key not in obj:
        raise ShapeError(f"Missing field '{key}'")
    value = obj[key]
    if not isinstance(value, kind):
        raise ShapeError(f"Field '{key}' has an unexpected type")
    return value


def ranged_sample(value_raw: Any, range_raw: Any, tz: tzinfo | None = None) -> RangedSample:
    """Pair a ``[t, value]`` entry with its ``[t, low, high]`` range."""
    value = cells_from_json(value_raw)
    rng = cells_from_json(range_raw)
    if len(value) != 2:
        raise ShapeError("ForecastValue requires a vector with 2 elements")
    if len(rng) != 3:
        raise ShapeError("ForecastRange requires a vector with 3 elements")
    if value[0] != rng[0]:
        raise AlignmentError("Time of range-value pair does not match")
    return RangedSample(
        time=timestamp_to_hour(value[0].to_integer(), tz),
        value=value[1].to_real(),
        low=rng[1].to_real(),
        high=rng[2].to_real(),
    )


def direct_sample(raw: Any, tz: tzinfo | None = None) -> SampleValue:
    """Convert a ``[t, value]`` entry."""
    cells = cells_from_json(raw)
    if len(cells) != 2:
        raise ShapeError("ForecastValue requires a vector with 2 elements")
    return SampleValue(
        time=timestamp_to_hour(cells[0].to_integer(), tz),
        value=cells[1].to_real(),
    )


def align_ranged(
    values: list[Any], ranges: list[Any], tz: tzinfo | None = None
) -> list[RangedSample]:
    """Positional alignment of a value series with its range series."""
    if len(values) != len(ranges):
        raise ShapeError("Value and range series differ in length")
    return [ranged_sample(v, r, tz) for v, r in zip(values, ranges)]


def align_direct(values: list[Any], tz: tzinfo | None = None) -> list[SampleValue]:
    return [direct_sample(v, tz) for v in values]


def align_wind(
    data: list[Any], symbols: list[Any], tz: tzinfo | None = None
) -> list[WindSample]:
    """Attach to each wind measurement the latest direction symbol at or before it.

    The first symbol must share its timestamp with the first measurement.
    """
    if not symbols:
        raise EmptySeriesError("At least one wind symbol must exist")
    if not data:
        raise EmptySeriesError("No values received for the wind")

    symbol_times = [
        cell_from_json(require_field(s, "timestamp", (int, float))).to_integer()
        for s in symbols
    ]
    symbol_ids = [require_field(s, "symbol_id", str) for s in symbols]

    first = cells_from_json(data[0])
    if len(first) != 2 or first[0].to_integer() != symbol_times[0]:
        raise AlignmentError(
            "The first symbol and the first measurement of wind do not match"
        )

    result: list[WindSample] = []
    current = 0
    for raw in data:
        cells = cells_from_json(raw)
        if len(cells) != 2:
            raise ShapeError("Wind data vector is expected to have length 2")
        timestamp = cells[0].to_integer()
        while current + 1 < len(symbols) and symbol_times[current + 1] <= timestamp:
            current += 1
        result.append(
            WindSample(
                time=timestamp_to_hour(timestamp, tz),
                strength=cells[1].to_real(),
                direction=symbol_ids[current],
            )
        )
    return result


def icon_path_for(symbol_id: int, icon_path: str) -> str:
    """Resolve a weather symbol id to its icon file; night ids share day icons."""
    if symbol_id > NIGHT_SYMBOL_OFFSET:
        symbol_id -= NIGHT_SYMBOL_OFFSET
    return f"{icon_path}/{symbol_id}.pdf"


def build_icon(symbol: Any, icon_path: str, tz: tzinfo | None = None) -> IconSample:
    """Convert a ``{timestamp, weather_symbol_id}`` entry."""
    timestamp = cell_from_json(require_field(symbol, "timestamp", (int, float))).to_integer()
    symbol_id = cell_from_json(
        require_field(symbol, "weather_symbol_id", (int, float))
    ).to_integer()
    return IconSample(
        time=timestamp_to_hour(timestamp, tz),
        icon=icon_path_for(symbol_id, icon_path),
    )
