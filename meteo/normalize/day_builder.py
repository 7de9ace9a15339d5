"""Build one DayRecord from a raw provider day."""

import logging
from datetime import tzinfo
from typing import Any

from meteo.errors import EmptySeriesError
from meteo.models.forecast import DayRecord, RangedSample
from meteo.normalize.aligners import (
    align_direct,
    align_ranged,
    align_wind,
    build_icon,
    direct_sample,
    ranged_sample,
    require_field,
)

logger = logging.getLogger(__name__)

HOURS_PER_DAY = 24.0
MIN_RAIN_AXIS = 10

# Fold seeds for the bound search; an empty series leaves them untouched.
TEMP_MIN_SEED = 1000.0
TEMP_MAX_SEED = -1000.0
RAIN_MAX_SEED = 0.0


def build_day(
    raw_day: Any,
    next_day: Any | None,
    icon_path: str,
    tz: tzinfo | None = None,
) -> DayRecord:
    """Normalize one raw day.

    Args:
        raw_day: The provider's day object.
        next_day: The following raw day, or None for the last day. Its first
            rainfall, sunshine and temperature samples are appended to this
            day, shifted by 24 hours.
        icon_path: Directory holding the weather symbol PDFs.
        tz: Wall clock zone; None uses the process local zone.

    Raises:
        ForecastBuildError: on any malformed or misaligned series.
    """
    wind = require_field(raw_day, "wind", dict)
    gusts = require_field(raw_day, "wind_gust_peak", dict)

    day = DayRecord(
        day=require_field(raw_day, "day_string", str),
        rainfall=align_ranged(
            require_field(raw_day, "rainfall", list),
            require_field(raw_day, "variance_rain", list),
            tz,
        ),
        sunshine=align_direct(require_field(raw_day, "sunshine", list), tz),
        temperature=align_ranged(
            require_field(raw_day, "temperature", list),
            require_field(raw_day, "variance_range", list),
            tz,
        ),
        icons=[
            build_icon(s, icon_path, tz)
            for s in require_field(raw_day, "symbols", list)
        ],
        wind=align_wind(
            require_field(wind, "data", list),
            require_field(wind, "symbols", list),
            tz,
        ),
        wind_gust_peak=align_direct(require_field(gusts, "data", list), tz),
    )

    if next_day is not None:
        _append_bleed_over(day, next_day, tz)

    day.temp_min = round_lower_bound(
        min((s.low for s in day.temperature), default=TEMP_MIN_SEED)
    )
    day.temp_max = round_upper_bound(
        max((s.high for s in day.temperature), default=TEMP_MAX_SEED)
    )
    day.rain_max = rain_axis_max(day.rainfall)

    logger.debug(
        "Built day %s: %d rain, %d temp, %d wind samples, temp %d..%d, rain max %d",
        day.day, len(day.rainfall), len(day.temperature), len(day.wind),
        day.temp_min, day.temp_max, day.rain_max,
    )
    return day


def _append_bleed_over(day: DayRecord, next_day: Any, tz: tzinfo | None) -> None:
    """Preview the start of the following day just past midnight."""
    rain = _first(require_field(next_day, "rainfall", list))
    rain_range = _first(require_field(next_day, "variance_rain", list))
    sun = _first(require_field(next_day, "sunshine", list))
    temp = _first(require_field(next_day, "temperature", list))
    temp_range = _first(require_field(next_day, "variance_range", list))

    day.rainfall.append(ranged_sample(rain, rain_range, tz))
    day.sunshine.append(direct_sample(sun, tz))
    day.temperature.append(ranged_sample(temp, temp_range, tz))

    day.rainfall[-1].time += HOURS_PER_DAY
    day.sunshine[-1].time += HOURS_PER_DAY
    day.temperature[-1].time += HOURS_PER_DAY


def _first(series: list[Any]) -> Any:
    if not series:
        raise EmptySeriesError("Following day has an empty series")
    return series[0]


def round_lower_bound(raw: float) -> int:
    """Axis minimum with at least half a unit of padding below ``raw``."""
    rounded = int(raw)
    if raw - rounded < 0.5:
        rounded -= 1
    return rounded


def round_upper_bound(raw: float) -> int:
    """Axis maximum with at least half a unit of padding above ``raw``."""
    rounded = int(raw + 0.999)
    if rounded - raw < 0.5:
        rounded += 1
    return rounded


def rain_axis_max(rainfall: list[RangedSample]) -> int:
    """Rain axis maximum: a full unit above the highest range, never below 10."""
    raw = max((s.high for s in rainfall), default=RAIN_MAX_SEED)
    # After the +0.999 cast the 1.0 threshold always holds: one extra unit of headroom.
    rounded = int(raw + 0.999)
    if rounded - raw < 1.0:
        rounded += 1
    return max(rounded, MIN_RAIN_AXIS)
