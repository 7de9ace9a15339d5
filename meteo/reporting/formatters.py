"""Output formatters for normalized forecasts."""

import json

from meteo.models.forecast import DayRecord, LongRangeView


def format_day_json(day: DayRecord) -> str:
    """JSON for a single day, keyed the way the chart template expects."""
    return json.dumps({"forecast_day": day.to_dict()}, indent=2)


def format_long_range_json(view: LongRangeView) -> str:
    """JSON for the multi-day view."""
    return json.dumps({"forecast_long": view.to_dict()}, indent=2)


def format_day_text(day: DayRecord) -> str:
    """Plain text summary for logging."""
    lines = [
        f"=== {day.day} ===",
        f"Temperature axis: {day.temp_min} .. {day.temp_max}",
        f"Rain axis max: {day.rain_max}",
        f"Samples: {len(day.temperature)} temp, {len(day.rainfall)} rain, "
        f"{len(day.sunshine)} sun, {len(day.wind)} wind, {len(day.icons)} icons",
    ]
    return "\n".join(lines)
