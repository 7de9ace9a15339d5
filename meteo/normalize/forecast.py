"""Forecast container and its construction pipeline."""

import logging
from collections.abc import Iterator
from datetime import tzinfo
from typing import Any

from meteo.errors import DayNotFoundError, ForecastBuildError, ShapeError
from meteo.models.forecast import DayRecord, LongRangeView
from meteo.normalize.day_builder import build_day
from meteo.normalize.long_range import build_long_range

logger = logging.getLogger(__name__)


class Forecast:
    """Chronologically ordered day records; index 0 is today."""

    def __init__(self, days: list[DayRecord] | None = None):
        self.days: list[DayRecord] = list(days or [])

    @classmethod
    def from_payload(
        cls, payload: Any, icon_path: str, tz: tzinfo | None = None
    ) -> "Forecast":
        return cls(build_forecast(payload, icon_path, tz))

    def __len__(self) -> int:
        return len(self.days)

    def __iter__(self) -> Iterator[DayRecord]:
        return iter(self.days)

    def __getitem__(self, index: int) -> DayRecord:
        return self.days[index]

    @property
    def today(self) -> DayRecord:
        return self.day(0)

    def day(self, index: int) -> DayRecord:
        """Return the record for day ``index`` (0 = today)."""
        if not 0 <= index < len(self.days):
            raise DayNotFoundError(f"No forecast for day {index}")
        return self.days[index]

    def long_range(self, separator: str = ",") -> LongRangeView:
        return build_long_range(self.days, separator)

    def to_list(self) -> list[dict[str, Any]]:
        return [d.to_dict() for d in self.days]


def build_forecast(
    payload: Any, icon_path: str, tz: tzinfo | None = None
) -> list[DayRecord]:
    """Build every day of a provider payload.

    Each day borrows its bleed-over sample from the day after it. A failure
    on any day aborts the whole build.
    """
    if not isinstance(payload, list):
        raise ShapeError("Forecast payload must be an array of days")

    days: list[DayRecord] = []
    for i in range(len(payload)):
        next_day = payload[i + 1] if i + 1 < len(payload) else None
        try:
            days.append(build_day(payload[i], next_day, icon_path, tz))
        except ForecastBuildError:
            logger.error("Failed to build forecast day %d of %d", i, len(payload))
            raise
    logger.info("Built forecast with %d days", len(days))
    return days
