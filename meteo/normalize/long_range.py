"""Long-range view: all forecast days flattened onto one time axis."""

import copy
import logging
from collections.abc import Iterable
from typing import TypeVar

from meteo.models.forecast import DayRecord, IconSample, LongRangeView, RangedSample

logger = logging.getLogger(__name__)

T = TypeVar("T", RangedSample, IconSample)

# Fold seeds, kept when the forecast has no days.
TEMP_MIN_SEED = 1000
TEMP_MAX_SEED = -1000
RAIN_MAX_SEED = -1000


def build_long_range(days: Iterable[DayRecord], separator: str = ",") -> LongRangeView:
    """Flatten a forecast into a single multi-day view.

    Sunshine, wind and gusts are not part of the view. Samples are
    copies, the source days are left untouched.
    """
    day_list = list(days)
    rainfall = [copy.copy(s) for d in day_list for s in d.rainfall]
    temperature = [copy.copy(s) for d in day_list for s in d.temperature]
    icons = [copy.copy(s) for d in day_list for s in d.icons]

    view = LongRangeView(
        day_labels=separator.join(d.day for d in day_list),
        temp_min=min((d.temp_min for d in day_list), default=TEMP_MIN_SEED),
        temp_max=max((d.temp_max for d in day_list), default=TEMP_MAX_SEED),
        rain_max=max((d.rain_max for d in day_list), default=RAIN_MAX_SEED),
        rainfall=rebase_timestamps(remove_duplicates(rainfall)),
        temperature=rebase_timestamps(remove_duplicates(temperature)),
        icons=rebase_timestamps(thin_icons(icons)),
    )
    logger.debug(
        "Long-range view over %d days: %d rain, %d temp, %d icon samples",
        len(day_list), len(view.rainfall), len(view.temperature), len(view.icons),
    )
    return view


def remove_duplicates(samples: list[T]) -> list[T]:
    """Drop an element when it equals its successor; the last one always stays.

    Only immediate neighbours are compared, so in a run of equal samples the
    last occurrence is the one kept.
    """
    result: list[T] = []
    for i in range(len(samples)):
        if i + 1 < len(samples) and samples[i] == samples[i + 1]:
            continue
        result.append(samples[i])
    return result


def thin_icons(icons: list[IconSample]) -> list[IconSample]:
    """Keep every other icon, starting with the first."""
    return icons[::2]


def rebase_timestamps(samples: list[T]) -> list[T]:
    """Rewrite hour-of-day times as days since the start of the first day.

    A time lower than its predecessor's marks a rollover to the next day.
    Times are rewritten in place on the given samples.
    """
    offset = -24.0
    previous = 10000.0
    for sample in samples:
        if sample.time < previous:
            offset += 24.0
        previous = sample.time
        sample.time = (sample.time + offset) / 24.0
    return samples
