"""Normalized forecast models consumed by the chart renderer.

Times are fractional hours of the local day. In a LongRangeView they are
rebased onto a continuous axis in day units (0.0 = start of day 0).
"""

from dataclasses import asdict, dataclass, field
from typing import Any


@dataclass
class SampleValue:
    time: float
    value: float


@dataclass
class RangedSample:
    time: float
    value: float
    low: float
    high: float


@dataclass
class WindSample:
    time: float
    strength: float
    direction: str


@dataclass
class IconSample:
    time: float
    icon: str


@dataclass
class DayRecord:
    day: str
    rainfall: list[RangedSample] = field(default_factory=list)
    sunshine: list[SampleValue] = field(default_factory=list)
    temperature: list[RangedSample] = field(default_factory=list)
    icons: list[IconSample] = field(default_factory=list)
    wind: list[WindSample] = field(default_factory=list)
    wind_gust_peak: list[SampleValue] = field(default_factory=list)
    temp_min: int = 0
    temp_max: int = 0
    rain_max: int = 10

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class LongRangeView:
    day_labels: str
    temp_min: int
    temp_max: int
    rain_max: int
    rainfall: list[RangedSample] = field(default_factory=list)
    temperature: list[RangedSample] = field(default_factory=list)
    icons: list[IconSample] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
