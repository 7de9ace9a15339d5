"""Raw payload to DayRecord / LongRangeView pipeline."""

from meteo.errors import ForecastBuildError
from meteo.normalize.forecast import Forecast, build_forecast
from meteo.normalize.long_range import build_long_range

__all__ = ["Forecast", "ForecastBuildError", "build_forecast", "build_long_range"]
