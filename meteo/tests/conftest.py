"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

T0 = 1770768000000  # 2026-02-11T00:00:00Z in epoch ms
HOUR_MS = 3_600_000
DAY_MS = 24 * HOUR_MS

ICON_PATH = "/icons"


def make_raw_day(start_ms: int, label: str, temp_shift: float = 0.0) -> dict:
    """Raw provider day with samples every 6h (wind every 3h)."""
    hours = [0, 6, 12, 18]
    rain = [0, 1.5, 2, 0.5]
    temps = [3.0 + temp_shift, 8.5 + temp_shift, 12.2 + temp_shift, 6.4 + temp_shift]
    sun = [0, 30, 45, 0]

    def ts(h: int) -> int:
        return start_ms + h * HOUR_MS

    return {
        "current_time": start_ms,
        "min_date": start_ms,
        "max_date": start_ms + DAY_MS,
        "day_string": label,
        "rainfall": [[ts(h), v] for h, v in zip(hours, rain)],
        "variance_rain": [[ts(h), max(v - 0.5, 0), v + 1] for h, v in zip(hours, rain)],
        "sunshine": [[ts(h), v] for h, v in zip(hours, sun)],
        "temperature": [[ts(h), v] for h, v in zip(hours, temps)],
        "variance_range": [[ts(h), v - 1, v + 1.5] for h, v in zip(hours, temps)],
        "symbols": [
            {"timestamp": ts(h), "weather_symbol_id": sid}
            for h, sid in zip(hours, [101, 2, 3, 104])
        ],
        "wind": {
            "data": [[ts(h), 5 + h] for h in range(0, 24, 3)],
            "symbols": [
                {"timestamp": ts(h), "symbol_id": d}
                for h, d in zip(hours, ["N", "NE", "E", "SE"])
            ],
        },
        "wind_gust_peak": {"data": [[ts(h), 20.5] for h in hours]},
    }


@pytest.fixture
def t0() -> int:
    """Start of the first forecast day (UTC midnight) in epoch ms."""
    return T0


@pytest.fixture
def hour_ts():
    """Epoch ms for a number of hours after ``t0``."""
    def at(hours: float) -> int:
        return T0 + int(hours * HOUR_MS)
    return at


@pytest.fixture
def icon_path() -> str:
    return ICON_PATH


@pytest.fixture
def raw_day_factory():
    """Build raw provider days: ``raw_day_factory(day_index, label, temp_shift)``."""
    def build(day_index: int, label: str, temp_shift: float = 0.0) -> dict:
        return make_raw_day(T0 + day_index * DAY_MS, label, temp_shift)
    return build


@pytest.fixture
def raw_day() -> dict:
    return make_raw_day(T0, "Mi")


@pytest.fixture
def two_day_payload() -> list[dict]:
    return [
        make_raw_day(T0, "Mi"),
        make_raw_day(T0 + DAY_MS, "Do", temp_shift=2.0),
    ]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def payload_path(tmp_path: Path, two_day_payload: list[dict]) -> Path:
    path = tmp_path / "forecast.json"
    path.write_text(json.dumps(two_day_payload))
    return path


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {"icon_path": "/opt/meteo/icons", "timezone": "UTC"}
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
