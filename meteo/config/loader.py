"""YAML config loader."""

from pathlib import Path

import yaml

from meteo.config.schema import MeteoConfig


def load_config(path: str | Path | None = None) -> MeteoConfig:
    """Load and validate config from a YAML file.

    Without a path the defaults are used. An empty file also yields defaults.
    """
    if path is None:
        return MeteoConfig()

    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    return MeteoConfig(**raw)
