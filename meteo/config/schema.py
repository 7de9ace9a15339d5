"""Pydantic v2 configuration schema with strict validation."""

import os
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

DEFAULT_ICON_PATH = "~/.config/meteoschweiz/icons"


class MeteoConfig(BaseModel):
    model_config = {"extra": "forbid"}

    icon_path: str = Field(default=DEFAULT_ICON_PATH, validate_default=True)
    timezone: str | None = None  # None = process local zone
    day_label_separator: str = Field(default=",", min_length=1)

    @field_validator("icon_path")
    @classmethod
    def _expand_icon_path(cls, v: str) -> str:
        return os.path.expanduser(os.path.expandvars(v))

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, v: str | None) -> str | None:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {v}") from e
        return v

    def get_tzinfo(self) -> tzinfo | None:
        return ZoneInfo(self.timezone) if self.timezone else None
