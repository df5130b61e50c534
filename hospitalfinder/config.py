"""Runtime settings for hospitalfinder, read from the environment."""

from __future__ import annotations

import os
from typing import Mapping, Optional, Tuple

from pydantic import BaseModel, Field, ValidationError, field_validator

from hospitalfinder.constants import (
    DEFAULT_RADIUS_M,
    DEFAULT_TIMEOUT_S,
    DELHI_BOUNDING_BOX,
    IPINFO_URL,
    MAX_RESULTS,
    OVERPASS_URL,
    USER_AGENT,
)
from hospitalfinder.exceptions import ConfigurationError

ENV_PREFIX = "HOSPITALFINDER_"
LOG_LEVELS = (0, 10, 20, 30, 40, 50)


class FinderSettings(BaseModel):
    """Settings shared by the Overpass client, location providers and the CLI."""

    overpass_url: str = OVERPASS_URL
    ipinfo_url: str = IPINFO_URL
    user_agent: str = USER_AGENT
    radius_m: int = Field(default=DEFAULT_RADIUS_M, gt=0)
    result_limit: int = Field(default=MAX_RESULTS, gt=0)
    timeout_s: float = Field(default=DEFAULT_TIMEOUT_S, gt=0)
    bbox: Tuple[float, float, float, float] = DELHI_BOUNDING_BOX
    log_level_num: int = 20  # INFO

    @field_validator("result_limit")
    @classmethod
    def _clamp_limit(cls, value: int) -> int:
        return min(value, MAX_RESULTS)

    @field_validator("log_level_num")
    @classmethod
    def _check_log_level(cls, value: int) -> int:
        if value not in LOG_LEVELS:
            raise ValueError(f"log level must be one of {LOG_LEVELS}")
        return value

    @field_validator("bbox", mode="before")
    @classmethod
    def _parse_bbox(cls, value):
        if isinstance(value, str):
            value = tuple(part.strip() for part in value.split(","))
        return value

    @field_validator("bbox")
    @classmethod
    def _check_bbox(cls, value: Tuple[float, float, float, float]):
        south, west, north, east = value
        if not (-90 <= south < north <= 90):
            raise ValueError("bbox latitudes must satisfy -90 <= south < north <= 90")
        if not (-180 <= west < east <= 180):
            raise ValueError("bbox longitudes must satisfy -180 <= west < east <= 180")
        return value

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> FinderSettings:
        """Build settings from ``HOSPITALFINDER_*`` variables.

        Unset variables keep their defaults. Raises ConfigurationError when a
        value fails validation.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = environ.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                values[name] = raw.strip().strip("\"'")
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ConfigurationError(str(exc)) from exc
