"""Location providers: where the user's starting coordinates come from."""
from __future__ import annotations

from typing import NamedTuple, Optional, Protocol

import requests
import structlog

from hospitalfinder.config import FinderSettings
from hospitalfinder.exceptions import LocationUnavailable
from hospitalfinder.utils.geo import is_valid_coordinate

logger = structlog.get_logger(__name__)


class Coordinates(NamedTuple):
    lat: float
    lon: float


class LocationProvider(Protocol):
    def resolve(self) -> Coordinates:
        """Return the current position or raise LocationUnavailable."""
        ...


class StaticLocationProvider:
    """Fixed coordinates, e.g. from ``--lat/--lon``."""

    def __init__(self, lat: float, lon: float) -> None:
        if not is_valid_coordinate(lat, lon):
            raise ValueError(f"Invalid coordinates: ({lat}, {lon})")
        self.coords = Coordinates(float(lat), float(lon))

    def resolve(self) -> Coordinates:
        return self.coords


class UnavailableLocationProvider:
    """Stands in when no location source was configured."""

    def resolve(self) -> Coordinates:
        raise LocationUnavailable("No location source configured")


class IPLocationProvider:
    """Approximate position from the public IP via ipinfo.io (``loc`` = "lat,lon")."""

    def __init__(
        self,
        settings: Optional[FinderSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings or FinderSettings()
        self.session = session or requests.Session()

    def resolve(self) -> Coordinates:
        try:
            resp = self.session.get(
                self.settings.ipinfo_url,
                headers={"User-Agent": self.settings.user_agent},
                timeout=self.settings.timeout_s,
            )
            resp.raise_for_status()
            data = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.warning("IP location lookup failed", error=str(e))
            raise LocationUnavailable(f"IP location lookup failed: {e}") from e

        loc = data.get("loc") if isinstance(data, dict) else None
        try:
            lat, lon = (float(part) for part in loc.split(","))
        except (AttributeError, ValueError) as e:
            raise LocationUnavailable(f"Unexpected location payload: {loc!r}") from e

        if not is_valid_coordinate(lat, lon):
            raise LocationUnavailable(f"Out of range location: ({lat}, {lon})")
        logger.info("Location resolved from IP", lat=lat, lon=lon)
        return Coordinates(lat, lon)
