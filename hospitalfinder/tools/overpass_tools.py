"""Thin Overpass API client used by the hospital searches.

Queries select ``amenity=hospital`` nodes either around a point or inside a
bounding box and return the raw ``elements`` list of the JSON answer.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import requests
import structlog

from hospitalfinder.config import FinderSettings
from hospitalfinder.exceptions import OverpassError

logger = structlog.get_logger(__name__)


def around_filter(lat: float, lon: float, radius_m: int) -> str:
    return f"around:{radius_m},{lat},{lon}"


def bbox_filter(bbox: Sequence[float]) -> str:
    south, west, north, east = bbox
    return f"{south},{west},{north},{east}"


def build_hospital_query(area_filter: str) -> str:
    """Overpass QL selecting hospital nodes matching *area_filter*."""
    return (
        "[out:json];\n"
        f'node["amenity"="hospital"]({area_filter});\n'
        "out body;\n"
    )


class OverpassClient:
    """Issues one GET per query against the Overpass interpreter endpoint."""

    def __init__(
        self,
        settings: Optional[FinderSettings] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings or FinderSettings()
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.user_agent})

    def fetch_elements(self, query: str) -> List[Dict[str, Any]]:
        """Run *query* and return its ``elements`` (empty when absent).

        Raises OverpassError for network failures, non-2xx statuses and
        bodies that are not the expected JSON object.
        """
        url = self.settings.overpass_url
        logger.info("Overpass query sent", url=url, query_len=len(query))
        try:
            resp = self.session.get(url, params={"data": query}, timeout=self.settings.timeout_s)
        except requests.RequestException as e:
            logger.error("Overpass request failed", error=str(e))
            raise OverpassError(str(e)) from e

        if not resp.ok:
            logger.error("Overpass API error", status_code=resp.status_code)
            raise OverpassError(f"API Error: {resp.status_code}", status_code=resp.status_code)

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Overpass returned invalid JSON", error=str(e))
            raise OverpassError(f"Invalid JSON response: {e}", status_code=resp.status_code) from e

        if not isinstance(data, dict):
            raise OverpassError("Unexpected response shape", status_code=resp.status_code)

        elements = data.get("elements") or []
        if not isinstance(elements, list) or not all(isinstance(el, dict) for el in elements):
            logger.error("Overpass elements have unexpected shape", elements_type=type(elements).__name__)
            raise OverpassError("Unexpected response shape", status_code=resp.status_code)
        logger.info("Overpass response received", count=len(elements))
        return elements

    def hospitals_around(self, lat: float, lon: float, radius_m: int) -> List[Dict[str, Any]]:
        return self.fetch_elements(build_hospital_query(around_filter(lat, lon, radius_m)))

    def hospitals_in_bbox(self, bbox: Sequence[float]) -> List[Dict[str, Any]]:
        return self.fetch_elements(build_hospital_query(bbox_filter(bbox)))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> OverpassClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()
