"""Hospital search helpers: map Overpass elements to records, rank and filter them."""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence

import structlog
from pydantic import BaseModel, ConfigDict

from hospitalfinder.constants import (
    DEFAULT_RADIUS_M,
    DELHI_BOUNDING_BOX,
    MAX_RESULTS,
    NOT_APPLICABLE,
    UNKNOWN_ADDRESS,
    UNKNOWN_NAME,
)
from hospitalfinder.tools.overpass_tools import OverpassClient
from hospitalfinder.utils.geo import distance_km, google_maps_link, is_valid_coordinate

logger = structlog.get_logger(__name__)


class HospitalRecord(BaseModel):
    """A hospital as shown on a result card."""

    model_config = ConfigDict(frozen=True)

    name: str = UNKNOWN_NAME
    address: str = UNKNOWN_ADDRESS
    phone: str = ""
    website: str = ""
    lat: float
    lon: float
    # None means "not applicable" (text-filter mode)
    distance: Optional[float] = None

    @property
    def distance_label(self) -> str:
        return NOT_APPLICABLE if self.distance is None else f"{self.distance}"

    @property
    def map_link(self) -> str:
        return google_maps_link(self.lat, self.lon)


def to_record(element: Dict[str, Any], origin: Optional[Sequence[float]] = None) -> Optional[HospitalRecord]:
    """Map one raw Overpass element to a HospitalRecord.

    Returns None for elements without usable coordinates. When *origin*
    (lat, lon) is given the distance from it is filled in.
    """
    lat, lon = element.get("lat"), element.get("lon")
    if not is_valid_coordinate(lat, lon):
        logger.warning("Dropping element without coordinates", element_id=element.get("id"))
        return None

    tags = element.get("tags")
    if not isinstance(tags, dict):
        tags = {}
    lat, lon = float(lat), float(lon)
    distance = None
    if origin is not None:
        distance = distance_km(origin[0], origin[1], lat, lon)

    return HospitalRecord(
        name=_tag(tags, "name") or UNKNOWN_NAME,
        address=_tag(tags, "addr:full") or _tag(tags, "addr:city") or UNKNOWN_ADDRESS,
        phone=_tag(tags, "phone"),
        website=_tag(tags, "website"),
        lat=lat,
        lon=lon,
        distance=distance,
    )


def _tag(tags: Dict[str, Any], key: str) -> str:
    # OSM tag values are strings; numbers and other scalars are stringified
    value = tags.get(key)
    if value is None or isinstance(value, (dict, list)):
        return ""
    return str(value).strip()


def to_records(elements: Iterable[Dict[str, Any]], origin: Optional[Sequence[float]] = None) -> List[HospitalRecord]:
    records = []
    for element in elements:
        record = to_record(element, origin)
        if record is not None:
            records.append(record)
    return records


def rank_by_distance(records: Iterable[HospitalRecord], limit: int = MAX_RESULTS) -> List[HospitalRecord]:
    """Nearest *limit* records; ties keep source order."""
    return sorted(records, key=lambda r: r.distance)[: min(limit, MAX_RESULTS)]


def filter_by_address(records: Iterable[HospitalRecord], query: str, limit: int = MAX_RESULTS) -> List[HospitalRecord]:
    """Records whose address contains *query* (case-insensitive), in source order."""
    needle = query.strip().casefold()
    matches = [r for r in records if needle in r.address.casefold()]
    return matches[: min(limit, MAX_RESULTS)]


def nearby_search(
    lat: float,
    lon: float,
    radius_m: int = DEFAULT_RADIUS_M,
    *,
    client: OverpassClient,
    limit: int = MAX_RESULTS,
) -> List[HospitalRecord]:
    """Hospitals within *radius_m* metres of (lat, lon), nearest first.

    Raises ValueError for invalid input and OverpassError when the fetch fails.
    """
    if not is_valid_coordinate(lat, lon):
        raise ValueError(f"Invalid coordinates: ({lat}, {lon})")
    if radius_m <= 0:
        raise ValueError(f"Radius must be positive, got {radius_m}")

    elements = client.hospitals_around(lat, lon, radius_m)
    if not elements:
        return []
    records = to_records(elements, origin=(lat, lon))
    return rank_by_distance(records, limit)


def text_search(
    query: str,
    *,
    client: OverpassClient,
    bbox: Sequence[float] = DELHI_BOUNDING_BOX,
    limit: int = MAX_RESULTS,
) -> List[HospitalRecord]:
    """Hospitals inside *bbox* whose address mentions *query*.

    A blank query returns [] without contacting the API.
    """
    if not query or not query.strip():
        return []

    elements = client.hospitals_in_bbox(bbox)
    if not elements:
        return []
    return filter_by_address(to_records(elements), query, limit)
