"""hospitalfinder — find the nearest hospitals from OpenStreetMap data."""

from hospitalfinder.config import FinderSettings
from hospitalfinder.exceptions import (
    ConfigurationError,
    HospitalFinderError,
    LocationUnavailable,
    OverpassError,
)
from hospitalfinder.tools.hospital_tools import HospitalRecord, nearby_search, text_search
from hospitalfinder.utils.geo import distance_km
from hospitalfinder.workflows import FinderState, HospitalLocatorWorkflow

__all__ = [
    "FinderSettings",
    "FinderState",
    "HospitalLocatorWorkflow",
    "HospitalRecord",
    "nearby_search",
    "text_search",
    "distance_km",
    "HospitalFinderError",
    "OverpassError",
    "LocationUnavailable",
    "ConfigurationError",
]
