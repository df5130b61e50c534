"""Exception hierarchy for hospitalfinder."""

from typing import Optional


class HospitalFinderError(Exception):
    """Base exception for all hospitalfinder errors."""


class OverpassError(HospitalFinderError):
    """The Overpass API could not be reached or returned an unusable answer."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class LocationUnavailable(HospitalFinderError):
    """The user's location could not be resolved."""


class ConfigurationError(HospitalFinderError):
    """Settings from the environment failed validation."""
