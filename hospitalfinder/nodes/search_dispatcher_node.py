"""Picks which search a user action runs."""

from typing import Optional

from hospitalfinder.constants import SearchMode
from hospitalfinder.tools.location_tools import Coordinates


def detect_search_mode(query: Optional[str], user_location: Optional[Coordinates]) -> str:
    """Text search when the box has text, nearby search when a location is known, else none."""
    if query and query.strip():
        return SearchMode.TEXT
    if user_location is not None:
        return SearchMode.NEARBY
    return SearchMode.NONE
