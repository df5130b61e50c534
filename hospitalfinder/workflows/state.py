"""State definitions for the hospital locator session."""

from typing import List, Optional

from typing_extensions import TypedDict

from hospitalfinder.tools.hospital_tools import HospitalRecord
from hospitalfinder.tools.location_tools import Coordinates


class FinderState(TypedDict):
    """Transient state a front end renders after every search."""

    query: str
    hospitals: List[HospitalRecord]
    loading: bool
    error: str
    user_location: Optional[Coordinates]
    search_completed: bool
    # sequence number of the most recently started search
    request_seq: int


def get_initial_state() -> FinderState:
    """Get a blank session state."""
    return FinderState(
        query="",
        hospitals=[],
        loading=False,
        error="",
        user_location=None,
        search_completed=False,
        request_seq=0,
    )


def state_to_dict(state: FinderState) -> dict:
    """JSON-friendly copy of *state*."""
    location = state.get("user_location")
    return {
        "query": state.get("query", ""),
        "hospitals": [h.model_dump() for h in state.get("hospitals", [])],
        "loading": state.get("loading", False),
        "error": state.get("error", ""),
        "user_location": {"lat": location.lat, "lon": location.lon} if location else None,
        "search_completed": state.get("search_completed", False),
    }
