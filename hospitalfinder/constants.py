"""Constants shared across hospitalfinder."""

from typing import Final

OVERPASS_URL: Final[str] = "https://overpass-api.de/api/interpreter"
IPINFO_URL: Final[str] = "https://ipinfo.io/json"
USER_AGENT: Final[str] = "hospitalfinder/0.1"

DEFAULT_RADIUS_M: Final[int] = 10000
MAX_RESULTS: Final[int] = 10
DEFAULT_TIMEOUT_S: Final[float] = 30.0

# south, west, north, east of the Delhi metropolitan area
DELHI_BOUNDING_BOX: Final[tuple[float, float, float, float]] = (
    28.404181,
    76.838394,
    28.883030,
    77.343689,
)

UNKNOWN_NAME: Final[str] = "Unknown Hospital"
UNKNOWN_ADDRESS: Final[str] = "Address not available"
NOT_APPLICABLE: Final[str] = "N/A"

LOCATION_FAILED_MESSAGE: Final[str] = "Unable to retrieve location. Please enter manually."
LOCATION_MISSING_MESSAGE: Final[str] = "Location not available. Please enter manually."
NO_RESULTS_MESSAGE: Final[str] = "No matching hospitals found."
LOADING_MESSAGE: Final[str] = "Loading..."


class SearchMode:
    """Search mode names returned by the dispatcher."""

    NEARBY: Final[str] = "nearby"
    TEXT: Final[str] = "text"
    NONE: Final[str] = "none"
