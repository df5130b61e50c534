from .hospital_tools import HospitalRecord, nearby_search, text_search
from .location_tools import Coordinates, IPLocationProvider, LocationProvider, StaticLocationProvider
from .overpass_tools import OverpassClient

__all__ = [
    "HospitalRecord",
    "nearby_search",
    "text_search",
    "Coordinates",
    "IPLocationProvider",
    "LocationProvider",
    "StaticLocationProvider",
    "OverpassClient",
]
