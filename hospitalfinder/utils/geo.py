import math
from urllib.parse import quote

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two points given in degrees."""
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = (
        math.sin(dphi / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(dlambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Haversine distance rounded to one decimal place."""
    return round(haversine_km(lat1, lon1, lat2, lon2), 1)


def is_valid_coordinate(lat, lon) -> bool:
    if lat is None or lon is None:
        return False
    try:
        lat, lon = float(lat), float(lon)
    except (TypeError, ValueError):
        return False
    return -90.0 <= lat <= 90.0 and -180.0 <= lon <= 180.0


def google_maps_link(lat: float, lon: float) -> str:
    """Generate a Google Maps link that drops a pin on the given coordinates."""
    return f"https://www.google.com/maps?q={lat},{lon}"


def tel_link(phone: str) -> str:
    """Dial link for a phone number; spaces are kept but percent-encoded."""
    return f"tel:{quote(phone.strip(), safe='+-()')}"
