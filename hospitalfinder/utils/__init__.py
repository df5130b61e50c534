"""
Utils module for hospitalfinder
"""

from .geo import distance_km, google_maps_link, haversine_km, tel_link

__all__ = [
    "distance_km",
    "google_maps_link",
    "haversine_km",
    "tel_link",
]
