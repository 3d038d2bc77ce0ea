"""
Geolocation Utilities
Distance calculations and distance annotation of venues
"""

import math
from typing import List, Optional

from config import EARTH_RADIUS_MILES
from models import Venue, UserLocation


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate distance between two points using Haversine formula

    Args:
        lat1: Latitude of point 1
        lon1: Longitude of point 1
        lat2: Latitude of point 2
        lon2: Longitude of point 2

    Returns:
        Distance in statute miles (unrounded)
    """
    # Convert to radians
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])

    # Haversine Formula
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat/2)**2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon/2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c


def distance_miles(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in miles, rounded to one decimal place."""
    return round(haversine_distance(lat1, lon1, lat2, lon2), 1)


def distance_from_user(user_location: Optional[UserLocation],
                       latitude: Optional[float],
                       longitude: Optional[float]) -> float:
    """
    Distance from the user to a venue.

    Unknown endpoints give 0 rather than "unknown", so unlocated venues
    sort first by distance and pass any distance cap.
    """
    if user_location is None or latitude is None or longitude is None:
        return 0.0
    return distance_miles(user_location.latitude, user_location.longitude, latitude, longitude)


def annotate_distances(venues: List[Venue], user_location: Optional[UserLocation]) -> List[Venue]:
    """
    Recompute distance_from_me for every venue (e.g. once location arrives).

    Returns:
        New Venue copies; the input list is not modified
    """
    return [
        venue.model_copy(update={
            'distance_from_me': distance_from_user(user_location, venue.latitude, venue.longitude)
        })
        for venue in venues
    ]
