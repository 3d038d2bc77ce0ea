"""
Models Module - Pydantic Schemas
Data validation and type safety
"""
from .schemas import (
    # Listings
    Venue,
    VenueCategory,
    ListingCategory,

    # Search
    FilterCriteria,
    SearchParams,
    SortOption,
    UserLocation,

    # Hours
    PlaceStatus,
    DayHours,
)

__all__ = [
    # Listings
    'Venue',
    'VenueCategory',
    'ListingCategory',

    # Search
    'FilterCriteria',
    'SearchParams',
    'SortOption',
    'UserLocation',

    # Hours
    'PlaceStatus',
    'DayHours',
]
