"""
Core Module - Listing Discovery Components
"""
from .listings import venue_from_row, venues_from_rows
from .discovery import (
    filter_listings,
    sort_listings,
    resolve_criteria,
    discover,
    explore_listings,
)

__all__ = [
    'venue_from_row',
    'venues_from_rows',
    'filter_listings',
    'sort_listings',
    'resolve_criteria',
    'discover',
    'explore_listings',
]
