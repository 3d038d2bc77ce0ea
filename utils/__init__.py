"""
Utilities Module - Helper Functions
"""
from .text import (
    shorten,
    normalize_search_text,
    split_csv,
)

from .geo import (
    haversine_distance,
    distance_miles,
    distance_from_user,
    annotate_distances,
)

from .hours import (
    parse_time_to_minutes,
    format_minutes_12h,
    split_segments,
    find_day_segment,
    segment_body,
    get_place_status,
    is_place_open_now,
    format_status_line,
    iter_hours_by_day,
    get_hours_by_day_starting_today,
    join_weekday_descriptions,
)

from .amenities import get_amenity_icon

__all__ = [
    # Text utilities
    'shorten',
    'normalize_search_text',
    'split_csv',

    # Geo utilities
    'haversine_distance',
    'distance_miles',
    'distance_from_user',
    'annotate_distances',

    # Hours utilities
    'parse_time_to_minutes',
    'format_minutes_12h',
    'split_segments',
    'find_day_segment',
    'segment_body',
    'get_place_status',
    'is_place_open_now',
    'format_status_line',
    'iter_hours_by_day',
    'get_hours_by_day_starting_today',
    'join_weekday_descriptions',

    # Amenities
    'get_amenity_icon',
]
