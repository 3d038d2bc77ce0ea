"""
Configuration Module for Gym Day-Pass Discovery
"""
from .settings import (
    # Timezone
    DEFAULT_TIMEZONE,
    get_local_now,

    # Opening hours
    HOURS_SEGMENT_SEPARATOR,
    ALWAYS_OPEN_CLOSES_AT,
    DAY_NAMES_LONG,
    DAY_NAMES_SHORT,

    # Geo
    EARTH_RADIUS_MILES,
    DEFAULT_MAX_DISTANCE_MI,

    # Listings
    LISTING_CATEGORIES,
    VENUE_CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_RATING,
    PLACEHOLDER_IMAGE_URL,
    NEARBY_QUERY,
    SORT_OPTIONS,
    DEFAULT_SORT,

    # Logging
    LOG_LEVEL,
    LOG_DIR,
    LOG_FILE,
    PARSE_LOGGERS,
    env_float,
)

from .logging_config import (
    setup_logging,
    get_logger,
    setup_console_logging,
    resolve_log_level,
)

__all__ = [
    # Timezone
    'DEFAULT_TIMEZONE',
    'get_local_now',

    # Opening hours
    'HOURS_SEGMENT_SEPARATOR',
    'ALWAYS_OPEN_CLOSES_AT',
    'DAY_NAMES_LONG',
    'DAY_NAMES_SHORT',

    # Geo
    'EARTH_RADIUS_MILES',
    'DEFAULT_MAX_DISTANCE_MI',

    # Listings
    'LISTING_CATEGORIES',
    'VENUE_CATEGORIES',
    'DEFAULT_CATEGORY',
    'DEFAULT_RATING',
    'PLACEHOLDER_IMAGE_URL',
    'NEARBY_QUERY',
    'SORT_OPTIONS',
    'DEFAULT_SORT',

    # Logging
    'setup_logging',
    'get_logger',
    'setup_console_logging',
    'resolve_log_level',
    'LOG_LEVEL',
    'LOG_DIR',
    'LOG_FILE',
    'PARSE_LOGGERS',
    'env_float',
]
