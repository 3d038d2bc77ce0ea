"""
Configuration Settings for Gym Day-Pass Discovery
Constants shared by the hours parser, geo helpers and discovery pipeline
"""

import os
from dotenv import load_dotenv
from pathlib import Path
import pytz
from datetime import datetime, timezone

# ============================================
# LOAD .ENV FROM PROJECT ROOT
# ============================================

# Get project root (parent of config directory)
config_dir = Path(__file__).parent
project_root = config_dir.parent

env_path = project_root / '.env'
load_dotenv(dotenv_path=env_path)


def env_float(name, default):
    """Numeric env var, falling back to default when unset or not a number"""
    try:
        value = float(os.getenv(name, default))
    except (TypeError, ValueError):
        return float(default)
    # NaN
    if value != value:
        return float(default)
    return value


# ============================================
# TIMEZONE CONFIGURATION
# ============================================
DEFAULT_TIMEZONE = pytz.timezone(os.getenv("GYM_TIMEZONE", "America/Los_Angeles"))

def get_local_now():
    """Get current time in the configured venue timezone"""
    utc_now = datetime.now(timezone.utc)
    return utc_now.astimezone(DEFAULT_TIMEZONE)


# ============================================
# OPENING HOURS
# ============================================
# Provider weekday descriptions are joined with this separator
HOURS_SEGMENT_SEPARATOR = " · "

# Reported closing time for 24-hour days (not a real midnight rollover)
ALWAYS_OPEN_CLOSES_AT = "11:59 PM"

DAY_NAMES_LONG = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']
DAY_NAMES_SHORT = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat']


# ============================================
# GEO
# ============================================
EARTH_RADIUS_MILES = 3959

# Radius applied when the user location is known and no text search is active
DEFAULT_MAX_DISTANCE_MI = env_float("DEFAULT_MAX_DISTANCE_MI", 50)


# ============================================
# LISTINGS
# ============================================
LISTING_CATEGORIES = ('All', '24/7', 'CrossFit', 'Yoga', 'Pool', 'Boutique', 'Budget')
VENUE_CATEGORIES = LISTING_CATEGORIES[1:]

DEFAULT_CATEGORY = "Boutique"
DEFAULT_RATING = 5.0
PLACEHOLDER_IMAGE_URL = os.getenv(
    "PLACEHOLDER_IMAGE_URL", "https://picsum.photos/seed/placeholder/400/300"
)

# Search text that means "use geography instead of text"
NEARBY_QUERY = "nearby"

SORT_OPTIONS = ('distance', 'price-low', 'price-high', 'rating')
DEFAULT_SORT = "distance"


# ============================================
# LOGGING
# ============================================
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_FILE = os.getenv("LOG_FILE", "gym_discovery.log")

# Loggers that report "hours unknown" / skipped-criteria degradations at DEBUG
PARSE_LOGGERS = ('utils.hours', 'core.discovery', 'core.listings')
