"""
Discovery Pipeline
Filter and sort gym listings for the Explore screen
"""

from typing import Iterable, List, Optional

import pandas as pd

from config import (
    get_logger,
    LISTING_CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_MAX_DISTANCE_MI,
    NEARBY_QUERY,
    SORT_OPTIONS,
    DEFAULT_SORT,
)
from models import Venue, FilterCriteria, SearchParams, UserLocation
from utils import normalize_search_text, shorten, split_csv
from .listings import venues_from_rows

logger = get_logger(__name__)


def _is_set(value) -> bool:
    """None and NaN both mean "no constraint"."""
    return value is not None and not pd.isna(value)


# ========================================
# FILTER
# ========================================

def filter_listings(venues: Iterable[Venue],
                    search_query: Optional[str] = "",
                    category: Optional[str] = "All",
                    price_min: Optional[float] = None,
                    price_max: Optional[float] = None,
                    max_distance: Optional[float] = None,
                    min_rating: Optional[float] = None,
                    amenities: Optional[List[str]] = None) -> List[Venue]:
    """
    Keep the venues matching every given criterion.

    Text is a case-insensitive substring match on title or location. It has
    no special handling for "nearby"; callers clear the query first (see
    resolve_criteria). Venues without a distance count as 0 miles, so a
    distance cap never drops them.

    Returns:
        New list in input order
    """
    filtered = list(venues)

    query = normalize_search_text(search_query)
    if query:
        filtered = [
            v for v in filtered
            if query in v.title.lower() or query in v.location.lower()
        ]

    if category and category != 'All':
        filtered = [v for v in filtered if (v.category or DEFAULT_CATEGORY) == category]

    if _is_set(price_min):
        filtered = [v for v in filtered if v.price >= price_min]
    if _is_set(price_max):
        filtered = [v for v in filtered if v.price <= price_max]

    if _is_set(max_distance):
        filtered = [v for v in filtered if (v.distance_from_me or 0) <= max_distance]

    if _is_set(min_rating) and min_rating > 0:
        filtered = [v for v in filtered if v.rating >= min_rating]

    if amenities:
        # blank entries are no constraint
        wanted = [a for a in map(normalize_search_text, amenities) if a]
        filtered = [
            v for v in filtered
            if all(
                any(a in label.lower() for label in v.amenities)
                for a in wanted
            )
        ]

    return filtered


# ========================================
# SORT
# ========================================

# sort key -> (key function, descending)
_SORT_KEYS = {
    'distance': (lambda v: v.distance_from_me or 0, False),
    'price-low': (lambda v: v.price, False),
    'price-high': (lambda v: v.price, True),
    'rating': (lambda v: v.rating, True),
}


def sort_listings(venues: Iterable[Venue], sort_by: str = DEFAULT_SORT) -> List[Venue]:
    """
    Sort a shallow copy of venues. Ties keep their input order.

    Unknown sort keys return the copy unsorted.
    """
    listings = list(venues)
    if sort_by not in _SORT_KEYS:
        logger.debug(f"Unknown sort option {sort_by!r}, keeping input order")
        return listings

    key, descending = _SORT_KEYS[sort_by]
    return sorted(listings, key=key, reverse=descending)


# ========================================
# CALLER-SIDE RESOLUTION
# ========================================

def _coerce_number(text: Optional[str]) -> Optional[float]:
    """"12.5" -> 12.5; blank, garbage and NaN -> None."""
    if text is None or not str(text).strip():
        return None
    try:
        number = float(str(text).strip())
    except ValueError:
        return None
    if pd.isna(number):
        return None
    return number


def resolve_criteria(params: SearchParams,
                     user_location: Optional[UserLocation] = None) -> FilterCriteria:
    """
    Turn raw search parameters into filter criteria.

    - "nearby" as the query clears the text filter and sets use_nearby_mode
    - Non-numeric bounds become None
    - With a known user location and no text search, the distance cap
      defaults to DEFAULT_MAX_DISTANCE_MI
    """
    query = (params.q or '').strip()
    use_nearby_mode = query.lower() == NEARBY_QUERY
    if use_nearby_mode:
        query = ''

    category = params.category if params.category in LISTING_CATEGORIES else 'All'

    max_distance = _coerce_number(params.max_distance)
    if max_distance is None and not query and user_location is not None:
        max_distance = DEFAULT_MAX_DISTANCE_MI

    min_rating = _coerce_number(params.min_rating)
    if min_rating is not None and min_rating <= 0:
        min_rating = None

    return FilterCriteria(
        query=query,
        category=category,
        price_min=_coerce_number(params.price_min),
        price_max=_coerce_number(params.price_max),
        max_distance=max_distance,
        min_rating=min_rating,
        amenities=split_csv(params.amenities),
        use_nearby_mode=use_nearby_mode,
    )


def discover(venues: Iterable[Venue],
             criteria: FilterCriteria,
             sort_by: str = DEFAULT_SORT) -> List[Venue]:
    """Filter then sort."""
    filtered = filter_listings(
        venues,
        criteria.query,
        criteria.category,
        criteria.price_min,
        criteria.price_max,
        criteria.max_distance,
        criteria.min_rating,
        criteria.amenities,
    )
    return sort_listings(filtered, sort_by)


def explore_listings(rows, params: SearchParams,
                     user_location: Optional[UserLocation] = None) -> List[Venue]:
    """
    Explore screen end to end: map backend rows, resolve the search
    parameters and return the venues to display.

    Args:
        rows: Raw `listings` rows from the backend
        params: Raw search parameters
        user_location: Device location, None when unavailable

    Returns:
        Filtered and sorted venues
    """
    venues = venues_from_rows(rows, user_location)
    criteria = resolve_criteria(params, user_location)
    sort_by = params.sort_by if params.sort_by in SORT_OPTIONS else DEFAULT_SORT

    results = discover(venues, criteria, sort_by)
    logger.info(
        f"Explore '{shorten(criteria.query)}' (nearby={criteria.use_nearby_mode}, "
        f"sort={sort_by}): {len(results)}/{len(venues)} listings"
    )
    return results
