"""
Listing Row Mapping
Converts backend `listings` rows into Venue records
"""

from typing import Any, Dict, Iterable, List, Optional

import pandas as pd
from pydantic import ValidationError

from config import (
    get_logger,
    VENUE_CATEGORIES,
    DEFAULT_CATEGORY,
    DEFAULT_RATING,
    PLACEHOLDER_IMAGE_URL,
)
from models import Venue, UserLocation
from utils import distance_from_user

logger = get_logger(__name__)


def _to_float(value) -> Optional[float]:
    """Coerce numeric-ish column values, None for missing or garbage."""
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if pd.isna(number):
        return None
    return number


def venue_from_row(row: Dict[str, Any], user_location: Optional[UserLocation] = None) -> Venue:
    """
    Map a database row to a Venue.

    - Unknown categories (and the 'All' sentinel) become 'Boutique'
    - A missing or zero rating becomes 5
    - Empty galleries get a placeholder image
    - distance_from_me is computed when both ends have coordinates, else 0

    Raises:
        ValidationError: required fields are missing or invalid
    """
    category = row.get('category')
    if category not in VENUE_CATEGORIES:
        category = DEFAULT_CATEGORY

    latitude = _to_float(row.get('latitude'))
    longitude = _to_float(row.get('longitude'))

    image_urls = row.get('image_urls')
    if not isinstance(image_urls, list) or not image_urls:
        image_urls = [PLACEHOLDER_IMAGE_URL]

    amenities = row.get('amenities')
    if not isinstance(amenities, list):
        amenities = []

    raw_id = row.get('id')

    return Venue(
        id=str(raw_id) if raw_id is not None else None,
        title=row.get('title'),
        location=row.get('location'),
        price=row.get('price'),
        rating=_to_float(row.get('rating')) or DEFAULT_RATING,
        review_count=row.get('review_count') or 0,
        image_urls=image_urls,
        description=row.get('description'),
        category=category,
        amenities=amenities,
        distance_from_me=distance_from_user(user_location, latitude, longitude),
        latitude=latitude,
        longitude=longitude,
        hours_of_operation=row.get('hours_of_operation'),
    )


def venues_from_rows(rows: Iterable[Dict[str, Any]],
                     user_location: Optional[UserLocation] = None) -> List[Venue]:
    """
    Map a batch of rows, skipping (and logging) rows that fail validation.
    """
    venues = []
    for row in rows or []:
        try:
            venues.append(venue_from_row(row, user_location))
        except ValidationError as e:
            logger.warning(f"Skipping listing row {row.get('id')!r}: {e.error_count()} validation error(s)")
    return venues
