"""
Pydantic Models for Gym Discovery
Data validation and schema definitions
"""

from typing import List, Optional, Literal
from pydantic import BaseModel, Field, field_validator

VenueCategory = Literal['24/7', 'CrossFit', 'Yoga', 'Pool', 'Boutique', 'Budget']
ListingCategory = Literal['All', '24/7', 'CrossFit', 'Yoga', 'Pool', 'Boutique', 'Budget']
SortOption = Literal['distance', 'price-low', 'price-high', 'rating']


class Venue(BaseModel):
    """
    Bookable gym listing as seen by the discovery pipeline
    """
    id: str = Field(..., description="Listing ID")
    title: str = Field(..., description="Gym name")
    location: str = Field(..., description="Display location, e.g. 'Brooklyn, NY'")
    price: float = Field(..., ge=0, description="Day pass price")
    rating: float = Field(..., description="Average rating (0-5)")
    review_count: int = Field(0, description="Number of reviews")
    image_urls: List[str] = Field(default_factory=list, description="Gallery images")
    description: Optional[str] = None
    category: Optional[VenueCategory] = Field(None, description="Gym category")
    amenities: List[str] = Field(default_factory=list, description="Free-text amenity labels")

    # Location data
    distance_from_me: Optional[float] = Field(None, description="Distance from user in miles")
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    # e.g. "Monday: 6:00 AM – 9:00 PM · Tuesday: Closed · ..."
    hours_of_operation: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "id": "1",
                "title": "Iron Peak Fitness",
                "location": "San Francisco, CA",
                "price": 15,
                "rating": 4.92,
                "review_count": 128,
                "category": "24/7",
                "amenities": ["24/7 access", "Free weights", "Locker rooms"],
                "distance_from_me": 1.2,
                "latitude": 37.7749,
                "longitude": -122.4194,
                "hours_of_operation": "Monday: Open 24 hours · Tuesday: Open 24 hours"
            }]
        }
    }


class UserLocation(BaseModel):
    """
    Current device coordinates (absent on permission denial)
    """
    latitude: float = Field(..., description="User latitude")
    longitude: float = Field(..., description="User longitude")

    @field_validator('latitude')
    @classmethod
    def validate_latitude(cls, v):
        """Validate latitude is in valid range"""
        if not (-90 <= v <= 90):
            raise ValueError('Latitude must be between -90 and 90')
        return v

    @field_validator('longitude')
    @classmethod
    def validate_longitude(cls, v):
        """Validate longitude is in valid range"""
        if not (-180 <= v <= 180):
            raise ValueError('Longitude must be between -180 and 180')
        return v


class FilterCriteria(BaseModel):
    """
    Explore screen filters. None means "no constraint".
    """
    query: str = Field("", description="Free-text search over title and location")
    category: ListingCategory = Field("All", description="Category filter, 'All' disables it")
    price_min: Optional[float] = None
    price_max: Optional[float] = None
    max_distance: Optional[float] = Field(None, description="Max distance in miles")
    min_rating: Optional[float] = None
    amenities: List[str] = Field(default_factory=list, description="Required amenities")
    use_nearby_mode: bool = Field(False, description="Query was the 'nearby' sentinel")


class SearchParams(BaseModel):
    """
    Raw search parameters as they arrive from the search screen / URL
    """
    q: Optional[str] = None
    category: Optional[str] = None
    price_min: Optional[str] = None
    price_max: Optional[str] = None
    max_distance: Optional[str] = None
    min_rating: Optional[str] = None
    amenities: Optional[str] = Field(None, description="Comma-separated amenity labels")
    sort_by: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "examples": [{
                "q": "brooklyn",
                "price_min": "10",
                "price_max": "30",
                "min_rating": "4.5",
                "amenities": "Showers, Sauna"
            }]
        }
    }


class PlaceStatus(BaseModel):
    """
    Open/closed status for right now plus the next transition time
    """
    is_open: bool
    closes_at: Optional[str] = Field(None, description="Set when open, e.g. '9:00 PM'")
    opens_at: Optional[str] = Field(None, description="Set when closed, e.g. '6:00 AM'")


class DayHours(BaseModel):
    """
    One row of the weekly schedule
    """
    day_name: str
    hours_text: str
