"""Shared fixtures for discovery and hours tests."""
import pytest
from datetime import datetime

from models import Venue, UserLocation


# 2026-10-19 is a Monday
MONDAY = datetime(2026, 10, 19)
TUESDAY = datetime(2026, 10, 20)
SATURDAY = datetime(2026, 10, 24)
SUNDAY = datetime(2026, 10, 25)


def at(day: datetime, hour: int, minute: int = 0) -> datetime:
    """Same date, different wall-clock time."""
    return day.replace(hour=hour, minute=minute)


@pytest.fixture
def weekly_hours():
    """Typical provider hours, Tuesday and Sunday closed."""
    return " · ".join([
        "Monday: 6:00 AM – 9:00 PM",
        "Tuesday: Closed",
        "Wednesday: 5:30 AM – 10:00 PM",
        "Thursday: 6:00 AM – 9:00 PM",
        "Friday: 6:00 AM – 8:00 PM",
        "Saturday: 8:00 AM – 6:00 PM",
        "Sunday: Closed",
    ])


@pytest.fixture
def sf_location():
    """User standing in downtown San Francisco."""
    return UserLocation(latitude=37.7749, longitude=-122.4194)


@pytest.fixture
def venues():
    """Small catalogue with distinct prices and ratings."""
    return [
        Venue(
            id="1", title="Iron Peak Fitness", location="San Francisco, CA",
            price=15, rating=4.92, category="24/7",
            amenities=["24/7 access", "Free weights", "Locker rooms"],
            distance_from_me=1.2,
        ),
        Venue(
            id="2", title="Beach Body CrossFit", location="Miami Beach, FL",
            price=25, rating=4.88, category="CrossFit",
            amenities=["CrossFit classes", "Open gym", "Showers"],
            distance_from_me=3.5,
        ),
        Venue(
            id="3", title="Zen Flow Yoga & Pilates", location="Los Angeles, CA",
            price=20, rating=4.95, category="Yoga",
            amenities=["Yoga classes", "Meditation room", "Mats provided"],
            distance_from_me=0.8,
        ),
        Venue(
            id="4", title="Lake Tahoe Sports Club", location="Lake Tahoe, CA",
            price=35, rating=4.98, category="Pool",
            amenities=["Indoor pool", "Hot tub", "Sauna", "Showers"],
            distance_from_me=12.0,
        ),
        Venue(
            id="5", title="Brooklyn Barbell Club", location="Brooklyn, NY",
            price=12, rating=4.85, category=None,
            amenities=["Squat racks", "Chalk", "Showers"],
            distance_from_me=None,
        ),
    ]


@pytest.fixture
def listing_rows():
    """Rows as returned by the backend `listings` table."""
    return [
        {
            "id": "a1",
            "title": "Mission Strength",
            "location": "San Francisco, CA",
            "price": "18",
            "rating": 4.7,
            "review_count": 40,
            "image_urls": ["https://example.com/a1.jpg"],
            "description": "Powerlifting gym",
            "category": "Budget",
            "amenities": ["Squat racks", "Showers"],
            "latitude": 37.7599,
            "longitude": -122.4148,
            "hours_of_operation": "Monday: 6:00 AM – 9:00 PM",
        },
        {
            "id": "a2",
            "title": "Oakland Aquatic Center",
            "location": "Oakland, CA",
            "price": 22,
            "rating": 0,
            "review_count": None,
            "image_urls": [],
            "description": None,
            "category": "Spa",
            "amenities": None,
            "latitude": None,
            "longitude": None,
            "hours_of_operation": None,
        },
        {
            "id": "a3",
            "title": "LA Muscle House",
            "location": "Los Angeles, CA",
            "price": 30,
            "rating": 4.9,
            "category": "24/7",
            "amenities": ["24/7 access"],
            "latitude": 34.0522,
            "longitude": -118.2437,
        },
    ]
