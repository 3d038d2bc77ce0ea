"""Tests for amenity icon lookup."""
import pytest

from utils.amenities import get_amenity_icon, DEFAULT_AMENITY_ICON


@pytest.mark.parametrize("label,icon", [
    ("Showers", "shower"),
    ("  TOWELS ", "checkroom"),
    ("24/7 Access", "schedule"),
    ("Café", "restaurant"),
])
def test_exact_match(label, icon):
    assert get_amenity_icon(label) == icon


def test_label_containing_known_amenity():
    assert get_amenity_icon("Heated indoor pool") == "pool"


def test_label_contained_in_known_amenity():
    assert get_amenity_icon("smooth") == "local-cafe"


@pytest.mark.parametrize("label", ["Boxing ring", "", None])
def test_unknown_falls_back(label):
    assert get_amenity_icon(label) == DEFAULT_AMENITY_ICON
