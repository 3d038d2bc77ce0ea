"""
Amenity Icon Lookup
Maps free-text amenity labels to MaterialIcons names for the listing detail
"""

AMENITY_ICONS = {
    '24/7': 'schedule',
    '24/7 access': 'schedule',
    'pool': 'pool',
    'indoor pool': 'pool',
    'wifi': 'wifi',
    'wi-fi': 'wifi',
    'showers': 'shower',
    'locker rooms': 'lock',
    'locker room': 'lock',
    'parking': 'local-parking',
    'free parking': 'local-parking',
    'weights': 'fitness-center',
    'free weights': 'fitness-center',
    'cardio': 'directions-run',
    'cardio machines': 'directions-run',
    'personal training': 'person',
    'pt': 'person',
    'yoga': 'self-improvement',
    'yoga classes': 'self-improvement',
    'pilates': 'self-improvement',
    'crossfit': 'fitness-center',
    'crossfit classes': 'fitness-center',
    'open gym': 'sports-gymnastics',
    'sauna': 'hot-tub',
    'hot tub': 'hot-tub',
    'towel': 'checkroom',
    'towels': 'checkroom',
    'towels provided': 'checkroom',
    'mats': 'grid-on',
    'mats provided': 'grid-on',
    'café': 'restaurant',
    'cafe': 'restaurant',
    'smoothie': 'local-cafe',
    'smoothie bar': 'local-cafe',
    'retail': 'store',
    'meditation': 'self-improvement',
    'meditation room': 'self-improvement',
    'kids': 'child-care',
    'kids club': 'child-care',
    'outdoor': 'outdoor-grill',
    'outdoor deck': 'outdoor-grill',
    'outdoor turf': 'grass',
    'recovery': 'healing',
    'recovery room': 'healing',
    'spin': 'directions-bike',
    'spin classes': 'directions-bike',
    'hiit': 'timer',
    'chalk': 'brush',
    'equipment rental': 'build',
    'strongman': 'fitness-center',
    'squat racks': 'fitness-center',
    'deadlift': 'fitness-center',
}

DEFAULT_AMENITY_ICON = 'check-circle'


def get_amenity_icon(amenity: str) -> str:
    """
    Icon name for an amenity label.

    Exact (case-insensitive) match first, then a partial match in either
    direction, so "24/7 Access" -> schedule and "Heated indoor pool" -> pool.
    """
    key = (amenity or '').lower().strip()
    if not key:
        return DEFAULT_AMENITY_ICON
    if key in AMENITY_ICONS:
        return AMENITY_ICONS[key]

    # Partial match
    for label, icon in AMENITY_ICONS.items():
        if label in key or key in label:
            return icon
    return DEFAULT_AMENITY_ICON
